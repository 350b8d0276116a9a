"""Error taxonomy for the cluster config pipeline.

Every failure the pipeline can produce is one of a closed set of classes
under :class:`PipelineError`. Callers branch on the concrete class
(``except InvalidGroup``, ``case IoFailure(path=p)``) and still get a
uniform message from ``str(err)`` and a structured payload from
:meth:`PipelineError.detail`.

INVARIANT: The original low-level exception is kept on ``cause`` and
chained as ``__cause__``. No stage flattens it into text only.
"""

from __future__ import annotations

from enum import StrEnum
from pathlib import Path
from typing import Any, ClassVar

from pydantic import ValidationError

from clustercfg.domain.models import GROUP_MAX, GROUP_MIN


class ErrorKind(StrEnum):
    """Which pipeline stage a failure came from."""

    IO = "io"
    PARSE = "parse"
    CONFIG = "config"


class PipelineError(Exception):
    """Base for every failure raised by load, parse, or validate."""

    kind: ClassVar[ErrorKind]
    code: ClassVar[str]

    def detail(self) -> dict[str, Any]:
        """JSON-safe diagnostic payload for structured output."""
        return {}


class IoFailure(PipelineError):
    """The config file could not be read."""

    kind = ErrorKind.IO
    code = "IO_FAILURE"
    __match_args__ = ("path", "cause")

    def __init__(self, path: str | Path, cause: OSError | UnicodeDecodeError) -> None:
        self.path = str(path)
        self.cause = cause
        super().__init__(f"failed to read config file: {self.path}")

    def detail(self) -> dict[str, Any]:
        return {"path": self.path, "cause": str(self.cause)}


class ParseFailure(PipelineError):
    """The text is not a well-formed cluster record.

    Attributes:
        errors: ``(location, message)`` pairs, one per decode problem.
            Location is a dotted field path, or ``"<root>"`` when the
            document itself is malformed.
        cause: The underlying decoder exception, if any.
    """

    kind = ErrorKind.PARSE
    code = "PARSE_FAILURE"
    __match_args__ = ("errors", "cause")

    def __init__(
        self,
        errors: list[tuple[str, str]],
        cause: Exception | None = None,
    ) -> None:
        self.errors = errors
        self.cause = cause
        summary = "; ".join(f"{loc}: {msg}" for loc, msg in errors)
        super().__init__(f"invalid cluster config: {summary}")

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> ParseFailure:
        """Build from a pydantic error, keeping one entry per problem."""
        errors = [
            (".".join(str(part) for part in err["loc"]) or "<root>", err["msg"])
            for err in exc.errors()
        ]
        return cls(errors, cause=exc)

    def detail(self) -> dict[str, Any]:
        return {"errors": [{"loc": loc, "msg": msg} for loc, msg in self.errors]}


class ConfigError(PipelineError):
    """A syntactically valid record broke a domain rule."""

    kind = ErrorKind.CONFIG
    code = "CONFIG_ERROR"


class InvalidGroup(ConfigError):
    """``group`` is outside the inclusive ``GROUP_MIN..GROUP_MAX`` range."""

    code = "INVALID_GROUP"
    __match_args__ = ("value",)

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(
            f"invalid group {value}: must be between {GROUP_MIN} and {GROUP_MAX}"
        )

    def detail(self) -> dict[str, Any]:
        return {"value": self.value, "min": GROUP_MIN, "max": GROUP_MAX}
