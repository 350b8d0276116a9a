"""Config file reads.

Parsing lives in :mod:`clustercfg.domain.parser`. This module only turns a
path into text, or into an :class:`IoFailure` that names the path.
"""

from __future__ import annotations

import logging
from pathlib import Path

from clustercfg.domain.errors import IoFailure

logger = logging.getLogger(__name__)


def load(path: str | Path) -> str:
    """Read the whole file at *path* as UTF-8.

    No retries: a missing file stays missing until the caller asks again.

    Raises:
        IoFailure: The file is missing, unreadable, a directory, or not UTF-8.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IoFailure(path, exc) from exc
    logger.debug("Read %d chars from %s", len(text), path)
    return text
