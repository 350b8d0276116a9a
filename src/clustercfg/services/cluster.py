"""ClusterService — read, parse, and validate ``cluster.json``.

Pipeline: LOAD → PARSE → VALIDATE → RESPOND

:func:`get_cluster_info` is the raising form: the first failing stage's
exception propagates untouched. :class:`ClusterService` wraps it into a
:class:`ServiceResult` for the CLI.
"""

from __future__ import annotations

import logging
from pathlib import Path

from clustercfg.domain.errors import PipelineError
from clustercfg.domain.models import DEFAULT_CONFIG_PATH, ClusterMap
from clustercfg.domain.parser import parse
from clustercfg.domain.validator import validate
from clustercfg.infrastructure.filesystem import load
from clustercfg.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def get_cluster_info(path: str | Path = DEFAULT_CONFIG_PATH) -> ClusterMap:
    """Load *path* and return its validated record.

    Raises:
        IoFailure: The file could not be read.
        ParseFailure: The content is not a cluster record.
        InvalidGroup: The record's group is out of range.
    """
    logger.debug("Loading cluster config from %s", path)
    text = load(path)
    record = parse(text)
    return validate(record)


class ClusterService:
    """Exposes the cluster config pipeline as ServiceResult operations."""

    def info(self, path: str | Path = DEFAULT_CONFIG_PATH) -> ServiceResult:
        """Run the pipeline on *path*.

        Only :class:`PipelineError` is converted to an error result;
        anything else is a bug and propagates.
        """
        op = "cluster_info"
        try:
            record = get_cluster_info(path)
        except PipelineError as err:
            logger.info("Cluster config rejected (%s): %s", err.code, err)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code=err.code,
                    message=str(err),
                    detail={"kind": str(err.kind), **err.detail()},
                ),
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={"path": str(path), **record.model_dump()},
        )
