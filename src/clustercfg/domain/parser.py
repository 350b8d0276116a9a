"""JSON text -> ClusterMap, syntax only."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from clustercfg.domain.errors import ParseFailure
from clustercfg.domain.models import ClusterMap

logger = logging.getLogger(__name__)


def parse(text: str) -> ClusterMap:
    """Deserialize *text* into a :class:`ClusterMap`.

    Raises:
        ParseFailure: Malformed JSON, a non-object document, a missing
            field, or a field of the wrong type.
    """
    try:
        record = ClusterMap.model_validate_json(text)
    except ValidationError as exc:
        raise ParseFailure.from_validation_error(exc) from exc
    logger.debug("Parsed cluster record name=%s group=%d", record.name, record.group)
    return record
