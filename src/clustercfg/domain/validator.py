"""Domain rules for a parsed ClusterMap."""

from __future__ import annotations

from clustercfg.domain.errors import InvalidGroup
from clustercfg.domain.models import GROUP_MAX, GROUP_MIN, ClusterMap


def validate(record: ClusterMap) -> ClusterMap:
    """Return *record* unchanged if its group is in range.

    Raises:
        InvalidGroup: ``record.group`` is outside ``GROUP_MIN..GROUP_MAX``.
    """
    if not GROUP_MIN <= record.group <= GROUP_MAX:
        raise InvalidGroup(record.group)
    return record
