"""Pydantic model for the cluster config record."""

from __future__ import annotations

from pydantic import BaseModel, Field

# Inclusive bounds for ClusterMap.group, enforced by validate().
GROUP_MIN = 0
GROUP_MAX = 100

# Read when no path is given.
DEFAULT_CONFIG_PATH = "cluster.json"


class ClusterMap(BaseModel):
    """Contents of ``cluster.json``.

    Both fields are strict: ``"10"`` or ``10.5`` is not a group.
    Unknown keys are ignored. Range checking is not done here; a freshly
    parsed record may hold any integer until
    :func:`clustercfg.domain.validator.validate` accepts it.
    """

    model_config = {"frozen": True, "extra": "ignore"}

    name: str = Field(strict=True)
    group: int = Field(strict=True)
