"""clustercfg — load and validate a cluster config file."""

from clustercfg.domain.errors import (
    ConfigError,
    ErrorKind,
    InvalidGroup,
    IoFailure,
    ParseFailure,
    PipelineError,
)
from clustercfg.domain.models import ClusterMap
from clustercfg.services.cluster import get_cluster_info

__version__ = "0.1.0"

__all__ = [
    "ClusterMap",
    "ConfigError",
    "ErrorKind",
    "InvalidGroup",
    "IoFailure",
    "ParseFailure",
    "PipelineError",
    "__version__",
    "get_cluster_info",
]
