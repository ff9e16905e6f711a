try:
    from ._version import version as __version__  # populated by setuptools-scm
except ModuleNotFoundError:
    __version__ = "0.0.0"

from .config import GraphOptions
from .exceptions import (
    CompGraphError,
    ConfigError,
    CycleError,
    InvalidOperation,
    UnsupportedNamedEdge,
)
from .graph import Edge, Graph, GraphView

__all__ = [
    "__version__",
    "Graph",
    "GraphView",
    "GraphOptions",
    "Edge",
    "CompGraphError",
    "ConfigError",
    "CycleError",
    "InvalidOperation",
    "UnsupportedNamedEdge",
]
