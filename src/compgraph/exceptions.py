from __future__ import annotations


class CompGraphError(Exception):
    pass


class ConfigError(CompGraphError, ValueError):
    """Invalid graph construction options."""
    pass


class InvalidOperation(CompGraphError, RuntimeError):
    """Operation not supported by this graph's configuration."""
    pass


class CycleError(CompGraphError, ValueError):
    """
    Raised by set_parent when the requested parent is the node itself or one
    of its descendants.
    """

    def __init__(self, v: str, parent: str) -> None:
        super().__init__(f"Setting {parent!r} as parent of {v!r} would create a cycle")
        self.v = v
        self.parent = parent


class UnsupportedNamedEdge(CompGraphError, ValueError):
    """A named edge was requested on a graph with multigraph=False."""
    pass
