# src/compgraph/config.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError

from .exceptions import ConfigError


class GraphOptions(BaseModel):
    """
    Construction options of a Graph. Fixed for the lifetime of the graph.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    directed: StrictBool = Field(True, description="Edges have a distinguished source and target.")
    multigraph: StrictBool = Field(False, description="Allow parallel edges distinguished by a name.")
    compound: StrictBool = Field(False, description="Nodes form a parent/children forest.")


def make_options(**kwargs: Any) -> GraphOptions:
    """
    Validate keyword options into a GraphOptions, raising ConfigError on failure.
    """
    try:
        return GraphOptions(**kwargs)
    except ValidationError as e:
        raise ConfigError(f"Invalid graph options: {e}") from e
