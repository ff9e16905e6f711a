# src/compgraph/graph/labels.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Union


@dataclass(frozen=True, slots=True)
class ConstantLabel:
    """Default label provider returning the same value for every new node/edge."""

    value: Any = None

    def __call__(self, *ids: Any) -> Any:
        return self.value


@dataclass(frozen=True, slots=True)
class ComputedLabel:
    """
    Default label provider delegating to a callable.

    Node providers are called with (v); edge providers with (v, w, name).
    """

    fn: Callable[..., Any]

    def __call__(self, *ids: Any) -> Any:
        return self.fn(*ids)


LabelProvider = Union[ConstantLabel, ComputedLabel]


def as_label_provider(value: Any) -> LabelProvider:
    """
    Wrap `value` as a provider. Providers pass through, callables become
    ComputedLabel and anything else a ConstantLabel.
    """
    if isinstance(value, (ConstantLabel, ComputedLabel)):
        return value
    if callable(value):
        return ComputedLabel(value)
    return ConstantLabel(value)
