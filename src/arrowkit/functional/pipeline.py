"""Immutable chainable value wrapper.

Example:
    >>> pipeline(5).double().increment().double().get()
    22
"""

import typing as tp

from pydantic import BaseModel, ConfigDict

__all__ = ["Pipeline", "pipeline"]


class Pipeline(BaseModel):
    """Frozen wrapper around a single value.

    Every transform returns a fresh ``Pipeline``; the receiver is never
    modified, so intermediate stages can be kept and branched from.
    """

    model_config = ConfigDict(frozen=True)

    value: tp.Any

    def map(self, fn: tp.Callable[[tp.Any], tp.Any]) -> "Pipeline":
        """Return a new pipeline holding ``fn(value)``."""
        return Pipeline(value=fn(self.value))

    def double(self) -> "Pipeline":
        return self.map(lambda v: v * 2)

    def increment(self) -> "Pipeline":
        return self.map(lambda v: v + 1)

    def get(self) -> tp.Any:
        return self.value


def pipeline(value: tp.Any) -> Pipeline:
    """Start a pipeline from ``value``."""
    return Pipeline(value=value)
