"""Conversion of caller actions into values the environment runtime accepts."""

import copy
import numpy as np
import jax
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Marshalable(Protocol):
    """An action type that knows how to present itself to the runtime."""

    def to_external(self) -> Any:
        """Return a value accepted by the environment's step method."""
        ...


def marshal_action(action: Any) -> Any:
    """Return a duplicate of ``action`` suitable for ``env.step``.

    The environment never receives the caller's own object, so the action
    handed back in the step result is exactly what the caller passed in.
    """
    if isinstance(action, Marshalable):
        return action.to_external()
    if isinstance(action, jax.Array):
        return np.array(action)
    return copy.copy(action)
