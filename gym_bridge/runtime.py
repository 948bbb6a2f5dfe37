"""Process-wide guard around calls into the environment runtime."""

import importlib
import logging
import threading
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from gym_bridge.errors import ExternalCallError


logger = logging.getLogger('gym_bridge.runtime')

# Shared by every adapter in the process: at most one external call at a time.
_RUNTIME_LOCK = threading.RLock()


def runtime_lock() -> threading.RLock:
    """Return the lock serializing access to the environment runtime.

    Code outside the adapters that touches the same runtime should hold it
    too.
    """
    return _RUNTIME_LOCK


@contextmanager
def external_call(operation: str) -> Iterator[None]:
    """Hold the runtime lock for one external call.

    Exceptions raised inside the block are re-raised as
    :class:`ExternalCallError`. The lock is released on every exit path.

    Args:
        operation: Short description used in the error message and logs
    """
    with _RUNTIME_LOCK:
        try:
            yield
        except ExternalCallError:
            raise
        except Exception as e:
            logger.error(f"External call '{operation}' failed: {e!r}")
            raise ExternalCallError(operation, e) from e


def load_factory(module_name: str, attribute: str) -> Callable[..., Any]:
    """Import ``module_name`` and return its ``attribute`` (e.g. gymnasium.make)."""
    module = importlib.import_module(module_name)
    factory = getattr(module, attribute)
    if not callable(factory):
        raise TypeError(f"{module_name}.{attribute} is not callable")
    return factory
