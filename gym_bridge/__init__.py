"""Runtime shared by the Gymnasium environment adapters."""

from .errors import ExternalCallError
from .runtime import external_call, runtime_lock

__all__ = ['ExternalCallError', 'external_call', 'runtime_lock']
