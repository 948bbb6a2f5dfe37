"""Conversion of raw observation buffers into JAX arrays."""

import numpy as np
import jax
import jax.numpy as jnp
from typing import Any, Optional

from gym_bridge.config import config


def extract_floats(value: Any) -> np.ndarray:
    """Extract a flat float32 buffer from a numeric sequence.

    Args:
        value: Observation as returned by the environment (list, tuple,
            NumPy array or scalar)

    Returns:
        1-D float32 array

    Raises:
        TypeError, ValueError: if the value is not numeric or is ragged
    """
    if value is None or isinstance(value, (str, bytes, dict)):
        raise TypeError(f"Cannot extract floats from {type(value).__name__}")
    array = np.asarray(value)
    # Object arrays hold None or mixed types; U/S/V are strings and raw bytes
    if array.dtype.kind in 'OUSV':
        raise TypeError(f"Cannot extract floats from {array.dtype} data")
    return array.astype(np.float32).ravel()


def default_device() -> jax.Device:
    """First device of the platform configured under 'tensor.device'."""
    return jax.devices(config.get('tensor.device'))[0]


def to_tensor(buffer: np.ndarray, device: Optional[jax.Device] = None) -> jax.Array:
    """Place a float32 buffer on a device as a JAX array."""
    if device is None:
        device = default_device()
    return jax.device_put(jnp.asarray(buffer, dtype=jnp.float32), device)
