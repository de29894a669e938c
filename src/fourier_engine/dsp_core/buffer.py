"""
Working buffer: caller samples copied and zero-extended to the working size.
"""

import numpy as np
from typing import Optional, Sequence, Union

ArrayLike = Union[Sequence[float], np.ndarray]


def as_samples(samples: ArrayLike) -> np.ndarray:
    """Convert any real numeric 1-D sequence to a float64 array."""
    x = np.asarray(samples, dtype=np.float64)
    if x.ndim == 0:
        x = x.reshape(1)
    if x.ndim != 1:
        raise ValueError(f"samples must be 1-D, got shape {x.shape}")
    return x


def load_buffer(samples: ArrayLike, count: Optional[int], size: int) -> Optional[np.ndarray]:
    """
    Copy ``count`` samples into a zero-filled buffer of length ``size``.

    Parameters
    ----------
    samples : sequence of real numbers
        Caller data; any numeric element type convertible to float
    count : int, optional
        Number of samples to use. If None, uses len(samples).
    size : int
        Working size N

    Returns
    -------
    np.ndarray or None
        float64 buffer of length ``size``, or None if ``count > size``
        (the engine refuses to silently drop caller data)
    """
    x = as_samples(samples)

    if count is None:
        count = x.shape[0]
    if isinstance(count, bool) or int(count) != count:
        raise ValueError(f"count must be an integer, got {count!r}")
    count = int(count)
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    # Oversized input is a rejection, not an error, whatever was supplied
    if count > size:
        return None

    if count > x.shape[0]:
        raise ValueError(f"count {count} exceeds the {x.shape[0]} samples supplied")

    buffer = np.zeros(size, dtype=np.float64)
    buffer[:count] = x[:count]
    return buffer
