"""
Rotation (twiddle) factor table.

W_k = cos(2*pi*k/N) + j*sin(2*pi*k/N),  k = 0, ..., N-1

The table is built once per engine and shared by every fast transform call.
"""

import numpy as np


def build_rotors(n: int) -> np.ndarray:
    """
    Build the N rotation factors on the unit circle.

    Parameters
    ----------
    n : int
        Working size N (already validated positive by the engine)

    Returns
    -------
    np.ndarray
        complex128 array of length n, rotors[0] == 1+0j
    """
    base_freq = 2.0 * np.pi / n
    k = np.arange(n)
    return np.cos(base_freq * k) + 1j * np.sin(base_freq * k)
