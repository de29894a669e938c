"""
Direct (reference) DFT using Numba JIT

X_k = (1/N) * sum_n W_{k,n} * x(n),   W_{k,n} = cos(2*pi*k*n/N) + j*sin(2*pi*k*n/N)

Very slow (O(N^2) time and memory): use it for verification only.
The rotation matrix is rebuilt on every call, independently of the cached
1-D rotation table, so this path shares no state with the fast transform.
"""

import numpy as np
from numba import jit


@jit(nopython=True, cache=True)
def _rotor_matrix(N: int) -> np.ndarray:
    """Full N x N rotation matrix W[k, n]."""
    base_freq = 2.0 * np.pi / N
    W = np.empty((N, N), dtype=np.complex128)
    for k in range(N):
        for n in range(N):
            W[k, n] = complex(np.cos(base_freq * k * n), np.sin(base_freq * k * n))
    return W


@jit(nopython=True, cache=True)
def _dft_matrix_jit(x: np.ndarray) -> np.ndarray:
    """Naive matrix DFT, output is N times the normalized coefficients."""
    N = len(x)
    W = _rotor_matrix(N)
    X = np.zeros(N, dtype=np.complex128)

    # Double loop over the matrix: O(N^2)
    for k in range(N):
        s = 0j
        for n in range(N):
            s += W[k, n] * x[n]
        X[k] = s

    return X


def direct_dft(buffer: np.ndarray) -> np.ndarray:
    """
    Compute the normalized DFT of a zero-padded working buffer.

    Parameters
    ----------
    buffer : np.ndarray
        Real working buffer of length N

    Returns
    -------
    np.ndarray
        N complex coefficients, already divided by N
    """
    x = np.ascontiguousarray(buffer, dtype=np.float64)
    N = x.shape[0]
    if N == 0:
        return np.zeros(0, dtype=np.complex128)
    return _dft_matrix_jit(x) / N
