"""
Fast transform algorithm providers

The engine owns the rotation table, the working buffer and the normalization;
a provider owns the working-size policy and the transform algorithm itself.

Providers:
1. Radix2Provider - iterative Cooley-Tukey radix-2 DIT (Numba JIT),
   twiddles read from the engine's rotation table
2. NumpyProvider  - numpy.fft (pocketfft), any length
3. DirectProvider - O(N^2) sum over the rotation table, any length

All providers compute sum_n x(n) * W^(k*n) with W = exp(+j*2*pi/N), the
sign convention of the rotation table.
"""

import numpy as np
from numba import jit
from abc import ABC, abstractmethod
from typing import Dict, List, Type

NORM_MODES = ("backward", "ortho", "forward")


@jit(nopython=True, cache=True)
def _bit_reverse(x: int, n_bits: int) -> int:
    """Reverse the bits of x with n_bits."""
    result = 0
    for _ in range(n_bits):
        result = (result << 1) | (x & 1)
        x >>= 1
    return result


@jit(nopython=True, cache=True)
def _fft_radix2_rotors(x: np.ndarray, rotors: np.ndarray, n_bits: int) -> np.ndarray:
    """
    Iterative Cooley-Tukey radix-2 DIT FFT (Numba JIT).

    Twiddle factor for stage size m and butterfly j is rotors[j * N/m],
    so no trigonometry is evaluated here.
    """
    N = len(x)

    # Bit-reversal permutation
    X = np.empty(N, dtype=np.complex128)
    for i in range(N):
        j = _bit_reverse(i, n_bits)
        X[j] = x[i]

    # Process stages: size 2, 4, 8, ..., N
    stage_size = 2
    while stage_size <= N:
        half_size = stage_size // 2
        step = N // stage_size

        for k in range(0, N, stage_size):
            for j in range(half_size):
                even_idx = k + j
                odd_idx = k + j + half_size

                even = X[even_idx]
                odd = X[odd_idx] * rotors[j * step]

                X[even_idx] = even + odd
                X[odd_idx] = even - odd

        stage_size *= 2

    return X


@jit(nopython=True, cache=True)
def _dft_rotors_jit(x: np.ndarray, rotors: np.ndarray) -> np.ndarray:
    """Naive DFT indexing the 1-D rotation table with (k*n) mod N."""
    N = len(x)
    X = np.empty(N, dtype=np.complex128)

    for k in range(N):
        s = 0j
        for n in range(N):
            s += x[n] * rotors[(k * n) % N]
        X[k] = s

    return X


def next_power_of_2(n: int) -> int:
    """Smallest power of two >= n (1 for n <= 1)."""
    if n <= 1:
        return 1
    return 1 << (int(n) - 1).bit_length()


class AlgorithmProvider(ABC):
    """
    Base class for fast transform algorithms.

    All providers must implement:
    - calc_size(): map a requested length to the working size N
    - fft(): transform a zero-padded buffer of length N

    ``norm`` declares the scaling of fft()'s output using numpy's vocabulary:
    "backward" (unscaled sums), "ortho" (1/sqrt(N)) or "forward" (1/N).
    The engine rescales the output to the "forward" convention.
    """

    name: str = "base"
    norm: str = "backward"

    @abstractmethod
    def calc_size(self, length: int) -> int:
        """
        Working size for a requested number of samples.

        Must be deterministic and return a value >= 1.
        """
        pass

    @abstractmethod
    def fft(self, buffer: np.ndarray, rotors: np.ndarray) -> np.ndarray:
        """
        Transform a working buffer.

        Args:
            buffer: Real samples, zero-padded to N
            rotors: Rotation table of length N (read-only)

        Returns:
            N complex coefficients in natural frequency order
        """
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(norm={self.norm!r})"


class Radix2Provider(AlgorithmProvider):
    """Cooley-Tukey radix-2; pads to the next power of two."""

    name = "radix2"
    norm = "backward"

    def calc_size(self, length: int) -> int:
        return next_power_of_2(length)

    def fft(self, buffer: np.ndarray, rotors: np.ndarray) -> np.ndarray:
        x = np.ascontiguousarray(buffer, dtype=np.float64)
        N = x.shape[0]
        if N & (N - 1) != 0 or N == 0:
            raise ValueError(f"radix-2 FFT needs a power-of-2 length, got {N}")
        n_bits = N.bit_length() - 1
        return _fft_radix2_rotors(x, np.ascontiguousarray(rotors, dtype=np.complex128), n_bits)


class NumpyProvider(AlgorithmProvider):
    """
    numpy.fft backend, no padding.

    np.fft.ifft with norm="backward" is (1/N) * sum_n x(n) * exp(+j*2*pi*k*n/N),
    which is exactly the engine's canonical coefficient.
    """

    name = "numpy"
    norm = "forward"

    def calc_size(self, length: int) -> int:
        return max(int(length), 1)

    def fft(self, buffer: np.ndarray, rotors: np.ndarray) -> np.ndarray:
        return np.fft.ifft(np.asarray(buffer, dtype=np.float64), norm="backward")


class DirectProvider(AlgorithmProvider):
    """O(N^2) summation over the rotation table, no padding."""

    name = "direct"
    norm = "backward"

    def calc_size(self, length: int) -> int:
        return max(int(length), 1)

    def fft(self, buffer: np.ndarray, rotors: np.ndarray) -> np.ndarray:
        return _dft_rotors_jit(
            np.ascontiguousarray(buffer, dtype=np.float64),
            np.ascontiguousarray(rotors, dtype=np.complex128),
        )


_PROVIDERS: Dict[str, Type[AlgorithmProvider]] = {
    Radix2Provider.name: Radix2Provider,
    NumpyProvider.name: NumpyProvider,
    DirectProvider.name: DirectProvider,
}

DEFAULT_PROVIDER = Radix2Provider.name


def available_providers() -> List[str]:
    """Names accepted by get_provider()."""
    return sorted(_PROVIDERS)


def get_provider(name: str) -> AlgorithmProvider:
    """Instantiate a registered provider by name."""
    try:
        cls = _PROVIDERS[name]
    except KeyError:
        raise KeyError(
            f"Unknown FFT provider {name!r}, expected one of {available_providers()}"
        ) from None
    return cls()


def normalization_factor(norm: str, N: int) -> float:
    """Divisor that brings a provider's output to the 1/N convention."""
    if norm == "backward":
        return float(N)
    elif norm == "ortho":
        return float(np.sqrt(N))
    elif norm == "forward":
        return 1.0
    raise ValueError(f"norm must be one of {NORM_MODES}, got {norm!r}")
