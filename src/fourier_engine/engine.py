"""
Fourier transform engine.

Holds the working size N chosen by an algorithm provider, the rotation table
for N, the most recent working buffer and the most recent coefficients.

Coefficients are always stored in the 1/N ("forward") convention:

    X_k = (1/N) * sum_n x(n) * W_k^n,    W_k = cos(2*pi*k/N) + j*sin(2*pi*k/N)

so amplitudes and phases can be read directly whichever path produced them.

Thread safety: an engine mutates its buffer and coefficients on every
transform call without locking. Use one engine per worker, or serialize the
whole transform-then-read sequence externally.
"""

import numpy as np
from typing import Optional, Union

from .dsp_core.buffer import ArrayLike, load_buffer
from .dsp_core.dft import direct_dft
from .dsp_core.fft import (
    AlgorithmProvider,
    DEFAULT_PROVIDER,
    get_provider,
    normalization_factor,
)
from .dsp_core.rotors import build_rotors
from .dsp_core import spectrum
from .utils.logging import get_logger

logger = get_logger(__name__)


class FourierEngine:
    """
    Discrete Fourier transform engine for a fixed working size.

    Args:
        requested_length: Number of samples the caller intends to analyze
        provider: AlgorithmProvider instance, registered provider name, or
            None for the default radix-2 provider

    Example:
        >>> engine = FourierEngine(1000)        # N = 1024 with radix-2
        >>> engine.fft(samples)
        True
        >>> amp = engine.amplitudes()
    """

    def __init__(
        self,
        requested_length: int,
        provider: Optional[Union[AlgorithmProvider, str]] = None
    ):
        if isinstance(requested_length, bool) or int(requested_length) != requested_length:
            raise ValueError(f"requested_length must be an integer, got {requested_length!r}")
        requested_length = int(requested_length)
        if requested_length < 1:
            raise ValueError(f"requested_length must be >= 1, got {requested_length}")

        if provider is None:
            provider = DEFAULT_PROVIDER
        if isinstance(provider, str):
            provider = get_provider(provider)
        if not isinstance(provider, AlgorithmProvider):
            raise TypeError(f"provider must be an AlgorithmProvider, got {type(provider).__name__}")

        self._provider = provider
        self._requested_length = requested_length

        # 1. Working size required by the algorithm
        size = provider.calc_size(requested_length)
        if int(size) != size or size < 1:
            raise ValueError(f"{provider!r}.calc_size({requested_length}) returned invalid size {size!r}")
        self._size = int(size)
        self._norm_divisor = normalization_factor(provider.norm, self._size)

        # 2. Rotation table W_k, computed once
        self._rotors = build_rotors(self._size)
        self._rotors.setflags(write=False)

        self._data = np.zeros(0, dtype=np.float64)
        self._coeffs = np.zeros(0, dtype=np.complex128)

        logger.info(
            f"FourierEngine: requested={requested_length} N={self._size} "
            f"provider={provider.name}"
        )

    def __repr__(self) -> str:
        return (
            f"FourierEngine(requested_length={self._requested_length}, "
            f"size={self._size}, provider={self._provider!r})"
        )

    # ------------------------------------------------------------------
    # Accessors (copies, never internal storage)
    # ------------------------------------------------------------------

    @property
    def provider(self) -> AlgorithmProvider:
        return self._provider

    @property
    def requested_length(self) -> int:
        return self._requested_length

    def size(self) -> int:
        """Working size N."""
        return self._size

    def rotors(self) -> np.ndarray:
        """Copy of the rotation table (N complex values)."""
        return self._rotors.copy()

    def working_buffer(self) -> np.ndarray:
        """Copy of the zero-padded samples of the latest transform (empty before any)."""
        return self._data.copy()

    def fourier_coefficients(self) -> np.ndarray:
        """Copy of the coefficients of the latest transform (empty before any)."""
        return self._coeffs.copy()

    def amplitudes(self) -> np.ndarray:
        return spectrum.amplitudes(self._coeffs)

    def powers(self) -> np.ndarray:
        return spectrum.powers(self._coeffs)

    def phases(self) -> np.ndarray:
        return spectrum.phases(self._coeffs)

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def _load(self, samples: ArrayLike, count: Optional[int], path: str) -> Optional[np.ndarray]:
        buffer = load_buffer(samples, count, self._size)
        if buffer is None:
            n = np.size(samples) if count is None else count
            logger.warning(f"{path}: {n} samples exceed working size N={self._size}, no transform done")
        return buffer

    def dft(self, samples: ArrayLike, count: Optional[int] = None) -> bool:
        """
        Direct O(N^2) transform. Very slow: use for verification only.

        Args:
            samples: Real samples (any numeric element type)
            count: Number of samples to use (default: len(samples))

        Returns:
            False if count > N (nothing is changed), True otherwise
        """
        buffer = self._load(samples, count, 'dft')
        if buffer is None:
            return False

        coeffs = direct_dft(buffer)

        self._data = buffer
        self._coeffs = coeffs
        logger.debug(f"dft: N={self._size} done")
        return True

    def fft(self, samples: ArrayLike, count: Optional[int] = None) -> bool:
        """
        Fast transform delegated to the algorithm provider.

        The provider's output is rescaled according to its declared ``norm``
        so the stored coefficients match dft().

        Args:
            samples: Real samples (any numeric element type)
            count: Number of samples to use (default: len(samples))

        Returns:
            False if count > N (nothing is changed), True otherwise
        """
        buffer = self._load(samples, count, 'fft')
        if buffer is None:
            return False

        # The provider gets its own copy so it cannot touch engine state
        result = self._provider.fft(buffer.copy(), self._rotors)
        coeffs = np.asarray(result, dtype=np.complex128)
        if coeffs.shape != (self._size,):
            raise ValueError(
                f"{self._provider!r} returned shape {coeffs.shape}, expected ({self._size},)"
            )
        if self._norm_divisor != 1.0:
            coeffs = coeffs / self._norm_divisor
        elif coeffs is result:
            coeffs = coeffs.copy()

        self._data = buffer
        self._coeffs = coeffs
        logger.debug(f"fft: N={self._size} provider={self._provider.name} done")
        return True
