"""
Amplitude, power and phase spectra derived from complex Fourier coefficients.
"""

import numpy as np


def amplitudes(coeffs: np.ndarray) -> np.ndarray:
    """
    Amplitude spectrum.

    |z| = sqrt(a*a + b*b)
    """
    return np.abs(np.asarray(coeffs, dtype=np.complex128))


def powers(coeffs: np.ndarray) -> np.ndarray:
    """
    Power spectrum.

    ||z|| = |z| * |z|
    """
    amp = amplitudes(coeffs)
    return amp * amp


def phases(coeffs: np.ndarray) -> np.ndarray:
    """
    Phase (argument) spectrum in (-pi, pi].

    theta = atan2(b, a)
    """
    z = np.asarray(coeffs, dtype=np.complex128)
    theta = np.arctan2(z.imag, z.real)
    # atan2(-0.0, x<0) gives -pi; fold onto the half-open interval
    return np.where(theta == -np.pi, np.pi, theta)
