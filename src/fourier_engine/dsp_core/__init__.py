"""
DSP Core Module - Rotation table, working buffer, transforms and spectra

Modules:
    - rotors: rotation (twiddle) factor table
    - buffer: zero-padded working buffer
    - dft: direct O(N^2) reference transform (Numba JIT)
    - fft: fast transform algorithm providers (radix-2 Cooley-Tukey, numpy, direct)
    - spectrum: amplitude, power and phase spectra
"""

from .rotors import build_rotors
from .buffer import as_samples, load_buffer
from .dft import direct_dft
from .fft import (
    AlgorithmProvider,
    Radix2Provider,
    NumpyProvider,
    DirectProvider,
    available_providers,
    get_provider,
    next_power_of_2,
)
from .spectrum import amplitudes, powers, phases

__all__ = [
    'build_rotors',
    'as_samples',
    'load_buffer',
    'direct_dft',
    # Providers
    'AlgorithmProvider',
    'Radix2Provider',
    'NumpyProvider',
    'DirectProvider',
    'available_providers',
    'get_provider',
    'next_power_of_2',
    # Spectra
    'amplitudes',
    'powers',
    'phases',
]
