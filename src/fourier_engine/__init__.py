"""
Fourier Engine - discrete Fourier transform kernel for real, uniformly sampled signals

A FourierEngine fixes a working size N (chosen by a pluggable fast-transform
provider), precomputes the rotation table once, zero-pads caller samples to N
and exposes normalized coefficients with amplitude, power and phase spectra.
"""

from .engine import FourierEngine
from .config import EngineConfig, load_config, create_engine
from .dsp_core import (
    AlgorithmProvider,
    Radix2Provider,
    NumpyProvider,
    DirectProvider,
    available_providers,
    get_provider,
)

__all__ = [
    'FourierEngine',
    'EngineConfig',
    'load_config',
    'create_engine',
    'AlgorithmProvider',
    'Radix2Provider',
    'NumpyProvider',
    'DirectProvider',
    'available_providers',
    'get_provider',
]

__version__ = '1.0.0'
