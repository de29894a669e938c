"""
Unit Tests for FourierEngine

Covers construction, the zero-padding discipline, oversized rejection,
normalization of both transform paths, derived spectra and the provider
contract.

Run:
    pytest tests/test_engine.py -v
"""

import sys
import os
import logging

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import pytest

from fourier_engine import FourierEngine, AlgorithmProvider, NumpyProvider, Radix2Provider


class OrthoProvider(AlgorithmProvider):
    """numpy backend reporting 1/sqrt(N) scaling."""

    name = "ortho"
    norm = "ortho"

    def calc_size(self, length):
        return length

    def fft(self, buffer, rotors):
        return np.fft.ifft(buffer, norm="ortho")


class ShortProvider(NumpyProvider):
    """Returns one coefficient too few."""

    def fft(self, buffer, rotors):
        return super().fft(buffer, rotors)[:-1]


class ScribblingProvider(NumpyProvider):
    """Overwrites the buffer it is handed."""

    def fft(self, buffer, rotors):
        result = super().fft(buffer, rotors)
        buffer[:] = 123.0
        return result


def inverse(coeffs: np.ndarray, rotors: np.ndarray) -> np.ndarray:
    """x(n) = sum_k X_k * W_k^(-n), evaluated through the rotation table."""
    N = len(coeffs)
    k = np.arange(N)
    W = rotors[np.outer(k, k) % N]
    return (coeffs[:, None] * np.conj(W)).sum(axis=0)


class TestConstruction:
    """Engine construction and accessors."""

    def test_default_provider_pads_to_power_of_2(self):
        engine = FourierEngine(1000)
        assert engine.size() == 1024
        assert engine.requested_length == 1000
        assert isinstance(engine.provider, Radix2Provider)

    def test_provider_by_name_and_instance(self):
        assert FourierEngine(1000, 'numpy').size() == 1000
        assert FourierEngine(1000, 'direct').size() == 1000
        assert FourierEngine(3, NumpyProvider()).size() == 3

    def test_rotors_copy(self):
        engine = FourierEngine(8)
        W = engine.rotors()
        assert np.allclose(W, np.exp(2j * np.pi * np.arange(8) / 8))
        W[:] = 0
        assert engine.rotors()[0] == 1 + 0j

    def test_empty_before_transform(self):
        engine = FourierEngine(16)
        for values in [
            engine.fourier_coefficients(),
            engine.amplitudes(),
            engine.powers(),
            engine.phases(),
            engine.working_buffer(),
        ]:
            assert values.shape == (0,)

    def test_invalid_requested_length(self):
        for bad in [0, -4, 2.5]:
            with pytest.raises(ValueError):
                FourierEngine(bad)

    def test_invalid_provider(self):
        with pytest.raises(KeyError):
            FourierEngine(8, 'bluestein')
        with pytest.raises(TypeError):
            FourierEngine(8, object())

    def test_invalid_calc_size(self):
        class ZeroSize(NumpyProvider):
            def calc_size(self, length):
                return 0

        with pytest.raises(ValueError):
            FourierEngine(8, ZeroSize())

    def test_unknown_norm(self):
        class Unscaled(NumpyProvider):
            norm = "none"

        with pytest.raises(ValueError):
            FourierEngine(8, Unscaled())

    def test_repr(self):
        text = repr(FourierEngine(5))
        assert 'requested_length=5' in text
        assert 'size=8' in text


class TestTransforms:
    """Direct and fast transform behaviour."""

    def test_scenario_n4(self):
        engine = FourierEngine(4)
        assert engine.dft([1, 0, -1, 0])

        X = engine.fourier_coefficients()
        assert np.allclose(X.real, [0, 0.5, 0, 0.5], atol=1e-12)
        assert np.allclose(X.imag, 0, atol=1e-12)
        assert np.allclose(engine.amplitudes(), [0, 0.5, 0, 0.5], atol=1e-12)
        assert np.allclose(engine.powers(), [0, 0.25, 0, 0.25], atol=1e-12)

    def test_inverse_reconstructs_samples(self):
        for length in [4, 7, 16, 33]:
            engine = FourierEngine(length, 'direct')
            x = np.random.randn(length)
            assert engine.dft(x)
            x_rec = inverse(engine.fourier_coefficients(), engine.rotors())
            assert np.allclose(x_rec.real, x, atol=1e-10)
            assert np.allclose(x_rec.imag, 0, atol=1e-10)

    def test_zero_padding_idempotence(self):
        engine = FourierEngine(10)
        N = engine.size()
        x = np.random.randn(10)

        assert engine.dft(x, 10)
        X_short = engine.fourier_coefficients()
        assert engine.dft(np.concatenate([x, np.zeros(N - 10)]), N)
        X_padded = engine.fourier_coefficients()
        assert np.array_equal(X_short, X_padded)

        assert engine.dft(np.concatenate([x, np.random.randn(20)]), 10)
        assert np.array_equal(engine.fourier_coefficients(), X_short)

    def test_working_buffer(self):
        engine = FourierEngine(3)
        assert engine.fft([1, 2, 3])
        assert np.array_equal(engine.working_buffer(), [1, 2, 3, 0])

    def test_oversized_rejection(self):
        engine = FourierEngine(8)
        assert engine.dft(np.ones(8))
        X_before = engine.fourier_coefficients()

        assert not engine.dft(np.random.randn(9))
        assert not engine.fft(np.random.randn(9))
        assert not engine.fft(np.random.randn(12), count=9)

        # More requested than N is a rejection even when fewer samples were supplied
        assert engine.dft(np.ones(3), 9) is False
        assert engine.fft(np.ones(3), 9) is False
        assert engine.size() == 8
        assert np.array_equal(engine.fourier_coefficients(), X_before)

    def test_oversized_is_logged(self, caplog):
        caplog.set_level(logging.WARNING, logger='fourier_engine')
        engine = FourierEngine(4)
        assert not engine.fft(np.ones(5))
        assert 'exceed working size N=4' in caplog.text

    def test_zero_samples(self):
        engine = FourierEngine(8)
        assert engine.dft([])
        assert np.array_equal(engine.fourier_coefficients(), np.zeros(8))
        assert engine.fft([])
        assert np.array_equal(engine.amplitudes(), np.zeros(8))

    def test_dc_coefficient(self):
        c = 3.25
        for provider in ['radix2', 'numpy', 'direct']:
            engine = FourierEngine(16, provider)
            for transform in [engine.dft, engine.fft]:
                assert transform(np.full(16, c))
                X = engine.fourier_coefficients()
                assert np.isclose(X[0], c, atol=1e-12)
                assert np.allclose(X[1:], 0, atol=1e-12)

    def test_cross_path_equivalence(self):
        for provider in ['radix2', 'numpy', 'direct', OrthoProvider()]:
            for length in [1, 2, 7, 16, 100]:
                engine = FourierEngine(length, provider)
                x = np.random.randn(length)
                assert engine.dft(x)
                X_dft = engine.fourier_coefficients()
                assert engine.fft(x)
                X_fft = engine.fourier_coefficients()
                error = np.abs(X_dft - X_fft).max()
                assert error < 1e-10, f"{provider} length={length}: {error:.2e}"

    def test_generic_element_types(self):
        engine = FourierEngine(8)
        assert engine.fft(np.arange(8, dtype=np.float64))
        expected = engine.fourier_coefficients()
        for samples in [list(range(8)), np.arange(8, dtype=np.int32), np.arange(8, dtype=np.float32)]:
            assert engine.fft(samples)
            assert np.allclose(engine.fourier_coefficients(), expected, atol=1e-12)

    def test_spectra_follow_latest_transform(self):
        engine = FourierEngine(16)
        x = np.sin(2 * np.pi * np.arange(16) / 16)
        assert engine.fft(x)
        X = engine.fourier_coefficients()
        assert np.allclose(engine.amplitudes(), np.sqrt(X.real ** 2 + X.imag ** 2))
        assert np.allclose(engine.powers(), engine.amplitudes() ** 2)
        assert np.isclose(engine.phases()[1], np.pi / 2)
        assert np.isclose(engine.phases()[15], -np.pi / 2)

        assert engine.fft(np.ones(16))
        assert np.isclose(engine.amplitudes()[0], 1.0)
        assert np.allclose(engine.amplitudes()[1:], 0, atol=1e-12)

    def test_accessor_copies(self):
        engine = FourierEngine(4)
        assert engine.fft([1, 2, 3, 4])
        X = engine.fourier_coefficients()
        X[:] = 0
        assert engine.fourier_coefficients()[0] == pytest.approx(2.5)


class TestProviderContract:
    """Checks on what the engine accepts back from a provider."""

    def test_wrong_length_raises(self):
        engine = FourierEngine(8, ShortProvider())
        with pytest.raises(ValueError):
            engine.fft(np.ones(8))

    def test_provider_cannot_touch_engine_buffer(self):
        engine = FourierEngine(4, ScribblingProvider())
        assert engine.fft([1, 2, 3, 4])
        assert np.array_equal(engine.working_buffer(), [1, 2, 3, 4])

    def test_rotors_are_read_only_for_providers(self):
        class Writer(NumpyProvider):
            def fft(self, buffer, rotors):
                rotors[0] = 0
                return super().fft(buffer, rotors)

        engine = FourierEngine(4, Writer())
        with pytest.raises(ValueError):
            engine.fft([1, 2, 3, 4])
        assert engine.rotors()[0] == 1 + 0j
