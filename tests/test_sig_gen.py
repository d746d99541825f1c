import numpy as np
import pytest

from sig_gen import SUPPORTED_N, SignalConfig, SignalPreset, generate_signal, is_pow2, validate_n


@pytest.mark.parametrize("preset", list(SignalPreset))
def test_length_and_real_valued(preset):
    x = generate_signal(SignalConfig(N=32, preset=preset, seed=1))
    assert x.shape == (32,)
    assert x.dtype == np.complex128
    assert np.all(x.imag == 0.0)


def test_impulse():
    x = generate_signal(SignalConfig(N=8, preset=SignalPreset.IMPULSE))
    assert x.real.tolist() == [1, 0, 0, 0, 0, 0, 0, 0]


def test_step():
    x = generate_signal(SignalConfig(N=8, preset=SignalPreset.STEP))
    assert x.real.tolist() == [0, 0, 0, 0, 1, 1, 1, 1]


def test_single_tone_values():
    cfg = SignalConfig(N=16, preset=SignalPreset.SINGLE_TONE, f1=2, a1=1.5, p1=0.25)
    x = generate_signal(cfg)
    n = np.arange(16)
    np.testing.assert_allclose(x.real, 1.5 * np.sin(2 * np.pi * 2 * n / 16 + 0.25), atol=1e-12)


def test_two_tones_is_sum_of_tones():
    cfg = SignalConfig(N=16, preset=SignalPreset.TWO_TONES, f1=1, a1=1, p1=0, f2=3, a2=0.5, p2=1.0)
    one = generate_signal(SignalConfig(N=16, preset=SignalPreset.SINGLE_TONE, f1=1, a1=1, p1=0))
    two = generate_signal(SignalConfig(N=16, preset=SignalPreset.SINGLE_TONE, f1=3, a1=0.5, p1=1.0))
    np.testing.assert_allclose(generate_signal(cfg), one + two, atol=1e-12)


def test_chirp():
    cfg = SignalConfig(N=16, preset=SignalPreset.CHIRP, f1=4, a1=2)
    t = np.arange(16) / 16
    np.testing.assert_allclose(generate_signal(cfg).real, 2 * np.sin(2 * np.pi * 2 * t * t), atol=1e-12)


def test_noise_bounded_and_seeded():
    cfg = SignalConfig(N=32, preset=SignalPreset.RANDOM_NOISE, a1=0.7, seed=42)
    x = generate_signal(cfg)
    assert np.all(np.abs(x.real) <= 0.7)
    np.testing.assert_array_equal(x, generate_signal(cfg))


def test_preset_accepts_display_name():
    x = generate_signal(SignalConfig(N=4, preset="Impulse"))
    assert x.real.tolist() == [1, 0, 0, 0]


def test_unknown_preset_fails_fast():
    with pytest.raises(ValueError):
        generate_signal(SignalConfig(N=8, preset="Sawtooth"))


def test_defaults_and_reset():
    assert SignalConfig().preset is SignalPreset.TWO_TONES
    r = SignalConfig.reset()
    assert (r.N, r.preset, r.a2) == (16, SignalPreset.SINGLE_TONE, 0.0)


def test_validate_n():
    assert all(is_pow2(n) for n in SUPPORTED_N)
    assert validate_n(64) == 64
    for bad in (0, 1, 3, 12):
        with pytest.raises(ValueError):
            validate_n(bad)
    with pytest.raises(ValueError):
        validate_n(64, bounded=True)
