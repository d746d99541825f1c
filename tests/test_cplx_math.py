import math

import pytest

import cplx_math as cm


def test_mul_matches_formula():
    a = cm.from_parts(1.5, -2.0)
    b = cm.from_parts(0.5, 3.0)
    p = cm.mul(a, b)
    assert p.real == pytest.approx(1.5 * 0.5 - (-2.0) * 3.0)
    assert p.imag == pytest.approx(1.5 * 3.0 + (-2.0) * 0.5)
    assert complex(p) == pytest.approx(complex(a) * complex(b))


def test_add_sub_return_new_values():
    a = cm.from_parts(1.0, 2.0)
    b = cm.from_parts(3.0, -1.0)
    assert complex(cm.add(a, b)) == complex(4.0, 1.0)
    assert complex(cm.sub(a, b)) == complex(-2.0, 3.0)
    assert complex(a) == complex(1.0, 2.0)


def test_magnitude_and_phase():
    v = cm.from_parts(3.0, 4.0)
    assert cm.magnitude(v) == pytest.approx(5.0)
    assert cm.phase(cm.from_parts(0.0, 1.0)) == pytest.approx(math.pi / 2)
    assert cm.phase(cm.from_parts(-1.0, 0.0)) == pytest.approx(math.pi)


def test_twiddle_uses_negative_exponent():
    w = cm.twiddle(1, 4)
    # e^(-j*pi/2) == -j
    assert cm.is_close(w, cm.from_parts(0.0, -1.0), 1e-12)
    assert cm.is_close(cm.twiddle(0, 8), cm.from_parts(1.0, 0.0))
    assert cm.is_close(cm.twiddle(4, 8), cm.from_parts(-1.0, 0.0), 1e-12)


def test_twiddle_is_periodic_in_k():
    assert cm.is_close(cm.twiddle(3, 8), cm.twiddle(3 + 8 * 5, 8), 1e-12)


def test_unit_exp_on_unit_circle():
    for angle in (0.0, 0.3, 2.0, -4.1):
        assert cm.magnitude(cm.unit_exp(angle)) == pytest.approx(1.0)


def test_all_close():
    xs = [cm.from_parts(1.0), cm.from_parts(0.0, 1.0)]
    ys = [cm.from_parts(1.0 + 1e-12), cm.from_parts(0.0, 1.0 - 1e-12)]
    assert cm.all_close(xs, ys)
    assert not cm.all_close(xs, ys[:1])
    assert not cm.all_close(xs, [cm.from_parts(1.1), ys[1]])


def test_nan_propagates():
    v = cm.add(cm.from_parts(float("nan")), cm.from_parts(1.0))
    assert math.isnan(v.real)
