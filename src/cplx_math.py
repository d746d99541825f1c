# cplx_math.py
"""
Complex sample primitive.

A sample is a numpy.complex128 scalar: immutable, two float64 components.
Every operation returns a new value; NaN/Inf propagate per IEEE.
"""
import math
from typing import Annotated, Final, Sequence, TypeAlias

import numpy as np
from numpy.typing import NDArray

Cplx: TypeAlias = np.complex128
ArrC128: TypeAlias = Annotated[NDArray[np.complex128], "complex128 1D, len == N (power of two)"]

TWO_PI: Final = 2.0 * math.pi
DEFAULT_TOL: Final = 1e-9


def from_parts(re: float, im: float = 0.0) -> Cplx:
    return np.complex128(complex(re, im))


def add(a: Cplx, b: Cplx) -> Cplx:
    return from_parts(a.real + b.real, a.imag + b.imag)


def sub(a: Cplx, b: Cplx) -> Cplx:
    return from_parts(a.real - b.real, a.imag - b.imag)


def mul(a: Cplx, b: Cplx) -> Cplx:
    return from_parts(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


def magnitude(a: Cplx) -> float:
    return math.sqrt(a.real * a.real + a.imag * a.imag)


def phase(a: Cplx) -> float:
    return math.atan2(a.imag, a.real)


def unit_exp(angle: float) -> Cplx:
    """e^(j*angle) as (cos, sin)."""
    return from_parts(math.cos(angle), math.sin(angle))


def twiddle(k: int, n: int) -> Cplx:
    """
    W_n^k = e^(-j * 2pi * k / n).
    Negative exponent: forward transform convention.
    """
    return unit_exp(-TWO_PI * k / n)


def is_close(a: Cplx, b: Cplx, tol: float = DEFAULT_TOL) -> bool:
    return abs(a.real - b.real) <= tol and abs(a.imag - b.imag) <= tol


def all_close(xs: Sequence[Cplx], ys: Sequence[Cplx], tol: float = DEFAULT_TOL) -> bool:
    if len(xs) != len(ys):
        return False
    return all(is_close(x, y, tol) for x, y in zip(xs, ys))
