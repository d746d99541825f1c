# sig_gen.py
from dataclasses import dataclass, replace
from enum import Enum
import math
from typing import Final, Optional

import numpy as np

from cplx_math import ArrC128


SUPPORTED_N: Final = (2, 4, 8, 16, 32)  # visualisation bound, engine itself is unbounded


class SignalPreset(str, Enum):
    SINGLE_TONE = "Single Tone"
    TWO_TONES = "Two Tones"
    IMPULSE = "Impulse"
    STEP = "Step"
    RANDOM_NOISE = "Random Noise"
    CHIRP = "Chirp"


@dataclass(frozen=True)
class SignalConfig:
    N: int = 16
    preset: SignalPreset = SignalPreset.TWO_TONES
    f1: float = 2.0
    a1: float = 1.0
    p1: float = 0.0
    f2: float = 5.0
    a2: float = 0.5
    p2: float = 0.0
    seed: Optional[int] = None   # only RANDOM_NOISE uses it; None -> not reproducible

    @classmethod
    def reset(cls) -> "SignalConfig":
        return cls(N=16, preset=SignalPreset.SINGLE_TONE, f1=2.0, a1=1.0, p1=0.0, f2=5.0, a2=0.0, p2=0.0)

    def with_n(self, N: int) -> "SignalConfig":
        return replace(self, N=N)

    def to_str(self) -> str:
        return (
            f"N={self.N} preset='{SignalPreset(self.preset).value}' | "
            f"f1={self.f1:g} a1={self.a1:g} p1={self.p1:g} | "
            f"f2={self.f2:g} a2={self.a2:g} p2={self.p2:g}"
            + (f" | seed={self.seed}" if self.seed is not None else "")
        )


def is_pow2(n: int) -> bool:
    return n >= 2 and (n & (n - 1)) == 0


def validate_n(n: int, bounded: bool = False) -> int:
    """
    Precondition check for callers. The transforms never call it:
    bit width is undefined for a non power of two N.
    """
    if not is_pow2(n):
        raise ValueError(f"N must be a power of two >= 2, got {n}")
    if bounded and n not in SUPPORTED_N:
        raise ValueError(f"N={n} outside supported set {SUPPORTED_N}")
    return n


def generate_signal(cfg: SignalConfig) -> ArrC128:
    """
    N real-valued samples (imag == 0) at normalized time t = n/N.
    """
    N = cfg.N
    n = np.arange(N)
    t = n / N

    match SignalPreset(cfg.preset):
        case SignalPreset.SINGLE_TONE:
            val = cfg.a1 * np.sin(2 * math.pi * cfg.f1 * t + cfg.p1)
        case SignalPreset.TWO_TONES:
            val = (cfg.a1 * np.sin(2 * math.pi * cfg.f1 * t + cfg.p1)
                   + cfg.a2 * np.sin(2 * math.pi * cfg.f2 * t + cfg.p2))
        case SignalPreset.IMPULSE:
            val = np.where(n == 0, 1.0, 0.0)
        case SignalPreset.STEP:
            val = np.where(n >= N / 2, 1.0, 0.0)
        case SignalPreset.RANDOM_NOISE:
            rng = np.random.default_rng(cfg.seed)
            val = (rng.random(N) * 2.0 - 1.0) * cfg.a1
        case SignalPreset.CHIRP:
            # sweeps 0 -> f1
            val = cfg.a1 * np.sin(2 * math.pi * (cfg.f1 / 2) * t * t)
        case _:
            raise ValueError(f"Unknown preset: {cfg.preset}")

    out = np.zeros(N, dtype=np.complex128)
    out.real = val
    return out
