# src\fft_core.py
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
from scipy.fft import fft

import cplx_math as cm
from cplx_math import ArrC128, Cplx


@dataclass(frozen=True)
class Butterfly:
    """One 2-point combine: a' = a + W*b, b' = a - W*b with W = W_m^k."""
    stage: int
    index_a: int
    index_b: int
    twiddle: Cplx
    twiddle_k: int      # exponent j
    twiddle_n: int      # modulus m (current span)

    def label(self) -> str:
        return f"W_{self.twiddle_n}^{self.twiddle_k}"


@dataclass(frozen=True)
class FFTStages:
    bit_reversed: ArrC128
    stages: Tuple[ArrC128, ...]                  # len == log2(N) + 1, stages[0] == bit_reversed
    butterflies: Tuple[Tuple[Butterfly, ...], ...]  # len == log2(N), N/2 each, emission order

    @property
    def spectrum(self) -> ArrC128:
        return self.stages[-1]

    @property
    def n_stages(self) -> int:
        return len(self.butterflies)


# =====================================================
# Index arithmetic
# =====================================================

def bit_reverse(n: int, bits: int) -> int:
    """Reverse the low `bits` bits of n."""
    rev = 0
    for _ in range(bits):
        rev = (rev << 1) | (n & 1)
        n >>= 1
    return rev


def log2_int(N: int) -> int:
    return N.bit_length() - 1


def bit_reverse_map(N: int) -> List[int]:
    bits = log2_int(N)
    return [bit_reverse(n, bits) for n in range(N)]


# =====================================================
# Direct transform (reference, O(N^2))
# =====================================================

def compute_dft(x: ArrC128) -> ArrC128:
    """
    X[k] = sum_n x[n] * W_N^(k*n)

    Deliberately naive: correctness oracle and complexity baseline.
    """
    N = len(x)
    X = np.empty(N, dtype=np.complex128)
    for k in range(N):
        acc = cm.from_parts(0.0, 0.0)
        for n in range(N):
            acc = cm.add(acc, cm.mul(x[n], cm.twiddle(k * n, N)))
        X[k] = acc
    return X


# =====================================================
# Staged radix-2 DIT FFT
# =====================================================

def _snapshot(buf: ArrC128) -> ArrC128:
    snap = buf.copy()
    snap.setflags(write=False)
    return snap


def compute_staged_fft(x: ArrC128) -> FFTStages:
    """
    Iterative Cooley-Tukey radix-2 DIT with every intermediate buffer kept.

    1. bit-reversal permutation -> stages[0]
    2. for s = 1..log2(N): span m = 2^s, blocks of m starting at k,
       offsets j < m/2 combine (k+j, k+j+m/2) with W_m^j.
       Stage s+1 reads only stage s buffer (no in-place across stages).

    Butterflies are emitted block-major, offset-minor. Replay consumers rely on this order.
    N must be a power of two; not checked here.
    """
    N = len(x)
    bits = log2_int(N)

    reordered = np.empty(N, dtype=np.complex128)
    for n in range(N):
        reordered[bit_reverse(n, bits)] = x[n]

    reordered.setflags(write=False)
    stages: List[ArrC128] = [_snapshot(reordered)]
    butterflies: List[Tuple[Butterfly, ...]] = []

    curr = reordered
    for s in range(1, bits + 1):
        m = 1 << s
        m_half = m >> 1
        nxt = curr.copy()
        stage_bfs: List[Butterfly] = []

        for k in range(0, N, m):
            for j in range(m_half):
                w = cm.twiddle(j, m)
                idx_a = k + j
                idx_b = k + j + m_half

                a = curr[idx_a]
                wb = cm.mul(w, curr[idx_b])
                nxt[idx_a] = cm.add(a, wb)
                nxt[idx_b] = cm.sub(a, wb)

                stage_bfs.append(Butterfly(stage=s, index_a=idx_a, index_b=idx_b,
                                           twiddle=w, twiddle_k=j, twiddle_n=m))
        curr = nxt
        stages.append(_snapshot(curr))
        butterflies.append(tuple(stage_bfs))

    return FFTStages(bit_reversed=reordered, stages=tuple(stages), butterflies=tuple(butterflies))


# =====================================================
# Cross-checks / consumer views
# =====================================================

def reference_fft(x: ArrC128) -> ArrC128:
    """Library FFT, third independent oracle."""
    return fft(np.asarray(x, dtype=np.complex128))


def max_abs_error(a: ArrC128, b: ArrC128) -> float:
    a = np.asarray(a)
    b = np.asarray(b)
    if a.shape != b.shape:
        raise ValueError(f"shape mismatch {a.shape} vs {b.shape}")
    return float(np.max(np.abs(a - b))) if a.size else 0.0


def spectrum_points(X: ArrC128, decimals: int = 4) -> List[Tuple[int, float, float]]:
    """(k, |X[k]|, arg X[k]) per bin, rounded for charting."""
    return [(k, round(cm.magnitude(v), decimals), round(cm.phase(v), decimals)) for k, v in enumerate(X)]


def energy(x: ArrC128) -> float:
    return float(np.sum(x.real * x.real + x.imag * x.imag))
