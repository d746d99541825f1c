from typing import Sequence

import numpy as np

from colorizer import PALETTE, inject_colors_into
from fft_core import ArrC128, Butterfly, FFTStages, spectrum_points
# --- color names for IDE/static analysis suppress warnings --------------------
GREEN: str; RED: str; YELLOW: str; GRAY: str; CYAN: str; MAGENTA: str
RESET: str; WARN: str; ERR: str; INFO: str; DBG: str
inject_colors_into(globals())


def ms2str(t_ms: float) -> str:
    if t_ms < 1.0: t_str = f"{t_ms * 1e3:.3f} us"
    elif t_ms < 1e3: t_str = f"{t_ms:.3f} ms"
    else: t_str = f"{t_ms * 1e-3:.3f} s"
    return t_str


def fmt_cplx(v: complex, prec: int = 3) -> str:
    sign = "-" if v.imag < 0 else "+"
    return f"{v.real:+.{prec}f}{sign}{abs(v.imag):.{prec}f}j"


def print_ascii_bars(X: ArrC128, label: str = "|X[k]|", width: int = 40, show_phase: bool = False) -> None:
    """Magnitude (or phase) spectrum as horizontal ASCII bars, one row per bin."""
    pts = spectrum_points(X)
    if not pts:
        return
    vals = np.array([p[2] if show_phase else p[1] for p in pts])
    peak = float(np.max(np.abs(vals)))

    header = f"\n{'k':>4} | {label:>10} | {'':<{width}}"
    print(header)
    print("-" * len(header))
    for (k, _, _), v in zip(pts, vals):
        bar_len = int(abs(v) * width / peak) if peak > 0 else 0
        print(f"{k:>4} | {v:>10.4f} | {'#' * bar_len}")


def print_stage_table(fs: FFTStages, x: ArrC128 | None = None, prec: int = 3) -> None:
    """Rows = buffer index, columns = [x[n]] + stage 0..log2N."""
    N = len(fs.bit_reversed)
    col_w = 2 * prec + 8
    cols = ([("x[n]", x)] if x is not None else []) + [(f"s{i}", st) for i, st in enumerate(fs.stages)]

    print(f"{'idx':>4} " + " ".join(f"{name:^{col_w}}" for name, _ in cols))
    for i in range(N):
        print(f"{i:>4} " + " ".join(f"{fmt_cplx(buf[i], prec):>{col_w}}" for _, buf in cols))


def print_butterflies(groups: Sequence[Sequence[Butterfly]], stage: int | None = None) -> None:
    for bfs in groups:
        if not bfs or (stage is not None and bfs[0].stage != stage):
            continue
        print(f"{PALETTE.stage}Stage {bfs[0].stage}{PALETTE.reset}: span m={bfs[0].twiddle_n}, {len(bfs)} butterflies")
        for i, bf in enumerate(bfs):
            print(f"  #{i:<3} ({bf.index_a:>3}, {bf.index_b:>3})  {bf.label():<8} W={fmt_cplx(bf.twiddle, 4)}")
