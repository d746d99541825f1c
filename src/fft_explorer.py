#!/usr/bin/env python3
"""
fft_explorer.py
Recompute pipeline behind the explorer view: config -> signal -> {DFT, staged FFT} -> op counts + timings.
Stateless: a replay cursor, if any, lives in the caller.
"""
import argparse
from dataclasses import dataclass
import os
import sys
import traceback
from typing import Dict, Sequence

import numpy as np

from bench_fft import DEFAULT_TRIALS, OpCounts, benchmark, speedup_factor, theoretical_op_counts
from colorizer import PALETTE, colorize, inject_colors_into
from cplx_math import DEFAULT_TOL
from fft_core import ArrC128, FFTStages, compute_dft, compute_staged_fft, energy, max_abs_error, reference_fft
from helpers import ms2str, print_ascii_bars, print_butterflies, print_stage_table
from sig_gen import SignalConfig, SignalPreset, generate_signal, validate_n
# --- color names for IDE/static analysis suppress warnings --------------------
GREEN: str; RED: str; YELLOW: str; GRAY: str; CYAN: str
RESET: str; WARN: str; ERR: str; INFO: str; DBG: str
inject_colors_into(globals())


@dataclass(frozen=True)
class Analysis:
    cfg: SignalConfig
    signal: ArrC128
    dft: ArrC128
    fft: FFTStages
    ops: Dict[str, OpCounts]
    dft_ms: float
    fft_ms: float

    @property
    def spectrum(self) -> ArrC128:
        return self.fft.spectrum

    @property
    def dft_fft_err(self) -> float:
        return max_abs_error(self.fft.spectrum, self.dft)


def analyze(cfg: SignalConfig, trials: int = DEFAULT_TRIALS) -> Analysis:
    x = generate_signal(cfg)
    fs = compute_staged_fft(x)
    return Analysis(
        cfg=cfg,
        signal=x,
        dft=compute_dft(x),
        fft=fs,
        ops=theoretical_op_counts(cfg.N),
        dft_ms=benchmark(x, compute_dft, trials),
        fft_ms=benchmark(x, compute_staged_fft, trials),
    )


def verify(an: Analysis, tol: float = DEFAULT_TOL) -> bool:
    """
    Final FFT stage vs DFT vs library FFT. Tolerance scales with signal energy
    so large amplitudes do not fail on rounding alone.
    """
    scale = max(1.0, float(np.sqrt(energy(an.signal))))
    ref = reference_fft(an.signal)
    return (max_abs_error(an.spectrum, an.dft) <= tol * scale
            and max_abs_error(an.spectrum, ref) <= tol * scale)


def print_report(an: Analysis, show_stages: bool = False, show_bfs: bool = False, show_phase: bool = False) -> None:
    N = an.cfg.N
    dft_ops, fft_ops = an.ops["dft"], an.ops["fft"]

    print(f"{INFO} Config: {YELLOW}{an.cfg.to_str()}{RESET}")
    print(f"{INFO} Stages: {colorize(an.fft.n_stages)}, butterflies/stage: {colorize(N // 2)}")
    print(f"  {PALETTE.dft}DFT{PALETTE.reset}  mults={dft_ops.mults:>8_} adds={dft_ops.adds:>8_}  t={ms2str(an.dft_ms)}")
    print(f"  {PALETTE.fft}FFT{PALETTE.reset}  mults={fft_ops.mults:>8_} adds={fft_ops.adds:>8_}  t={ms2str(an.fft_ms)}")
    print(f"  Efficiency: {speedup_factor(N):.1f}x (theoretical ops)")

    ok = verify(an)
    tag = INFO if ok else WARN
    print(f"{tag} FFT vs DFT max |err| = {an.dft_fft_err:.3e}  {colorize(ok)}")

    if show_stages:
        print()
        print_stage_table(an.fft, an.signal)
    if show_bfs:
        print()
        print_butterflies(an.fft.butterflies)
    print_ascii_bars(an.spectrum, label="arg X[k]" if show_phase else "|X[k]|", show_phase=show_phase)


def _build_cli() -> argparse.ArgumentParser:
    dflt = SignalConfig()
    p = argparse.ArgumentParser(
        prog="FFT Explorer",
        description="Radix-2 DIT FFT explorer: staged FFT vs direct DFT with op counts and timings.",
    )
    p.add_argument("-n", "--N", dest="N", type=int, default=dflt.N, help=f"Sample count, power of two. Default: {dflt.N}")
    p.add_argument("--preset", type=SignalPreset, default=dflt.preset, choices=list(SignalPreset),
                   help=f"Signal preset. Default: '{dflt.preset.value}'")
    p.add_argument("--f1", type=float, default=dflt.f1)
    p.add_argument("--a1", type=float, default=dflt.a1)
    p.add_argument("--p1", type=float, default=dflt.p1)
    p.add_argument("--f2", type=float, default=dflt.f2)
    p.add_argument("--a2", type=float, default=dflt.a2)
    p.add_argument("--p2", type=float, default=dflt.p2)
    p.add_argument("--seed", type=int, default=None, help="Seed for 'Random Noise'. Default: unseeded")
    p.add_argument("--trials", type=int, default=DEFAULT_TRIALS, help=f"Benchmark trials (median). Default: {DEFAULT_TRIALS}")
    p.add_argument("--stages", action="store_true", help="Print every stage buffer")
    p.add_argument("--butterflies", action="store_true", help="Print butterfly records per stage")
    p.add_argument("--phase", action="store_true", help="Show phase instead of magnitude")
    p.add_argument("--unbounded", action="store_true", help="Allow N beyond the visualisation set")
    return p


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_cli().parse_args(argv)
    try:
        validate_n(args.N, bounded=not args.unbounded)
        cfg = SignalConfig(N=args.N, preset=args.preset,
                           f1=args.f1, a1=args.a1, p1=args.p1,
                           f2=args.f2, a2=args.a2, p2=args.p2, seed=args.seed)
        an = analyze(cfg, trials=args.trials)
        print_report(an, show_stages=args.stages, show_bfs=args.butterflies, show_phase=args.phase)
    except KeyboardInterrupt:
        return 130
    except ValueError as e:
        print(f"{ERR} {e}")
        return 2
    except Exception as e:
        print("-" * 32)
        traceback.print_exc()
        print("-" * 32)
        print(f"{ERR} Unhandled exception: {GRAY}{e}{RESET}")
        return 1
    return 0


if __name__ == "__main__":
    os.system("")  # Colorizing 'on'
    sys.exit(main())
