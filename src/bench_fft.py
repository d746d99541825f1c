# bench_fft.py
import argparse
import csv
from dataclasses import astuple, dataclass, fields
import math
from pathlib import Path
import sys
import traceback
from time import perf_counter
from typing import Any, Callable, Dict, List, Sequence

from tqdm import tqdm

from colorizer import inject_colors_into
from fft_core import ArrC128, compute_dft, compute_staged_fft
from sig_gen import SignalConfig, SignalPreset, generate_signal, validate_n
# --- color names for IDE/static analysis suppress warnings --------------------
GREEN: str; RED: str; YELLOW: str; GRAY: str; CYAN: str
RESET: str; WARN: str; ERR: str; INFO: str; DBG: str
inject_colors_into(globals())

DEFAULT_TRIALS = 5


@dataclass(frozen=True)
class OpCounts:
    mults: int
    adds: int

    @property
    def total(self) -> int:
        return self.mults + self.adds


def theoretical_op_counts(N: int) -> Dict[str, OpCounts]:
    """
    Closed-form counts, N power of two:
        DFT: N^2 mults, N(N-1) adds
        FFT: (N/2)log2N mults, N log2N adds
    """
    log_n = math.log2(N)
    return {
        "dft": OpCounts(mults=N * N, adds=N * (N - 1)),
        "fft": OpCounts(mults=round((N / 2) * log_n), adds=round(N * log_n)),
    }


def speedup_factor(N: int) -> float:
    ops = theoretical_op_counts(N)
    return ops["dft"].total / ops["fft"].total


def live_op_counts(N: int, active_stage: int, active_butterfly: int = -1) -> OpCounts:
    """
    Operations executed up to a replay cursor.
    active_stage == 0 -> bit reversal only. active_butterfly == -1 -> nothing of the active stage yet.
    Each butterfly costs 1 mult and 2 adds.
    """
    if active_stage <= 0:
        return OpCounts(0, 0)
    done_stages = active_stage - 1
    mults = done_stages * (N // 2)
    adds = done_stages * N
    if active_butterfly >= 0:
        mults += active_butterfly + 1
        adds += (active_butterfly + 1) * 2
    return OpCounts(mults, adds)


def median_of(samples: Sequence[float]) -> float:
    """Middle element after sort. Even count -> upper median, no interpolation."""
    if not samples:
        raise ValueError("median of empty sample set")
    xs = sorted(samples)
    return xs[len(xs) // 2]


def benchmark(x: ArrC128, fn: Callable[[ArrC128], Any], trials: int = DEFAULT_TRIALS) -> float:
    """Median wall-clock ms of `trials` calls; each timing brackets exactly one call."""
    if trials < 1:
        raise ValueError(f"trials must be >= 1, got {trials}")
    times_ms: List[float] = []
    for _ in range(trials):
        t0 = perf_counter()
        fn(x)
        t1 = perf_counter()
        times_ms.append((t1 - t0) * 1e3)
    return median_of(times_ms)


# =====================================================
# N sweep
# =====================================================

@dataclass(frozen=True)
class BenchRow:
    N: int
    dft_ms: float
    fft_ms: float
    dft_mults: int
    dft_adds: int
    fft_mults: int
    fft_adds: int

    @property
    def measured_speedup(self) -> float:
        return self.dft_ms / self.fft_ms if self.fft_ms > 0 else math.inf


def sweep(n_list: Sequence[int], cfg: SignalConfig, trials: int = DEFAULT_TRIALS, progress: bool = True) -> List[BenchRow]:
    rows: List[BenchRow] = []
    for N in tqdm(n_list, desc="Bench N", disable=not progress):
        x = generate_signal(cfg.with_n(N))
        ops = theoretical_op_counts(N)
        rows.append(BenchRow(
            N=N,
            dft_ms=benchmark(x, compute_dft, trials),
            fft_ms=benchmark(x, compute_staged_fft, trials),
            dft_mults=ops["dft"].mults, dft_adds=ops["dft"].adds,
            fft_mults=ops["fft"].mults, fft_adds=ops["fft"].adds,
        ))
    return rows


def save_sweep_csv(rows: Sequence[BenchRow], path: Path) -> None:
    with open(path, mode="w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow([fl.name for fl in fields(BenchRow)] + ["measured_speedup"])
        for r in rows:
            writer.writerow(list(astuple(r)) + [r.measured_speedup])


def _parse_int_list(s: str) -> list[int]:
    return [int(x.strip()) for x in s.split(",") if x.strip()]


def _build_cli() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="DFT vs staged FFT timing sweep over N")
    ap.add_argument("--n-list", type=str, default="2,4,8,16,32,64,128,256",
                    help="Comma separated power of two sizes")
    ap.add_argument("--preset", type=SignalPreset, default=SignalPreset.TWO_TONES,
                    choices=list(SignalPreset), help="Signal preset (display name)")
    ap.add_argument("--trials", type=int, default=DEFAULT_TRIALS)
    ap.add_argument("--seed", type=int, default=0)
    ap.add_argument("--csv", type=Path, default=None, help="Optional CSV output")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_cli().parse_args(argv)
    try:
        n_list = [validate_n(n) for n in _parse_int_list(args.n_list)]
        cfg = SignalConfig(preset=args.preset, seed=args.seed)
        print(f"{INFO} Sweep N={n_list} preset='{cfg.preset.value}' trials={args.trials}")

        rows = sweep(n_list, cfg, trials=args.trials)

        print("     N     dft_ms     fft_ms   meas_x   theo_x")
        print("------  ---------  ---------  -------  -------")
        for r in rows:
            print(f"{r.N:6d}  {r.dft_ms:9.4f}  {r.fft_ms:9.4f}  "
                  f"{r.measured_speedup:7.1f}  {speedup_factor(r.N):7.1f}")

        if args.csv is not None:
            save_sweep_csv(rows, args.csv)
            print(f"{INFO} Saved: {YELLOW}{args.csv}{RESET}")
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
    sys.exit(main())
