#!/usr/bin/env python
"""
Time Matrix3 operations in their in-place and copying forms, next to numpy.

Usage:
    python scripts/benchmark.py
    python scripts/benchmark.py --iterations 200000
    python scripts/benchmark.py --ops prod inv
    python scripts/benchmark.py --no-numpy

Examples:
    python scripts/benchmark.py --iterations 50000 --repeat 5
"""

import argparse
import math
import sys
import timeit
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

# Add project paths for development
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from space3 import Matrix3, Vector3


# ANSI colors for output
RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"


def build_cases() -> Dict[str, List[Tuple[str, Callable[[], object]]]]:
    """Return benchmark cases grouped by operation name."""
    m = Matrix3.rot(Vector3(1, 2, 2).norm(), 0.7).mul(1.5)
    n = Matrix3.rot_x(0.3)
    u = Vector3(1, -2, 3)
    t = Vector3(0.5, 0.5, 0.5)

    m_np = m.to_numpy()
    n_np = n.to_numpy()
    u_np = np.array(list(u))
    t_np = np.array(list(t))

    # In-place cases keep their operand bounded: m . m^-1 and back
    m_inv = m.invc()
    scratch = m.clone()

    def prod_in_place():
        scratch.prod(n)
        scratch.prod(n.transc())

    def inv_in_place():
        scratch.inv()

    return {
        'prod': [
            ('prod', prod_in_place),
            ('prodc', lambda: m.prodc(n)),
            ('numpy @', lambda: m_np @ n_np),
        ],
        'inv': [
            ('inv', inv_in_place),
            ('invc', lambda: m.invc()),
            ('numpy inv', lambda: np.linalg.inv(m_np)),
        ],
        'at': [
            ('at', lambda: m_inv.at(m.at(u))),
            ('atc', lambda: m.atc(u)),
            ('numpy @ vec', lambda: m_np @ u_np),
        ],
        'affine': [
            ('affine', lambda: Matrix3.affine(m, t, u.clone())),
            ('numpy affine', lambda: m_np @ u_np + t_np),
        ],
        'pow': [
            ('powc(8)', lambda: m.powc(8)),
            ('numpy matrix_power', lambda: np.linalg.matrix_power(m_np, 8)),
        ],
        'det': [
            ('det', lambda: m.det()),
            ('numpy det', lambda: np.linalg.det(m_np)),
        ],
    }


def format_time(seconds: float) -> str:
    """Format a per-call duration."""
    ns = seconds * 1e9
    if ns < 1000:
        return f"{ns:8.1f} ns"
    return f"{ns / 1000:8.2f} us"


def run_case(fn: Callable[[], object], iterations: int, repeat: int) -> float:
    """Best per-call time over `repeat` runs."""
    timings = timeit.repeat(fn, number=iterations, repeat=repeat)
    return min(timings) / iterations


def print_group(name: str, results: List[Tuple[str, float]]) -> None:
    fastest = min(t for _, t in results)
    print(f"\n{BOLD}{CYAN}{name}{RESET}")
    for label, per_call in results:
        ratio = per_call / fastest
        color = GREEN if math.isclose(ratio, 1.0) else (YELLOW if ratio < 3.0 else DIM)
        print(f"  {label:<20} {format_time(per_call)}  {color}x{ratio:5.2f}{RESET}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark Matrix3 operations")
    parser.add_argument('--iterations', '-n', type=int, default=100000,
                        help='Calls per timing run (default: 100000)')
    parser.add_argument('--repeat', '-r', type=int, default=3,
                        help='Timing runs per case, the best is kept (default: 3)')
    parser.add_argument('--ops', nargs='+', default=None,
                        help='Subset of operations to run')
    parser.add_argument('--no-numpy', action='store_true',
                        help='Skip the numpy reference cases')
    args = parser.parse_args(argv)

    cases = build_cases()
    ops = args.ops or list(cases)
    unknown = [op for op in ops if op not in cases]
    if unknown:
        parser.error(f"Unknown operations: {', '.join(unknown)}. Choose from {', '.join(cases)}")

    print(f"{BOLD}Matrix3 benchmark{RESET} {DIM}({args.iterations} calls, best of {args.repeat}){RESET}")
    for op in ops:
        results = []
        for label, fn in cases[op]:
            if args.no_numpy and label.startswith('numpy'):
                continue
            results.append((label, run_case(fn, args.iterations, args.repeat)))
        print_group(op, results)
    return 0


if __name__ == '__main__':
    sys.exit(main())
