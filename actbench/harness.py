"""
Benchmark harness: times every activation over every representation

For each representation the canonical domain is converted, bound to the
twelve functions as an ActivationSuite, swept once per function, and printed
as one table row. Suites are built and dropped one at a time.

Table layout: the type name padded to 8, then " | ", then twelve cells each
padded to 10 and followed by a one-space gutter, so every cell occupies 11
characters and every line is 142 wide. The separator stays 130 dashes.

The default sweep is one vectorized call per function. Linear returns its
input untouched, so its column measures call overhead only and does not grow
with the sample count; run with per_element=True to see a per-value cost.

Usage:
    python benchmarks/activation_types.py
    actbench
"""

import sys
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Mapping, Sequence, TextIO, Tuple

import numpy as np

from actbench.activations import FUNCTIONS, FUNCTION_NAMES
from actbench.domain import (
    LOWER_BOUND,
    REPRESENTATIONS,
    SAMPLE_COUNT,
    UPPER_BOUND,
    Representation,
    cast_domain,
    generate_domain,
)


NAME_WIDTH = 8
COLUMN_WIDTH = 10
COLUMN_GAP = " "
SEPARATOR_WIDTH = 130
SEPARATOR = "-" * SEPARATOR_WIDTH


@dataclass(frozen=True)
class ActivationSuite:
    """One representation's values bound to the twelve functions"""
    representation: Representation
    values: np.ndarray
    functions: Mapping[str, Callable]

    @property
    def name(self) -> str:
        return self.representation.name


def build_suite(representation: Representation, canonical: np.ndarray) -> ActivationSuite:
    """Convert the canonical domain and bind it to every function"""
    return ActivationSuite(
        representation=representation,
        values=cast_domain(canonical, representation),
        functions=FUNCTIONS,
    )


def time_sweep(fn: Callable, values: np.ndarray, per_element: bool = False) -> float:
    """Seconds taken to apply ``fn`` to every element of ``values`` once.

    The default sweep is a single vectorized call. With ``per_element`` the
    function is called on each scalar in a Python loop instead.
    """
    if per_element:
        start = time.perf_counter()
        for value in values:
            fn(value)
        end = time.perf_counter()
    else:
        start = time.perf_counter()
        fn(values)
        end = time.perf_counter()
    return end - start


def time_suite(suite: ActivationSuite, per_element: bool = False) -> Dict[str, float]:
    """Timing result for one suite, in column order"""
    return {
        name: time_sweep(fn, suite.values, per_element)
        for name, fn in suite.functions.items()
    }


def format_duration(seconds: float) -> str:
    """Format a duration as a human-readable string.

    Examples:
        0.0123 -> "12.30ms"
        45e-9  -> "45.00ns"
    """
    ns = seconds * 1e9
    if ns >= 1_000_000_000:
        return f"{ns / 1_000_000_000:.2f}s"
    elif ns >= 1_000_000:
        return f"{ns / 1_000_000:.2f}ms"
    elif ns >= 1_000:
        return f"{ns / 1_000:.2f}µs"
    else:
        return f"{ns:.2f}ns"


def _line(name: str, cells: Sequence[str]) -> str:
    columns = "".join(f"{cell:<{COLUMN_WIDTH}}{COLUMN_GAP}" for cell in cells)
    return f"{name:<{NAME_WIDTH}} | {columns}"


def format_header() -> str:
    return _line("Type", FUNCTION_NAMES)


def format_row(name: str, timings: Mapping[str, float]) -> str:
    return _line(name, [format_duration(timings[fn]) for fn in FUNCTION_NAMES])


class BenchmarkRunner:
    """Run the activation sweep across representations"""

    def __init__(
        self,
        sample_count: int = SAMPLE_COUNT,
        lower: float = LOWER_BOUND,
        upper: float = UPPER_BOUND,
        representations: Sequence[Representation] = REPRESENTATIONS,
        per_element: bool = False,
    ):
        """
        Args:
            sample_count: Number of samples in the domain
            lower: Inclusive left end of the domain
            upper: Right end of the domain (not reached)
            representations: Numeric types to benchmark, in row order
            per_element: Call each function per scalar instead of per array
        """
        self.sample_count = sample_count
        self.lower = lower
        self.upper = upper
        self.representations = tuple(representations)
        self.per_element = per_element

    def run(self, stream: TextIO = None) -> List[Tuple[str, Dict[str, float]]]:
        """Print the header, separator and one row per representation"""
        if stream is None:
            stream = sys.stdout
        canonical = generate_domain(self.sample_count, self.lower, self.upper)

        print(format_header(), file=stream)
        print(SEPARATOR, file=stream)

        rows = []
        for representation in self.representations:
            suite = build_suite(representation, canonical)
            timings = time_suite(suite, self.per_element)
            print(format_row(suite.name, timings), file=stream)
            rows.append((suite.name, timings))
            del suite

        return rows


def main() -> int:
    """Main entry point"""
    runner = BenchmarkRunner()
    print(
        f"Benchmarking {len(FUNCTION_NAMES)} functions x "
        f"{len(runner.representations)} types over {runner.sample_count:,} "
        f"samples in [{runner.lower:g}, {runner.upper:g})",
        file=sys.stderr,
    )

    runner.run()

    print("✅ Benchmark complete", file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
