"""
Input domain for the activation benchmark

Builds the canonical float64 sample sequence once and converts it into each
of the twelve numeric representations the table compares.

Conversion rule (used for the domain and for every function result):
    float -> integer   truncate toward zero, then wrap modulo 2**bits
                       (two's complement), so -2.0 -> uint8 254
    integer -> integer NumPy's modular cast
    anything -> float  ordinary precision loss
"""

from dataclasses import dataclass
from typing import Tuple

import numpy as np


SAMPLE_COUNT = 10_000_000
LOWER_BOUND = -10.0
UPPER_BOUND = 10.0


def is_integer_dtype(dtype) -> bool:
    """True for signed and unsigned integer dtypes"""
    return np.dtype(dtype).kind in "iu"


@dataclass(frozen=True)
class Representation:
    """A named numeric type the benchmark runs under"""
    name: str
    dtype: np.dtype

    @property
    def is_integer(self) -> bool:
        return is_integer_dtype(self.dtype)


def _rep(name: str, dtype) -> Representation:
    return Representation(name, np.dtype(dtype))


# Table order. "int"/"uint" are the platform's pointer-sized integers.
REPRESENTATIONS: Tuple[Representation, ...] = (
    _rep("int", np.intp),
    _rep("int8", np.int8),
    _rep("int16", np.int16),
    _rep("int32", np.int32),
    _rep("int64", np.int64),
    _rep("uint", np.uintp),
    _rep("uint8", np.uint8),
    _rep("uint16", np.uint16),
    _rep("uint32", np.uint32),
    _rep("uint64", np.uint64),
    _rep("float32", np.float32),
    _rep("float64", np.float64),
)


def generate_domain(
    sample_count: int = SAMPLE_COUNT,
    lower: float = LOWER_BOUND,
    upper: float = UPPER_BOUND,
) -> np.ndarray:
    """Evenly spaced float64 samples starting at ``lower``.

    Each sample is the previous one plus the step, accumulated in order, so
    the sequence stops one step short of ``upper``.

    Examples:
        generate_domain(5) -> [-10., -6., -2., 2., 6.]
    """
    if sample_count < 1:
        raise ValueError(f"sample_count must be positive, got {sample_count}")
    if not upper > lower:
        raise ValueError(f"Empty interval: [{lower}, {upper})")

    step = (upper - lower) / sample_count
    increments = np.full(sample_count, step, dtype=np.float64)
    increments[0] = lower
    return np.add.accumulate(increments)


def convert(values, dtype) -> np.ndarray:
    """Convert ``values`` into ``dtype`` using the module's conversion rule.

    Returns ``values`` itself when it already has ``dtype``.
    """
    dtype = np.dtype(dtype)
    values = np.asarray(values)
    if is_integer_dtype(dtype) and values.dtype.kind == "f":
        # Out-of-range float -> int casts are undefined in C, go through int64
        values = np.trunc(values).astype(np.int64)
    return values.astype(dtype, copy=False)


def cast_domain(canonical: np.ndarray, representation: Representation) -> np.ndarray:
    """Read-only copy of the canonical domain in ``representation``"""
    values = convert(canonical, representation.dtype)
    if np.shares_memory(values, canonical):
        values = values.copy()
    values.flags.writeable = False
    return values
