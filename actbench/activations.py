"""
Activation functions and their derivatives, generic over NumPy dtypes

Every function takes a NumPy scalar or array of some dtype T and returns the
same shape in T. Transcendentals are evaluated in float64 and converted back
with ``actbench.domain.convert``, so integer representations truncate
(sigmoid of an int8 is 0 or 1). That divergence is part of what the
benchmark shows and is kept as is.
"""

from collections import OrderedDict
from typing import Callable, Dict, Tuple

import numpy as np

from actbench.domain import convert, is_integer_dtype


LEAK = 0.01


def _unwrap(out, x):
    """Give back a scalar when ``x`` was a scalar"""
    return out if np.ndim(x) else out[()]


def _like(result, x):
    """Convert ``result`` to the dtype and scalar-ness of ``x``, copying only
    when the dtype differs"""
    return _unwrap(convert(result, np.result_type(x)), x)


def _as_float(x) -> np.ndarray:
    return np.asarray(x, dtype=np.float64)


def _zero(x):
    return np.result_type(x).type(0)


def _one(x):
    return np.result_type(x).type(1)


def _sigmoid64(x) -> np.ndarray:
    with np.errstate(over="ignore"):
        return 1.0 / (1.0 + np.exp(-_as_float(x)))


# Forward activations

def relu(x):
    return _unwrap(np.where(x > 0, x, _zero(x)), x)


def sigmoid(x):
    return _like(_sigmoid64(x), x)


def tanh(x):
    return _like(np.tanh(_as_float(x)), x)


def leaky_relu(x):
    # Only the negative branch goes through float64; wide unsigned values
    # would lose precision otherwise.
    leaked = convert(LEAK * _as_float(x), np.result_type(x))
    return _unwrap(np.where(x > 0, x, leaked), x)


def elu(x):
    # expm1 of min(x, 0) keeps large positive inputs from overflowing
    negative = convert(np.expm1(np.minimum(_as_float(x), 0.0)), np.result_type(x))
    return _unwrap(np.where(x >= 0, x, negative), x)


def linear(x):
    # Returns its input untouched, so a vectorized sweep costs one call
    return x


# Derivatives

def d_relu(x):
    return _like(x > 0, x)


def d_sigmoid(x):
    s = _sigmoid64(x)
    return _like(s * (1.0 - s), x)


def d_tanh(x):
    t = np.tanh(_as_float(x))
    return _like(1.0 - t * t, x)


def d_leaky_relu(x):
    """1 for positive x, otherwise 1/100 in T's own division.

    Integer dtypes floor-divide (slope 0), float dtypes true-divide (0.01).
    """
    one = _one(x)
    hundred = np.result_type(x).type(100)
    if is_integer_dtype(np.result_type(x)):
        slope = one // hundred
    else:
        slope = one / hundred
    return _unwrap(np.where(x > 0, one, slope), x)


def d_elu(x):
    negative = convert(np.exp(np.minimum(_as_float(x), 0.0)), np.result_type(x))
    return _unwrap(np.where(x >= 0, _one(x), negative), x)


def d_linear(x):
    return _unwrap(np.ones_like(x), x)


# Table column order
FUNCTIONS: Dict[str, Callable] = OrderedDict([
    ("ReLU", relu),
    ("Sigmoid", sigmoid),
    ("Tanh", tanh),
    ("LeakyReLU", leaky_relu),
    ("ELU", elu),
    ("Linear", linear),
    ("dReLU", d_relu),
    ("dSigmoid", d_sigmoid),
    ("dTanh", d_tanh),
    ("dLeakyReLU", d_leaky_relu),
    ("dELU", d_elu),
    ("dLinear", d_linear),
])

FUNCTION_NAMES: Tuple[str, ...] = tuple(FUNCTIONS)
