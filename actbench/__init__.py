"""
Activation function cost across numeric representations.

Times six neural-network activations and their derivatives over a fixed
domain converted into twelve NumPy dtypes, and prints a comparison table.
"""

from actbench.activations import FUNCTIONS, FUNCTION_NAMES
from actbench.domain import REPRESENTATIONS, Representation, convert, generate_domain
from actbench.harness import BenchmarkRunner, main

__all__ = [
    "BenchmarkRunner",
    "FUNCTIONS",
    "FUNCTION_NAMES",
    "REPRESENTATIONS",
    "Representation",
    "convert",
    "generate_domain",
    "main",
]
