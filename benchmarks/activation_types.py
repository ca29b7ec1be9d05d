#!/usr/bin/env python3
"""
Activation Function Cost Across Numeric Types

Times ReLU, Sigmoid, Tanh, LeakyReLU, ELU, Linear and their derivatives over
10,000,000 samples in [-10, 10), converted into each of twelve NumPy dtypes
(int, int8..int64, uint, uint8..uint64, float32, float64), and prints one
table row per dtype.

Usage:
    python benchmarks/activation_types.py

Requirements:
    uv pip install -e .
"""

import pathlib
import sys

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from actbench.harness import main


if __name__ == "__main__":
    raise SystemExit(main())
