"""Element-wise activation functions for network layers."""

from __future__ import annotations

import math
from typing import Callable

from mlpdigits.matrix import Matrix

ActivationFunction = Callable[[Matrix], Matrix]


def relu(matrix: Matrix) -> Matrix:
    """Return a new matrix with every negative element replaced by zero."""
    return Matrix.from_rows(
        [max(0.0, value) for value in row] for row in matrix.tolist()
    )


def softmax(matrix: Matrix) -> Matrix:
    """Return a new matrix of exponentials normalised over all elements."""
    rows = matrix.tolist()
    peak = max(max(row) for row in rows)
    exps = [[math.exp(value - peak) for value in row] for row in rows]
    total = sum(sum(row) for row in exps)
    return Matrix.from_rows([value / total for value in row] for row in exps)