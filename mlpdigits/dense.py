"""A fully connected network layer."""

from __future__ import annotations

from dataclasses import dataclass

from mlpdigits.activation import ActivationFunction
from mlpdigits.matrix import Matrix

DENSE_DIM_MSG = "Input dimension does not match the layer weights."


@dataclass
class Dense:
    """A layer computing activation(weights * input + bias)."""

    weights: Matrix
    bias: Matrix
    activation: ActivationFunction

    def __call__(self, input: Matrix) -> Matrix:  # noqa: A002
        """Apply the layer to a column vector."""
        if input.rows != self.weights.cols:
            raise ValueError(DENSE_DIM_MSG)
        output = self.weights * input
        output += self.bias
        return self.activation(output)