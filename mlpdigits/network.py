"""A four-layer perceptron that classifies 28x28 digit images."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from mlpdigits.activation import relu, softmax
from mlpdigits.dense import Dense
from mlpdigits.matrix import Matrix, MatrixDims

MLP_SIZE = 4

ARR_SIZE_MSG = "Weights and biases arrays must have size 4."
WEIGHTS_DIM_MSG = "Input dimension does not match weights."

IMG_DIMS = MatrixDims(28, 28)
WEIGHTS_DIMS = (
    MatrixDims(128, 784),
    MatrixDims(64, 128),
    MatrixDims(20, 64),
    MatrixDims(10, 20),
)
BIAS_DIMS = (
    MatrixDims(128, 1),
    MatrixDims(64, 1),
    MatrixDims(20, 1),
    MatrixDims(10, 1),
)


@dataclass(frozen=True)
class Digit:
    """A digit identified by the network with its probability."""

    value: int
    probability: float


class MlpNetwork:
    """Three ReLU layers followed by a softmax layer."""

    def __init__(self, weights: Sequence[Matrix], biases: Sequence[Matrix]) -> None:
        if len(weights) != MLP_SIZE or len(biases) != MLP_SIZE:
            raise ValueError(ARR_SIZE_MSG)
        for weight, bias, weight_dims, bias_dims in zip(
            weights, biases, WEIGHTS_DIMS, BIAS_DIMS
        ):
            if weight.dims != weight_dims or bias.dims != bias_dims:
                raise ValueError(WEIGHTS_DIM_MSG)
        activations = (relu, relu, relu, softmax)
        self._layers = tuple(
            Dense(weight.copy(), bias.copy(), activation)
            for weight, bias, activation in zip(weights, biases, activations)
        )

    def __call__(self, image: Matrix) -> Digit:
        """Classify a 784x1 column vector of pixel values."""
        result = image
        for layer in self._layers:
            result = layer(result)
        best_index = 0
        best_value = result[0, 0]
        for index in range(1, result.rows):
            if result[index, 0] > best_value:
                best_index, best_value = index, result[index, 0]
        return Digit(best_index, best_value)