import math

import pytest

from mlpdigits.activation import relu, softmax
from mlpdigits.matrix import Matrix


def test_relu_clamps_negatives_to_zero():
    m = Matrix.from_rows([[-1.0, 2.0], [0.0, -3.5]])
    assert relu(m).tolist() == [[0.0, 2.0], [0.0, 0.0]]


def test_relu_keeps_shape_and_leaves_input_untouched():
    m = Matrix.from_rows([[-1.0, 2.0, 3.0]])
    result = relu(m)
    assert (result.rows, result.cols) == (1, 3)
    assert m.tolist() == [[-1.0, 2.0, 3.0]]


def test_relu_is_idempotent():
    m = Matrix.from_rows([[-4.0], [5.5], [0.25]])
    assert relu(relu(m)) == relu(m)


def test_softmax_sums_to_one():
    m = Matrix.from_rows([[1.0, -2.0], [3.0, 0.5], [7.0, -1.0]])
    assert softmax(m).sum() == pytest.approx(1.0)


def test_softmax_preserves_argmax():
    m = Matrix.from_rows([[0.3], [4.0], [-2.0], [1.0]])
    assert softmax(m).argmax() == m.argmax()


def test_softmax_uniform_for_equal_values():
    m = Matrix.from_rows([[1.0, 1.0], [1.0, 1.0]])
    for value in softmax(m).tolist()[0] + softmax(m).tolist()[1]:
        assert value == pytest.approx(0.25)


def test_softmax_handles_large_values_without_overflow():
    m = Matrix.from_rows([[1000.0, 1000.0]])
    result = softmax(m).tolist()[0]
    assert all(math.isfinite(v) for v in result)
    assert result[0] == pytest.approx(result[1])


def test_softmax_is_shift_invariant():
    m = Matrix.from_rows([[1.0], [2.0], [3.0]])
    shifted = m + Matrix.from_rows([[10.0], [10.0], [10.0]])
    for a, b in zip(softmax(m).tolist(), softmax(shifted).tolist()):
        assert a[0] == pytest.approx(b[0])


def test_softmax_values_are_positive_and_input_untouched():
    m = Matrix.from_rows([[-5.0, 0.0, 5.0]])
    result = softmax(m)
    assert all(v > 0 for v in result.tolist()[0])
    assert m.tolist() == [[-5.0, 0.0, 5.0]]