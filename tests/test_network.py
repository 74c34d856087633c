import pytest

from mlpdigits.activation import softmax
from mlpdigits.matrix import Matrix
from mlpdigits.network import BIAS_DIMS, WEIGHTS_DIMS, Digit, MlpNetwork


def _zero_params():
    weights = [Matrix(d.rows, d.cols) for d in WEIGHTS_DIMS]
    biases = [Matrix(d.rows, d.cols) for d in BIAS_DIMS]
    return weights, biases


def _pixel_chain():
    """Weights that route pixel 5 through the first unit of each layer."""
    weights, biases = _zero_params()
    weights[0][0, 5] = 1.0
    weights[1][0, 0] = 1.0
    weights[2][0, 0] = 1.0
    weights[3][3, 0] = 10.0
    return weights, biases


def test_zero_network_is_uniform_and_picks_first():
    net = MlpNetwork(*_zero_params())
    result = net(Matrix(784, 1))
    assert result.value == 0
    assert result.probability == pytest.approx(0.1)


def test_final_bias_decides_digit():
    weights, biases = _zero_params()
    biases[3][7, 0] = 5.0
    net = MlpNetwork(weights, biases)
    result = net(Matrix(784, 1))
    assert result.value == 7
    assert result.probability == pytest.approx(softmax(biases[3])[7, 0])


def test_positive_pixel_flows_through_layers():
    net = MlpNetwork(*_pixel_chain())
    image = Matrix(784, 1)
    image[5, 0] = 2.0
    result = net(image)
    assert result.value == 3
    assert 0.0 < result.probability <= 1.0


def test_relu_blocks_negative_pixel():
    net = MlpNetwork(*_pixel_chain())
    image = Matrix(784, 1)
    image[5, 0] = -2.0
    assert net(image).value == 0


def test_result_is_digit():
    weights, biases = _zero_params()
    biases[3][2, 0] = 100.0
    result = MlpNetwork(weights, biases)(Matrix(784, 1))
    assert result == Digit(2, result.probability)
    assert result.probability == pytest.approx(1.0)


def test_network_keeps_own_copy_of_parameters():
    weights, biases = _zero_params()
    net = MlpNetwork(weights, biases)
    biases[3][9, 0] = 50.0
    assert net(Matrix(784, 1)).value == 0


def test_wrong_weight_dims_raise():
    weights, biases = _zero_params()
    weights[1] = Matrix(64, 127)
    with pytest.raises(ValueError):
        MlpNetwork(weights, biases)


def test_wrong_bias_dims_raise():
    weights, biases = _zero_params()
    biases[2] = Matrix(21, 1)
    with pytest.raises(ValueError):
        MlpNetwork(weights, biases)


def test_wrong_number_of_layers_raises():
    weights, biases = _zero_params()
    with pytest.raises(ValueError):
        MlpNetwork(weights[:3], biases[:3])


def test_unvectorized_image_raises():
    net = MlpNetwork(*_zero_params())
    with pytest.raises(ValueError):
        net(Matrix(28, 28))