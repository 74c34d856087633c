# mlpdigits

A small pure-Python package for recognising handwritten digits with a
fixed four-layer multilayer perceptron. It has no dependencies of its own.

It has two parts:

- `mlpdigits.matrix`: `Matrix`, a dense matrix of floats, and
  `MatrixDims`, a shape. `Matrix` supports addition (`+`, `+=`), matrix
  and scalar multiplication (`*`), element-wise product (`dot`),
  `transpose`, `vectorize`, Frobenius `norm`, reduced row echelon form
  (`rref`), `argmax`, `sum`, `copy`, `tolist`, `plain_print`, and `read`
  for loading raw native 32-bit floats from a binary stream.
- `mlpdigits.activation`, `mlpdigits.dense` and `mlpdigits.network`: the
  `relu` and `softmax` activations, a `Dense` layer and `MlpNetwork`,
  which returns a `Digit` with a `value` and a `probability`.

## Installation

```
pip install .
```

## Matrices

```python
from mlpdigits.matrix import Matrix

m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
print(m.rows, m.cols, m.dims)
print((m * m).tolist())      # matrix product
print((2.0 * m).tolist())    # scalar product
print(m.dot(m).tolist())     # element-wise product
print(m[1, 0], m[3])         # (row, col) indexing and row-major flat indexing
m.transpose()                # works in place and returns the matrix
print(m.rref().tolist())     # returns a new matrix
m.plain_print()              # every value, space separated, one row per line
print(m)                     # "**" for cells above 0.1, blanks for the rest
```

`Matrix(rows, cols)` starts filled with zeros; `Matrix()` is 1x1.
`transpose` and `vectorize` change the matrix itself; `vectorize` turns
it into a single column, row by row.

A bad index raises `IndexError`. A size mismatch, a size that is not
positive, or a binary stream that runs out before the matrix is full
raises `ValueError`.

## Classifying a digit

The network takes four weight matrices with shapes 128x784, 64x128,
20x64 and 10x20, and four bias column vectors with 128, 64, 20 and 10
rows. The first three layers use ReLU and the last one uses softmax.
The input is a 784x1 column vector; the answer is the index of the
largest output and its probability.

```python
from mlpdigits.matrix import Matrix
from mlpdigits.network import MlpNetwork

weights = [Matrix(128, 784), Matrix(64, 128), Matrix(20, 64), Matrix(10, 20)]
biases = [Matrix(128, 1), Matrix(64, 1), Matrix(20, 1), Matrix(10, 1)]
with open("w1", "rb") as fh:
    weights[0].read(fh)
# ... read the remaining weights and biases in the same way

network = MlpNetwork(weights, biases)

image = Matrix(28, 28)
with open("image", "rb") as fh:
    image.read(fh)
result = network(image.vectorize())
print(result.value, result.probability)
```

`MlpNetwork` raises `ValueError` if it is not given exactly four weights
and four biases, or if any of them has the wrong shape. It keeps copies
of the matrices it is given.

## What it does not do

The package has no command-line program: loading weight and image files
and printing the result is left to the caller, as in the example above.
It does not train networks, and the layer sizes of `MlpNetwork` are fixed.

## Running the tests

```
pip install .[test]
pytest
```