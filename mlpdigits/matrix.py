"""A dense two-dimensional matrix of floats."""

from __future__ import annotations

import math
import struct
import sys
from dataclasses import dataclass
from typing import BinaryIO, Iterable, TextIO

OUT_OF_RANGE_MSG = "Matrix indices are out of range."
MULT_DIM_MSG = "Matrix dimensions must be compatible for multiplication."
ADD_DIM_MSG = "Matrix dimensions must match for addition."
NEG_DIM_MSG = "Rows and columns must be positive integers."
ISTREAM_MSG = "Failed to read the input stream."

PRINT_THRESHOLD = 0.1
EPSILON = 1e-10

_FLOAT = struct.Struct("=f")


@dataclass(frozen=True)
class MatrixDims:
    """The shape of a matrix."""

    rows: int
    cols: int


class Matrix:
    """A rows x cols matrix of floats, zero-initialised."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int = 1, cols: int = 1) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(NEG_DIM_MSG)
        self._rows = rows
        self._cols = cols
        self._data = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        data = [[float(value) for value in row] for row in rows]
        if not data or not data[0]:
            raise ValueError(NEG_DIM_MSG)
        width = len(data[0])
        if any(len(row) != width for row in data):
            raise ValueError("All rows must have the same length.")
        matrix = cls(len(data), width)
        matrix._data = data
        return matrix

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def dims(self) -> MatrixDims:
        return MatrixDims(self._rows, self._cols)

    def _values(self) -> Iterable[float]:
        for row in self._data:
            yield from row

    def transpose(self) -> Matrix:
        """Transpose in place and return self."""
        self._data = [list(column) for column in zip(*self._data)]
        self._rows, self._cols = self._cols, self._rows
        return self

    def vectorize(self) -> Matrix:
        """Reshape in place into a single column, row by row, and return self."""
        self._data = [[value] for value in self._values()]
        self._rows, self._cols = self._rows * self._cols, 1
        return self

    def plain_print(self, file: TextIO | None = None) -> None:
        """Write every element, space separated, one matrix row per line."""
        out = sys.stdout if file is None else file
        for row in self._data:
            out.write("".join(f"{value:g} " for value in row) + "\n")

    def dot(self, other: Matrix) -> Matrix:
        """Element-wise product."""
        if self.dims != other.dims:
            raise ValueError(MULT_DIM_MSG)
        result = Matrix(self._rows, self._cols)
        result._data = [
            [a * b for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._data, other._data)
        ]
        return result

    def norm(self) -> float:
        """Frobenius norm."""
        return math.sqrt(sum(value * value for value in self._values()))

    def rref(self) -> Matrix:
        """Return the reduced row echelon form as a new matrix."""
        result = self.copy()
        data = result._data
        row_count, col_count = result._rows, result._cols
        lead = 0
        for row in range(row_count):
            if col_count <= lead:
                break
            i = row
            while abs(data[i][lead]) < EPSILON:
                i += 1
                if i == row_count:
                    i = row
                    lead += 1
                    if lead == col_count:
                        return result
            data[i], data[row] = data[row], data[i]
            scale = 1.0 / data[row][lead]
            data[row] = [value * scale for value in data[row]]
            pivot_row = data[row]
            for j, other in enumerate(data):
                if j != row:
                    factor = -other[lead]
                    data[j] = [a + factor * b for a, b in zip(other, pivot_row)]
            lead += 1
        return result

    def argmax(self) -> int:
        """Row-major index of the first largest element."""
        best_index = 0
        best_value = self._data[0][0]
        for index, value in enumerate(self._values()):
            if value > best_value:
                best_index, best_value = index, value
        return best_index

    def sum(self) -> float:
        return sum(self._values())

    def copy(self) -> Matrix:
        result = Matrix(self._rows, self._cols)
        result._data = [list(row) for row in self._data]
        return result

    def tolist(self) -> list[list[float]]:
        return [list(row) for row in self._data]

    def read(self, stream: BinaryIO) -> Matrix:
        """Fill the matrix row by row from native 32-bit floats; return self."""
        for row in self._data:
            for j in range(self._cols):
                chunk = stream.read(_FLOAT.size)
                if chunk is None or len(chunk) != _FLOAT.size:
                    raise ValueError(ISTREAM_MSG)
                row[j] = _FLOAT.unpack(chunk)[0]
        return self

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.copy().__iadd__(other)

    def __iadd__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.dims != other.dims:
            raise ValueError(ADD_DIM_MSG)
        self._data = [
            [a + b for a, b in zip(mine, theirs)]
            for mine, theirs in zip(self._data, other._data)
        ]
        return self

    def __mul__(self, other: Matrix | float) -> Matrix:
        if isinstance(other, Matrix):
            if self._cols != other._rows:
                raise ValueError(MULT_DIM_MSG)
            columns = list(zip(*other._data))
            result = Matrix(self._rows, other._cols)
            result._data = [
                [sum(a * b for a, b in zip(row, column)) for column in columns]
                for row in self._data
            ]
            return result
        if isinstance(other, (int, float)):
            result = Matrix(self._rows, self._cols)
            result._data = [[value * other for value in row] for row in self._data]
            return result
        return NotImplemented

    def __rmul__(self, scalar: float) -> Matrix:
        if isinstance(scalar, (int, float)):
            return self.__mul__(scalar)
        return NotImplemented

    def _locate(self, key: int | tuple[int, int]) -> tuple[int, int]:
        if isinstance(key, tuple):
            row, col = key
            if not (0 <= row < self._rows and 0 <= col < self._cols):
                raise IndexError(OUT_OF_RANGE_MSG)
            return row, col
        if not 0 <= key < self._rows * self._cols:
            raise IndexError(OUT_OF_RANGE_MSG)
        return divmod(key, self._cols)

    def __getitem__(self, key: int | tuple[int, int]) -> float:
        row, col = self._locate(key)
        return self._data[row][col]

    def __setitem__(self, key: int | tuple[int, int], value: float) -> None:
        row, col = self._locate(key)
        self._data[row][col] = float(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dims == other.dims and self._data == other._data

    def __str__(self) -> str:
        return "".join(
            "".join("**" if value > PRINT_THRESHOLD else "  " for value in row) + "\n"
            for row in self._data
        )

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"