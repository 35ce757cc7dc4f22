################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Square matrices of size 2, 3 and 4

Matrices are row-major float64 numpy arrays of shape (N, N). Element (r, c)
is element ``r * N + c`` of elements(). Mutators compute into a scratch array
from snapshots of their operands, validate the result, and only then commit,
so a failing call leaves the matrix unchanged and aliasing such as
``m.premultiply(m)`` is safe.

Determinants and adjugates use closed forms per size rather than a general
decomposition. Products use numpy's matmul as the dense kernel.
"""

from __future__ import annotations

import logging
import math
from typing import ClassVar
from typing import Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from .errors import EmptyInputError
from .errors import InvalidArgumentError
from .errors import MatrixDimensionError
from .errors import MatrixIndexError
from .errors import NumericOverflowError
from .errors import SingularMatrixError
from .numeric import check_finite
from .numeric import check_scalar
from .numeric import check_tolerance
from .vector import Vector3


# Determinant magnitude below which inversion is refused
SINGULAR_DETERMINANT_EPS: float = 1e-13

_LOG: logging.Logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound="MatrixBase")


class MatrixBase:
    """Matrix operations shared by every size.

    Subclasses set SIZE and supply the closed-form _determinant() and
    _adjugate() for that size.
    """

    SIZE: ClassVar[int] = 0

    __slots__ = ("_data",)

    def __init__(self, *values: float) -> None:
        """Create a matrix from N*N row-major values, or the zero matrix."""
        self._data: NDArray[np.float64] = np.zeros((self.SIZE, self.SIZE), dtype=float)
        if values:
            self.set_elements(*values)

    @classmethod
    def zeros(cls: type[_M]) -> _M:
        """Return the zero matrix."""
        return cls()

    @classmethod
    def eye(cls: type[_M]) -> _M:
        """Return the identity matrix."""
        return cls().identity()

    @classmethod
    def from_array(
        cls: type[_M], values: Sequence[Sequence[float]] | NDArray[np.float64]
    ) -> _M:
        """Create a matrix from an (N, N) array-like."""
        array: NDArray[np.float64] = np.asarray(values, dtype=float)
        if array.shape != (cls.SIZE, cls.SIZE):
            raise MatrixDimensionError(
                f"{cls.__name__} needs shape {(cls.SIZE, cls.SIZE)}, got {array.shape}"
            )
        return cls(*array.reshape(-1).tolist())

    @staticmethod
    def linear_combination(*terms: tuple[MatrixBase, float]) -> MatrixBase:
        """Return sum(alpha * M) over (M, alpha) pairs.

        The result has the type of the first matrix.

        Raises:
            EmptyInputError: If no terms are given
            MatrixDimensionError: If the matrices differ in size
        """
        if not terms:
            raise EmptyInputError("array is of length 0")

        first: MatrixBase = terms[0][0]
        total: NDArray[np.float64] = np.zeros((first.SIZE, first.SIZE), dtype=float)

        matrix: MatrixBase
        alpha: float
        with np.errstate(over="ignore", invalid="ignore"):
            for matrix, alpha in terms:
                first._check_operand(matrix)
                if math.isnan(alpha):
                    raise InvalidArgumentError("linear combination weight is NaN")
                total = total + alpha * matrix._data

        result: MatrixBase = type(first)()
        return result._commit(total, "linear combination")

    def rows(self) -> int:
        return self.SIZE

    def cols(self) -> int:
        return self.SIZE

    def elements(self) -> tuple[float, ...]:
        """Return all elements in row-major order."""
        return tuple(float(value) for value in self._data.reshape(-1))

    def to_array(self) -> NDArray[np.float64]:
        """Return a copy of the elements as an (N, N) numpy array."""
        return self._data.copy()

    def copy(self: _M) -> _M:
        """Return an independent matrix with the same elements."""
        clone: _M = type(self)()
        clone._data[:, :] = self._data
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixBase) or other.SIZE != self.SIZE:
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    # Mutable, so instances are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: str = ", ".join(
            "[" + ", ".join(repr(float(value)) for value in row) + "]"
            for row in self._data
        )
        return f"{type(self).__name__}({rows})"

    def _check_index(self, i: int, j: int) -> None:
        if not (0 <= i < self.SIZE and 0 <= j < self.SIZE):
            raise MatrixIndexError(
                f"matrix indices ({i}, {j}) are out of range for "
                f"{self.SIZE}x{self.SIZE}"
            )

    def _check_operand(self, mat: MatrixBase) -> None:
        if not isinstance(mat, MatrixBase):
            raise TypeError(f"expected a matrix, got {type(mat).__name__}")
        if mat.SIZE != self.SIZE:
            raise MatrixDimensionError(
                f"matrix dimensions do not match: {self.SIZE}x{self.SIZE} "
                f"!= {mat.SIZE}x{mat.SIZE}"
            )

    def _commit(self: _M, values: NDArray[np.float64], name: str) -> _M:
        check_finite(values, name)
        self._data[:, :] = values
        return self

    #
    # Element access
    #

    def element_at(self, i: int, j: int) -> float:
        """Return the element at row i, column j."""
        self._check_index(i, j)
        return float(self._data[i, j])

    def set_element_at(self, i: int, j: int, value: float) -> None:
        """Set the element at row i, column j to a finite value."""
        self._check_index(i, j)
        if not math.isfinite(value):
            raise InvalidArgumentError(f"matrix element must be finite, got {value}")
        self._data[i, j] = value

    def set_elements(self: _M, *values: float) -> _M:
        """Set all elements from N*N row-major values."""
        if not values:
            raise EmptyInputError("array is of length 0")
        expected: int = self.SIZE * self.SIZE
        if len(values) != expected:
            raise MatrixDimensionError(
                f"{type(self).__name__} needs {expected} elements, got {len(values)}"
            )

        array: NDArray[np.float64] = np.array(values, dtype=float).reshape(
            (self.SIZE, self.SIZE)
        )
        if not np.all(np.isfinite(array)):
            raise InvalidArgumentError("matrix elements must be finite")
        self._data[:, :] = array
        return self

    #
    # In-place arithmetic
    #

    def identity(self: _M) -> _M:
        """Set this matrix to the identity."""
        self._data[:, :] = np.eye(self.SIZE, dtype=float)
        return self

    def scale(self: _M, z: float) -> _M:
        """Multiply every element by z."""
        factor: float = float(z)
        if math.isnan(factor):
            raise InvalidArgumentError("scale factor is NaN")
        if math.isinf(factor):
            raise NumericOverflowError("scale factor is infinite")
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = self._data * factor
        return self._commit(result, "scaled matrix")

    def add(self: _M, mat: MatrixBase) -> _M:
        """Add another matrix to this one."""
        self._check_operand(mat)
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = self._data + mat._data
        return self._commit(result, "matrix sum")

    def sub(self: _M, mat: MatrixBase) -> _M:
        """Subtract another matrix from this one."""
        self._check_operand(mat)
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = self._data - mat._data
        return self._commit(result, "matrix difference")

    def premultiply(self: _M, mat: MatrixBase) -> _M:
        """Replace this matrix with mat @ self."""
        self._check_operand(mat)
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = mat._data.copy() @ self._data.copy()
        return self._commit(result, "matrix product")

    def postmultiply(self: _M, mat: MatrixBase) -> _M:
        """Replace this matrix with self @ mat."""
        self._check_operand(mat)
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = self._data.copy() @ mat._data.copy()
        return self._commit(result, "matrix product")

    def transpose(self: _M) -> _M:
        """Transpose this matrix in place."""
        self._data[:, :] = self._data.T.copy()
        return self

    def invert(self: _M) -> _M:
        """Replace this matrix with its inverse.

        The inverse is the adjugate divided by the determinant.

        Raises:
            SingularMatrixError: If |det| < SINGULAR_DETERMINANT_EPS
        """
        det: float = self.determinant()
        if abs(det) < SINGULAR_DETERMINANT_EPS:
            _LOG.debug(
                "Refusing to invert %dx%d matrix, det=%g", self.SIZE, self.SIZE, det
            )
            raise SingularMatrixError(f"matrix is singular (det={det:g})")

        adjugate: NDArray[np.float64] = self._adjugate(self._data)
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = adjugate / det
        return self._commit(result, "inverse matrix")

    #
    # Queries
    #

    def determinant(self) -> float:
        """Return the determinant."""
        return check_scalar(self._determinant(self._data), "determinant")

    def adjoint(self: _M) -> _M:
        """Return the adjugate (classical adjoint) as a new matrix."""
        result: _M = type(self)()
        return result._commit(self._adjugate(self._data), "adjugate matrix")

    def is_singular(self) -> bool:
        """Return True if the determinant is exactly zero."""
        return self.determinant() == 0.0

    def is_near_singular(self, tol: float) -> bool:
        """Return True if |det| <= tol."""
        check_tolerance(tol)
        return abs(self.determinant()) <= tol

    def is_equal_to(self, mat: MatrixBase, tol: float) -> bool:
        """Return True if every element differs by at most tol."""
        check_tolerance(tol)
        self._check_operand(mat)
        with np.errstate(over="ignore", invalid="ignore"):
            diff: NDArray[np.float64] = np.abs(self._data - mat._data)
        return bool(np.all(diff <= tol))

    @staticmethod
    def _determinant(a: NDArray[np.float64]) -> float:
        raise NotImplementedError

    @staticmethod
    def _adjugate(a: NDArray[np.float64]) -> NDArray[np.float64]:
        raise NotImplementedError


class Matrix2(MatrixBase):
    """2x2 matrix."""

    SIZE: ClassVar[int] = 2

    __slots__ = ()

    @staticmethod
    def _determinant(a: NDArray[np.float64]) -> float:
        (a00, a01), (a10, a11) = a.tolist()
        return a00 * a11 - a01 * a10

    @staticmethod
    def _adjugate(a: NDArray[np.float64]) -> NDArray[np.float64]:
        (a00, a01), (a10, a11) = a.tolist()
        return np.array([[a11, -a01], [-a10, a00]], dtype=float)


class Matrix3(MatrixBase):
    """3x3 matrix."""

    SIZE: ClassVar[int] = 3

    __slots__ = ()

    @classmethod
    def skew_symmetric(cls, v: Vector3) -> Matrix3:
        """Return the cross-product matrix [v]x, so [v]x @ w == v x w."""
        x, y, z = v.components()
        return cls(0.0, -z, y, z, 0.0, -x, -y, x, 0.0)

    @staticmethod
    def _cofactors(a: NDArray[np.float64]) -> list[list[float]]:
        (a00, a01, a02), (a10, a11, a12), (a20, a21, a22) = a.tolist()
        return [
            [
                a11 * a22 - a12 * a21,
                -(a10 * a22 - a12 * a20),
                a10 * a21 - a11 * a20,
            ],
            [
                -(a01 * a22 - a02 * a21),
                a00 * a22 - a02 * a20,
                -(a00 * a21 - a01 * a20),
            ],
            [
                a01 * a12 - a02 * a11,
                -(a00 * a12 - a02 * a10),
                a00 * a11 - a01 * a10,
            ],
        ]

    @staticmethod
    def _determinant(a: NDArray[np.float64]) -> float:
        cof: list[list[float]] = Matrix3._cofactors(a)
        a00, a01, a02 = a[0].tolist()
        return a00 * cof[0][0] + a01 * cof[0][1] + a02 * cof[0][2]

    @staticmethod
    def _adjugate(a: NDArray[np.float64]) -> NDArray[np.float64]:
        # Adjugate is the transposed cofactor matrix
        return np.array(Matrix3._cofactors(a), dtype=float).T.copy()


class Matrix4(MatrixBase):
    """4x4 matrix.

    The determinant and adjugate are expanded in 2x2 minors of the top two
    rows (s0..s5) and bottom two rows (c0..c5):

        det = s0*c5 - s1*c4 + s2*c3 + s3*c2 - s4*c1 + s5*c0
    """

    SIZE: ClassVar[int] = 4

    __slots__ = ()

    @staticmethod
    def _minors(a: NDArray[np.float64]) -> tuple[list[float], list[float]]:
        (
            (a00, a01, a02, a03),
            (a10, a11, a12, a13),
            (a20, a21, a22, a23),
            (a30, a31, a32, a33),
        ) = a.tolist()

        s: list[float] = [
            a00 * a11 - a10 * a01,
            a00 * a12 - a10 * a02,
            a00 * a13 - a10 * a03,
            a01 * a12 - a11 * a02,
            a01 * a13 - a11 * a03,
            a02 * a13 - a12 * a03,
        ]
        c: list[float] = [
            a20 * a31 - a30 * a21,
            a20 * a32 - a30 * a22,
            a20 * a33 - a30 * a23,
            a21 * a32 - a31 * a22,
            a21 * a33 - a31 * a23,
            a22 * a33 - a32 * a23,
        ]
        return s, c

    @staticmethod
    def _determinant(a: NDArray[np.float64]) -> float:
        s, c = Matrix4._minors(a)
        return (
            s[0] * c[5]
            - s[1] * c[4]
            + s[2] * c[3]
            + s[3] * c[2]
            - s[4] * c[1]
            + s[5] * c[0]
        )

    @staticmethod
    def _adjugate(a: NDArray[np.float64]) -> NDArray[np.float64]:
        s, c = Matrix4._minors(a)
        (
            (a00, a01, a02, a03),
            (a10, a11, a12, a13),
            (a20, a21, a22, a23),
            (a30, a31, a32, a33),
        ) = a.tolist()

        return np.array(
            [
                [
                    a11 * c[5] - a12 * c[4] + a13 * c[3],
                    -a01 * c[5] + a02 * c[4] - a03 * c[3],
                    a31 * s[5] - a32 * s[4] + a33 * s[3],
                    -a21 * s[5] + a22 * s[4] - a23 * s[3],
                ],
                [
                    -a10 * c[5] + a12 * c[2] - a13 * c[1],
                    a00 * c[5] - a02 * c[2] + a03 * c[1],
                    -a30 * s[5] + a32 * s[2] - a33 * s[1],
                    a20 * s[5] - a22 * s[2] + a23 * s[1],
                ],
                [
                    a10 * c[4] - a11 * c[2] + a13 * c[0],
                    -a00 * c[4] + a01 * c[2] - a03 * c[0],
                    a30 * s[4] - a31 * s[2] + a33 * s[0],
                    -a20 * s[4] + a21 * s[2] - a23 * s[0],
                ],
                [
                    -a10 * c[3] + a11 * c[1] - a12 * c[0],
                    a00 * c[3] - a01 * c[1] + a02 * c[0],
                    -a30 * s[3] + a31 * s[1] - a32 * s[0],
                    a20 * s[3] - a21 * s[1] + a22 * s[0],
                ],
            ],
            dtype=float,
        )
