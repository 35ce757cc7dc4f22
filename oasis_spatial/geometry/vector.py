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
Fixed-size vectors in 2, 3 and 4 dimensions

Vectors own a float64 numpy array of shape (N,). Arithmetic methods mutate the
receiver in place and return it so calls can be chained. Every mutator builds
its result in a scratch array, validates it with the numeric guard, and only
then commits it, so a failing call leaves the vector unchanged.

Queries and predicates never mutate the receiver or their arguments. Use
copy() before passing a vector into an operation that may alias it.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING
from typing import ClassVar
from typing import Iterator
from typing import Sequence
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from .errors import DivideByZeroError
from .errors import InvalidArgumentError
from .errors import MatrixDimensionError
from .errors import NumericOverflowError
from .errors import NumericUnderflowError
from .errors import ZeroLengthVectorError
from .numeric import check_angle
from .numeric import check_argument
from .numeric import check_finite
from .numeric import check_scalar
from .numeric import check_tolerance
from .numeric import signum
from .numeric import stable_norm


if TYPE_CHECKING:
    from .matrix import MatrixBase


_V = TypeVar("_V", bound="VectorBase")


class VectorBase:
    """Vector operations shared by every dimension.

    Subclasses set DIMENSION and add named component accessors.
    """

    DIMENSION: ClassVar[int] = 0

    __slots__ = ("_data",)

    def __init__(self, *components: float) -> None:
        """Create a vector from explicit components, or the zero vector."""
        if not components:
            self._data: NDArray[np.float64] = np.zeros(self.DIMENSION, dtype=float)
            return

        if len(components) != self.DIMENSION:
            raise MatrixDimensionError(
                f"{type(self).__name__} needs {self.DIMENSION} components, "
                f"got {len(components)}"
            )

        data: NDArray[np.float64] = np.array(components, dtype=float)
        if not np.all(np.isfinite(data)):
            raise InvalidArgumentError("vector components must be finite")
        self._data = data

    @classmethod
    def zero(cls: type[_V]) -> _V:
        """Return the zero vector."""
        return cls()

    @classmethod
    def from_array(cls: type[_V], values: Sequence[float] | NDArray[np.float64]) -> _V:
        """Create a vector from any sequence of DIMENSION finite values."""
        array: NDArray[np.float64] = np.asarray(values, dtype=float).reshape(-1)
        if array.size != cls.DIMENSION:
            raise MatrixDimensionError(
                f"{cls.__name__} needs {cls.DIMENSION} components, got {array.size}"
            )
        return cls(*array.tolist())

    @classmethod
    def _unit(cls: type[_V], index: int) -> _V:
        vector: _V = cls()
        vector._data[index] = 1.0
        return vector

    def components(self) -> tuple[float, ...]:
        """Return the components as a tuple of floats."""
        return tuple(float(value) for value in self._data)

    def to_array(self) -> NDArray[np.float64]:
        """Return a copy of the components as a numpy array."""
        return self._data.copy()

    def copy(self: _V) -> _V:
        """Return an independent vector with the same components."""
        clone: _V = type(self)()
        clone._data[:] = self._data
        return clone

    def __len__(self) -> int:
        return self.DIMENSION

    def __iter__(self) -> Iterator[float]:
        return iter(self.components())

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorBase) or other.DIMENSION != self.DIMENSION:
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    # Mutable, so instances are not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values: str = ", ".join(repr(value) for value in self.components())
        return f"{type(self).__name__}({values})"

    def _check_operand(self, w: VectorBase) -> None:
        if not isinstance(w, VectorBase):
            raise TypeError(f"expected a vector, got {type(w).__name__}")
        if w.DIMENSION != self.DIMENSION:
            raise MatrixDimensionError(
                f"vector dimensions do not match: {self.DIMENSION} != {w.DIMENSION}"
            )

    def _commit(self: _V, values: NDArray[np.float64], name: str) -> _V:
        check_finite(values, name)
        self._data[:] = values
        return self

    def _set_component(self, index: int, value: float, name: str) -> None:
        self._data[index] = check_argument(value, name)

    #
    # In-place arithmetic
    #

    def negate(self: _V) -> _V:
        """Negate every component."""
        self._data[:] = -self._data
        return self

    def add(self: _V, w: VectorBase) -> _V:
        """Add another vector to this one."""
        self._check_operand(w)
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = self._data + w._data
        return self._commit(result, "vector sum")

    def sub(self: _V, w: VectorBase) -> _V:
        """Subtract another vector from this one."""
        self._check_operand(w)
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = self._data - w._data
        return self._commit(result, "vector difference")

    def scale(self: _V, f: float) -> _V:
        """Multiply every component by the factor f.

        Raises:
            InvalidArgumentError: If f is NaN
            NumericOverflowError: If f is infinite or a component overflows
            NumericUnderflowError: If a non-zero component is flushed to zero
        """
        factor: float = float(f)
        if math.isnan(factor):
            raise InvalidArgumentError("scale factor is NaN")
        if math.isinf(factor):
            raise NumericOverflowError("scale factor is infinite")

        with np.errstate(over="ignore", under="ignore", invalid="ignore"):
            result: NDArray[np.float64] = self._data * factor
        check_finite(result, "scaled vector")

        if factor != 0.0 and np.any((result == 0.0) & (self._data != 0.0)):
            raise NumericUnderflowError("scaled vector underflowed")

        self._data[:] = result
        return self

    def normalize(self: _V) -> _V:
        """Scale the vector to unit length.

        Raises:
            DivideByZeroError: If the length is exactly zero
            NumericOverflowError: If the length or a component overflows
        """
        length: float = self.length()
        if length == 0.0:
            raise DivideByZeroError("division by zero")

        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = self._data / length
        if not np.all(np.isfinite(result)):
            raise NumericOverflowError("normalized vector overflowed")
        self._data[:] = result
        return self

    def transform(self: _V, matrix: MatrixBase) -> _V:
        """Replace this vector with matrix @ vector."""
        if matrix.rows() != self.DIMENSION or matrix.cols() != self.DIMENSION:
            raise MatrixDimensionError(
                f"cannot apply a {matrix.rows()}x{matrix.cols()} matrix to a "
                f"{self.DIMENSION}D vector"
            )
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = matrix.to_array() @ self._data
        return self._commit(result, "transformed vector")

    #
    # Queries
    #

    def normalized(self: _V) -> _V:
        """Return a unit-length copy of this vector."""
        return self.copy().normalize()

    def dot(self, w: VectorBase) -> float:
        """Return the dot product with another vector."""
        self._check_operand(w)
        with np.errstate(over="ignore", invalid="ignore"):
            result: float = float(np.dot(self._data, w._data))
        return check_scalar(result, "dot product")

    def length(self) -> float:
        """Return the Euclidean length using the stable norm."""
        result: float = stable_norm(self._data.tolist())
        if not math.isfinite(result):
            raise NumericOverflowError("vector length overflowed")
        return result

    def length_squared(self) -> float:
        """Return the squared Euclidean length."""
        with np.errstate(over="ignore", invalid="ignore"):
            result: float = float(np.dot(self._data, self._data))
        if not math.isfinite(result):
            raise NumericOverflowError("squared vector length overflowed")
        return result

    def angle_to(self, w: VectorBase) -> float:
        """Return the angle in radians between this vector and w.

        Uses Kahan's formula for needle-like triangles, which stays accurate
        for nearly parallel and nearly antiparallel vectors where
        acos(dot / (|v| |w|)) loses precision:

            a = max(|v|, |w|), b = min(|v|, |w|), c = |v - w|
            mu = b - (a - c)  if c > b  else  c - (a - b)
            t = ((a - b) + c) * mu / ((a + (b + c)) * ((a - c) + b))
            angle = 2 * atan(sqrt(t))

        Raises:
            ZeroLengthVectorError: If either vector has zero length
        """
        self._check_operand(w)
        length_v: float = self.length()
        length_w: float = w.length()
        if length_v == 0.0 or length_w == 0.0:
            raise ZeroLengthVectorError("angle to a zero-length vector is undefined")

        c: float = self.copy().sub(w).length()
        a: float = max(length_v, length_w)
        b: float = min(length_v, length_w)

        mu: float
        if c > b:
            mu = b - (a - c)
        else:
            mu = c - (a - b)

        numerator: float = ((a - b) + c) * mu
        denominator: float = (a + (b + c)) * ((a - c) + b)
        if denominator == 0.0:
            # c == a + b: the vectors point in opposite directions
            return math.pi

        # Rounding can push t slightly below zero for identical vectors
        t: float = max(check_scalar(numerator / denominator, "angle term"), 0.0)
        return 2.0 * math.atan(math.sqrt(t))

    #
    # Predicates
    #

    def is_equal_to(self, w: VectorBase, tol: float) -> bool:
        """Return True if every component differs by at most tol."""
        check_tolerance(tol)
        self._check_operand(w)
        with np.errstate(over="ignore", invalid="ignore"):
            diff: NDArray[np.float64] = np.abs(self._data - w._data)
        return bool(np.all(diff <= tol))

    def is_zero_length(self, tol: float) -> bool:
        """Return True if every component is within tol of zero."""
        check_tolerance(tol)
        return bool(np.all(np.abs(self._data) <= tol))

    def is_unit_length(self, tol: float) -> bool:
        """Return True if the vector matches its normalized copy within tol."""
        check_tolerance(tol)
        if self.length() == 0.0:
            return False
        return self.is_equal_to(self.normalized(), tol)

    def is_parallel_to(self, w: VectorBase, tol: float) -> bool:
        """Return True if the vectors point the same or opposite way.

        Perpendicular vectors, whose normalized dot product is exactly zero,
        are never parallel.
        """
        check_tolerance(tol)
        self._check_operand(w)
        vv: VectorBase = self.normalized()
        ww: VectorBase = w.normalized()

        sign: int = signum(vv.dot(ww))
        if sign == 0:
            return False

        # Flip vv toward ww
        vv.scale(float(sign))
        return vv.is_equal_to(ww, tol)

    def is_codirectional_to(self, w: VectorBase, tol: float) -> bool:
        """Return True if the vectors point the same way within tol."""
        check_tolerance(tol)
        self._check_operand(w)
        return self.normalized().is_equal_to(w.normalized(), tol)

    def is_perpendicular_to(self, w: VectorBase, tol: float) -> bool:
        """Return True if the normalized dot product is within tol of zero."""
        check_tolerance(tol)
        self._check_operand(w)
        return abs(self.normalized().dot(w.normalized())) <= tol


class Vector2(VectorBase):
    """Vector in the plane."""

    DIMENSION: ClassVar[int] = 2

    __slots__ = ()

    @classmethod
    def x_axis(cls) -> Vector2:
        return cls._unit(0)

    @classmethod
    def y_axis(cls) -> Vector2:
        return cls._unit(1)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float) -> None:
        self._set_component(0, value, "x")

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float) -> None:
        self._set_component(1, value, "y")

    def angle(self) -> float:
        """Return the unsigned angle from the +x axis."""
        return Vector2.x_axis().angle_to(self)

    def perpendicular(self) -> Vector2:
        """Return the vector rotated a quarter turn counterclockwise."""
        return Vector2(-self.y, self.x)

    def rotate_by(self, angle: float) -> Vector2:
        """Rotate counterclockwise by angle radians, in place."""
        theta: float = check_angle(angle)
        c: float = math.cos(theta)
        s: float = math.sin(theta)
        rotation: NDArray[np.float64] = np.array([[c, -s], [s, c]], dtype=float)
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = rotation @ self._data
        return self._commit(result, "rotated vector")


class Vector3(VectorBase):
    """Vector in space."""

    DIMENSION: ClassVar[int] = 3

    __slots__ = ()

    @classmethod
    def x_axis(cls) -> Vector3:
        return cls._unit(0)

    @classmethod
    def y_axis(cls) -> Vector3:
        return cls._unit(1)

    @classmethod
    def z_axis(cls) -> Vector3:
        return cls._unit(2)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float) -> None:
        self._set_component(0, value, "x")

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float) -> None:
        self._set_component(1, value, "y")

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float) -> None:
        self._set_component(2, value, "z")

    def cross(self, w: Vector3) -> Vector3:
        """Return the cross product self x w as a new vector."""
        self._check_operand(w)
        ux, uy, uz = self._data.tolist()
        vx, vy, vz = w._data.tolist()

        result: NDArray[np.float64] = np.array(
            [
                uy * vz - uz * vy,
                uz * vx - ux * vz,
                ux * vy - uy * vx,
            ],
            dtype=float,
        )
        check_finite(result, "cross product")
        return Vector3.from_array(result)


class Vector4(VectorBase):
    """Vector in four dimensions, typically homogeneous coordinates."""

    DIMENSION: ClassVar[int] = 4

    __slots__ = ()

    @classmethod
    def x_axis(cls) -> Vector4:
        return cls._unit(0)

    @classmethod
    def y_axis(cls) -> Vector4:
        return cls._unit(1)

    @classmethod
    def z_axis(cls) -> Vector4:
        return cls._unit(2)

    @classmethod
    def w_axis(cls) -> Vector4:
        return cls._unit(3)

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float) -> None:
        self._set_component(0, value, "x")

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float) -> None:
        self._set_component(1, value, "y")

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float) -> None:
        self._set_component(2, value, "z")

    @property
    def w(self) -> float:
        return float(self._data[3])

    @w.setter
    def w(self, value: float) -> None:
        self._set_component(3, value, "w")
