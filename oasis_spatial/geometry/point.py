################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Absolute positions in the plane and in space."""

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
from .numeric import check_argument
from .numeric import check_finite
from .numeric import check_tolerance
from .numeric import stable_norm
from .vector import Vector2
from .vector import Vector3
from .vector import VectorBase


if TYPE_CHECKING:
    from .matrix import MatrixBase


_P = TypeVar("_P", bound="PointBase")


class PointBase:
    """Point operations shared by every dimension.

    Points are kept distinct from vectors: a point is displaced by a vector,
    and the difference of two points is a vector.
    """

    DIMENSION: ClassVar[int] = 0
    VECTOR_TYPE: ClassVar[type[VectorBase]] = VectorBase

    __slots__ = ("_data",)

    def __init__(self, *coordinates: float) -> None:
        """Create a point from explicit coordinates, or the origin."""
        if not coordinates:
            self._data: NDArray[np.float64] = np.zeros(self.DIMENSION, dtype=float)
            return

        if len(coordinates) != self.DIMENSION:
            raise MatrixDimensionError(
                f"{type(self).__name__} needs {self.DIMENSION} coordinates, "
                f"got {len(coordinates)}"
            )

        data: NDArray[np.float64] = np.array(coordinates, dtype=float)
        if not np.all(np.isfinite(data)):
            raise InvalidArgumentError("point coordinates must be finite")
        self._data = data

    @classmethod
    def origin(cls: type[_P]) -> _P:
        return cls()

    @classmethod
    def from_array(cls: type[_P], values: Sequence[float] | NDArray[np.float64]) -> _P:
        """Create a point from any sequence of DIMENSION finite values."""
        array: NDArray[np.float64] = np.asarray(values, dtype=float).reshape(-1)
        if array.size != cls.DIMENSION:
            raise MatrixDimensionError(
                f"{cls.__name__} needs {cls.DIMENSION} coordinates, got {array.size}"
            )
        return cls(*array.tolist())

    def coordinates(self) -> tuple[float, ...]:
        return tuple(float(value) for value in self._data)

    def to_array(self) -> NDArray[np.float64]:
        return self._data.copy()

    def copy(self: _P) -> _P:
        clone: _P = type(self)()
        clone._data[:] = self._data
        return clone

    def copy_from(self: _P, q: PointBase) -> _P:
        """Overwrite the coordinates with those of another point."""
        self._check_point(q)
        self._data[:] = q._data
        return self

    def as_vector(self) -> VectorBase:
        """Return the displacement from the origin to this point."""
        return self.VECTOR_TYPE.from_array(self._data)

    def __len__(self) -> int:
        return self.DIMENSION

    def __iter__(self) -> Iterator[float]:
        return iter(self.coordinates())

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PointBase) or other.DIMENSION != self.DIMENSION:
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        values: str = ", ".join(repr(value) for value in self.coordinates())
        return f"{type(self).__name__}({values})"

    def _check_point(self, q: PointBase) -> None:
        if not isinstance(q, PointBase):
            raise TypeError(f"expected a point, got {type(q).__name__}")
        if q.DIMENSION != self.DIMENSION:
            raise MatrixDimensionError(
                f"point dimensions do not match: {self.DIMENSION} != {q.DIMENSION}"
            )

    def _check_vector(self, v: VectorBase) -> None:
        if not isinstance(v, VectorBase):
            raise TypeError(f"expected a vector, got {type(v).__name__}")
        if v.DIMENSION != self.DIMENSION:
            raise MatrixDimensionError(
                f"vector dimension {v.DIMENSION} does not match point "
                f"dimension {self.DIMENSION}"
            )

    def _commit(self: _P, values: NDArray[np.float64], name: str) -> _P:
        check_finite(values, name)
        self._data[:] = values
        return self

    def _set_coordinate(self, index: int, value: float, name: str) -> None:
        self._data[index] = check_argument(value, name)

    def add(self: _P, v: VectorBase) -> _P:
        """Displace the point by a vector."""
        self._check_vector(v)
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = self._data + v.to_array()
        return self._commit(result, "displaced point")

    def sub(self: _P, v: VectorBase) -> _P:
        """Displace the point by the negated vector."""
        self._check_vector(v)
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = self._data - v.to_array()
        return self._commit(result, "displaced point")

    def scale(self: _P, f: float) -> _P:
        """Scale the displacement from the origin by the factor f."""
        factor: float = float(f)
        if math.isnan(factor):
            raise InvalidArgumentError("scale factor is NaN")
        if math.isinf(factor):
            raise NumericOverflowError("scale factor is infinite")
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = self._data * factor
        return self._commit(result, "scaled point")

    def displacement_to(self, q: PointBase) -> VectorBase:
        """Return the vector from this point to q."""
        self._check_point(q)
        with np.errstate(over="ignore", invalid="ignore"):
            diff: NDArray[np.float64] = q._data - self._data
        check_finite(diff, "point displacement")
        return self.VECTOR_TYPE.from_array(diff)

    def distance_to(self, q: PointBase) -> float:
        """Return the Euclidean distance to q using the stable norm."""
        self._check_point(q)
        with np.errstate(over="ignore", invalid="ignore"):
            diff: NDArray[np.float64] = q._data - self._data
        check_finite(diff, "point displacement")

        distance: float = stable_norm(diff.tolist())
        if not math.isfinite(distance):
            raise NumericOverflowError("point distance overflowed")
        return distance

    def is_equal_to(self, q: PointBase, tol: float) -> bool:
        """Return True if every coordinate differs by at most tol."""
        check_tolerance(tol)
        self._check_point(q)
        with np.errstate(over="ignore", invalid="ignore"):
            diff: NDArray[np.float64] = np.abs(self._data - q._data)
        return bool(np.all(diff <= tol))

    def transform(self: _P, matrix: MatrixBase) -> _P:
        """Apply a homogeneous matrix of size DIMENSION + 1 in place.

        The point is lifted with w = 1 and the result is divided by its w.

        Raises:
            MatrixDimensionError: If the matrix is not (N + 1) x (N + 1)
            DivideByZeroError: If the transformed w is zero
        """
        size: int = self.DIMENSION + 1
        if matrix.rows() != size or matrix.cols() != size:
            raise MatrixDimensionError(
                f"a {self.DIMENSION}D point needs a {size}x{size} homogeneous matrix"
            )

        lifted: NDArray[np.float64] = np.append(self._data, 1.0)
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = matrix.to_array() @ lifted
        check_finite(result, "transformed point")

        w: float = float(result[-1])
        if w == 0.0:
            raise DivideByZeroError("transformed point is at infinity")

        with np.errstate(over="ignore", invalid="ignore"):
            projected: NDArray[np.float64] = result[:-1] / w
        return self._commit(projected, "transformed point")


class Point2(PointBase):
    """Position in the plane."""

    DIMENSION: ClassVar[int] = 2
    VECTOR_TYPE: ClassVar[type[VectorBase]] = Vector2

    __slots__ = ()

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float) -> None:
        self._set_coordinate(0, value, "x")

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float) -> None:
        self._set_coordinate(1, value, "y")


class Point3(PointBase):
    """Position in space."""

    DIMENSION: ClassVar[int] = 3
    VECTOR_TYPE: ClassVar[type[VectorBase]] = Vector3

    __slots__ = ()

    @property
    def x(self) -> float:
        return float(self._data[0])

    @x.setter
    def x(self, value: float) -> None:
        self._set_coordinate(0, value, "x")

    @property
    def y(self) -> float:
        return float(self._data[1])

    @y.setter
    def y(self, value: float) -> None:
        self._set_coordinate(1, value, "y")

    @property
    def z(self) -> float:
        return float(self._data[2])

    @z.setter
    def z(self, value: float) -> None:
        self._set_coordinate(2, value, "z")
