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
Homogeneous transforms for rigid motion

A homogeneous transform is one size larger than the space it acts on, with
the rotation in the upper-left block and the translation in the last column:

    [ R  t ]
    [ 0  1 ]

Points are lifted with w = 1 and pick up the translation. Vectors are lifted
with w = 0 and are only rotated.
"""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_spatial.geometry.matrix import Matrix3
from oasis_spatial.geometry.matrix import Matrix4
from oasis_spatial.geometry.numeric import check_angle
from oasis_spatial.geometry.numeric import check_argument
from oasis_spatial.geometry.numeric import check_finite
from oasis_spatial.geometry.point import Point2
from oasis_spatial.geometry.point import Point3
from oasis_spatial.geometry.vector import Vector2
from oasis_spatial.geometry.vector import Vector3
from oasis_spatial.kinematics.transform3d import rotation_elements


_H3 = TypeVar("_H3", bound="HomogeneousTransform3D")
_H4 = TypeVar("_H4", bound="HomogeneousTransform4D")


def _translation_of(v: Vector2 | Vector3) -> list[float]:
    return [check_argument(value, "translation") for value in v.components()]


class HomogeneousTransform3D(Matrix3):
    """3x3 homogeneous transform acting on the plane."""

    __slots__ = ()

    @classmethod
    def translation(cls: type[_H3], v: Vector2) -> _H3:
        return cls().set_translation(v)

    @classmethod
    def rotation(cls: type[_H3], angle: float) -> _H3:
        return cls().set_rotation(angle)

    @classmethod
    def translation_rotation(cls: type[_H3], v: Vector2, angle: float) -> _H3:
        return cls().set_translation_rotation(v, angle)

    def set_translation(self: _H3, v: Vector2) -> _H3:
        """Set a pure translation by v."""
        x, y = _translation_of(v)
        return self.set_elements(1.0, 0.0, x, 0.0, 1.0, y, 0.0, 0.0, 1.0)

    def set_rotation(self: _H3, angle: float) -> _H3:
        """Set a counterclockwise rotation about the origin."""
        theta: float = check_angle(angle)
        c: float = math.cos(theta)
        s: float = math.sin(theta)
        return self.set_elements(c, -s, 0.0, s, c, 0.0, 0.0, 0.0, 1.0)

    def set_translation_rotation(self: _H3, v: Vector2, angle: float) -> _H3:
        """Set a rotation about the origin followed by a translation by v."""
        theta: float = check_angle(angle)
        x, y = _translation_of(v)
        c: float = math.cos(theta)
        s: float = math.sin(theta)
        return self.set_elements(c, -s, x, s, c, y, 0.0, 0.0, 1.0)

    def transform_point(self, p: Point2) -> Point2:
        """Return a transformed copy of a point."""
        return p.copy().transform(self)

    def transform_vector(self, v: Vector2) -> Vector2:
        """Return a copy of v rotated by the linear part, ignoring translation."""
        linear: NDArray[np.float64] = self._data[:2, :2]
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = linear @ v.to_array()
        check_finite(result, "transformed vector")
        return Vector2.from_array(result)


class HomogeneousTransform4D(Matrix4):
    """4x4 homogeneous transform acting on space."""

    __slots__ = ()

    @classmethod
    def translation(cls: type[_H4], v: Vector3) -> _H4:
        return cls().set_translation(v)

    @classmethod
    def rotation(cls: type[_H4], axis: Vector3, angle: float) -> _H4:
        return cls().set_rotation(axis, angle)

    @classmethod
    def translation_rotation(
        cls: type[_H4], axis: Vector3, angle: float, v: Vector3
    ) -> _H4:
        return cls().set_translation_rotation(axis, angle, v)

    def set_translation(self: _H4, v: Vector3) -> _H4:
        """Set a pure translation by v."""
        translation: list[float] = _translation_of(v)
        result: NDArray[np.float64] = np.eye(4, dtype=float)
        result[:3, 3] = translation
        return self._commit(result, "translation matrix")

    def set_rotation(self: _H4, axis: Vector3, angle: float) -> _H4:
        """Set a rotation about an axis through the origin."""
        result: NDArray[np.float64] = np.eye(4, dtype=float)
        result[:3, :3] = rotation_elements(axis, angle)
        return self._commit(result, "rotation matrix")

    def set_translation_rotation(
        self: _H4, axis: Vector3, angle: float, v: Vector3
    ) -> _H4:
        """Set a rotation about an axis followed by a translation by v."""
        translation: list[float] = _translation_of(v)
        result: NDArray[np.float64] = np.eye(4, dtype=float)
        result[:3, :3] = rotation_elements(axis, angle)
        result[:3, 3] = translation
        return self._commit(result, "rigid transform")

    def transform_point(self, p: Point3) -> Point3:
        """Return a transformed copy of a point."""
        return p.copy().transform(self)

    def transform_vector(self, v: Vector3) -> Vector3:
        """Return a copy of v rotated by the linear part, ignoring translation."""
        linear: NDArray[np.float64] = self._data[:3, :3]
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = linear @ v.to_array()
        check_finite(result, "transformed vector")
        return Vector3.from_array(result)

