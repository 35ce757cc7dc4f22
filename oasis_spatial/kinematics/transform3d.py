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
Linear transforms of space encoded as 3x3 matrices

Axis-angle rotations use Rodrigues' formula on the normalized axis u:

    R = I + sin(theta) [u]x + (1 - cos(theta)) [u]x^2

where [u]x is the cross-product matrix of u. An axis that normalizes to
exactly +/-x, +/-y or +/-z uses the axis-aligned rotation directly.
"""

from __future__ import annotations

import logging
import math
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_spatial.geometry.errors import ZeroLengthVectorError
from oasis_spatial.geometry.matrix import Matrix3
from oasis_spatial.geometry.numeric import check_angle
from oasis_spatial.geometry.numeric import check_argument
from oasis_spatial.geometry.vector import Vector3


# Axis length below which a rotation axis is rejected
AXIS_LENGTH_EPS: float = 1e-14

_LOG: logging.Logger = logging.getLogger(__name__)

_T = TypeVar("_T", bound="Transform3D")


def unit_axis(axis: Vector3) -> Vector3:
    """Return a normalized copy of a rotation axis.

    Raises:
        ZeroLengthVectorError: If the axis is too short to define a direction
    """
    length: float = axis.length()
    if length < AXIS_LENGTH_EPS:
        _LOG.debug("Rejecting rotation axis %r with length %g", axis, length)
        raise ZeroLengthVectorError("rotation axis has zero length")

    return axis.normalized()


def rotation_elements(axis: Vector3, angle: float) -> NDArray[np.float64]:
    """Return the 3x3 rotation about an axis by angle radians.

    The angle is validated before any trigonometric call and the axis is
    never modified.
    """
    theta: float = check_angle(angle)
    u: Vector3 = unit_axis(axis)

    # Axis-aligned fast paths, with the sign of the axis folded into the angle
    ux, uy, uz = u.components()
    if ux != 0.0 and uy == 0.0 and uz == 0.0:
        return _x_rotation(math.copysign(theta, ux))
    if ux == 0.0 and uy != 0.0 and uz == 0.0:
        return _y_rotation(math.copysign(theta, uy))
    if ux == 0.0 and uy == 0.0 and uz != 0.0:
        return _z_rotation(math.copysign(theta, uz))

    c: float = math.cos(theta)
    s: float = math.sin(theta)
    W: NDArray[np.float64] = Matrix3.skew_symmetric(u).to_array()
    eye: NDArray[np.float64] = np.eye(3, dtype=float)
    return eye + s * W + (1.0 - c) * (W @ W)


def _x_rotation(theta: float) -> NDArray[np.float64]:
    c: float = math.cos(theta)
    s: float = math.sin(theta)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]], dtype=float)


def _y_rotation(theta: float) -> NDArray[np.float64]:
    c: float = math.cos(theta)
    s: float = math.sin(theta)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]], dtype=float)


def _z_rotation(theta: float) -> NDArray[np.float64]:
    c: float = math.cos(theta)
    s: float = math.sin(theta)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]], dtype=float)


class Transform3D(Matrix3):
    """3x3 transform: rotation, scaling or mirror about a plane."""

    __slots__ = ()

    @classmethod
    def rotation(cls: type[_T], axis: Vector3, angle: float) -> _T:
        return cls().set_rotation(axis, angle)

    @classmethod
    def x_rotation(cls: type[_T], angle: float) -> _T:
        return cls().set_x_rotation(angle)

    @classmethod
    def y_rotation(cls: type[_T], angle: float) -> _T:
        return cls().set_y_rotation(angle)

    @classmethod
    def z_rotation(cls: type[_T], angle: float) -> _T:
        return cls().set_z_rotation(angle)

    @classmethod
    def scaling(cls: type[_T], v: Vector3) -> _T:
        return cls().set_scaling(v)

    @classmethod
    def mirror(cls: type[_T], n: Vector3) -> _T:
        return cls().set_mirror(n)

    def set_rotation(self: _T, axis: Vector3, angle: float) -> _T:
        """Set a right-handed rotation about axis by angle radians.

        Raises:
            ZeroLengthVectorError: If the axis has zero length
            InvalidNumericResultError: If the angle is NaN
            NumericOverflowError: If the angle is infinite
        """
        return self._commit(rotation_elements(axis, angle), "rotation matrix")

    def set_x_rotation(self: _T, angle: float) -> _T:
        return self._commit(_x_rotation(check_angle(angle)), "rotation matrix")

    def set_y_rotation(self: _T, angle: float) -> _T:
        return self._commit(_y_rotation(check_angle(angle)), "rotation matrix")

    def set_z_rotation(self: _T, angle: float) -> _T:
        return self._commit(_z_rotation(check_angle(angle)), "rotation matrix")

    def set_scaling(self: _T, v: Vector3) -> _T:
        """Set a diagonal scaling by the components of v."""
        x: float = check_argument(v.x, "x scale")
        y: float = check_argument(v.y, "y scale")
        z: float = check_argument(v.z, "z scale")
        return self.set_elements(x, 0.0, 0.0, 0.0, y, 0.0, 0.0, 0.0, z)

    def set_mirror(self: _T, n: Vector3) -> _T:
        """Set the reflection I - 2 n n^T across the plane with normal n.

        The normal is expected to be unit length and is not normalized.
        """
        normal: NDArray[np.float64] = n.to_array()
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = np.eye(3, dtype=float) - 2.0 * np.outer(
                normal, normal
            )
        return self._commit(result, "mirror matrix")

    def apply(self, v: Vector3) -> Vector3:
        """Return a transformed copy of v."""
        return v.copy().transform(self)

    def apply_inverse(self, v: Vector3) -> Vector3:
        """Return a copy of v transformed by the inverse of this transform."""
        inverse: Transform3D = self.copy().invert()
        return v.copy().transform(inverse)
