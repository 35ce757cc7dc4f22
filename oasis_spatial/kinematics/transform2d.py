################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Linear transforms of the plane encoded as 2x2 matrices."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np
from numpy.typing import NDArray

from oasis_spatial.geometry.matrix import Matrix2
from oasis_spatial.geometry.numeric import check_angle
from oasis_spatial.geometry.numeric import check_argument
from oasis_spatial.geometry.vector import Vector2


_T = TypeVar("_T", bound="Transform2D")


class Transform2D(Matrix2):
    """2x2 transform: rotation, scaling or mirror about a line."""

    __slots__ = ()

    @classmethod
    def rotation(cls: type[_T], angle: float) -> _T:
        return cls().set_rotation(angle)

    @classmethod
    def scaling(cls: type[_T], v: Vector2) -> _T:
        return cls().set_scaling(v)

    @classmethod
    def mirror(cls: type[_T], n: Vector2) -> _T:
        return cls().set_mirror(n)

    def set_rotation(self: _T, angle: float) -> _T:
        """Set a counterclockwise rotation by angle radians."""
        theta: float = check_angle(angle)
        c: float = math.cos(theta)
        s: float = math.sin(theta)
        return self.set_elements(c, -s, s, c)

    def set_scaling(self: _T, v: Vector2) -> _T:
        """Set a diagonal scaling by the components of v."""
        x: float = check_argument(v.x, "x scale")
        y: float = check_argument(v.y, "y scale")
        return self.set_elements(x, 0.0, 0.0, y)

    def set_mirror(self: _T, n: Vector2) -> _T:
        """Set the reflection I - 2 n n^T.

        The direction n is expected to be unit length and is not normalized.
        """
        normal: NDArray[np.float64] = n.to_array()
        with np.errstate(over="ignore", invalid="ignore"):
            result: NDArray[np.float64] = np.eye(2, dtype=float) - 2.0 * np.outer(
                normal, normal
            )
        return self._commit(result, "mirror matrix")

    def apply(self, v: Vector2) -> Vector2:
        """Return a transformed copy of v."""
        return v.copy().transform(self)

    def apply_inverse(self, v: Vector2) -> Vector2:
        """Return a copy of v transformed by the inverse of this transform."""
        inverse: Transform2D = self.copy().invert()
        return v.copy().transform(inverse)

