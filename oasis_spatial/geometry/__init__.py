################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Vectors, points and matrices with guarded floating-point arithmetic."""

from __future__ import annotations

from oasis_spatial.geometry.errors import DivideByZeroError
from oasis_spatial.geometry.errors import EmptyInputError
from oasis_spatial.geometry.errors import InvalidArgumentError
from oasis_spatial.geometry.errors import InvalidNumericResultError
from oasis_spatial.geometry.errors import InvalidToleranceError
from oasis_spatial.geometry.errors import MatrixDimensionError
from oasis_spatial.geometry.errors import MatrixIndexError
from oasis_spatial.geometry.errors import NumericOverflowError
from oasis_spatial.geometry.errors import NumericUnderflowError
from oasis_spatial.geometry.errors import SingularMatrixError
from oasis_spatial.geometry.errors import SpatialError
from oasis_spatial.geometry.errors import ZeroLengthVectorError
from oasis_spatial.geometry.matrix import Matrix2
from oasis_spatial.geometry.matrix import Matrix3
from oasis_spatial.geometry.matrix import Matrix4
from oasis_spatial.geometry.matrix import MatrixBase
from oasis_spatial.geometry.point import Point2
from oasis_spatial.geometry.point import Point3
from oasis_spatial.geometry.vector import Vector2
from oasis_spatial.geometry.vector import Vector3
from oasis_spatial.geometry.vector import Vector4
from oasis_spatial.geometry.vector import VectorBase


__all__ = [
    "DivideByZeroError",
    "EmptyInputError",
    "InvalidArgumentError",
    "InvalidNumericResultError",
    "InvalidToleranceError",
    "Matrix2",
    "Matrix3",
    "Matrix4",
    "MatrixBase",
    "MatrixDimensionError",
    "MatrixIndexError",
    "NumericOverflowError",
    "NumericUnderflowError",
    "Point2",
    "Point3",
    "SingularMatrixError",
    "SpatialError",
    "Vector2",
    "Vector3",
    "Vector4",
    "VectorBase",
    "ZeroLengthVectorError",
]
