################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Transform builders and the coordinate system hierarchy."""

from __future__ import annotations

from oasis_spatial.kinematics.coordinate_system import CoordinateSystem
from oasis_spatial.kinematics.homogeneous_transform import HomogeneousTransform3D
from oasis_spatial.kinematics.homogeneous_transform import HomogeneousTransform4D
from oasis_spatial.kinematics.transform2d import Transform2D
from oasis_spatial.kinematics.transform3d import Transform3D


__all__ = [
    "CoordinateSystem",
    "HomogeneousTransform3D",
    "HomogeneousTransform4D",
    "Transform2D",
    "Transform3D",
]
