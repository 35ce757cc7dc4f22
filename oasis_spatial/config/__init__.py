################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Configuration for spatial geometry tolerances and frames."""

from __future__ import annotations

from oasis_spatial.config.spatial_config import SpatialConfig
from oasis_spatial.config.spatial_config import SpatialConfigError
from oasis_spatial.config.spatial_params import FrameParams
from oasis_spatial.config.spatial_params import SpatialParams
from oasis_spatial.config.spatial_params import SpatialParamsError
from oasis_spatial.config.spatial_params import ToleranceParams


__all__ = [
    "FrameParams",
    "SpatialConfig",
    "SpatialConfigError",
    "SpatialParams",
    "SpatialParamsError",
    "ToleranceParams",
]
