################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""High-level configuration wrapper for spatial geometry."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .spatial_params import SpatialParams
from .spatial_params import SpatialParamsError


# Largest unit-length tolerance that still distinguishes a unit vector from zero
MAX_UNIT_LENGTH_TOL: float = 0.5

_LOG: logging.Logger = logging.getLogger(__name__)


class SpatialConfigError(Exception):
    """Raised when spatial configuration validation fails."""


@dataclass(frozen=True)
class SpatialConfig:
    """Convenience wrapper around spatial parameters."""

    params: SpatialParams

    def __init__(self, params: SpatialParams) -> None:
        """Initialize the configuration wrapper and validate."""
        object.__setattr__(self, "params", params)
        self.validate()

    @classmethod
    def from_defaults(cls) -> SpatialConfig:
        """Return a configuration built from the default parameters."""
        return cls(SpatialParams.defaults())

    def validate(self) -> None:
        """Validate parameter invariants and cross-namespace policies."""
        try:
            self.params.validate()
        except SpatialParamsError as exc:
            _LOG.debug("Rejecting spatial parameters: %s", exc)
            raise SpatialConfigError(str(exc)) from exc

        if self.params.tolerances.unit_length_tol > MAX_UNIT_LENGTH_TOL:
            _LOG.debug(
                "Rejecting unit_length_tol=%g",
                self.params.tolerances.unit_length_tol,
            )
            raise SpatialConfigError(
                f"tolerances.unit_length_tol must not exceed {MAX_UNIT_LENGTH_TOL}"
            )

    def angular_tol(self) -> float:
        """Return the tolerance on normalized dot products."""
        return self.params.tolerances.angular_tol

    def unit_length_tol(self) -> float:
        """Return the unit-length check tolerance."""
        return self.params.tolerances.unit_length_tol

    def global_frame_name(self) -> str:
        """Return the name given to root frames."""
        return self.params.frames.global_frame_name

    def max_depth(self) -> int:
        """Return the maximum frame nesting depth."""
        return self.params.frames.max_depth
