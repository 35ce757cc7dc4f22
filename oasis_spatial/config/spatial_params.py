################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Structured configuration schema for spatial geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass
from dataclasses import fields
from dataclasses import replace
from typing import Any
from typing import Mapping


# Tolerance on normalized dot products for parallel and perpendicular tests
ANGULAR_TOL: float = 1e-9
# Tolerance for unit-length checks on basis vectors
UNIT_LENGTH_TOL: float = 1e-9

# Name given to the root frame
FRAME_GLOBAL: str = "world"
# Maximum number of ancestors above any frame
FRAME_MAX_DEPTH: int = 64


class SpatialParamsError(Exception):
    """Raised when spatial parameter validation fails."""


def _require_tolerance(value: float, name: str) -> None:
    """Require a finite, non-negative tolerance."""
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise SpatialParamsError(f"{name} must be a number")
    if math.isnan(value) or math.isinf(value):
        raise SpatialParamsError(f"{name} must be finite")
    if value < 0.0:
        raise SpatialParamsError(f"{name} must be non-negative")


def _require_positive_int(value: int, name: str) -> None:
    """Require a positive integer value."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise SpatialParamsError(f"{name} must be an int")
    if value <= 0:
        raise SpatialParamsError(f"{name} must be positive")


@dataclass(frozen=True)
class ToleranceParams:
    """Comparison tolerances used by geometric predicates."""

    # Tolerance on normalized dot products
    angular_tol: float = ANGULAR_TOL
    # Tolerance for unit-length checks
    unit_length_tol: float = UNIT_LENGTH_TOL


@dataclass(frozen=True)
class FrameParams:
    """Coordinate system hierarchy parameters."""

    # Name given to the root frame
    global_frame_name: str = FRAME_GLOBAL
    # Maximum number of ancestors above any frame
    max_depth: int = FRAME_MAX_DEPTH


@dataclass(frozen=True)
class SpatialParams:
    """Complete configuration tree for spatial geometry."""

    tolerances: ToleranceParams
    frames: FrameParams

    @classmethod
    def defaults(cls) -> SpatialParams:
        """Return the default spatial parameter tree."""
        return cls(tolerances=ToleranceParams(), frames=FrameParams())

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> SpatialParams:
        """Build parameters from a nested dict, filling gaps with defaults.

        Raises:
            SpatialParamsError: If a namespace or key is unknown
        """
        namespaces: dict[str, type[Any]] = {
            "tolerances": ToleranceParams,
            "frames": FrameParams,
        }

        unknown: set[str] = set(mapping) - set(namespaces)
        if unknown:
            raise SpatialParamsError(f"unknown namespaces: {sorted(unknown)}")

        values: dict[str, Any] = {}
        name: str
        params_type: type[Any]
        for name, params_type in namespaces.items():
            overrides: Mapping[str, Any] = mapping.get(name, {})
            allowed: set[str] = {field.name for field in fields(params_type)}
            extra: set[str] = set(overrides) - allowed
            if extra:
                raise SpatialParamsError(f"unknown keys in {name}: {sorted(extra)}")
            values[name] = params_type(**overrides)

        return cls(**values)

    def validate(self) -> None:
        """Validate parameter invariants and constraints."""
        _require_tolerance(self.tolerances.angular_tol, "tolerances.angular_tol")
        _require_tolerance(
            self.tolerances.unit_length_tol, "tolerances.unit_length_tol"
        )

        if not self.frames.global_frame_name:
            raise SpatialParamsError("frames.global_frame_name must be set")
        _require_positive_int(self.frames.max_depth, "frames.max_depth")

    def replace(self, **namespace_overrides: Any) -> SpatialParams:
        """Return a modified copy of the parameters."""
        return replace(self, **namespace_overrides)

    def as_nested_dict(self) -> dict[str, Any]:
        """Return a nested dict representation for debugging."""
        return _dataclass_to_dict(self)


def _dataclass_to_dict(value: Any) -> Any:
    """Convert dataclasses into plain Python values."""
    if hasattr(value, "__dataclass_fields__"):
        return {
            field.name: _dataclass_to_dict(getattr(value, field.name))
            for field in fields(value)
        }
    return value
