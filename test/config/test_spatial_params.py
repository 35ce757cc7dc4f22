################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for spatial parameter schema."""

from __future__ import annotations

import dataclasses
import math
from typing import Any

import pytest

from oasis_spatial.config.spatial_params import FrameParams
from oasis_spatial.config.spatial_params import SpatialParams
from oasis_spatial.config.spatial_params import SpatialParamsError
from oasis_spatial.config.spatial_params import ToleranceParams


def test_defaults_validate() -> None:
    """Defaults should validate successfully."""
    params: SpatialParams = SpatialParams.defaults()
    params.validate()

    assert params.tolerances.angular_tol == 1e-9
    assert params.tolerances.unit_length_tol == 1e-9
    assert params.frames.global_frame_name == "world"
    assert params.frames.max_depth == 64


def test_frozen() -> None:
    """Parameter namespaces are immutable."""
    params: SpatialParams = SpatialParams.defaults()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.tolerances.angular_tol = 1.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "field_name",
    ["angular_tol", "unit_length_tol"],
)
@pytest.mark.parametrize("value", [-1e-9, math.nan, math.inf])
def test_invalid_tolerances(field_name: str, value: float) -> None:
    """Negative, NaN and infinite tolerances are rejected."""
    tolerances: ToleranceParams = dataclasses.replace(
        ToleranceParams(), **{field_name: value}
    )
    params: SpatialParams = SpatialParams.defaults().replace(tolerances=tolerances)
    with pytest.raises(SpatialParamsError):
        params.validate()


def test_zero_tolerance_allowed() -> None:
    """A zero tolerance means exact comparison and is valid."""
    params: SpatialParams = SpatialParams.defaults().replace(
        tolerances=ToleranceParams(angular_tol=0.0)
    )
    params.validate()


def test_frame_validation() -> None:
    """Frame names must be set and depth limits positive."""
    no_name: SpatialParams = SpatialParams.defaults().replace(
        frames=FrameParams(global_frame_name="")
    )
    with pytest.raises(SpatialParamsError):
        no_name.validate()

    zero_depth: SpatialParams = SpatialParams.defaults().replace(
        frames=FrameParams(max_depth=0)
    )
    with pytest.raises(SpatialParamsError):
        zero_depth.validate()

    float_depth: Any = 2.5
    bad_type: SpatialParams = SpatialParams.defaults().replace(
        frames=FrameParams(max_depth=float_depth)
    )
    with pytest.raises(SpatialParamsError):
        bad_type.validate()


def test_from_dict() -> None:
    """Nested dicts override defaults per namespace."""
    params: SpatialParams = SpatialParams.from_dict(
        {"tolerances": {"angular_tol": 1e-6}, "frames": {"global_frame_name": "map"}}
    )
    assert params.tolerances.angular_tol == 1e-6
    assert params.tolerances.unit_length_tol == 1e-9
    assert params.frames.global_frame_name == "map"
    assert params.frames.max_depth == 64

    assert SpatialParams.from_dict({}) == SpatialParams.defaults()


def test_from_dict_rejects_unknown_keys() -> None:
    """Unknown namespaces and keys are errors."""
    with pytest.raises(SpatialParamsError):
        SpatialParams.from_dict({"units": {}})
    with pytest.raises(SpatialParamsError):
        SpatialParams.from_dict({"tolerances": {"epsilon": 1e-9}})


def test_as_nested_dict_round_trip() -> None:
    """as_nested_dict output rebuilds an equal parameter tree."""
    params: SpatialParams = SpatialParams.defaults().replace(
        frames=FrameParams(global_frame_name="odom", max_depth=8)
    )
    nested: dict[str, Any] = params.as_nested_dict()
    assert nested["frames"] == {"global_frame_name": "odom", "max_depth": 8}
    assert SpatialParams.from_dict(nested) == params


def test_from_dict_rejects_removed_tolerances() -> None:
    """Only the tolerances consumed by predicates are configurable."""
    for key in ("linear_tol", "singular_tol"):
        with pytest.raises(SpatialParamsError):
            SpatialParams.from_dict({"tolerances": {key: 1e-9}})
    assert set(SpatialParams.defaults().as_nested_dict()["tolerances"]) == {
        "angular_tol",
        "unit_length_tol",
    }
