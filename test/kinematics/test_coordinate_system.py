################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the coordinate system hierarchy."""

from __future__ import annotations

import math
import unittest
from typing import Any

import numpy as np
import pytest

from oasis_spatial.config.spatial_config import SpatialConfig
from oasis_spatial.config.spatial_params import FrameParams
from oasis_spatial.config.spatial_params import SpatialParams
from oasis_spatial.geometry.errors import InvalidArgumentError
from oasis_spatial.geometry.errors import NumericOverflowError
from oasis_spatial.geometry.errors import ZeroLengthVectorError
from oasis_spatial.geometry.matrix import Matrix3
from oasis_spatial.geometry.point import Point3
from oasis_spatial.geometry.vector import Vector3
from oasis_spatial.kinematics.coordinate_system import CoordinateSystem
from oasis_spatial.kinematics.transform3d import Transform3D


TOL: float = 1e-12


def _z_quarter_turn(parent: CoordinateSystem, name: str) -> CoordinateSystem:
    """Return a child frame rotated 90 degrees about its parent's z axis."""
    frame: CoordinateSystem = CoordinateSystem(
        Point3(), Vector3.x_axis(), Vector3.y_axis(), parent=parent, name=name
    )
    return frame.rotate(Vector3.z_axis(), math.pi / 2.0)


class TestOrientation(unittest.TestCase):
    """Local and global orientation composition."""

    def setUp(self) -> None:
        self.world: CoordinateSystem = CoordinateSystem.global_frame()

    def test_global_frame_is_identity(self) -> None:
        """The canonical basis has the identity orientation."""
        self.assertEqual(self.world.local_orientation(), Matrix3.eye())
        self.assertEqual(self.world.global_orientation(), Matrix3.eye())
        self.assertEqual(self.world.name, "world")

    def test_non_orthogonal_b1_is_rederived(self) -> None:
        """b1 is rebuilt orthogonal to b0 from the right-hand rule."""
        frame: CoordinateSystem = CoordinateSystem(
            Point3(), Vector3(1.0, 0.0, 0.0), Vector3(1.0, 1.0, 0.0)
        )
        self.assertEqual(frame.local_orientation(), Matrix3.eye())

    def test_local_orientation_rows(self) -> None:
        """Rows are b0, the re-derived b1 and b2."""
        frame: CoordinateSystem = CoordinateSystem(
            Point3(), Vector3(0.0, 1.0, 0.0), Vector3(-1.0, 0.0, 0.0)
        )
        expected: Matrix3 = Matrix3(0.0, 1.0, 0.0, -1.0, 0.0, 0.0, 0.0, 0.0, 1.0)
        self.assertTrue(frame.local_orientation().is_equal_to(expected, 0.0))
        self.assertAlmostEqual(frame.local_orientation().determinant(), 1.0)

    def test_nested_quarter_turns_compose(self) -> None:
        """Two nested 90 degree turns about z give a 180 degree turn."""
        parent: CoordinateSystem = _z_quarter_turn(self.world, "parent")
        child: CoordinateSystem = _z_quarter_turn(parent, "child")

        expected: Transform3D = Transform3D.z_rotation(math.pi)
        self.assertTrue(child.global_orientation().is_equal_to(expected, TOL))
        self.assertTrue(
            np.allclose(child.global_orientation().to_array(), np.diag([-1, -1, 1]))
        )

    def test_global_orientation_order(self) -> None:
        """The walk premultiplies so the root orientation is leftmost."""
        parent: CoordinateSystem = CoordinateSystem(
            Point3(), Vector3.x_axis(), Vector3.y_axis(), parent=self.world
        ).rotate(Vector3.x_axis(), 0.3)
        child: CoordinateSystem = CoordinateSystem(
            Point3(), Vector3.x_axis(), Vector3.y_axis(), parent=parent
        ).rotate(Vector3.z_axis(), 1.1)

        expected: Matrix3 = child.local_orientation()
        expected.premultiply(parent.local_orientation())
        self.assertTrue(child.global_orientation().is_equal_to(expected, TOL))

    def test_failure_propagates(self) -> None:
        """An overflowing ancestor aborts the walk."""
        huge: CoordinateSystem = CoordinateSystem(
            Point3(), Vector3(1e200, 0.0, 0.0), Vector3(0.0, 1e200, 0.0)
        )
        child: CoordinateSystem = CoordinateSystem(
            Point3(), Vector3.x_axis(), Vector3.y_axis(), parent=huge
        )
        with self.assertRaises(NumericOverflowError):
            child.global_orientation()


def test_hierarchy_navigation() -> None:
    """Ancestors run from the frame to the root."""
    world: CoordinateSystem = CoordinateSystem.global_frame()
    parent: CoordinateSystem = _z_quarter_turn(world, "parent")
    child: CoordinateSystem = _z_quarter_turn(parent, "child")

    assert [frame.name for frame in child.ancestors()] == ["child", "parent", "world"]
    assert child.depth() == 2
    assert world.depth() == 0
    assert child.root() is world
    assert world.is_root()
    assert not child.is_root()
    assert child.parent is parent


def test_inputs_are_copied() -> None:
    """Frames do not alias the caller's vectors and points."""
    origin: Point3 = Point3(1.0, 2.0, 3.0)
    b0: Vector3 = Vector3.x_axis()
    frame: CoordinateSystem = CoordinateSystem(origin, b0, Vector3.y_axis())

    origin.x = 100.0
    b0.y = 5.0
    assert frame.origin == Point3(1.0, 2.0, 3.0)
    assert frame.b0 == Vector3.x_axis()

    returned: Vector3 = frame.b1
    returned.z = 7.0
    assert frame.b1 == Vector3.y_axis()


def test_rotate_is_atomic() -> None:
    """A failed rotation leaves both basis vectors unchanged."""
    frame: CoordinateSystem = CoordinateSystem.global_frame()
    with pytest.raises(ZeroLengthVectorError):
        frame.rotate(Vector3(), 1.0)
    assert frame.b0 == Vector3.x_axis()
    assert frame.b1 == Vector3.y_axis()


def test_rotate_moves_basis() -> None:
    """Rotating about z turns b0 toward b1."""
    frame: CoordinateSystem = CoordinateSystem.global_frame()
    frame.rotate(Vector3.z_axis(), math.pi / 2.0)
    assert frame.b0.is_equal_to(Vector3(0.0, 1.0, 0.0), TOL)
    assert frame.b1.is_equal_to(Vector3(-1.0, 0.0, 0.0), TOL)


def test_check_basis() -> None:
    """Basis validation uses the configured tolerances."""
    config: SpatialConfig = SpatialConfig.from_defaults()
    CoordinateSystem.global_frame(config).check_basis(config)

    stretched: CoordinateSystem = CoordinateSystem(
        Point3(), Vector3(2.0, 0.0, 0.0), Vector3.y_axis()
    )
    with pytest.raises(InvalidArgumentError):
        stretched.check_basis(config)

    parallel: CoordinateSystem = CoordinateSystem(
        Point3(), Vector3.x_axis(), Vector3(-1.0, 0.0, 0.0)
    )
    with pytest.raises(InvalidArgumentError):
        parallel.check_basis(config)


def test_check_basis_depth_limit() -> None:
    """Frames nested beyond max_depth are rejected."""
    params: SpatialParams = SpatialParams.defaults().replace(
        frames=FrameParams(max_depth=1)
    )
    config: SpatialConfig = SpatialConfig(params)

    world: CoordinateSystem = CoordinateSystem.global_frame(config)
    parent: CoordinateSystem = _z_quarter_turn(world, "parent")
    child: CoordinateSystem = _z_quarter_turn(parent, "child")

    parent.check_basis(config)
    with pytest.raises(InvalidArgumentError):
        child.check_basis(config)


def test_global_frame_name_from_config() -> None:
    """The root frame takes its name from the configuration."""
    params: SpatialParams = SpatialParams.defaults().replace(
        frames=FrameParams(global_frame_name="map")
    )
    frame: CoordinateSystem = CoordinateSystem.global_frame(SpatialConfig(params))
    assert frame.name == "map"
    assert frame.origin == Point3.origin()


def test_constructor_type_checks() -> None:
    """Constructor arguments must be points, vectors and frames."""
    not_a_point: Any = Vector3()
    not_a_frame: Any = "world"
    with pytest.raises(InvalidArgumentError):
        CoordinateSystem(not_a_point, Vector3.x_axis(), Vector3.y_axis())
    with pytest.raises(InvalidArgumentError):
        CoordinateSystem(
            Point3(), Vector3.x_axis(), Vector3.y_axis(), parent=not_a_frame
        )
