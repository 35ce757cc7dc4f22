################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for planar transforms."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_spatial.geometry.errors import InvalidNumericResultError
from oasis_spatial.geometry.errors import NumericOverflowError
from oasis_spatial.geometry.errors import SingularMatrixError
from oasis_spatial.geometry.vector import Vector2
from oasis_spatial.kinematics.transform2d import Transform2D


TOL: float = 1e-12


def test_rotation_quarter_turn() -> None:
    """A quarter turn maps x onto y."""
    rotation: Transform2D = Transform2D.rotation(math.pi / 2.0)
    assert rotation.apply(Vector2.x_axis()).is_equal_to(Vector2.y_axis(), TOL)
    assert rotation.determinant() == pytest.approx(1.0)


def test_rotation_rejects_bad_angles() -> None:
    """NaN and infinite angles raise before any trigonometric call."""
    transform: Transform2D = Transform2D().identity()
    with pytest.raises(InvalidNumericResultError):
        transform.set_rotation(math.nan)
    with pytest.raises(NumericOverflowError):
        transform.set_rotation(math.inf)
    assert transform == Transform2D.eye()


def test_scaling() -> None:
    """Scaling is diagonal."""
    scaling: Transform2D = Transform2D.scaling(Vector2(2.0, -3.0))
    assert np.array_equal(scaling.to_array(), np.diag([2.0, -3.0]))
    assert scaling.apply(Vector2(1.0, 1.0)) == Vector2(2.0, -3.0)


def test_mirror() -> None:
    """Mirroring with a unit normal flips that component."""
    mirror: Transform2D = Transform2D.mirror(Vector2.x_axis())
    assert mirror.apply(Vector2(3.0, 4.0)) == Vector2(-3.0, 4.0)
    assert mirror.determinant() == pytest.approx(-1.0)


def test_apply_does_not_mutate() -> None:
    """apply() leaves its argument unchanged."""
    v: Vector2 = Vector2(1.0, 2.0)
    Transform2D.rotation(0.3).apply(v)
    assert v == Vector2(1.0, 2.0)


def test_apply_inverse() -> None:
    """apply_inverse() undoes apply()."""
    rotation: Transform2D = Transform2D.rotation(0.7)
    v: Vector2 = Vector2(1.5, -0.25)
    assert rotation.apply_inverse(rotation.apply(v)).is_equal_to(v, TOL)


def test_apply_inverse_singular() -> None:
    """A singular transform cannot be inverted."""
    collapse: Transform2D = Transform2D.scaling(Vector2(1.0, 0.0))
    with pytest.raises(SingularMatrixError):
        collapse.apply_inverse(Vector2(1.0, 1.0))


def test_mirror_overflow() -> None:
    """An overflowing mirror element raises and leaves the transform unchanged."""
    transform: Transform2D = Transform2D().identity()
    with pytest.raises(NumericOverflowError):
        transform.set_mirror(Vector2(1e200, 0.0))
    assert transform == Transform2D.eye()
