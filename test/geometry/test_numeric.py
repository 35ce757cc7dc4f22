################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Tests for the numeric guard and stable norm helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from oasis_spatial.geometry.errors import EmptyInputError
from oasis_spatial.geometry.errors import InvalidArgumentError
from oasis_spatial.geometry.errors import InvalidNumericResultError
from oasis_spatial.geometry.errors import InvalidToleranceError
from oasis_spatial.geometry.errors import NumericOverflowError
from oasis_spatial.geometry.numeric import are_any_overflow
from oasis_spatial.geometry.numeric import check_angle
from oasis_spatial.geometry.numeric import check_argument
from oasis_spatial.geometry.numeric import check_finite
from oasis_spatial.geometry.numeric import check_tolerance
from oasis_spatial.geometry.numeric import is_invalid_tolerance
from oasis_spatial.geometry.numeric import is_overflow
from oasis_spatial.geometry.numeric import norm2
from oasis_spatial.geometry.numeric import norm3
from oasis_spatial.geometry.numeric import norm4
from oasis_spatial.geometry.numeric import signum
from oasis_spatial.geometry.numeric import stable_norm


def test_invalid_tolerance() -> None:
    """Negative and NaN tolerances are invalid, zero is not."""
    assert is_invalid_tolerance(-1e-12)
    assert is_invalid_tolerance(math.nan)
    assert not is_invalid_tolerance(0.0)
    assert not is_invalid_tolerance(1e-9)
    assert not is_invalid_tolerance(math.inf)


def test_check_tolerance_raises() -> None:
    """check_tolerance rejects invalid tolerances."""
    with pytest.raises(InvalidToleranceError):
        check_tolerance(-1.0)
    with pytest.raises(InvalidToleranceError):
        check_tolerance(math.nan)
    check_tolerance(0.0)


def test_overflow_predicates() -> None:
    """Infinities of either sign count as overflow."""
    assert is_overflow(math.inf)
    assert is_overflow(-math.inf)
    assert not is_overflow(1e308)
    assert not is_overflow(math.nan)
    assert are_any_overflow(1.0, 2.0, -math.inf)
    assert not are_any_overflow(1.0, 2.0, 3.0)
    assert not are_any_overflow()


def test_signum() -> None:
    """signum returns -1, 0 or 1 and rejects NaN."""
    assert signum(-3.5) == -1
    assert signum(0.0) == 0
    assert signum(-0.0) == 0
    assert signum(2.0) == 1
    assert signum(-math.inf) == -1
    with pytest.raises(InvalidNumericResultError):
        signum(math.nan)


def test_check_finite() -> None:
    """NaN and infinity map to distinct error kinds."""
    check_finite(np.array([1.0, 2.0]), "ok")
    with pytest.raises(InvalidNumericResultError):
        check_finite(np.array([1.0, math.nan, math.inf]), "bad")
    with pytest.raises(NumericOverflowError):
        check_finite(np.array([1.0, -math.inf]), "bad")


def test_check_angle_and_argument() -> None:
    """Angles and arguments must be finite."""
    assert check_angle(0.5) == 0.5
    with pytest.raises(InvalidNumericResultError):
        check_angle(math.nan)
    with pytest.raises(NumericOverflowError):
        check_angle(math.inf)

    assert check_argument(3, "x") == 3.0
    with pytest.raises(InvalidArgumentError):
        check_argument(math.nan, "x")
    with pytest.raises(InvalidArgumentError):
        check_argument(-math.inf, "x")


def test_norm2_basic() -> None:
    """norm2 matches the Pythagorean triple and handles zeros."""
    assert norm2(3.0, 4.0) == 5.0
    assert norm2(-3.0, 4.0) == 5.0
    assert norm2(0.0, 0.0) == 0.0
    assert norm2(0.0, -2.0) == 2.0


def test_norm2_avoids_overflow() -> None:
    """Large components do not overflow in the intermediate square."""
    result: float = norm2(3e200, 4e200)
    assert result == pytest.approx(5e200)
    assert math.isfinite(result)


def test_norm2_avoids_underflow() -> None:
    """Tiny components do not underflow to zero."""
    assert norm2(3e-200, 4e-200) == pytest.approx(5e-200)


def test_norm3_norm4() -> None:
    """Higher dimension norms fold norm2 from the left."""
    assert norm3(2.0, 3.0, 6.0) == pytest.approx(7.0)
    assert norm4(1.0, 2.0, 2.0, 4.0) == pytest.approx(5.0)
    assert norm3(1.0, 2.0, 3.0) == norm2(norm2(1.0, 2.0), 3.0)


def test_stable_norm() -> None:
    """stable_norm agrees with the fixed-size helpers."""
    assert stable_norm([-4.0]) == 4.0
    assert stable_norm([3.0, 4.0]) == norm2(3.0, 4.0)
    assert stable_norm([2.0, 3.0, 6.0]) == norm3(2.0, 3.0, 6.0)
    assert stable_norm([1.0, 2.0, 2.0, 4.0]) == norm4(1.0, 2.0, 2.0, 4.0)
    with pytest.raises(EmptyInputError):
        stable_norm([])
