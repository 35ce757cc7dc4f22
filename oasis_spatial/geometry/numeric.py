################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""
Numeric guard and stable norm helpers

All vector, point and matrix arithmetic funnels its results through these
helpers before committing them, so that no stored component is ever NaN or
infinite.

The stable 2-norm avoids intermediate overflow by scaling with the larger
magnitude:

    norm2(a, b) = u * sqrt(1 + (v / u)^2),  u = max(|a|, |b|), v = min(|a|, |b|)

Higher dimensions fold pairwise from the left, for example
``norm3(a, b, c) = norm2(norm2(a, b), c)``. The fold order affects rounding
and is kept fixed.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .errors import EmptyInputError
from .errors import InvalidArgumentError
from .errors import InvalidNumericResultError
from .errors import InvalidToleranceError
from .errors import NumericOverflowError


def is_invalid_tolerance(tol: float) -> bool:
    """Return True if the tolerance is negative or NaN."""
    # NaN fails every comparison, so test for the valid range instead
    return not tol >= 0.0


def check_tolerance(tol: float) -> None:
    """Raise InvalidToleranceError when the tolerance is invalid."""
    if is_invalid_tolerance(tol):
        raise InvalidToleranceError(
            f"invalid value for tolerance; must be nonnegative, got {tol}"
        )


def is_overflow(x: float) -> bool:
    """Return True if x is positive or negative infinity."""
    return math.isinf(x)


def are_any_overflow(*xs: float) -> bool:
    """Return True if any of the values is positive or negative infinity."""
    return any(math.isinf(x) for x in xs)


def signum(x: float) -> int:
    """Return the sign of x as -1, 0 or 1.

    Infinities carry the sign of their direction.

    Raises:
        InvalidNumericResultError: If x is NaN, which has no sign
    """
    if math.isnan(x):
        raise InvalidNumericResultError("result is NaN")
    if x < 0.0:
        return -1
    if x > 0.0:
        return 1
    return 0


def check_finite(values: NDArray[np.float64], name: str) -> None:
    """Raise when an array result contains NaN or infinite values.

    Raises:
        InvalidNumericResultError: If any value is NaN
        NumericOverflowError: If any value is infinite
    """
    if np.all(np.isfinite(values)):
        return
    if np.any(np.isnan(values)):
        raise InvalidNumericResultError(f"{name} is NaN")
    raise NumericOverflowError(f"{name} overflowed")


def check_scalar(x: float, name: str) -> float:
    """Return x when finite, otherwise raise like check_finite()."""
    if math.isnan(x):
        raise InvalidNumericResultError(f"{name} is NaN")
    if math.isinf(x):
        raise NumericOverflowError(f"{name} overflowed")
    return x


def check_angle(angle: float) -> float:
    """Validate an angle in radians before any trigonometric call."""
    return check_scalar(float(angle), "angle")


def check_argument(x: float, name: str) -> float:
    """Return x as a float when finite, otherwise raise InvalidArgumentError."""
    value: float = float(x)
    if not math.isfinite(value):
        raise InvalidArgumentError(f"{name} must be finite, got {value}")
    return value


def norm2(a: float, b: float) -> float:
    """Compute sqrt(a^2 + b^2) without intermediate overflow."""
    if a == 0.0 and b == 0.0:
        return 0.0

    x: float = abs(a)
    y: float = abs(b)
    u: float = max(x, y)
    t: float = min(x, y) / u
    return u * math.sqrt(1.0 + t * t)


def norm3(a: float, b: float, c: float) -> float:
    """Stable 2-norm of three components."""
    return norm2(norm2(a, b), c)


def norm4(a: float, b: float, c: float, d: float) -> float:
    """Stable 2-norm of four components."""
    return norm2(norm3(a, b, c), d)


def stable_norm(values: Sequence[float]) -> float:
    """Fold norm2() from the left over a sequence of components.

    A single component returns its absolute value.

    Raises:
        EmptyInputError: If the sequence is empty
    """
    if len(values) == 0:
        raise EmptyInputError("array is of length 0")

    result: float = abs(float(values[0]))
    value: float
    for value in values[1:]:
        result = norm2(result, float(value))
    return result
