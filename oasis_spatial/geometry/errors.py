################################################################################
#
#  Copyright (C) 2026 Garrett Brown
#  This file is part of OASIS - https://github.com/eigendude/OASIS
#
#  SPDX-License-Identifier: Apache-2.0
#  See DOCS/LICENSING.md for more information.
#
################################################################################

"""Error kinds raised by the spatial geometry core.

Every numeric operation either commits a finite result or raises one of the
exceptions below, leaving its receiver unchanged. The classes also derive
from the closest builtin exception so callers can catch them generically.
"""

from __future__ import annotations


class SpatialError(Exception):
    """Base class for all spatial geometry errors."""


class NumericOverflowError(SpatialError, ArithmeticError):
    """Raised when a computation produces an infinite value."""


class NumericUnderflowError(SpatialError, ArithmeticError):
    """Raised when a non-zero result is flushed to zero."""


class InvalidNumericResultError(SpatialError, ArithmeticError):
    """Raised when a computation produces NaN."""


class DivideByZeroError(SpatialError, ZeroDivisionError):
    """Raised when a computation would divide by zero."""


class ZeroLengthVectorError(DivideByZeroError):
    """Raised when a vector of zero length cannot be used as a direction."""


class EmptyInputError(SpatialError, ValueError):
    """Raised when an operation receives no input values."""


class MatrixDimensionError(SpatialError, ValueError):
    """Raised when operand dimensions do not match."""


class MatrixIndexError(SpatialError, IndexError):
    """Raised when a matrix index is out of range."""


class InvalidArgumentError(SpatialError, ValueError):
    """Raised when an argument is unexpectedly invalid, such as NaN."""


class InvalidToleranceError(InvalidArgumentError):
    """Raised when a tolerance is negative or NaN."""


class SingularMatrixError(SpatialError, ArithmeticError):
    """Raised when a matrix is too close to singular to invert."""
