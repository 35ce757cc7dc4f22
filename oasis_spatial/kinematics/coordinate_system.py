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
Coordinate system hierarchy

A coordinate system is an origin plus two basis vectors b0 and b1, all
expressed in the parent frame. The third basis vector follows from the
right-hand rule:

    b2 = b0 x b1
    b1' = b2 x b0

The local orientation matrix has rows (b0, b1', b2). Frames form a tree
through their parent references; a frame without a parent is a root and is
treated as the global frame.

Global orientation is composed by walking from a frame up to its root and
premultiplying each local orientation:

    R_global = R_root @ ... @ R_parent @ R_this
"""

from __future__ import annotations

import logging
from typing import Iterator
from typing import Optional

from oasis_spatial.config.spatial_config import SpatialConfig
from oasis_spatial.geometry.errors import InvalidArgumentError
from oasis_spatial.geometry.errors import SpatialError
from oasis_spatial.geometry.matrix import Matrix3
from oasis_spatial.geometry.point import Point3
from oasis_spatial.geometry.vector import Vector3
from oasis_spatial.kinematics.transform3d import Transform3D


_LOG: logging.Logger = logging.getLogger(__name__)


class CoordinateSystem:
    """Frame defined by an origin and two basis vectors in its parent frame.

    The frame copies its origin and basis vectors on construction, so later
    changes to the caller's objects do not affect it. The parent link is
    fixed at construction, which keeps the hierarchy acyclic. A child holds a
    strong reference to its parent; parents do not track their children.
    """

    __slots__ = ("_origin", "_b0", "_b1", "_parent", "_name")

    def __init__(
        self,
        origin: Point3,
        b0: Vector3,
        b1: Vector3,
        parent: Optional[CoordinateSystem] = None,
        name: str = "",
    ) -> None:
        if not isinstance(origin, Point3):
            raise InvalidArgumentError(
                f"origin must be a Point3, got {type(origin).__name__}"
            )
        if not isinstance(b0, Vector3) or not isinstance(b1, Vector3):
            raise InvalidArgumentError("basis vectors must be Vector3 instances")
        if parent is not None and not isinstance(parent, CoordinateSystem):
            raise InvalidArgumentError(
                f"parent must be a CoordinateSystem, got {type(parent).__name__}"
            )

        self._origin: Point3 = origin.copy()
        self._b0: Vector3 = b0.copy()
        self._b1: Vector3 = b1.copy()
        self._parent: Optional[CoordinateSystem] = parent
        self._name: str = name

    @classmethod
    def global_frame(cls, config: Optional[SpatialConfig] = None) -> CoordinateSystem:
        """Return a root frame at the origin with the canonical basis."""
        name: str = (
            config.global_frame_name()
            if config is not None
            else SpatialConfig.from_defaults().global_frame_name()
        )
        return cls(Point3.origin(), Vector3.x_axis(), Vector3.y_axis(), name=name)

    #
    # Accessors
    #

    @property
    def origin(self) -> Point3:
        """Copy of the origin, expressed in the parent frame."""
        return self._origin.copy()

    @property
    def b0(self) -> Vector3:
        """Copy of the first basis vector, expressed in the parent frame."""
        return self._b0.copy()

    @property
    def b1(self) -> Vector3:
        """Copy of the second basis vector, expressed in the parent frame."""
        return self._b1.copy()

    @property
    def parent(self) -> Optional[CoordinateSystem]:
        return self._parent

    @property
    def name(self) -> str:
        return self._name

    def is_root(self) -> bool:
        return self._parent is None

    def ancestors(self) -> Iterator[CoordinateSystem]:
        """Yield this frame, then each ancestor up to and including the root."""
        current: Optional[CoordinateSystem] = self
        while current is not None:
            yield current
            current = current._parent

    def depth(self) -> int:
        """Return the number of ancestors above this frame."""
        return sum(1 for _ in self.ancestors()) - 1

    def root(self) -> CoordinateSystem:
        frame: CoordinateSystem = self
        for frame in self.ancestors():
            pass
        return frame

    def __repr__(self) -> str:
        parent_name: str = self._parent.name if self._parent is not None else "None"
        return (
            f"CoordinateSystem(name={self._name!r}, origin={self._origin!r}, "
            f"b0={self._b0!r}, b1={self._b1!r}, parent={parent_name})"
        )

    #
    # Orientation
    #

    def local_orientation(self) -> Matrix3:
        """Return the rotation from the parent frame with rows (b0, b1', b2).

        b1 is re-derived from b2 x b0, so a b1 that is not exactly orthogonal
        to b0 still yields orthogonal rows. The rows are not normalized.

        Raises:
            NumericOverflowError: If a cross product overflows
        """
        b2: Vector3 = self._b0.cross(self._b1)
        b1: Vector3 = b2.cross(self._b0)

        return Matrix3(*self._b0.components(), *b1.components(), *b2.components())

    def global_orientation(self) -> Matrix3:
        """Return the orientation of this frame relative to the root frame.

        Any failure while computing a local orientation aborts the walk and
        propagates, so no partial result is ever returned.
        """
        result: Matrix3 = Matrix3.eye()

        frame: CoordinateSystem
        for frame in self.ancestors():
            try:
                result.premultiply(frame.local_orientation())
            except SpatialError:
                _LOG.debug(
                    "Failed to compose orientation of %r at frame %r",
                    self._name,
                    frame.name,
                )
                raise

        return result

    def rotate(self, axis: Vector3, angle: float) -> CoordinateSystem:
        """Rotate b0 and b1 about an axis expressed in the parent frame.

        Both basis vectors are updated together; on failure neither changes.
        """
        rotation: Transform3D = Transform3D.rotation(axis, angle)
        b0: Vector3 = rotation.apply(self._b0)
        b1: Vector3 = rotation.apply(self._b1)

        self._b0 = b0
        self._b1 = b1
        return self

    def check_basis(self, config: SpatialConfig) -> None:
        """Validate the basis and hierarchy against configured tolerances.

        Raises:
            InvalidArgumentError: If b0 or b1 is not unit length, if they are
                parallel, or if the frame is nested deeper than max_depth
        """
        tol: float = config.unit_length_tol()
        if not self._b0.is_unit_length(tol):
            raise InvalidArgumentError(f"b0 of frame {self._name!r} is not unit length")
        if not self._b1.is_unit_length(tol):
            raise InvalidArgumentError(f"b1 of frame {self._name!r} is not unit length")
        if self._b0.is_parallel_to(self._b1, config.angular_tol()):
            raise InvalidArgumentError(
                f"basis vectors of frame {self._name!r} are parallel"
            )

        depth: int = self.depth()
        if depth > config.max_depth():
            raise InvalidArgumentError(
                f"frame {self._name!r} is nested {depth} levels deep, "
                f"limit is {config.max_depth()}"
            )
