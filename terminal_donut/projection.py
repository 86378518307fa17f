"""Perspective projection from camera space to screen cells."""

import math
from typing import NamedTuple, Optional

from terminal_donut.errors import ConfigurationError
from terminal_donut.vector import Vector3


class Projection(NamedTuple):
    """
    Screen cell hit by a projected point.

    Attributes:
        col (int): Column in `[0, width)`.
        row (int): Row in `[0, height)`, growing downwards.
        inv_z (float): Reciprocal camera depth; larger means closer to the viewer.
    """

    col: int
    row: int
    inv_z: float


class Projector:
    """
    Pinhole camera looking down +Z at a `width × height` grid.

    The object is pushed `distance_to_object` away from the camera, then projected with
    `screen = distance_to_eye * coordinate / depth`, centred on the grid. Rows are
    flipped because the model's +Y points up while screen rows count down.
    """

    def __init__(
        self,
        width: int,
        height: int,
        distance_to_eye: float,
        distance_to_object: float,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"screen must be at least 1x1, got {width}x{height}")
        if not math.isfinite(distance_to_eye) or distance_to_eye <= 0:
            raise ConfigurationError(
                f"distance_to_eye must be positive, got {distance_to_eye!r}"
            )
        if not math.isfinite(distance_to_object) or distance_to_object <= 0:
            raise ConfigurationError(
                f"distance_to_object must be positive, got {distance_to_object!r}"
            )
        self.width = width
        self.height = height
        self.distance_to_eye = distance_to_eye
        self.distance_to_object = distance_to_object

    def project(self, position: Vector3) -> Optional[Projection]:
        """
        Project a posed position onto the screen.

        Returns:
            Optional[Projection]: The target cell and reciprocal depth, or None when the
            point lands outside the grid or at/behind the eye plane.
        """
        depth = position.z + self.distance_to_object
        if depth <= 0:
            return None
        inv_z = 1.0 / depth
        col = self.width // 2 + round(self.distance_to_eye * position.x * inv_z)
        row = self.height // 2 - round(self.distance_to_eye * position.y * inv_z)
        if not (0 <= col < self.width and 0 <= row < self.height):
            return None
        return Projection(col, row, inv_z)
