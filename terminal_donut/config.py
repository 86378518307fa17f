"""
Render configuration.

All tunables of the renderer live in one immutable `RenderConfig`, validated once at
construction. The defaults reproduce the classic 100×40 bordered donut.
"""

import dataclasses
import math
from dataclasses import dataclass, field

from terminal_donut.errors import ConfigurationError
from terminal_donut.shading import DEFAULT_LIGHT, RAMP
from terminal_donut.vector import Vector3, length


@dataclass(frozen=True)
class RenderConfig:
    """
    Geometry, camera and output settings for one animation.

    Attributes:
        width (int): Grid width in glyph cells.
        height (int): Grid height in glyph cells.
        distance_to_eye (float): Eye-to-screen distance; scales the projected image.
        distance_to_object (float): Offset pushing the object away from the camera.
            Must exceed `r1 + r2`, so the unmoved torus lies wholly in front of the eye
            plane.
        r1 (float): Radius of the tube cross-section.
        r2 (float): Distance from the torus axis to the tube centre.
        theta_step (float): Sampling step around the tube (radians).
        phi_step (float): Sampling step around the ring (radians).
        light_direction (Vector3): Direction lit surfaces face.
        ramp (str): Glyphs from dim to bright.
        blank (str): Glyph of an empty cell.
        border (bool): Frame the output with `/-\\|` characters.
        fused (bool): Pose samples in closed form instead of building a point cloud.
        frame_delay (float): Seconds to pause after each displayed frame.
    """

    width: int = 100
    height: int = 40
    distance_to_eye: float = 60.0
    distance_to_object: float = 5.0
    r1: float = 0.5
    r2: float = 1.0
    theta_step: float = 0.07
    phi_step: float = 0.02
    light_direction: Vector3 = field(default=DEFAULT_LIGHT)
    ramp: str = RAMP
    blank: str = " "
    border: bool = True
    fused: bool = False
    frame_delay: float = 0.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"screen must be at least 1x1, got {self.width}x{self.height}")
        for name in ("distance_to_eye", "distance_to_object", "theta_step", "phi_step"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{name} must be positive and finite, got {value!r}")
        for name in ("r1", "r2"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ConfigurationError(f"{name} must be non-negative, got {value!r}")
        if self.distance_to_object <= self.r1 + self.r2:
            raise ConfigurationError(
                f"distance_to_object must exceed r1 + r2 = {self.r1 + self.r2!r}, "
                f"got {self.distance_to_object!r}"
            )
        if not length(self.light_direction) > 0:
            raise ConfigurationError("light_direction must be a non-zero vector")
        if not self.ramp:
            raise ConfigurationError("ramp must contain at least one glyph")
        if len(self.blank) != 1:
            raise ConfigurationError(f"blank must be a single character, got {self.blank!r}")
        if not self.frame_delay >= 0:
            raise ConfigurationError(f"frame_delay must be non-negative, got {self.frame_delay!r}")

    def fit_to_terminal(self, columns: int, lines: int, margin: float = 0.9) -> "RenderConfig":
        """
        Resize the grid to a terminal and rescale the projection to fill it.

        The eye distance is chosen so the torus spans about `margin` of the smaller grid
        dimension: `distance_to_eye = dim * distance_to_object * 3 / (8 * (r1 + r2))`.

        Args:
            columns (int): Terminal width in characters.
            lines (int): Terminal height in lines.
            margin (float): Fraction of the smaller dimension to occupy, in `(0, 1]`.

        Returns:
            RenderConfig: A validated copy.
        """
        if not 0 < margin <= 1:
            raise ConfigurationError(f"margin must be in (0, 1], got {margin!r}")
        # The leading newline after the cursor reset takes one line, the border two more.
        width = columns - 2 if self.border else columns
        height = lines - 3 if self.border else lines - 1
        extent = self.r1 + self.r2
        if extent <= 0:
            raise ConfigurationError("torus radii must not both be zero")
        dim = min(width, height) * margin
        return dataclasses.replace(
            self,
            width=width,
            height=height,
            distance_to_eye=dim * self.distance_to_object * 3.0 / (8.0 * extent),
        )
