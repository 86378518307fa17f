"""Lambertian brightness and glyph quantization."""

import math
from typing import Optional, Sequence

from terminal_donut.errors import ConfigurationError
from terminal_donut.vector import Vector3, dot, length

# Glyph ramps, darkest first.
RAMP = ".,-~:;=!*#$@@"
SHORT_RAMP = ".,-~:;=!*#$@"

DEFAULT_LIGHT = Vector3(0.0, 1 / math.sqrt(2), -1 / math.sqrt(2))


class Shader:
    """
    Maps surface normals to glyphs using a single directional light.

    `brightness = normal · light`. Negative brightness means the surface faces away from
    the light and is not drawn at all. Brightness in `[0, 1]` picks a glyph by linear
    binning over the ramp; overshoot above 1 clamps to the brightest glyph.

    Attributes:
        light (Vector3): Normalized light direction.
        ramp (Sequence[str]): Glyphs ordered from dim to bright.
    """

    def __init__(self, light: Vector3 = DEFAULT_LIGHT, ramp: Sequence[str] = RAMP) -> None:
        """
        Args:
            light (Vector3): Direction towards which lit surfaces face; normalized here.
            ramp (Sequence[str]): Single-character glyphs, darkest first.

        Raises:
            ConfigurationError: If the light has zero length or the ramp is empty or holds
                anything but single characters.
        """
        norm = length(light)
        if not math.isfinite(norm) or norm == 0:
            raise ConfigurationError(f"light direction must be a non-zero vector, got {light!r}")
        if not ramp or any(len(glyph) != 1 for glyph in ramp):
            raise ConfigurationError(f"ramp must be non-empty single characters, got {ramp!r}")
        self.light = Vector3(light.x / norm, light.y / norm, light.z / norm)
        self.ramp = tuple(ramp)

    def brightness(self, normal: Vector3) -> float:
        """
        Lambertian brightness of a surface normal.

        Args:
            normal (Vector3): Surface normal (unit length for untranslated samples).

        Returns:
            float: `normal · light`; negative when the surface faces away.
        """
        return dot(normal, self.light)

    def quantize(self, brightness: float) -> int:
        """Ramp index for a brightness, clamped to `[0, len(ramp) - 1]`."""
        last = len(self.ramp) - 1
        index = math.floor(min(brightness, 1.0) * last)
        return max(0, min(index, last))

    def shade(self, normal: Vector3) -> Optional[str]:
        """Glyph for a normal, or None when it faces away from the light."""
        brightness = self.brightness(normal)
        if brightness < 0:
            return None
        return self.ramp[self.quantize(brightness)]
