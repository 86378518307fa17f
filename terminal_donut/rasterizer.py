"""
Per-point rasterization: projection, shading and depth-tested compositing.

Two ways to fill a framebuffer share the same per-sample rules:

    1. `draw` takes an already posed point cloud (see `terminal_donut.transform`).
    2. `draw_torus` poses each lattice sample in closed form from the two animation
       angles, without building an intermediate point cloud.

For every sample the order is fixed: project, drop if off-screen, shade, drop if the
surface faces away from the light, and only then depth-test and store. An unlit sample
therefore never claims a cell in the z-buffer.
"""

import logging
from math import cos, sin
from typing import Iterable

from terminal_donut.framebuffer import Framebuffer
from terminal_donut.projection import Projector
from terminal_donut.shading import Shader
from terminal_donut.surface import TorusSampler
from terminal_donut.vector import SurfacePoint, Vector3

logger = logging.getLogger(__name__)


class Rasterizer:
    """
    Composites surface samples into a framebuffer.

    Attributes:
        projector (Projector): Camera used to find each sample's cell and depth.
        shader (Shader): Light model choosing each sample's glyph.
        framebuffer (Framebuffer): Target grid; cleared by the caller between frames.
    """

    def __init__(self, projector: Projector, shader: Shader, framebuffer: Framebuffer) -> None:
        self.projector = projector
        self.shader = shader
        self.framebuffer = framebuffer

    def _plot(self, position: Vector3, normal: Vector3) -> bool:
        projection = self.projector.project(position)
        if projection is None:
            return False
        glyph = self.shader.shade(normal)
        if glyph is None:
            return False
        return self.framebuffer.write(projection.col, projection.row, glyph, projection.inv_z)

    def draw_point(self, point: SurfacePoint) -> bool:
        """Draw one posed sample; True if it won its cell."""
        return self._plot(point.position, point.normal)

    def draw(self, points: Iterable[SurfacePoint]) -> int:
        """
        Draw a posed point cloud.

        Returns:
            int: Number of successful cell writes.
        """
        written = sum(1 for point in points if self._plot(point.position, point.normal))
        logger.debug("Drew point cloud: %d cell writes", written)
        return written

    def draw_torus(self, sampler: TorusSampler, angle_a: float, angle_b: float) -> int:
        """
        Draw the torus posed by `spin_rotation(angle_a, angle_b)` in closed form.

        Equivalent to `draw(transform(sampler, spin_rotation(angle_a, angle_b)))`: tilt
        about X by `angle_a`, then spin about Z by `angle_b`.

        Args:
            sampler (TorusSampler): Lattice parameters (radii and angular steps).
            angle_a (float): Tilt about the X axis (radians).
            angle_b (float): Spin about the Z axis (radians).

        Returns:
            int: Number of successful cell writes.
        """
        cos_a, sin_a = cos(angle_a), sin(angle_a)
        cos_b, sin_b = cos(angle_b), sin(angle_b)
        sweep = sampler.sweep()

        written = 0
        for cos_theta, sin_theta, circle_x, circle_y in sampler.cross_sections():
            for cos_phi, sin_phi in sweep:
                # Tilt about X
                y = circle_y * cos_a - circle_x * sin_phi * sin_a
                z = circle_y * sin_a + circle_x * sin_phi * cos_a
                ny = sin_theta * cos_a - cos_theta * sin_phi * sin_a
                nz = sin_theta * sin_a + cos_theta * sin_phi * cos_a

                # Spin about Z
                x = circle_x * cos_phi
                nx = cos_theta * cos_phi
                position = Vector3(x * cos_b - y * sin_b, x * sin_b + y * cos_b, z)
                normal = Vector3(nx * cos_b - ny * sin_b, nx * sin_b + ny * cos_b, nz)

                if self._plot(position, normal):
                    written += 1

        logger.debug("Drew torus at a=%.3f b=%.3f: %d cell writes", angle_a, angle_b, written)
        return written
