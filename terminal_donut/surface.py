"""
Parametric sampling of the torus surface.

The torus is swept by two angles:

    - `theta` walks around the tube cross-section, a circle of radius `r1` whose
      centre sits `r2` away from the torus axis.
    - `phi` sweeps that circle around the Y axis.

For each pair `(theta, phi)`:

    - `circle_x = r2 + r1 * cos(theta)`, `circle_y = r1 * sin(theta)`
    - position `(circle_x * cos(phi), circle_y, circle_x * sin(phi))`
    - normal `(cos(theta) * cos(phi), sin(theta), cos(theta) * sin(phi))`
"""

import logging
import math
from math import cos, sin, tau
from typing import Iterator

from terminal_donut.errors import ConfigurationError
from terminal_donut.vector import SurfacePoint, Vector3

logger = logging.getLogger(__name__)


def _step_count(step: float) -> int:
    """Number of samples `0, step, 2*step, ...` strictly below 2π."""
    return math.ceil(tau / step)


class TorusSampler:
    """
    Fixed lattice of points on a torus.

    The lattice never changes after construction: the same samples are reused for every
    frame and only the pose applied to them varies. Iterating the sampler restarts the
    lattice from `theta = phi = 0`.

    Attributes:
        r1 (float): Radius of the tube cross-section circle.
        r2 (float): Distance from the torus axis to the centre of the tube.
        theta_step (float): Angular step around the tube (radians).
        phi_step (float): Angular step around the ring (radians).
    """

    def __init__(self, r1: float, r2: float, theta_step: float, phi_step: float) -> None:
        """
        Validate the parameters of the lattice.

        Raises:
            ConfigurationError: If a step is not a strictly positive finite number, or a
                radius is negative.
        """
        for name, step in (("theta_step", theta_step), ("phi_step", phi_step)):
            if not math.isfinite(step) or step <= 0:
                raise ConfigurationError(f"{name} must be a positive finite angle, got {step!r}")
        for name, radius in (("r1", r1), ("r2", r2)):
            if not math.isfinite(radius) or radius < 0:
                raise ConfigurationError(f"{name} must be a non-negative radius, got {radius!r}")

        self.r1 = r1
        self.r2 = r2
        self.theta_step = theta_step
        self.phi_step = phi_step
        self.thetas = tuple(i * theta_step for i in range(_step_count(theta_step)))
        self.phis = tuple(j * phi_step for j in range(_step_count(phi_step)))
        logger.debug(
            "Torus lattice r1=%s r2=%s: %d x %d samples",
            r1, r2, len(self.thetas), len(self.phis),
        )

    def __len__(self) -> int:
        return len(self.thetas) * len(self.phis)

    def sweep(self) -> tuple[tuple[float, float], ...]:
        """`(cos(phi), sin(phi))` for every ring angle, in lattice order."""
        return tuple((cos(phi), sin(phi)) for phi in self.phis)

    def cross_sections(self) -> Iterator[tuple[float, float, float, float]]:
        """
        Yield the tube cross-section for every `theta`, in lattice order.

        Returns:
            Iterator of `(cos(theta), sin(theta), circle_x, circle_y)`, where
            `circle_x = r2 + r1 * cos(theta)` and `circle_y = r1 * sin(theta)`.
        """
        r1, r2 = self.r1, self.r2
        for theta in self.thetas:
            cos_theta, sin_theta = cos(theta), sin(theta)
            yield cos_theta, sin_theta, r2 + r1 * cos_theta, r1 * sin_theta

    def __iter__(self) -> Iterator[SurfacePoint]:
        sweep = self.sweep()
        for cos_theta, sin_theta, circle_x, circle_y in self.cross_sections():
            for cos_phi, sin_phi in sweep:
                yield SurfacePoint(
                    Vector3(circle_x * cos_phi, circle_y, circle_x * sin_phi),
                    Vector3(cos_theta * cos_phi, sin_theta, cos_theta * sin_phi),
                )

    def points(self) -> tuple[SurfacePoint, ...]:
        """Materialize the whole lattice."""
        return tuple(self)
