"""
Frame driver: walks an animation schedule and renders one frame per step repetition.

Each frame goes `Idle -> Rendering -> Idle`: apply the step's operation, pose the
lattice, rasterize, hand the text to the display, clear the framebuffer. Once the
schedule is exhausted the driver is `Done`.
"""

import enum
import logging
from typing import Iterator, Optional, Protocol, Sequence

from terminal_donut.animation import AnimationState, Step, frame_count, is_spin_only
from terminal_donut.config import RenderConfig
from terminal_donut.errors import ConfigurationError
from terminal_donut.framebuffer import Framebuffer
from terminal_donut.projection import Projector
from terminal_donut.rasterizer import Rasterizer
from terminal_donut.shading import Shader
from terminal_donut.surface import TorusSampler
from terminal_donut.transform import transform
from terminal_donut.vector import ZERO

logger = logging.getLogger(__name__)


class Display(Protocol):
    """Anything that can show a finished frame, such as `TerminalDisplay`."""

    def show(self, frame: str) -> None: ...


class DriverState(enum.Enum):
    """Where the driver is in its frame cycle."""

    IDLE = "idle"
    RENDERING = "rendering"
    DONE = "done"


class FrameDriver:
    """
    Owns the lattice, framebuffer and animation state for one animation run.

    Attributes:
        config (RenderConfig): Settings the run was built from.
        schedule (Sequence[Step]): Steps to play.
        sampler (TorusSampler): Object-space lattice parameters.
        points (tuple): Object-space lattice, sampled once and reused by every frame.
        framebuffer (Framebuffer): Grid every frame is drawn into.
        animation (AnimationState): Current pose accumulators.
        state (DriverState): Where the driver is in its frame cycle.
    """

    def __init__(
        self,
        config: RenderConfig,
        schedule: Sequence[Step],
        display: Optional[Display] = None,
    ) -> None:
        """
        Build every pipeline stage up front.

        Raises:
            ConfigurationError: If any stage rejects the configuration, or the fused
                path is requested for a schedule that moves the solid outside its two
                spin angles.
        """
        if config.fused and not is_spin_only(schedule):
            raise ConfigurationError(
                "fused rendering only supports Hold and Spin steps; "
                "use the point-cloud path for Rotate and Translate"
            )
        self.config = config
        self.schedule = list(schedule)
        self.display = display

        self.sampler = TorusSampler(config.r1, config.r2, config.theta_step, config.phi_step)
        # The fused path never needs the materialized lattice.
        self.points = () if config.fused else self.sampler.points()
        self.framebuffer = Framebuffer(config.width, config.height, config.blank)
        self.rasterizer = Rasterizer(
            Projector(config.width, config.height, config.distance_to_eye, config.distance_to_object),
            Shader(config.light_direction, config.ramp),
            self.framebuffer,
        )
        self.animation = AnimationState()
        self.state = DriverState.IDLE

    def render_frame(self) -> str:
        """Rasterize the current pose and return the frame text, leaving the buffer filled."""
        animation = self.animation
        if self.config.fused:
            self.rasterizer.draw_torus(self.sampler, animation.angle_a, animation.angle_b)
        else:
            rotation, offset = animation.pose()
            self.rasterizer.draw(transform(self.points, rotation, None if offset == ZERO else offset))
        return self.framebuffer.render(border=self.config.border)

    def frames(self) -> Iterator[str]:
        """
        Play the schedule, yielding each frame's text.

        The framebuffer is cleared after every frame, before the driver returns to idle.
        """
        total = frame_count(self.schedule)
        logger.info("Playing %d frames (%d samples each)", total, len(self.sampler))
        for step in self.schedule:
            for _ in range(step.repeat):
                self.state = DriverState.RENDERING
                step.operation.apply(self.animation)
                frame = self.render_frame()
                self.framebuffer.clear()
                self.state = DriverState.IDLE
                yield frame
        self.state = DriverState.DONE
        logger.info("Animation finished")

    def run(self) -> int:
        """
        Play the whole schedule on the display.

        Returns:
            int: Number of frames shown.
        """
        if self.display is None:
            raise ConfigurationError("FrameDriver.run() needs a display")
        shown = 0
        for frame in self.frames():
            self.display.show(frame)
            shown += 1
        return shown
