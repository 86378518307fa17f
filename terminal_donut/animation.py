"""
Animation state and data-driven schedules.

A schedule is a list of `Step(operation, repeat)`. For every repetition the driver
applies the operation to the `AnimationState` and renders one frame, so both a
continuous spin and a scripted sequence of moves are plain data.

The pose of a frame is built in this order:

    1. spin rotation from the two accumulator angles (tilt about X, then spin about Z);
    2. the accumulated `orientation` from `Rotate` steps;
    3. the accumulated `offset` from `Translate` steps (added to positions and normals).

`Rotate` also rotates the accumulated offset, so a translated solid swings around the
origin exactly as if its points had been rotated in place.
"""

import math
from dataclasses import dataclass, field
from typing import Sequence, Union

from terminal_donut.errors import ConfigurationError
from terminal_donut.vector import (
    IDENTITY,
    ZERO,
    Rotation,
    Vector3,
    add,
    apply,
    compose,
    is_orthonormal,
    spin_rotation,
)


@dataclass
class AnimationState:
    """
    Pose accumulators owned by the frame driver.

    Attributes:
        angle_a (float): Tilt about the X axis (radians).
        angle_b (float): Spin about the Z axis (radians).
        orientation (Rotation): Product of every `Rotate` step so far.
        offset (Vector3): Sum of every `Translate` step, rotated along with the pose.
    """

    angle_a: float = 0.0
    angle_b: float = 0.0
    orientation: Rotation = IDENTITY
    offset: Vector3 = ZERO

    def pose(self) -> tuple[Rotation, Vector3]:
        """Net rotation and offset for the current frame."""
        return compose(self.orientation, spin_rotation(self.angle_a, self.angle_b)), self.offset


@dataclass(frozen=True)
class Hold:
    """Render the current pose unchanged."""

    def apply(self, state: AnimationState) -> None:
        pass


@dataclass(frozen=True)
class Spin:
    """Advance the tilt (`delta_a`, about X) and spin (`delta_b`, about Z) angles."""

    delta_a: float
    delta_b: float

    def apply(self, state: AnimationState) -> None:
        state.angle_a += self.delta_a
        state.angle_b += self.delta_b


@dataclass(frozen=True)
class Rotate:
    """Rotate the whole current pose, including its offset, about the origin."""

    rotation: Rotation

    def __post_init__(self) -> None:
        if not is_orthonormal(self.rotation):
            raise ConfigurationError(f"Rotate needs an orthonormal matrix, got {self.rotation!r}")

    def apply(self, state: AnimationState) -> None:
        state.orientation = compose(self.rotation, state.orientation)
        state.offset = apply(self.rotation, state.offset)


@dataclass(frozen=True)
class Translate:
    """Move the solid by `offset`."""

    offset: Vector3

    def apply(self, state: AnimationState) -> None:
        state.offset = add(state.offset, self.offset)


Operation = Union[Hold, Spin, Rotate, Translate]


@dataclass(frozen=True)
class Step:
    """Apply `operation` and render a frame, `repeat` times."""

    operation: Operation = field(default_factory=Hold)
    repeat: int = 1

    def __post_init__(self) -> None:
        if self.repeat < 0:
            raise ConfigurationError(f"repeat must be non-negative, got {self.repeat}")


def frame_count(schedule: Sequence[Step]) -> int:
    """Total number of frames a schedule renders."""
    return sum(step.repeat for step in schedule)


def is_spin_only(schedule: Sequence[Step]) -> bool:
    """True if no step rotates or translates the solid outside the two spin angles."""
    return all(isinstance(step.operation, (Hold, Spin)) for step in schedule)


def continuous_schedule(delta_a: float = 0.08, delta_b: float = 0.03) -> list[Step]:
    """
    One unrotated frame, then spin until both angles have swept a full turn.

    Raises:
        ConfigurationError: If either step is not strictly positive.
    """
    if not delta_a > 0 or not delta_b > 0:
        raise ConfigurationError(
            f"angle steps must be positive, got delta_a={delta_a!r} delta_b={delta_b!r}"
        )
    turns = math.ceil(2 * math.pi / min(delta_a, delta_b))
    return [Step(Hold(), 1), Step(Spin(delta_a, delta_b), turns)]


def choreographed_schedule(
    delta_a: float = 0.08,
    delta_b: float = 0.03,
    shift: float = 0.05,
    turn_frames: int = 20,
    move_frames: int = 50,
) -> list[Step]:
    """
    Scripted sequence of incremental turns and moves along each axis.

    The solid turns forwards, slides right and back, turns forwards again, then turns
    backwards between excursions up and down and towards and away from the camera.
    """
    forward = Rotate(spin_rotation(delta_a, delta_b))
    backward = Rotate(spin_rotation(-delta_a, -delta_b))
    return [
        Step(Hold(), 1),
        Step(forward, turn_frames),
        Step(Translate(Vector3(shift, 0.0, 0.0)), move_frames),
        Step(forward, turn_frames),
        Step(Translate(Vector3(-shift, 0.0, 0.0)), move_frames),
        Step(backward, turn_frames),
        Step(Translate(Vector3(0.0, shift, 0.0)), move_frames),
        Step(Translate(Vector3(0.0, -shift, 0.0)), move_frames),
        Step(backward, turn_frames),
        Step(Translate(Vector3(0.0, 0.0, shift)), move_frames),
        Step(backward, turn_frames),
        Step(Translate(Vector3(0.0, 0.0, -shift)), move_frames),
    ]
