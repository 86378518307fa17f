"""
Terminal-based 3D rotating torus ("donut") renderer.

Samples a parametric torus, poses it with rigid rotations (and optional translations),
projects it with a pinhole camera, resolves visibility with a reciprocal-depth buffer and
shades each visible cell with a glyph from a brightness ramp.
"""

from terminal_donut.animation import (
    AnimationState,
    Hold,
    Rotate,
    Spin,
    Step,
    Translate,
    choreographed_schedule,
    continuous_schedule,
)
from terminal_donut.config import RenderConfig
from terminal_donut.driver import DriverState, FrameDriver
from terminal_donut.errors import ConfigurationError, DonutError
from terminal_donut.framebuffer import Framebuffer
from terminal_donut.projection import Projection, Projector
from terminal_donut.rasterizer import Rasterizer
from terminal_donut.shading import RAMP, SHORT_RAMP, Shader
from terminal_donut.surface import TorusSampler
from terminal_donut.transform import transform
from terminal_donut.vector import IDENTITY, Rotation, SurfacePoint, Vector3

__version__ = "1.0.0"

__all__ = [
    "AnimationState",
    "ConfigurationError",
    "DonutError",
    "DriverState",
    "FrameDriver",
    "Framebuffer",
    "Hold",
    "IDENTITY",
    "Projection",
    "Projector",
    "RAMP",
    "Rasterizer",
    "RenderConfig",
    "Rotate",
    "Rotation",
    "SHORT_RAMP",
    "Shader",
    "Spin",
    "Step",
    "SurfacePoint",
    "TorusSampler",
    "Translate",
    "Vector3",
    "choreographed_schedule",
    "continuous_schedule",
    "transform",
]
