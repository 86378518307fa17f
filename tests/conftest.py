import logging

import pytest

from terminal_donut.config import RenderConfig
from terminal_donut.framebuffer import Framebuffer
from terminal_donut.projection import Projector
from terminal_donut.rasterizer import Rasterizer
from terminal_donut.shading import Shader


@pytest.fixture
def small_config():
    # Coarse sampling keeps pure-Python frames quick.
    return RenderConfig(
        width=48,
        height=24,
        distance_to_eye=30.0,
        distance_to_object=5.0,
        theta_step=0.2,
        phi_step=0.1,
    )


@pytest.fixture
def rasterizer():
    framebuffer = Framebuffer(48, 48)
    return Rasterizer(Projector(48, 48, 60.0, 5.0), Shader(), framebuffer)


@pytest.fixture
def reset_package_logger():
    yield
    logger = logging.getLogger("terminal_donut")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
