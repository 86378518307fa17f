import math

import pytest

from terminal_donut.errors import ConfigurationError
from terminal_donut.shading import DEFAULT_LIGHT, RAMP, SHORT_RAMP, Shader
from terminal_donut.vector import Vector3


def test_ramps():
    assert len(RAMP) == 13
    assert len(SHORT_RAMP) == 12
    assert RAMP.startswith(SHORT_RAMP)


@pytest.mark.parametrize("ramp", [RAMP, SHORT_RAMP])
def test_quantize_boundaries(ramp):
    shader = Shader(ramp=ramp)
    last = len(ramp) - 1
    assert shader.quantize(0.0) == 0
    assert shader.quantize(1.0) == last
    assert shader.quantize(1.0000001) == last
    assert shader.quantize(7.0) == last


def test_quantize_bins_linearly():
    shader = Shader()
    assert shader.quantize(0.5) == 6
    assert shader.quantize(0.49) == 5
    assert shader.quantize(1 / 12 - 1e-9) == 0
    assert shader.quantize(1 / 12 + 1e-9) == 1


def test_light_is_normalized():
    shader = Shader(Vector3(0.0, 1.0, -1.0))
    assert shader.light == pytest.approx(DEFAULT_LIGHT)


def test_facing_the_light_is_brightest():
    shader = Shader()
    assert shader.brightness(DEFAULT_LIGHT) == pytest.approx(1.0)
    assert shader.shade(DEFAULT_LIGHT) == "@"


def test_grazing_light_is_dimmest_visible():
    assert Shader().shade(Vector3(1.0, 0.0, 0.0)) == "."


def test_facing_away_is_invisible():
    shader = Shader()
    away = Vector3(0.0, -1 / math.sqrt(2), 1 / math.sqrt(2))
    assert shader.brightness(away) == pytest.approx(-1.0)
    assert shader.shade(away) is None
    assert shader.shade(Vector3(0.0, -0.01, 0.0)) is None


@pytest.mark.parametrize("light", [Vector3(0.0, 0.0, 0.0), Vector3(float("nan"), 0.0, 1.0)])
def test_degenerate_light_is_rejected(light):
    with pytest.raises(ConfigurationError):
        Shader(light)


@pytest.mark.parametrize("ramp", ["", ["a", "bc"]])
def test_bad_ramp_is_rejected(ramp):
    with pytest.raises(ConfigurationError):
        Shader(ramp=ramp)
