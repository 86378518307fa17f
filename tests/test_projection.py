import pytest

from terminal_donut.errors import ConfigurationError
from terminal_donut.projection import Projection, Projector
from terminal_donut.vector import Vector3


@pytest.fixture
def projector():
    return Projector(48, 48, 60.0, 5.0)


def test_origin_projects_to_centre(projector):
    assert projector.project(Vector3(0.0, 0.0, 0.0)) == Projection(24, 24, 0.2)


def test_up_is_towards_the_top_row(projector):
    up = projector.project(Vector3(0.0, 0.5, 0.0))
    right = projector.project(Vector3(0.5, 0.0, 0.0))
    assert (up.col, up.row) == (24, 18)
    assert (right.col, right.row) == (30, 24)


def test_perspective_divide_shrinks_distant_points(projector):
    near = projector.project(Vector3(1.0, 0.0, -1.0))
    far = projector.project(Vector3(1.0, 0.0, 1.0))
    assert near.col == 24 + 15
    assert far.col == 24 + 10
    assert near.inv_z > far.inv_z


def test_points_off_the_grid_are_dropped(projector):
    assert projector.project(Vector3(10.0, 0.0, 0.0)) is None
    assert projector.project(Vector3(0.0, -10.0, 0.0)) is None
    assert projector.project(Vector3(-10.0, 10.0, 0.0)) is None


def test_points_at_or_behind_the_eye_are_dropped(projector):
    assert projector.project(Vector3(0.0, 0.0, -5.0)) is None
    assert projector.project(Vector3(0.0, 0.0, -7.5)) is None


@pytest.mark.parametrize(
    "width, height, eye, distance",
    [(0, 10, 60.0, 5.0), (10, -1, 60.0, 5.0), (10, 10, 0.0, 5.0), (10, 10, 60.0, 0.0), (10, 10, 60.0, -5.0)],
)
def test_degenerate_camera_is_rejected(width, height, eye, distance):
    with pytest.raises(ConfigurationError):
        Projector(width, height, eye, distance)
