import math

import pytest

from terminal_donut.animation import (
    AnimationState,
    Hold,
    Rotate,
    Spin,
    Step,
    Translate,
    choreographed_schedule,
    continuous_schedule,
    frame_count,
    is_spin_only,
)
from terminal_donut.errors import ConfigurationError
from terminal_donut.surface import TorusSampler
from terminal_donut.transform import transform
from terminal_donut.vector import (
    IDENTITY,
    ZERO,
    Rotation,
    Vector3,
    apply,
    compose,
    rotate,
    spin_rotation,
    translate,
)


def test_default_state_is_at_rest():
    state = AnimationState()
    assert state.pose() == (IDENTITY, ZERO)


def test_hold_changes_nothing():
    state = AnimationState()
    Hold().apply(state)
    assert state == AnimationState()


def test_spin_accumulates_angles():
    state = AnimationState()
    for _ in range(3):
        Spin(0.08, 0.03).apply(state)
    assert state.angle_a == pytest.approx(0.24)
    assert state.angle_b == pytest.approx(0.09)
    assert state.orientation == IDENTITY and state.offset == ZERO


def test_translate_accumulates_offset():
    state = AnimationState()
    Translate(Vector3(0.05, 0.0, 0.0)).apply(state)
    Translate(Vector3(0.05, 0.1, 0.0)).apply(state)
    assert state.offset == pytest.approx((0.1, 0.1, 0.0))


def test_pose_matches_incremental_point_updates():
    """Accumulated pose equals moving every point step by step."""
    points = TorusSampler(0.5, 1.0, 0.7, 0.7).points()
    turn = spin_rotation(0.08, 0.03)
    shift = Vector3(0.05, -0.02, 0.01)

    state = AnimationState()
    moved = points
    for operation in [Rotate(turn), Translate(shift), Translate(shift), Rotate(turn), Translate(shift)]:
        operation.apply(state)
        if isinstance(operation, Rotate):
            moved = tuple(rotate(point, operation.rotation) for point in moved)
        else:
            moved = tuple(translate(point, operation.offset) for point in moved)

    rotation, offset = state.pose()
    posed = transform(points, rotation, offset)
    for expected, actual in zip(moved, posed):
        assert actual.position == pytest.approx(expected.position)
        assert actual.normal == pytest.approx(expected.normal)


def test_rotate_swings_offset_about_origin():
    state = AnimationState(offset=Vector3(1.0, 0.0, 0.0))
    Rotate(spin_rotation(0.0, math.pi / 2)).apply(state)
    assert state.offset == pytest.approx((0.0, 1.0, 0.0))


def test_spin_is_applied_before_orientation():
    state = AnimationState(angle_a=math.pi / 2, orientation=spin_rotation(0.0, math.pi / 2))
    rotation, _ = state.pose()
    # tilt: (0,1,0) -> (0,0,1); the Z turn leaves it there
    assert apply(rotation, Vector3(0.0, 1.0, 0.0)) == pytest.approx((0.0, 0.0, 1.0))
    # the other order would turn it to (-1,0,0) first and keep it there
    reverse = compose(spin_rotation(math.pi / 2, 0.0), state.orientation)
    assert apply(reverse, Vector3(0.0, 1.0, 0.0)) == pytest.approx((-1.0, 0.0, 0.0))


def test_continuous_schedule_sweeps_full_turn():
    schedule = continuous_schedule(0.08, 0.03)
    assert schedule[0] == Step(Hold(), 1)
    assert schedule[1] == Step(Spin(0.08, 0.03), 210)
    assert frame_count(schedule) == 211
    assert is_spin_only(schedule)

    state = AnimationState()
    for step in schedule:
        for _ in range(step.repeat):
            step.operation.apply(state)
    assert state.angle_b >= 2 * math.pi
    assert state.angle_a >= 2 * math.pi


@pytest.mark.parametrize("delta_a, delta_b", [(0.0, 0.03), (0.08, -0.03)])
def test_continuous_schedule_rejects_non_positive_steps(delta_a, delta_b):
    with pytest.raises(ConfigurationError):
        continuous_schedule(delta_a, delta_b)


def test_choreographed_schedule_script():
    schedule = choreographed_schedule()
    assert frame_count(schedule) == 1 + 4 * 20 + 6 * 50
    assert not is_spin_only(schedule)
    assert [type(step.operation) for step in schedule] == [
        Hold, Rotate, Translate, Rotate, Translate, Rotate,
        Translate, Translate, Rotate, Translate, Rotate, Translate,
    ]
    forward, backward = schedule[1].operation, schedule[5].operation
    assert forward.rotation == spin_rotation(0.08, 0.03)
    assert backward.rotation == spin_rotation(-0.08, -0.03)
    assert schedule[2].operation.offset == Vector3(0.05, 0.0, 0.0)
    assert schedule[11].operation.offset == Vector3(0.0, 0.0, -0.05)


def test_choreographed_moves_return_to_the_start():
    state = AnimationState()
    for step in choreographed_schedule():
        if isinstance(step.operation, Translate):
            for _ in range(step.repeat):
                step.operation.apply(state)
    assert state.offset == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_rotate_rejects_non_orthonormal_matrix():
    stretch = Rotation(Vector3(3.0, 0.0, 0.0), Vector3(0.0, 3.0, 0.0), Vector3(0.0, 0.0, 3.0))
    with pytest.raises(ConfigurationError):
        Rotate(stretch)
    with pytest.raises(ConfigurationError):
        Rotate(IDENTITY._replace(row1=Vector3(0.1, 1.0, 0.0)))


def test_rotate_accepts_composed_turns():
    turn = compose(spin_rotation(0.08, 0.03), spin_rotation(-1.2, 2.5))
    assert Rotate(turn).rotation == turn


def test_negative_repeat_is_rejected():
    with pytest.raises(ConfigurationError):
        Step(Hold(), -1)
