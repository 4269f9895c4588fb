import pytest

from gravisim.motion import EPOCH_IN_SECONDS, calculate_positions
from gravisim.universe import Universe
from gravisim.vector2d import Vector2d


def test_epoch_is_one_month():
    uni = Universe()
    uni.add_body(1.0, Vector2d(0.0, 0.0), Vector2d(1.0, 0.0))
    calculate_positions(uni)
    assert uni.positions[0][0] == pytest.approx(2.628e6)
    assert EPOCH_IN_SECONDS == 2.628e6


def test_stationary_bodies_stay_put():
    uni = Universe()
    uni.add_body(10.0, Vector2d(5.0, -5.0))
    uni.add_body(20.0, Vector2d(-1.0, 3.0))
    calculate_positions(uni)
    assert uni.positions == [Vector2d(5.0, -5.0), Vector2d(-1.0, 3.0)]


def test_moving_body_advances_by_velocity_times_epoch():
    uni = Universe()
    uni.add_body(10.0, Vector2d(0.0, 0.0), Vector2d(1.0, 0.0))
    calculate_positions(uni)
    assert uni.positions[0][0] == pytest.approx(EPOCH_IN_SECONDS)
    assert uni.positions[0][1] == 0.0


def test_displacement_matches_velocity_direction():
    uni = Universe()
    start = Vector2d(100.0, 200.0)
    velocity = Vector2d(-3.0, 4.0)
    uni.add_body(1.0, start, velocity)
    calculate_positions(uni)
    displacement = uni.positions[0] - start
    assert displacement.length() == pytest.approx(velocity.length() * EPOCH_IN_SECONDS)
    assert displacement[0] / displacement[1] == pytest.approx(velocity[0] / velocity[1])


def test_other_state_is_unchanged():
    uni = Universe()
    uni.add_body(10.0, Vector2d(0.0, 0.0), Vector2d(1.0, 2.0), Vector2d(7.0, 8.0))
    calculate_positions(uni)
    assert uni.weights == [10.0]
    assert uni.velocities == [Vector2d(1.0, 2.0)]
    assert uni.forces == [Vector2d(7.0, 8.0)]
    assert uni.current_simulation_epoch == 0


def test_two_steps_equal_double_displacement():
    uni = Universe()
    uni.add_body(1.0, Vector2d(0.0, 0.0), Vector2d(2.0, -1.0))
    calculate_positions(uni)
    first = uni.positions[0]
    calculate_positions(uni)
    assert uni.positions[0][0] == pytest.approx(first[0] * 2)
    assert uni.positions[0][1] == pytest.approx(first[1] * 2)