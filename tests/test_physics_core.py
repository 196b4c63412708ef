import math

import pytest

from flappy.constants import GROUND_Y, BIRD_HEIGHT
from flappy.data_models import Bird, Pipe
from flappy.physics_core import PhysicsCore


@pytest.fixture
def core():
    return PhysicsCore()


def test_velocity_updates_before_position(core):
    y, v = core.apply_gravity_and_movement(300.0, -8.0)
    assert v == -7.5
    assert y == 292.5


def test_flap_replaces_velocity(core):
    assert core.flap() == -8.0


def test_ceiling_clamp_zeroes_momentum(core):
    bird = Bird(y=2.0, velocity=-8.0)
    core.step_bird(bird)
    assert bird.y == 0.0
    assert bird.velocity == 0.0


def test_no_clamp_below_ceiling(core):
    bird = Bird(y=20.0, velocity=-8.0)
    core.step_bird(bird)
    assert bird.y == 12.5
    assert bird.velocity == -7.5


def test_rotation_is_clamped():
    core = PhysicsCore()
    assert core.rotation_for(100.0) == math.pi / 2
    assert core.rotation_for(-100.0) == -math.pi / 4
    assert core.rotation_for(2.0) == pytest.approx(0.2)


def test_ground_touch_counts_as_hit(core):
    assert core.hits_ground(Bird(y=GROUND_Y - BIRD_HEIGHT))
    assert core.hits_ground(Bird(y=GROUND_Y - BIRD_HEIGHT + 0.1))
    assert not core.hits_ground(Bird(y=GROUND_Y - BIRD_HEIGHT - 0.1))


def test_gap_containing_bird_is_safe(core):
    bird = Bird(y=300.0)   # spans 300..330
    pipe = Pipe(x=80.0, top_height=299.5, gap=31.0)
    assert not core.check_collision(bird, pipe)


def test_gap_edges_touching_bird_are_safe(core):
    bird = Bird(y=300.0)
    pipe = Pipe(x=80.0, top_height=300.0, gap=30.0)
    assert not core.check_collision(bird, pipe)


def test_shrinking_gap_top_collides(core):
    bird = Bird(y=300.0)
    pipe = Pipe(x=80.0, top_height=300.5, gap=30.0)
    assert core.check_collision(bird, pipe)


def test_shrinking_gap_bottom_collides(core):
    bird = Bird(y=300.0)
    pipe = Pipe(x=80.0, top_height=299.5, gap=30.0)
    assert core.check_collision(bird, pipe)


def test_no_collision_without_horizontal_overlap(core):
    bird = Bird(y=300.0)   # spans x 80..110
    closed = dict(top_height=600.0, gap=0.0)
    assert not core.check_collision(bird, Pipe(x=110.0, **closed))
    assert not core.check_collision(bird, Pipe(x=20.0, **closed))
    assert core.check_collision(bird, Pipe(x=109.0, **closed))
    assert core.check_collision(bird, Pipe(x=21.0, **closed))


def test_collides_with_any(core):
    bird = Bird(y=300.0)
    safe = Pipe(x=80.0, top_height=250.0)
    deadly = Pipe(x=90.0, top_height=320.0)
    assert not core.collides_with_any(bird, [safe])
    assert core.collides_with_any(bird, [safe, deadly])
    assert not core.collides_with_any(bird, [])
