import pytest

from adventpuzzles.y2017.day20 import Particle, parse_particle, simulate, solve

CLOSEST = """\
p=< 3,0,0>, v=< 2,0,0>, a=<-1,0,0>
p=< 4,0,0>, v=< 0,0,0>, a=<-2,0,0>
"""

COLLIDING = """\
p=<-6,0,0>, v=< 3,0,0>, a=< 0,0,0>
p=<-4,0,0>, v=< 2,0,0>, a=< 0,0,0>
p=<-2,0,0>, v=< 1,0,0>, a=< 0,0,0>
p=< 3,0,0>, v=<-1,0,0>, a=< 0,0,0>
"""


def parse(text):
    return [parse_particle(line) for line in text.splitlines()]


def test_parse_particle():
    assert parse_particle("p=< 3,0,0>, v=< 2,0,0>, a=<-1,0,0>") == Particle(
        (3, 0, 0), (2, 0, 0), (-1, 0, 0)
    )


def test_parse_rejects_garbage():
    with pytest.raises(ValueError):
        parse_particle("p=<1,2>")


def test_position_at_zero_is_start():
    particle = parse_particle("p=<1,-2,3>, v=<4,5,6>, a=<7,8,9>")
    assert particle.position(0) == (1, -2, 3)
    assert particle.distance(0) == 1 + 2 + 3


def test_collision_at_meeting_time():
    first, second, *_ = parse(COLLIDING)
    assert first.collides(second, 2)
    assert not first.collides(second, 1)


def test_dead_particles_do_not_collide():
    first, second, *_ = parse(COLLIDING)
    first.dead = True
    assert not first.collides(second, 2)


def test_closest_example():
    closest, alive = simulate(parse(CLOSEST), patience=50)
    assert closest == 0
    assert alive == 2


def test_collision_example_leaves_one():
    particles = parse(COLLIDING)
    _, alive = simulate(particles, patience=50)
    assert alive == 1
    assert [p.dead for p in particles].count(False) == alive


def test_solve_closest_example():
    assert solve(CLOSEST) == (0, 2)


def test_simulate_empty_rejected():
    with pytest.raises(ValueError):
        simulate([])