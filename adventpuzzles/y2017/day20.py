"""Particle swarm: closest particle and collisions."""

from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass

Vector = tuple[int, int, int]

_VECTOR = r"<\s*(-?\d+)\s*,\s*(-?\d+)\s*,\s*(-?\d+)\s*>"
_PARTICLE = re.compile(rf"p={_VECTOR},\s*v={_VECTOR},\s*a={_VECTOR}")

PATIENCE = 1000


def _move(x: int, v: int, a: int, t: int) -> int:
    return x + t * v + t * (t + 1) // 2 * a


@dataclass
class Particle:
    """A particle with position, velocity and acceleration."""

    p: Vector
    v: Vector
    a: Vector
    dead: bool = False

    def position(self, t: int) -> Vector:
        """Return the position after ``t`` ticks."""
        x, y, z = (_move(p, v, a, t) for p, v, a in zip(self.p, self.v, self.a))
        return x, y, z

    def distance(self, t: int) -> int:
        """Return the Manhattan distance from the origin after ``t`` ticks."""
        return sum(abs(coord) for coord in self.position(t))

    def collides(self, other: Particle, t: int) -> bool:
        """Return whether both particles are alive and share a position at ``t``."""
        if self.dead or other.dead:
            return False
        return self.position(t) == other.position(t)


def parse_particle(line: str) -> Particle:
    """Parse ``p=<x,y,z>, v=<x,y,z>, a=<x,y,z>``."""
    match = _PARTICLE.search(line)
    if match is None:
        raise ValueError(f"malformed particle: {line!r}")
    n = [int(group) for group in match.groups()]
    return Particle((n[0], n[1], n[2]), (n[3], n[4], n[5]), (n[6], n[7], n[8]))


def simulate(particles: Sequence[Particle], patience: int = PATIENCE) -> tuple[int, int]:
    """Run until the closest particle and the survivor count both stay put for ``patience`` ticks.

    Colliding particles are marked dead. Returns the index of the closest
    particle and the number of survivors.
    """
    if not particles:
        raise ValueError("there are no particles")
    alive = sum(not particle.dead for particle in particles)
    closest = last_closest = 0
    last_alive = alive
    steady_closest = steady_alive = 0
    t = 0
    while steady_closest < patience or steady_alive < patience:
        closest = min(range(len(particles)), key=lambda i: particles[i].distance(t))

        places: defaultdict[Vector, list[Particle]] = defaultdict(list)
        for particle in particles:
            if not particle.dead:
                places[particle.position(t)].append(particle)
        for group in places.values():
            if len(group) > 1:
                for particle in group:
                    particle.dead = True
                alive -= len(group)

        if closest != last_closest:
            last_closest = closest
            steady_closest = 0
        else:
            steady_closest += 1
        if alive != last_alive:
            last_alive = alive
            steady_alive = 0
        else:
            steady_alive += 1
        t += 1
    return closest, alive


def solve(text: str) -> tuple[int, int]:
    """Return the particle staying closest to the origin and the number left after collisions."""
    particles = [parse_particle(line) for line in text.splitlines() if line.strip()]
    return simulate(particles)