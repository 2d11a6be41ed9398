# src/platformer/particles.py
from __future__ import annotations
import random
from dataclasses import dataclass
from typing import Iterator, List, Tuple
import pygame
from .config import (
    MAX_PARTICLES, PARTICLE_SPEED_STEPS, PARTICLE_SIZE_MIN, PARTICLE_SIZE_MAX
)

Color = Tuple[int, int, int]


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    rotation: float   # degrees
    size: float
    color: Color
    life: float = 1.0

    @property
    def alpha(self) -> int:
        """Opacity driven by remaining life, clamped to a byte."""
        return max(0, min(255, int(self.life * 255)))

    @property
    def alive(self) -> bool:
        return self.life > 0.0


class ParticlePool:
    """
    Bounded particle container with insert-or-reject semantics:
    once `capacity` particles are alive, further inserts are dropped.
    """
    def __init__(self, capacity: int = MAX_PARTICLES):
        self.capacity = capacity
        self._items: List[Particle] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Particle]:
        return iter(self._items)

    @property
    def full(self) -> bool:
        return len(self._items) >= self.capacity

    def try_add(self, particle: Particle) -> bool:
        if self.full:
            return False
        self._items.append(particle)
        return True

    def prune(self) -> int:
        """Drop expired particles. Returns how many were removed."""
        before = len(self._items)
        self._items = [p for p in self._items if p.alive]
        return before - len(self._items)

    def clear(self):
        self._items.clear()


def make_particle(x: float, y: float, color: Color, rng: random.Random) -> Particle:
    n = PARTICLE_SPEED_STEPS
    return Particle(
        x=float(x),
        y=float(y),
        vx=rng.randint(-n, n) / 10.0,
        vy=rng.randint(-n, n) / 10.0,
        rotation=float(rng.randrange(360)),
        size=float(rng.randint(PARTICLE_SIZE_MIN, PARTICLE_SIZE_MAX)),
        color=color,
    )


def emit(pool: ParticlePool, pos: Tuple[float, float], color: Color,
         rng: random.Random, count: int = 1) -> int:
    """Request `count` particles at `pos`. Returns how many the pool accepted."""
    accepted = 0
    for _ in range(count):
        if pool.full:
            break  # the rest would be rejected too
        if pool.try_add(make_particle(pos[0], pos[1], color, rng)):
            accepted += 1
    return accepted


def update_and_prune(pool: ParticlePool, dt: float) -> int:
    """Advance every particle one step, fade by `dt`, then drop the expired ones."""
    for p in pool:
        p.x += p.vx
        p.y += p.vy
        p.life -= dt
    return pool.prune()


def draw_particles(surf: pygame.Surface, pool: ParticlePool, camera):
    """Rotated squares, centred on the particle, faded by remaining life."""
    for p in pool:
        side = max(1, int(p.size * camera.zoom))
        square = pygame.Surface((side, side), pygame.SRCALPHA)
        square.fill((*p.color, p.alpha))
        # pygame rotates counter-clockwise; screen-space rotation is clockwise
        rotated = pygame.transform.rotate(square, -p.rotation)
        sx, sy = camera.world_to_screen((p.x, p.y))
        surf.blit(rotated, rotated.get_rect(center=(int(sx), int(sy))))
