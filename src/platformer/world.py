# src/platformer/world.py
from __future__ import annotations
import logging
import random
from typing import List, Optional, Tuple
from .camera import Camera
from .collision import (
    resolve_platform_collisions, check_flag_touch, check_fall_out, check_spike_hit
)
from .config import (
    SIM_DT, HEIGHT, BURST_COUNT, BURST_OFFSET, COLOR_PARTICLE
)
from .level import Level, build_level
from .particles import ParticlePool, emit, update_and_prune
from .player import Controls, Player

logger = logging.getLogger(__name__)


class World:
    """
    Whole simulation state for one run: player, level, particles and camera.
    `step()` advances it by one fixed SIM_DT tick.
    """
    def __init__(self, seed: Optional[int] = None, level: Optional[Level] = None,
                 dt: float = SIM_DT):
        if seed is None:
            seed = random.randrange(0, 2**32 - 1)
        self.seed = seed
        self.rng = random.Random(seed)
        self.dt = float(dt)
        self.level = level if level is not None else build_level()
        self.player = Player()
        self.particles = ParticlePool()
        self.camera = Camera()
        self.camera.follow(self.player.x, self.player.y)
        self.steps = 0
        self.respawns = 0
        self.events: List[str] = []

    @property
    def platforms(self):
        return self.level.platforms

    @property
    def flag(self):
        return self.level.flag

    @property
    def spikes(self):
        return self.level.spikes

    @property
    def active(self) -> bool:
        """Player is simulated only while alive and before the flag."""
        return self.player.is_alive and not self.flag.is_reached

    def burst(self, pos: Optional[Tuple[float, float]] = None, count: int = BURST_COUNT) -> int:
        """Emit one particle burst, by default at the player's burst offset."""
        if pos is None:
            pos = (self.player.x + BURST_OFFSET[0], self.player.y + BURST_OFFSET[1])
        return emit(self.particles, pos, COLOR_PARTICLE, self.rng, count)

    def respawn(self):
        self.player.reset()
        self.respawns += 1
        self.camera.follow(self.player.x, self.player.y)

    def step(self, controls: Optional[Controls] = None) -> List[str]:
        """One fixed tick. Returns (and keeps in `self.events`) what happened."""
        controls = controls or Controls()
        events: List[str] = []
        player = self.player

        if self.active:
            events.extend(player.update(controls, self.dt))
            # one burst per trigger, from where the player stood when it fired
            for pos in player.bursts:
                self.burst(pos)

            was_grounded = player.grounded
            if resolve_platform_collisions(player, self.platforms) and not was_grounded:
                events.append("landed")

            for plat in self.platforms:
                plat.advance()

            if check_fall_out(player, HEIGHT):
                self.respawns += 1
                events.append("respawn")
                logger.debug("fell out of the level, respawned (respawns=%d)", self.respawns)
            elif check_spike_hit(player, self.spikes):
                events.append("death")
                logger.info("player hit a spike at (%.1f, %.1f)", player.x, player.y)

            if player.is_alive and check_flag_touch(player, self.flag):
                events.append("flag")
                logger.info("flag reached after %d steps", self.steps)

            self.camera.follow(player.x, player.y)

        elif not player.is_alive and controls.respawn:
            self.respawn()
            events.append("respawn")
            logger.debug("manual respawn")

        update_and_prune(self.particles, self.dt)
        self.steps += 1
        self.events = events
        return events
