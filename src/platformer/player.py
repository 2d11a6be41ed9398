# src/platformer/player.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple
import pygame
from .config import (
    SPAWN_X, SPAWN_Y, PLAYER_W, PLAYER_H, BASE_SPEED, MAX_JUMPS,
    DASH_SPEED, DASH_TIME, DASH_COOLDOWN, GRAVITY, JUMP_VY, TIMER_EPS,
    BURST_OFFSET
)


@dataclass
class Controls:
    """One simulation step of sampled input. `left`/`right` are held, the rest are presses."""
    left: bool = False
    right: bool = False
    jump: bool = False
    dash: bool = False
    respawn: bool = False


def _tick_timer(t: float, dt: float) -> float:
    t -= dt
    return 0.0 if t <= TIMER_EPS else t


@dataclass
class Player:
    """
    Platformer player:
    - up to MAX_JUMPS jumps between landings (second one is the double jump)
    - dash: DASH_SPEED for DASH_TIME seconds, gated by DASH_COOLDOWN
    Gravity and horizontal speed are per simulation step; timers are in seconds.
    """
    x: float = SPAWN_X
    y: float = SPAWN_Y
    vx: float = 0.0
    vy: float = 0.0
    speed: float = BASE_SPEED
    jump_count: int = 0
    max_jumps: int = MAX_JUMPS
    is_dashing: bool = False
    dash_speed: float = DASH_SPEED
    dash_time: float = DASH_TIME
    dash_cooldown: float = DASH_COOLDOWN
    dash_timer: float = 0.0
    dash_cooldown_timer: float = 0.0
    is_alive: bool = True
    grounded: bool = False
    w: float = PLAYER_W
    h: float = PLAYER_H
    # where each particle burst raised by the last update() starts
    bursts: List[Tuple[float, float]] = field(default_factory=list, repr=False)

    @property
    def box(self):
        return (self.x, self.y, self.w, self.h)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.w), int(self.h))

    def reset(self):
        """Back to the spawn point with every piece of state cleared."""
        self.x, self.y = SPAWN_X, SPAWN_Y
        self.vx = self.vy = 0.0
        self.speed = BASE_SPEED
        self.jump_count = 0
        self.is_dashing = False
        self.dash_timer = 0.0
        self.dash_cooldown_timer = 0.0
        self.is_alive = True
        self.grounded = False
        self.bursts = []

    def can_dash(self) -> bool:
        return self.dash_cooldown_timer <= 0.0

    def try_dash(self) -> bool:
        """Start a dash if the cooldown has elapsed. Returns True if performed."""
        if not self.can_dash():
            return False
        self.is_dashing = True
        self.dash_timer = self.dash_time
        self.dash_cooldown_timer = self.dash_cooldown
        self.speed = self.dash_speed
        return True

    def try_jump(self) -> bool:
        if self.jump_count >= self.max_jumps:
            return False
        self.vy = JUMP_VY
        self.jump_count += 1
        self.grounded = False
        return True

    def _update_timers(self, dt: float):
        if self.dash_cooldown_timer > 0.0:
            self.dash_cooldown_timer = _tick_timer(self.dash_cooldown_timer, dt)
        if self.is_dashing:
            self.dash_timer = _tick_timer(self.dash_timer, dt)
            if self.dash_timer <= 0.0:
                self.is_dashing = False
                self.speed = BASE_SPEED

    def _mark_burst(self):
        self.bursts.append((self.x + BURST_OFFSET[0], self.y + BURST_OFFSET[1]))

    def update(self, controls: Controls, dt: float) -> List[str]:
        """
        Advance one simulation step. Returns the events raised:
        "dash", "jump", "double_jump".
        """
        events: List[str] = []
        self.bursts = []
        self._update_timers(dt)

        if controls.dash and self.try_dash():
            events.append("dash")
            self._mark_burst()

        # Instantaneous horizontal step; opposite keys cancel
        step = self.dash_speed if self.is_dashing else self.speed
        self.vx = 0.0
        if controls.right:
            self.vx += step
        if controls.left:
            self.vx -= step
        self.x += self.vx

        if controls.jump and self.try_jump():
            events.append("jump")
            if self.jump_count == 2:
                events.append("double_jump")
                self._mark_burst()

        self.vy += GRAVITY
        self.y += self.vy
        return events
