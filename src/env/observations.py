# src/env/observations.py
from __future__ import annotations
from typing import List, Tuple
import numpy as np

from src.platformer.config import (
    HEIGHT, LEVEL_WIDTH, PLAYER_W, PLAYER_H, OBS_MAX_VY, OBS_NEAREST_PLATFORMS
)

OBS_SIZE = 8 + 2 * OBS_NEAREST_PLATFORMS


def _clip(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else (hi if x > hi else x)


def _nearest_platform_offsets(world, k: int = OBS_NEAREST_PLATFORMS) -> List[Tuple[float, float]]:
    """
    (dx, dy) from the player's centre to the centre of the top edge of the
    k nearest platforms, nearest first. Missing slots are (0, 0).
    """
    p = world.player
    cx, cy = p.x + PLAYER_W / 2, p.y + PLAYER_H
    offsets = []
    for plat in world.platforms:
        dx = (plat.x + plat.w / 2) - cx
        dy = plat.y - cy
        offsets.append((dx * dx + dy * dy, dx, dy))
    offsets.sort(key=lambda t: t[0])
    out = [(dx, dy) for _, dx, dy in offsets[:k]]
    out.extend([(0.0, 0.0)] * (k - len(out)))
    return out


def build_observation(world) -> np.ndarray:
    """
    Returns a fixed (12,) float32 vector:
      [ x_norm, y_norm, vy_norm, jumps_used, dashing, dash_cooldown,
        flag_dx, flag_dy,
        plat1_dx, plat1_dy, plat2_dx, plat2_dy ]
    - x_norm in [0,1] over the level width; y_norm in [-1,1] over the screen height
    - vy_norm in [-1,1] (clipped at OBS_MAX_VY px/step)
    - jumps_used, dash_cooldown in [0,1]; dashing is 0/1
    - every offset is normalized by the level width (dx) or screen height (dy), clipped to [-1,1]
    """
    p = world.player
    flag = world.flag

    feats: List[float] = [
        _clip(p.x / LEVEL_WIDTH, 0.0, 1.0),
        _clip(p.y / HEIGHT, -1.0, 1.0),
        _clip(p.vy / OBS_MAX_VY, -1.0, 1.0),
        _clip(p.jump_count / max(1, p.max_jumps), 0.0, 1.0),
        1.0 if p.is_dashing else 0.0,
        _clip(p.dash_cooldown_timer / max(1e-6, p.dash_cooldown), 0.0, 1.0),
        _clip((flag.x - p.x) / LEVEL_WIDTH, -1.0, 1.0),
        _clip((flag.y - p.y) / HEIGHT, -1.0, 1.0),
    ]
    for dx, dy in _nearest_platform_offsets(world):
        feats.append(_clip(dx / LEVEL_WIDTH, -1.0, 1.0))
        feats.append(_clip(dy / HEIGHT, -1.0, 1.0))

    return np.asarray(feats, dtype=np.float32)


def observation_bounds() -> Tuple[np.ndarray, np.ndarray]:
    low = np.array([0.0, -1.0, -1.0, 0.0, 0.0, 0.0, -1.0, -1.0]
                   + [-1.0, -1.0] * OBS_NEAREST_PLATFORMS, dtype=np.float32)
    high = np.ones(OBS_SIZE, dtype=np.float32)
    return low, high
