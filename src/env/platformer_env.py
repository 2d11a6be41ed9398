# src/env/platformer_env.py
from __future__ import annotations
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.platformer.config import WIDTH, HEIGHT, FPS, TITLE, SIM_DT
from src.platformer.player import Controls
from src.platformer.render import draw_world
from src.platformer.world import World
from src.env.observations import build_observation, observation_bounds

FLAG_REWARD = 10.0
RESPAWN_PENALTY = -1.0
DEATH_PENALTY = -1.0
PROGRESS_SCALE = 100.0  # px of rightward progress per reward unit


class PlatformerEnv(gym.Env):
    """
    Platformer Gymnasium environment (vector observations).
    - Simulation at 60 Hz (fixed SIM_DT).
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Action: MultiDiscrete([3, 2, 2]) = (move: none/left/right, jump, dash).
      Jump and dash are presses, applied on the first frame of the decision.
    - Observation: shape (12,), float32 (see build_observation).
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": FPS}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 30.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], render_mode
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)
        self.sim_fps = int(round(1.0 / SIM_DT))

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        self.action_space = gym.spaces.MultiDiscrete([3, 2, 2])
        low, high = observation_bounds()
        self.observation_space = gym.spaces.Box(low=low, high=high, dtype=np.float32)

        self.world: Optional[World] = None
        self.timestep: int = 0
        self.current_seed: Optional[int] = None

        self.screen = None
        self.clock = None
        self.font = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        # Seeding policy:
        # - If a seed is provided, use it directly for the World for strict reproducibility.
        # - If not, let the World randomize internally (None).
        world_seed = int(seed) if seed is not None else None
        self.world = World(seed=world_seed)
        self.timestep = 0
        self.current_seed = self.world.seed

        if self.render_mode == "human":
            self.render()
        return self._get_obs(), self._info()

    def step(self, action):
        assert self.action_space.contains(np.asarray(action, dtype=self.action_space.dtype)), \
            f"Invalid action {action}"
        assert self.world is not None, "call reset() first"

        move, jump, dash = (int(a) for a in action)
        world = self.world
        x_before = world.player.x
        reward = 0.0
        terminated = False

        for i in range(self.frame_skip):
            controls = Controls(
                left=(move == 1),
                right=(move == 2),
                jump=bool(jump) and i == 0,
                dash=bool(dash) and i == 0,
            )
            events = world.step(controls)

            if "respawn" in events:
                reward += RESPAWN_PENALTY
                x_before = world.player.x  # no progress credit for the teleport
            if "death" in events:
                reward += DEATH_PENALTY
                terminated = True
                break
            if "flag" in events:
                reward += FLAG_REWARD
                terminated = True
                break

        reward += (world.player.x - x_before) / PROGRESS_SCALE

        self.timestep += 1
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = not terminated

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), float(reward), terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        assert self.world is not None
        return build_observation(self.world)

    def _info(self) -> Dict[str, Any]:
        w = self.world
        return {
            "x": float(w.player.x),
            "timestep": self.timestep,
            "seed": self.current_seed,
            "grounded": bool(w.player.grounded),
            "respawns": w.respawns,
            "flag_reached": bool(w.flag.is_reached),
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None or self.world is None:
            return None

        if self.font is None:
            pygame.font.init()
            self.font = pygame.font.Font(None, 24)

        if self.render_mode == "human":
            if self.screen is None:
                pygame.init()
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption(f"{TITLE} (Gym env)")
                self.clock = pygame.time.Clock()
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()
            draw_world(self.screen, self.world, self.font, hud=False)
            pygame.display.flip()
            self.clock.tick(self.metadata["render_fps"])
            return None

        surf = pygame.Surface((WIDTH, HEIGHT))
        draw_world(surf, self.world, self.font, hud=False)
        arr = pygame.surfarray.array3d(surf)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.screen is not None:
            pygame.display.quit()
            pygame.quit()
            self.screen = None
            self.clock = None
            self.font = None
