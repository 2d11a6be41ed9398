# src/platformer/camera.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple
import pygame
from .config import WIDTH, HEIGHT


@dataclass
class Camera:
    """2D follow camera: `target` (world) is drawn at `offset` (screen), scaled by `zoom`."""
    target_x: float = 0.0
    target_y: float = 0.0
    offset_x: float = WIDTH / 2.0
    offset_y: float = HEIGHT / 2.0
    zoom: float = 1.0

    def follow(self, x: float, y: float):
        self.target_x, self.target_y = x, y

    def world_to_screen(self, point: Tuple[float, float]) -> Tuple[float, float]:
        wx, wy = point
        return ((wx - self.target_x) * self.zoom + self.offset_x,
                (wy - self.target_y) * self.zoom + self.offset_y)

    def screen_to_world(self, point: Tuple[float, float]) -> Tuple[float, float]:
        sx, sy = point
        return ((sx - self.offset_x) / self.zoom + self.target_x,
                (sy - self.offset_y) / self.zoom + self.target_y)

    def apply(self, box) -> pygame.Rect:
        """World box (x, y, w, h) -> screen pygame.Rect."""
        x, y, w, h = box
        sx, sy = self.world_to_screen((x, y))
        return pygame.Rect(int(sx), int(sy), int(w * self.zoom), int(h * self.zoom))
