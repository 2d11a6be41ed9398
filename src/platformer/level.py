# src/platformer/level.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import pygame
from .config import (
    PLATFORM_LAYOUT, FLAG_POS, FLAG_W, FLAG_H, COLOR_PLAT
)

Box = Tuple[float, float, float, float]  # x, y, w, h


@dataclass
class Platform:
    x: float
    y: float
    w: float
    h: float
    color: Tuple[int, int, int] = COLOR_PLAT
    vx: float = 0.0
    vy: float = 0.0
    start_x: float = 0.0
    start_y: float = 0.0
    move_distance: float = 0.0
    is_moving: bool = False

    @property
    def box(self) -> Box:
        return (self.x, self.y, self.w, self.h)

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(int(self.x), int(self.y), int(self.w), int(self.h))

    def advance(self):
        """
        Linear bounce between start ± move_distance on each axis of motion.
        The origin is clamped onto the bound it reaches and that axis reverses.
        """
        if not self.is_moving:
            return
        self.x, self.vx = _bounce(self.x, self.vx, self.start_x, self.move_distance)
        self.y, self.vy = _bounce(self.y, self.vy, self.start_y, self.move_distance)


def _bounce(pos: float, vel: float, start: float, dist: float) -> Tuple[float, float]:
    if vel == 0.0:
        return pos, vel
    pos += vel
    lo, hi = start - dist, start + dist
    if pos >= hi:
        return hi, -abs(vel)
    if pos <= lo:
        return lo, abs(vel)
    return pos, vel


@dataclass
class Flag:
    x: float
    y: float
    is_reached: bool = False
    w: float = FLAG_W
    h: float = FLAG_H

    @property
    def box(self) -> Box:
        return (self.x, self.y, self.w, self.h)

    def reach(self) -> bool:
        """Latch the flag. Returns True only on the transition."""
        if self.is_reached:
            return False
        self.is_reached = True
        return True


@dataclass
class Spike:
    """Upright triangle; (x, y) is the centre of its base."""
    x: float
    y: float
    width: float
    height: float

    def world_points(self) -> Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]:
        half = self.width / 2
        A = (self.x - half, self.y)
        B = (self.x + half, self.y)
        C = (self.x, self.y - self.height)
        return A, B, C

    @property
    def box(self) -> Box:
        return (self.x - self.width / 2, self.y - self.height, self.width, self.height)


def _side(o, a, b) -> float:
    """Cross product of (a - o) and (b - o): >0 left turn, <0 right turn, 0 collinear."""
    return (a[0]-o[0])*(b[1]-o[1]) - (a[1]-o[1])*(b[0]-o[0])


def _within(p, a, b) -> bool:
    """p lies in the closed bounding box of segment ab."""
    return (min(a[0], b[0]) <= p[0] <= max(a[0], b[0])
            and min(a[1], b[1]) <= p[1] <= max(a[1], b[1]))


def _point_in_triangle(p, a, b, c) -> bool:
    """p inside (or on an edge of) triangle abc."""
    d = (_side(a, b, p), _side(b, c, p), _side(c, a, p))
    return not (min(d) < 0 < max(d))


def _segments_intersect(p1, p2, p3, p4) -> bool:
    """Closed segments p1p2 and p3p4 share at least one point."""
    d1, d2 = _side(p3, p4, p1), _side(p3, p4, p2)
    d3, d4 = _side(p1, p2, p3), _side(p1, p2, p4)
    if d1 * d2 < 0 and d3 * d4 < 0:
        return True
    return ((d1 == 0 and _within(p1, p3, p4)) or (d2 == 0 and _within(p2, p3, p4))
            or (d3 == 0 and _within(p3, p1, p2)) or (d4 == 0 and _within(p4, p1, p2)))


def box_intersects_triangle(box: Box, tri) -> bool:
    """Box vs triangle: box corner in tri, tri vertex strictly in box, or crossing edges."""
    x, y, w, h = box
    A, B, C = tri
    corners = [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]
    if any(_point_in_triangle(p, A, B, C) for p in corners):
        return True
    if any(x < vx < x + w and y < vy < y + h for vx, vy in tri):
        return True
    tri_edges = [(A, B), (B, C), (C, A)]
    box_edges = [
        (corners[0], corners[1]),
        (corners[1], corners[2]),
        (corners[2], corners[3]),
        (corners[3], corners[0]),
    ]
    for e1 in tri_edges:
        for e2 in box_edges:
            if _segments_intersect(e1[0], e1[1], e2[0], e2[1]):
                return True
    return False


@dataclass
class Level:
    platforms: List[Platform]
    flag: Flag
    spikes: List[Spike] = field(default_factory=list)


def build_level(layout=PLATFORM_LAYOUT, flag_pos: Optional[Tuple[float, float]] = None,
                spikes: Optional[List[Spike]] = None) -> Level:
    """Fresh level from a layout of (x, y, w, h, vx, vy, start_x, start_y, distance, moving) rows."""
    platforms = [
        Platform(
            x=float(x), y=float(y), w=float(w), h=float(h),
            vx=float(vx), vy=float(vy),
            start_x=float(sx), start_y=float(sy),
            move_distance=float(dist), is_moving=bool(moving),
        )
        for (x, y, w, h, vx, vy, sx, sy, dist, moving) in layout
    ]
    fx, fy = flag_pos if flag_pos is not None else FLAG_POS
    return Level(platforms=platforms, flag=Flag(x=float(fx), y=float(fy)), spikes=list(spikes or []))
