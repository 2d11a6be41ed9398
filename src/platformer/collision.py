# src/platformer/collision.py
"""
Axis-aligned collision handling between the player and the level.

Boxes are (x, y, w, h) float tuples with y growing downward.
"""
from __future__ import annotations
from typing import Iterable, Tuple
from .config import HEIGHT, FALL_MARGIN
from .level import Box, Flag, Platform, Spike, box_intersects_triangle
from .player import Player

# Evaluation order doubles as the tie-break when overlaps are equal
SIDES: Tuple[str, ...] = ("top", "bottom", "left", "right")


def rects_overlap(a: Box, b: Box) -> bool:
    """Strict AABB overlap; boxes that only share an edge do not overlap."""
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def directed_overlaps(me: Box, other: Box) -> dict:
    """
    Penetration depth of `me` into each side of `other`:
      top    = me.bottom - other.top     (me came from above)
      bottom = other.bottom - me.top     (me came from below)
      left   = me.right - other.left
      right  = other.right - me.left
    """
    mx, my, mw, mh = me
    ox, oy, ow, oh = other
    return {
        "top": my + mh - oy,
        "bottom": oy + oh - my,
        "left": mx + mw - ox,
        "right": ox + ow - mx,
    }


def separation_side(me: Box, other: Box) -> str:
    """Side of `other` along which the smallest correction separates the boxes."""
    overlaps = directed_overlaps(me, other)
    # min() keeps the first of equal keys, so SIDES order breaks ties
    return min(SIDES, key=overlaps.__getitem__)


def resolve_platform_collisions(player: Player, platforms: Iterable[Platform]) -> bool:
    """
    Minimum-overlap resolution against every platform, in list order.
    Vertical contacts stop vertical motion; landing on top resets the jump count.
    Returns True if the player landed on something this step.
    """
    grounded = False
    for plat in platforms:
        me = player.box
        if not rects_overlap(me, plat.box):
            continue

        side = separation_side(me, plat.box)
        if side == "top":
            player.y = plat.y - player.h
            player.vy = 0.0
            player.jump_count = 0
            grounded = True
        elif side == "bottom":
            player.y = plat.y + plat.h
            player.vy = 0.0
        elif side == "left":
            player.x = plat.x - player.w
        else:
            player.x = plat.x + plat.w

    player.grounded = grounded
    return grounded


def check_flag_touch(player: Player, flag: Flag) -> bool:
    """Latch the flag on contact. Returns True on the step it is first reached."""
    if rects_overlap(player.box, flag.box):
        return flag.reach()
    return False


def check_fall_out(player: Player, screen_height: float = HEIGHT) -> bool:
    """Respawn the player once it drops FALL_MARGIN below the screen."""
    if player.y > screen_height + FALL_MARGIN:
        player.reset()
        return True
    return False


def check_spike_hit(player: Player, spikes: Iterable[Spike]) -> bool:
    """Kill the player on contact with any spike."""
    me = player.box
    for sp in spikes:
        if rects_overlap(me, sp.box) and box_intersects_triangle(me, sp.world_points()):
            player.is_alive = False
            return True
    return False
