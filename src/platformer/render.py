# src/platformer/render.py
from __future__ import annotations
from typing import Optional
import pygame
from .camera import Camera
from .config import (
    COLOR_SKY, COLOR_FLAG, COLOR_PLAYER, COLOR_SPIKE, COLOR_TEXT, COLOR_DANGER, COLOR_HUD
)
from .particles import draw_particles
from .world import World

HUD_TEXT = "LEFT/RIGHT move | SPACE jump x2 | Z dash | ESC quit"


def _text(surf: pygame.Surface, font: pygame.font.Font, msg: str, pos, color):
    surf.blit(font.render(msg, True, color), (int(pos[0]), int(pos[1])))


def draw_world(surf: pygame.Surface, world: World, font: pygame.font.Font,
               camera: Optional[Camera] = None, hud: bool = True):
    """Composite one frame of `world` onto `surf` through the camera."""
    cam = camera or world.camera
    surf.fill(COLOR_SKY)

    for plat in world.platforms:
        pygame.draw.rect(surf, plat.color, cam.apply(plat.box))

    for sp in world.spikes:
        pts = [cam.world_to_screen(p) for p in sp.world_points()]
        pygame.draw.polygon(surf, COLOR_SPIKE, pts)

    flag = world.flag
    pygame.draw.rect(surf, COLOR_FLAG, cam.apply(flag.box))
    if flag.is_reached:
        _text(surf, font, "You Win!", cam.world_to_screen((flag.x - 50, flag.y - 20)), COLOR_TEXT)

    player = world.player
    if player.is_alive:
        pygame.draw.rect(surf, COLOR_PLAYER, cam.apply(player.box))
    else:
        _text(surf, font, "You Died!", cam.world_to_screen((player.x - 50, player.y - 20)), COLOR_DANGER)
        _text(surf, font, "ENTER to respawn", cam.world_to_screen((player.x - 50, player.y)), COLOR_DANGER)

    draw_particles(surf, world.particles, cam)

    if hud:
        _text(surf, font, HUD_TEXT, (12, 10), COLOR_HUD)
