# src/platformer/game.py
import argparse
import logging
import pygame
from pygame import K_SPACE, K_ESCAPE, K_LEFT, K_RIGHT, K_RETURN, K_z
from .config import WIDTH, HEIGHT, FPS, TITLE, SIM_DT, MAX_FRAME_DT, JUMP_SOUND
from .audio import load_sound
from .player import Controls
from .render import draw_world
from .world import World

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Single-screen platformer: double-jump, dash, reach the flag.")
    p.add_argument("--seed", type=int, default=None,
                   help="Seed for particle effects. Omit for a random one.")
    p.add_argument("--fps", type=int, default=FPS, help="Target frame rate (simulation stays at 60 Hz).")
    p.add_argument("--sound", type=str, default=JUMP_SOUND,
                   help="Jump sound file; relative paths resolve next to the package.")
    p.add_argument("--mute", action="store_true", help="Skip the audio device entirely.")
    p.add_argument("--log-level", type=str, default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def run(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.display.set_caption(TITLE)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()

    try:
        sfx = load_sound(args.sound, mute=args.mute)
    except Exception:
        pygame.quit()
        raise

    world = World(seed=args.seed)
    font = pygame.font.Font(None, 24)
    logger.info("started: seed=%s fps=%d", world.seed, args.fps)

    # Presses stay pending until a simulation step consumes them
    pending = Controls()
    accumulator = 0.0
    running = True

    try:
        while running:
            dt = clock.tick(args.fps) / 1000.0
            if dt > MAX_FRAME_DT:  # clamp stalls
                dt = MAX_FRAME_DT
            accumulator += dt

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                if event.type == pygame.KEYDOWN:
                    if event.key == K_ESCAPE:
                        running = False
                    elif event.key == K_SPACE:
                        pending.jump = True
                    elif event.key == K_z:
                        pending.dash = True
                    elif event.key == K_RETURN:
                        pending.respawn = True
            if not running:
                break

            keys = pygame.key.get_pressed()
            while accumulator >= SIM_DT:
                controls = Controls(
                    left=bool(keys[K_LEFT]),
                    right=bool(keys[K_RIGHT]),
                    jump=pending.jump,
                    dash=pending.dash,
                    respawn=pending.respawn,
                )
                pending = Controls()
                events = world.step(controls)
                if "jump" in events:
                    sfx.play()
                accumulator -= SIM_DT

            draw_world(screen, world, font)
            pygame.display.flip()
    finally:
        logger.info("shutting down after %d steps", world.steps)
        sfx.close()
        pygame.quit()


if __name__ == "__main__":
    run()
