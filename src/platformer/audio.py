# src/platformer/audio.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Union
import pygame
from .config import JUMP_SOUND

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).resolve().parent


class AssetError(RuntimeError):
    """A required asset (or the device to play it) is unavailable at startup."""


def resolve_asset(path: Union[str, Path]) -> Path:
    """Relative paths are looked up next to the package."""
    p = Path(path)
    return p if p.is_absolute() else PACKAGE_DIR / p


class SoundFx:
    """Thin wrapper over pygame.mixer.Sound; a muted instance plays nothing."""
    def __init__(self, sound: Optional[pygame.mixer.Sound] = None, path: Optional[Path] = None):
        self.sound = sound
        self.path = path

    @property
    def muted(self) -> bool:
        return self.sound is None

    def play(self):
        if self.sound is not None:
            self.sound.play()

    def close(self):
        """Unload the sound, then close the audio device."""
        if self.sound is None:
            return
        self.sound.stop()
        self.sound = None
        pygame.mixer.quit()


def load_sound(path: Union[str, Path] = JUMP_SOUND, mute: bool = False) -> SoundFx:
    """Open the audio device and load `path`. Fails fast with AssetError."""
    if mute:
        logger.info("audio muted")
        return SoundFx()

    full = resolve_asset(path)
    if not full.is_file():
        raise AssetError(f"sound asset not found: {full}")

    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init()
    except pygame.error as e:
        raise AssetError(f"audio device unavailable ({e}); run with --mute") from e

    try:
        sound = pygame.mixer.Sound(str(full))
    except pygame.error as e:
        pygame.mixer.quit()
        raise AssetError(f"could not load sound {full}: {e}") from e

    logger.info("loaded sound %s (%.2fs)", full.name, sound.get_length())
    return SoundFx(sound, full)
