# Sound effects

from __future__ import annotations

import os

import pygame

from .constants import SFX_HIT, SFX_EXPLOSION, HIT_SFX_PATH, EXPLOSION_SFX_PATH, SFX_VOLUME


class SoundEffect:
    """
    Fire-and-forget sound effect sink.

    Missing files or an unavailable audio device leave the matching effect
    silent; playback problems are reported and never reach the game loop.
    """

    def __init__(self, paths: dict[str, str] | None = None, volume: float = SFX_VOLUME) -> None:
        self.muted = False
        self.volume = max(0.0, min(1.0, volume))
        self.sounds: dict[str, pygame.mixer.Sound] = {}

        if paths is None:
            paths = {SFX_HIT: HIT_SFX_PATH, SFX_EXPLOSION: EXPLOSION_SFX_PATH}

        if not self.init_mixer():
            return
        for name, path in paths.items():
            self.load(name, path)

    def init_mixer(self) -> bool:
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init(frequency=22050, size=-16, channels=2, buffer=512)
        except pygame.error as e:
            print(f"Audio disabled, mixer unavailable: {e}")
            return False
        return True

    def load(self, name: str, path: str) -> None:
        if not os.path.exists(path):
            print(f"Sound effect file not found: {path}")
            return
        try:
            sound = pygame.mixer.Sound(path)
        except pygame.error as e:
            print(f"Failed to load {name} sound effect: {e}")
            return
        sound.set_volume(self.volume)
        self.sounds[name] = sound

    def play(self, name: str) -> None:
        if self.muted:
            return
        sound = self.sounds.get(name)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as e:
            print(f"Failed to play {name} sound effect: {e}")

    def toggle_mute(self) -> None:
        self.muted = not self.muted

    def set_volume(self, volume: float) -> None:
        """Set sound effects volume (0.0 to 1.0)"""
        self.volume = max(0.0, min(1.0, volume))
        for sound in self.sounds.values():
            sound.set_volume(self.volume)
