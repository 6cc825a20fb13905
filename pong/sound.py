import logging
import math
import os
import struct
import wave

import pygame

logger = logging.getLogger(__name__)


class SoundManager:
    """
    Bounce and score effects. The .wav files are synthesised into
    ``<base_dir>/assets`` on first run, so no audio assets ship with the game.
    Without a usable mixer every play call is a no-op.
    """

    TONES = {
        # name: (frequency Hz, duration ms, volume)
        "bounce": (520, 60, 0.40),
        "score": (220, 140, 0.45),
    }

    def __init__(self, base_dir, min_gap_ms=40):
        self.assets_dir = os.path.join(base_dir, "assets")
        os.makedirs(self.assets_dir, exist_ok=True)

        self.paths = {}
        for name, (freq, duration_ms, volume) in self.TONES.items():
            path = os.path.join(self.assets_dir, f"{name}.wav")
            if not os.path.exists(path):
                generate_tone(path, freq=freq, duration_ms=duration_ms, volume=volume)
            self.paths[name] = path

        self.enabled = self._init_mixer()
        self.sounds = {name: self._load(path) for name, path in self.paths.items()}

        # Rate-limit so a ball grinding along a wall does not spam
        self._last_play = {name: -min_gap_ms for name in self.paths}
        self._min_gap_ms = min_gap_ms

    def _init_mixer(self) -> bool:
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("Audio disabled, mixer unavailable: %s", exc)
            return False
        return True

    def _load(self, path):
        if not self.enabled:
            return None
        try:
            return pygame.mixer.Sound(path)
        except pygame.error as exc:
            logger.warning("Could not load sound %s: %s", path, exc)
            return None

    def _try_play(self, name):
        sound = self.sounds.get(name)
        if sound is None:
            return
        now = pygame.time.get_ticks()
        if now - self._last_play[name] >= self._min_gap_ms:
            sound.play()
            self._last_play[name] = now

    def play_bounce(self):
        self._try_play("bounce")

    def play_score(self, side=None):
        self._try_play("score")


def generate_tone(path, freq=440, duration_ms=100, volume=0.5, sample_rate=44100):
    """Write a mono 16-bit sine beep with a linear fade-out."""
    n_samples = int(sample_rate * (duration_ms / 1000.0))
    with wave.open(path, "w") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(sample_rate)
        frames = bytearray()
        for i in range(n_samples):
            t = i / sample_rate
            amp = volume * (1.0 - i / n_samples)
            frames += struct.pack("<h", int(amp * 32767 * math.sin(2 * math.pi * freq * t)))
        wf.writeframes(bytes(frames))
    logger.debug("Generated %s (%d Hz, %d ms)", path, freq, duration_ms)
