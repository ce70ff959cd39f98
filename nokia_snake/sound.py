"""
Synthesized sound effects for eating and game over.
"""

import logging
import math
from array import array

import pygame

from .config import SAMPLE_RATE, SOUND_ENABLED

logger = logging.getLogger(__name__)


class SoundEffects:
    """Fire-and-forget sound triggers raised by the game controller."""

    def on_eat(self) -> None:
        raise NotImplementedError

    def on_game_over(self) -> None:
        raise NotImplementedError


class NullSoundEffects(SoundEffects):
    """Silent effects, used when muted and in tests."""

    def on_eat(self) -> None:
        pass

    def on_game_over(self) -> None:
        pass


def sweep_samples(
    start_hz,
    end_hz,
    duration_ms,
    gain=0.1,
    end_gain=0.01,
    sample_rate=SAMPLE_RATE,
):
    """
    Build 16-bit mono PCM for an exponential frequency sweep.

    Both frequency and gain move exponentially from their start to their
    end value over the tone, like an oscillator whose parameters are ramped
    with exponentialRampToValueAtTime.
    """
    sample_count = max(1, int(sample_rate * duration_ms / 1000.0))
    peak = 32767 * max(0.0, min(gain, 1.0))
    gain_ratio = end_gain / gain if gain > 0 else 0.0

    pcm = array("h")
    phase = 0.0
    for i in range(sample_count):
        progress = i / max(1, sample_count - 1)
        freq = start_hz * (end_hz / start_hz) ** progress
        phase += 2.0 * math.pi * freq / sample_rate
        amp = peak * gain_ratio ** progress
        pcm.append(int(amp * math.sin(phase)))
    return pcm


class ToneSoundEffects(SoundEffects):
    """
    Plays the eat and game-over tones through pygame.mixer.

    If the mixer cannot start (no audio device, headless session) the
    effects disable themselves and every trigger becomes a no-op.
    """

    def __init__(self, enabled=SOUND_ENABLED):
        self.sounds = {}
        self.enabled = enabled and self._init_sounds()

    def _init_sounds(self):
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
            # Short chirp dropping an octave.
            self.sounds["eat"] = self._make_sound(sweep_samples(800, 400, 100))
            # Lower and longer drop.
            self.sounds["game_over"] = self._make_sound(sweep_samples(300, 150, 500))
        except pygame.error as e:
            logger.warning(f"Audio unavailable, sound effects disabled: {e}")
            self.sounds = {}
            return False
        return True

    @staticmethod
    def _make_sound(pcm):
        return pygame.mixer.Sound(buffer=pcm.tobytes())

    def _play(self, name):
        if not self.enabled or name not in self.sounds:
            return
        try:
            self.sounds[name].play()
        except pygame.error as e:
            logger.debug(f"Could not play {name}: {e}")

    def on_eat(self) -> None:
        self._play("eat")

    def on_game_over(self) -> None:
        self._play("game_over")
