"""Synthesized sound effects for game events."""

import logging
import math
from array import array

import pygame

from .settings import SAMPLE_RATE, SOUND_VOLUME

logger = logging.getLogger(__name__)

WAVEFORMS = ("sine", "square", "sawtooth", "triangle")

# Gain the exponential fade reaches at the end of a tone.
FADE_FLOOR = 0.001


def _oscillator(waveform, phase):
    """Sample a unit-amplitude waveform at ``phase`` (in cycles)."""
    cycle = phase % 1.0
    if waveform == "sine":
        return math.sin(2.0 * math.pi * cycle)
    if waveform == "square":
        return 1.0 if cycle < 0.5 else -1.0
    if waveform == "sawtooth":
        return 2.0 * cycle - 1.0
    if waveform == "triangle":
        return 4.0 * cycle - 1.0 if cycle < 0.5 else 3.0 - 4.0 * cycle
    raise ValueError(f"Unknown waveform {waveform!r}; expected one of {WAVEFORMS}")


def synthesize(frequency_hz, duration_ms, waveform="sine", volume=SOUND_VOLUME, sample_rate=SAMPLE_RATE):
    """Generate mono 16-bit PCM for a tone that fades out exponentially."""
    sample_count = max(1, int(sample_rate * (duration_ms / 1000.0)))
    amplitude = 32767 * max(0.0, min(volume, 1.0))
    decay = math.log(FADE_FLOOR / max(volume, FADE_FLOOR)) / sample_count if volume > FADE_FLOOR else 0.0

    pcm = array("h")
    for i in range(sample_count):
        env = math.exp(decay * i)
        sample = amplitude * env * _oscillator(waveform, frequency_hz * i / sample_rate)
        pcm.append(int(max(-32768, min(32767, sample))))
    return pcm


def create_tone(frequency_hz, duration_ms, waveform="sine", volume=SOUND_VOLUME):
    """Build a pygame Sound from a synthesized tone."""
    return pygame.mixer.Sound(buffer=synthesize(frequency_hz, duration_ms, waveform, volume).tobytes())


TONES = {
    "eat": (880, 100, "square"),
    "game_over": (220, 500, "sawtooth"),
    "pause": (440, 100, "triangle"),
    "resume": (523, 100, "triangle"),
}


class SoundBoard:
    """Fire-and-forget event sounds. Silent when audio is unavailable."""

    def __init__(self, sounds=None):
        self.sounds = sounds or {}

    @property
    def enabled(self):
        return bool(self.sounds)

    @classmethod
    def create(cls, enabled=True):
        """Initialize the mixer and synth tones; disable gracefully if unavailable."""
        if not enabled:
            return cls()
        try:
            if pygame.mixer.get_init() is None:
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
            sounds = {name: create_tone(*tone) for name, tone in TONES.items()}
        except pygame.error as exc:
            logger.warning("Audio unavailable, continuing without sound: %s", exc)
            return cls()
        return cls(sounds)

    def play(self, name):
        """Play a named sound if audio is available."""
        sound = self.sounds.get(name)
        if sound is None:
            return
        try:
            sound.play()
        except pygame.error as exc:
            logger.warning("Could not play %r: %s", name, exc)

    def on_eat(self):
        self.play("eat")

    def on_game_over(self):
        self.play("game_over")

    def on_pause(self):
        self.play("pause")

    def on_resume(self):
        self.play("resume")
