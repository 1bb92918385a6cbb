"""Audio backends for console play."""

import logging
import math
from array import array
from pathlib import Path

from kaddu.config import (
    CHIME_PATH, FAILURE_TONE_PATH, PRONUNCIATION_PATH,
    FAILURE_TONE_FREQUENCY, FAILURE_TONE_SECONDS
)
from kaddu.errors import AssetMissing
from kaddu.interfaces import AudioBackend

logger = logging.getLogger(__name__)


class SilentAudioBackend(AudioBackend):
    """Plays nothing, logs what would have been played."""

    def play_chime(self) -> float | None:
        logger.info(f"Audio: {CHIME_PATH}")
        return None

    def play_failure_tone(self) -> None:
        logger.info(f"Audio: {FAILURE_TONE_PATH}")

    def play_pronunciation(self, language: str, item_id: str) -> None:
        logger.info(f"Audio: {PRONUNCIATION_PATH.format(language=language, id=item_id)}")


class FileAudioBackend(AudioBackend):
    """Plays every cue from sound files under an asset directory (needs pygame)."""

    def __init__(self, assets_dir: str):
        import pygame

        self.pygame = pygame
        self.assets_dir = Path(assets_dir)
        self._sounds = {}
        if pygame.mixer.get_init() is None:
            pygame.mixer.init(size=-16)

    def _sound(self, relative_path: str):
        if relative_path not in self._sounds:
            path = self.assets_dir / relative_path
            if not path.is_file():
                raise AssetMissing(f"No audio file at {path}")
            self._sounds[relative_path] = self.pygame.mixer.Sound(str(path))
        return self._sounds[relative_path]

    def play_chime(self) -> float | None:
        sound = self._sound(CHIME_PATH)
        sound.play()
        return sound.get_length()

    def play_failure_tone(self) -> None:
        self._sound(FAILURE_TONE_PATH).play()

    def play_pronunciation(self, language: str, item_id: str) -> None:
        self._sound(PRONUNCIATION_PATH.format(language=language, id=item_id)).play()


class ToneAudioBackend(FileAudioBackend):
    """Like FileAudioBackend, but the failure tone is synthesized."""

    def __init__(self, assets_dir: str):
        super().__init__(assets_dir)
        self._tone = None

    def _build_tone(self):
        rate, _, channels = self.pygame.mixer.get_init()
        count = int(rate * FAILURE_TONE_SECONDS)
        samples = array('h')
        for i in range(count):
            # Linear fade out avoids a click at the end
            envelope = 1.0 - i / count
            value = int(16000 * envelope * math.sin(2 * math.pi * FAILURE_TONE_FREQUENCY * i / rate))
            samples.extend([value] * channels)
        return self.pygame.mixer.Sound(buffer=samples.tobytes())

    def play_failure_tone(self) -> None:
        if self._tone is None:
            self._tone = self._build_tone()
        self._tone.play()


def create_backend(kind: str, assets_dir: str) -> AudioBackend:
    """Build the audio backend named on the command line."""
    if kind == 'file':
        return FileAudioBackend(assets_dir)
    if kind == 'tone':
        return ToneAudioBackend(assets_dir)
    return SilentAudioBackend()
