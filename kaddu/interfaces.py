"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod
from typing import Callable


class AudioBackend(ABC):
    """Abstract base class for feedback audio playback."""

    @abstractmethod
    def play_chime(self) -> float | None:
        """Play the success chime. Returns its duration in seconds, or None if unknown."""
        pass

    @abstractmethod
    def play_failure_tone(self) -> None:
        """Play the wrong-answer tone."""
        pass

    @abstractmethod
    def play_pronunciation(self, language: str, item_id: str) -> None:
        """Play the recorded word for an item in a language."""
        pass


class ScheduledCall(ABC):
    """Handle to a delayed call."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the call from running. No effect if it already ran."""
        pass


class Scheduler(ABC):
    """Abstract base class for running a callback after a delay."""

    @abstractmethod
    def call_later(self, delay_s: float, fn: Callable[[], None]) -> ScheduledCall:
        """Run fn after delay_s seconds. Returns a cancelable handle."""
        pass
