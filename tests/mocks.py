"""Mock implementations and fixtures shared by the test modules."""

from kaddu.catalog import Catalog
from kaddu.config import LANGUAGES
from kaddu.interfaces import AudioBackend, ScheduledCall, Scheduler
from kaddu.models import CatalogEntry


def make_entry(index: int, forms: dict = None) -> CatalogEntry:
    """Entry whose forms are all distinct unless overridden."""
    if forms is None:
        forms = {lang: f"{lang}-{index}" for lang in LANGUAGES}
    return CatalogEntry(f"item{index:02d}", f"gloss {index}", forms)


def make_catalog(size: int) -> Catalog:
    return Catalog([make_entry(i) for i in range(size)])


def make_sorted_catalog(size: int, target: str = 'wolof') -> Catalog:
    """Catalog where the target form always sorts first among the options."""
    entries = []
    for i in range(size):
        forms = {lang: f"z{lang}-{i}" for lang in LANGUAGES}
        forms[target] = f"aaa-{i}"
        entries.append(CatalogEntry(f"item{i:02d}", f"gloss {i}", forms))
    return Catalog(entries)


class MockCall(ScheduledCall):
    """Scheduled call that only runs when the test says so."""

    def __init__(self, delay_s: float, fn):
        self.delay_s = delay_s
        self.fn = fn
        self.cancelled = False
        self.ran = False

    def cancel(self) -> None:
        self.cancelled = True


class MockScheduler(Scheduler):
    """Scheduler that records calls instead of starting timers."""

    def __init__(self):
        self.calls = []

    def call_later(self, delay_s: float, fn) -> ScheduledCall:
        call = MockCall(delay_s, fn)
        self.calls.append(call)
        return call

    def run_pending(self) -> None:
        for call in list(self.calls):
            if not call.cancelled and not call.ran:
                call.ran = True
                call.fn()


class MockAudioBackend(AudioBackend):
    """Audio backend that records what was played."""

    def __init__(self, chime_duration: float | None = 0.5):
        self.chime_duration = chime_duration
        self.played = []
        self.failing = set()

    def fail_on(self, *kinds):
        """Make the given cues raise, as a missing asset would."""
        self.failing.update(kinds)

    def _play(self, kind: str, *args):
        if kind in self.failing:
            raise FileNotFoundError(f"missing {kind}")
        self.played.append((kind,) + args)

    def play_chime(self) -> float | None:
        self._play('chime')
        return self.chime_duration

    def play_failure_tone(self) -> None:
        self._play('failure_tone')

    def play_pronunciation(self, language: str, item_id: str) -> None:
        self._play('pronunciation', language, item_id)
