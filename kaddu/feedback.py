"""Answer feedback sequencing: which sound plays, in what order, after what delay."""

import logging
import threading

from .config import (
    CHIME_PATH, FAILURE_TONE_PATH, PRONUNCIATION_PATH, RETRY_PRONUNCIATION_DELAY_MS
)
from .interfaces import AudioBackend, ScheduledCall, Scheduler
from .models import Outcome

logger = logging.getLogger(__name__)

CHIME = 'chime'
FAILURE_TONE = 'failure_tone'
PRONUNCIATION = 'pronunciation'


class FeedbackCue:
    """One audio step of the feedback for an answer.

    delay_ms is counted from the start of the feedback; after names the cue
    whose end this one waits for.
    """

    def __init__(self, kind: str, path: str, delay_ms: int = 0, after: str = None,
                 language: str = None, item_id: str = None):
        self.kind = kind
        self.path = path
        self.delay_ms = delay_ms
        self.after = after
        self.language = language
        self.item_id = item_id

    def to_dict(self) -> dict:
        return {
            'kind': self.kind,
            'path': self.path,
            'delay_ms': self.delay_ms,
            'after': self.after,
            'language': self.language,
            'item_id': self.item_id
        }

    def __repr__(self) -> str:
        return f"FeedbackCue({self.kind!r}, {self.path!r}, delay_ms={self.delay_ms}, after={self.after!r})"


def plan_feedback(outcome: Outcome,
                  retry_delay_ms: int = RETRY_PRONUNCIATION_DELAY_MS) -> list[FeedbackCue]:
    """Describe the cue sequence for an outcome without playing anything."""
    pronunciation = FeedbackCue(
        PRONUNCIATION,
        PRONUNCIATION_PATH.format(language=outcome.language, id=outcome.item_id),
        language=outcome.language,
        item_id=outcome.item_id
    )
    if outcome.correct:
        pronunciation.after = CHIME
        return [FeedbackCue(CHIME, CHIME_PATH), pronunciation]
    pronunciation.delay_ms = retry_delay_ms
    return [FeedbackCue(FAILURE_TONE, FAILURE_TONE_PATH), pronunciation]


class _TimerCall(ScheduledCall):

    def __init__(self, timer: threading.Timer):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.cancel()


class ThreadingScheduler(Scheduler):
    """Scheduler backed by threading.Timer daemon threads."""

    def call_later(self, delay_s: float, fn) -> ScheduledCall:
        timer = threading.Timer(delay_s, fn)
        timer.daemon = True
        timer.start()
        return _TimerCall(timer)


class FeedbackDispatcher:
    """Plays the audio feedback for answer outcomes.

    Correct: chime, then the target-language pronunciation once the chime ends.
    Incorrect: failure tone, then after a short delay the pronunciation of the
    language the player clicked. Playback errors are logged and never reach
    the caller.
    """

    def __init__(self, backend: AudioBackend, scheduler: Scheduler = None,
                 retry_delay_ms: int = RETRY_PRONUNCIATION_DELAY_MS):
        self.backend = backend
        self.scheduler = scheduler or ThreadingScheduler()
        self.retry_delay_ms = retry_delay_ms
        self._pending: ScheduledCall | None = None
        # Guards _pending, which timer threads clear when they fire
        self._lock = threading.RLock()

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def plan(self, outcome: Outcome) -> list[FeedbackCue]:
        return plan_feedback(outcome, self.retry_delay_ms)

    def dispatch(self, outcome: Outcome) -> None:
        """Start the feedback for an outcome. Cancels any earlier pending cue."""
        self.cancel_pending()
        if outcome.correct:
            duration = self._safe_play(CHIME, self.backend.play_chime)
            if duration:
                self._schedule(duration, outcome)
            else:
                self._pronounce(outcome)
        else:
            self._safe_play(FAILURE_TONE, self.backend.play_failure_tone)
            self._schedule(self.retry_delay_ms / 1000.0, outcome)

    def cancel_pending(self) -> None:
        """Drop a scheduled pronunciation that has not played yet.

        Once this returns, a callback from the dropped schedule plays nothing.
        """
        with self._lock:
            pending, self._pending = self._pending, None
            if pending is not None:
                pending.cancel()

    def _schedule(self, delay_s: float, outcome: Outcome) -> None:
        handle = None

        def fire():
            with self._lock:
                if handle is None or self._pending is not handle:
                    return
                self._pending = None
                self._pronounce(outcome)

        with self._lock:
            handle = self.scheduler.call_later(delay_s, fire)
            self._pending = handle

    def _pronounce(self, outcome: Outcome) -> None:
        self._safe_play(
            PRONUNCIATION,
            lambda: self.backend.play_pronunciation(outcome.language, outcome.item_id)
        )

    def _safe_play(self, kind: str, play):
        try:
            return play()
        except Exception as e:
            logger.warning(f"Feedback {kind} failed: {type(e).__name__}: {e}")
            return None
