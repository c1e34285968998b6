"""
Submission workflow for one sweat analysis form.

    Idle -> Validating -> Scoring -> RequestingInsight -> Persisting -> Done
                 \\                        \\                   \\
                  +--------------------> Error <---------------+

Every submission starts from Idle and ends in Done or Error. Nothing is
retried; a failed insight request never reaches the store.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional

from models import SweatReadings, SweatResult
from . import notifications
from .errors import (
    ErrorKind, InsightUnavailable, MissingInput, PersistFailed, SubmissionInProgress,
)
from .scoring import DEFAULT_MAX_SCORE, score_readings

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SCORING = "scoring"
    REQUESTING_INSIGHT = "requesting_insight"
    PERSISTING = "persisting"
    DONE = "done"
    ERROR = "error"


@dataclass
class SubmissionOutcome:
    readings: SweatReadings
    state: SubmissionState = SubmissionState.IDLE
    score: Optional[int] = None
    insight: Optional[str] = None
    error_kind: Optional[ErrorKind] = None
    error_message: Optional[str] = None
    missing: List[str] = field(default_factory=list)
    notification: Optional[notifications.Notification] = None
    path: List[SubmissionState] = field(default_factory=list)

    @property
    def saved(self) -> bool:
        return self.state == SubmissionState.DONE

    def to_dict(self):
        return {
            "state": self.state.value,
            "score": self.score,
            "insight": self.insight,
            "saved": self.saved,
            "error": self.error_kind.value if self.error_kind else None,
            "message": self.error_message,
            "missing": self.missing,
            "notification": self.notification.to_dict() if self.notification else None,
        }


class SweatAnalysisOrchestrator:
    """Runs validate -> score -> insight -> persist for one form instance."""

    def __init__(self, insight_requester, recorder,
                 notify: Optional[Callable[[notifications.Notification], None]] = None,
                 max_score: int = DEFAULT_MAX_SCORE):
        self.insight_requester = insight_requester
        self.recorder = recorder
        self.notify = notify
        self.max_score = max_score
        self.state = SubmissionState.IDLE
        self.busy = False

    def submit(self, readings: SweatReadings, user_id=None) -> SubmissionOutcome:
        if self.busy:
            raise SubmissionInProgress("a sweat analysis is already running")
        self.busy = True
        outcome = SubmissionOutcome(readings=readings)
        self._enter(outcome, SubmissionState.IDLE)
        try:
            self._run(outcome, user_id)
        finally:
            self.busy = False
        if self.notify and outcome.notification:
            self.notify(outcome.notification)
        return outcome

    def _enter(self, outcome, state):
        self.state = state
        outcome.state = state
        outcome.path.append(state)

    def _fail(self, outcome, kind, message, notification):
        outcome.error_kind = kind
        outcome.error_message = message
        outcome.notification = notification
        self._enter(outcome, SubmissionState.ERROR)

    def _run(self, outcome, user_id):
        readings = outcome.readings
        self._enter(outcome, SubmissionState.VALIDATING)
        missing = readings.missing_fields()
        if missing:
            outcome.missing = missing
            self._fail(outcome, ErrorKind.MISSING_INPUT, str(MissingInput(missing)),
                       notifications.MISSING_FIELDS)
            return

        self._enter(outcome, SubmissionState.SCORING)
        outcome.score = score_readings(readings, self.max_score)

        self._enter(outcome, SubmissionState.REQUESTING_INSIGHT)
        try:
            outcome.insight = self.insight_requester.request_insight(readings, outcome.score)
        except InsightUnavailable as e:
            self._fail(outcome, ErrorKind.INSIGHT_UNAVAILABLE, str(e),
                       notifications.INSIGHT_FAILED)
            return

        self._enter(outcome, SubmissionState.PERSISTING)
        record = SweatResult(user_id=user_id, readings=readings,
                             ai_insight=outcome.insight, pcos_score=outcome.score)
        error = self.recorder.persist(record)
        if error is not None:
            self._fail(outcome, ErrorKind.PERSIST_FAILED, str(PersistFailed(error.message)),
                       notifications.save_failed(error.message))
            return

        outcome.notification = notifications.SAVED
        self._enter(outcome, SubmissionState.DONE)
        logger.info("Sweat analysis saved for %s (score=%s)", user_id, outcome.score)
