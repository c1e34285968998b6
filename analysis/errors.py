from enum import Enum


class ErrorKind(str, Enum):
    MISSING_INPUT = "missing_input"
    INSIGHT_UNAVAILABLE = "insight_unavailable"
    PERSIST_FAILED = "persist_failed"


class SweatAnalysisError(Exception):
    """Base class for failures of a sweat analysis submission."""
    kind: ErrorKind = None


class MissingInput(SweatAnalysisError):
    kind = ErrorKind.MISSING_INPUT

    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"missing readings: {', '.join(self.missing)}")


class InsightUnavailable(SweatAnalysisError):
    """The generative text service failed or returned nothing usable."""
    kind = ErrorKind.INSIGHT_UNAVAILABLE


class PersistFailed(SweatAnalysisError):
    kind = ErrorKind.PERSIST_FAILED


class SubmissionInProgress(RuntimeError):
    """Raised when a form already has a submission in flight."""


class StoreError:
    """Structured error returned (not raised) by the result recorder."""

    def __init__(self, message, code=None, details=None):
        self.message = message
        self.code = code
        self.details = details

    def to_dict(self):
        return {"message": self.message, "code": self.code, "details": self.details}

    def __repr__(self):
        return f"StoreError(message={self.message!r}, code={self.code!r})"
