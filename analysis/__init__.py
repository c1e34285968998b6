from .errors import (
    ErrorKind, InsightUnavailable, MissingInput, PersistFailed, StoreError,
    SubmissionInProgress,
)
from .insight import InsightRequester, build_prompt, strip_bold_markers
from .orchestrator import SubmissionOutcome, SubmissionState, SweatAnalysisOrchestrator
from .recorder import ResultRecorder
from .scoring import calculate_pcos_risk_percentage, score_readings

__all__ = [
    "ErrorKind", "InsightUnavailable", "MissingInput", "PersistFailed", "StoreError",
    "SubmissionInProgress", "InsightRequester", "build_prompt", "strip_bold_markers",
    "SubmissionOutcome", "SubmissionState", "SweatAnalysisOrchestrator",
    "ResultRecorder", "calculate_pcos_risk_percentage", "score_readings",
]
