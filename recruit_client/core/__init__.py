"""核心逻辑模块"""

from .result_state import FlowStatus, ResultState
from .error_messages import (
    JOB_CREATION_EXTRACTORS,
    RESUME_UPLOAD_EXTRACTORS,
    extract_error_message,
    exception_message,
)
from .candidate_presenter import (
    CandidateView,
    ScoreTier,
    present_candidate,
    score_tier,
    format_uploaded_at,
)

__all__ = [
    "FlowStatus",
    "ResultState",
    "JOB_CREATION_EXTRACTORS",
    "RESUME_UPLOAD_EXTRACTORS",
    "extract_error_message",
    "exception_message",
    "CandidateView",
    "ScoreTier",
    "present_candidate",
    "score_tier",
    "format_uploaded_at",
]
