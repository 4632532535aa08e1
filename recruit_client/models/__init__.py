"""数据模型模块"""

from .job import Job, JobCreate, JobId
from .resume import (
    ResumeFile,
    SubmissionStatus,
    ParsedResumeData,
    CandidateResume,
    allowed_mime_types,
)
from .candidate import ScoredCandidate
from .auth import AuthMode, AuthCredentials

__all__ = [
    "Job",
    "JobCreate",
    "JobId",
    "ResumeFile",
    "SubmissionStatus",
    "ParsedResumeData",
    "CandidateResume",
    "allowed_mime_types",
    "ScoredCandidate",
    "AuthMode",
    "AuthCredentials",
]
