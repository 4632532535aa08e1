"""业务流程层"""

from .flow_base import FlowBase
from .resume_submission import ResumeSubmissionFlow, MISSING_INPUT_MESSAGE, UPLOAD_SUCCESS_MESSAGE
from .job_creation import JobCreationFlow
from .auth_flow import AuthFlow, PASSWORD_MISMATCH_MESSAGE, FEDERATED_FALLBACK, AUTH_FALLBACK

__all__ = [
    "FlowBase",
    "ResumeSubmissionFlow",
    "MISSING_INPUT_MESSAGE",
    "UPLOAD_SUCCESS_MESSAGE",
    "JobCreationFlow",
    "AuthFlow",
    "PASSWORD_MISMATCH_MESSAGE",
    "FEDERATED_FALLBACK",
    "AUTH_FALLBACK",
]
