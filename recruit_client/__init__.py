"""招聘工作流客户端"""

__version__ = "1.0.0"
__author__ = "HR RPA Team"
__description__ = "岗位发布、简历上传评分与候选人展示的异步客户端"

# 导出主要组件
from .core import ResultState, FlowStatus, ScoreTier, present_candidate, score_tier
from .services import ResumeSubmissionFlow, JobCreationFlow, AuthFlow
from .integrations import RecruitmentAPI, RecruitmentAPIError, get_recruitment_api, AuthProviderError
from .utils.config import get_config
from .utils.logger import app_logger

__all__ = [
    "ResultState",
    "FlowStatus",
    "ScoreTier",
    "present_candidate",
    "score_tier",
    "ResumeSubmissionFlow",
    "JobCreationFlow",
    "AuthFlow",
    "RecruitmentAPI",
    "RecruitmentAPIError",
    "get_recruitment_api",
    "AuthProviderError",
    "get_config",
    "app_logger",
]
