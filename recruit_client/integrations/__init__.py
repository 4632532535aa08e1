"""第三方集成模块"""

from .recruitment_api import RecruitmentAPI, RecruitmentAPIError, get_recruitment_api, close_recruitment_api
from .auth_provider import AuthProvider, AuthProviderError

__all__ = [
    "RecruitmentAPI",
    "RecruitmentAPIError",
    "get_recruitment_api",
    "close_recruitment_api",
    "AuthProvider",
    "AuthProviderError",
]
