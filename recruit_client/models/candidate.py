"""候选人数据模型"""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .resume import CandidateResume


class ScoredCandidate(BaseModel):
    """评分后的候选人(由后端解析评分服务生成，客户端只读)"""
    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1, description="姓名")
    email: Optional[str] = Field(None, description="邮箱")
    phone: Optional[str] = Field(None, description="手机号")
    score: float = Field(0, description="匹配得分(0-100)")
    resume: Optional[CandidateResume] = Field(None, description="简历信息")

    @field_validator('score', mode='before')
    @classmethod
    def default_score(cls, v):
        return v or 0
