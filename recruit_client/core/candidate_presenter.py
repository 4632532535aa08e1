"""候选人评分展示

把后端返回的评分候选人记录转换为界面可直接使用的展示数据。
纯函数，不做任何I/O。
"""

from collections.abc import Mapping
from datetime import tzinfo
from enum import Enum
from typing import Any, List, Optional, Union
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict, Field

from ..models.candidate import ScoredCandidate
from ..models.resume import ParsedResumeData
from ..utils.config import get_settings
from ..utils.helpers import format_datetime, parse_datetime

settings = get_settings()

NOT_AVAILABLE = "N/A"
NOT_PROVIDED = "Not provided"


class ScoreTier(str, Enum):
    """得分等级枚举"""
    EXCELLENT = "excellent"  # >= 80
    GOOD = "good"  # 50 - 80
    FAIR = "fair"  # 20 - 50
    POOR = "poor"  # < 20


# 下限包含在内，按从高到低顺序匹配
_TIER_THRESHOLDS = (
    (80, ScoreTier.EXCELLENT),
    (50, ScoreTier.GOOD),
    (20, ScoreTier.FAIR),
)

TIER_COLORS = {
    ScoreTier.EXCELLENT: "text-green-400 border-green-900 bg-green-900/30",
    ScoreTier.GOOD: "text-yellow-400 border-yellow-900 bg-yellow-900/30",
    ScoreTier.FAIR: "text-orange-400 border-orange-900 bg-orange-900/30",
    ScoreTier.POOR: "text-red-400 border-red-900 bg-red-900/30",
}

TIER_GRADIENTS = {
    ScoreTier.EXCELLENT: "from-green-600 to-green-400",
    ScoreTier.GOOD: "from-yellow-600 to-yellow-400",
    ScoreTier.FAIR: "from-orange-600 to-orange-400",
    ScoreTier.POOR: "from-red-600 to-red-400",
}


class CandidateView(BaseModel):
    """候选人展示数据"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="姓名")
    initial: str = Field(..., description="头像首字母")
    email: str = Field(..., description="邮箱(缺失时为Not provided)")
    phone: Optional[str] = Field(None, description="手机号(缺失时不展示)")

    score: float = Field(..., description="匹配得分")
    score_label: str = Field(..., description="得分文本，如92.0%")
    score_bar_width: float = Field(..., description="得分条宽度百分比")
    tier: ScoreTier = Field(..., description="得分等级")
    color: str = Field(..., description="等级颜色样式")
    gradient: str = Field(..., description="等级渐变样式")

    skills: List[str] = Field(default_factory=list, description="技能列表")
    experience_years: float = Field(0, description="工作年限")
    certifications: List[str] = Field(default_factory=list, description="证书资质")
    explanation: List[str] = Field(default_factory=list, description="评分说明")

    uploaded_at: str = Field(NOT_AVAILABLE, description="上传时间文本")
    document_url: Optional[str] = Field(None, description="简历文件链接")

    @property
    def has_document(self) -> bool:
        """是否展示查看/下载入口"""
        return bool(self.document_url)


def score_tier(score: float) -> ScoreTier:
    """根据得分计算等级"""
    for lower_bound, tier in _TIER_THRESHOLDS:
        if score >= lower_bound:
            return tier
    return ScoreTier.POOR


def score_color(score: float) -> str:
    return TIER_COLORS[score_tier(score)]


def score_gradient(score: float) -> str:
    return TIER_GRADIENTS[score_tier(score)]


def display_initial(name: str) -> str:
    """姓名首字母；姓名为必填字段，缺失属于上游数据缺陷"""
    return name[0]


def _display_tz() -> Optional[tzinfo]:
    if settings.app.display_timezone:
        return ZoneInfo(settings.app.display_timezone)
    return None


def format_uploaded_at(value: Any, tz: Optional[tzinfo] = None) -> str:
    """格式化上传时间，缺失或无法解析时返回N/A"""
    dt = parse_datetime(value)
    if dt is None:
        return NOT_AVAILABLE
    return format_datetime(dt, tz or _display_tz())


def present_candidate(
    candidate: Union[ScoredCandidate, Mapping],
    tz: Optional[tzinfo] = None
) -> CandidateView:
    """生成候选人展示数据"""
    if not isinstance(candidate, ScoredCandidate):
        candidate = ScoredCandidate.model_validate(candidate)

    resume = candidate.resume
    parsed = resume.parsed_data if resume else ParsedResumeData()
    score = candidate.score

    tier = score_tier(score)

    return CandidateView(
        name=candidate.name,
        initial=display_initial(candidate.name),
        email=candidate.email or NOT_PROVIDED,
        phone=candidate.phone or None,
        score=score,
        score_label=f"{score:.1f}%",
        score_bar_width=min(max(score, 0.0), 100.0),
        tier=tier,
        color=TIER_COLORS[tier],
        gradient=TIER_GRADIENTS[tier],
        skills=list(parsed.skills),
        experience_years=parsed.years,
        certifications=list(parsed.certifications),
        explanation=list(parsed.explanation),
        uploaded_at=format_uploaded_at(resume.uploaded_at if resume else None, tz),
        document_url=resume.file if resume and resume.file else None
    )
