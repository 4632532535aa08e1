"""简历数据模型"""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.config import get_settings
from ..utils.helpers import bytes_to_mb, format_size_mb, get_mime_type

settings = get_settings()

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
JPEG_MIME = "image/jpeg"


class SubmissionStatus(str, Enum):
    """简历提交状态枚举"""
    EMPTY = "empty"  # 未选择文件
    SELECTED = "selected"  # 已选择文件
    SUBMITTING = "submitting"  # 上传中
    SUCCESS = "success"  # 上传成功
    ERROR = "error"  # 上传失败


def allowed_mime_types() -> List[str]:
    """允许上传的MIME类型"""
    return settings.upload.supported_mime_types_list


class ResumeFile(BaseModel):
    """待上传的简历文件"""
    model_config = ConfigDict(frozen=True)

    filename: str = Field(..., min_length=1, description="文件名")
    content: bytes = Field(..., description="文件内容")
    content_type: str = Field(..., description="MIME类型")

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "ResumeFile":
        """从本地路径读取简历文件"""
        path = Path(path)
        return cls(
            filename=path.name,
            content=path.read_bytes(),
            content_type=get_mime_type(path)
        )

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def size_label(self) -> str:
        return format_size_mb(self.size)

    @property
    def exceeds_size_limit(self) -> bool:
        """是否超过建议大小(仅用于展示，不做拦截)"""
        return bytes_to_mb(self.size) > settings.upload.max_size_mb

    @property
    def is_allowed_type(self) -> bool:
        return self.content_type in allowed_mime_types()


class ParsedResumeData(BaseModel):
    """简历解析结果"""
    model_config = ConfigDict(extra="ignore")

    skills: List[str] = Field(default_factory=list, description="技能列表")
    years: float = Field(0, description="工作年限")
    certifications: List[str] = Field(default_factory=list, description="证书资质")
    explanation: List[str] = Field(default_factory=list, description="评分说明")

    @field_validator('skills', 'certifications', 'explanation', mode='before')
    @classmethod
    def default_list(cls, v):
        return v or []

    @field_validator('years', mode='before')
    @classmethod
    def default_years(cls, v):
        return v or 0


class CandidateResume(BaseModel):
    """候选人简历信息"""
    model_config = ConfigDict(extra="ignore")

    parsed_data: ParsedResumeData = Field(default_factory=ParsedResumeData, description="解析数据")
    uploaded_at: Optional[Union[datetime, str]] = Field(None, description="上传时间")
    file: Optional[str] = Field(None, description="简历文件链接")

    @field_validator('parsed_data', mode='before')
    @classmethod
    def default_parsed_data(cls, v):
        return v or {}
