"""岗位数据模型"""

from typing import Optional, Union
from pydantic import BaseModel, ConfigDict, Field


JobId = Union[int, str]


class JobBase(BaseModel):
    """岗位基础模型"""
    title: str = Field(..., min_length=1, description="岗位名称")
    description: str = Field(..., min_length=1, description="岗位描述")
    requirements: str = Field(..., min_length=1, description="岗位要求")


class JobCreate(JobBase):
    """创建岗位模型(请求体)"""
    pass


class Job(BaseModel):
    """完整岗位模型(由后端返回，客户端只读)"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    id: JobId = Field(..., description="岗位ID")
    title: str = Field(..., description="岗位名称")
    description: str = Field("", description="岗位描述")
    requirements: str = Field("", description="岗位要求")
    department: Optional[str] = Field(None, description="部门")

    @property
    def display_label(self) -> str:
        """下拉框展示文本"""
        return f"{self.title} - {self.department or 'General'}"
