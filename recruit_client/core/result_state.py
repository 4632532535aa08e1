"""通用请求结果状态

三个表单流程(简历上传、岗位创建、登录注册)共用同一种状态形状：
一个枚举状态加一条提示消息，以及可选的成功载荷。
"""

from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

PayloadT = TypeVar("PayloadT")


class FlowStatus(str, Enum):
    """流程状态枚举"""
    IDLE = "idle"  # 空闲
    BUSY = "busy"  # 请求进行中
    SUCCESS = "success"  # 成功
    ERROR = "error"  # 失败


class ResultState(BaseModel, Generic[PayloadT]):
    """单个流程的请求结果状态"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: FlowStatus = Field(FlowStatus.IDLE, description="当前状态")
    message: Optional[str] = Field(None, description="提示消息")
    payload: Optional[PayloadT] = Field(None, description="成功时的返回数据")

    @property
    def busy(self) -> bool:
        return self.status == FlowStatus.BUSY

    @property
    def is_error(self) -> bool:
        return self.status == FlowStatus.ERROR

    @property
    def is_success(self) -> bool:
        return self.status == FlowStatus.SUCCESS

    def start(self) -> None:
        """进入请求中状态，清空上一次的结果"""
        self.status = FlowStatus.BUSY
        self.message = None
        self.payload = None

    def succeed(self, message: Optional[str] = None, payload: Optional[PayloadT] = None) -> None:
        self.status = FlowStatus.SUCCESS
        self.message = message
        self.payload = payload

    def fail(self, message: str) -> None:
        self.status = FlowStatus.ERROR
        self.message = message
        self.payload = None

    def reset(self) -> None:
        self.status = FlowStatus.IDLE
        self.message = None
        self.payload = None

    def as_status(self) -> Optional[Dict[str, Any]]:
        """转换为界面使用的 {type, message} 结构，无结果时返回None"""
        if self.status not in (FlowStatus.SUCCESS, FlowStatus.ERROR):
            return None
        return {"type": self.status.value, "message": self.message}
