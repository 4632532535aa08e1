"""认证数据模型"""

from enum import Enum
from pydantic import BaseModel, Field


class AuthMode(str, Enum):
    """认证模式枚举"""
    LOGIN = "login"  # 登录
    SIGNUP = "signup"  # 注册


class AuthCredentials(BaseModel):
    """登录/注册表单凭据"""
    email: str = Field("", description="邮箱")
    password: str = Field("", description="密码")
    confirm_password: str = Field("", description="确认密码(仅注册)")

    def passwords_match(self) -> bool:
        return self.password == self.confirm_password
