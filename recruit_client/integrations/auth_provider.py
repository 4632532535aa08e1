"""认证服务接口"""

from typing import Any, Protocol


class AuthProviderError(Exception):
    """认证服务异常，message为可直接展示给用户的文本"""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class AuthProvider(Protocol):
    """认证服务需要提供的操作"""

    async def login(self, email: str, password: str) -> Any:
        ...

    async def signup(self, email: str, password: str) -> Any:
        ...

    async def login_with_federated_provider(self) -> Any:
        ...
