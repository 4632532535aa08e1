"""登录注册流程"""

from typing import Any, Awaitable, Callable, Optional

from ..core.error_messages import exception_message
from ..core.result_state import ResultState
from ..integrations.auth_provider import AuthProvider
from ..models.auth import AuthCredentials, AuthMode
from ..utils.logger import auth_logger
from .flow_base import FlowBase

PASSWORD_MISMATCH_MESSAGE = "Passwords do not match"
AUTH_FALLBACK = "Authentication failed"
FEDERATED_FALLBACK = "Google sign-in failed"

_HEADINGS = {
    AuthMode.LOGIN: ("Welcome Back!", "Access your dashboard & manage candidates"),
    AuthMode.SIGNUP: ("Start Hiring", "Create an account to streamline recruitment"),
}


class AuthFlow(FlowBase):
    """登录/注册流程

    登录和注册共用一个忙碌状态；邮箱密码提交与第三方登录可以独立触发，
    任一请求完成都会按各自的规则写入结果。
    """

    EVENTS = ("close", "state_change")

    def __init__(self, provider: AuthProvider, mode: AuthMode = AuthMode.LOGIN):
        super().__init__()
        self.provider = provider
        self.initial_mode = mode

        self.is_open = False
        self.mode = mode
        self.credentials = AuthCredentials()
        self.result: ResultState[Any] = ResultState()

    @property
    def busy(self) -> bool:
        return self.result.busy

    @property
    def error(self) -> Optional[str]:
        return self.result.message if self.result.is_error else None

    @property
    def submit_label(self) -> str:
        if self.busy:
            return "Processing..."
        return "Sign In" if self.mode == AuthMode.LOGIN else "Create Account"

    @property
    def heading(self) -> str:
        return _HEADINGS[self.mode][0]

    @property
    def subheading(self) -> str:
        return _HEADINGS[self.mode][1]

    def open(self, mode: Optional[AuthMode] = None):
        """打开(或以新模式重新打开)表单，重置凭据和错误"""
        if mode is not None:
            self.initial_mode = AuthMode(mode)
        self.mode = self.initial_mode
        self.credentials = AuthCredentials()
        self.result.reset()
        self.is_open = True

    async def close(self):
        self.is_open = False
        await self._trigger_callback("close")

    def set_mode(self, mode: AuthMode):
        """用户切换登录/注册"""
        self.mode = AuthMode(mode)

    def toggle_mode(self):
        self.set_mode(AuthMode.SIGNUP if self.mode == AuthMode.LOGIN else AuthMode.LOGIN)

    def fill(self, email: str, password: str, confirm_password: str = ""):
        """填写凭据"""
        self.credentials = AuthCredentials(
            email=email,
            password=password,
            confirm_password=confirm_password
        )

    async def submit(self) -> ResultState[Any]:
        """邮箱密码登录或注册"""
        if self.busy:
            auth_logger.warning("认证请求进行中，忽略重复提交")
            return self.result

        self.result.reset()

        if self.mode == AuthMode.SIGNUP and not self.credentials.passwords_match():
            self.result.fail(PASSWORD_MISMATCH_MESSAGE)
            await self._trigger_callback("state_change", self)
            return self.result

        email = self.credentials.email
        password = self.credentials.password

        if self.mode == AuthMode.SIGNUP:
            operation = lambda: self.provider.signup(email, password)
        else:
            operation = lambda: self.provider.login(email, password)

        return await self._run(operation, AUTH_FALLBACK, self.mode.value)

    async def federated_sign_in(self) -> ResultState[Any]:
        """第三方(Google)登录"""
        return await self._run(self.provider.login_with_federated_provider, FEDERATED_FALLBACK, "federated")

    async def _run(
        self,
        operation: Callable[[], Awaitable[Any]],
        fallback: str,
        action: str
    ) -> ResultState[Any]:
        self.result.start()
        await self._trigger_callback("state_change", self)

        try:
            payload = await operation()
        except Exception as e:
            message = exception_message(e) or fallback
            auth_logger.error(f"认证失败({action}): {message}")
            self.result.fail(message)
            await self._trigger_callback("state_change", self)
            return self.result

        self.result.succeed(payload=payload)
        await self.close()
        await self._trigger_callback("state_change", self)

        return self.result
