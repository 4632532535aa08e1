"""Supabase认证集成模块"""

import asyncio
from typing import Any, Callable, Optional

from supabase import Client, create_client

from ..utils.config import get_settings
from ..utils.logger import auth_logger
from .auth_provider import AuthProviderError

settings = get_settings()


class SupabaseAuthProvider:
    """基于Supabase Auth的登录/注册/第三方登录"""

    def __init__(self, client: Optional[Client] = None, provider: str = "google", redirect_url: Optional[str] = None):
        if client is None:
            if not settings.supabase.url or not settings.supabase.key:
                raise AuthProviderError("Supabase configuration missing.")
            client = create_client(settings.supabase.url, settings.supabase.key)

        self.client = client
        self.provider = provider
        self.redirect_url = redirect_url or settings.supabase.redirect_url

    async def _call(self, action: str, fn: Callable, *args) -> Any:
        """在线程中执行同步SDK调用，统一转换异常"""
        try:
            result = await asyncio.to_thread(fn, *args)
            auth_logger.info(f"{action}成功")
            return result
        except Exception as e:
            message = getattr(e, "message", None) or str(e)
            auth_logger.error(f"{action}失败: {message}")
            raise AuthProviderError(message) from e

    async def login(self, email: str, password: str) -> Any:
        """邮箱密码登录"""
        return await self._call(
            "登录",
            self.client.auth.sign_in_with_password,
            {"email": email, "password": password}
        )

    async def signup(self, email: str, password: str) -> Any:
        """邮箱密码注册"""
        return await self._call(
            "注册",
            self.client.auth.sign_up,
            {"email": email, "password": password}
        )

    async def login_with_federated_provider(self) -> Any:
        """第三方登录，返回需要在浏览器中打开的授权链接"""
        credentials = {"provider": self.provider}
        if self.redirect_url:
            credentials["options"] = {"redirect_to": self.redirect_url}

        response = await self._call("第三方登录", self.client.auth.sign_in_with_oauth, credentials)
        return getattr(response, "url", response)
