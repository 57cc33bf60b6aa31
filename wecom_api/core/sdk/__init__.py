# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：__init__.py
# @Date   ：2026/10/13 16:40
# @Author ：leemysw
# 2026/10/13 16:40   Create - 组合模式
# 2026/10/15 11:05   Add batch_delete_users
# =====================================================
"""
[INPUT]: 依赖各子模块, auth.token, core.transport
[OUTPUT]: 对外提供 WeComAPI 类
[POS]: SDK 模块入口，使用组合模式组织各功能模块
[PROTOCOL]: 变更时更新此头部
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from wecom_api.auth.token import CorpTokenAuthenticator, StaticTokenProvider
from wecom_api.core.transport import HttpxTransport, Transport
from wecom_api.utils.config import ApiConfig, DEFAULT_PREFIX
from .base import SDKCore, TokenProvider
from .ip import IpAPI
from .oauth import OAuthAPI
from .user import DepartmentId, UserAPI

__all__ = ["WeComAPI"]


class WeComAPI:
    """
    企业微信 API 封装

    使用组合模式组织各功能模块，通过属性访问：
    - api.ip    - 回调服务器 IP
    - api.user  - 通讯录成员
    - api.oauth - 网页授权链接

    token 获取函数与 HTTP 传输均由调用方注入，常用方法也直接挂在 WeComAPI 上。

    Usage:
        api = WeComAPI(ApiConfig(corpid="ww_xxx"), auth.ensure_access_token, HttpxTransport())
        await api.get_user("zhangsan")

        async with WeComAPI.from_credentials("ww_xxx", "secret") as api:
            await api.get_callback_ip()
    """

    def __init__(
            self,
            config: ApiConfig,
            token_provider: TokenProvider,
            transport: Transport,
            debug: bool = False,
    ):
        """
        初始化 SDK

        Args:
            config: API 配置
            token_provider: 异步函数，返回当前有效的 AccessToken
            transport: 异步函数 (url, options) -> 响应
            debug: 是否打印请求日志
        """
        self._core = SDKCore(config, token_provider, transport, debug=debug)
        self._closers: List[Any] = []

        # 延迟初始化子模块
        self._ip: Optional[IpAPI] = None
        self._user: Optional[UserAPI] = None
        self._oauth: Optional[OAuthAPI] = None

    @classmethod
    def from_credentials(
            cls,
            corpid: str,
            corpsecret: str,
            agentid: Optional[str] = None,
            prefix: str = DEFAULT_PREFIX,
            cache_dir: Optional[Path] = None,
            debug: bool = False,
    ) -> "WeComAPI":
        """使用默认的 CorpTokenAuthenticator + HttpxTransport 创建实例"""
        config = ApiConfig(corpid=corpid, agentid=agentid, prefix=prefix)
        authenticator = CorpTokenAuthenticator(corpid, corpsecret, prefix=prefix, cache_dir=cache_dir)
        transport = HttpxTransport()
        api = cls(config, authenticator.ensure_access_token, transport, debug=debug)
        api._closers.extend([authenticator, transport])
        return api

    @classmethod
    def from_token(cls, access_token: str, config: ApiConfig, debug: bool = False) -> "WeComAPI":
        """使用外部获取的 access_token 创建实例，不做刷新"""
        transport = HttpxTransport()
        api = cls(config, StaticTokenProvider(access_token).ensure_access_token, transport, debug=debug)
        api._closers.append(transport)
        return api

    @property
    def config(self) -> ApiConfig:
        return self._core.config

    async def aclose(self):
        """关闭 from_credentials 创建的 HTTP 客户端"""
        for closer in self._closers:
            await closer.aclose()
        self._closers.clear()

    async def __aenter__(self) -> "WeComAPI":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    # =========================================================================
    # 子模块（延迟初始化）
    # =========================================================================

    @property
    def ip(self) -> IpAPI:
        if self._ip is None:
            self._ip = IpAPI(self._core)
        return self._ip

    @property
    def user(self) -> UserAPI:
        if self._user is None:
            self._user = UserAPI(self._core)
        return self._user

    @property
    def oauth(self) -> OAuthAPI:
        if self._oauth is None:
            self._oauth = OAuthAPI(self._core)
        return self._oauth

    # =========================================================================
    # 便捷方法
    # =========================================================================

    async def get_callback_ip(self) -> dict:
        return await self.ip.get_callback_ip()

    async def create_user(self, user: Dict[str, Any]) -> dict:
        return await self.user.create_user(user)

    async def update_user(self, user: Dict[str, Any]) -> dict:
        return await self.user.update_user(user)

    async def delete_user(self, userid: str) -> dict:
        return await self.user.delete_user(userid)

    async def batch_delete_users(self, userids: List[str]) -> dict:
        return await self.user.batch_delete_users(userids)

    async def get_user(self, userid: str) -> dict:
        return await self.user.get_user(userid)

    async def get_department_users(self, department_id: DepartmentId, fetch_child: int = 0) -> dict:
        return await self.user.get_department_users(department_id, fetch_child)

    async def get_department_users_detail(self, department_id: DepartmentId, fetch_child: int = 0) -> dict:
        return await self.user.get_department_users_detail(department_id, fetch_child)

    async def invite_user(
            self,
            user: Optional[List[str]] = None,
            party: Optional[List[DepartmentId]] = None,
            tag: Optional[List[DepartmentId]] = None,
    ) -> dict:
        return await self.user.invite_user(user, party, tag)

    async def get_user_id_by_code(self, code: str) -> dict:
        return await self.user.get_user_id_by_code(code)

    def get_authorize_url(self, redirect: str, state: str = "", scope: str = "snsapi_base") -> str:
        return self.oauth.get_authorize_url(redirect, state, scope)
