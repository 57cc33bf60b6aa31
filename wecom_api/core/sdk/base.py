# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：base.py
# @Date   ：2026/10/13 14:30
# @Author ：leemysw
# 2026/10/13 14:30   Create - SDK 基础类
# =====================================================
"""
[INPUT]: 依赖 core.transport, utils.config
[OUTPUT]: 对外提供 SDKCore, SubModule, TokenProvider
[POS]: SDK 核心类和子模块基类，负责 access_token 鉴权请求的组装
[PROTOCOL]: 变更时更新此头部
"""

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Optional

from rich.markup import escape

from wecom_api.core.transport import RequestOptions, Transport
from wecom_api.utils.config import ApiConfig
from wecom_api.utils.console import get_console, mask_token

if TYPE_CHECKING:
    from wecom_api.auth.token import AccessToken

console = get_console()

# () -> AccessToken
TokenProvider = Callable[[], Awaitable["AccessToken"]]


class SDKCore:
    """
    SDK 核心类

    持有共享资源：配置、token 获取函数、HTTP 传输
    子模块通过组合方式访问这些资源
    """

    def __init__(
            self,
            config: ApiConfig,
            token_provider: TokenProvider,
            transport: Transport,
            debug: bool = False,
    ):
        """
        初始化 SDK 核心

        Args:
            config: API 配置（prefix, corpid, agentid）
            token_provider: 异步函数，返回当前有效的 AccessToken
            transport: 异步函数 (url, options) -> 响应
            debug: 是否打印请求日志
        """
        self.config = config
        self.token_provider = token_provider
        self.transport = transport
        self.debug = debug

    def build_url(self, path: str, access_token: str) -> str:
        """prefix + path + ?access_token=TOKEN"""
        return self.config.prefix + path + "?access_token=" + access_token

    async def request(self, path: str, options: Optional[RequestOptions] = None) -> Any:
        """
        发起带 access_token 的请求

        token 获取失败或传输层抛出的异常均原样向上抛出。
        """
        token = await self.token_provider()
        url = self.build_url(path, token.access_token)
        options = options or RequestOptions()

        if self.debug:
            console.print(f"[dim]→ {options.method} {mask_token(url)} params={escape(str(options.params))}[/dim]", soft_wrap=True)

        return await self.transport(url, options)


class SubModule:
    """
    子模块基类

    所有功能模块继承此类，通过 core 访问共享资源
    """

    def __init__(self, core: SDKCore):
        self._core = core

    @property
    def config(self) -> ApiConfig:
        return self._core.config

    async def _request(self, path: str, options: Optional[RequestOptions] = None) -> Any:
        return await self._core.request(path, options)
