# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：transport.py
# @Date   ：2026/10/13 11:15
# @Author ：leemysw
# 2026/10/13 11:15   Create
# 2026/10/17 10:05   Merge params into URL explicitly
# =====================================================
"""
[INPUT]: 依赖 httpx
[OUTPUT]: 对外提供 RequestOptions, post_json, HttpxTransport, Transport
[POS]: HTTP 传输层，SDK 通过 Transport 协议调用，默认实现基于 httpx.AsyncClient
[PROTOCOL]: 变更时更新此头部
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx


@dataclass
class RequestOptions:
    """
    单次请求参数

    Attributes:
        method: HTTP 方法
        params: 追加到 URL 上的查询参数
        json: 请求体，以 JSON 发送
        headers: 额外请求头
    """
    method: str = "GET"
    params: Optional[Dict[str, Any]] = None
    json: Any = None
    headers: Dict[str, str] = field(default_factory=dict)


# (url, options) -> 响应结果
Transport = Callable[[str, RequestOptions], Awaitable[Any]]


def post_json(data: Any) -> RequestOptions:
    """构建以 JSON 作为请求体的 POST 参数"""
    return RequestOptions(
        method="POST",
        json=data,
        headers={"Content-Type": "application/json; charset=utf-8"},
    )


class HttpxTransport:
    """
    基于 httpx.AsyncClient 的默认传输实现

    返回解码后的 JSON 响应体，不解析 errcode。

    使用示例：
        async with HttpxTransport() as transport:
            data = await transport(url, RequestOptions(params={"userid": "zhangsan"}))
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: float = 30):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def __call__(self, url: str, options: Optional[RequestOptions] = None) -> Any:
        options = options or RequestOptions()
        target = httpx.URL(url)
        if options.params:
            # 保留 URL 上已有的 access_token
            target = target.copy_merge_params({k: v for k, v in options.params.items() if v is not None})

        kwargs: Dict[str, Any] = {"headers": options.headers}
        if options.json is not None:
            kwargs["json"] = options.json

        response = await self._client.request(options.method, target, **kwargs)
        response.raise_for_status()
        return response.json()

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
