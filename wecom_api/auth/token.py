# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：token.py
# @Date   ：2026/10/12 14:02
# @Author ：leemysw
#
# 2026/10/12 14:02   Create
# 2026/10/15 09:40   Guard refresh with asyncio.Lock
# 2026/10/17 10:20   Key file cache by corpsecret fingerprint
# =====================================================
"""
[INPUT]: 依赖 httpx 的异步 HTTP 客户端
[OUTPUT]: 对外提供 AccessToken, CorpTokenAuthenticator, StaticTokenProvider, WeComAuthError
[POS]: auth 模块的核心实现，负责获取和缓存企业微信 access_token
[PROTOCOL]: 变更时更新此头部

企业微信获取 access_token 文档:
- https://developer.work.weixin.qq.com/document/path/91039
"""

import asyncio
import hashlib
import json
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import httpx

from wecom_api.utils.config import DEFAULT_PREFIX, get_config_dir
from wecom_api.utils.console import get_console

console = get_console()


class WeComAuthError(RuntimeError):
    """获取 access_token 失败"""

    def __init__(self, errcode: int, errmsg: str):
        super().__init__(f"获取 access_token 失败: [{errcode}] {errmsg}")
        self.errcode = errcode
        self.errmsg = errmsg


# ==============================================================================
# 数据模型
# ==============================================================================
@dataclass
class AccessToken:
    """Token 信息"""
    access_token: str
    expires_at: float  # Unix 时间戳

    def is_expired(self, margin: float = 0) -> bool:
        """检查 token 是否过期（可提前 margin 秒）"""
        return time.time() >= self.expires_at - margin

    def to_dict(self) -> dict:
        return {
            "access_token": self.access_token,
            "expires_at": self.expires_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AccessToken":
        return cls(
            access_token=data["access_token"],
            expires_at=data.get("expires_at", 0),
        )


# ==============================================================================
# 手动 Token
# ==============================================================================
class StaticTokenProvider:
    """直接使用外部传入的 access_token，不做刷新"""

    def __init__(self, access_token: str, expires_in: float = 7200):
        self._token = AccessToken(access_token=access_token, expires_at=time.time() + expires_in)

    async def ensure_access_token(self) -> AccessToken:
        return self._token


# ==============================================================================
# 企业 access_token 认证器
# ==============================================================================
class CorpTokenAuthenticator:
    """
    企业微信 access_token 认证器

    使用 corpid 和应用的 corpsecret 获取 access_token。

    特点：
    - Token 有效期 2 小时，剩余 5 分钟内会自动刷新
    - 内存 + 文件两级缓存，多进程共用同一份 Token
    - 并发调用时只会发起一次刷新请求

    使用示例：
        auth = CorpTokenAuthenticator(corpid="ww_xxx", corpsecret="xxx")
        token = await auth.ensure_access_token()
    """

    REFRESH_MARGIN = 300

    def __init__(
            self,
            corpid: str,
            corpsecret: str,
            prefix: str = DEFAULT_PREFIX,
            cache_dir: Optional[Path] = None,
            client: Optional[httpx.AsyncClient] = None,
    ):
        """
        初始化认证器

        Args:
            corpid: 企业 ID
            corpsecret: 应用的凭证密钥
            prefix: API 前缀
            cache_dir: Token 缓存目录
            client: 可选的 httpx.AsyncClient，未传入时自动创建
        """
        self.corpid = corpid
        self.corpsecret = corpsecret
        # 同一企业下不同 secret 的 access_token 权限不同
        self.secret_fingerprint = hashlib.sha256(corpsecret.encode("utf-8")).hexdigest()[:16]
        self.token_url = prefix + "gettoken"

        # Token 缓存
        self.cache_dir = cache_dir or get_config_dir()
        self.cache_file = self.cache_dir / "access_token.json"
        self._token: Optional[AccessToken] = None
        self._lock = asyncio.Lock()

        # HTTP 客户端
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=30)

    async def ensure_access_token(self) -> AccessToken:
        """
        获取当前有效的 access_token

        优先使用内存缓存，其次文件缓存，过期或即将过期则重新获取。

        Returns:
            AccessToken
        """
        if self._is_valid(self._token):
            return self._token

        async with self._lock:
            # 等待锁期间可能已被其他调用刷新
            if self._is_valid(self._token):
                return self._token

            cached = self._load_from_cache()
            if self._is_valid(cached):
                self._token = cached
                return cached

            self._token = await self._fetch_token()
            return self._token

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()

    # ==========================================================================
    # 私有方法
    # ==========================================================================
    def _is_valid(self, token: Optional[AccessToken]) -> bool:
        return token is not None and not token.is_expired(self.REFRESH_MARGIN)

    async def _fetch_token(self) -> AccessToken:
        """
        从企业微信 API 获取 access_token

        GET https://qyapi.weixin.qq.com/cgi-bin/gettoken?corpid=ID&corpsecret=SECRET
        """
        response = await self._client.get(
            self.token_url,
            params={"corpid": self.corpid, "corpsecret": self.corpsecret},
        )
        response.raise_for_status()
        data = response.json()

        if data.get("errcode", 0) != 0:
            raise WeComAuthError(data.get("errcode"), data.get("errmsg", ""))

        token = AccessToken(
            access_token=data["access_token"],
            expires_at=time.time() + data.get("expires_in", 7200),
        )
        self._save_to_cache(token)
        console.print("[dim]access_token 已刷新[/dim]")
        return token

    def _load_from_cache(self) -> Optional[AccessToken]:
        """从缓存加载 Token（缓存按 corpid + secret 指纹区分）"""
        if not self.cache_file.exists():
            return None

        try:
            data = json.loads(self.cache_file.read_text())
            if data.get("corpid") != self.corpid or data.get("secret") != self.secret_fingerprint:
                return None
            return AccessToken.from_dict(data)
        except (OSError, ValueError, KeyError):
            return None

    def _save_to_cache(self, token: AccessToken):
        """保存 Token 到缓存"""
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.cache_file.write_text(json.dumps({
            "corpid": self.corpid,
            "secret": self.secret_fingerprint,
            **token.to_dict(),
        }, indent=2))
