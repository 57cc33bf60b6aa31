# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：__init__.py
# @Date   ：2026/10/12 10:20
# @Author ：leemysw
# 2026/10/12 10:20   Create
# =====================================================
"""
[INPUT]: 依赖 core.sdk, auth, utils.config
[OUTPUT]: 对外提供 WeComAPI, ApiConfig, CorpTokenAuthenticator, HttpxTransport
[POS]: 包入口
[PROTOCOL]: 变更时更新此头部
"""

__version__ = "0.1.0"

from wecom_api.auth import AccessToken, CorpTokenAuthenticator, StaticTokenProvider, WeComAuthError
from wecom_api.core.sdk import WeComAPI
from wecom_api.core.transport import HttpxTransport, RequestOptions, post_json
from wecom_api.utils.config import ApiConfig

__all__ = [
    "__version__",
    "AccessToken",
    "ApiConfig",
    "CorpTokenAuthenticator",
    "HttpxTransport",
    "RequestOptions",
    "StaticTokenProvider",
    "WeComAPI",
    "WeComAuthError",
    "post_json",
]
