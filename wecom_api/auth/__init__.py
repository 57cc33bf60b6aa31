# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：__init__.py
# @Date   ：2026/10/12 14:00
# @Author ：leemysw
# 2026/10/12 14:00   Create
# =====================================================
"""
[INPUT]: None
[OUTPUT]: 对外提供 AccessToken, CorpTokenAuthenticator, StaticTokenProvider, WeComAuthError
[POS]: auth 模块入口
[PROTOCOL]: 变更时更新此头部
"""

from wecom_api.auth.token import AccessToken, CorpTokenAuthenticator, StaticTokenProvider, WeComAuthError

__all__ = ["AccessToken", "CorpTokenAuthenticator", "StaticTokenProvider", "WeComAuthError"]
