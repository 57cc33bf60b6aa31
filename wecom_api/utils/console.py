# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：console.py
# @Date   ：2026/10/12 10:25
# @Author ：leemysw
# 2026/10/12 10:25   Create
# =====================================================
"""
[INPUT]: 依赖 rich
[OUTPUT]: 对外提供 get_console, mask_token
[POS]: 全局共享的 rich Console
[PROTOCOL]: 变更时更新此头部
"""

import re
from typing import Optional

from rich.console import Console

_console: Optional[Console] = None

_TOKEN_PATTERN = re.compile(r"(access_token=)[^&#]+")


def get_console() -> Console:
    """获取共享 Console（首次调用时创建）"""
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def mask_token(url: str) -> str:
    """隐藏 URL 中的 access_token"""
    return _TOKEN_PATTERN.sub(r"\1***", url)
