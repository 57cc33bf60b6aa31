# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：cmd_oauth.py
# @Date   ：2026/10/14 14:20
# @Author ：leemysw
# 2026/10/14 14:20   Create
# =====================================================
"""
[INPUT]: 依赖 typer, wecom_api.core.sdk.oauth
[OUTPUT]: 对外提供 authorize_url 命令
[POS]: cli 模块的网页授权命令，无需 access_token
[PROTOCOL]: 变更时更新此头部
"""

from typing import Optional

import typer

from wecom_api.core.sdk.oauth import build_authorize_url
from .common import CORPID_OPTION, console, get_credentials


def authorize_url(
        redirect: str = typer.Argument(..., help="授权后要跳转的地址"),
        state: str = typer.Option("", "--state", "-s", help="重定向后带回的 state 参数"),
        scope: str = typer.Option("snsapi_base", "--scope", help="snsapi_base / snsapi_privateinfo"),
        corpid: Optional[str] = CORPID_OPTION,
):
    """
    [yellow]❁[/] 生成网页授权链接

    示例:

        wecom-api authorize-url https://example.com/callback --state login
    """
    final_corpid, _, _, _ = get_credentials(corpid)
    if not final_corpid:
        console.print("[red]❌ 需要提供 Corp ID: --corpid 或 wecom-api config set[/red]")
        raise typer.Exit(1)

    # soft_wrap 避免长链接被折行
    console.print(build_authorize_url(final_corpid, redirect, state, scope), soft_wrap=True)
