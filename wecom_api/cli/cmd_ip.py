# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：cmd_ip.py
# @Date   ：2026/10/14 11:10
# @Author ：leemysw
# 2026/10/14 11:10   Create
# =====================================================
"""
[INPUT]: 依赖 typer, wecom_api.core.sdk
[OUTPUT]: 对外提供 callback_ip 命令
[POS]: cli 模块的服务器 IP 命令
[PROTOCOL]: 变更时更新此头部
"""

from typing import Optional

from .common import CORPID_OPTION, CORPSECRET_OPTION, DEBUG_OPTION, TOKEN_OPTION, build_api, print_result, run_api


def callback_ip(
        corpid: Optional[str] = CORPID_OPTION,
        corpsecret: Optional[str] = CORPSECRET_OPTION,
        token: Optional[str] = TOKEN_OPTION,
        debug: bool = DEBUG_OPTION,
):
    """
    [green]▶[/] 获取企业微信回调服务器的 IP 段

    配置回调地址的防火墙白名单时使用。
    """
    api = build_api(corpid, corpsecret, token=token, debug=debug)
    print_result(run_api(api, lambda a: a.get_callback_ip()))
