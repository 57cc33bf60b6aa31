# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：common.py
# @Date   ：2026/10/14 10:15
# @Author ：leemysw
# 2026/10/14 10:15   Create
# =====================================================
"""
[INPUT]: 依赖 typer, rich, wecom_api.utils.config, wecom_api.core.sdk
[OUTPUT]: 对外提供 get_credentials, build_api, run_api, print_result, load_json_arg, console
[POS]: cli 模块的共享工具函数
[PROTOCOL]: 变更时更新此头部
"""

import asyncio
import json
import os
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

import typer
from rich.json import JSON

from wecom_api.core.sdk import WeComAPI
from wecom_api.utils.config import ApiConfig, AppConfig, DEFAULT_PREFIX, normalize_prefix
from wecom_api.utils.console import get_console

console = get_console()


def get_credentials(
        corpid: Optional[str] = None,
        corpsecret: Optional[str] = None,
        agentid: Optional[str] = None,
) -> tuple[Optional[str], Optional[str], Optional[str], str]:
    """
    获取凭证（优先级：命令行参数 > 环境变量 > 配置文件）

    Returns:
        (corpid, corpsecret, agentid, prefix)
    """
    # 加载配置文件作为 fallback
    config = AppConfig.load()

    final_corpid = corpid or os.getenv("WECOM_CORP_ID") or config.corpid
    final_corpsecret = corpsecret or os.getenv("WECOM_CORP_SECRET") or config.corpsecret
    final_agentid = agentid or os.getenv("WECOM_AGENT_ID") or config.agentid
    final_prefix = normalize_prefix(os.getenv("WECOM_API_PREFIX") or config.prefix or DEFAULT_PREFIX)

    return final_corpid, final_corpsecret, final_agentid, final_prefix


def build_api(
        corpid: Optional[str] = None,
        corpsecret: Optional[str] = None,
        agentid: Optional[str] = None,
        token: Optional[str] = None,
        debug: bool = False,
) -> WeComAPI:
    """根据命令行参数构建 WeComAPI，传入 token 时跳过 access_token 获取"""
    final_corpid, final_corpsecret, final_agentid, prefix = get_credentials(corpid, corpsecret, agentid)

    if token:
        config = ApiConfig(corpid=final_corpid or "", agentid=final_agentid, prefix=prefix)
        return WeComAPI.from_token(token, config, debug=debug)

    if not final_corpid or not final_corpsecret:
        console.print(
            "[red]❌ 需要提供企业微信凭证[/red]\n\n"
            "方式一：先配置凭证（推荐）\n"
            "  [cyan]wecom-api config set --corpid xxx --corpsecret xxx[/cyan]\n\n"
            "方式二：环境变量\n"
            "  [cyan]WECOM_CORP_ID / WECOM_CORP_SECRET[/cyan]\n\n"
            "方式三：直接传入 access_token\n"
            "  [cyan]--token xxx[/cyan]"
        )
        raise typer.Exit(1)

    return WeComAPI.from_credentials(
        final_corpid,
        final_corpsecret,
        agentid=final_agentid,
        prefix=prefix,
        debug=debug,
    )


def run_api(api: WeComAPI, call: Callable[[WeComAPI], Awaitable[Any]]) -> Any:
    """在事件循环中执行一次 API 调用，失败时打印错误并退出"""

    async def _run():
        async with api:
            return await call(api)

    try:
        return asyncio.run(_run())
    except Exception as e:
        console.print(f"[red]❌ 请求失败: {e}[/red]")
        raise typer.Exit(1)


def print_result(result: Any):
    console.print(JSON(json.dumps(result, ensure_ascii=False)))


def load_json_arg(value: str) -> Any:
    """解析 JSON 字符串或 JSON 文件路径"""
    text = value
    if not value.lstrip().startswith(("{", "[")):
        path = Path(value)
        if not path.is_file():
            console.print(f"[red]❌ 文件不存在: {value}[/red]")
            raise typer.Exit(1)
        text = path.read_text(encoding="utf-8")
    try:
        return json.loads(text)
    except ValueError as e:
        console.print(f"[red]❌ 无效的 JSON: {e}[/red]")
        raise typer.Exit(1)


# ==============================================================================
# 共用选项
# ==============================================================================
CORPID_OPTION = typer.Option(None, "--corpid", help="企业 ID（覆盖配置文件）")
CORPSECRET_OPTION = typer.Option(None, "--corpsecret", help="应用 Secret（覆盖配置文件）")
AGENTID_OPTION = typer.Option(None, "--agentid", help="应用 AgentId（覆盖配置文件）")
TOKEN_OPTION = typer.Option(
    None,
    "-t",
    "--token",
    envvar="WECOM_ACCESS_TOKEN",
    help="直接使用 access_token，跳过凭证换取",
)
DEBUG_OPTION = typer.Option(False, "--debug", help="打印请求日志")
