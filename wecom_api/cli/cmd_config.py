# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：cmd_config.py
# @Date   ：2026/10/14 10:40
# @Author ：leemysw
# 2026/10/14 10:40   Create
# =====================================================
"""
[INPUT]: 依赖 typer, wecom_api.utils.config
[OUTPUT]: 对外提供 config_set, config_show, config_clear 命令
[POS]: cli 模块的配置管理命令
[PROTOCOL]: 变更时更新此头部
"""

import os
from typing import Optional

import typer
from rich.panel import Panel
from rich.table import Table

from wecom_api.utils.config import AppConfig, DEFAULT_PREFIX, normalize_prefix
from .common import console


def _mask(value: str) -> str:
    return f"{value[:6]}...{value[-4:]}" if len(value) > 12 else value


# ==============================================================================
# config set 命令
# ==============================================================================


def config_set(
        corpid: Optional[str] = typer.Option(None, "--corpid", help="企业 ID"),
        corpsecret: Optional[str] = typer.Option(None, "--corpsecret", help="应用 Secret"),
        agentid: Optional[str] = typer.Option(None, "--agentid", help="应用 AgentId"),
        prefix: Optional[str] = typer.Option(None, "--prefix", help="API 前缀（私有化部署时使用）"),
):
    """
    设置企业微信应用凭证

    示例:
        wecom-api config set --corpid ww_xxx --corpsecret xxx --agentid 1000002
    """
    config = AppConfig.load()

    # 更新配置（只更新传入的值）
    if corpid:
        config.corpid = corpid
    if corpsecret:
        config.corpsecret = corpsecret
    if agentid:
        config.agentid = agentid
    if prefix:
        config.prefix = normalize_prefix(prefix)

    # 交互式输入缺失的值
    if not config.corpid:
        config.corpid = typer.prompt("Corp ID")
    if not config.corpsecret:
        config.corpsecret = typer.prompt("Corp Secret", hide_input=True)

    config.save()

    console.print(Panel(
        f"✅ 配置已保存至: [cyan]{config.config_file}[/cyan]\n\n"
        f"Corp ID: [green]{_mask(config.corpid)}[/green]\n"
        f"Corp Secret: [dim]已保存（已隐藏）[/dim]\n"
        f"AgentId: {config.agentid or '[dim]未设置[/dim]'}\n"
        f"API 前缀: {config.prefix or DEFAULT_PREFIX}",
        title="配置成功",
        border_style="green",
    ))


# ==============================================================================
# config show 命令
# ==============================================================================


def config_show():
    """显示当前配置"""
    config = AppConfig.load()

    table = Table(title="当前配置")
    table.add_column("配置项", style="cyan")
    table.add_column("来源", style="dim")
    table.add_column("值", style="green")

    for label, env_name, value, secret in (
            ("Corp ID", "WECOM_CORP_ID", config.corpid, False),
            ("Corp Secret", "WECOM_CORP_SECRET", config.corpsecret, True),
            ("AgentId", "WECOM_AGENT_ID", config.agentid, False),
            ("API 前缀", "WECOM_API_PREFIX", config.prefix, False),
    ):
        env_value = os.getenv(env_name)
        if env_value:
            table.add_row(label, "环境变量", "[dim]已设置（已隐藏）[/dim]" if secret else _mask(env_value))
        elif value:
            table.add_row(label, "配置文件", "[dim]已设置（已隐藏）[/dim]" if secret else _mask(value))
        else:
            table.add_row(label, "-", "[dim]未设置[/dim]")

    table.add_row("配置文件", "-", "存在" if config.config_file.exists() else "❌ 不存在")
    table.add_row("Token 缓存", "-", "存在" if (config.config_dir / "access_token.json").exists() else "❌ 不存在")
    table.add_row("配置目录", "-", str(config.config_dir))

    console.print(table)

    if not config.has_credentials() and not os.getenv("WECOM_CORP_ID"):
        console.print("\n[yellow]💡 提示: 运行以下命令配置凭证[/yellow]")
        console.print("   [cyan]wecom-api config set --corpid xxx --corpsecret xxx[/cyan]")


# ==============================================================================
# config clear 命令
# ==============================================================================


def config_clear(
        force: bool = typer.Option(False, "--force", "-f", help="跳过确认"),
        all: bool = typer.Option(False, "--all", "-a", help="同时清除配置文件"),
):
    """清除 Token 缓存（--all 同时清除配置）"""
    app_config = AppConfig.load()
    token_file = app_config.config_dir / "access_token.json"

    has_config = app_config.config_file.exists()
    has_token = token_file.exists()

    if not has_token and not (all and has_config):
        console.print("[yellow]没有可清除的配置或缓存[/yellow]")
        return

    if not force:
        msg = "确定要清除配置文件和 Token 缓存吗？" if all else "确定要清除 Token 缓存吗？"
        if not typer.confirm(msg):
            console.print("已取消")
            raise typer.Abort()

    if all and has_config:
        app_config.clear()
        console.print("[green]✅ 配置文件已清除[/green]")

    if has_token:
        token_file.unlink()
        console.print("[green]✅ Token 缓存已清除[/green]")
