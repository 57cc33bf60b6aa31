# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：main.py
# @Date   ：2026/10/14 15:00
# @Author ：leemysw
# 2026/10/14 15:00   Create
# =====================================================
"""
[INPUT]: 依赖 typer, 各命令子模块
[OUTPUT]: 对外提供 app (Typer 应用) 作为 CLI 入口
[POS]: cli 模块的主入口，组装所有命令
[PROTOCOL]: 变更时更新此头部
"""

import typer

from wecom_api import __version__
from .common import console

# ==============================================================================
# 创建 Typer 应用
# ==============================================================================
app = typer.Typer(
    name="wecom-api",
    help="🚀 企业微信 API 命令行工具",
    add_completion=True,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ==============================================================================
# 版本回调
# ==============================================================================
def version_callback(value: bool):
    if value:
        console.print(f"[bold blue]wecom-api[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


# ==============================================================================
# 主回调
# ==============================================================================
@app.callback()
def main(
        version: bool = typer.Option(
            None,
            "--version",
            "-v",
            help="显示版本号",
            callback=version_callback,
            is_eager=True,
        ),
):
    """
    🚀 企业微信 API 命令行工具

    支持成员管理、回调 IP 查询、网页授权链接生成。
    """
    pass


# ==============================================================================
# 注册命令 - 服务器 IP
# ==============================================================================
from .cmd_ip import callback_ip

app.command(name="callback-ip")(callback_ip)

# ==============================================================================
# 注册命令 - 网页授权
# ==============================================================================
from .cmd_oauth import authorize_url

app.command(name="authorize-url")(authorize_url)

# ==============================================================================
# 成员命令组
# ==============================================================================
from .cmd_user import (
    user_batch_delete,
    user_create,
    user_delete,
    user_get,
    user_id_by_code,
    user_invite,
    user_list,
    user_update,
)

user_app = typer.Typer(help="[dim]❄[/] 通讯录成员管理", rich_markup_mode="rich", no_args_is_help=True)
app.add_typer(user_app, name="user")

user_app.command("get")(user_get)
user_app.command("create")(user_create)
user_app.command("update")(user_update)
user_app.command("delete")(user_delete)
user_app.command("batch-delete")(user_batch_delete)
user_app.command("list")(user_list)
user_app.command("invite")(user_invite)
user_app.command("userid")(user_id_by_code)

# ==============================================================================
# 配置命令组
# ==============================================================================
from .cmd_config import config_clear, config_set, config_show

config_app = typer.Typer(help="[dim]❄[/] 配置管理", rich_markup_mode="rich")
app.add_typer(config_app, name="config")

config_app.command("set")(config_set)
config_app.command("show")(config_show)
config_app.command("clear")(config_clear)

# ==============================================================================
# 入口点
# ==============================================================================
if __name__ == "__main__":
    app()
