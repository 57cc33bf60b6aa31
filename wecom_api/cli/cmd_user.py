# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：cmd_user.py
# @Date   ：2026/10/14 11:30
# @Author ：leemysw
# 2026/10/14 11:30   Create
# =====================================================
"""
[INPUT]: 依赖 typer, wecom_api.core.sdk
[OUTPUT]: 对外提供 user_get, user_create, user_update, user_delete, user_batch_delete,
          user_list, user_invite, user_id_by_code 命令
[POS]: cli 模块的通讯录成员命令
[PROTOCOL]: 变更时更新此头部
"""

from typing import List, Optional

import typer

from .common import (
    AGENTID_OPTION,
    CORPID_OPTION,
    CORPSECRET_OPTION,
    DEBUG_OPTION,
    TOKEN_OPTION,
    build_api,
    console,
    load_json_arg,
    print_result,
    run_api,
)


def user_get(
        userid: str = typer.Argument(..., help="成员 UserID"),
        corpid: Optional[str] = CORPID_OPTION,
        corpsecret: Optional[str] = CORPSECRET_OPTION,
        token: Optional[str] = TOKEN_OPTION,
        debug: bool = DEBUG_OPTION,
):
    """读取成员详情"""
    api = build_api(corpid, corpsecret, token=token, debug=debug)
    print_result(run_api(api, lambda a: a.get_user(userid)))


def user_create(
        user: str = typer.Argument(..., help="成员信息，JSON 字符串或 JSON 文件路径"),
        corpid: Optional[str] = CORPID_OPTION,
        corpsecret: Optional[str] = CORPSECRET_OPTION,
        token: Optional[str] = TOKEN_OPTION,
        debug: bool = DEBUG_OPTION,
):
    """
    创建成员

    示例:

        wecom-api user create '{"userid": "zhangsan", "name": "张三", "department": [1]}'
    """
    data = load_json_arg(user)
    api = build_api(corpid, corpsecret, token=token, debug=debug)
    print_result(run_api(api, lambda a: a.create_user(data)))


def user_update(
        user: str = typer.Argument(..., help="成员信息，JSON 字符串或 JSON 文件路径"),
        corpid: Optional[str] = CORPID_OPTION,
        corpsecret: Optional[str] = CORPSECRET_OPTION,
        token: Optional[str] = TOKEN_OPTION,
        debug: bool = DEBUG_OPTION,
):
    """更新成员"""
    data = load_json_arg(user)
    api = build_api(corpid, corpsecret, token=token, debug=debug)
    print_result(run_api(api, lambda a: a.update_user(data)))


def user_delete(
        userid: str = typer.Argument(..., help="成员 UserID"),
        force: bool = typer.Option(False, "--force", "-f", help="跳过确认"),
        corpid: Optional[str] = CORPID_OPTION,
        corpsecret: Optional[str] = CORPSECRET_OPTION,
        token: Optional[str] = TOKEN_OPTION,
        debug: bool = DEBUG_OPTION,
):
    """删除成员"""
    if not force and not typer.confirm(f"确定要删除成员 {userid} 吗？"):
        console.print("已取消")
        raise typer.Abort()

    api = build_api(corpid, corpsecret, token=token, debug=debug)
    print_result(run_api(api, lambda a: a.delete_user(userid)))


def user_batch_delete(
        userids: List[str] = typer.Argument(..., help="成员 UserID 列表"),
        force: bool = typer.Option(False, "--force", "-f", help="跳过确认"),
        corpid: Optional[str] = CORPID_OPTION,
        corpsecret: Optional[str] = CORPSECRET_OPTION,
        token: Optional[str] = TOKEN_OPTION,
        debug: bool = DEBUG_OPTION,
):
    """批量删除成员"""
    if not force and not typer.confirm(f"确定要删除 {len(userids)} 个成员吗？"):
        console.print("已取消")
        raise typer.Abort()

    api = build_api(corpid, corpsecret, token=token, debug=debug)
    print_result(run_api(api, lambda a: a.batch_delete_users(userids)))


def user_list(
        department_id: int = typer.Argument(..., help="部门 ID"),
        fetch_child: bool = typer.Option(False, "--fetch-child", "-r", help="递归获取子部门成员"),
        detail: bool = typer.Option(False, "--detail", "-d", help="获取成员详情"),
        corpid: Optional[str] = CORPID_OPTION,
        corpsecret: Optional[str] = CORPSECRET_OPTION,
        token: Optional[str] = TOKEN_OPTION,
        debug: bool = DEBUG_OPTION,
):
    """获取部门成员"""
    api = build_api(corpid, corpsecret, token=token, debug=debug)
    flag = 1 if fetch_child else 0
    if detail:
        result = run_api(api, lambda a: a.get_department_users_detail(department_id, flag))
    else:
        result = run_api(api, lambda a: a.get_department_users(department_id, flag))
    print_result(result)


def user_invite(
        user: Optional[List[str]] = typer.Option(None, "--user", "-u", help="成员 UserID，可重复"),
        party: Optional[List[int]] = typer.Option(None, "--party", "-p", help="部门 ID，可重复"),
        tag: Optional[List[int]] = typer.Option(None, "--tag", help="标签 ID，可重复"),
        corpid: Optional[str] = CORPID_OPTION,
        corpsecret: Optional[str] = CORPSECRET_OPTION,
        token: Optional[str] = TOKEN_OPTION,
        debug: bool = DEBUG_OPTION,
):
    """邀请成员使用企业微信（user / party / tag 至少一项）"""
    if not user and not party and not tag:
        console.print("[red]❌ --user / --party / --tag 不能同时为空[/red]")
        raise typer.Exit(1)

    api = build_api(corpid, corpsecret, token=token, debug=debug)
    print_result(run_api(api, lambda a: a.invite_user(user or None, party or None, tag or None)))


def user_id_by_code(
        code: str = typer.Argument(..., help="OAuth 授权得到的 code"),
        corpid: Optional[str] = CORPID_OPTION,
        corpsecret: Optional[str] = CORPSECRET_OPTION,
        agentid: Optional[str] = AGENTID_OPTION,
        token: Optional[str] = TOKEN_OPTION,
        debug: bool = DEBUG_OPTION,
):
    """根据 code 获取成员 UserId"""
    api = build_api(corpid, corpsecret, agentid, token=token, debug=debug)
    print_result(run_api(api, lambda a: a.get_user_id_by_code(code)))
