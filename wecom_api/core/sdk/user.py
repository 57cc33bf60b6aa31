# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：user.py
# @Date   ：2026/10/13 15:20
# @Author ：leemysw
# 2026/10/13 15:20   Create
# 2026/10/15 11:05   Split delete_user / batch_delete_users
# =====================================================
"""
[INPUT]: 依赖 base.py, core.transport
[OUTPUT]: 对外提供 UserAPI
[POS]: SDK 通讯录成员相关 API
[PROTOCOL]: 变更时更新此头部

成员信息、返回结构均由企业微信定义，此处原样透传，不做校验和转换。
"""

from typing import Any, Dict, List, Optional, Union

from wecom_api.core.transport import RequestOptions, post_json
from .base import SubModule

DepartmentId = Union[int, str]


class UserAPI(SubModule):
    """通讯录成员 API"""

    async def create_user(self, user: Dict[str, Any]) -> dict:
        """
        创建成员

        文档: https://developer.work.weixin.qq.com/document/path/90195

        Args:
            user: 成员信息，如
                {"userid": "zhangsan", "name": "张三", "department": [1, 2], "mobile": "15913215421"}

        Result:
            {"errcode": 0, "errmsg": "created"}
        """
        return await self._request("user/create", post_json(user))

    async def update_user(self, user: Dict[str, Any]) -> dict:
        """更新成员，user 中必须包含 userid"""
        return await self._request("user/update", post_json(user))

    async def delete_user(self, userid: str) -> dict:
        """删除单个成员"""
        return await self._request("user/delete", RequestOptions(params={"userid": userid}))

    async def batch_delete_users(self, userids: List[str]) -> dict:
        """
        批量删除成员

        Args:
            userids: 待删除的成员 userid 列表
        """
        return await self._request("user/batchdelete", post_json({"useridlist": userids}))

    # 早期版本的名字
    delete_users = batch_delete_users

    async def get_user(self, userid: str) -> dict:
        """读取成员详情"""
        return await self._request("user/get", RequestOptions(params={"userid": userid}))

    async def get_department_users(self, department_id: DepartmentId, fetch_child: int = 0) -> dict:
        """
        获取部门成员（userid + name）

        Args:
            department_id: 部门 ID
            fetch_child: 1/0，是否递归获取子部门下面的成员
        """
        options = RequestOptions(params={
            "department_id": department_id,
            "fetch_child": fetch_child,
        })
        return await self._request("user/simplelist", options)

    async def get_department_users_detail(self, department_id: DepartmentId, fetch_child: int = 0) -> dict:
        """获取部门成员详情"""
        options = RequestOptions(params={
            "department_id": department_id,
            "fetch_child": fetch_child,
        })
        return await self._request("user/list", options)

    async def invite_user(
            self,
            user: Optional[List[str]] = None,
            party: Optional[List[DepartmentId]] = None,
            tag: Optional[List[DepartmentId]] = None,
    ) -> dict:
        """
        邀请成员使用企业微信

        user, party, tag 三者不能同时为空，由服务端校验。

        Result:
            {"errcode": 0, "errmsg": "ok", "invaliduser": [...], "invalidparty": [...], "invalidtag": [...]}
        """
        return await self._request("batch/invite", post_json({
            "user": user,
            "party": party,
            "tag": tag,
        }))

    async def get_user_id_by_code(self, code: str) -> dict:
        """
        根据 OAuth 授权得到的 code 获取成员 UserId

        Result:
            {"UserId": "USERID"}
        """
        options = RequestOptions(params={
            "code": code,
            "agentid": self.config.agentid,
        })
        return await self._request("user/getuserinfo", options)
