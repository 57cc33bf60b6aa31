# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：ip.py
# @Date   ：2026/10/13 15:02
# @Author ：leemysw
# 2026/10/13 15:02   Create
# =====================================================
"""
[INPUT]: 依赖 base.py
[OUTPUT]: 对外提供 IpAPI
[POS]: SDK 企业微信服务器 IP 相关 API
[PROTOCOL]: 变更时更新此头部
"""

from .base import SubModule


class IpAPI(SubModule):
    """服务器 IP API"""

    async def get_callback_ip(self) -> dict:
        """
        获取企业微信回调服务器的 IP 段

        文档: https://developer.work.weixin.qq.com/document/path/90930

        Result:
            {"ip_list": ["127.0.0.1", "127.0.0.1"]}
        """
        return await self._request("getcallbackip")
