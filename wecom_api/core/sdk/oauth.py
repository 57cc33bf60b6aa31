# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：oauth.py
# @Date   ：2026/10/13 16:10
# @Author ：leemysw
# 2026/10/13 16:10   Create
# =====================================================
"""
[INPUT]: 依赖 base.py
[OUTPUT]: 对外提供 OAuthAPI, build_authorize_url, AUTHORIZE_URL
[POS]: SDK 网页授权相关，仅拼接 URL，不发起请求
[PROTOCOL]: 变更时更新此头部
"""

from urllib.parse import quote, urlencode

from .base import SubModule

AUTHORIZE_URL = "https://open.weixin.qq.com/connect/oauth2/authorize"

# 与 querystring.stringify 一致，这些字符不转义
QUERY_SAFE = "!'()*"


def build_authorize_url(appid: str, redirect: str, state: str = "", scope: str = "snsapi_base") -> str:
    """
    拼接授权页面的 URL 地址

    Args:
        appid: 企业 ID
        redirect: 授权后要跳转的地址
        state: 开发者可提供的数据
        scope: 作用范围，snsapi_base（静默授权）或 snsapi_userinfo / snsapi_privateinfo
    """
    params = {
        "appid": appid,
        "redirect_uri": redirect,
        "response_type": "code",
        "scope": scope or "snsapi_base",
        "state": state or "",
    }
    return f"{AUTHORIZE_URL}?{urlencode(params, quote_via=quote, safe=QUERY_SAFE)}#wechat_redirect"


class OAuthAPI(SubModule):
    """网页授权"""

    def get_authorize_url(self, redirect: str, state: str = "", scope: str = "snsapi_base") -> str:
        """获取授权页面的 URL 地址，appid 取自配置中的 corpid"""
        return build_authorize_url(self.config.corpid, redirect, state, scope)
