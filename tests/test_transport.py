"""Tests for the httpx-backed transport."""

import json

import httpx
import pytest

from wecom_api.core.sdk import WeComAPI
from wecom_api.core.transport import HttpxTransport, RequestOptions, post_json

from .conftest import PREFIX, TOKEN


def make_transport(handler) -> HttpxTransport:
    return HttpxTransport(client=httpx.AsyncClient(transport=httpx.MockTransport(handler)))


async def test_get_merges_params_into_url():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"errcode": 0, "userid": "zhangsan"})

    transport = make_transport(handler)
    result = await transport(PREFIX + "user/get?access_token=" + TOKEN, RequestOptions(params={"userid": "zhangsan"}))

    assert result == {"errcode": 0, "userid": "zhangsan"}
    request = seen[0]
    assert request.method == "GET"
    assert request.url.params["access_token"] == TOKEN
    assert request.url.params["userid"] == "zhangsan"


async def test_post_json_body_round_trips():
    seen = []
    user = {"userid": "zhangsan", "name": "张三", "department": [1, 2]}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"errcode": 0, "errmsg": "created"})

    await make_transport(handler)(PREFIX + "user/create?access_token=" + TOKEN, post_json(user))

    request = seen[0]
    assert request.method == "POST"
    assert request.headers["content-type"].startswith("application/json")
    assert json.loads(request.content) == user


async def test_none_params_are_dropped():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    await make_transport(handler)(PREFIX + "user/getuserinfo", RequestOptions(params={"code": "C", "agentid": None}))

    assert "agentid" not in seen[0].url.params
    assert seen[0].url.params["code"] == "C"


async def test_http_error_raises():
    transport = make_transport(lambda request: httpx.Response(502, text="bad gateway"))

    with pytest.raises(httpx.HTTPStatusError):
        await transport(PREFIX + "getcallbackip")


async def test_sdk_over_httpx_transport(config, token_provider):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"errcode": 0, "errmsg": "deleted"})

    api = WeComAPI(config, token_provider, make_transport(handler))
    await api.batch_delete_users(["zhangsan", "lisi"])

    request = seen[0]
    assert str(request.url) == PREFIX + "user/batchdelete?access_token=" + TOKEN
    assert json.loads(request.content) == {"useridlist": ["zhangsan", "lisi"]}


async def test_sdk_query_operation_keeps_access_token(config, token_provider):
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"errcode": 0, "userid": "zhangsan"})

    api = WeComAPI(config, token_provider, make_transport(handler))
    await api.get_user("zhangsan")
    await api.get_user_id_by_code("AUTH_CODE")

    get_user, by_code = seen
    assert get_user.url.path == "/cgi-bin/user/get"
    assert get_user.url.params["access_token"] == TOKEN
    assert get_user.url.params["userid"] == "zhangsan"
    assert by_code.url.params["access_token"] == TOKEN
    assert by_code.url.params["code"] == "AUTH_CODE"
    assert by_code.url.params["agentid"] == "1000002"
