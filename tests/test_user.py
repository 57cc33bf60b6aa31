"""Tests for the user management operations."""

import pytest

from wecom_api.core.sdk import WeComAPI
from wecom_api.utils.config import ApiConfig

from .conftest import PREFIX, TOKEN, FakeTokenProvider, RecordingTransport

USER = {
    "userid": "zhangsan",
    "name": "张三",
    "department": [1, 2],
    "position": "产品经理",
    "mobile": "15913215421",
    "gender": 1,
    "email": "zhangsan@gzdev.com",
    "extattr": {"attrs": [{"name": "爱好", "value": "旅游"}]},
}

# (operation, path) for every token-gated call
GATED_CALLS = [
    (lambda api: api.get_callback_ip(), "getcallbackip"),
    (lambda api: api.create_user(USER), "user/create"),
    (lambda api: api.update_user(USER), "user/update"),
    (lambda api: api.delete_user("zhangsan"), "user/delete"),
    (lambda api: api.batch_delete_users(["zhangsan", "lisi"]), "user/batchdelete"),
    (lambda api: api.get_user("zhangsan"), "user/get"),
    (lambda api: api.get_department_users(1, 0), "user/simplelist"),
    (lambda api: api.get_department_users_detail(1, 1), "user/list"),
    (lambda api: api.invite_user(["zhangsan"], [1], [2]), "batch/invite"),
    (lambda api: api.get_user_id_by_code("CODE"), "user/getuserinfo"),
]


@pytest.mark.parametrize("call,path", GATED_CALLS)
@pytest.mark.parametrize("prefix,token", [
    (PREFIX, TOKEN),
    ("http://10.0.0.8:8080/cgi-bin/", "x" * 64),
])
async def test_gated_url_is_prefix_path_and_token(call, path, prefix, token):
    transport = RecordingTransport()
    api = WeComAPI(ApiConfig(corpid="ww_corp", prefix=prefix), FakeTokenProvider(token), transport)

    await call(api)

    assert transport.calls[0][0] == prefix + path + "?access_token=" + token


@pytest.mark.parametrize("call,path", GATED_CALLS)
async def test_token_failure_propagates_without_request(call, path, config):
    error = RuntimeError("access_token expired")
    transport = RecordingTransport()
    api = WeComAPI(config, FakeTokenProvider(error=error), transport)

    with pytest.raises(RuntimeError) as exc_info:
        await call(api)

    assert exc_info.value is error
    assert transport.calls == []


async def test_transport_error_propagates(config, token_provider):
    class BrokenTransport:
        async def __call__(self, url, options=None):
            raise ConnectionError("network down")

    api = WeComAPI(config, token_provider, BrokenTransport())

    with pytest.raises(ConnectionError, match="network down"):
        await api.get_user("zhangsan")


async def test_create_and_update_send_user_verbatim(api, transport):
    await api.create_user(USER)
    await api.update_user(USER)

    for _, options in transport.calls:
        assert options.method == "POST"
        assert options.json == USER
        assert options.headers["Content-Type"].startswith("application/json")


async def test_get_user_sends_userid_query(api, transport):
    result = await api.get_user("zhangsan")

    _, options = transport.calls[0]
    assert options.method == "GET"
    assert options.params == {"userid": "zhangsan"}
    assert result == {"errcode": 0, "errmsg": "ok"}


async def test_delete_user_and_batch_delete_are_distinct(api, transport):
    await api.delete_user("lisi")
    await api.batch_delete_users(["zhangsan", "lisi"])

    (single_url, single), (batch_url, batch) = transport.calls
    assert single_url.startswith(PREFIX + "user/delete?")
    assert single.params == {"userid": "lisi"}
    assert batch_url.startswith(PREFIX + "user/batchdelete?")
    assert batch.method == "POST"
    assert batch.json == {"useridlist": ["zhangsan", "lisi"]}


async def test_delete_users_alias_is_batch(api, transport):
    await api.user.delete_users(["wangwu"])

    url, options = transport.calls[0]
    assert url.startswith(PREFIX + "user/batchdelete?")
    assert options.json == {"useridlist": ["wangwu"]}


async def test_department_users_params(api, transport):
    await api.get_department_users(5, 1)
    await api.get_department_users_detail("6")

    assert transport.calls[0][1].params == {"department_id": 5, "fetch_child": 1}
    assert transport.calls[1][1].params == {"department_id": "6", "fetch_child": 0}


async def test_invite_user_body(api, transport):
    await api.invite_user(user=["zhangsan"], tag=[3])

    _, options = transport.calls[0]
    assert options.json == {"user": ["zhangsan"], "party": None, "tag": [3]}


async def test_get_user_id_by_code_uses_configured_agentid(api, transport):
    await api.get_user_id_by_code("AUTH_CODE")

    _, options = transport.calls[0]
    assert options.params == {"code": "AUTH_CODE", "agentid": "1000002"}


async def test_result_is_passed_through(config, token_provider):
    payload = {"errcode": 60111, "errmsg": "userid not found"}
    api = WeComAPI(config, token_provider, RecordingTransport(result=payload))

    assert await api.get_user("nobody") is payload
