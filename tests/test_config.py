"""Tests for the local config file and credential resolution."""

import pytest

from wecom_api.cli.common import get_credentials
from wecom_api.utils.config import DEFAULT_PREFIX, ApiConfig, AppConfig, get_config_dir


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    for name in ("WECOM_CORP_ID", "WECOM_CORP_SECRET", "WECOM_AGENT_ID", "WECOM_API_PREFIX"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("WECOM_CONFIG_DIR", str(tmp_path))


def test_config_dir_from_env(tmp_path):
    assert get_config_dir() == tmp_path


def test_save_and_load(tmp_path):
    config = AppConfig.load()
    assert not config.has_credentials()

    config.corpid = "ww_corp"
    config.corpsecret = "secret"
    config.agentid = "1000002"
    config.save()

    loaded = AppConfig.load()
    assert loaded.corpid == "ww_corp"
    assert loaded.corpsecret == "secret"
    assert loaded.has_credentials()
    assert loaded.config_file == tmp_path / "config.json"


def test_corrupt_file_gives_empty_config(tmp_path):
    (tmp_path / "config.json").write_text("{not json")

    assert AppConfig.load().corpid is None


def test_clear_removes_file():
    config = AppConfig(corpid="ww_corp", corpsecret="secret")
    config.save()
    config.clear()

    assert not config.config_file.exists()


def test_to_api_config_defaults_prefix():
    api_config = AppConfig(corpid="ww_corp", agentid="7").to_api_config()

    assert api_config == ApiConfig(corpid="ww_corp", agentid="7", prefix=DEFAULT_PREFIX)


def test_credentials_priority(monkeypatch):
    AppConfig(corpid="from_file", corpsecret="file_secret", agentid="1").save()
    monkeypatch.setenv("WECOM_CORP_ID", "from_env")

    corpid, corpsecret, agentid, prefix = get_credentials(agentid="2")

    assert corpid == "from_env"
    assert corpsecret == "file_secret"
    assert agentid == "2"
    assert prefix == DEFAULT_PREFIX
    assert get_credentials(corpid="from_cli")[0] == "from_cli"


def test_env_prefix_gets_trailing_slash(monkeypatch):
    monkeypatch.setenv("WECOM_API_PREFIX", "http://10.0.0.8/cgi-bin")

    assert get_credentials()[3] == "http://10.0.0.8/cgi-bin/"


def test_file_prefix_gets_trailing_slash():
    AppConfig(corpid="ww_corp", prefix="http://10.0.0.8/cgi-bin").save()

    assert get_credentials()[3] == "http://10.0.0.8/cgi-bin/"
    assert AppConfig.load().to_api_config().prefix == "http://10.0.0.8/cgi-bin/"
