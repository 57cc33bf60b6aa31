# !/usr/bin/env python
# -*- coding: utf-8 -*-
# =====================================================
# @File   ：config.py
# @Date   ：2026/10/12 10:30
# @Author ：leemysw
# 2026/10/12 10:30   Create
# 2026/10/14 16:05   Add ApiConfig
# =====================================================
"""
[INPUT]: 依赖 json, pathlib
[OUTPUT]: 对外提供 ApiConfig, AppConfig, get_config_dir, normalize_prefix, DEFAULT_PREFIX
[POS]: 配置层，ApiConfig 注入 SDK，AppConfig 负责 CLI 的本地持久化
[PROTOCOL]: 变更时更新此头部
"""

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_PREFIX = "https://qyapi.weixin.qq.com/cgi-bin/"


def normalize_prefix(prefix: str) -> str:
    """API 前缀统一以 / 结尾"""
    return prefix if prefix.endswith("/") else prefix + "/"


def get_config_dir() -> Path:
    """配置目录（可通过 WECOM_CONFIG_DIR 覆盖）"""
    env_dir = os.getenv("WECOM_CONFIG_DIR")
    if env_dir:
        return Path(env_dir)
    return Path.home() / ".wecom-api"


# ==============================================================================
# SDK 配置
# ==============================================================================
@dataclass(frozen=True)
class ApiConfig:
    """
    SDK 运行配置，构造时注入

    Attributes:
        corpid: 企业 ID，同时作为 OAuth 授权链接中的 appid
        agentid: 应用 ID，根据 code 获取成员信息时使用
        prefix: API 前缀，以 / 结尾
    """
    corpid: str = ""
    agentid: Optional[str] = None
    prefix: str = DEFAULT_PREFIX


# ==============================================================================
# 本地持久化配置
# ==============================================================================
@dataclass
class AppConfig:
    """CLI 使用的本地配置文件"""
    corpid: Optional[str] = None
    corpsecret: Optional[str] = None
    agentid: Optional[str] = None
    prefix: Optional[str] = None
    config_dir: Path = field(default_factory=get_config_dir, repr=False)

    @property
    def config_file(self) -> Path:
        return self.config_dir / "config.json"

    @classmethod
    def load(cls, config_dir: Optional[Path] = None) -> "AppConfig":
        """从配置文件加载，文件不存在或损坏时返回空配置"""
        config = cls(config_dir=config_dir or get_config_dir())
        if not config.config_file.exists():
            return config

        try:
            data = json.loads(config.config_file.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return config

        config.corpid = data.get("corpid")
        config.corpsecret = data.get("corpsecret")
        config.agentid = data.get("agentid")
        config.prefix = data.get("prefix")
        return config

    def save(self):
        self.config_dir.mkdir(parents=True, exist_ok=True)
        data = asdict(self)
        data.pop("config_dir")
        self.config_file.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")

    def clear(self):
        if self.config_file.exists():
            self.config_file.unlink()

    def has_credentials(self) -> bool:
        return bool(self.corpid and self.corpsecret)

    def to_api_config(self) -> ApiConfig:
        return ApiConfig(
            corpid=self.corpid or "",
            agentid=self.agentid,
            prefix=normalize_prefix(self.prefix or DEFAULT_PREFIX),
        )
