#!filepath: tacore/config/core_config.py
from __future__ import annotations

import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ValidationError

from tacore.config.cache_config import CacheConfig
from tacore.config.log_config import LogConfig
from tacore.utils.errors import UserInputError


def default_config_path() -> str:
    """
    随包发布的默认配置:
    tacore/config/core_config.py → tacore/config/base.yml
    """
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "base.yml")


# env 变量 → (section, field)
ENV_OVERRIDES = {
    "TACORE_LOG_LEVEL": ("log", "level"),
    "TACORE_LOG_DIR": ("log", "dir"),
    "TACORE_RECURSION_THRESHOLD": ("cache", "recursion_threshold"),
    "TACORE_MAXIMUM_BAR_COUNT": ("cache", "default_maximum_bar_count"),
}


class CoreConfig(BaseModel):
    log: LogConfig = LogConfig()
    cache: CacheConfig = CacheConfig()

    @classmethod
    def load(cls, path: str | None = None) -> "CoreConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用包内 tacore/config/base.yml
        - .env 从当前工作目录读取（可选）
        - TACORE_* 环境变量覆盖 YAML
        """
        # 1) 先加载 .env
        load_dotenv(os.path.join(os.getcwd(), ".env"))

        # 2) 决定配置文件路径
        if path is None:
            path = default_config_path()

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise UserInputError(f"Config root must be a mapping: {path}")

        # 4) env 覆盖
        for env_key, (section, field) in ENV_OVERRIDES.items():
            value = os.getenv(env_key)
            if value is None or value == "":
                continue
            if not isinstance(raw.get(section), dict):
                raw[section] = {}
            raw[section][field] = value

        try:
            return cls(**raw)
        except ValidationError as e:
            raise UserInputError(f"Invalid config {path}: {e}") from e


_active = CoreConfig()


def get_config() -> CoreConfig:
    return _active


def set_config(config: CoreConfig) -> CoreConfig:
    """
    替换进程级配置，返回旧配置（便于测试恢复）
    """
    global _active
    previous = _active
    _active = config
    return previous
