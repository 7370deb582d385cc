#!filepath: timeconv/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .timezone_config import TimezoneConfig
from timeconv.utils.logger import logs

TIMEZONE_ENV = "TIMECONV_TIMEZONE"


def package_root() -> str:
    """
    timeconv/config/app_config.py → timeconv/config → timeconv
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    timezone: TimezoneConfig = Field(default_factory=TimezoneConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        加载 YAML 配置 + .env
        - 默认使用 timeconv/config/base.yml
        - 环境变量 TIMECONV_TIMEZONE 覆盖 timezone.key
        """
        # 1) 先加载 .env（当前工作目录）
        load_dotenv()

        # 2) 决定配置文件路径
        if path is None:
            path = os.path.join(package_root(), "config/base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) 读取 YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) 从 env 注入时区
        tz_key = os.getenv(TIMEZONE_ENV)
        if tz_key:
            raw["timezone"] = {**(raw.get("timezone") or {}), "key": tz_key}

        cfg = cls(**raw)
        logs.debug(f"[config] loaded {path}, timezone={cfg.timezone.key or '<ambient>'}")
        return cfg
