#!filepath: tests/base_test/test_app_config.py
from datetime import datetime

import pytest
import yaml
from pydantic import ValidationError

from timeconv import TimeConverter, ZoneInfoProvider
from timeconv.config import AppConfig, LogConfig, TimezoneConfig
from timeconv.config.app_config import TIMEZONE_ENV


@pytest.fixture(autouse=True)
def _no_tz_override(monkeypatch):
    monkeypatch.delenv(TIMEZONE_ENV, raising=False)


@pytest.fixture
def sample_config_file(tmp_path):
    """
    创建临时 YAML 配置文件用于测试，
    pytest 会自动清理该目录。
    """
    data = {
        "log": {
            "dir": None,
            "rotation": "1 day",
            "retention": "7 days",
            "level": "DEBUG",
        },
        "timezone": {
            "key": "Asia/Shanghai",
            "ambiguous": "daylight",
        },
    }

    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.safe_dump(data), encoding="utf-8")
    return config_file


def test_app_config_load(sample_config_file):
    """测试 AppConfig 是否能正确加载 YAML"""
    cfg = AppConfig.load(path=str(sample_config_file))

    assert isinstance(cfg, AppConfig)
    assert isinstance(cfg.log, LogConfig)
    assert isinstance(cfg.timezone, TimezoneConfig)


def test_log_config_values(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))
    assert cfg.log.level == "DEBUG"
    assert cfg.log.retention == "7 days"
    assert cfg.log.dir is None


def test_timezone_config_builds_provider(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))
    provider = cfg.timezone.provider()

    assert isinstance(provider, ZoneInfoProvider)
    assert provider.name == "Asia/Shanghai"
    assert provider.ambiguous == "daylight"


def test_converter_from_config(sample_config_file):
    cfg = AppConfig.load(path=str(sample_config_file))
    converter = TimeConverter.from_config(cfg)

    assert converter.unix_timestamp_to_local_time(0).wall == datetime(1970, 1, 1, 8)


def test_default_base_yml():
    cfg = AppConfig.load()
    assert cfg.timezone.key is None
    assert cfg.timezone.ambiguous == "standard"
    assert cfg.log.level == "WARNING"


def test_env_overrides_timezone_key(sample_config_file, monkeypatch):
    monkeypatch.setenv(TIMEZONE_ENV, "Europe/London")
    cfg = AppConfig.load(path=str(sample_config_file))

    assert cfg.timezone.key == "Europe/London"
    # 其余字段保持 YAML 中的值
    assert cfg.timezone.ambiguous == "daylight"


def test_empty_file_uses_defaults(tmp_path):
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")

    cfg = AppConfig.load(path=str(empty))
    assert cfg.timezone == TimezoneConfig()
    assert cfg.log == LogConfig()


def test_missing_file_should_fail(tmp_path):
    with pytest.raises(FileNotFoundError):
        AppConfig.load(path=str(tmp_path / "nope.yaml"))


def test_bad_ambiguous_should_fail(tmp_path):
    """非法的消歧策略，AppConfig 应该抛出 ValidationError"""
    bad_file = tmp_path / "bad.yaml"
    bad_file.write_text(yaml.safe_dump({"timezone": {"ambiguous": "earliest"}}))

    with pytest.raises(ValidationError):
        AppConfig.load(path=str(bad_file))


def test_converter_from_timezone_config():
    converter = TimeConverter.from_config(TimezoneConfig(key="Asia/Tokyo"))
    assert converter.unix_timestamp_to_local_time(0).wall == datetime(1970, 1, 1, 9)
