#!filepath: tests/base_test/test_logger.py
import subprocess
import sys

from loguru import logger

from timeconv.config import LogConfig
from timeconv.utils import logger as logger_module
from timeconv.utils.logger import Logging, init_logging


def test_logging_creates_log_dir(tmp_path):
    log_dir = tmp_path / "logs"
    logs = Logging(log_dir=str(log_dir), log_level="DEBUG")

    assert log_dir.is_dir()
    assert logs.level == "DEBUG"
    logger.remove()  # 释放 enqueue 的文件 sink


def test_logging_defaults_to_stderr_only(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    logs = Logging()

    assert logs.log_dir is None
    assert not (tmp_path / "logs").exists()


def test_init_logging_replaces_shared_instance():
    logs = init_logging(LogConfig(level="DEBUG"))

    assert logger_module.logs is logs
    assert logs.level == "DEBUG"


def test_logging_methods_reach_loguru():
    messages = []
    logs = Logging(log_level="DEBUG")
    logger.add(messages.append, level="DEBUG")

    logs.debug("d")
    logs.info("i")
    logs.warning("w")
    logs.error("e")

    assert len(messages) == 4


_HOST_SCRIPT = """
from loguru import logger

seen = []
logger.add(seen.append)

import timeconv
from timeconv import FixedOffsetProvider, Local, TimeConverter
from datetime import timedelta

logger.error("host message")
try:
    TimeConverter(FixedOffsetProvider(timedelta(0))).utc_time_to_unix_timestamp(Local(0))
except timeconv.UnsupportedKindError:
    pass

print(sum("host message" in m for m in seen), sum("[timeconv]" in m for m in seen))
"""


def test_import_keeps_host_sinks():
    """宿主程序先注册的 sink，import timeconv 之后仍然收到消息；库自身日志默认静默"""
    out = subprocess.run(
        [sys.executable, "-c", _HOST_SCRIPT],
        capture_output=True,
        text=True,
        check=True,
    )
    host_count, lib_count = out.stdout.split()

    assert host_count == "1"
    assert lib_count == "0"


def test_default_logs_does_not_touch_sinks():
    messages = []
    logger.add(messages.append, level="DEBUG")

    Logging(install=False)
    logger.info("still here")

    assert len(messages) == 1
