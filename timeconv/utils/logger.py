#!filepath: timeconv/utils/logger.py
import os
import sys
from typing import Optional

from loguru import logger


class Logging:
    """
    日志模块（loguru 封装）
    ---------------------------------------
    - import 时不配置任何 sink，"timeconv" 默认被 disable
    - 显式构造 / init_logging 后接管 loguru：默认只输出到 stderr
    - 指定 log_dir 时按日期切割写文件
    - 支持日志保留周期
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
        install: bool = True,
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        # install=False：只做转发，不碰宿主程序的 sink
        if not install:
            return

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
        self._configure()

    def _configure(self) -> None:
        logger.enable("timeconv")
        logger.remove()

        if self.log_dir:
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
                enqueue=True,  # 多进程安全
                backtrace=True,
                diagnose=True,
            )
        else:
            logger.add(
                sys.stderr,
                level=self.level,
                format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            )

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)


def init_logging(cfg) -> Logging:
    """
    按 LogConfig 重新配置全局 logs。
    cfg.dir 为空字符串 / None 时只输出到 stderr。
    """
    global logs
    logs = Logging(
        log_dir=cfg.dir or None,
        rotation=cfg.rotation,
        retention=cfg.retention,
        log_level=cfg.level,
    )
    # 已经 import 过 logs 的模块仍持有旧实例；Logging 只是 loguru 的薄封装，旧实例同样生效
    return logs


# 库默认静默：import 时不增删 sink，由宿主程序 logger.enable("timeconv") 或 init_logging 打开
logger.disable("timeconv")

# 默认全局 logs（可被 init_logging 替换）
logs = Logging(install=False)
