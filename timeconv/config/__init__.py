from .app_config import AppConfig
from .log_config import LogConfig
from .timezone_config import TimezoneConfig

__all__ = ["AppConfig", "LogConfig", "TimezoneConfig"]
