#!filepath: timeconv/config/timezone_config.py
from typing import Literal, Optional

from pydantic import BaseModel

from timeconv.core.zone import ZoneInfoProvider


class TimezoneConfig(BaseModel):
    """
    key:       IANA 时区名（如 "Asia/Shanghai"）；为空时使用宿主环境本地时区
    ambiguous: DST 空档/重叠的消歧策略
    """
    key: Optional[str] = None
    ambiguous: Literal["standard", "daylight"] = "standard"

    def provider(self) -> ZoneInfoProvider:
        return ZoneInfoProvider(self.key, ambiguous=self.ambiguous)
