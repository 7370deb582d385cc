# tests/conftest.py
from __future__ import annotations

from datetime import timedelta

import pytest
from loguru import logger

from timeconv import FixedOffsetProvider, TimeConverter, ZoneInfoProvider


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    logger.enable("timeconv")
    yield
    logger.disable("timeconv")


@pytest.fixture
def utc_converter() -> TimeConverter:
    return TimeConverter(FixedOffsetProvider(timedelta(0)))


@pytest.fixture
def sh_converter() -> TimeConverter:
    """UTC+8，无 DST"""
    return TimeConverter(FixedOffsetProvider(timedelta(hours=8)))


@pytest.fixture
def ny_converter() -> TimeConverter:
    """America/New_York，带 DST"""
    return TimeConverter(ZoneInfoProvider("America/New_York"))
