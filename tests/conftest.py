# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from world_collapse.uwp.world import WorldRecord


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture(autouse=True)
def _no_seed_env(monkeypatch):
    monkeypatch.delenv("WORLD_COLLAPSE_SEED", raising=False)


@pytest.fixture
def captured_logs():
    """收集 loguru 输出（字符串列表）"""
    lines: list[str] = []
    sink_id = logger.add(lambda msg: lines.append(str(msg)), level="DEBUG")
    yield lines
    logger.remove(sink_id)


@pytest.fixture
def terra() -> WorldRecord:
    """A766999-E, every facility present"""
    return WorldRecord(
        starport="A",
        size=7,
        atmosphere=6,
        hydrographics=6,
        population=9,
        government=9,
        law=9,
        techlevel=14,
        population_exponent=5,
        naval_base=True,
        scout_base=True,
        way_station=True,
        depot=True,
    )
