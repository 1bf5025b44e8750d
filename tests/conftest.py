"""
Pytest 설정 및 공통 Fixture
"""

import threading
from pathlib import Path
from typing import Iterator

import pytest

from liveconf import ConfigStore, StoreSettings
from tests.config_files import BASE_MTIME_NS, write_config


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """a=1, b=2 설정 파일"""
    return write_config(tmp_path / "app.conf", "a=1\nb=2\n", BASE_MTIME_NS)


@pytest.fixture
def done() -> Iterator[threading.Event]:
    """종료 신호 (테스트 종료 시 set)"""
    event = threading.Event()
    yield event
    event.set()


@pytest.fixture
def quiet_settings() -> StoreSettings:
    """타이머 틱이 테스트에 끼어들지 않도록 긴 주기 사용"""
    return StoreSettings(refresh_interval=3600, log_updates=True)


@pytest.fixture
def store(config_file: Path, quiet_settings: StoreSettings, done: threading.Event) -> ConfigStore:
    """config_file을 바라보는 테스트용 ConfigStore"""
    return ConfigStore(config_file, settings=quiet_settings, done=done)
