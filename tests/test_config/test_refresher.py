"""
백그라운드 갱신 루프 테스트

주기적 재로드, 종료 신호 처리, 루프 에러 복구 테스트.
"""

import logging
import threading
import time
from pathlib import Path
from unittest.mock import MagicMock

from liveconf import ConfigRefresher, ConfigStore, ReconcileStatus, StoreSettings
from tests.config_files import BASE_MTIME_NS, SECOND_NS, write_config

TIMEOUT = 3.0


def wait_until(predicate, timeout: float = TIMEOUT) -> bool:
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


class TestBackgroundRefresh:
    """ConfigStore 내장 갱신 스레드 테스트"""

    def test_picks_up_edit(self, config_file: Path, done: threading.Event):
        store = ConfigStore(
            config_file,
            settings=StoreSettings(refresh_interval=0.05),
            done=done,
        )
        assert store.running

        write_config(config_file, "a=2\nb=2\n", BASE_MTIME_NS + SECOND_NS)

        assert wait_until(lambda: store.get("a") == "2")

    def test_stops_on_done(self, store: ConfigStore, done: threading.Event):
        """긴 주기 대기 중에도 종료 신호에 즉시 반응"""
        assert store.running

        done.set()

        assert wait_until(lambda: not store.running)

    def test_close_stops_owned_thread(self, config_file: Path):
        store = ConfigStore(config_file, settings=StoreSettings(refresh_interval=3600))
        assert store.running

        store.close()

        assert wait_until(lambda: not store.running)

    def test_close_does_not_touch_external_signal(self, store: ConfigStore, done: threading.Event):
        store.close()

        assert not done.is_set()
        assert store.running

    def test_interval_change_applies_to_next_wait(self, config_file: Path, done: threading.Event):
        settings = StoreSettings(refresh_interval=0.05)
        store = ConfigStore(config_file, settings=settings, done=done)

        # 진행 중 대기가 끝난 뒤부터 긴 주기 적용
        settings.refresh_interval = 3600
        time.sleep(0.2)
        write_config(config_file, "a=2\n", BASE_MTIME_NS + SECOND_NS)
        time.sleep(0.2)

        assert store.get("a") == "1"
        assert store.update() == ReconcileStatus.APPLIED


class TestConfigRefresher:
    """ConfigRefresher 단독 테스트"""

    def test_calls_update_each_tick(self):
        store = MagicMock()
        store.settings = StoreSettings(refresh_interval=0.01)
        done = threading.Event()

        refresher = ConfigRefresher(store, done)
        refresher.start()
        try:
            assert wait_until(lambda: store.update.call_count >= 3)
        finally:
            done.set()
            refresher.join(TIMEOUT)

        assert not refresher.is_alive()

    def test_does_not_update_when_done_before_first_tick(self):
        store = MagicMock()
        store.settings = StoreSettings(refresh_interval=0.01)
        done = threading.Event()
        done.set()

        refresher = ConfigRefresher(store, done)
        refresher.start()
        refresher.join(TIMEOUT)

        store.update.assert_not_called()

    def test_survives_update_exception(self, caplog):
        """예기치 않은 예외는 로그 후 다음 틱 계속"""
        store = MagicMock()
        store.settings = StoreSettings(refresh_interval=0.01)
        store.update.side_effect = [RuntimeError("boom"), None, None, None, None]
        done = threading.Event()
        caplog.set_level(logging.ERROR, logger="tests.refresher")

        refresher = ConfigRefresher(store, done, logger=logging.getLogger("tests.refresher"))
        refresher.start()
        try:
            assert wait_until(lambda: store.update.call_count >= 3)
        finally:
            done.set()
            refresher.join(TIMEOUT)

        assert any("boom" in r.getMessage() for r in caplog.records)
