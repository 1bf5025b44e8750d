"""
백그라운드 갱신 루프

고정 주기마다 스토어의 update()를 호출합니다.
종료 신호(done 이벤트)가 set 되면 대기 중이라도 즉시 깨어나 종료합니다.
백오프/지터 없음: 실패한 reconcile은 다음 정규 틱을 기다립니다.
"""

import logging
import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .store import ConfigStore


class ConfigRefresher:
    """스토어당 1개의 갱신 스레드"""

    def __init__(
        self,
        store: "ConfigStore",
        done: threading.Event,
        logger: logging.Logger | None = None,
    ):
        """
        Args:
            store: 갱신 대상 ConfigStore
            done: 종료 신호
            logger: 루프 에러를 기록할 로거
        """
        self.store = store
        self.done = done
        self._log = logger if logger is not None else logging.getLogger(__name__)
        self._thread = threading.Thread(
            target=self._run,
            name=f"liveconf-refresher-{id(store):x}",
            daemon=True,
        )

    def start(self) -> None:
        self._thread.start()

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def join(self, timeout: float | None = None) -> None:
        self._thread.join(timeout)

    def _run(self) -> None:
        while not self.done.is_set():
            # 주기는 매 대기 직전에 읽음 (진행 중인 대기에는 영향 없음)
            if self.done.wait(self.store.settings.refresh_interval):
                break

            try:
                self.store.update()
            except Exception as e:
                self._log.error(f"[ConfigRefresher] 갱신 루프 에러: {e}", exc_info=True)

        self._log.debug("[ConfigRefresher] 갱신 루프 종료")
