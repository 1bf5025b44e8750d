"""
자동 갱신 키-값 설정 저장소

텍스트 파일의 key=value (또는 key:value) 라인을 메모리에 올려두고,
파일 수정 시각이 바뀌면 다시 읽어 반영합니다.

설계 원칙:
- 파라미터 변경은 배타 락 안에서만 수행
- 조회는 공유 락으로 동시 실행
- 한 번의 reconcile은 전체 스캔 동안 락을 유지 (reader는 중간 상태를 보지 않음)
- 파일/파싱 실패는 내부에서 흡수, get/set은 실패하지 않음

사용법:
    ```python
    store = ConfigStore("app.conf")

    host = store.get("host")
    host, port = store.get_slice(["host", "port"])

    # 종료 시
    store.close()
    ```
"""

import logging
import os
import threading
from enum import Enum
from typing import Iterable

from .errors import EmptyLineError, FileUnavailableError, ParseError
from .parser import split_line
from .refresher import ConfigRefresher
from .rwlock import ReadWriteLock
from .settings import StoreSettings


class ReconcileStatus(str, Enum):
    """reconcile 1회 결과"""

    APPLIED = "applied"  # 파일을 다시 스캔함
    UNCHANGED = "unchanged"  # 수정 시각 변화 없음
    MISSING = "missing"  # 파일 없음 (로그 없음)
    UNAVAILABLE = "unavailable"  # stat/open/read 실패 (다음 틱에 재시도)


class ConfigStore:
    """자동 갱신 설정 저장소

    생성 시 한 번 동기적으로 파일을 읽은 뒤 백그라운드 갱신 스레드를 시작합니다.
    done 이벤트가 set 되면 스레드가 종료됩니다.
    """

    def __init__(
        self,
        filename: str | os.PathLike,
        log_updates: bool | None = None,
        *,
        settings: StoreSettings | None = None,
        done: threading.Event | None = None,
        logger: logging.Logger | None = None,
    ):
        """
        Args:
            filename: 소스 설정 파일 경로
            log_updates: 변경 로깅 여부. None이면 settings.log_updates 사용.
            settings: 스토어 설정. None이면 기본값.
            done: 종료 신호. None이면 내부 이벤트 생성 (close()로 종료).
            logger: 변경 이벤트를 받을 로거

        Raises:
            ConfigurationError: 갱신 주기가 0 이하인 경우
        """
        self.settings = settings or StoreSettings()
        self.settings.validate(strict=True)
        self._log = logger if logger is not None else logging.getLogger(__name__)
        self._log_updates = (
            self.settings.log_updates if log_updates is None else log_updates
        )

        self._lock = ReadWriteLock()
        self._filename = os.fspath(filename)
        self._last_applied_ns = 0
        self._parameters: dict[str, str] = {}

        self._owns_done = done is None
        self._done = done if done is not None else threading.Event()

        # 첫 조회가 타이머 주기에 의존하지 않도록 동기 로드
        self.update()

        self._refresher = ConfigRefresher(self, self._done, logger=self._log)
        self._refresher.start()

    # ------------------------------------------------------------------
    # 조회 (공유 락)
    # ------------------------------------------------------------------

    def get(self, key: str) -> str:
        """키 조회. 없으면 빈 문자열."""
        with self._lock.read_locked():
            return self._parameters.get(key, "")

    def lookup(self, key: str) -> tuple[str, bool]:
        """키 조회 + 존재 여부 (같은 락 구간에서 읽음)"""
        with self._lock.read_locked():
            return self._parameters.get(key, ""), key in self._parameters

    def get_slice(self, keys: Iterable[str]) -> list[str]:
        """여러 키를 한 번에 조회

        같은 reconcile 결과에서 읽은 값만 반환됩니다.

        Args:
            keys: 조회할 키 목록

        Returns:
            입력 순서대로의 값 목록 (없는 키는 빈 문자열)
        """
        with self._lock.read_locked():
            return [self._parameters.get(key, "") for key in keys]

    def snapshot(self) -> dict[str, str]:
        """전체 파라미터 복사본"""
        with self._lock.read_locked():
            return dict(self._parameters)

    @property
    def filename(self) -> str:
        with self._lock.read_locked():
            return self._filename

    @property
    def last_applied_ns(self) -> int:
        """마지막으로 반영한 파일 수정 시각 (ns, 0이면 미반영)"""
        with self._lock.read_locked():
            return self._last_applied_ns

    @property
    def log_updates(self) -> bool:
        return self._log_updates

    @log_updates.setter
    def log_updates(self, value: bool) -> None:
        self._log_updates = bool(value)

    @property
    def running(self) -> bool:
        """백그라운드 갱신 스레드 실행 여부"""
        return self._refresher.is_alive()

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._parameters)

    def __contains__(self, key: object) -> bool:
        with self._lock.read_locked():
            return key in self._parameters

    # ------------------------------------------------------------------
    # 변경 (배타 락)
    # ------------------------------------------------------------------

    def set(self, key: str, value: str) -> None:
        """키 값 저장 (메모리 전용, 파일에 기록하지 않음)

        같은 값이면 아무 동작도 하지 않습니다.
        """
        with self._lock.write_locked():
            self._apply(key, value, source="set")

    def set_filename(self, filename: str | os.PathLike) -> None:
        """소스 파일 경로 변경 후 즉시 reconcile

        경로가 바뀌면 마지막 반영 시각을 초기화하여 전체 재로드를 강제합니다.
        기존 키는 지우지 않습니다 (새 파일의 키만 덮어씀).
        """
        filename = os.fspath(filename)
        with self._lock.write_locked():
            if self._filename != filename:
                self._log.debug(
                    f"[ConfigStore] 소스 파일 변경: {self._filename} → {filename}"
                )
                self._filename = filename
                self._last_applied_ns = 0
            self._reconcile()

    def update(self) -> ReconcileStatus:
        """즉시 reconcile 1회 실행 (타이머와 무관한 수동 갱신)"""
        with self._lock.write_locked():
            return self._reconcile()

    def close(self) -> None:
        """내부 종료 이벤트를 set 하여 갱신 스레드 종료

        외부에서 done 이벤트를 주입한 경우 해당 이벤트의 소유자가 종료를 담당합니다.
        """
        if self._owns_done:
            self._done.set()

    # ------------------------------------------------------------------
    # 내부 (호출자가 배타 락 보유)
    # ------------------------------------------------------------------

    def _apply(self, key: str, value: str, source: str) -> bool:
        if key in self._parameters:
            stored = self._parameters[key]
            if stored == value:
                return False
            if self._log_updates:
                self._log.info(
                    f"[ConfigStore] {source}: 키 '{key}' 값 변경 '{stored}' → '{value}'"
                )
        elif self._log_updates:
            self._log.info(f"[ConfigStore] {source}: 키 '{key}' 추가, 값 '{value}'")

        self._parameters[key] = value
        return True

    def _stat_source(self) -> os.stat_result:
        try:
            return os.stat(self._filename)
        except OSError as e:
            raise FileUnavailableError(self._filename, e) from e

    def _reconcile(self) -> ReconcileStatus:
        """수정 시각이 바뀐 경우에만 파일을 다시 스캔"""
        try:
            stat = self._stat_source()
        except FileUnavailableError as e:
            if e.missing:
                return ReconcileStatus.MISSING
            self._log.error(f"[ConfigStore] 파일 stat 실패: {e}")
            return ReconcileStatus.UNAVAILABLE

        if stat.st_mtime_ns <= self._last_applied_ns:
            return ReconcileStatus.UNCHANGED

        changed = 0
        try:
            # '\n' 으로만 라인 분리 (단독 '\r' 은 값의 일부)
            with open(
                self._filename, encoding="utf-8", errors="replace", newline="\n"
            ) as f:
                for line in f:
                    try:
                        key, value = split_line(line)
                    except EmptyLineError:
                        continue
                    except ParseError as e:
                        if self._log_updates:
                            self._log.warning(
                                f"[ConfigStore] 라인 파싱 실패: {line.strip()!r} - {e}"
                            )
                        continue

                    if self._apply(key, value, source="update"):
                        changed += 1
        except OSError as e:
            self._log.error(
                f"[ConfigStore] 파일 읽기 실패: {FileUnavailableError(self._filename, e)}"
            )
            return ReconcileStatus.UNAVAILABLE

        self._last_applied_ns = stat.st_mtime_ns
        self._log.debug(
            f"[ConfigStore] 리로드 완료: {self._filename}, 변경 {changed}개"
        )
        return ReconcileStatus.APPLIED
