"""
읽기/쓰기 락

여러 reader 동시 접근, writer 단독 접근.
대기 중인 writer가 있으면 새 reader는 진입하지 않습니다 (writer 기아 방지).
재진입 불가.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class ReadWriteLock:
    """threading.Condition 기반 RW 락"""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        """공유 접근 컨텍스트"""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        """배타 접근 컨텍스트"""
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
