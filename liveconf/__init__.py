"""
liveconf 자동 갱신 설정 저장소

key=value 텍스트 파일을 메모리에 올려두고 수정 시각 기반으로 자동 재로드합니다.
"""

from .errors import (
    ConfigurationError,
    EmptyLineError,
    ErrorKind,
    FileUnavailableError,
    LiveConfigError,
    MissingDelimiterError,
    ParseError,
)
from .parser import DELIMITERS, split_line
from .refresher import ConfigRefresher
from .rwlock import ReadWriteLock
from .settings import DEFAULT_LOG_UPDATES, DEFAULT_REFRESH_INTERVAL, StoreSettings
from .store import ConfigStore, ReconcileStatus

__version__ = "1.0.0"

__all__ = [
    # Store
    "ConfigStore",
    "ReconcileStatus",
    "ConfigRefresher",
    "ReadWriteLock",
    # Parser
    "DELIMITERS",
    "split_line",
    # Settings
    "DEFAULT_LOG_UPDATES",
    "DEFAULT_REFRESH_INTERVAL",
    "StoreSettings",
    # Errors
    "ConfigurationError",
    "EmptyLineError",
    "ErrorKind",
    "FileUnavailableError",
    "LiveConfigError",
    "MissingDelimiterError",
    "ParseError",
]
