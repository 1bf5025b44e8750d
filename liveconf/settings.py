"""
스토어 설정

갱신 주기와 로깅 토글을 인스턴스별 설정으로 관리합니다.
환경변수 기반 로드 지원.
"""

import logging
import os
from dataclasses import dataclass

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_REFRESH_INTERVAL = 1.0  # 초
DEFAULT_LOG_UPDATES = True

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"잘못된 {name} 값: {raw!r}")


@dataclass
class StoreSettings:
    """스토어 설정

    refresh_interval은 루프가 매 대기 직전에 읽으므로,
    실행 중 변경하면 다음 대기부터 반영됩니다.
    """

    refresh_interval: float = DEFAULT_REFRESH_INTERVAL
    log_updates: bool = DEFAULT_LOG_UPDATES

    @classmethod
    def from_env(cls) -> "StoreSettings":
        """환경변수에서 설정 로드

        환경변수:
            - LIVECONF_REFRESH_INTERVAL: 갱신 주기 (초, 기본 1.0)
            - LIVECONF_LOG_UPDATES: 변경 로깅 여부 (기본 true)

        Raises:
            ConfigurationError: 값 형식이 잘못된 경우
        """
        interval_str = os.getenv("LIVECONF_REFRESH_INTERVAL", "")
        log_str = os.getenv("LIVECONF_LOG_UPDATES", "")

        try:
            interval = float(interval_str) if interval_str else DEFAULT_REFRESH_INTERVAL
        except ValueError:
            raise ConfigurationError(
                f"잘못된 LIVECONF_REFRESH_INTERVAL 값: {interval_str!r}"
            ) from None

        return cls(
            refresh_interval=interval,
            log_updates=(
                _parse_bool("LIVECONF_LOG_UPDATES", log_str)
                if log_str
                else DEFAULT_LOG_UPDATES
            ),
        )

    def validate(self, strict: bool = True) -> list[str]:
        """설정값 검증

        Args:
            strict: True면 오류 시 예외 발생, False면 로그만

        Returns:
            list[str]: 검증 경고/오류 메시지 목록

        Raises:
            ConfigurationError: strict=True이고 오류가 있을 때
        """
        errors = []
        warnings = []

        if self.refresh_interval <= 0:
            errors.append(f"갱신 주기는 0보다 커야 함: {self.refresh_interval}초")
        elif self.refresh_interval < 0.05:
            warnings.append(f"갱신 주기가 너무 짧음: {self.refresh_interval}초")
        elif self.refresh_interval > 3600:
            warnings.append(f"갱신 주기가 너무 김: {self.refresh_interval}초")

        for warning in warnings:
            logger.warning(f"[StoreSettings] {warning}")

        if errors:
            for error in errors:
                logger.error(f"[StoreSettings] {error}")
            if strict:
                raise ConfigurationError(
                    f"설정 검증 실패: {len(errors)}개 오류\n" + "\n".join(errors)
                )

        return errors + warnings

    @classmethod
    def from_env_validated(cls, strict: bool = True) -> "StoreSettings":
        """환경변수에서 설정 로드 및 검증"""
        settings = cls.from_env()
        settings.validate(strict=strict)
        return settings
