"""
StoreSettings 테스트

기본값, 환경변수 로드, 검증 테스트.
"""

import pytest

from liveconf import (
    DEFAULT_LOG_UPDATES,
    DEFAULT_REFRESH_INTERVAL,
    ConfigurationError,
    StoreSettings,
)


class TestDefaults:
    def test_defaults(self):
        settings = StoreSettings()

        assert settings.refresh_interval == DEFAULT_REFRESH_INTERVAL == 1.0
        assert settings.log_updates is DEFAULT_LOG_UPDATES is True

    def test_instances_do_not_share_state(self):
        first = StoreSettings()
        second = StoreSettings()
        first.refresh_interval = 5.0

        assert second.refresh_interval == 1.0


class TestFromEnv:
    """환경변수 로드 테스트"""

    def test_from_env_empty(self, monkeypatch):
        monkeypatch.delenv("LIVECONF_REFRESH_INTERVAL", raising=False)
        monkeypatch.delenv("LIVECONF_LOG_UPDATES", raising=False)

        assert StoreSettings.from_env() == StoreSettings()

    def test_from_env_values(self, monkeypatch):
        monkeypatch.setenv("LIVECONF_REFRESH_INTERVAL", "0.5")
        monkeypatch.setenv("LIVECONF_LOG_UPDATES", "off")

        settings = StoreSettings.from_env()

        assert settings.refresh_interval == 0.5
        assert settings.log_updates is False

    @pytest.mark.parametrize("raw", ["1", "true", "YES", "On"])
    def test_from_env_truthy(self, monkeypatch, raw: str):
        monkeypatch.setenv("LIVECONF_LOG_UPDATES", raw)

        assert StoreSettings.from_env().log_updates is True

    def test_from_env_invalid_interval(self, monkeypatch):
        monkeypatch.setenv("LIVECONF_REFRESH_INTERVAL", "soon")

        with pytest.raises(ConfigurationError):
            StoreSettings.from_env()

    def test_from_env_invalid_bool(self, monkeypatch):
        monkeypatch.setenv("LIVECONF_LOG_UPDATES", "maybe")

        with pytest.raises(ConfigurationError):
            StoreSettings.from_env()


class TestValidate:
    """설정값 검증 테스트"""

    def test_valid(self):
        assert StoreSettings().validate() == []

    @pytest.mark.parametrize("interval", [0, -1.0])
    def test_non_positive_interval_strict(self, interval: float):
        with pytest.raises(ConfigurationError):
            StoreSettings(refresh_interval=interval).validate(strict=True)

    def test_non_positive_interval_lenient(self):
        messages = StoreSettings(refresh_interval=0).validate(strict=False)

        assert len(messages) == 1

    def test_warning_only(self):
        messages = StoreSettings(refresh_interval=7200).validate(strict=True)

        assert len(messages) == 1

    def test_from_env_validated(self, monkeypatch):
        monkeypatch.setenv("LIVECONF_REFRESH_INTERVAL", "-2")

        with pytest.raises(ConfigurationError):
            StoreSettings.from_env_validated()
