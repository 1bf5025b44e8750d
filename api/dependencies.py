"""
FastAPI 의존성 주입 모듈

ConfigStore, Auth, 앱 설정 의존성을 관리합니다.
"""

import os

from fastapi import Depends, Request

from liveconf import ConfigStore

from .middleware.auth import APIKeyAuth, get_api_key_auth


# ============================================================================
# API Key 인증 의존성
# ============================================================================
async def verify_api_key(
    request: Request,
    auth: APIKeyAuth = Depends(get_api_key_auth),
) -> str:
    """API Key 검증 의존성"""
    return await auth(request)


# ============================================================================
# ConfigStore 의존성
# ============================================================================
_config_store: ConfigStore | None = None


def set_config_store(store: ConfigStore | None) -> None:
    """ConfigStore 설정 (앱 시작 시 호출)

    Args:
        store: ConfigStore 인스턴스
    """
    global _config_store
    _config_store = store


def get_config_store() -> ConfigStore | None:
    """ConfigStore 의존성

    Returns:
        ConfigStore 인스턴스 또는 None
    """
    return _config_store


# ============================================================================
# 환경 설정 의존성
# ============================================================================
class Settings:
    """앱 설정 클래스"""

    def __init__(self):
        self.env = os.getenv("ENV", "dev")
        self.debug = self.env == "dev"

        # API 서버 설정
        self.api_host = os.getenv("API_HOST", "0.0.0.0")
        self.api_port = int(os.getenv("API_PORT", "8000"))

        # 설정 파일 경로
        self.config_path = os.getenv("CONFIG_PATH", "config/app.conf")


_settings: Settings | None = None


def get_settings() -> Settings:
    """앱 설정 의존성 (싱글톤)"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
