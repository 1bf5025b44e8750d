"""
liveconf 설정 조회 API 모듈

FastAPI 기반 HTTP API로 다른 프로세스에서 현재 설정 값을 조회할 수 있습니다.
"""

from .server import app, create_app

__all__ = ["app", "create_app"]
