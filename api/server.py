"""
FastAPI 앱 정의 및 라우터 통합

설정 스토어 조회 API 서버의 메인 모듈입니다.
"""

import logging
import threading
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from liveconf import ConfigStore, StoreSettings, __version__

from .dependencies import get_config_store, get_settings, set_config_store
from .routes import config_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """앱 라이프사이클 관리

    시작 시:
        - ConfigStore 생성 (동기 로드 + 갱신 스레드 시작)

    종료 시:
        - 종료 이벤트 set (갱신 스레드 종료)
    """
    settings = get_settings()
    done: threading.Event | None = None

    if get_config_store() is None:
        done = threading.Event()
        store = ConfigStore(
            settings.config_path,
            settings=StoreSettings.from_env_validated(),
            done=done,
        )
        set_config_store(store)
        logger.info(
            f"[Server] ConfigStore 초기화 완료: {store.filename}, {len(store)}개 키"
        )

    yield

    if done is not None:
        done.set()
        set_config_store(None)
    logger.info("[Server] 서버 종료")


def create_app(
    title: str = "liveconf API",
    version: str = __version__,
    debug: bool = False,
) -> FastAPI:
    """FastAPI 앱 생성

    Args:
        title: API 제목
        version: API 버전
        debug: 디버그 모드

    Returns:
        FastAPI 앱 인스턴스
    """
    settings = get_settings()

    app = FastAPI(
        title=title,
        version=version,
        description="""
# liveconf 설정 API

파일 기반 자동 갱신 설정 저장소의 현재 값을 HTTP로 조회합니다.

## 주요 기능

- **전체 조회**: GET /api/v1/config
- **단일 키 조회**: GET /api/v1/config/{key}
- **일괄 조회**: POST /api/v1/config/values
- **메모리 내 설정**: PUT /api/v1/config/{key}
- **수동 리로드**: POST /api/v1/config/reload

## 인증

/api/v1 요청에는 `X-API-Key` 헤더가 필요합니다.
        """,
        debug=debug or settings.debug,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # 라우터 등록
    app.include_router(health_router)  # /health
    app.include_router(config_router)  # /api/v1/config

    # 글로벌 예외 핸들러
    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request, exc: Exception
    ) -> JSONResponse:
        """글로벌 예외 핸들러"""
        logger.exception(f"[Server] 처리되지 않은 예외: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "Internal server error",
                "details": str(exc) if settings.debug else None,
            },
        )

    return app


# 기본 앱 인스턴스
app = create_app()


# 직접 실행 시
if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "api.server:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
