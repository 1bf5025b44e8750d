"""
헬스체크 API 라우터

서버 상태와 설정 스토어 상태를 반환합니다.
"""

import time

from fastapi import APIRouter, Depends

from liveconf import ConfigStore, __version__

from ..dependencies import get_config_store
from ..schemas.response import HealthResponse, ns_to_datetime

router = APIRouter(tags=["Health"])

# 서버 시작 시각
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="헬스체크",
    description="서버 상태 및 설정 스토어 상태를 반환합니다.",
)
def health_check(
    config_store: ConfigStore | None = Depends(get_config_store),
) -> HealthResponse:
    """서버 헬스체크

    Returns:
        HealthResponse: 서버 상태 정보
    """
    uptime = int(time.time() - _start_time)

    if config_store is None:
        return HealthResponse(
            status="degraded",
            version=__version__,
            uptime_seconds=uptime,
            store="unavailable",
        )

    return HealthResponse(
        status="ok",
        version=__version__,
        uptime_seconds=uptime,
        store="running" if config_store.running else "stopped",
        filename=config_store.filename,
        key_count=len(config_store),
        last_applied=ns_to_datetime(config_store.last_applied_ns),
    )


@router.get(
    "/health/live",
    summary="Liveness 체크",
    description="서버가 살아있는지 확인합니다. (Kubernetes liveness 체크용)",
)
async def liveness() -> dict[str, str]:
    """Liveness 체크 (경량)"""
    return {"status": "ok"}
