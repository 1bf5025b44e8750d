"""
설정 API 라우터

설정 키 조회, 메모리 내 값 설정, 수동 리로드를 제공합니다.
스토어 락 대기가 이벤트 루프를 막지 않도록 스토어를 다루는 핸들러는 동기 함수
(FastAPI 스레드풀 실행)로 정의합니다.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from liveconf import ConfigStore

from ..dependencies import get_config_store, verify_api_key
from ..schemas.request import KeysRequest, ValueRequest
from ..schemas.response import (
    ConfigSnapshotResponse,
    KeyValueResponse,
    ReloadResponse,
    ValuesResponse,
    ns_to_datetime,
)

router = APIRouter(
    prefix="/api/v1/config",
    tags=["Config"],
    dependencies=[Depends(verify_api_key)],
)


def require_store(
    config_store: ConfigStore | None = Depends(get_config_store),
) -> ConfigStore:
    """스토어 미초기화 시 503"""
    if config_store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "error": "CONFIG_UNAVAILABLE",
                "message": "Config store not initialized",
            },
        )
    return config_store


@router.get(
    "",
    response_model=ConfigSnapshotResponse,
    summary="전체 설정 조회",
    description="현재 메모리에 올라와 있는 모든 키-값을 조회합니다.",
)
def get_config(
    store: ConfigStore = Depends(require_store),
) -> ConfigSnapshotResponse:
    parameters = store.snapshot()
    return ConfigSnapshotResponse(
        filename=store.filename,
        last_applied=ns_to_datetime(store.last_applied_ns),
        key_count=len(parameters),
        parameters=parameters,
    )


@router.post(
    "/values",
    response_model=ValuesResponse,
    summary="여러 키 일괄 조회",
    description="요청 순서대로 값을 반환합니다. 없는 키는 빈 문자열입니다.",
)
def get_values(
    request: KeysRequest,
    store: ConfigStore = Depends(require_store),
) -> ValuesResponse:
    return ValuesResponse(keys=request.keys, values=store.get_slice(request.keys))


@router.post(
    "/reload",
    response_model=ReloadResponse,
    summary="설정 수동 리로드",
    description="타이머를 기다리지 않고 reconcile을 즉시 1회 실행합니다.",
)
def reload_config(
    store: ConfigStore = Depends(require_store),
) -> ReloadResponse:
    """설정 수동 리로드

    Returns:
        ReloadResponse: reconcile 결과 (applied/unchanged/missing/unavailable)
    """
    result = store.update()

    return ReloadResponse(
        status=result,
        filename=store.filename,
        last_applied=ns_to_datetime(store.last_applied_ns),
        key_count=len(store),
    )


@router.get(
    "/{key:path}",
    response_model=KeyValueResponse,
    summary="단일 키 조회",
)
def get_key(
    key: str,
    store: ConfigStore = Depends(require_store),
) -> KeyValueResponse:
    """단일 키 조회

    없는 키는 404 대신 found=false, value=""로 반환합니다.
    """
    value, found = store.lookup(key)
    return KeyValueResponse(key=key, value=value, found=found)


@router.put(
    "/{key:path}",
    response_model=KeyValueResponse,
    summary="단일 키 설정",
    description="메모리에만 저장합니다. 파일의 같은 키가 나중에 변경되면 덮어쓰입니다.",
)
def put_key(
    key: str,
    request: ValueRequest,
    store: ConfigStore = Depends(require_store),
) -> KeyValueResponse:
    store.set(key, request.value)
    return KeyValueResponse(key=key, value=store.get(key), found=True)
