"""
API 응답 스키마 정의

설정 스토어 조회/갱신 결과를 반환하는 Pydantic 모델입니다.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from liveconf import ReconcileStatus


def ns_to_datetime(ns: int) -> datetime | None:
    """파일 수정 시각(ns) → datetime. 0이면 None (미반영)."""
    if not ns:
        return None
    return datetime.fromtimestamp(ns / 1_000_000_000, tz=timezone.utc)


class ConfigSnapshotResponse(BaseModel):
    """전체 설정 조회 응답

    GET /api/v1/config 응답으로 반환됩니다.
    """

    filename: str = Field(..., description="소스 파일 경로")
    last_applied: datetime | None = Field(
        default=None,
        description="마지막으로 반영한 파일 수정 시각",
    )
    key_count: int = Field(default=0, description="키 개수")
    parameters: dict[str, str] = Field(default_factory=dict, description="전체 키-값")

    model_config = {
        "json_schema_extra": {
            "example": {
                "filename": "/etc/app/app.conf",
                "last_applied": "2026-01-16T10:30:00Z",
                "key_count": 2,
                "parameters": {"host": "localhost", "port": "8080"},
            }
        }
    }


class KeyValueResponse(BaseModel):
    """단일 키 조회/설정 응답"""

    key: str = Field(..., description="키")
    value: str = Field(default="", description="값 (없으면 빈 문자열)")
    found: bool = Field(default=False, description="키 존재 여부")


class ValuesResponse(BaseModel):
    """여러 키 일괄 조회 응답

    values는 keys와 같은 길이, 같은 순서입니다.
    """

    keys: list[str] = Field(default_factory=list, description="요청한 키 목록")
    values: list[str] = Field(default_factory=list, description="값 목록")


class ReloadResponse(BaseModel):
    """수동 리로드 응답

    POST /api/v1/config/reload 응답으로 반환됩니다.
    """

    status: ReconcileStatus = Field(..., description="reconcile 결과")
    filename: str = Field(..., description="소스 파일 경로")
    last_applied: datetime | None = Field(default=None, description="반영된 수정 시각")
    key_count: int = Field(default=0, description="리로드 후 키 개수")


class HealthResponse(BaseModel):
    """헬스체크 응답

    GET /health 응답으로 반환됩니다.
    """

    status: str = Field(default="ok", description="서버 상태")
    version: str = Field(..., description="API 버전")
    uptime_seconds: int = Field(default=0, description="서버 가동 시간 (초)")

    # 스토어 상태
    store: str = Field(default="unknown", description="스토어 상태 (running/stopped/unavailable)")
    filename: str | None = Field(default=None, description="소스 파일 경로")
    key_count: int = Field(default=0, description="키 개수")
    last_applied: datetime | None = Field(default=None, description="마지막 반영 시각")

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "ok",
                "version": "1.0.0",
                "uptime_seconds": 3600,
                "store": "running",
                "filename": "/etc/app/app.conf",
                "key_count": 12,
                "last_applied": "2026-01-16T10:30:00Z",
            }
        }
    }
