"""
API 요청 스키마 정의
"""

from pydantic import BaseModel, Field


class KeysRequest(BaseModel):
    """여러 키 일괄 조회 요청

    POST /api/v1/config/values 요청 본문입니다.
    """

    keys: list[str] = Field(
        ...,
        description="조회할 키 목록 (응답은 같은 순서)",
        examples=[["host", "port", "timeout"]],
    )


class ValueRequest(BaseModel):
    """단일 키 값 설정 요청

    PUT /api/v1/config/{key} 요청 본문입니다.
    값은 메모리에만 저장되며 파일에 기록되지 않습니다.
    """

    value: str = Field(..., description="저장할 값 (문자열 그대로 저장)")
