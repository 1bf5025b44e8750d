"""
API 요청/응답 스키마 모듈
"""

from .request import KeysRequest, ValueRequest
from .response import (
    ConfigSnapshotResponse,
    HealthResponse,
    KeyValueResponse,
    ReloadResponse,
    ValuesResponse,
    ns_to_datetime,
)

__all__ = [
    # Request
    "KeysRequest",
    "ValueRequest",
    # Response
    "ConfigSnapshotResponse",
    "HealthResponse",
    "KeyValueResponse",
    "ReloadResponse",
    "ValuesResponse",
    "ns_to_datetime",
]
