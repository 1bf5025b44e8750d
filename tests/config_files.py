"""
테스트용 설정 파일 생성 헬퍼
"""

import os
from pathlib import Path

# 파일 시스템 mtime 해상도에 의존하지 않도록 명시적 수정 시각 사용
BASE_MTIME_NS = 1_700_000_000 * 1_000_000_000
SECOND_NS = 1_000_000_000


def write_config(path: Path, text: str, mtime_ns: int | None = None) -> Path:
    """설정 파일 작성 후 수정 시각 지정

    Args:
        path: 파일 경로
        text: 파일 내용
        mtime_ns: 지정할 수정 시각 (ns). None이면 파일 시스템 기본값.
    """
    path.write_text(text, encoding="utf-8")
    if mtime_ns is not None:
        os.utime(path, ns=(mtime_ns, mtime_ns))
    return path
