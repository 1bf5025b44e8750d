"""
설정 파일 라인 파서

한 줄을 (key, value) 쌍으로 분리합니다. 공유 상태가 없는 순수 함수입니다.

형식:
    key=value
    key:value

첫 번째로 등장하는 '=' 또는 ':' 를 구분자로 사용하며,
키와 값 내부의 공백은 그대로 보존합니다.
"""

import re

from .errors import EmptyLineError, MissingDelimiterError

DELIMITERS = "=:"

_DELIMITER_PATTERN = re.compile(f"[{re.escape(DELIMITERS)}]")


def split_line(line: str) -> tuple[str, str]:
    """설정 라인을 키/값으로 분리

    Args:
        line: 설정 파일의 한 줄 (개행 포함 가능)

    Returns:
        (key, value) 튜플

    Raises:
        EmptyLineError: 트림 후 빈 라인
        MissingDelimiterError: 구분자가 없는 라인

    Examples:
        >>> split_line("  host = localhost\\n")
        ('host ', ' localhost')
        >>> split_line("url:http://example.com")
        ('url', 'http://example.com')
    """
    stripped = line.strip()
    if not stripped:
        raise EmptyLineError(line)

    match = _DELIMITER_PATTERN.search(stripped)
    if match is None:
        raise MissingDelimiterError(stripped)

    index = match.start()
    return stripped[:index], stripped[index + 1 :]
