"""
에러 분류 체계

라인 파싱 실패와 소스 파일 접근 실패를 구분합니다.
모든 에러는 Reconciler 내부에서 흡수되며 get/set 호출자에게 전파되지 않습니다.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """에러 종류"""

    EMPTY_SOURCE = "empty_source"  # 공백 라인, 조용히 건너뜀
    MALFORMED_LINE = "malformed_line"  # 구분자 없음, 로그 후 건너뜀
    FILE_UNAVAILABLE = "file_unavailable"  # stat/open 실패, 다음 틱에 재시도
    CONFIGURATION = "configuration"  # 잘못된 설정값


class LiveConfigError(Exception):
    """liveconf 기본 에러"""

    kind: ErrorKind = ErrorKind.CONFIGURATION

    def __init__(self, message: str):
        super().__init__(message)


class ParseError(LiveConfigError):
    """라인 파싱 실패"""

    kind = ErrorKind.MALFORMED_LINE

    def __init__(self, message: str, line: str = ""):
        super().__init__(message)
        self.line = line


class EmptyLineError(ParseError):
    """트림 후 내용이 없는 라인"""

    kind = ErrorKind.EMPTY_SOURCE

    def __init__(self, line: str = ""):
        super().__init__("empty parameter", line)


class MissingDelimiterError(ParseError):
    """'=' 또는 ':' 구분자가 없는 라인"""

    kind = ErrorKind.MALFORMED_LINE

    def __init__(self, line: str = ""):
        super().__init__("missing delimiter (':' or '=')", line)


class FileUnavailableError(LiveConfigError):
    """소스 파일 stat/open 실패"""

    kind = ErrorKind.FILE_UNAVAILABLE

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause

    @property
    def missing(self) -> bool:
        """파일이 존재하지 않아서 실패했는지 여부 (로그 생략 대상)"""
        return isinstance(self.cause, FileNotFoundError)


class ConfigurationError(LiveConfigError):
    """설정 오류 예외"""

    kind = ErrorKind.CONFIGURATION
