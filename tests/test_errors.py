"""
에러 분류 체계 테스트
"""

import pytest

from liveconf import (
    ConfigurationError,
    EmptyLineError,
    ErrorKind,
    FileUnavailableError,
    LiveConfigError,
    MissingDelimiterError,
    ParseError,
)


class TestErrorHierarchy:
    """예외 계층 테스트"""

    @pytest.mark.parametrize(
        "error, kind",
        [
            (EmptyLineError(), ErrorKind.EMPTY_SOURCE),
            (MissingDelimiterError("x"), ErrorKind.MALFORMED_LINE),
            (FileUnavailableError("a.conf", PermissionError("denied")), ErrorKind.FILE_UNAVAILABLE),
            (ConfigurationError("bad"), ErrorKind.CONFIGURATION),
        ],
    )
    def test_kind(self, error: LiveConfigError, kind: ErrorKind):
        assert error.kind == kind
        assert isinstance(error, LiveConfigError)

    def test_parse_errors_share_base(self):
        assert issubclass(EmptyLineError, ParseError)
        assert issubclass(MissingDelimiterError, ParseError)

    def test_kind_is_str_enum(self):
        assert ErrorKind.MALFORMED_LINE == "malformed_line"


class TestFileUnavailableError:
    """파일 접근 실패 에러 테스트"""

    def test_missing_file(self):
        error = FileUnavailableError("a.conf", FileNotFoundError(2, "No such file"))

        assert error.missing is True
        assert error.path == "a.conf"

    def test_permission_denied_is_not_missing(self):
        cause = PermissionError(13, "Permission denied")
        error = FileUnavailableError("a.conf", cause)

        assert error.missing is False
        assert error.cause is cause
        assert "a.conf" in str(error)
