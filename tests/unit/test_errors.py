"""
Tests for adapter error translation.

Verifies HTTP status mapping and that translate_errors raises exactly
one ReaderError per failure without retrying.
"""

from unittest.mock import MagicMock

import pytest

from errors import _convert_to_reader_error, _get_http_status, translate_errors
from models import ErrorKind, ReaderError
from tests.mock_utils import make_http_error


class TestGetHttpStatus:

    def test_http_error(self) -> None:
        assert _get_http_status(make_http_error(404)) == 404

    def test_string_status(self) -> None:
        error = Exception("x")
        error.resp = MagicMock(status="503")  # type: ignore[attr-defined]
        assert _get_http_status(error) == 503

    def test_status_code_attribute(self) -> None:
        error = Exception("x")
        error.status_code = 429  # type: ignore[attr-defined]
        assert _get_http_status(error) == 429

    def test_plain_exception(self) -> None:
        assert _get_http_status(ValueError("nope")) is None


class TestConvertToReaderError:

    @pytest.mark.parametrize("status,kind", [
        (400, ErrorKind.INVALID_INPUT),
        (401, ErrorKind.AUTH_EXPIRED),
        (403, ErrorKind.PERMISSION_DENIED),
        (404, ErrorKind.NOT_FOUND),
        (429, ErrorKind.RATE_LIMITED),
        (500, ErrorKind.NETWORK_ERROR),
        (503, ErrorKind.NETWORK_ERROR),
        (418, ErrorKind.UNKNOWN),
    ])
    def test_status_mapping(self, status: int, kind: ErrorKind) -> None:
        error = _convert_to_reader_error(make_http_error(status, "boom"))
        assert error.kind == kind

    def test_status_in_details(self) -> None:
        error = _convert_to_reader_error(make_http_error(404, "File not found"))
        assert error.details == {"status": 404}
        assert "404" in error.message

    @pytest.mark.parametrize("exc", [ConnectionError("reset"), TimeoutError("slow")])
    def test_transport_failures(self, exc: Exception) -> None:
        assert _convert_to_reader_error(exc).kind == ErrorKind.NETWORK_ERROR

    def test_unknown(self) -> None:
        error = _convert_to_reader_error(RuntimeError("weird"))
        assert error.kind == ErrorKind.UNKNOWN
        assert error.message == "weird"

    def test_reader_error_passes_through(self) -> None:
        original = ReaderError(ErrorKind.DECODE_ERROR, "bad")
        assert _convert_to_reader_error(original) is original


class TestTranslateErrors:

    def test_success_passes_through(self) -> None:
        @translate_errors
        def ok(x: int) -> int:
            return x * 2

        assert ok(21) == 42

    def test_failure_raised_once_without_retry(self) -> None:
        calls = []

        @translate_errors
        def failing() -> None:
            calls.append(1)
            raise make_http_error(503, "unavailable")

        with pytest.raises(ReaderError) as exc_info:
            failing()

        assert exc_info.value.kind == ErrorKind.NETWORK_ERROR
        assert len(calls) == 1

    def test_original_exception_chained(self) -> None:
        @translate_errors
        def failing() -> None:
            raise ConnectionError("reset")

        with pytest.raises(ReaderError) as exc_info:
            failing()
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_reader_error_not_rewrapped(self) -> None:
        original = ReaderError(ErrorKind.CONFIGURATION, "no key")

        @translate_errors
        def failing() -> None:
            raise original

        with pytest.raises(ReaderError) as exc_info:
            failing()
        assert exc_info.value is original

    def test_preserves_name(self) -> None:
        @translate_errors
        def fetch_thing() -> None:
            pass

        assert fetch_thing.__name__ == "fetch_thing"
