"""
Error translation for adapters.

Converts googleapiclient / transport exceptions into ReaderError so tools
see one error type. Nothing is retried here: a failed call fails once and
the caller decides what to do.
"""

from functools import wraps
from typing import TypeVar, Callable, ParamSpec

from logging_config import logger
from models import ReaderError, ErrorKind

T = TypeVar("T")
P = ParamSpec("P")


def _get_http_status(exception: Exception) -> int | None:
    """
    Extract HTTP status code from exception if available.

    Works with googleapiclient.errors.HttpError and similar.
    """
    # Check for resp.status attribute (googleapiclient.errors.HttpError)
    if hasattr(exception, "resp") and hasattr(exception.resp, "status"):
        status = exception.resp.status
        if isinstance(status, int):
            return status
        if isinstance(status, str) and status.isdigit():
            return int(status)

    if hasattr(exception, "status_code"):
        status = exception.status_code
        if isinstance(status, int):
            return status

    return None


def _convert_to_reader_error(exception: Exception) -> ReaderError:
    """Convert an exception to a ReaderError if not already one."""
    if isinstance(exception, ReaderError):
        return exception

    status = _get_http_status(exception)
    if status is not None:
        message = str(exception)
        details = {"status": status}
        if status == 401:
            return ReaderError(ErrorKind.AUTH_EXPIRED, message, details)
        elif status == 403:
            return ReaderError(ErrorKind.PERMISSION_DENIED, message, details)
        elif status == 404:
            return ReaderError(ErrorKind.NOT_FOUND, message, details)
        elif status == 429:
            return ReaderError(ErrorKind.RATE_LIMITED, message, details)
        elif status >= 500:
            return ReaderError(ErrorKind.NETWORK_ERROR, message, details)
        elif status == 400:
            return ReaderError(ErrorKind.INVALID_INPUT, message, details)

    if isinstance(exception, (ConnectionError, TimeoutError)):
        return ReaderError(ErrorKind.NETWORK_ERROR, str(exception))

    return ReaderError(ErrorKind.UNKNOWN, str(exception))


def translate_errors(func: Callable[P, T]) -> Callable[P, T]:
    """
    Decorator for adapter functions: re-raise any failure as ReaderError.

    Example:
        @translate_errors
        def fetch_document(identity: str, document_id: str) -> dict:
            return get_docs_service(identity).documents().get(...).execute()
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        try:
            return func(*args, **kwargs)
        except ReaderError:
            raise
        except Exception as e:
            error = _convert_to_reader_error(e)
            logger.warning(f"{func.__name__} failed ({error.kind.value}): {error.message}")
            raise error from e

    return wrapper
