"""Exceptions raised by the DigitalOcean request engine.

Every failure of an API call surfaces as a ``DigitalOceanAPIError`` (or one of
its subclasses). Each instance carries an immutable ``ApiErrorInfo`` built at
classification time.
"""

from .schema import ApiErrorInfo, ErrorKind


class DigitalOceanAPIError(Exception):
    """Raised when a DigitalOcean API call fails with a non-success status."""

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        retryable: bool = False,
        retry_after_seconds: int | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Human-readable error text.
            status_code: HTTP status of the failed response, if any.
            retryable: Whether repeating the call may succeed.
            retry_after_seconds: Wait hint (rate-limit errors only).
        """
        super().__init__(message)
        self.info = ApiErrorInfo(
            kind=self.kind,
            message=message,
            http_status=status_code,
            retryable=retryable,
            retry_after_seconds=retry_after_seconds,
        )

    @property
    def message(self) -> str:
        return self.info.message

    @property
    def status_code(self) -> int | None:
        return self.info.http_status

    @property
    def retryable(self) -> bool:
        return self.info.retryable


class AuthenticationError(DigitalOceanAPIError):
    """Missing or rejected API token. Never retryable."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str, status_code: int | None = None) -> None:
        """Initialize an authentication error."""
        super().__init__(message, status_code=status_code, retryable=False)


class RateLimitError(DigitalOceanAPIError):
    """HTTP 429 from the API. Retryable after ``retry_after_seconds``."""

    kind = ErrorKind.RATE_LIMIT

    def __init__(self, message: str, retry_after_seconds: int) -> None:
        """Initialize a rate-limit error."""
        super().__init__(
            message,
            status_code=429,
            retryable=True,
            retry_after_seconds=retry_after_seconds,
        )

    @property
    def retry_after_seconds(self) -> int:
        return self.info.retry_after_seconds or 0


class DigitalOceanTransportError(DigitalOceanAPIError):
    """Network-level failure below HTTP (DNS, refused connection, timeout)."""

    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str) -> None:
        """Initialize a transport error."""
        super().__init__(message, status_code=None, retryable=True)
