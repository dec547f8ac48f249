"""Tests for the error taxonomy and the Page model."""

import pytest
from pydantic import ValidationError

from do_mcp.exceptions import (
    AuthenticationError,
    DigitalOceanAPIError,
    DigitalOceanTransportError,
    RateLimitError,
)
from do_mcp.schema import ApiErrorInfo, ErrorKind, Page


class TestApiErrorInfo:
    def test_retry_after_only_for_rate_limit(self) -> None:
        with pytest.raises(ValidationError):
            ApiErrorInfo(kind=ErrorKind.GENERIC, message="x", retry_after_seconds=5)

    def test_is_frozen(self) -> None:
        info = ApiErrorInfo(kind=ErrorKind.GENERIC, message="x")
        with pytest.raises(ValidationError):
            info.message = "y"  # type: ignore[misc]


class TestExceptions:
    def test_generic_error(self) -> None:
        err = DigitalOceanAPIError("Droplet not found", status_code=404)
        assert err.info.kind == ErrorKind.GENERIC
        assert err.status_code == 404
        assert err.retryable is False
        assert str(err) == "Droplet not found"

    def test_rate_limit_error(self) -> None:
        err = RateLimitError("Rate limit exceeded", 30)
        assert err.info.kind == ErrorKind.RATE_LIMIT
        assert err.status_code == 429
        assert err.retryable is True
        assert err.retry_after_seconds == 30

    def test_authentication_error(self) -> None:
        err = AuthenticationError("Authentication failed. Check your API token.", 403)
        assert err.info.kind == ErrorKind.AUTHENTICATION
        assert err.retryable is False
        assert err.info.retry_after_seconds is None
        assert isinstance(err, DigitalOceanAPIError)

    def test_transport_error(self) -> None:
        err = DigitalOceanTransportError("Network error")
        assert err.info.kind == ErrorKind.TRANSPORT
        assert err.status_code is None
        assert err.retryable is True


class TestPage:
    def test_count_tracks_items(self) -> None:
        page = Page(items=[{"id": 1}, {"id": 2}])
        assert page.count == 2

    def test_next_page_requires_has_more(self) -> None:
        with pytest.raises(ValidationError):
            Page(items=[], has_more=False, next_page=2)

    def test_to_dict_omits_absent_fields(self) -> None:
        assert Page(items=[1]).to_dict() == {"items": [1], "count": 1, "has_more": False}

    def test_to_dict_full(self) -> None:
        page = Page(items=[1, 2], total=10, has_more=True, next_page=3)
        assert page.to_dict() == {
            "items": [1, 2],
            "count": 2,
            "total": 10,
            "has_more": True,
            "next_page": 3,
        }
