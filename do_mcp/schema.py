"""Pydantic schemas shared by the request engine, formatters, and tools.

This module defines:
- The error taxonomy record (ErrorKind, ApiErrorInfo)
- The normalized pagination result (Page)
- The response presentation mode (ResponseFormat)
"""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

ResponseFormat = Literal["json", "markdown"]


class ErrorKind(str, Enum):
    """Classification of a failed API call."""

    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    GENERIC = "generic"
    TRANSPORT = "transport"


class ApiErrorInfo(BaseModel):
    """Immutable description of a classified API failure."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ErrorKind = Field(description="Error classification")
    message: str = Field(description="Human-readable error text")
    http_status: int | None = Field(
        default=None, description="HTTP status code, when a response was received"
    )
    retryable: bool = Field(
        default=False, description="Whether repeating the call may succeed"
    )
    retry_after_seconds: int | None = Field(
        default=None, description="Wait hint for rate-limit errors"
    )

    @model_validator(mode="after")
    def _retry_after_only_for_rate_limit(self) -> "ApiErrorInfo":
        if self.retry_after_seconds is not None and self.kind != ErrorKind.RATE_LIMIT:
            raise ValueError("retry_after_seconds is only valid for rate-limit errors")
        return self


class Page(BaseModel):
    """One page of a provider-side paginated list.

    ``count`` always equals ``len(items)``. ``next_page`` may only be set when
    ``has_more`` is true; ``has_more`` without ``next_page`` means more items
    exist but the next page number could not be determined.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    items: list[Any] = Field(default_factory=list, description="Items on this page")
    total: int | None = Field(
        default=None, description="Total item count, when the provider reports it"
    )
    has_more: bool = Field(default=False, description="Whether another page exists")
    next_page: int | None = Field(default=None, description="Next page number")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def count(self) -> int:
        """Number of items on this page."""
        return len(self.items)

    @model_validator(mode="after")
    def _next_page_requires_more(self) -> "Page":
        if self.next_page is not None and not self.has_more:
            raise ValueError("next_page requires has_more")
        return self

    def to_dict(self) -> dict[str, Any]:
        """Wire representation; ``total`` and ``next_page`` are omitted when absent."""
        data: dict[str, Any] = {"items": list(self.items), "count": self.count}
        if self.total is not None:
            data["total"] = self.total
        data["has_more"] = self.has_more
        if self.next_page is not None:
            data["next_page"] = self.next_page
        return data
