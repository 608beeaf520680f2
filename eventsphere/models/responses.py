"""Generic API response envelope model.

Every public client operation resolves to this envelope:
{ success: bool, data?: T, error?: str, message?: str }

success=True carries data and no error; success=False carries a non-empty
error and no data. Raw transport exceptions never reach callers.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, model_validator

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """JSON envelope for all client responses."""

    success: bool
    data: T | None = None
    error: str | None = None
    message: str | None = None

    @model_validator(mode="after")
    def _check_envelope(self) -> ApiResponse[T]:
        if self.success:
            if self.data is None:
                raise ValueError("successful response must carry data")
            if self.error is not None:
                raise ValueError("successful response must not carry an error")
        else:
            if self.data is not None:
                raise ValueError("failed response must not carry data")
            if not self.error:
                raise ValueError("failed response must carry an error message")
        return self

    @classmethod
    def ok(cls, data: Any, message: str | None = None) -> ApiResponse[Any]:
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, error: str, message: str | None = None) -> ApiResponse[Any]:
        return cls(success=False, error=error, message=message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize with absent fields omitted, matching the wire shape."""
        return self.model_dump(exclude_none=True)
