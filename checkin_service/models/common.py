from __future__ import annotations

import re
from datetime import date
from typing import Annotated, Generic, Optional, TypeVar

from pydantic import BaseModel, StringConstraints

T = TypeVar("T")

# Required text inputs: surrounding whitespace is dropped, empty is rejected
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

_DATE_KEY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_date_key(value: str) -> str:
    """Calendar day key used in breakfast_status (YYYY-MM-DD)."""
    if not isinstance(value, str) or not _DATE_KEY.match(value):
        raise ValueError(f"Invalid date key '{value}' (expected YYYY-MM-DD)")
    date.fromisoformat(value)
    return value


class ApiResponse(BaseModel, Generic[T]):
    """
    Uniform response envelope: {success, data?, error?}.
    """
    success: bool = True
    data: Optional[T] = None
    error: Optional[str] = None


def ok(data: T) -> ApiResponse[T]:
    return ApiResponse(success=True, data=data)


def fail(error: str) -> dict:
    return {"success": False, "error": error}
