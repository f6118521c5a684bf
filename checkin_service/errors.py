from __future__ import annotations

from typing import Any, Dict, Sequence


class EntityError(Exception):
    """Base class for failures surfaced by the entity layer."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(EntityError):
    """Mutating operation on an ID that has no record."""


class DuplicateKeyError(EntityError):
    """create() with an ID that is already taken."""


class RecordValidationError(EntityError):
    """Input or merged record does not satisfy the entity model."""


class StorageUnavailableError(EntityError):
    """The key-value provider failed; not retried."""


class IndexConsistencyError(StorageUnavailableError):
    """An index entry points at a record that does not exist."""


def first_error_message(errors: Any) -> str:
    """
    One readable line out of a pydantic ValidationError (or FastAPI's
    RequestValidationError): "<loc>: <msg>".
    """
    errs: Sequence[Dict[str, Any]] = errors.errors() if hasattr(errors, "errors") else errors
    if not errs:
        return "Invalid request"
    e = errs[0]
    loc = ".".join(str(p) for p in e.get("loc", ()) if p not in ("body", "query", "path"))
    msg = str(e.get("msg", "Invalid value")).removeprefix("Value error, ")
    return f"{loc}: {msg}" if loc else msg
