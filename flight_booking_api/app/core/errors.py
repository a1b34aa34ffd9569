"""
Domain exceptions.

Raised by the service layer when a candidate entity is rejected.  Every
exception carries a ``reasons`` mapping of field name to message so the
API layer can report precise, field-scoped errors.  The translation of
each exception into an HTTP status lives in ``app.exception_handlers``.
"""

from enum import Enum
from typing import Dict, Optional


class ConflictKind(str, Enum):
    """Business rule that rejected a create."""

    SELF_CONFLICT = "SelfConflict"
    DUPLICATE_KEY = "DuplicateKey"


class DomainError(Exception):
    """Base class for rejections raised by services."""

    kind: Optional[ConflictKind] = None

    def __init__(self, message: str, reasons: Optional[Dict[str, str]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.reasons: Dict[str, str] = dict(reasons) if reasons else {}

    @property
    def fields(self) -> list[str]:
        return list(self.reasons)


class ShapeValidationError(DomainError):
    """One or more fields fail a type, pattern or non-null constraint."""

    @classmethod
    def from_pydantic(cls, errors: list[dict]) -> "ShapeValidationError":
        """Build the error from a list of pydantic error dicts.

        The field name is the last string element of ``loc`` (the alias
        when one is declared).  Messages raised by our own validators are
        taken verbatim; the first error for a field wins.
        """
        reasons: Dict[str, str] = {}
        for error in errors:
            loc = [part for part in error.get("loc", ()) if isinstance(part, str)]
            field = loc[-1] if loc and loc[-1] not in {"body", "path", "query"} else "body"
            ctx_error = (error.get("ctx") or {}).get("error")
            if error.get("type") == "value_error" and ctx_error is not None:
                message = str(ctx_error)
            else:
                message = error.get("msg", "Invalid value")
            reasons.setdefault(field, message)
        return cls("Bad Request", reasons)


class SelfConflictError(DomainError):
    """The entity's own fields contradict each other."""

    kind = ConflictKind.SELF_CONFLICT


class DuplicateKeyError(DomainError):
    """The candidate collides with an already persisted record."""

    kind = ConflictKind.DUPLICATE_KEY


class NotFoundError(DomainError):
    """A referenced record does not exist."""
