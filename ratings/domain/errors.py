"""
Domain errors for the ratings service.

Two families exist:

- public errors (validation failures, missing rows) that are safe to show to
  callers as-is
- internal errors that wrap anything unrecognised and hide the details
"""
from enum import Enum
from typing import Dict, Optional


class ErrorCode(str, Enum):
    """Reason codes attached to a field in a ValidationError."""
    REQUIRED = "required"
    INVALID = "invalid"
    TOO_LONG = "too_long"
    ID_TAKEN = "id_taken"
    DUPLICATE = "duplicate"
    REF_NOT_FOUND = "ref_not_found"


_MESSAGES = {
    ErrorCode.REQUIRED: "is required",
    ErrorCode.INVALID: "is invalid",
    ErrorCode.TOO_LONG: "is too long",
    ErrorCode.ID_TAKEN: "is already taken",
    ErrorCode.DUPLICATE: "already has a rating from this user",
    ErrorCode.REF_NOT_FOUND: "references a missing record",
}


class RatingError(Exception):
    """Base exception for all ratings errors"""


class PublicError(RatingError):
    """Error whose message can be returned to callers"""

    def public_message(self) -> str:
        return str(self)


class ValidationError(PublicError):
    """One or more fields failed validation.

    Args:
        errors: Mapping of field name to reason code
    """

    def __init__(self, errors: Optional[Dict[str, ErrorCode]] = None):
        self.errors: Dict[str, ErrorCode] = dict(errors or {})
        super().__init__(self._format())

    def _format(self) -> str:
        parts = [
            f"{field} {_MESSAGES.get(code, str(code))}"
            for field, code in sorted(self.errors.items())
        ]
        return "; ".join(parts) or "validation failed"

    def has(self, field: str, code: ErrorCode) -> bool:
        """Check whether ``field`` failed with ``code``."""
        return self.errors.get(field) == code

    def codes(self) -> set:
        return set(self.errors.values())

    def __eq__(self, other):
        if not isinstance(other, ValidationError):
            return NotImplemented
        return self.errors == other.errors

    def __hash__(self):
        return hash(tuple(sorted(self.errors.items())))

    def __repr__(self):
        return f"ValidationError({self.errors!r})"


class NotFoundError(PublicError):
    """The requested rating does not exist"""

    def __init__(self, rating_id: Optional[int] = None):
        self.rating_id = rating_id
        msg = f"rating {rating_id} not found" if rating_id is not None else "rating not found"
        super().__init__(msg)


class InternalError(RatingError):
    """Unrecognised failure; the original error is kept on ``__cause__``"""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"internal error during {operation}")

    def public_message(self) -> str:
        return "internal server error"
