"""Legacy v1 validation of a new password.

Run before the masked update, not instead of it: v1 clients were promised
these bounds, and the check stays until the v1 API is removed.
"""

from pydantic import ValidationError

from jotter.maintenance.exceptions import LegacyValidationException
from jotter.schemas.legacy import LegacyUpdateUserRequest


def _first_error_message(error: ValidationError) -> str:
    first = error.errors()[0]
    cause = first.get("ctx", {}).get("error")
    return str(cause) if cause is not None else first["msg"]


def validate_legacy_password(password: str) -> None:
    """Validate password as a v1 update-user request would.

    Raises:
        LegacyValidationException: the v1 request rejected the password.
    """
    try:
        LegacyUpdateUserRequest(password=password)
    except ValidationError as e:
        raise LegacyValidationException(_first_error_message(e)) from e
