"""Errors raised by maintenance commands.

Store bootstrap failures (DriverInitException, MigrationException) live in
jotter.infrastructure.exceptions; everything specific to a command's input,
lookup, or update step lives here.
"""

from typing import Any

from jotter.domain.exceptions import JotterException

_SELECTOR_LABELS = {"id": "id", "email": "email address", "username": "username"}


class MaintenanceException(JotterException):
    """Base for maintenance command failures. usage_error marks bad operator input."""

    usage_error = False


class MissingIdentifierException(MaintenanceException):
    """None of --id, --username, --email was supplied."""

    usage_error = True

    def __init__(self) -> None:
        super().__init__(
            "user id, username or email address is required.",
            "MISSING_IDENTIFIER",
        )


class MissingPasswordException(MaintenanceException):
    """--password was missing or blank after trimming."""

    usage_error = True

    def __init__(self) -> None:
        super().__init__("password can not be blank.", "MISSING_PASSWORD")


class InvalidInputException(MaintenanceException):
    """An option value can not be stored, e.g. it holds bytes that are not UTF-8."""

    def __init__(self, option: str) -> None:
        super().__init__(
            f"{option} is not valid UTF-8 text.",
            "INVALID_INPUT",
            {"option": option},
        )


class UserNotFoundException(MaintenanceException):
    """A lookup by id or email returned no rows."""

    def __init__(self, selector: str, value: Any) -> None:
        """Initialize with the selector that missed.

        Args:
            selector: 'id', 'email' or 'username'.
            value: The identifier that matched no user.
        """
        label = _SELECTOR_LABELS.get(selector, selector)
        super().__init__(
            f"user with {label} {value} not found",
            "USER_NOT_FOUND",
            {"selector": selector, "value": value},
        )


class LegacyValidationException(MaintenanceException):
    """The new password failed the v1 request validation."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason, "LEGACY_VALIDATION_FAILURE", {"reason": reason})


class UserUpdateException(MaintenanceException):
    """The service-layer update failed; the cause is kept in details."""

    def __init__(self, username: str, cause: Exception) -> None:
        reason = getattr(cause, "message", None) or str(cause)
        details: dict[str, Any] = {"username": username, "cause": reason}
        cause_code = getattr(cause, "error_code", None)
        if cause_code:
            details["cause_code"] = cause_code
        super().__init__(
            f"failed to reset password for {username}: {reason}",
            "UPDATE_FAILURE",
            details,
        )
