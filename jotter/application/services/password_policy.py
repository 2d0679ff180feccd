"""Password length rule shared by the user service and the legacy v1 request schema.

Length is measured on the password exactly as given; surrounding
whitespace counts.
"""

MIN_PASSWORD_LENGTH = 3
MAX_PASSWORD_LENGTH = 512


class PasswordLengthError(ValueError):
    """Password length is outside [MIN_PASSWORD_LENGTH, MAX_PASSWORD_LENGTH]."""

    def __init__(self, length: int, message: str) -> None:
        self.length = length
        super().__init__(message)


def validate_password_length(password: str) -> None:
    """Raise PasswordLengthError when password is too short or too long."""
    length = len(password)
    if length < MIN_PASSWORD_LENGTH:
        raise PasswordLengthError(
            length, f"password is too short, minimum length is {MIN_PASSWORD_LENGTH}"
        )
    if length > MAX_PASSWORD_LENGTH:
        raise PasswordLengthError(
            length, f"password is too long, maximum length is {MAX_PASSWORD_LENGTH}"
        )
