"""Tests for the shared password length rule and the legacy v1 check built on it."""

import pytest

from jotter.application.services.password_policy import (
    MAX_PASSWORD_LENGTH,
    MIN_PASSWORD_LENGTH,
    PasswordLengthError,
    validate_password_length,
)
from jotter.maintenance.exceptions import LegacyValidationException
from jotter.maintenance.legacy import validate_legacy_password
from jotter.schemas.legacy import LegacyUpdateUserRequest


class TestValidatePasswordLength:
    """Bounds are inclusive: 3..512."""

    def test_bounds(self) -> None:
        assert MIN_PASSWORD_LENGTH == 3
        assert MAX_PASSWORD_LENGTH == 512

    @pytest.mark.parametrize("length", [3, 4, 511, 512])
    def test_accepts_lengths_in_range(self, length: int) -> None:
        validate_password_length("x" * length)

    def test_too_short(self) -> None:
        with pytest.raises(PasswordLengthError, match="minimum length is 3") as exc_info:
            validate_password_length("ab")
        assert exc_info.value.length == 2

    def test_too_long(self) -> None:
        with pytest.raises(PasswordLengthError, match="maximum length is 512"):
            validate_password_length("x" * 513)

    def test_surrounding_whitespace_counts(self) -> None:
        validate_password_length(" a ")
        with pytest.raises(PasswordLengthError):
            validate_password_length(" " * 256 + "x" + " " * 256)


class TestLegacyValidation:
    """validate_legacy_password wraps the v1 request schema."""

    def test_length_two_fails(self) -> None:
        with pytest.raises(LegacyValidationException) as exc_info:
            validate_legacy_password("ab")
        assert exc_info.value.message == "password is too short, minimum length is 3"
        assert exc_info.value.error_code == "LEGACY_VALIDATION_FAILURE"

    def test_length_three_passes(self) -> None:
        validate_legacy_password("abc")

    def test_length_512_passes(self) -> None:
        validate_legacy_password("p" * 512)

    def test_length_513_fails(self) -> None:
        with pytest.raises(LegacyValidationException) as exc_info:
            validate_legacy_password("p" * 513)
        assert exc_info.value.message == "password is too long, maximum length is 512"

    def test_schema_keeps_password_verbatim(self) -> None:
        req = LegacyUpdateUserRequest(password="  secret  ")
        assert req.password == "  secret  "

    def test_schema_allows_missing_password(self) -> None:
        assert LegacyUpdateUserRequest(nickname="n").password is None
