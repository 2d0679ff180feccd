"""v1 API request schemas.

The v1 update-user request predates the masked update path. It is kept
so that rules v1 clients rely on stay enforced; its password check
delegates to the shared password rule.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from jotter.application.services.password_policy import validate_password_length


class LegacyUpdateUserRequest(BaseModel):
    """Request body for PATCH /api/v1/user/{id} (all fields optional)."""

    model_config = ConfigDict(str_strip_whitespace=False)

    username: str | None = None
    email: str | None = None
    nickname: str | None = None
    password: str | None = None
    avatar_url: str | None = None

    @field_validator("password")
    @classmethod
    def check_password_length(cls, value: str | None) -> str | None:
        if value is not None:
            validate_password_length(value)
        return value
