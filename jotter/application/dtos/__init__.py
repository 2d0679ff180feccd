"""Application DTOs (no ORM dependency)."""

from jotter.application.dtos.user import FindUser, UpdateUser, UpdateUserRequest, UserResult

__all__ = [
    "FindUser",
    "UpdateUser",
    "UpdateUserRequest",
    "UserResult",
]
