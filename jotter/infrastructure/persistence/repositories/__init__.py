"""Persistence repositories. Re-exports for the Store facade."""

from jotter.infrastructure.persistence.repositories.base import BaseRepository
from jotter.infrastructure.persistence.repositories.user_repo import UserRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
]
