"""Persistence models: ORM entities and mixins."""

from jotter.infrastructure.persistence.models.mixins import IntegerIdMixin, TimestampMixin
from jotter.infrastructure.persistence.models.user import User

__all__ = [
    "IntegerIdMixin",
    "TimestampMixin",
    "User",
]
