"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from jotter.domain.enums import RowStatus, UserRole
from jotter.domain.exceptions import (
    AuthorizationException,
    JotterException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    # Enums
    "RowStatus",
    "UserRole",
    # Exceptions
    "AuthorizationException",
    "JotterException",
    "ResourceNotFoundException",
    "ValidationException",
]
