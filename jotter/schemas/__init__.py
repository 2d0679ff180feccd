"""Pydantic request schemas kept for clients of the v1 API."""

from jotter.schemas.legacy import LegacyUpdateUserRequest

__all__ = ["LegacyUpdateUserRequest"]
