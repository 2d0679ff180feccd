"""Application interfaces (ports)."""

from jotter.application.interfaces.repositories import IUserStore

__all__ = ["IUserStore"]
