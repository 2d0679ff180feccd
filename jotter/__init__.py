"""Jotter: self-hosted notes server (storage, user services, maintenance commands)."""

__version__ = "0.1.0"
