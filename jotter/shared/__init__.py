"""Shared utilities: telemetry and cross-cutting helpers.

Used by application, infrastructure, and maintenance commands. No business logic.
"""
