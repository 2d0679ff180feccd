"""Maintenance commands run against the store outside the request-serving process."""
