"""Infrastructure exceptions for store bootstrap and storage operations.

Store errors extend JotterException so presentation can map them
to output consistently.
"""

from jotter.domain.exceptions import JotterException


class StoreException(JotterException):
    """A query or write against the store failed at the driver level."""

    def __init__(self, operation: str, reason: str) -> None:
        super().__init__(
            f"Store operation failed: {operation}",
            "STORE_ERROR",
            {"operation": operation, "reason": reason},
        )


class DriverInitException(JotterException):
    """The database driver could not be created or could not open a connection."""

    def __init__(self, driver: str, reason: str) -> None:
        super().__init__(
            f"Failed to initialize {driver} driver: {reason}",
            "DRIVER_INIT_FAILURE",
            {"driver": driver, "reason": reason},
        )


class MigrationException(JotterException):
    """Applying pending schema migrations failed."""

    def __init__(self, reason: str) -> None:
        super().__init__(
            f"Failed to migrate database: {reason}",
            "MIGRATION_FAILURE",
            {"reason": reason},
        )
