"""Infrastructure layer: persistence, security, and storage-level errors."""
