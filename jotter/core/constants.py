"""Core constants: profile defaults and shared literal values."""

DEFAULT_PORT = 8081

# Ports a maintenance command's service context is shifted by, relative to the server.
MAINTENANCE_PORT_OFFSET = 5

SUPPORTED_MODES = ("prod", "dev", "demo")
SUPPORTED_DRIVERS = ("sqlite", "postgres")

# Resource name prefix for users ("users/<username>").
USER_NAME_PREFIX = "users/"
