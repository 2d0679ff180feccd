"""Reset a user's password directly against the store (maintenance mode).

Usage:
    uv run python -m scripts.reset_password --username <name> --password <new_password>
    uv run python -m scripts.reset_password --id <user_id> --password <new_password>
    uv run python -m scripts.reset_password --email <address> --password <new_password>

The profile (data directory, driver, dsn, port) comes from JOTTER_*
environment variables or .env; use `jotter-admin` to pass it as flags.
All imports use jotter.*.
"""

import sys

from jotter.maintenance.cli import main

if __name__ == "__main__":
    sys.exit(main(["reset-password", *sys.argv[1:]]))
