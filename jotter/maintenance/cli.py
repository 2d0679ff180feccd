"""Command line entry point for Jotter maintenance commands.

Usage:
    jotter-admin [--mode MODE] [--addr ADDR] [--data DIR] [--driver DRIVER] [--dsn URL] [--port N]
                 reset-password (--id N | --username NAME | --email ADDR) --password PW
                 [--dry-run]

Global flags override JOTTER_* environment variables and .env values.
Exit codes: 0 success, 1 failure, 2 usage error.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from pydantic import ValidationError

from jotter import __version__
from jotter.application.dtos.user import UserResult
from jotter.core.config import Settings
from jotter.core.constants import SUPPORTED_DRIVERS, SUPPORTED_MODES
from jotter.maintenance.reset_password import (
    EXIT_FAILURE,
    ResetPasswordOptions,
    ResetPasswordResult,
    ResetPasswordStage,
    run_reset_password,
)
from jotter.maintenance.resolver import UNSET_ID
from jotter.shared.telemetry.logging import setup_logging

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

GREETING_BANNER = rf"""
     _       _   _
    (_) ___ | |_| |_ ___ _ __
    | |/ _ \| __| __/ _ \ '__|
    | | (_) | |_| ||  __/ |
   _/ |\___/ \__|\__\___|_|
  |__/                  v{__version__}
"""

_RED = "\033[31m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_BOLD = "\033[1m"
_RESET = "\033[0m"

_BEFORE_STORE = frozenset(
    {ResetPasswordStage.VALIDATING_INPUT, ResetPasswordStage.BOOTSTRAPPING}
)


class Printer:
    """Writes command status lines, with ANSI colors when the stream is a TTY."""

    def __init__(self, stream: TextIO, color: bool | None = None) -> None:
        self.stream = stream
        self.color = stream.isatty() if color is None else color

    def _paint(self, code: str, text: str) -> str:
        return f"{code}{text}{_RESET}" if self.color else text

    def line(self, text: str = "") -> None:
        print(text, file=self.stream)

    def bold(self, text: str) -> str:
        return self._paint(_BOLD, text)

    def maintenance(self, command: str) -> None:
        self.line(f"{self._paint(_YELLOW, 'MAINTENANCE MODE:')} {self.bold(command)}")

    def success(self, text: str) -> None:
        self.line(self._paint(_GREEN, f"SUCCESS: {text}"))

    def error(self, text: str) -> None:
        self.line(self._paint(_RED, f"ERROR: {text}"))


def _int32(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if not INT32_MIN <= number <= INT32_MAX:
        raise argparse.ArgumentTypeError(f"{number} is out of range for a 32-bit id")
    return number


def format_user(user: UserResult) -> str:
    """Multi-line description of a user, without any credential."""
    fields = (
        ("name", user.name),
        ("id", user.id),
        ("role", user.role),
        ("username", user.username),
        ("email", user.email),
        ("nickname", user.nickname),
        ("avatar_url", user.avatar_url),
        ("row_status", user.row_status),
        ("created_at", user.created_at.isoformat()),
        ("updated_at", user.updated_at.isoformat()),
    )
    return "\n".join(f"  {key}: {value}" for key, value in fields)


def report_reset_password(
    result: ResetPasswordResult,
    printer: Printer,
    print_help: Callable[[], None],
) -> None:
    """Print the outcome of reset-password."""
    if result.identity is not None and result.stage not in _BEFORE_STORE:
        printer.line(f"Resetting password for {printer.bold(result.identity.describe())}")
    if result.error is not None:
        printer.error(result.error.message)
        if getattr(result.error, "usage_error", False):
            print_help()
        return
    if result.user is not None:
        printer.line(format_user(result.user))
    if result.dry_run:
        printer.success("dry run, password not changed")
    else:
        printer.success("password reset")


def _settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {
        "mode": args.mode,
        "addr": args.addr,
        "data_dir": args.data,
        "driver": args.driver,
        "dsn": args.dsn,
        "port": args.port,
    }
    if args.debug:
        overrides["debug"] = True
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def _cmd_reset_password(args: argparse.Namespace, settings: Settings, printer: Printer) -> int:
    printer.maintenance("reset-password")
    options = ResetPasswordOptions(
        user_id=args.user_id,
        username=args.username,
        email=args.email,
        password=args.password,
        dry_run=args.dry_run,
    )
    result = asyncio.run(run_reset_password(options, settings))
    report_reset_password(result, printer, lambda: args.command_parser.print_help(printer.stream))
    return result.exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jotter-admin",
        description="Jotter maintenance commands. Run against the server's data while it is stopped or isolated.",
    )
    parser.add_argument("--mode", choices=SUPPORTED_MODES, help="profile mode (prod, dev, demo)")
    parser.add_argument("--addr", help="address the server binds to")
    parser.add_argument("--data", help="data directory holding the SQLite database")
    parser.add_argument("--driver", choices=SUPPORTED_DRIVERS, help="database driver")
    parser.add_argument("--dsn", help="database URL; overrides the SQLite file in --data")
    parser.add_argument("--port", type=int, help="port the server listens on")
    parser.add_argument("--debug", action="store_true", help="verbose logging")

    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")
    reset = subparsers.add_parser(
        "reset-password",
        help="Reset password",
        description="Reset password for a supplied user id, username or email address.",
    )
    reset.add_argument("--id", dest="user_id", type=_int32, default=UNSET_ID, help="user id")
    reset.add_argument("--username", default="", help="Username")
    reset.add_argument("--email", default="", help="Email address")
    reset.add_argument("--password", default="", help="New password")
    reset.add_argument(
        "--dry-run",
        action="store_true",
        help="resolve and validate, but do not change the password",
    )
    reset.set_defaults(handler=_cmd_reset_password, command_parser=reset)
    return parser


def main(argv: Sequence[str] | None = None, stream: TextIO | None = None) -> int:
    """Parse argv, run the selected command, and return its exit code."""
    args = build_parser().parse_args(argv)
    printer = Printer(stream or sys.stdout)
    printer.line(GREETING_BANNER)
    try:
        settings = _settings_from_args(args)
    except ValidationError as e:
        printer.error(f"invalid configuration: {e.errors()[0]['msg']}")
        return EXIT_FAILURE
    setup_logging(settings)
    return args.handler(args, settings, printer)


if __name__ == "__main__":
    raise SystemExit(main())
