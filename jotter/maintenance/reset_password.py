"""reset-password maintenance command: force a user's password from the store side.

The command runs outside the server: it bootstraps its own store (driver,
migrations), builds a service context on a shifted port, resolves the
target user, applies the legacy v1 password check, and then updates the
password through the user service with a mask of exactly {"password"}.

There is no lock against a running server. If the server writes the same
user concurrently, the last write wins.

run_reset_password never raises for expected failures; it returns a
ResetPasswordResult that records the stage reached and the error. The CLI
in jotter.maintenance.cli turns that into output and an exit code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sqlalchemy.exc import SQLAlchemyError

from jotter.application.context import ServiceContext
from jotter.application.dtos.user import FindUser, UpdateUserRequest, UserResult
from jotter.core.config import Settings
from jotter.core.constants import USER_NAME_PREFIX
from jotter.domain.exceptions import JotterException
from jotter.infrastructure.persistence.bootstrap import bootstrap_store
from jotter.maintenance.exceptions import (
    InvalidInputException,
    MaintenanceException,
    MissingPasswordException,
    UserNotFoundException,
    UserUpdateException,
)
from jotter.maintenance.legacy import validate_legacy_password
from jotter.maintenance.resolver import (
    UNSET_ID,
    UserIdentity,
    resolve_username,
    select_identity,
)
from jotter.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

PASSWORD_MASK = frozenset({"password"})

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class ResetPasswordStage(str, Enum):
    """Where the command was when it finished."""

    VALIDATING_INPUT = "validating_input"
    BOOTSTRAPPING = "bootstrapping"
    RESOLVING = "resolving"
    VALIDATING = "validating"
    UPDATING = "updating"
    REPORTING = "reporting"


@dataclass(frozen=True)
class ResetPasswordOptions:
    """Operator input, as parsed from the command line."""

    user_id: int = UNSET_ID
    username: str = ""
    email: str = ""
    password: str = ""
    dry_run: bool = False


@dataclass(frozen=True)
class ResetPasswordResult:
    """Outcome of one run. error is None on success."""

    stage: ResetPasswordStage
    identity: UserIdentity | None = None
    user: UserResult | None = None
    error: JotterException | None = None
    dry_run: bool = False

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def exit_code(self) -> int:
        """0 on success, 2 for usage errors, 1 for every other failure."""
        if self.error is None:
            return EXIT_SUCCESS
        if isinstance(self.error, MaintenanceException) and self.error.usage_error:
            return EXIT_USAGE
        return EXIT_FAILURE


async def apply_password_reset(
    services: ServiceContext, username: str, password: str
) -> UserResult:
    """Set username's password through the user service, touching no other field.

    The target username is also the acting user, so the service authorizes
    the change as a self-update.

    Raises:
        UserUpdateException: the service or the store rejected the update.
    """
    request = UpdateUserRequest(
        name=f"{USER_NAME_PREFIX}{username}",
        update_mask=PASSWORD_MASK,
        password=password,
    )
    try:
        return await services.users.update_user(request, acting_as_username=username)
    except (JotterException, SQLAlchemyError) as e:
        logger.error("failed to reset password: %s", e)
        raise UserUpdateException(username, e) from e


def _is_utf8(value: str) -> bool:
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def _check_input(options: ResetPasswordOptions) -> UserIdentity:
    identity = select_identity(options.user_id, options.username, options.email)
    if not options.password.strip():
        raise MissingPasswordException()
    for option, value in (
        ("username", options.username),
        ("email", options.email),
        ("password", options.password),
    ):
        if not _is_utf8(value):
            raise InvalidInputException(option)
    return identity


async def run_reset_password(
    options: ResetPasswordOptions, settings: Settings
) -> ResetPasswordResult:
    """Run the command once, start to finish; no step is retried.

    Input checks happen before any storage access. The service context is
    shut down on every path once it exists.
    """
    stage = ResetPasswordStage.VALIDATING_INPUT
    identity: UserIdentity | None = None
    try:
        identity = _check_input(options)
        stage = ResetPasswordStage.BOOTSTRAPPING
        maintenance_settings = settings.with_port_offset()
        store = await bootstrap_store(maintenance_settings)
    except JotterException as e:
        return ResetPasswordResult(stage=stage, identity=identity, error=e)

    logger.info("Resetting password for %s", identity.describe())
    async with ServiceContext(maintenance_settings, store) as services:
        try:
            stage = ResetPasswordStage.RESOLVING
            username = await resolve_username(identity, services.store)

            stage = ResetPasswordStage.VALIDATING
            validate_legacy_password(options.password)

            if options.dry_run:
                user = await services.store.get_user(FindUser(username=username))
                if user is None:
                    raise UserNotFoundException("username", username)
                return ResetPasswordResult(
                    stage=ResetPasswordStage.REPORTING,
                    identity=identity,
                    user=user,
                    dry_run=True,
                )

            stage = ResetPasswordStage.UPDATING
            user = await apply_password_reset(services, username, options.password)
        except JotterException as e:
            return ResetPasswordResult(stage=stage, identity=identity, error=e)

    return ResetPasswordResult(
        stage=ResetPasswordStage.REPORTING, identity=identity, user=user
    )
