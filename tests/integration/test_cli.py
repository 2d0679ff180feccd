"""jotter-admin reset-password: argument parsing, output and exit codes."""

import io

import pytest

from jotter.maintenance.cli import Printer, build_parser, main

pytestmark = pytest.mark.integration


def _run(settings, *args: str) -> tuple[int, str]:
    out = io.StringIO()
    argv = ["--data", str(settings.data_dir), "--mode", settings.mode, "reset-password", *args]
    code = main(argv, stream=out)
    return code, out.getvalue()


def test_reset_by_username(seeded_settings) -> None:
    settings, _ = seeded_settings
    code, output = _run(settings, "--username", "bob", "--password", "n3w-passw0rd")
    assert code == 0
    assert "MAINTENANCE MODE: reset-password" in output
    assert "Resetting password for username bob" in output
    assert "name: users/bob" in output
    assert "SUCCESS: password reset" in output
    assert "n3w-passw0rd" not in output


def test_reset_by_id(seeded_settings) -> None:
    settings, users = seeded_settings
    code, output = _run(settings, "--id", str(users["carol"].id), "--password", "n3w-passw0rd")
    assert code == 0
    assert f"Resetting password for user with id {users['carol'].id}" in output
    assert "username: carol" in output


def test_unknown_id(seeded_settings) -> None:
    settings, _ = seeded_settings
    code, output = _run(settings, "--id", "999", "--password", "n3w-passw0rd")
    assert code == 1
    assert "ERROR: user with id 999 not found" in output
    assert "SUCCESS" not in output


def test_missing_identifier_prints_help(seeded_settings) -> None:
    settings, _ = seeded_settings
    code, output = _run(settings, "--password", "n3w-passw0rd")
    assert code == 2
    assert "ERROR: user id, username or email address is required." in output
    assert "usage: jotter-admin reset-password" in output
    assert "Resetting password for" not in output


def test_blank_password_prints_help(seeded_settings) -> None:
    settings, _ = seeded_settings
    code, output = _run(settings, "--username", "bob", "--password", "   ")
    assert code == 2
    assert "ERROR: password can not be blank." in output


def test_password_too_long(seeded_settings) -> None:
    settings, _ = seeded_settings
    code, output = _run(settings, "--username", "bob", "--password", "p" * 513)
    assert code == 1
    assert "ERROR: password is too long, maximum length is 512" in output
    assert "usage:" not in output


def test_dry_run(seeded_settings) -> None:
    settings, _ = seeded_settings
    code, output = _run(
        settings, "--email", "bob@example.com", "--password", "n3w-passw0rd", "--dry-run"
    )
    assert code == 0
    assert "SUCCESS: dry run, password not changed" in output


def test_invalid_configuration(tmp_path) -> None:
    out = io.StringIO()
    code = main(
        ["--data", str(tmp_path), "--driver", "postgres", "reset-password", "--username", "bob"],
        stream=out,
    )
    assert code == 1
    assert "ERROR: invalid configuration" in out.getvalue()


@pytest.mark.parametrize("value", ["2147483648", "-2147483649", "abc"])
def test_id_must_be_int32(value: str) -> None:
    with pytest.raises(SystemExit) as exc_info:
        build_parser().parse_args(["reset-password", "--id", value])
    assert exc_info.value.code == 2


def test_parser_defaults() -> None:
    args = build_parser().parse_args(["reset-password"])
    assert args.user_id == -1
    assert args.username == ""
    assert args.email == ""
    assert args.password == ""
    assert args.dry_run is False


def test_subcommand_required() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_printer_colors_only_when_asked() -> None:
    plain = io.StringIO()
    Printer(plain).success("done")
    assert plain.getvalue() == "SUCCESS: done\n"

    colored = io.StringIO()
    Printer(colored, color=True).error("bad")
    assert colored.getvalue() == "\033[31mERROR: bad\033[0m\n"


def test_bootstrap_failure_skips_target_line(tmp_path) -> None:
    out = io.StringIO()
    missing = tmp_path / "missing" / "nested"
    code = main(
        ["--data", str(missing), "reset-password", "--username", "bob", "--password", "n3w-pw"],
        stream=out,
    )
    output = out.getvalue()
    assert code == 1
    assert "ERROR: Failed to initialize sqlite driver" in output
    assert "Resetting password for" not in output


def test_undecodable_password(seeded_settings) -> None:
    settings, _ = seeded_settings
    code, output = _run(settings, "--username", "bob", "--password", "\udcff\udcfe\udcfd")
    assert code == 1
    assert "ERROR: password is not valid UTF-8 text." in output
    assert "usage:" not in output


def test_addr_flag_is_accepted(seeded_settings) -> None:
    settings, _ = seeded_settings
    out = io.StringIO()
    code = main(
        [
            "--addr", "127.0.0.1",
            "--data", str(settings.data_dir),
            "--mode", settings.mode,
            "reset-password", "--username", "bob", "--password", "n3w-passw0rd",
        ],
        stream=out,
    )
    assert code == 0
