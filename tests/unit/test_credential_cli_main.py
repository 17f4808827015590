from __future__ import annotations

import pytest

from apps.credential_cli import main as cli_main
from apps.credential_cli.main import (
    EXIT_MISMATCH,
    EXIT_OK,
    EXIT_REJECTED,
    build_credential_hasher,
    build_parser,
    run_command,
)
from credential_hasher.application.services.credential_hasher import CredentialHasher
from credential_hasher.config.settings import Settings
from credential_hasher.domain.hash_format import is_argon2_hash
from credential_hasher.infrastructure.security.password_hasher import Argon2PasswordHasher

KNOWN_ARGON2I_HASH = (
    "$argon2i$v=19$m=4096,t=3,p=1$yqdvmjCHT1o+03hbpFg7HQ$Vg3+D9kW9+Nm0+ukCzKNWLb0h8iPQdTkD/HYHrxInhA"
)


def _hasher() -> CredentialHasher:
    return CredentialHasher(
        password_hasher=Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)
    )


@pytest.mark.asyncio
async def test_hash_command_prints_argon2_hash(capsys: pytest.CaptureFixture[str]) -> None:
    args = build_parser().parse_args(["hash", "Turtle123!"])

    exit_code = await run_command(args, hasher=_hasher())

    printed = capsys.readouterr().out.strip()
    assert exit_code == EXIT_OK
    assert is_argon2_hash(printed)
    assert await CredentialHasher.verify("Turtle123!", printed) is True


@pytest.mark.asyncio
@pytest.mark.parametrize("value", ["", KNOWN_ARGON2I_HASH])
async def test_hash_command_rejects_empty_and_already_hashed_values(
    capsys: pytest.CaptureFixture[str],
    value: str,
) -> None:
    args = build_parser().parse_args(["hash", value])

    exit_code = await run_command(args, hasher=_hasher())

    assert exit_code == EXIT_REJECTED
    assert capsys.readouterr().out == ""


@pytest.mark.asyncio
async def test_hash_command_prompts_when_password_omitted(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(cli_main.getpass, "getpass", lambda prompt: "Monkey69!")
    args = build_parser().parse_args(["hash"])

    exit_code = await run_command(args, hasher=_hasher())

    printed = capsys.readouterr().out.strip()
    assert exit_code == EXIT_OK
    assert await CredentialHasher.verify("Monkey69!", printed) is True


@pytest.mark.asyncio
async def test_verify_command_reports_match_and_mismatch(
    capsys: pytest.CaptureFixture[str],
) -> None:
    password_hash = Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1).hash_password(
        "test"
    )
    parser = build_parser()

    match_code = await run_command(
        parser.parse_args(["verify", password_hash, "test"]),
        hasher=_hasher(),
    )
    mismatch_code = await run_command(
        parser.parse_args(["verify", password_hash, "not-the-same"]),
        hasher=_hasher(),
    )
    malformed_code = await run_command(
        parser.parse_args(["verify", "nope", "test"]),
        hasher=_hasher(),
    )

    assert (match_code, mismatch_code, malformed_code) == (EXIT_OK, EXIT_MISMATCH, EXIT_MISMATCH)
    assert capsys.readouterr().out.split() == ["match", "mismatch", "mismatch"]


@pytest.mark.asyncio
async def test_check_command_classifies_values(capsys: pytest.CaptureFixture[str]) -> None:
    parser = build_parser()

    hashed_code = await run_command(
        parser.parse_args(["check", KNOWN_ARGON2I_HASH]),
        hasher=_hasher(),
    )
    plain_code = await run_command(parser.parse_args(["check", "Turtle123!"]), hasher=_hasher())

    assert (hashed_code, plain_code) == (EXIT_OK, EXIT_MISMATCH)
    assert capsys.readouterr().out.split() == ["argon2", "plaintext"]


def test_parser_requires_subcommand() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_build_credential_hasher_uses_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PASSWORD_FIELD", "hash")
    monkeypatch.setenv("ALLOW_EMPTY_PASSWORD", "1")

    hasher = build_credential_hasher(Settings(_env_file=None))

    assert hasher.password_field == "hash"
    assert hasher.options.allow_empty_password is True


def test_main_configures_logging_and_returns_exit_code(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    levels: list[str] = []
    settings = Settings(_env_file=None, LOG_LEVEL="DEBUG")
    monkeypatch.setattr(cli_main, "load_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "configure_logging", lambda *, level: levels.append(level))

    exit_code = cli_main.main(["check", "Turtle123!"])

    assert exit_code == EXIT_MISMATCH
    assert levels == ["DEBUG"]
    assert capsys.readouterr().out.strip() == "plaintext"
