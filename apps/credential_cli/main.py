"""credential-hasher command-line entrypoint."""

from __future__ import annotations

import argparse
import asyncio
import getpass
import logging
import sys
from collections.abc import Sequence

from credential_hasher.application.services.credential_hasher import CredentialHasher
from credential_hasher.config.settings import Settings, load_settings
from credential_hasher.domain.errors import ValidationError
from credential_hasher.domain.hash_format import is_argon2_hash
from credential_hasher.infrastructure.logging import configure_logging
from credential_hasher.infrastructure.security.password_hasher import Argon2PasswordHasher

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_REJECTED = 2


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser for the hash/verify/check subcommands."""

    parser = argparse.ArgumentParser(
        prog="credential-hasher",
        description="Hash and verify Argon2 password credentials.",
    )
    subcommands = parser.add_subparsers(dest="command", required=True)

    hash_parser = subcommands.add_parser("hash", help="print the Argon2 hash of a password")
    hash_parser.add_argument("password", nargs="?", help="plaintext; prompted when omitted")

    verify_parser = subcommands.add_parser("verify", help="check a password against a hash")
    verify_parser.add_argument("password_hash", metavar="HASH")
    verify_parser.add_argument("password", nargs="?", help="plaintext; prompted when omitted")

    check_parser = subcommands.add_parser("check", help="report whether VALUE is an Argon2 hash")
    check_parser.add_argument("value", metavar="VALUE")

    return parser


def build_credential_hasher(settings: Settings) -> CredentialHasher:
    """Compose the credential hasher from runtime settings."""

    return CredentialHasher(
        options=settings.to_options(),
        password_hasher=Argon2PasswordHasher.from_settings(settings),
    )


async def run_command(args: argparse.Namespace, *, hasher: CredentialHasher) -> int:
    """Execute one parsed subcommand and return the process exit status."""

    if args.command == "check":
        recognized = is_argon2_hash(args.value)
        print("argon2" if recognized else "plaintext")
        return EXIT_OK if recognized else EXIT_MISMATCH

    password = args.password if args.password is not None else getpass.getpass("Password: ")

    if args.command == "hash":
        record = {hasher.password_field: password}
        try:
            await hasher.before_create(record)
        except ValidationError as error:
            logger.error("credential_rejected field=%s reason=%s", error.field, error)
            return EXIT_REJECTED
        print(record[hasher.password_field] or "")
        return EXIT_OK

    matches = await hasher.verify_with(password, args.password_hash)
    print("match" if matches else "mismatch")
    return EXIT_OK if matches else EXIT_MISMATCH


def main(argv: Sequence[str] | None = None) -> int:
    """Run credential-hasher CLI."""

    settings = load_settings()
    configure_logging(level=settings.log_level)
    args = build_parser().parse_args(argv)
    return asyncio.run(run_command(args, hasher=build_credential_hasher(settings)))


if __name__ == "__main__":
    sys.exit(main())
