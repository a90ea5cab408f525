"""CLI adapter to create a new account on a NEAR-style network.

This module wires the CreateAccountUseCase to the configured network client
and key store and exposes it as the ``create_account`` command.

A naming rejection exits with a non-zero status instead of the silent
success of older tooling, so scripts can tell a no-op from a creation.
"""

import asyncio
from typing import Optional

import typer

from near_accounts.domain.models.outcomes import Rejected
from near_accounts.domain.models.provisioning import (
    ProvisionErrorKind,
    ProvisionResult,
)
from near_accounts.domain.services.validation import NamingValidator
from near_accounts.infrastructure.container import (
    build_create_account_use_case,
)
from near_accounts.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from near_accounts.infrastructure.settings import NearSettings
from near_accounts.utils.amounts import parse_near_amount


EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_CREATION_FAILED = 2
EXIT_PERSISTENCE_FAILED = 3
EXIT_INVALID_INPUT = 4

_EXIT_CODES = {
    ProvisionErrorKind.INVALID_NAME: EXIT_REJECTED,
    ProvisionErrorKind.CREATION_FAILED: EXIT_CREATION_FAILED,
    ProvisionErrorKind.PERSISTENCE_FAILED: EXIT_PERSISTENCE_FAILED,
}

app = typer.Typer(
    no_args_is_help=True,
    help="Create named accounts on NEAR-style networks.",
)


@app.callback()
def cli() -> None:
    """Account management commands."""


def _fail(message: str, code: int) -> None:
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=code)


def report_result(result: ProvisionResult, logger, usage_logger) -> int:
    """Print the outcome of a provisioning run and return its exit code.

    Args:
        result: Result returned by the use case.
        logger: Application logger.
        usage_logger: Usage logger recording one line per request.

    Returns:
        int: Process exit code for the result.
    """
    usage_logger.info(
        f"create_account network={result.network_id} "
        f"account={result.account_id} state={result.state.value}"
    )
    if result.warning:
        typer.echo(f"NOTE: {result.warning}")
        logger.warning(result.warning)

    if result.ok:
        typer.echo(
            f'Account {result.account_id} for network "{result.network_id}" '
            "was created."
        )
        logger.info(f"Created {result.account_id} on {result.network_id}")
        return EXIT_OK

    error = result.error
    typer.secho(error.message, err=True, fg=typer.colors.RED)
    if error.kind is ProvisionErrorKind.PERSISTENCE_FAILED:
        logger.critical(error.message)
        if error.key_pair is not None:
            typer.secho(
                "The account exists but its key was NOT saved. Store these "
                "keys now, they cannot be recovered later:\n"
                f"  public_key:  {error.key_pair.public_key}\n"
                f"  private_key: {error.key_pair.secret_key}",
                err=True,
                fg=typer.colors.RED,
                bold=True,
            )
    elif error.kind is ProvisionErrorKind.CREATION_FAILED:
        reason = error.reason.value if error.reason else "unknown"
        logger.error(f"Creation of {result.account_id} failed ({reason})")
    else:
        logger.info(f"Rejected account name {result.account_id}")
    return _EXIT_CODES[error.kind]


@app.command("create_account")
def create_account(
    account_id: str = typer.Argument(
        ...,
        help="Unique identifier for the newly created account",
    ),
    master_account: str = typer.Option(
        ...,
        "--master-account",
        "--masterAccount",
        help="Account used to create requested account.",
    ),
    public_key: Optional[str] = typer.Option(
        None,
        "--public-key",
        "--publicKey",
        help="Public key to initialize the account with",
    ),
    initial_balance: str = typer.Option(
        "100",
        "--initial-balance",
        "--initialBalance",
        help="Number of tokens to transfer to newly created account",
    ),
    network_id: Optional[str] = typer.Option(
        None,
        "--network-id",
        "--networkId",
        help="Network to use; defaults to NEAR_ENV or 'default'.",
    ),
) -> None:
    """Create a new developer account (subaccount of the masterAccount).

    Example: app.alice.test created by alice.test.
    """
    logger = get_app_logger()
    usage_logger = get_usage_logger()

    if not account_id:
        _fail("Account id must be a non-empty string.", EXIT_INVALID_INPUT)
    try:
        amount = parse_near_amount(initial_balance)
    except ValueError as exc:
        _fail(str(exc), EXIT_INVALID_INPUT)

    settings = NearSettings.from_env(network_id=network_id)

    # Rejected names never need a network client or key store.
    outcome = NamingValidator().validate(
        account_id,
        master_account,
        settings.network_id,
    )
    if isinstance(outcome, Rejected):
        result = ProvisionResult.rejected(
            account_id,
            settings.network_id,
            outcome.message,
        )
        raise typer.Exit(code=report_result(result, logger, usage_logger))

    try:
        use_case = build_create_account_use_case(
            settings,
            initial_balance=amount,
        )
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        _fail(str(exc), EXIT_INVALID_INPUT)

    result = asyncio.run(
        use_case.execute(
            account_id=account_id,
            master_account_id=master_account,
            network_id=settings.network_id,
            public_key=public_key,
        )
    )

    exit_code = report_result(result, logger, usage_logger)
    if exit_code != EXIT_OK:
        raise typer.Exit(code=exit_code)


def main() -> None:
    """Run the command-line application."""
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
