"""CLI commands for the signed-in customer."""

from __future__ import annotations

import click

from productor.application.sign_in import SignInHandler, SignOutHandler
from productor.domain.exceptions import DomainException
from productor.infrastructure.bootstrap import session_repository


@click.command("sign-in")
@click.option("--email", required=True, help="Customer email address.")
def account_sign_in(email: str) -> None:
    """Record the customer placing the order."""
    handler = SignInHandler(session_repo=session_repository())

    try:
        email = handler.handle(email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Signed in as {email}.")


@click.command("sign-out")
def account_sign_out() -> None:
    """Forget the signed-in customer."""
    SignOutHandler(session_repo=session_repository()).handle()
    click.echo("Signed out.")
