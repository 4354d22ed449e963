"""CLI error handling helpers."""

import click

from twinfield.domain.errors import DomainError, ServiceError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure.

    Plain ValueErrors come from response data that could not be mapped.

    Service rejections list each message the service returned on its own line.
    """
    if isinstance(error, ServiceError) and error.messages:
        click.echo("Error: request was rejected by the service", err=True)
        for message in error.messages:
            click.echo(f"  - {message}", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
