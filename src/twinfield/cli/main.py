"""Main CLI entry point."""

import logging

import click

from twinfield.cli.commands import invoice, transaction
from twinfield.cli.error_handling import handle_domain_error
from twinfield.domain.errors import DomainError
from twinfield.transport.factories import create_http_transport


@click.group()
@click.option(
    "--cluster",
    help="Cluster base URL (overrides TWINFIELD_CLUSTER environment variable)",
    envvar="TWINFIELD_CLUSTER",
)
@click.option(
    "--access-token",
    help="OAuth2 access token (overrides TWINFIELD_ACCESS_TOKEN environment variable)",
    envvar="TWINFIELD_ACCESS_TOKEN",
)
@click.option(
    "--company-code",
    help="Office code for the session (overrides TWINFIELD_COMPANY_CODE environment variable)",
    envvar="TWINFIELD_COMPANY_CODE",
)
@click.option("--verbose", "-v", is_flag=True, help="Log requests to stderr")
@click.pass_context
def cli(ctx, cluster: str | None, access_token: str | None, company_code: str | None, verbose: bool):
    """Twinfield - read and send invoices and transactions."""
    ctx.ensure_object(dict)

    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # Only connect when a command runs (not when showing help), and keep a
    # transport injected by the caller
    if ctx.invoked_subcommand is not None and "transport" not in ctx.obj:
        try:
            ctx.obj["transport"] = create_http_transport(
                cluster=cluster, access_token=access_token, company_code=company_code
            )
        except DomainError as e:
            handle_domain_error(ctx, e)


# Register all commands
invoice.register_commands(cli)
transaction.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
