"""Transaction commands."""

import click

from twinfield.cli.error_handling import handle_domain_error
from twinfield.connectors.transaction import TransactionApiConnector
from twinfield.domain.entities import Office


@click.group()
def transaction_group():
    """Read transactions."""
    pass


@transaction_group.command("get")
@click.argument("code", metavar="DAYBOOK")
@click.argument("number", metavar="NUMBER")
@click.option("--office", required=True, help="Office code")
@click.pass_context
def get_transaction(ctx, code: str, number: str, office: str):
    """Show a single transaction and its lines."""
    connector = TransactionApiConnector(ctx.obj["transport"])

    try:
        transaction = connector.get(code, number, Office(code=office))
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"\nTransaction {transaction.code}/{transaction.number}")
    click.echo("-" * 60)
    if transaction.date is not None:
        click.echo(f"Date: {transaction.date.isoformat()}")
    for line in transaction.lines:
        signed = line.signed_value
        amount = f"{signed.amount:.2f} {signed.currency}" if signed is not None else "-"
        click.echo(
            f"{line.id or '-':>3s} | {line.line_type.value:6s} | {line.dim1 or '':10s} | "
            f"{line.description or '':40s} | {amount}"
        )


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
