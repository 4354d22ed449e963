"""Sales invoice commands."""

import click
from lxml import etree

from twinfield.cli.error_handling import handle_domain_error
from twinfield.connectors.invoice import InvoiceApiConnector
from twinfield.domain.entities import Money, Office
from twinfield.domain.invoice import Invoice
from twinfield.wire.mappers import map_invoice


def _money(value: Money | None) -> str:
    if value is None:
        return "-"
    return f"{value.amount:.2f} {value.currency}".strip()


def print_invoice(invoice: Invoice) -> None:
    """Print invoice header, lines and totals."""
    click.echo(f"\nInvoice {invoice.invoice_type}/{invoice.invoice_number or '(new)'}")
    click.echo("-" * 60)
    click.echo(f"Office:   {invoice.office.code}")
    click.echo(f"Customer: {invoice.customer}")
    if invoice.status is not None:
        click.echo(f"Status:   {invoice.status.value}")
    if invoice.invoice_date is not None:
        click.echo(f"Date:     {invoice.invoice_date.isoformat()}")
    if invoice.due_date is not None:
        click.echo(f"Due:      {invoice.due_date.isoformat()}")

    if invoice.lines:
        click.echo("\nLines:")
        for line in invoice.lines:
            click.echo(
                f"{line.id or '-':>3s} | {line.article or '':10s} | "
                f"{line.description or '':40s} | {_money(line.value_inc or line.units_price_excl)}"
            )

    if invoice.totals is not None:
        click.echo(f"\nTotal excl. VAT: {_money(invoice.totals.value_excl)}")
        click.echo(f"Total incl. VAT: {_money(invoice.totals.value_inc)}")


@click.group()
def invoice_group():
    """Read and send sales invoices."""
    pass


@invoice_group.command("get")
@click.argument("code", metavar="INVOICE_TYPE")
@click.argument("number", metavar="INVOICE_NUMBER")
@click.option("--office", required=True, help="Office code")
@click.pass_context
def get_invoice(ctx, code: str, number: str, office: str):
    """Show a single invoice.

    Examples:
        twinfield invoice get FACTUUR 201900011 --office NLA000001
    """
    connector = InvoiceApiConnector(ctx.obj["transport"])

    try:
        invoice = connector.get(code, number, Office(code=office))
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    print_invoice(invoice)


@invoice_group.command("send")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def send_invoice(ctx, file: str):
    """Send the invoice(s) in an XML file.

    FILE holds a <salesinvoice> element, or several of them wrapped in
    <salesinvoices>.
    """
    connector = InvoiceApiConnector(ctx.obj["transport"])

    try:
        root = etree.parse(file).getroot()
    except etree.XMLSyntaxError as e:
        click.echo(f"Error: Could not parse {file}: {e}", err=True)
        ctx.exit(1)
        return

    elements = [root] if root.tag == "salesinvoice" else root.findall("salesinvoice")
    try:
        invoices = [map_invoice(element) for element in elements]
        connector.send_all(invoices)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Sent {len(invoices)} invoice{'s' if len(invoices) != 1 else ''}")


def register_commands(cli):
    """Register invoice commands with main CLI."""
    cli.add_command(invoice_group, name="invoice")
