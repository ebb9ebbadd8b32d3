"""Invoice and quotation commands.

Both document kinds share the same commands; ``build_document_group``
creates one click group per kind.
"""

import click
from bizdocs.cli.error_handling import handle_domain_error
from bizdocs.domain.document import DocumentService
from bizdocs.domain.entities import Document, DocumentKind
from bizdocs.domain.errors import ValidationError
from bizdocs.domain.export import export_document_csv, render_document_text
from bizdocs.utils.amount_parser import parse_amount
from bizdocs.utils.date_parser import parse_date
from bizdocs.utils.formatting import format_display_date, format_inr

ITEM_FIELDS = ["name", "quantity", "rate", "gst_rate", "unit"]


def _service(ctx) -> DocumentService:
    return DocumentService(ctx.obj["db"], ctx.obj["session"])


def _parse_optional_date(ctx, value: str | None, label: str):
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def _item_id_at(document: Document, position: int) -> str:
    """Resolve a 1-based item position as shown by 'show'."""
    items = document.ledger.items
    if position < 1 or position > len(items):
        raise ValidationError(f"No line item at position {position} (document has {len(items)})")
    return items[position - 1].id


def _add_items(
    document: Document,
    items: tuple[tuple[str, str, str], ...],
    gst_rate: str | None,
    unit: str | None,
) -> None:
    """Fill line items from NAME QTY RATE triples.

    The blank row a new document starts with is used for the first item.
    """
    ledger = document.ledger
    for name, quantity, rate in items:
        blank = [item for item in ledger if not item.name and item.total == 0]
        item = blank[0] if blank else ledger.add_item()
        ledger.update_item(item.id, "name", name)
        ledger.update_item(item.id, "quantity", quantity)
        ledger.update_item(item.id, "rate", rate)
        if gst_rate is not None:
            ledger.update_item(item.id, "gst_rate", gst_rate)
        if unit is not None:
            ledger.update_item(item.id, "unit", unit)


def _print_totals(document: Document) -> None:
    totals = document.totals()
    click.echo(f"  Subtotal:    {format_inr(totals.sub_total)}")
    click.echo(f"  CGST:        {format_inr(totals.total_cgst)}")
    click.echo(f"  SGST:        {format_inr(totals.total_sgst)}")
    click.echo(f"  Grand Total: {format_inr(totals.grand_total)}")


def build_document_group(kind: DocumentKind) -> click.Group:
    """Create the command group for one document kind."""
    label = kind.value

    def flat_gst_option(func):
        if kind != DocumentKind.INVOICE:
            return func
        return click.option(
            "--flat-gst",
            help="Apply one GST % to the subtotal instead of per-line rates",
        )(func)

    @click.group(name=label, help=f"Manage {label}s.")
    def group():
        pass

    @group.command("create")
    @click.option("--project", "project_id", type=int, required=True, help="Project ID")
    @click.option("--number", default="", help=f"{label.capitalize()} number")
    @click.option("--date", "issue_date", help="Issue date (default: today)")
    @click.option("--due-date", help="Due date (YYYY-MM-DD, or offsets like +30d)")
    @click.option("--signed-date", help="Signed date")
    @click.option("--terms", help="Terms and conditions")
    @click.option(
        "--item",
        "items",
        type=(str, str, str),
        multiple=True,
        metavar="NAME QTY RATE",
        help="Line item; repeat for more items",
    )
    @click.option("--gst-rate", help="GST % for the given items (default: profile rate)")
    @click.option("--unit", help="Unit label for the given items (e.g. Nos, Kg)")
    @flat_gst_option
    @click.pass_context
    def create_document(
        ctx,
        project_id: int,
        number: str,
        issue_date: str | None,
        due_date: str | None,
        signed_date: str | None,
        terms: str | None,
        items: tuple,
        gst_rate: str | None,
        unit: str | None,
        flat_gst: str | None = None,
    ):
        """Create and save a document.

        Examples:
            bizdocs invoice create --project 1 --number INV-001 --item "Cement" 3 100
            bizdocs quotation create --project 1 --item "Tiles" 40 55 --unit Sqft --gst-rate 12
        """
        service = _service(ctx)
        issued = _parse_optional_date(ctx, issue_date, "date")
        due = _parse_optional_date(ctx, due_date, "due date")
        signed = _parse_optional_date(ctx, signed_date, "signed date")

        try:
            document = service.new_document(kind, project_id=project_id)
            document.document_number = number
            if issued is not None:
                document.issue_date = issued
            document.due_date = due
            document.signed_date = signed
            if terms is not None:
                document.terms_and_conditions = terms
            if flat_gst is not None:
                document.gst_percentage = parse_amount(flat_gst)
            _add_items(document, items, gst_rate, unit)
            document_id = service.save_document(document)
        except ValueError as e:
            handle_domain_error(ctx, e)

        click.echo(f"Created {label} {document_id}")
        _print_totals(document)

    @group.command("edit")
    @click.argument("document_id", type=int)
    @click.option("--project", "project_id", type=int, help="Move to another project")
    @click.option("--number", help=f"{label.capitalize()} number")
    @click.option("--date", "issue_date", help="Issue date")
    @click.option("--due-date", help="Due date")
    @click.option("--signed-date", help="Signed date")
    @click.option("--terms", help="Terms and conditions")
    @click.option(
        "--set",
        "changes",
        type=(int, click.Choice(ITEM_FIELDS), str),
        multiple=True,
        metavar="POS FIELD VALUE",
        help="Change a field of the item at position POS",
    )
    @click.option(
        "--add-item",
        "items",
        type=(str, str, str),
        multiple=True,
        metavar="NAME QTY RATE",
        help="Append a line item",
    )
    @click.option("--remove-item", "removals", type=int, multiple=True, metavar="POS", help="Remove the item at POS")
    @click.option("--gst-rate", help="GST % for added items")
    @click.option("--unit", help="Unit label for added items")
    @flat_gst_option
    @click.pass_context
    def edit_document(
        ctx,
        document_id: int,
        project_id: int | None,
        number: str | None,
        issue_date: str | None,
        due_date: str | None,
        signed_date: str | None,
        terms: str | None,
        changes: tuple,
        items: tuple,
        removals: tuple,
        gst_rate: str | None,
        unit: str | None,
        flat_gst: str | None = None,
    ):
        """Edit a saved document and save it again.

        Item positions refer to the numbering shown by 'show' before the edit.

        Examples:
            bizdocs invoice edit 3 --set 1 rate 120 --add-item "Sand" 2 900
            bizdocs quotation edit 2 --remove-item 2
        """
        service = _service(ctx)
        issued = _parse_optional_date(ctx, issue_date, "date")
        due = _parse_optional_date(ctx, due_date, "due date")
        signed = _parse_optional_date(ctx, signed_date, "signed date")

        try:
            document = service.load_document(kind, document_id)
            if project_id is not None:
                service.apply_project(document, project_id)
            if number is not None:
                document.document_number = number
            if issued is not None:
                document.issue_date = issued
            if due is not None:
                document.due_date = due
            if signed is not None:
                document.signed_date = signed
            if terms is not None:
                document.terms_and_conditions = terms
            if flat_gst is not None:
                document.gst_percentage = parse_amount(flat_gst)

            edits = [(_item_id_at(document, pos), field, value) for pos, field, value in changes]
            removed = [_item_id_at(document, pos) for pos in removals]
            for item_id, field, value in edits:
                document.ledger.update_item(item_id, field, value)
            _add_items(document, items, gst_rate, unit)
            for item_id in dict.fromkeys(removed):
                document.ledger.remove_item(item_id)

            service.save_document(document)
        except ValueError as e:
            handle_domain_error(ctx, e)

        click.echo(f"Updated {label} {document_id}")
        _print_totals(document)

    @group.command("list")
    @click.option("--project", "project_id", type=int, help="Only this project's documents")
    @click.pass_context
    def list_documents(ctx, project_id: int | None):
        """List saved documents, newest first."""
        summaries = _service(ctx).list_documents(kind, project_id=project_id)
        if not summaries:
            click.echo(f"No {label}s found.")
            return

        click.echo(f"\n{label.capitalize()}s:")
        click.echo("-" * 78)
        for summary in summaries:
            click.echo(
                f"ID: {summary.id:3d} | {summary.document_number or '-':12s} | "
                f"{format_display_date(summary.issue_date):11s} | "
                f"{summary.recipient_name[:22]:22s} | {format_inr(summary.grand_total):>14s}"
            )

    @group.command("show")
    @click.argument("document_id", type=int)
    @click.pass_context
    def show_document(ctx, document_id: int):
        """Print a document."""
        try:
            document = _service(ctx).load_document(kind, document_id)
        except ValueError as e:
            handle_domain_error(ctx, e)
        click.echo(render_document_text(document))

    @group.command("export")
    @click.argument("document_id", type=int)
    @click.option(
        "--output", "-o", default="-", type=click.Path(dir_okay=False, allow_dash=True),
        help="CSV file to write (default: stdout)",
    )
    @click.pass_context
    def export_document(ctx, document_id: int, output: str):
        """Export a document as CSV."""
        try:
            document = _service(ctx).load_document(kind, document_id)
        except ValueError as e:
            handle_domain_error(ctx, e)

        with click.open_file(output, "w", encoding="utf-8") as stream:
            export_document_csv(document, stream)
        if output != "-":
            click.echo(f"Exported {label} {document_id} to {output}")

    @group.command("delete")
    @click.argument("document_id", type=int)
    @click.option("--yes", is_flag=True, help="Do not ask for confirmation")
    @click.pass_context
    def delete_document(ctx, document_id: int, yes: bool):
        """Delete a saved document."""
        service = _service(ctx)
        if not yes and not click.confirm(
            f"Are you sure you want to delete this {label} record (ID: {document_id})?"
        ):
            click.echo("Deletion cancelled.")
            return

        try:
            service.delete_document(kind, document_id)
        except ValueError as e:
            handle_domain_error(ctx, e)
        click.echo(f"{label.capitalize()} deleted successfully!")

    return group


def register_commands(cli):
    """Register invoice and quotation commands with main CLI."""
    for kind in DocumentKind:
        cli.add_command(build_document_group(kind))
