"""CSV export and printable text rendering of documents.

Both consume a document's current totals and round only here.
"""

import csv
from decimal import Decimal
from typing import TextIO

from bizdocs.domain.entities import Document, DocumentKind
from bizdocs.utils.formatting import format_display_date, format_inr, round_money

ITEM_COLUMNS = ["#", "Item", "Quantity", "Unit", "Rate", "GST %", "Amount", "CGST", "SGST", "Total"]

TITLES = {
    DocumentKind.INVOICE: "INVOICE",
    DocumentKind.QUOTATION: "QUOTATION",
}


def _plain(value: Decimal) -> str:
    """Decimal without trailing zeros or exponent, e.g. 18.0 -> 18."""
    return f"{value.normalize():f}"


def export_document_csv(document: Document, stream: TextIO) -> None:
    """Write a document as CSV: header fields, item rows, then totals."""
    writer = csv.writer(stream, lineterminator="\n")
    totals = document.totals()
    title = TITLES[document.kind].capitalize()

    writer.writerow([f"{title} Number", document.document_number])
    writer.writerow([f"{title} Date", document.issue_date.isoformat()])
    if document.due_date is not None:
        writer.writerow(["Due Date", document.due_date.isoformat()])
    writer.writerow(["From", document.issuer.name])
    writer.writerow(["To", document.recipient.name])
    writer.writerow([])

    writer.writerow(ITEM_COLUMNS)
    for position, item in enumerate(document.ledger, start=1):
        writer.writerow(
            [
                position,
                item.name,
                _plain(item.quantity),
                item.unit if document.kind == DocumentKind.QUOTATION else "",
                round_money(item.rate),
                _plain(item.gst_rate),
                round_money(item.amount),
                round_money(item.cgst),
                round_money(item.sgst),
                round_money(item.total),
            ]
        )
    writer.writerow([])

    writer.writerow(["Subtotal", round_money(totals.sub_total)])
    if document.uses_flat_gst:
        writer.writerow(["GST %", _plain(document.gst_percentage)])
    writer.writerow(["CGST", round_money(totals.total_cgst)])
    writer.writerow(["SGST", round_money(totals.total_sgst)])
    writer.writerow(["Grand Total", round_money(totals.grand_total)])


def _party_lines(label: str, party) -> list[str]:
    lines = [f"{label}: {party.name}"]
    if party.address:
        lines.append(f"  {party.address}")
    if party.contact_number:
        lines.append(f"  Phone: {party.contact_number}")
    if party.gst_number:
        lines.append(f"  GSTIN: {party.gst_number}")
    return lines


def render_document_text(document: Document, width: int = 78) -> str:
    """Render a printable plain-text layout of a document."""
    totals = document.totals()
    rule = "-" * width
    lines = [TITLES[document.kind].center(width), rule]

    lines.append(f"No: {document.document_number or '(unnumbered)'}")
    lines.append(f"Date: {format_display_date(document.issue_date)}")
    if document.due_date is not None:
        lines.append(f"Due Date: {format_display_date(document.due_date)}")
    lines.append("")
    lines.extend(_party_lines("From", document.issuer))
    lines.extend(_party_lines("To", document.recipient))
    lines.append(rule)

    lines.append(f"{'#':>3}  {'Item':<26} {'Qty':>7} {'Rate':>12} {'GST':>12} {'Amount':>12}")
    lines.append(rule)
    for position, item in enumerate(document.ledger, start=1):
        quantity = _plain(item.quantity)
        if document.kind == DocumentKind.QUOTATION and item.unit:
            quantity = f"{quantity} {item.unit}"
        lines.append(
            f"{position:>3}  {item.name[:26]:<26} {quantity:>7} "
            f"{format_inr(item.rate):>12} {format_inr(item.tax_amount):>12} "
            f"{format_inr(item.total):>12}"
        )
        lines.append(f"{'':>5}{'':<26} {'':>7} {'':>12} {f'({_plain(item.gst_rate)}%)':>12}")
    lines.append(rule)

    label_width = width - 16
    lines.append(f"{'Subtotal:':>{label_width}} {format_inr(totals.sub_total):>15}")
    if document.uses_flat_gst:
        lines.append(f"{f'GST @ {_plain(document.gst_percentage)}%':>{label_width}}")
    lines.append(f"{'CGST:':>{label_width}} {format_inr(totals.total_cgst):>15}")
    lines.append(f"{'SGST:':>{label_width}} {format_inr(totals.total_sgst):>15}")
    lines.append(f"{'Grand Total:':>{label_width}} {format_inr(totals.grand_total):>15}")

    if document.terms_and_conditions:
        lines.extend(["", "Terms & Conditions:", document.terms_and_conditions])
    if document.signed_date is not None:
        lines.append(f"Signed: {format_display_date(document.signed_date)}")
    lines.extend(["", "Authorized Signatory".rjust(width)])
    return "\n".join(lines)
