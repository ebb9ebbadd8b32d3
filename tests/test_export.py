"""Tests for CSV export and text rendering."""

import csv
import io
from datetime import date
from decimal import Decimal

from bizdocs.domain.entities import Document, DocumentKind, Party
from bizdocs.domain.export import ITEM_COLUMNS, export_document_csv, render_document_text
from bizdocs.domain.ledger import LineItem, LineItemLedger
from bizdocs.domain.wire import document_from_wire, document_to_wire


def make_document(kind=DocumentKind.INVOICE, **overrides):
    ledger = LineItemLedger(
        [
            LineItem(id="a", name="Cement", quantity=Decimal("3"), rate=Decimal("100"), unit="Bags"),
            LineItem(id="b", name="Labour", quantity=Decimal("1"), rate=Decimal("100")),
        ]
    )
    fields = dict(
        kind=kind,
        ledger=ledger,
        document_number="INV-001",
        issuer=Party(name="Acme Builders", address="Chennai", gst_number="33AAA"),
        recipient=Party(name="Sri Ram Constructions", contact_number="98765"),
        issue_date=date(2024, 1, 15),
        terms_and_conditions="Net 30",
    )
    fields.update(overrides)
    return Document(**fields)


def read_rows(document):
    stream = io.StringIO()
    export_document_csv(document, stream)
    return list(csv.reader(io.StringIO(stream.getvalue())))


def test_export_invoice_csv():
    """Test header, item and total rows of an invoice."""
    rows = read_rows(make_document(due_date=date(2024, 2, 14)))

    assert rows[0] == ["Invoice Number", "INV-001"]
    assert rows[1] == ["Invoice Date", "2024-01-15"]
    assert rows[2] == ["Due Date", "2024-02-14"]
    assert rows[3] == ["From", "Acme Builders"]
    assert rows[4] == ["To", "Sri Ram Constructions"]
    assert rows[5] == []
    assert rows[6] == ITEM_COLUMNS
    assert rows[7] == ["1", "Cement", "3", "", "100.00", "18", "300.00", "27.00", "27.00", "354.00"]
    assert rows[8][1] == "Labour"
    assert rows[-4:] == [
        ["Subtotal", "400.00"],
        ["CGST", "36.00"],
        ["SGST", "36.00"],
        ["Grand Total", "472.00"],
    ]


def test_export_quotation_csv_includes_unit():
    """Test quotation rows carry the unit."""
    rows = read_rows(make_document(kind=DocumentKind.QUOTATION))
    assert rows[0] == ["Quotation Number", "INV-001"]
    assert rows[6][3] == "Bags"


def test_export_flat_gst_csv():
    """Test the GST percentage row of a flat-GST invoice."""
    rows = read_rows(make_document(gst_percentage=Decimal("5")))
    assert ["GST %", "5"] in rows
    assert rows[-1] == ["Grand Total", "420.00"]


def test_export_numbers_without_trailing_zeros():
    """Test a reloaded document exports the same quantity and GST rate text."""
    ledger = LineItemLedger(
        [LineItem(id="a", name="Cement", quantity=Decimal("1.0"), rate=Decimal("100"), gst_rate=Decimal("18.0"))]
    )
    rows = read_rows(make_document(ledger=ledger, gst_percentage=Decimal("5.00")))

    assert rows[6][2] == "1"
    assert rows[6][5] == "18"
    assert ["GST %", "5"] in rows


def test_export_reloaded_document_matches():
    """Test that a wire round trip does not change the exported rows."""
    document = make_document()
    restored = document_from_wire(DocumentKind.INVOICE, document_to_wire(document))
    assert read_rows(restored) == read_rows(document)


def test_render_document_text():
    """Test the printable layout."""
    text = render_document_text(make_document(signed_date=date(2024, 1, 20)))

    assert "INVOICE" in text
    assert "No: INV-001" in text
    assert "Date: 15 Jan 2024" in text
    assert "From: Acme Builders" in text
    assert "GSTIN: 33AAA" in text
    assert "To: Sri Ram Constructions" in text
    assert "Cement" in text
    assert "(18%)" in text
    assert "Grand Total:" in text
    assert "₹472.00" in text
    assert "Terms & Conditions:" in text
    assert "Net 30" in text
    assert "Signed: 20 Jan 2024" in text
    assert text.rstrip().endswith("Authorized Signatory")


def test_render_quotation_text_shows_units():
    """Test quantities are printed with their unit on quotations."""
    text = render_document_text(make_document(kind=DocumentKind.QUOTATION, document_number=""))
    assert "QUOTATION" in text
    assert "No: (unnumbered)" in text
    assert "3 Bags" in text
