"""Tests for invoice and quotation commands."""

import pytest
from bizdocs.cli.main import cli
from bizdocs.domain.entities import DocumentKind


def invoke(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def test_invoice_create(cli_runner, temp_db, sample_project):
    """Test creating an invoice with two items."""
    result = invoke(
        cli_runner,
        temp_db,
        "invoice",
        "create",
        "--project",
        str(sample_project.id),
        "--number",
        "INV-100",
        "--date",
        "2024-01-15",
        "--item",
        "Cement",
        "3",
        "100",
        "--item",
        "Labour",
        "1",
        "100",
    )

    assert result.exit_code == 0, result.output
    assert "Created invoice" in result.output
    assert "Grand Total: ₹472.00" in result.output

    stored = temp_db.list_documents(DocumentKind.INVOICE)
    assert len(stored) == 1
    assert stored[0].payload["invoiceNumber"] == "INV-100"
    assert stored[0].payload["invoiceDate"] == "2024-01-15"
    assert stored[0].payload["invoiceTo"]["name"] == "Sri Ram Constructions"


def test_quotation_create_with_unit_and_rate(cli_runner, temp_db, sample_project):
    """Test per-item GST rate and unit on a quotation."""
    result = invoke(
        cli_runner,
        temp_db,
        "quotation",
        "create",
        "--project",
        str(sample_project.id),
        "--item",
        "Tiles",
        "40",
        "55",
        "--unit",
        "Sqft",
        "--gst-rate",
        "12",
    )

    assert result.exit_code == 0, result.output
    assert "Created quotation" in result.output
    assert "Grand Total: ₹2,464.00" in result.output

    stored = temp_db.list_documents(DocumentKind.QUOTATION)[0]
    item = stored.payload["items"][0]
    assert item["unit"] == "Sqft"
    assert item["gstRate"] == 12.0
    assert item["total"] == 2464.0


def test_invoice_create_flat_gst(cli_runner, temp_db, sample_project):
    """Test the flat GST option on invoices."""
    result = invoke(
        cli_runner,
        temp_db,
        "invoice",
        "create",
        "--project",
        str(sample_project.id),
        "--item",
        "Cement",
        "4",
        "250",
        "--flat-gst",
        "5",
    )

    assert result.exit_code == 0, result.output
    assert "Grand Total: ₹1,050.00" in result.output


def test_quotation_has_no_flat_gst_option(cli_runner, temp_db, sample_project):
    """Test that --flat-gst is invoice-only."""
    result = invoke(
        cli_runner,
        temp_db,
        "quotation",
        "create",
        "--project",
        str(sample_project.id),
        "--item",
        "Cement",
        "1",
        "1",
        "--flat-gst",
        "5",
    )
    assert result.exit_code != 0
    assert "No such option" in result.output


def test_create_without_items(cli_runner, temp_db, sample_project):
    """Test that a document needs at least one complete item."""
    result = invoke(cli_runner, temp_db, "invoice", "create", "--project", str(sample_project.id))

    assert result.exit_code == 1
    assert "Error: At least one item" in result.output
    assert temp_db.list_documents(DocumentKind.INVOICE) == []


def test_create_unknown_project(cli_runner, temp_db):
    """Test creating a document for a missing project."""
    result = invoke(
        cli_runner, temp_db, "invoice", "create", "--project", "99", "--item", "Sand", "1", "10"
    )
    assert result.exit_code == 1
    assert "Project 99 not found" in result.output


def test_create_invalid_date(cli_runner, temp_db, sample_project):
    """Test a bad due date."""
    result = invoke(
        cli_runner,
        temp_db,
        "invoice",
        "create",
        "--project",
        str(sample_project.id),
        "--due-date",
        "someday",
        "--item",
        "Sand",
        "1",
        "10",
    )
    assert result.exit_code == 1
    assert "Invalid due date" in result.output


def test_invoice_list(cli_runner, temp_db, sample_invoice):
    """Test listing invoices."""
    result = invoke(cli_runner, temp_db, "invoice", "list")

    assert result.exit_code == 0
    assert "INV-001" in result.output
    assert "Sri Ram Constructions" in result.output
    assert "₹472.00" in result.output


def test_quotation_list_empty(cli_runner, temp_db, sample_invoice):
    """Test that invoices are not listed as quotations."""
    result = invoke(cli_runner, temp_db, "quotation", "list")
    assert result.exit_code == 0
    assert "No quotations found." in result.output


def test_invoice_show(cli_runner, temp_db, sample_invoice):
    """Test printing an invoice."""
    result = invoke(cli_runner, temp_db, "invoice", "show", str(sample_invoice.id))

    assert result.exit_code == 0
    assert "INVOICE" in result.output
    assert "No: INV-001" in result.output
    assert "Cement" in result.output
    assert "Grand Total:" in result.output
    assert "Authorized Signatory" in result.output


def test_show_missing(cli_runner, temp_db):
    """Test showing an unknown document."""
    result = invoke(cli_runner, temp_db, "quotation", "show", "12")
    assert result.exit_code == 1
    assert "Quotation 12 not found" in result.output


def test_invoice_edit_items(cli_runner, temp_db, sample_invoice):
    """Test changing and adding items by position."""
    result = invoke(
        cli_runner,
        temp_db,
        "invoice",
        "edit",
        str(sample_invoice.id),
        "--set",
        "2",
        "quantity",
        "2",
        "--add-item",
        "Sand",
        "1",
        "100",
    )

    assert result.exit_code == 0, result.output
    assert f"Updated invoice {sample_invoice.id}" in result.output
    assert "Grand Total: ₹708.00" in result.output

    # Drop rows cached before the command ran
    temp_db.disconnect()
    payload = temp_db.get_document(DocumentKind.INVOICE, sample_invoice.id).payload
    assert [item["Name"] for item in payload["items"]] == ["Cement", "Labour", "Sand"]


def test_invoice_edit_remove_item(cli_runner, temp_db, sample_invoice):
    """Test removing an item."""
    result = invoke(cli_runner, temp_db, "invoice", "edit", str(sample_invoice.id), "--remove-item", "1")

    assert result.exit_code == 0, result.output
    assert "Grand Total: ₹118.00" in result.output


def test_invoice_edit_cannot_remove_all_items(cli_runner, temp_db, sample_invoice):
    """Test that the last item cannot be removed."""
    result = invoke(
        cli_runner,
        temp_db,
        "invoice",
        "edit",
        str(sample_invoice.id),
        "--remove-item",
        "1",
        "--remove-item",
        "2",
    )

    assert result.exit_code == 1
    assert "At least one item is required" in result.output
    payload = temp_db.get_document(DocumentKind.INVOICE, sample_invoice.id).payload
    assert len(payload["items"]) == 2


def test_invoice_edit_out_of_range_rate(cli_runner, temp_db, sample_invoice):
    """Test that an enormous rate counts as zero instead of crashing."""
    result = invoke(cli_runner, temp_db, "invoice", "edit", str(sample_invoice.id), "--set", "1", "rate", "1e500000")

    assert result.exit_code == 0, result.output
    assert "Grand Total: ₹118.00" in result.output


def test_invoice_edit_bad_position(cli_runner, temp_db, sample_invoice):
    """Test a position outside the item list."""
    result = invoke(cli_runner, temp_db, "invoice", "edit", str(sample_invoice.id), "--set", "5", "rate", "1")
    assert result.exit_code == 1
    assert "No line item at position 5" in result.output


def test_invoice_export_stdout(cli_runner, temp_db, sample_invoice):
    """Test CSV export to standard output."""
    result = invoke(cli_runner, temp_db, "invoice", "export", str(sample_invoice.id))

    assert result.exit_code == 0
    assert "Invoice Number,INV-001" in result.output
    assert "Grand Total,472.00" in result.output


def test_invoice_export_file(cli_runner, temp_db, sample_invoice, tmp_path):
    """Test CSV export to a file."""
    output = tmp_path / "invoice.csv"
    result = invoke(cli_runner, temp_db, "invoice", "export", str(sample_invoice.id), "-o", str(output))

    assert result.exit_code == 0
    assert "Exported invoice" in result.output
    assert "Subtotal,400.00" in output.read_text(encoding="utf-8")


@pytest.mark.parametrize("answer,deleted", [("y\n", True), ("n\n", False)])
def test_invoice_delete_confirmation(cli_runner, temp_db, sample_invoice, answer, deleted):
    """Test deleting with and without confirmation."""
    result = invoke(cli_runner, temp_db, "invoice", "delete", str(sample_invoice.id), input=answer)

    assert result.exit_code == 0
    if deleted:
        assert "Invoice deleted successfully!" in result.output
        assert temp_db.list_documents(DocumentKind.INVOICE) == []
    else:
        assert "Deletion cancelled." in result.output
        assert len(temp_db.list_documents(DocumentKind.INVOICE)) == 1


def test_delete_missing(cli_runner, temp_db):
    """Test deleting an unknown document."""
    result = invoke(cli_runner, temp_db, "invoice", "delete", "3", "--yes")
    assert result.exit_code == 1
    assert "Invoice 3 not found" in result.output
