"""Mapping between documents and the document store's wire payloads.

Invoices and quotations carry the same data under different field names,
and older records use further spellings still (``lineAmount`` vs
``amount``, ``gst`` vs ``gstNo`` vs ``gstNumber``). Reading goes through
one normalisation step: for each target field an ordered tuple of accepted
source names, first non-empty match wins. Writing always uses the spelling
of the document's own kind.

Numbers are written as JSON floats when a float holds them exactly and as
decimal strings otherwise, so every value reads back unchanged.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, Overflow, localcontext
from typing import Any, Optional, Union

from bizdocs.domain.entities import Document, DocumentKind, DocumentSummary, Party
from bizdocs.domain.errors import ValidationError, no_submittable_items
from bizdocs.domain.ledger import (
    DEFAULT_GST_RATE,
    DEFAULT_UNIT,
    DocumentTotals,
    LineItem,
    LineItemLedger,
    new_item_id,
)
from bizdocs.utils.amount_parser import coerce_number
from bizdocs.utils.date_parser import parse_wire_date

logger = logging.getLogger(__name__)

# Stored derived values further than this from the recomputed ones are reported
STALE_TOLERANCE = Decimal("0.01")


@dataclass(frozen=True)
class WireSpelling:
    """Field names a document kind uses on the wire."""

    number: str
    date: str
    issuer: str
    recipient: str
    line_amount: str
    line_total: str
    writes_unit: bool
    writes_total_gst: bool


SPELLINGS = {
    DocumentKind.INVOICE: WireSpelling(
        number="invoiceNumber",
        date="invoiceDate",
        issuer="invoiceFrom",
        recipient="invoiceTo",
        line_amount="lineAmount",
        line_total="lineTotal",
        writes_unit=False,
        writes_total_gst=True,
    ),
    DocumentKind.QUOTATION: WireSpelling(
        number="quotationNumber",
        date="quotationDate",
        issuer="quotationFrom",
        recipient="quotationTo",
        line_amount="amount",
        line_total="total",
        writes_unit=True,
        writes_total_gst=False,
    ),
}

ITEM_SOURCES = {
    "name": ("Name", "name", "materialName", "expenditureName", "manpowerName"),
    "quantity": ("quantity", "qty"),
    "rate": ("rate", "unitPrice"),
    "gst_rate": ("gstRate", "gst"),
    "unit": ("unit",),
}

PARTY_SOURCES = {
    "name": ("companyName", "name", "clientName"),
    "address": ("address",),
    "contact_number": ("contactNumber", "phoneNumber", "phone"),
    "gst_number": ("gst", "gstNo", "gstNumber"),
    "client_id": ("clientId", "client"),
}

DOCUMENT_ID_SOURCES = ("_id", "id")


def pick(source: Any, names: tuple[str, ...], default: Any = None) -> Any:
    """Return the first present, non-empty value among ``names``."""
    if not isinstance(source, dict):
        return default
    for name in names:
        value = source.get(name)
        if value is not None and value != "":
            return value
    return default


def normalize(source: Any, sources: dict[str, tuple[str, ...]]) -> dict[str, Any]:
    """Apply a target-field to source-names table to a raw mapping."""
    return {target: pick(source, names) for target, names in sources.items()}


def coerce_id(value: Any) -> Optional[int]:
    """Read a reference that may be an int, a digit string or ``{"_id": ...}``."""
    if isinstance(value, dict):
        value = pick(value, DOCUMENT_ID_SOURCES)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    if value is not None:
        logger.debug("Ignoring non-numeric reference %r", value)
    return None


def _amount_sources(spelling: WireSpelling) -> tuple[str, ...]:
    return (spelling.line_amount,) + tuple(
        name for name in ("lineAmount", "amount") if name != spelling.line_amount
    )


def _total_sources(spelling: WireSpelling) -> tuple[str, ...]:
    return (spelling.line_total,) + tuple(
        name for name in ("lineTotal", "total") if name != spelling.line_total
    )


def _number(value: Decimal) -> Union[float, str]:
    """JSON float when it holds the value exactly, else the decimal string."""
    as_float = float(value)
    if math.isfinite(as_float) and Decimal(repr(as_float)) == value:
        return as_float
    return str(value)


def _drifted(stored: Any, recomputed: Decimal) -> bool:
    """Whether a stored derived value disagrees with the recomputed one."""
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        return abs(coerce_number(stored, limit=None) - recomputed) > STALE_TOLERANCE


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


# Line items


def item_to_wire(item: LineItem, kind: DocumentKind) -> dict[str, Any]:
    """Map a line item to the wire item shape of ``kind``."""
    spelling = SPELLINGS[kind]
    payload: dict[str, Any] = {
        "Name": item.name,
        "quantity": _number(item.quantity),
        "rate": _number(item.rate),
        "gstRate": _number(item.gst_rate),
        spelling.line_amount: _number(item.amount),
        "cgst": _number(item.cgst),
        "sgst": _number(item.sgst),
        spelling.line_total: _number(item.total),
    }
    if spelling.writes_unit:
        payload["unit"] = item.unit
    return payload


def item_from_wire(raw: dict[str, Any], kind: DocumentKind) -> LineItem:
    """Build a line item from a wire item of either spelling.

    Missing numbers count as zero. A row that carries an amount but neither
    quantity nor rate is a lump-sum row and becomes ``quantity=1``,
    ``rate=amount``. Derived values are always recomputed; stored ones that
    disagree are logged and dropped.
    """
    spelling = SPELLINGS[kind]
    fields = normalize(raw, ITEM_SOURCES)
    stored_amount = pick(raw, _amount_sources(spelling))
    stored_total = pick(raw, _total_sources(spelling))

    if fields["quantity"] is None and fields["rate"] is None and stored_amount is not None:
        quantity, rate = Decimal("1"), coerce_number(stored_amount)
    else:
        quantity, rate = coerce_number(fields["quantity"]), coerce_number(fields["rate"])

    item = LineItem(
        id=new_item_id(),
        name=str(fields["name"] or ""),
        quantity=quantity,
        rate=rate,
        gst_rate=coerce_number(fields["gst_rate"]),
        unit=str(fields["unit"] or DEFAULT_UNIT),
    )

    if stored_total is not None and _drifted(stored_total, item.total):
        logger.warning(
            "Stored total %s for item '%s' does not match recomputed %s",
            stored_total,
            item.name,
            item.total,
        )
    return item


def items_from_wire(raw_items: Any, kind: DocumentKind) -> list[LineItem]:
    """Map a wire item list, skipping entries that are not objects."""
    if not isinstance(raw_items, list):
        return []
    return [item_from_wire(raw, kind) for raw in raw_items if isinstance(raw, dict)]


def ledger_to_wire(ledger: LineItemLedger, kind: DocumentKind) -> list[dict[str, Any]]:
    """Map the submittable rows of a ledger to wire items.

    Raises:
        ValidationError: If no row has a name and a positive total
    """
    items = ledger.submittable_items()
    if not items:
        raise ValidationError(no_submittable_items())
    return [item_to_wire(item, kind) for item in items]


def ledger_from_wire(
    raw_items: Any, kind: DocumentKind, default_gst_rate: Any = DEFAULT_GST_RATE
) -> LineItemLedger:
    """Hydrate a ledger from wire items; an empty list yields one default row."""
    ledger = LineItemLedger(items_from_wire(raw_items, kind), default_gst_rate=default_gst_rate)
    if len(ledger) == 0:
        ledger.add_item()
    return ledger


# Parties


def issuer_to_wire(party: Party) -> dict[str, Any]:
    return {
        "companyName": party.name,
        "address": party.address,
        "contactNumber": party.contact_number,
        "gst": party.gst_number,
    }


def recipient_to_wire(party: Party) -> dict[str, Any]:
    return {
        "clientId": party.client_id,
        "name": party.name,
        "address": party.address,
        "contactNumber": party.contact_number,
        "gst": party.gst_number,
    }


def party_from_wire(raw: Any) -> Party:
    """Read an issuer or recipient block; a bare id is read as a client reference."""
    if not isinstance(raw, dict):
        return Party(client_id=coerce_id(raw))
    fields = normalize(raw, PARTY_SOURCES)
    return Party(
        name=str(fields["name"] or ""),
        address=str(fields["address"] or ""),
        contact_number=str(fields["contact_number"] or ""),
        gst_number=str(fields["gst_number"] or ""),
        client_id=coerce_id(fields["client_id"]),
    )


# Documents


def totals_to_wire(totals: DocumentTotals, kind: DocumentKind) -> dict[str, Any]:
    payload = {
        "subTotal": _number(totals.sub_total),
        "totalCGST": _number(totals.total_cgst),
        "totalSGST": _number(totals.total_sgst),
        "grandTotal": _number(totals.grand_total),
    }
    if SPELLINGS[kind].writes_total_gst:
        payload["totalGST"] = _number(totals.total_gst)
    return payload


def document_to_wire(document: Document) -> dict[str, Any]:
    """Build the payload sent to the document store on save.

    Only submittable rows are included and the totals are computed over
    exactly those rows. The document itself is not modified.

    Raises:
        ValidationError: If no row has a name and a positive total
    """
    kind = document.kind
    spelling = SPELLINGS[kind]
    items = ledger_to_wire(document.ledger, kind)

    submitted = Document(
        kind=kind,
        ledger=LineItemLedger(document.ledger.submittable_items()),
        gst_percentage=document.gst_percentage,
    )

    payload: dict[str, Any] = {
        spelling.number: document.document_number,
        spelling.date: _iso(document.issue_date),
        spelling.issuer: issuer_to_wire(document.issuer),
        spelling.recipient: recipient_to_wire(document.recipient),
        "projectId": document.project_id,
        "termsAndConditions": document.terms_and_conditions,
        "items": items,
    }
    # Optional dates are left out rather than sent as null
    if document.due_date is not None:
        payload["dueDate"] = _iso(document.due_date)
    if document.signed_date is not None:
        payload["signedDate"] = _iso(document.signed_date)
    if document.uses_flat_gst:
        payload["gstPercentage"] = _number(document.gst_percentage)

    payload.update(totals_to_wire(submitted.totals(), kind))
    return payload


def document_from_wire(
    kind: DocumentKind,
    payload: dict[str, Any],
    document_id: Optional[int] = None,
    default_gst_rate: Any = DEFAULT_GST_RATE,
) -> Document:
    """Hydrate an editable document from a stored or received payload."""
    spelling = SPELLINGS[kind]
    gst_percentage = pick(payload, ("gstPercentage",))

    return Document(
        kind=kind,
        ledger=ledger_from_wire(payload.get("items"), kind, default_gst_rate),
        document_number=str(pick(payload, (spelling.number, "documentNumber", "number"), "")),
        id=document_id if document_id is not None else coerce_id(pick(payload, DOCUMENT_ID_SOURCES)),
        issuer=party_from_wire(pick(payload, (spelling.issuer, "from"))),
        recipient=party_from_wire(pick(payload, (spelling.recipient, "to"))),
        issue_date=parse_wire_date(pick(payload, (spelling.date, "issueDate"))) or date.today(),
        due_date=parse_wire_date(payload.get("dueDate")),
        signed_date=parse_wire_date(payload.get("signedDate")),
        terms_and_conditions=str(payload.get("termsAndConditions") or ""),
        project_id=coerce_id(payload.get("projectId")),
        gst_percentage=(
            coerce_number(gst_percentage)
            if kind == DocumentKind.INVOICE and gst_percentage is not None
            else None
        ),
    )


def summary_from_wire(
    kind: DocumentKind, document_id: int, payload: dict[str, Any]
) -> DocumentSummary:
    """Extract the listing columns from a stored payload."""
    spelling = SPELLINGS[kind]
    recipient = party_from_wire(pick(payload, (spelling.recipient, "to")))
    return DocumentSummary(
        id=document_id,
        kind=kind,
        document_number=str(pick(payload, (spelling.number, "documentNumber", "number"), "")),
        recipient_name=recipient.name,
        issue_date=parse_wire_date(pick(payload, (spelling.date, "issueDate"))),
        grand_total=coerce_number(payload.get("grandTotal"), limit=None),
        project_id=coerce_id(payload.get("projectId")),
    )
