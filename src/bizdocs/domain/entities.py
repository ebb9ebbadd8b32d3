"""Domain model entities for bizdocs.

These are pure data classes representing business concepts, independent of
database schema and of the wire payloads exchanged with the document store.
Everything except ``Document`` is immutable; a ``Document`` is the draft a
user edits before saving.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from bizdocs.domain.ledger import DEFAULT_GST_RATE, DocumentTotals, LineItemLedger


class DocumentKind(str, Enum):
    """Kinds of business document sharing the line-item model."""

    INVOICE = "invoice"
    QUOTATION = "quotation"


DEFAULT_TERMS = {
    DocumentKind.INVOICE: "Payment is due within 30 days of the invoice date.",
    DocumentKind.QUOTATION: "This quotation is valid for 30 days from the quotation date.",
}


@dataclass(frozen=True)
class Party:
    """Issuer or recipient block printed on a document."""

    name: str = ""
    address: str = ""
    contact_number: str = ""
    gst_number: str = ""
    client_id: Optional[int] = None


@dataclass(frozen=True)
class Profile:
    """Company profile used as the issuer of every document."""

    company_name: str = ""
    address: str = ""
    contact_number: str = ""
    gst: str = ""
    default_gst_rate: Decimal = DEFAULT_GST_RATE
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class Client:
    """Client domain entity."""

    id: int
    client_name: str
    address: Optional[str]
    phone_number: Optional[str]
    email: Optional[str]
    gst_number: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Project:
    """Project domain entity; every project belongs to one client."""

    id: int
    project_name: str
    client_id: int
    gst: Optional[str]
    location: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class SalaryConfig:
    """Manpower cost row for a project over a date range."""

    id: int
    project_id: int
    role_name: str
    from_date: date
    to_date: date
    salary_per_head: Decimal
    count: int
    created_at: datetime

    @property
    def total_salary(self) -> Decimal:
        return self.salary_per_head * self.count


@dataclass(frozen=True)
class StoredDocument:
    """A persisted invoice or quotation, held as its wire payload."""

    id: int
    kind: DocumentKind
    document_number: str
    project_id: Optional[int]
    payload: dict
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class DocumentSummary:
    """One row of an invoice or quotation listing."""

    id: int
    kind: DocumentKind
    document_number: str
    recipient_name: str
    issue_date: Optional[date]
    grand_total: Decimal
    project_id: Optional[int]


@dataclass
class Document:
    """Invoice or quotation being edited.

    ``id`` stays None until the first save. Totals are never stored here;
    they are derived from the ledger on demand.
    """

    kind: DocumentKind
    ledger: LineItemLedger
    document_number: str = ""
    id: Optional[int] = None
    issuer: Party = field(default_factory=Party)
    recipient: Party = field(default_factory=Party)
    issue_date: date = field(default_factory=date.today)
    due_date: Optional[date] = None
    signed_date: Optional[date] = None
    terms_and_conditions: str = ""
    project_id: Optional[int] = None
    gst_percentage: Optional[Decimal] = None

    @property
    def uses_flat_gst(self) -> bool:
        return self.kind == DocumentKind.INVOICE and self.gst_percentage is not None

    def totals(self) -> DocumentTotals:
        """Current document totals."""
        if self.uses_flat_gst:
            return self.ledger.compute_flat_totals(self.gst_percentage)
        return self.ledger.compute_document_totals()
