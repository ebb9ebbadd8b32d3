"""Line-item ledger: GST math for invoice and quotation lines.

A ledger owns the editable rows of one document. Every row derives its
amount, CGST/SGST split and line total from three inputs (quantity, rate,
GST rate), and document totals are always re-summed from the rows, so the
two can never drift apart.

All arithmetic is Decimal at full precision. Round only for display (see
``bizdocs.utils.formatting``).
"""

import uuid
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, Iterable, Iterator, Optional

from bizdocs.domain.errors import (
    NotFoundError,
    ValidationError,
    last_item_required,
    line_item_not_found,
)
from bizdocs.utils.amount_parser import coerce_number

DEFAULT_GST_RATE = Decimal("18")
DEFAULT_UNIT = "Nos"
HUNDRED = Decimal("100")
TWO = Decimal("2")
ZERO = Decimal("0")

TEXT_FIELDS = frozenset({"name", "unit"})
NUMERIC_FIELDS = frozenset({"quantity", "rate", "gst_rate"})
EDITABLE_FIELDS = TEXT_FIELDS | NUMERIC_FIELDS


def new_item_id() -> str:
    """Generate a local line item id."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class LineItem:
    """One row of an invoice or quotation.

    Only ``name``, ``quantity``, ``rate``, ``gst_rate`` and ``unit`` are
    inputs. The remaining fields are derived in ``__post_init__`` and are
    recomputed whenever a new row is built, including via
    ``dataclasses.replace``.
    """

    id: str
    name: str = ""
    quantity: Decimal = Decimal("1")
    rate: Decimal = ZERO
    gst_rate: Decimal = DEFAULT_GST_RATE
    unit: str = DEFAULT_UNIT

    amount: Decimal = field(init=False)
    cgst: Decimal = field(init=False)
    sgst: Decimal = field(init=False)
    total: Decimal = field(init=False)

    def __post_init__(self):
        amount = self.quantity * self.rate
        half_tax = amount * self.gst_rate / HUNDRED / TWO
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "cgst", half_tax)
        object.__setattr__(self, "sgst", half_tax)
        object.__setattr__(self, "total", amount + half_tax + half_tax)

    @property
    def tax_amount(self) -> Decimal:
        return self.cgst + self.sgst

    @property
    def is_submittable(self) -> bool:
        """Whether this row carries a name and a positive total."""
        return bool(self.name.strip()) and self.total > ZERO


@dataclass(frozen=True)
class DocumentTotals:
    """Document-level totals derived from line items."""

    sub_total: Decimal
    total_cgst: Decimal
    total_sgst: Decimal
    grand_total: Decimal

    @property
    def total_gst(self) -> Decimal:
        return self.total_cgst + self.total_sgst


class LineItemLedger:
    """Editable, ordered collection of line items for one document."""

    def __init__(
        self,
        items: Optional[Iterable[LineItem]] = None,
        default_gst_rate: Any = DEFAULT_GST_RATE,
    ):
        """Initialize a ledger.

        Args:
            items: Optional initial rows, kept in order
            default_gst_rate: GST rate given to rows created by add_item
        """
        self.default_gst_rate = coerce_number(default_gst_rate)
        self._items: list[LineItem] = list(items) if items is not None else []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[LineItem]:
        return iter(self._items)

    @property
    def items(self) -> tuple[LineItem, ...]:
        return tuple(self._items)

    def get_item(self, item_id: str) -> LineItem:
        """Get a row by id.

        Raises:
            NotFoundError: If no row has this id
        """
        return self._items[self._index_of(item_id)]

    def add_item(self) -> LineItem:
        """Append a row with default values and return it."""
        item = LineItem(id=new_item_id(), gst_rate=self.default_gst_rate)
        self._items.append(item)
        return item

    def remove_item(self, item_id: str) -> None:
        """Remove a row.

        Raises:
            NotFoundError: If no row has this id
            ValidationError: If it is the only remaining row
        """
        index = self._index_of(item_id)
        if len(self._items) == 1:
            raise ValidationError(last_item_required())
        del self._items[index]

    def update_item(self, item_id: str, field_name: str, value: Any) -> LineItem:
        """Set one input field on a row and recompute its derived values.

        Numeric input that does not parse counts as zero; text fields are
        stored unchanged.

        Args:
            item_id: Row id
            field_name: One of name, quantity, rate, gst_rate, unit
            value: New raw value

        Returns:
            The updated row

        Raises:
            NotFoundError: If no row has this id
            ValidationError: If the field is not editable
        """
        if field_name not in EDITABLE_FIELDS:
            raise ValidationError(
                f"Unknown line item field '{field_name}'. "
                f"Editable fields: {', '.join(sorted(EDITABLE_FIELDS))}"
            )

        index = self._index_of(item_id)
        if field_name in NUMERIC_FIELDS:
            value = coerce_number(value)
        else:
            value = "" if value is None else str(value)

        updated = replace(self._items[index], **{field_name: value})
        self._items[index] = updated
        return updated

    def compute_document_totals(self) -> DocumentTotals:
        """Sum per-line amounts, taxes and totals."""
        return DocumentTotals(
            sub_total=sum((item.amount for item in self._items), ZERO),
            total_cgst=sum((item.cgst for item in self._items), ZERO),
            total_sgst=sum((item.sgst for item in self._items), ZERO),
            grand_total=sum((item.total for item in self._items), ZERO),
        )

    def compute_flat_totals(self, gst_percentage: Any) -> DocumentTotals:
        """Apply one GST percentage to the subtotal instead of per-line rates."""
        sub_total = sum((item.amount for item in self._items), ZERO)
        half_tax = sub_total * coerce_number(gst_percentage) / HUNDRED / TWO
        return DocumentTotals(
            sub_total=sub_total,
            total_cgst=half_tax,
            total_sgst=half_tax,
            grand_total=sub_total + half_tax + half_tax,
        )

    def submittable_items(self) -> list[LineItem]:
        """Rows that would be sent on save, in order."""
        return [item for item in self._items if item.is_submittable]

    def _index_of(self, item_id: str) -> int:
        for index, item in enumerate(self._items):
            if item.id == item_id:
                return index
        raise NotFoundError(line_item_not_found(item_id))
