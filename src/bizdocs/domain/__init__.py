"""Domain layer for bizdocs application.

Services live in their own modules (``bizdocs.domain.document`` and so on)
and are not imported here, since they depend on the database layer, which
itself imports ``bizdocs.domain.entities``.
"""

from bizdocs.domain.ledger import LineItem, LineItemLedger, DocumentTotals

__all__ = ["LineItem", "LineItemLedger", "DocumentTotals"]
