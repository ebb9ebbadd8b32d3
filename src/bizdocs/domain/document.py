"""Invoice and quotation domain service."""

import logging
from dataclasses import replace
from typing import Optional
from bizdocs.database.base import Database
from bizdocs.domain.entities import (
    DEFAULT_TERMS,
    Document,
    DocumentKind,
    DocumentSummary,
    Party,
    Project,
)
from bizdocs.domain.errors import (
    NotFoundError,
    ValidationError,
    document_not_found,
    project_not_found,
    project_required,
)
from bizdocs.domain.ledger import LineItemLedger
from bizdocs.domain.session import SessionContext
from bizdocs.domain.wire import document_from_wire, document_to_wire, summary_from_wire

logger = logging.getLogger(__name__)


class DocumentService:
    """Service for creating, editing and storing invoices and quotations."""

    def __init__(self, db: Database, session: SessionContext):
        """Initialize document service.

        Args:
            db: Database instance
            session: Session context supplying the issuer and GST defaults
        """
        self.db = db
        self.session = session

    def new_document(self, kind: DocumentKind, project_id: Optional[int] = None) -> Document:
        """Build an unsaved document with one default line item.

        Raises:
            NotFoundError: If project_id is given and does not exist
        """
        kind = DocumentKind(kind)
        ledger = LineItemLedger(default_gst_rate=self.session.default_gst_rate)
        ledger.add_item()

        document = Document(
            kind=kind,
            ledger=ledger,
            issuer=self.session.issuer(),
            terms_and_conditions=DEFAULT_TERMS[kind],
        )
        if project_id is not None:
            self.apply_project(document, project_id)
        return document

    def apply_project(self, document: Document, project_id: int) -> None:
        """Attach a project and fill the recipient from its client.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = self.db.get_project(project_id)
        if project is None:
            raise NotFoundError(project_not_found(project_id))

        document.project_id = project.id
        document.recipient = self._project_recipient(project)

    def _project_recipient(self, project: Project) -> Party:
        client = self.db.get_client(project.client_id)
        return Party(
            name=client.client_name if client else "",
            address=(client.address or "") if client else "",
            contact_number=(client.phone_number or "") if client else "",
            gst_number=project.gst or "",
            client_id=project.client_id,
        )

    def load_document(self, kind: DocumentKind, document_id: int) -> Document:
        """Load a stored document for editing.

        Raises:
            NotFoundError: If no document of this kind has the ID
        """
        kind = DocumentKind(kind)
        stored = self.db.get_document(kind, document_id)
        if stored is None:
            raise NotFoundError(document_not_found(kind.value, document_id))
        return document_from_wire(
            kind,
            stored.payload,
            document_id=stored.id,
            default_gst_rate=self.session.default_gst_rate,
        )

    def save_document(self, document: Document) -> int:
        """Validate and store a document, creating or updating it.

        Args:
            document: The document; its id is set after a first save

        Returns:
            Document ID

        Raises:
            ValidationError: If no project is set or no line item is submittable
            NotFoundError: If the project, or the document being updated, does not exist
        """
        if document.project_id is None:
            raise ValidationError(project_required())
        project = self.db.get_project(document.project_id)
        if project is None:
            raise NotFoundError(project_not_found(document.project_id))
        if document.id is not None and self.db.get_document(document.kind, document.id) is None:
            raise NotFoundError(document_not_found(document.kind.value, document.id))

        recipient = document.recipient
        if recipient.client_id is None:
            recipient = self._project_recipient(project)
        # The draft only changes once the payload is valid
        payload = document_to_wire(replace(document, recipient=recipient))
        document.recipient = recipient

        if document.id is None:
            document.id = self.db.create_document(
                kind=document.kind,
                document_number=document.document_number,
                project_id=document.project_id,
                payload=payload,
            )
            logger.info("Created %s %s (%s)", document.kind.value, document.id, document.document_number)
        else:
            self.db.update_document(
                kind=document.kind,
                document_id=document.id,
                document_number=document.document_number,
                project_id=document.project_id,
                payload=payload,
            )
            logger.info("Updated %s %s", document.kind.value, document.id)

        dropped = len(document.ledger) - len(payload["items"])
        if dropped:
            logger.debug("Left %d incomplete line item(s) out of %s %s", dropped, document.kind.value, document.id)
        return document.id

    def delete_document(self, kind: DocumentKind, document_id: int) -> None:
        """Delete a stored document.

        Raises:
            NotFoundError: If no document of this kind has the ID
        """
        kind = DocumentKind(kind)
        if self.db.get_document(kind, document_id) is None:
            raise NotFoundError(document_not_found(kind.value, document_id))
        self.db.delete_document(kind, document_id)
        logger.info("Deleted %s %s", kind.value, document_id)

    def list_documents(
        self, kind: DocumentKind, project_id: Optional[int] = None
    ) -> list[DocumentSummary]:
        """List stored documents of a kind, newest first."""
        kind = DocumentKind(kind)
        return [
            summary_from_wire(kind, stored.id, stored.payload)
            for stored in self.db.list_documents(kind, project_id=project_id)
        ]
