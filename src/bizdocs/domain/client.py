"""Client domain service."""

import logging
from typing import Optional
from bizdocs.database.base import Database
from bizdocs.domain.entities import Client as ClientEntity
from bizdocs.domain.errors import (
    DependencyError,
    NotFoundError,
    ValidationError,
    client_not_found,
    delete_blocked,
)

logger = logging.getLogger(__name__)


class ClientService:
    """Service for managing clients."""

    def __init__(self, db: Database):
        """Initialize client service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_client(
        self,
        client_name: str,
        address: Optional[str] = None,
        phone_number: Optional[str] = None,
        email: Optional[str] = None,
        gst_number: Optional[str] = None,
    ) -> int:
        """Create a new client.

        Returns:
            Client ID

        Raises:
            ValidationError: If the client name is empty
        """
        if not client_name or not client_name.strip():
            raise ValidationError("Client name is required")

        client_id = self.db.create_client(
            client_name=client_name.strip(),
            address=address,
            phone_number=phone_number,
            email=email,
            gst_number=gst_number,
        )
        logger.info("Created client %s (%s)", client_id, client_name)
        return client_id

    def get_client(self, client_id: int) -> Optional[ClientEntity]:
        """Get client by ID."""
        return self.db.get_client(client_id)

    def require_client(self, client_id: int) -> ClientEntity:
        """Get client by ID.

        Raises:
            NotFoundError: If the client does not exist
        """
        client = self.db.get_client(client_id)
        if client is None:
            raise NotFoundError(client_not_found(client_id))
        return client

    def list_clients(self) -> list[ClientEntity]:
        """List all clients."""
        return self.db.list_clients()

    def update_client(self, client_id: int, **fields: Optional[str]) -> None:
        """Update client details; fields passed as None are left unchanged.

        Raises:
            NotFoundError: If the client does not exist
            ValidationError: If the new client name is empty
        """
        self.require_client(client_id)

        changes = {name: value for name, value in fields.items() if value is not None}
        if "client_name" in changes:
            if not changes["client_name"].strip():
                raise ValidationError("Client name is required")
            changes["client_name"] = changes["client_name"].strip()
        if not changes:
            return

        self.db.update_client(client_id, **changes)
        logger.info("Updated client %s: %s", client_id, ", ".join(sorted(changes)))

    def delete_client(self, client_id: int) -> None:
        """Delete a client.

        Raises:
            NotFoundError: If the client does not exist
            DependencyError: If projects still belong to the client
        """
        self.require_client(client_id)

        project_count = self.db.get_client_project_count(client_id)
        if project_count > 0:
            raise DependencyError(delete_blocked("client", client_id, {"project": project_count}))

        self.db.delete_client(client_id)
        logger.info("Deleted client %s", client_id)
