"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from bizdocs.domain.entities import (
    Client,
    DocumentKind,
    Profile,
    Project,
    SalaryConfig,
    StoredDocument,
)


class Database(ABC):
    """Abstract document store interface for bizdocs."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Profile operations
    @abstractmethod
    def get_profile(self) -> Optional[Profile]:
        """Get the company profile, or None if it was never saved."""
        pass

    @abstractmethod
    def save_profile(
        self,
        company_name: str,
        address: str,
        contact_number: str,
        gst: str,
        default_gst_rate: Decimal,
    ) -> None:
        """Create or replace the company profile."""
        pass

    # Client operations
    @abstractmethod
    def create_client(
        self,
        client_name: str,
        address: Optional[str] = None,
        phone_number: Optional[str] = None,
        email: Optional[str] = None,
        gst_number: Optional[str] = None,
    ) -> int:
        """Create a client. Returns client ID."""
        pass

    @abstractmethod
    def get_client(self, client_id: int) -> Optional[Client]:
        """Get client by ID."""
        pass

    @abstractmethod
    def list_clients(self) -> list[Client]:
        """List all clients."""
        pass

    @abstractmethod
    def update_client(self, client_id: int, **fields: Any) -> None:
        """Update the given client columns."""
        pass

    @abstractmethod
    def delete_client(self, client_id: int) -> None:
        """Delete a client."""
        pass

    @abstractmethod
    def get_client_project_count(self, client_id: int) -> int:
        """Count projects belonging to a client."""
        pass

    # Project operations
    @abstractmethod
    def create_project(
        self,
        project_name: str,
        client_id: int,
        gst: Optional[str] = None,
        location: Optional[str] = None,
    ) -> int:
        """Create a project. Returns project ID."""
        pass

    @abstractmethod
    def get_project(self, project_id: int) -> Optional[Project]:
        """Get project by ID."""
        pass

    @abstractmethod
    def list_projects(self, client_id: Optional[int] = None) -> list[Project]:
        """List projects, optionally filtered by client."""
        pass

    @abstractmethod
    def delete_project(self, project_id: int) -> None:
        """Delete a project."""
        pass

    @abstractmethod
    def get_project_document_count(self, project_id: int) -> int:
        """Count invoices and quotations referencing a project."""
        pass

    @abstractmethod
    def get_project_salary_config_count(self, project_id: int) -> int:
        """Count salary configurations referencing a project."""
        pass

    # Document operations
    @abstractmethod
    def create_document(
        self,
        kind: DocumentKind,
        document_number: str,
        project_id: Optional[int],
        payload: dict[str, Any],
    ) -> int:
        """Store a new invoice or quotation payload. Returns document ID."""
        pass

    @abstractmethod
    def update_document(
        self,
        kind: DocumentKind,
        document_id: int,
        document_number: str,
        project_id: Optional[int],
        payload: dict[str, Any],
    ) -> None:
        """Replace the payload of an existing document."""
        pass

    @abstractmethod
    def get_document(self, kind: DocumentKind, document_id: int) -> Optional[StoredDocument]:
        """Get a document of the given kind by ID."""
        pass

    @abstractmethod
    def list_documents(
        self, kind: DocumentKind, project_id: Optional[int] = None
    ) -> list[StoredDocument]:
        """List documents of a kind, optionally filtered by project."""
        pass

    @abstractmethod
    def delete_document(self, kind: DocumentKind, document_id: int) -> None:
        """Delete a document."""
        pass

    # Salary configuration operations
    @abstractmethod
    def create_salary_config(
        self,
        project_id: int,
        role_name: str,
        from_date: date,
        to_date: date,
        salary_per_head: Decimal,
        count: int,
    ) -> int:
        """Create a salary configuration. Returns its ID."""
        pass

    @abstractmethod
    def get_salary_config(self, config_id: int) -> Optional[SalaryConfig]:
        """Get salary configuration by ID."""
        pass

    @abstractmethod
    def list_salary_configs(self, project_id: Optional[int] = None) -> list[SalaryConfig]:
        """List salary configurations, optionally filtered by project."""
        pass

    @abstractmethod
    def delete_salary_config(self, config_id: int) -> None:
        """Delete a salary configuration."""
        pass
