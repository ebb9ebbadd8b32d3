"""Shared pytest fixtures for bizdocs tests."""

import tempfile
import os
import pytest

from bizdocs.database.factories import create_sqlite_database
from bizdocs.domain.client import ClientService
from bizdocs.domain.document import DocumentService
from bizdocs.domain.entities import DocumentKind, Profile
from bizdocs.domain.profile import ProfileService
from bizdocs.domain.project import ProjectService
from bizdocs.domain.salary import SalaryConfigService
from bizdocs.domain.session import SessionContext


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def client_service(temp_db):
    """Create a ClientService with a temporary database."""
    return ClientService(temp_db)


@pytest.fixture
def project_service(temp_db):
    """Create a ProjectService with a temporary database."""
    return ProjectService(temp_db)


@pytest.fixture
def profile_service(temp_db):
    """Create a ProfileService with a temporary database."""
    return ProfileService(temp_db)


@pytest.fixture
def salary_service(temp_db):
    """Create a SalaryConfigService with a temporary database."""
    return SalaryConfigService(temp_db)


@pytest.fixture
def session_context():
    """Session for a company with a saved profile."""
    return SessionContext(
        profile=Profile(
            company_name="Acme Builders",
            address="12 Anna Salai, Chennai",
            contact_number="9840012345",
            gst="33AAACA1234A1Z5",
        )
    )


@pytest.fixture
def document_service(temp_db, session_context):
    """Create a DocumentService with a temporary database."""
    return DocumentService(temp_db, session_context)


@pytest.fixture
def sample_client(client_service):
    """Create a sample client for testing."""
    client_id = client_service.create_client(
        client_name="Sri Ram Constructions",
        address="4 Lake View Road, Madurai",
        phone_number="9876543210",
        gst_number="33BBBCS5678B1Z2",
    )
    return client_service.get_client(client_id)


@pytest.fixture
def sample_project(project_service, sample_client):
    """Create a sample project for the sample client."""
    project_id = project_service.create_project(
        project_name="Villa Renovation",
        client_id=sample_client.id,
        gst="33BBBCS5678B1ZP",
        location="Madurai",
    )
    return project_service.get_project(project_id)


@pytest.fixture
def sample_invoice(document_service, sample_project):
    """Create and save an invoice with two line items."""
    document = document_service.new_document(DocumentKind.INVOICE, project_id=sample_project.id)
    document.document_number = "INV-001"
    ledger = document.ledger
    first = ledger.items[0]
    ledger.update_item(first.id, "name", "Cement")
    ledger.update_item(first.id, "quantity", "3")
    ledger.update_item(first.id, "rate", "100")
    second = ledger.add_item()
    ledger.update_item(second.id, "name", "Labour")
    ledger.update_item(second.id, "rate", "100")
    document_service.save_document(document)
    return document


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
