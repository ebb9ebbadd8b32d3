"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal

from bizdocs.database.models import (
    Document as ORMDocument,
    Profile as ORMProfile,
    Project as ORMProject,
    SalaryConfig as ORMSalaryConfig,
)
from bizdocs.database.mappers import (
    document_to_domain,
    profile_to_domain,
    project_to_domain,
    salary_config_to_domain,
)
from bizdocs.domain.entities import DocumentKind, Profile, Project, SalaryConfig, StoredDocument


class TestProfileMapper:
    """Tests for Profile mapper."""

    def test_profile_to_domain(self):
        """Test converting ORM Profile to domain Profile."""
        orm_profile = ORMProfile(
            id=1,
            company_name="Acme Builders",
            address="Chennai",
            contact_number="98400",
            gst="33AAA",
            default_gst_rate=Decimal("18.00"),
            updated_at=datetime.now(UTC),
        )
        profile = profile_to_domain(orm_profile)

        assert isinstance(profile, Profile)
        assert profile.company_name == "Acme Builders"
        assert profile.default_gst_rate == Decimal("18")
        assert profile.updated_at == orm_profile.updated_at


class TestProjectMapper:
    """Tests for Project mapper."""

    def test_project_to_domain(self):
        """Test converting ORM Project to domain Project."""
        orm_project = ORMProject(
            id=3, project_name="Villa", client_id=2, gst=None, location="Madurai", created_at=datetime.now(UTC)
        )
        project = project_to_domain(orm_project)

        assert isinstance(project, Project)
        assert project.id == 3
        assert project.client_id == 2
        assert project.gst is None
        assert project.location == "Madurai"


class TestDocumentMapper:
    """Tests for Document mapper."""

    def test_document_to_domain(self):
        """Test converting ORM Document to domain StoredDocument."""
        payload = {"invoiceNumber": "INV-1", "items": []}
        now = datetime.now(UTC)
        orm_document = ORMDocument(
            id=7,
            kind="invoice",
            document_number="INV-1",
            project_id=3,
            payload=payload,
            created_at=now,
            updated_at=now,
        )
        document = document_to_domain(orm_document)

        assert isinstance(document, StoredDocument)
        assert document.kind == DocumentKind.INVOICE
        assert document.payload == payload
        assert document.payload is not payload


class TestSalaryConfigMapper:
    """Tests for SalaryConfig mapper."""

    def test_salary_config_to_domain(self):
        """Test converting ORM SalaryConfig to domain SalaryConfig."""
        orm_config = ORMSalaryConfig(
            id=1,
            project_id=3,
            role_name="Mason",
            from_date=date(2024, 1, 1),
            to_date=date(2024, 1, 31),
            salary_per_head=Decimal("18000.00"),
            count=4,
            created_at=datetime.now(UTC),
        )
        config = salary_config_to_domain(orm_config)

        assert isinstance(config, SalaryConfig)
        assert config.salary_per_head == Decimal("18000")
        assert config.total_salary == Decimal("72000")
        assert config.from_date == date(2024, 1, 1)
