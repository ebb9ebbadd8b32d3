"""Tests for Database interface returning domain models."""

import pytest
from datetime import date, datetime
from decimal import Decimal

from bizdocs.domain import entities
from bizdocs.domain.entities import DocumentKind
from bizdocs.domain.errors import NotFoundError


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_get_client_returns_domain_model(self, temp_db):
        """Test that get_client returns a domain Client entity."""
        client_id = temp_db.create_client(client_name="Test Client", gst_number="33AAA")

        client = temp_db.get_client(client_id)

        assert isinstance(client, entities.Client)
        assert client.id == client_id
        assert client.client_name == "Test Client"
        assert client.gst_number == "33AAA"
        assert isinstance(client.created_at, datetime)

    def test_update_client_rejects_unknown_columns(self, temp_db):
        """Test that only client columns can be updated."""
        client_id = temp_db.create_client(client_name="Test Client")
        with pytest.raises(ValueError, match="Unknown client fields"):
            temp_db.update_client(client_id, created_at=None)

    def test_update_missing_client(self, temp_db):
        """Test updating a client that does not exist."""
        with pytest.raises(NotFoundError):
            temp_db.update_client(5, client_name="X")

    def test_get_project_returns_domain_model(self, temp_db):
        """Test that get_project returns a domain Project entity."""
        client_id = temp_db.create_client(client_name="Test Client")
        project_id = temp_db.create_project(project_name="Site", client_id=client_id, location="Salem")

        project = temp_db.get_project(project_id)

        assert isinstance(project, entities.Project)
        assert project.client_id == client_id
        assert project.location == "Salem"
        assert temp_db.get_client_project_count(client_id) == 1

    def test_profile_round_trip(self, temp_db):
        """Test that the profile is a single replaceable row."""
        assert temp_db.get_profile() is None

        temp_db.save_profile("Acme", "Chennai", "98400", "33AAA", Decimal("18"))
        temp_db.save_profile("Acme Builders", "Chennai", "98400", "33AAA", Decimal("12.5"))

        profile = temp_db.get_profile()
        assert isinstance(profile, entities.Profile)
        assert profile.company_name == "Acme Builders"
        assert profile.default_gst_rate == Decimal("12.5")

    def test_document_storage(self, temp_db):
        """Test storing, updating and listing document payloads."""
        client_id = temp_db.create_client(client_name="Test Client")
        project_id = temp_db.create_project(project_name="Site", client_id=client_id)

        document_id = temp_db.create_document(
            kind=DocumentKind.QUOTATION,
            document_number="Q-1",
            project_id=project_id,
            payload={"quotationNumber": "Q-1", "items": []},
        )
        temp_db.update_document(
            kind=DocumentKind.QUOTATION,
            document_id=document_id,
            document_number="Q-1A",
            project_id=project_id,
            payload={"quotationNumber": "Q-1A", "items": [{"Name": "Sand"}]},
        )

        stored = temp_db.get_document(DocumentKind.QUOTATION, document_id)
        assert isinstance(stored, entities.StoredDocument)
        assert stored.kind == DocumentKind.QUOTATION
        assert stored.document_number == "Q-1A"
        assert stored.payload["items"] == [{"Name": "Sand"}]
        assert temp_db.get_document(DocumentKind.INVOICE, document_id) is None
        assert temp_db.get_project_document_count(project_id) == 1
        assert [d.id for d in temp_db.list_documents(DocumentKind.QUOTATION, project_id=project_id)] == [
            document_id
        ]

    def test_update_missing_document(self, temp_db):
        """Test updating a document that does not exist."""
        with pytest.raises(NotFoundError, match="Invoice 1 not found"):
            temp_db.update_document(DocumentKind.INVOICE, 1, "X", None, {})

    def test_salary_configs_return_domain_models(self, temp_db):
        """Test salary configuration storage."""
        client_id = temp_db.create_client(client_name="Test Client")
        project_id = temp_db.create_project(project_name="Site", client_id=client_id)
        temp_db.create_salary_config(
            project_id, "Helper", date(2024, 2, 1), date(2024, 2, 29), Decimal("12000"), 2
        )
        temp_db.create_salary_config(
            project_id, "Mason", date(2024, 1, 1), date(2024, 1, 31), Decimal("18000.50"), 3
        )

        configs = temp_db.list_salary_configs(project_id=project_id)

        assert [config.role_name for config in configs] == ["Mason", "Helper"]
        assert all(isinstance(config, entities.SalaryConfig) for config in configs)
        assert configs[0].salary_per_head == Decimal("18000.50")
        assert temp_db.get_project_salary_config_count(project_id) == 2

    def test_delete_missing_salary_config(self, temp_db):
        """Test deleting a salary configuration that does not exist."""
        with pytest.raises(NotFoundError):
            temp_db.delete_salary_config(1)
