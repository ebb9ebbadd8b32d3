"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so schema changes stay out of
the domain services.
"""

from decimal import Decimal

from bizdocs.domain import entities as domain
from bizdocs.database.models import (
    Client as ORMClient,
    Document as ORMDocument,
    Profile as ORMProfile,
    Project as ORMProject,
    SalaryConfig as ORMSalaryConfig,
)


def profile_to_domain(orm_profile: ORMProfile) -> domain.Profile:
    """Convert SQLAlchemy Profile model to domain Profile entity."""
    return domain.Profile(
        company_name=orm_profile.company_name,
        address=orm_profile.address,
        contact_number=orm_profile.contact_number,
        gst=orm_profile.gst,
        default_gst_rate=Decimal(orm_profile.default_gst_rate),
        updated_at=orm_profile.updated_at,
    )


def client_to_domain(orm_client: ORMClient) -> domain.Client:
    """Convert SQLAlchemy Client model to domain Client entity."""
    return domain.Client(
        id=orm_client.id,
        client_name=orm_client.client_name,
        address=orm_client.address,
        phone_number=orm_client.phone_number,
        email=orm_client.email,
        gst_number=orm_client.gst_number,
        created_at=orm_client.created_at,
    )


def project_to_domain(orm_project: ORMProject) -> domain.Project:
    """Convert SQLAlchemy Project model to domain Project entity."""
    return domain.Project(
        id=orm_project.id,
        project_name=orm_project.project_name,
        client_id=orm_project.client_id,
        gst=orm_project.gst,
        location=orm_project.location,
        created_at=orm_project.created_at,
    )


def document_to_domain(orm_document: ORMDocument) -> domain.StoredDocument:
    """Convert SQLAlchemy Document model to domain StoredDocument entity."""
    return domain.StoredDocument(
        id=orm_document.id,
        kind=domain.DocumentKind(orm_document.kind),
        document_number=orm_document.document_number,
        project_id=orm_document.project_id,
        payload=dict(orm_document.payload),
        created_at=orm_document.created_at,
        updated_at=orm_document.updated_at,
    )


def salary_config_to_domain(orm_config: ORMSalaryConfig) -> domain.SalaryConfig:
    """Convert SQLAlchemy SalaryConfig model to domain SalaryConfig entity."""
    return domain.SalaryConfig(
        id=orm_config.id,
        project_id=orm_config.project_id,
        role_name=orm_config.role_name,
        from_date=orm_config.from_date,
        to_date=orm_config.to_date,
        salary_per_head=Decimal(orm_config.salary_per_head),
        count=orm_config.count,
        created_at=orm_config.created_at,
    )
