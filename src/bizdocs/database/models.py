"""SQLAlchemy models for bizdocs database."""

from datetime import datetime, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    JSON,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Profile(Base):
    """Company profile model (single row)."""

    __tablename__ = "profile"

    id = Column(Integer, primary_key=True)
    company_name = Column(String, nullable=False, default="")
    address = Column(String, nullable=False, default="")
    contact_number = Column(String, nullable=False, default="")
    gst = Column(String, nullable=False, default="")
    default_gst_rate = Column(Numeric(5, 2), nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)


class Client(Base):
    """Client model."""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True)
    client_name = Column(String, nullable=False)
    address = Column(String, nullable=True)
    phone_number = Column(String, nullable=True)
    email = Column(String, nullable=True)
    gst_number = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    # Relationships
    projects = relationship("Project", back_populates="client")


class Project(Base):
    """Project model."""

    __tablename__ = "projects"

    id = Column(Integer, primary_key=True)
    project_name = Column(String, nullable=False)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False)
    gst = Column(String, nullable=True)
    location = Column(String, nullable=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    # Relationships
    client = relationship("Client", back_populates="projects")
    documents = relationship("Document", back_populates="project")
    salary_configs = relationship("SalaryConfig", back_populates="project")


class Document(Base):
    """Invoice or quotation, stored as its wire payload."""

    __tablename__ = "documents"

    id = Column(Integer, primary_key=True)
    kind = Column(String, nullable=False)
    document_number = Column(String, nullable=False, default="")
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=True)
    payload = Column(JSON, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, onupdate=_utcnow, nullable=False)

    __table_args__ = (Index("ix_documents_kind_number", "kind", "document_number"),)

    # Relationships
    project = relationship("Project", back_populates="documents")


class SalaryConfig(Base):
    """Salary configuration model."""

    __tablename__ = "salary_configs"

    id = Column(Integer, primary_key=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False)
    role_name = Column(String, nullable=False)
    from_date = Column(Date, nullable=False)
    to_date = Column(Date, nullable=False)
    salary_per_head = Column(Numeric(12, 2), nullable=False)
    count = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    # Relationships
    project = relationship("Project", back_populates="salary_configs")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
