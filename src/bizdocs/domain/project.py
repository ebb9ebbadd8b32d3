"""Project domain service."""

import logging
from typing import Optional
from bizdocs.database.base import Database
from bizdocs.domain.entities import Project as ProjectEntity
from bizdocs.domain.errors import (
    DependencyError,
    NotFoundError,
    ValidationError,
    client_not_found,
    delete_blocked,
    project_not_found,
)

logger = logging.getLogger(__name__)


class ProjectService:
    """Service for managing projects."""

    def __init__(self, db: Database):
        """Initialize project service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_project(
        self,
        project_name: str,
        client_id: int,
        gst: Optional[str] = None,
        location: Optional[str] = None,
    ) -> int:
        """Create a project for an existing client.

        Args:
            project_name: Project name
            client_id: Owning client ID
            gst: GST number billed for this project
            location: Optional site location

        Returns:
            Project ID

        Raises:
            ValidationError: If the project name is empty
            NotFoundError: If the client does not exist
        """
        if not project_name or not project_name.strip():
            raise ValidationError("Project name is required")

        if self.db.get_client(client_id) is None:
            raise NotFoundError(client_not_found(client_id))

        project_id = self.db.create_project(
            project_name=project_name.strip(), client_id=client_id, gst=gst, location=location
        )
        logger.info("Created project %s (%s) for client %s", project_id, project_name, client_id)
        return project_id

    def get_project(self, project_id: int) -> Optional[ProjectEntity]:
        """Get project by ID."""
        return self.db.get_project(project_id)

    def require_project(self, project_id: int) -> ProjectEntity:
        """Get project by ID.

        Raises:
            NotFoundError: If the project does not exist
        """
        project = self.db.get_project(project_id)
        if project is None:
            raise NotFoundError(project_not_found(project_id))
        return project

    def list_projects(self, client_id: Optional[int] = None) -> list[ProjectEntity]:
        """List projects, optionally for one client."""
        return self.db.list_projects(client_id=client_id)

    def delete_project(self, project_id: int) -> None:
        """Delete a project.

        Raises:
            NotFoundError: If the project does not exist
            DependencyError: If documents or salary configurations reference it
        """
        self.require_project(project_id)

        dependents = {
            "document": self.db.get_project_document_count(project_id),
            "salary configuration": self.db.get_project_salary_config_count(project_id),
        }
        if any(dependents.values()):
            raise DependencyError(delete_blocked("project", project_id, dependents))

        self.db.delete_project(project_id)
        logger.info("Deleted project %s", project_id)
