"""Salary configuration domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Optional
from bizdocs.database.base import Database
from bizdocs.domain.entities import SalaryConfig as SalaryConfigEntity
from bizdocs.domain.errors import (
    NotFoundError,
    ValidationError,
    project_not_found,
    salary_config_not_found,
)
from bizdocs.utils.amount_parser import coerce_number

logger = logging.getLogger(__name__)


def coerce_head_count(value: Any) -> int:
    """Whole number of heads; fractions are truncated, bad input is zero."""
    return int(coerce_number(value))


class SalaryConfigService:
    """Service for managing per-project salary configurations."""

    def __init__(self, db: Database):
        """Initialize salary configuration service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_config(
        self,
        project_id: int,
        role_name: str,
        from_date: Optional[date],
        to_date: Optional[date],
        salary_per_head: Any,
        count: Any,
    ) -> int:
        """Create a salary configuration row.

        Args:
            project_id: Project the manpower is billed to
            role_name: Role, e.g. "Mason"
            from_date: First day of the period
            to_date: Last day of the period
            salary_per_head: Salary per person; soft-parsed
            count: Number of people; soft-parsed and truncated

        Returns:
            Salary configuration ID

        Raises:
            ValidationError: If a field is missing or the dates are reversed
            NotFoundError: If the project does not exist
        """
        missing = [
            name
            for name, value in (
                ("role", role_name),
                ("from date", from_date),
                ("to date", to_date),
                ("salary per head", salary_per_head),
                ("count", count),
            )
            if value is None or (isinstance(value, str) and not value.strip())
        ]
        if missing:
            raise ValidationError(f"Please fill in all fields: missing {', '.join(missing)}")

        if from_date > to_date:
            raise ValidationError("From date cannot be after to date")

        if self.db.get_project(project_id) is None:
            raise NotFoundError(project_not_found(project_id))

        config_id = self.db.create_salary_config(
            project_id=project_id,
            role_name=role_name.strip(),
            from_date=from_date,
            to_date=to_date,
            salary_per_head=coerce_number(salary_per_head),
            count=coerce_head_count(count),
        )
        logger.info("Created salary configuration %s for project %s", config_id, project_id)
        return config_id

    def get_config(self, config_id: int) -> Optional[SalaryConfigEntity]:
        """Get salary configuration by ID."""
        return self.db.get_salary_config(config_id)

    def list_configs(self, project_id: Optional[int] = None) -> list[SalaryConfigEntity]:
        """List salary configurations, optionally for one project."""
        return self.db.list_salary_configs(project_id=project_id)

    def project_total(self, project_id: int) -> Decimal:
        """Sum of total salary across a project's configurations."""
        return sum(
            (config.total_salary for config in self.db.list_salary_configs(project_id=project_id)),
            Decimal("0"),
        )

    def delete_config(self, config_id: int) -> None:
        """Delete a salary configuration.

        Raises:
            NotFoundError: If it does not exist
        """
        if self.db.get_salary_config(config_id) is None:
            raise NotFoundError(salary_config_not_found(config_id))
        self.db.delete_salary_config(config_id)
        logger.info("Deleted salary configuration %s", config_id)
