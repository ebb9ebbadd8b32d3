"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or a violated business rule."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


def last_item_required() -> str:
    """Return message when removing the only line item."""
    return "At least one item is required"


def no_submittable_items() -> str:
    """Return message when a document has nothing worth saving."""
    return "At least one item with a name and a total greater than zero is required"


def project_required() -> str:
    """Return message when saving a document without a project."""
    return "Please select a project before saving"


def line_item_not_found(item_id: str) -> str:
    """Return message for missing line item."""
    return f"Line item '{item_id}' not found"


def document_not_found(kind: str, document_id: int) -> str:
    """Return message for missing invoice or quotation."""
    return f"{kind.capitalize()} {document_id} not found"


def client_not_found(client_id: int) -> str:
    """Return message for missing client."""
    return f"Client {client_id} not found"


def project_not_found(project_id: int) -> str:
    """Return message for missing project."""
    return f"Project {project_id} not found"


def salary_config_not_found(config_id: int) -> str:
    """Return message for missing salary configuration."""
    return f"Salary configuration {config_id} not found"


def delete_blocked(entity: str, entity_id: int, dependents: dict[str, int]) -> str:
    """Return message when an entity still has dependent records."""
    parts = [
        f"{count} {name}{'s' if count != 1 else ''}"
        for name, count in dependents.items()
        if count > 0
    ]
    return (
        f"Cannot delete {entity} {entity_id}: it has {', '.join(parts)}. "
        "Please delete them first."
    )
