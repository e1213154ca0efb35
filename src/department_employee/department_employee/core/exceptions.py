from __future__ import annotations

from typing import Dict, Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data fails field constraints."""

    def __init__(self, message: str, fields: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.fields = dict(fields or {})


class DuplicateNameError(DomainError):
    """Raised when a department name collides case-insensitively with another."""

    def __init__(self, name: str):
        super().__init__(f"Department '{name}' already exists")
        self.name = name


class NotFoundError(DomainError):
    """Raised when a referenced Department or Employee id does not exist."""

    def __init__(self, entity: str, entity_id: int):
        super().__init__(f"{entity} not found with ID: {entity_id}")
        self.entity = entity
        self.entity_id = entity_id


class UnexpectedError(Exception):
    """Infrastructure failure reduced to a generic, caller-safe message."""

    def __init__(self, message: str = "An unexpected error occurred. Please try again."):
        super().__init__(message)
