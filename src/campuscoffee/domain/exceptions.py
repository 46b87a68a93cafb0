"""Domain exceptions shared by services, adapters and the API layer."""

from typing import Any


class CampusCoffeeError(Exception):
    """Base class for all domain errors."""


class NotFoundException(CampusCoffeeError):
    """Raised when no entity of the given type exists for an ID.

    Lookups by another unique field pass its name as ``field``.
    """

    def __init__(self, domain_class: type, id: Any, field: str = "ID"):
        self.domain_class = domain_class
        self.id = id
        self.field = field
        super().__init__(
            f"{domain_class.__name__} with {field} '{id}' does not exist."
        )


class DuplicationException(CampusCoffeeError):
    """Raised when a unique field of an entity collides with a stored one."""

    def __init__(self, domain_class: type, field: str, value: Any):
        self.domain_class = domain_class
        self.field = field
        self.value = value
        super().__init__(
            f"{domain_class.__name__} with {field} '{value}' already exists."
        )
