"""Abstract data-access ports for the domain layer."""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from .models import Pos, User

T = TypeVar("T")
ID = TypeVar("ID")


class CrudDataService(ABC, Generic[T, ID]):
    """Storage-agnostic CRUD port for one entity type."""

    @abstractmethod
    def clear(self) -> None:
        """Remove all stored entities."""
        pass

    @abstractmethod
    def get_all(self) -> List[T]:
        """Get all stored entities."""
        pass

    @abstractmethod
    def get_by_id(self, id: ID) -> T:
        """Get an entity by ID.

        Raises:
            NotFoundException: If no entity with this ID exists
        """
        pass

    @abstractmethod
    def upsert(self, entity: T) -> T:
        """Create or update an entity and return the stored version.

        Raises:
            DuplicationException: If a unique field collides with another entity
        """
        pass

    @abstractmethod
    def delete(self, id: ID) -> None:
        """Delete an entity by ID.

        Raises:
            NotFoundException: If no entity with this ID exists
        """
        pass


class PosDataService(CrudDataService[Pos, int]):
    """Data-access port for points of sale."""

    @abstractmethod
    def get_by_name(self, name: str) -> Pos:
        """Get a POS by its unique name."""
        pass


class UserDataService(CrudDataService[User, int]):
    """Data-access port for users."""

    @abstractmethod
    def get_by_login_name(self, login_name: str) -> User:
        """Get a user by login name."""
        pass
