"""Domain services built on the data-access ports."""

from typing import Generic, List, Type, TypeVar

from ..utils.logging_config import get_logger
from .models import DomainModel, Pos, User
from .ports import CrudDataService, PosDataService, UserDataService

T = TypeVar("T", bound=DomainModel)
ID = TypeVar("ID")

logger = get_logger("domain")


class CrudService(Generic[T, ID]):
    """Generic CRUD service delegating persistence to a ``CrudDataService``.

    The only logic of its own lives in :meth:`upsert`: an entity without an
    ID is created, an entity with an ID must already exist and is updated.
    Failures raised by the data service are never caught or translated.
    """

    def __init__(self, domain_class: Type[T], data_service: CrudDataService[T, ID]):
        self.domain_class = domain_class
        self._data_service = data_service

    def data_service(self) -> CrudDataService[T, ID]:
        """Get the underlying data service."""
        return self._data_service

    def clear(self) -> None:
        """Remove all entities of this type."""
        logger.debug(f"Clearing all {self.domain_class.__name__} entities")
        self._data_service.clear()

    def get_all(self) -> List[T]:
        """Get all entities of this type."""
        return self._data_service.get_all()

    def get_by_id(self, id: ID) -> T:
        """Get an entity by ID; raises ``NotFoundException`` if absent."""
        return self._data_service.get_by_id(id)

    def upsert(self, entity: T) -> T:
        """Create the entity if it has no ID, otherwise update it."""
        if entity.id is None:
            logger.debug(f"Creating new {self.domain_class.__name__}")
        else:
            logger.debug(f"Updating {self.domain_class.__name__} with ID {entity.id}")
            # Fails fast with NotFoundException
            self._data_service.get_by_id(entity.id)

        return self._data_service.upsert(entity)

    def delete(self, id: ID) -> None:
        """Delete an entity by ID."""
        logger.debug(f"Deleting {self.domain_class.__name__} with ID {id}")
        self._data_service.delete(id)


class PosService(CrudService[Pos, int]):
    """Service for points of sale."""

    def __init__(self, data_service: PosDataService):
        super().__init__(Pos, data_service)

    def get_by_name(self, name: str) -> Pos:
        """Get a POS by its unique name."""
        return self._data_service.get_by_name(name)


class UserService(CrudService[User, int]):
    """Service for users."""

    def __init__(self, data_service: UserDataService):
        super().__init__(User, data_service)

    def get_by_login_name(self, login_name: str) -> User:
        """Get a user by login name."""
        return self._data_service.get_by_login_name(login_name)
