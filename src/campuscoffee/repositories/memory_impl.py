"""In-memory implementations of the data-access ports."""

import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Generic, List, Optional, Tuple, Type, TypeVar

from ..domain.exceptions import DuplicationException, NotFoundException
from ..domain.models import DomainModel, Pos, User
from ..domain.ports import CrudDataService, PosDataService, UserDataService

T = TypeVar("T", bound=DomainModel)


class MemoryCrudDataService(CrudDataService[T, int], Generic[T]):
    """In-memory implementation of CrudDataService.

    Entities are stored as copies keyed by an integer ID assigned on create.
    Fields listed in ``unique_fields`` must not collide between entities.
    """

    def __init__(self, domain_class: Type[T], unique_fields: Tuple[str, ...] = ()):
        self.domain_class = domain_class
        self.unique_fields = unique_fields
        self._entities: Dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def clear(self) -> None:
        """Remove all stored entities."""
        with self._lock:
            self._entities.clear()

    def get_all(self) -> List[T]:
        """Get all stored entities ordered by ID."""
        with self._lock:
            return [replace(self._entities[key]) for key in sorted(self._entities)]

    def get_by_id(self, id: int) -> T:
        """Get an entity by ID."""
        with self._lock:
            entity = self._entities.get(id)
            if entity is None:
                raise NotFoundException(self.domain_class, id)
            return replace(entity)

    def upsert(self, entity: T) -> T:
        """Create or update an entity."""
        now = datetime.now(timezone.utc)
        with self._lock:
            if entity.id is not None and entity.id not in self._entities:
                raise NotFoundException(self.domain_class, entity.id)

            self._check_unique_fields(entity)

            if entity.id is None:
                stored = replace(entity, id=self._next_id)
                self._next_id += 1
                self._stamp(stored, created_at=now)
            else:
                stored = replace(entity)
                self._stamp(stored, created_at=self._entities[entity.id].created_at)
            self._stamp(stored, updated_at=now)

            self._entities[stored.id] = stored
            return replace(stored)

    def delete(self, id: int) -> None:
        """Delete an entity by ID."""
        with self._lock:
            if id not in self._entities:
                raise NotFoundException(self.domain_class, id)
            del self._entities[id]

    def _find_by_field(self, field: str, value) -> Optional[T]:
        """Find the first stored entity whose field equals value."""
        with self._lock:
            for entity in self._entities.values():
                if getattr(entity, field) == value:
                    return replace(entity)
        return None

    def _check_unique_fields(self, entity: T) -> None:
        """Raise DuplicationException if a unique field is already taken."""
        for field in self.unique_fields:
            value = getattr(entity, field)
            for other in self._entities.values():
                if other.id != entity.id and getattr(other, field) == value:
                    raise DuplicationException(self.domain_class, field, value)

    @staticmethod
    def _stamp(entity: T, **timestamps) -> None:
        """Set timestamp fields the entity declares."""
        for field, value in timestamps.items():
            if hasattr(entity, field):
                setattr(entity, field, value)


class MemoryPosDataService(MemoryCrudDataService[Pos], PosDataService):
    """In-memory implementation of PosDataService."""

    def __init__(self):
        super().__init__(Pos, unique_fields=("name",))

    def get_by_name(self, name: str) -> Pos:
        """Get a POS by its unique name."""
        pos = self._find_by_field("name", name)
        if pos is None:
            raise NotFoundException(Pos, name, field="name")
        return pos


class MemoryUserDataService(MemoryCrudDataService[User], UserDataService):
    """In-memory implementation of UserDataService."""

    def __init__(self):
        super().__init__(User, unique_fields=("login_name", "email_address"))

    def get_by_login_name(self, login_name: str) -> User:
        """Get a user by login name."""
        user = self._find_by_field("login_name", login_name)
        if user is None:
            raise NotFoundException(User, login_name, field="login_name")
        return user
