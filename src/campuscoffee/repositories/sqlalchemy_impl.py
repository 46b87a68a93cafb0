"""SQLAlchemy concrete implementations of the data-access ports."""

from dataclasses import fields
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Generic, List, Tuple, Type, TypeVar

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db.models import PosRow, UserRow
from ..domain.exceptions import DuplicationException, NotFoundException
from ..domain.models import DomainModel, Pos, User
from ..domain.ports import CrudDataService, PosDataService, UserDataService
from ..utils.logging_config import get_logger

T = TypeVar("T", bound=DomainModel)

logger = get_logger("database")

# Maintained by the database, never copied from a domain object
_MANAGED_COLUMNS = ("id", "created_at", "updated_at")


class SQLAlchemyCrudDataService(CrudDataService[T, int], Generic[T]):
    """SQLAlchemy implementation of CrudDataService.

    Maps rows of ``row_class`` to instances of the ``domain_class`` dataclass
    field by field. Enum fields are stored by value.
    """

    def __init__(
        self,
        session: Session,
        domain_class: Type[T],
        row_class: type,
        unique_fields: Tuple[str, ...] = (),
    ):
        self._session = session
        self.domain_class = domain_class
        self.row_class = row_class
        self.unique_fields = unique_fields

    def clear(self) -> None:
        """Remove all rows of this entity type."""
        deleted = self._session.query(self.row_class).delete()
        self._session.commit()
        logger.info(f"Cleared {deleted} {self.domain_class.__name__} rows")

    def get_all(self) -> List[T]:
        """Get all entities ordered by ID."""
        rows = self._session.query(self.row_class).order_by(self.row_class.id).all()
        return [self._to_domain(row) for row in rows]

    def get_by_id(self, id: int) -> T:
        """Get an entity by ID."""
        row = self._session.get(self.row_class, id)
        if row is None:
            raise NotFoundException(self.domain_class, id)
        return self._to_domain(row)

    def upsert(self, entity: T) -> T:
        """Insert the entity if it has no ID, otherwise update its row."""
        if entity.id is None:
            row = self.row_class()
        else:
            row = self._session.get(self.row_class, entity.id)
            if row is None:
                raise NotFoundException(self.domain_class, entity.id)

        self._check_unique_fields(entity)

        for column, value in self._to_row_values(entity).items():
            setattr(row, column, value)
        self._session.add(row)

        try:
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            # A concurrent writer may have taken a unique value after the check
            self._check_unique_fields(entity)
            raise exc

        self._session.refresh(row)
        return self._to_domain(row)

    def delete(self, id: int) -> None:
        """Delete an entity by ID."""
        row = self._session.get(self.row_class, id)
        if row is None:
            raise NotFoundException(self.domain_class, id)
        self._session.delete(row)
        self._session.commit()

    def _get_by_field(self, field: str, value: Any) -> T:
        """Get an entity by a unique field."""
        row = (
            self._session.query(self.row_class)
            .filter(getattr(self.row_class, field) == value)
            .first()
        )
        if row is None:
            raise NotFoundException(self.domain_class, value, field=field)
        return self._to_domain(row)

    def _check_unique_fields(self, entity: T) -> None:
        """Raise DuplicationException if a unique field is already taken."""
        for field in self.unique_fields:
            value = getattr(entity, field)
            query = self._session.query(self.row_class.id).filter(
                getattr(self.row_class, field) == value
            )
            if entity.id is not None:
                query = query.filter(self.row_class.id != entity.id)
            if query.first() is not None:
                raise DuplicationException(self.domain_class, field, value)

    def _to_row_values(self, entity: T) -> Dict[str, Any]:
        """Column values for the writable fields of an entity."""
        values = {}
        for field in fields(entity):
            if field.name in _MANAGED_COLUMNS:
                continue
            value = getattr(entity, field.name)
            values[field.name] = value.value if isinstance(value, Enum) else value
        return values

    def _to_domain(self, row) -> T:
        """Build a domain object from a row."""
        values = {}
        for field in fields(self.domain_class):
            value = getattr(row, field.name)
            if isinstance(field.type, type) and issubclass(field.type, Enum):
                value = field.type(value)
            elif isinstance(value, datetime) and value.tzinfo is None:
                # SQLite drops the offset; stored values are UTC
                value = value.replace(tzinfo=timezone.utc)
            values[field.name] = value
        return self.domain_class(**values)


class SQLAlchemyPosDataService(SQLAlchemyCrudDataService[Pos], PosDataService):
    """SQLAlchemy implementation of PosDataService."""

    def __init__(self, session: Session):
        super().__init__(session, Pos, PosRow, unique_fields=("name",))

    def get_by_name(self, name: str) -> Pos:
        """Get a POS by its unique name."""
        return self._get_by_field("name", name)


class SQLAlchemyUserDataService(SQLAlchemyCrudDataService[User], UserDataService):
    """SQLAlchemy implementation of UserDataService."""

    def __init__(self, session: Session):
        super().__init__(
            session, User, UserRow, unique_fields=("login_name", "email_address")
        )

    def get_by_login_name(self, login_name: str) -> User:
        """Get a user by login name."""
        return self._get_by_field("login_name", login_name)
