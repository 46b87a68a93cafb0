"""Domain model for CampusCoffee."""

from abc import ABC
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Generic, Optional, TypeVar

ID = TypeVar("ID")


class DomainModel(ABC, Generic[ID]):
    """Capability contract for every persistable domain object.

    An ``id`` of ``None`` means the object has not been persisted yet.
    """

    id: Optional[ID]


class PosType(str, Enum):
    """Kinds of points of sale."""

    CAFE = "CAFE"
    BAKERY = "BAKERY"
    CAFETERIA = "CAFETERIA"
    VENDING_MACHINE = "VENDING_MACHINE"


class CampusType(str, Enum):
    """Campus locations of the university."""

    ALTSTADT = "ALTSTADT"
    BERGHEIM = "BERGHEIM"
    INF = "INF"


@dataclass
class Pos(DomainModel[int]):
    """A point of sale on campus."""

    name: str
    description: str
    type: PosType
    campus: CampusType
    street: str
    house_number: str
    postal_code: int
    city: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass
class User(DomainModel[int]):
    """A registered user of the application."""

    login_name: str
    email_address: str
    first_name: str
    last_name: str
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
