"""SQLAlchemy models for CampusCoffee."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from .database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PosRow(Base):
    """A point of sale on campus."""

    __tablename__ = "pos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    description = Column(String(1000), nullable=False, default="")
    type = Column(String(32), nullable=False)  # PosType value
    campus = Column(String(32), nullable=False)  # CampusType value
    street = Column(String(255), nullable=False)
    house_number = Column(String(16), nullable=False)
    postal_code = Column(Integer, nullable=False)
    city = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    def __repr__(self) -> str:
        return f"<PosRow(id={self.id}, name='{self.name}')>"


class UserRow(Base):
    """A registered user."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    login_name = Column(String(255), nullable=False, unique=True)
    email_address = Column(String(255), nullable=False, unique=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = Column(
        DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow
    )

    def __repr__(self) -> str:
        return f"<UserRow(id={self.id}, login_name='{self.login_name}')>"
