"""Dependency injection for the data services and domain services."""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from ..config import get_config
from ..db.database import get_db
from ..domain.ports import PosDataService, UserDataService
from ..domain.services import PosService, UserService
from .memory_impl import MemoryPosDataService, MemoryUserDataService
from .sqlalchemy_impl import SQLAlchemyPosDataService, SQLAlchemyUserDataService


def _use_memory_storage() -> bool:
    return get_config().app.storage == "memory"


@lru_cache(maxsize=None)
def get_memory_pos_data_service() -> MemoryPosDataService:
    """Process-wide in-memory POS store."""
    return MemoryPosDataService()


@lru_cache(maxsize=None)
def get_memory_user_data_service() -> MemoryUserDataService:
    """Process-wide in-memory user store."""
    return MemoryUserDataService()


def get_pos_data_service(db: Session = Depends(get_db)) -> PosDataService:
    """Get the POS data service for the configured storage backend."""
    if _use_memory_storage():
        return get_memory_pos_data_service()
    return SQLAlchemyPosDataService(db)


def get_user_data_service(db: Session = Depends(get_db)) -> UserDataService:
    """Get the user data service for the configured storage backend."""
    if _use_memory_storage():
        return get_memory_user_data_service()
    return SQLAlchemyUserDataService(db)


def get_pos_service(
    data_service: PosDataService = Depends(get_pos_data_service),
) -> PosService:
    """Get POS service instance."""
    return PosService(data_service)


def get_user_service(
    data_service: UserDataService = Depends(get_user_data_service),
) -> UserService:
    """Get user service instance."""
    return UserService(data_service)
