import abc
import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from src.config.database import async_session_manager
from src.guests.dtos import GuestDTO, PersistenceError
from src.guests.repository.orm_models import Guest

logger = logging.getLogger(__name__)


class GuestReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_guest(self, guest_id: str) -> GuestDTO | None:
        """Get one guest by its key. Returns None when it does not exist."""
        raise NotImplementedError

    @abc.abstractmethod
    async def list_guests(self) -> list[GuestDTO]:
        """Get every guest in the collection."""
        raise NotImplementedError


class SqlGuestReadModel(GuestReadModel):
    """SQL implementation of the guest read model."""

    async def get_guest(self, guest_id: str) -> GuestDTO | None:
        try:
            async with async_session_manager(auto_commit=False) as session:
                guest = await session.get(Guest, guest_id)
                return guest.to_dto() if guest else None
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch guest %s", guest_id)
            raise PersistenceError("Error fetching guest.") from e

    async def list_guests(self) -> list[GuestDTO]:
        try:
            async with async_session_manager(auto_commit=False) as session:
                result = await session.execute(select(Guest).order_by(Guest.created_at, Guest.id))
                return [guest.to_dto() for guest in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.exception("Failed to fetch invitees")
            raise PersistenceError("Error fetching invitees") from e
