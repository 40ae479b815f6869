"""Guest write models - persist guest documents and return DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from functools import partial
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import GuestDTO, GuestNotFoundError, PersistenceError
from src.guests.repository.orm_models import Guest

logger = logging.getLogger(__name__)

# Fields a partial update may touch; the key is never rewritten
UPDATABLE_FIELDS = frozenset(
    {
        "full_name",
        "token",
        "attendance_max_count",
        "attendance_updated_count",
        "attending",
    }
)


class GuestWriteModel(ABC):
    @abstractmethod
    async def set_guest(self, guest: GuestDTO) -> GuestDTO:
        """Create the guest document, or overwrite it when the key exists."""
        raise NotImplementedError

    @abstractmethod
    async def update_guest(self, guest_id: str, **fields: Any) -> GuestDTO:
        """
        Merge the named fields into an existing guest.
        Raises GuestNotFoundError if the guest does not exist.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete_guest(self, guest_id: str) -> None:
        """Remove the guest document. Deleting a missing key is a no-op."""
        raise NotImplementedError


class SqlGuestWriteModel(GuestWriteModel):
    """SQL implementation of guest write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def set_guest(self, guest: GuestDTO) -> GuestDTO:
        try:
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                row = await session.get(Guest, guest.id)
                if row is None:
                    row = Guest(id=guest.id)
                    session.add(row)
                row.full_name = guest.full_name
                row.token = guest.token
                row.attendance_max_count = guest.attendance_max_count
                row.attendance_updated_count = guest.attendance_updated_count
                row.attending = guest.attending
                await session.flush()
                return row.to_dto()
        except SQLAlchemyError as e:
            logger.exception("Failed to save guest %s", guest.id)
            raise PersistenceError("Failed to save invitee") from e

    async def update_guest(self, guest_id: str, **fields: Any) -> GuestDTO:
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update fields: {', '.join(sorted(unknown))}")

        try:
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                row = await session.get(Guest, guest_id)
                if row is None:
                    raise GuestNotFoundError()
                for name, value in fields.items():
                    setattr(row, name, value)
                await session.flush()
                return row.to_dto()
        except SQLAlchemyError as e:
            logger.exception("Failed to update guest %s", guest_id)
            raise PersistenceError("Update failed") from e

    async def delete_guest(self, guest_id: str) -> None:
        try:
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                row = await session.get(Guest, guest_id)
                if row is not None:
                    await session.delete(row)
        except SQLAlchemyError as e:
            logger.exception("Failed to delete guest %s", guest_id)
            raise PersistenceError("Delete failed") from e
