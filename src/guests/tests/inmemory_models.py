"""In-memory models for testing - no database required."""

from dataclasses import replace
from typing import Any

from src.guests.dtos import Attending, GuestDTO, GuestNotFoundError, PersistenceError
from src.guests.repository.read_models import GuestReadModel
from src.guests.repository.write_models import UPDATABLE_FIELDS, GuestWriteModel


class InMemoryGuestReadModel(GuestReadModel):
    """In-memory read model for testing."""

    def __init__(self, guests: dict[str, GuestDTO]):
        self._guests = guests

    async def get_guest(self, guest_id: str) -> GuestDTO | None:
        return self._guests.get(guest_id)

    async def list_guests(self) -> list[GuestDTO]:
        return list(self._guests.values())


class InMemoryGuestWriteModel(GuestWriteModel):
    """In-memory write model that records every write it performs."""

    def __init__(self, guests: dict[str, GuestDTO], fail: bool = False):
        self._guests = guests
        self.fail = fail
        self.writes: list[tuple[str, str]] = []

    def _check(self) -> None:
        if self.fail:
            raise PersistenceError("Update failed")

    async def set_guest(self, guest: GuestDTO) -> GuestDTO:
        self._check()
        self._guests[guest.id] = guest
        self.writes.append(("set", guest.id))
        return guest

    async def update_guest(self, guest_id: str, **fields: Any) -> GuestDTO:
        self._check()
        assert set(fields) <= UPDATABLE_FIELDS
        guest = self._guests.get(guest_id)
        if guest is None:
            raise GuestNotFoundError()
        updated = replace(guest, **fields)
        self._guests[guest_id] = updated
        self.writes.append(("update", guest_id))
        return updated

    async def delete_guest(self, guest_id: str) -> None:
        self._check()
        self._guests.pop(guest_id, None)
        self.writes.append(("delete", guest_id))


class InMemoryGuestStore:
    """Shared storage backing a read model and a write model."""

    def __init__(self, guests: list[GuestDTO] | None = None):
        self.guests: dict[str, GuestDTO] = {guest.id: guest for guest in guests or []}
        self.read_model = InMemoryGuestReadModel(self.guests)
        self.write_model = InMemoryGuestWriteModel(self.guests)

    def overrides(self) -> dict:
        from src.guests.dependencies import get_guest_read_model, get_guest_write_model

        return {
            get_guest_read_model: lambda: self.read_model,
            get_guest_write_model: lambda: self.write_model,
        }


def create_test_guest(
    guest_id: str = "g1",
    full_name: str = "John Doe",
    token: str = "AB12",
    attendance_max_count: int = 3,
    attendance_updated_count: int = 0,
    attending: Attending | None = None,
) -> GuestDTO:
    """Factory function to create test guests."""
    return GuestDTO(
        id=guest_id,
        full_name=full_name,
        token=token,
        attendance_max_count=attendance_max_count,
        attendance_updated_count=attendance_updated_count,
        attending=attending,
    )
