"""Organizer operations on the invitee collection: create, edit and delete."""

import logging
from typing import Any

from src.guests.dtos import (
    Attending,
    GuestAlreadyExistsError,
    GuestDTO,
    GuestNotFoundError,
    GuestValidationError,
)
from src.guests.repository.read_models import GuestReadModel
from src.guests.repository.write_models import GuestWriteModel

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Please fill all fields and generate token."


def parse_max_count(value: Any) -> int:
    """Reserved seats must be a whole number of at least one."""
    try:
        if isinstance(value, bool):
            raise ValueError(value)
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise GuestValidationError(MISSING_FIELDS_MESSAGE) from None
    if number < 1:
        raise GuestValidationError("Max count must be at least 1.")
    return number


def _require(*values: str | None) -> tuple[str, ...]:
    """Return the values stripped of surrounding whitespace; every one must be non-empty."""
    cleaned = tuple((value or "").strip() for value in values)
    if not all(cleaned):
        raise GuestValidationError(MISSING_FIELDS_MESSAGE)
    return cleaned


async def create_guest(
    read_model: GuestReadModel,
    write_model: GuestWriteModel,
    guest_id: str | None,
    full_name: str | None,
    token: str | None,
    attendance_max_count: Any,
) -> GuestDTO:
    """Add a new invitee who has not answered yet."""
    full_name, guest_id, token = _require(full_name, guest_id, token)
    max_count = parse_max_count(attendance_max_count)
    if "/" in guest_id:
        raise GuestValidationError("Unique ID cannot contain '/'.")

    existing = await read_model.list_guests()
    if any(guest.id == guest_id for guest in existing):
        raise GuestAlreadyExistsError(guest_id)

    guest = await write_model.set_guest(
        GuestDTO(
            id=guest_id,
            full_name=full_name,
            token=token,
            attendance_max_count=max_count,
            attendance_updated_count=0,
            attending=None,
        )
    )
    logger.info("Created invitee %s with %d seat(s)", guest.id, guest.attendance_max_count)
    return guest


async def edit_guest(
    read_model: GuestReadModel,
    write_model: GuestWriteModel,
    guest_id: str,
    full_name: str | None,
    token: str | None,
    attendance_max_count: Any,
) -> GuestDTO:
    """Overwrite name, token and reserved seats. The guest's answer is left alone."""
    full_name, token = _require(full_name, token)
    max_count = parse_max_count(attendance_max_count)

    current = await read_model.get_guest(guest_id)
    if current is None:
        raise GuestNotFoundError()
    if current.attending == Attending.YES and max_count < current.attendance_updated_count:
        raise GuestValidationError(
            f"Max count cannot be lower than the confirmed headcount "
            f"({current.attendance_updated_count})."
        )

    guest = await write_model.update_guest(
        guest_id,
        full_name=full_name,
        token=token,
        attendance_max_count=max_count,
    )
    logger.info("Updated invitee %s", guest_id)
    return guest


async def delete_guest(write_model: GuestWriteModel, guest_id: str) -> None:
    await write_model.delete_guest(guest_id)
    logger.info("Deleted invitee %s", guest_id)
