"""RSVP flow for one guest: page state, headcount checks and submission.

A guest who has not answered yet is always shown the form (``rsvp`` mode).
Once they answer they land on ``view`` and can go back to the form until the
configured cutoff. The cutoff is reported to the client only; a submission
after it is still accepted.
"""

import logging
from datetime import UTC, datetime
from typing import Any

from src.guests.access import load_guest_for_rsvp
from src.guests.dtos import (
    Attending,
    GuestDTO,
    GuestValidationError,
    RSVPMode,
    RSVPPageDTO,
    RSVPResponseDTO,
)
from src.guests.repository.read_models import GuestReadModel
from src.guests.repository.write_models import GuestWriteModel

logger = logging.getLogger(__name__)


def is_change_allowed(cutoff: datetime | None, now: datetime | None = None) -> bool:
    if cutoff is None:
        return True
    if now is None:
        now = datetime.now(UTC) if cutoff.tzinfo else datetime.now()
    return now <= cutoff


def build_rsvp_page(
    guest: GuestDTO, cutoff: datetime | None = None, now: datetime | None = None
) -> RSVPPageDTO:
    return RSVPPageDTO(
        id=guest.id,
        full_name=guest.full_name,
        attendance_max_count=guest.attendance_max_count,
        attendance_updated_count=guest.attendance_updated_count,
        attending=guest.attending,
        mode=RSVPMode.VIEW if guest.responded else RSVPMode.RSVP,
        headcount_fixed=guest.attendance_max_count == 1,
        change_allowed=is_change_allowed(cutoff, now),
        change_deadline=cutoff,
    )


def resolve_headcount(requested: Any, max_count: int) -> int:
    """
    Turn the submitted headcount into a number of seats.
    Raises GuestValidationError when it is not a whole number in 1..max_count.
    """
    if max_count == 1:
        # Single seat: the count input is not shown
        return 1

    try:
        if isinstance(requested, bool):
            raise ValueError(requested)
        number = int(str(requested).strip())
    except (TypeError, ValueError):
        number = 0

    if number <= 0:
        raise GuestValidationError(
            f"You have {max_count} seats available. Please enter a number of "
            f"participants less than or equal to {max_count}.",
            title="Invalid Number",
        )
    if number > max_count:
        raise GuestValidationError(
            f"You cannot exceed your reserved seats ({max_count}).",
            title="Exceeds Limit",
        )
    return number


async def submit_rsvp(
    read_model: GuestReadModel,
    write_model: GuestWriteModel,
    guest_id: str,
    token: str | None,
    attending: Attending | None,
    count: Any = None,
) -> RSVPResponseDTO:
    """
    Record a guest's answer.
    Nothing is written unless the token matches and the answer is valid, and the
    returned state is the one the store confirmed.
    """
    guest = await load_guest_for_rsvp(read_model, guest_id, token)

    if attending == Attending.YES:
        number = resolve_headcount(count, guest.attendance_max_count)
        updated = await write_model.update_guest(
            guest.id, attending=Attending.YES, attendance_updated_count=number
        )
        message = f"Your attendance has been confirmed for {updated.attendance_updated_count} people."
    elif attending == Attending.NO:
        updated = await write_model.update_guest(
            guest.id, attending=Attending.NO, attendance_updated_count=0
        )
        message = "You have confirmed that you will not attend."
    else:
        raise GuestValidationError(
            "Please select Yes or No before confirming your RSVP.",
            title="Attendance Required",
        )

    logger.info(
        "Guest %s answered %s for %d seat(s)",
        guest.id,
        updated.attending.value,
        updated.attendance_updated_count,
    )
    return RSVPResponseDTO(
        message=message,
        attending=updated.attending,
        attendance_updated_count=updated.attendance_updated_count,
    )
