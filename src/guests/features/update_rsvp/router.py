from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.guests.dependencies import get_guest_read_model, get_guest_write_model
from src.guests.dtos import Attending, GuestError, RSVPMode
from src.guests.http_errors import to_http_exception
from src.guests.repository.read_models import GuestReadModel
from src.guests.repository.write_models import GuestWriteModel
from src.guests.rsvp_flow import submit_rsvp as submit_rsvp_flow
from src.guests.urls import UPDATE_RSVP_URL

router = APIRouter()


class RSVPResponseSubmit(BaseModel):
    attending: Attending | None = None
    # Raw form input; checked against the guest's reserved seats
    count: Any = None


class RSVPResponse(BaseModel):
    message: str
    attending: Attending
    attendance_updated_count: int
    mode: RSVPMode


@router.post(UPDATE_RSVP_URL, response_model=RSVPResponse)
async def submit_rsvp(
    guest_id: str,
    rsvp_data: RSVPResponseSubmit,
    token: str | None = None,
    read_model: GuestReadModel = Depends(get_guest_read_model),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> RSVPResponse:
    """
    Submit RSVP response for a guest.
    "no" always succeeds; "yes" needs a headcount between 1 and the reserved seats.
    """
    try:
        response_dto = await submit_rsvp_flow(
            read_model=read_model,
            write_model=write_model,
            guest_id=guest_id,
            token=token,
            attending=rsvp_data.attending,
            count=rsvp_data.count,
        )
    except GuestError as e:
        raise to_http_exception(e) from e

    return RSVPResponse(
        message=response_dto.message,
        attending=response_dto.attending,
        attendance_updated_count=response_dto.attendance_updated_count,
        mode=response_dto.mode,
    )
