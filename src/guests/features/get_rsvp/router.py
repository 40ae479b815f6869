from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.config.settings import settings
from src.guests.access import load_guest_for_rsvp
from src.guests.dependencies import get_guest_read_model
from src.guests.dtos import Attending, GuestError, RSVPMode
from src.guests.http_errors import to_http_exception
from src.guests.repository.read_models import GuestReadModel
from src.guests.rsvp_flow import build_rsvp_page
from src.guests.urls import GET_RSVP_URL

router = APIRouter()


class RSVPPageResponse(BaseModel):
    """Response for the RSVP page - token omitted as it's in the URL."""

    id: str
    full_name: str
    attendance_max_count: int
    attendance_updated_count: int
    attending: Attending | None = None
    mode: RSVPMode
    headcount_fixed: bool  # max count of 1 skips the count input
    change_allowed: bool
    change_deadline: datetime | None = None


@router.get(GET_RSVP_URL, response_model=RSVPPageResponse)
async def get_rsvp_page(
    guest_id: str,
    token: str | None = None,
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> RSVPPageResponse:
    """
    Get RSVP page information for a guest link.
    Returns the current answer and whether the guest may still change it.
    """
    try:
        guest = await load_guest_for_rsvp(read_model, guest_id, token)
    except GuestError as e:
        raise to_http_exception(e) from e

    page = build_rsvp_page(guest, cutoff=settings.rsvp_cutoff)
    return RSVPPageResponse(
        id=page.id,
        full_name=page.full_name,
        attendance_max_count=page.attendance_max_count,
        attendance_updated_count=page.attendance_updated_count,
        attending=page.attending,
        mode=page.mode,
        headcount_fixed=page.headcount_fixed,
        change_allowed=page.change_allowed,
        change_deadline=page.change_deadline,
    )
