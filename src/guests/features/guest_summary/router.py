from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.guests.dependencies import get_guest_read_model
from src.guests.dtos import Attending, GuestDTO, GuestError
from src.guests.features.guest_summary.listing import SortField, SortOrder, summarize_guests
from src.guests.http_errors import to_http_exception
from src.guests.links import build_rsvp_url
from src.guests.repository.read_models import GuestReadModel
from src.guests.urls import SUMMARY_URL

router = APIRouter()


class GuestRow(BaseModel):
    """One row of the organizer table."""

    id: str
    full_name: str
    token: str
    responded: str  # "Responded" or "Pending"
    attending: Attending | None = None
    attendance_max_count: int
    attendance_updated_count: int
    url: str

    @classmethod
    def from_dto(cls, guest: GuestDTO) -> "GuestRow":
        return cls(
            id=guest.id,
            full_name=guest.full_name,
            token=guest.token,
            responded="Responded" if guest.responded else "Pending",
            attending=guest.attending,
            attendance_max_count=guest.attendance_max_count,
            attendance_updated_count=guest.attendance_updated_count,
            url=build_rsvp_url(guest.id, guest.token),
        )


class GuestSummaryResponse(BaseModel):
    guests: list[GuestRow]
    count: int
    total_max_count: int
    total_updated_count: int


@router.get(SUMMARY_URL, response_model=GuestSummaryResponse)
async def get_guest_summary(
    search: str | None = None,
    sort: SortField | None = None,
    order: SortOrder = SortOrder.ASC,
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> GuestSummaryResponse:
    """
    List every invitee for the organizer.
    `search` matches the full name case-insensitively; totals always cover all invitees.
    """
    try:
        guests = await read_model.list_guests()
    except GuestError as e:
        raise to_http_exception(e) from e

    summary = summarize_guests(guests, search=search, field=sort, order=order)
    return GuestSummaryResponse(
        guests=[GuestRow.from_dto(guest) for guest in summary.guests],
        count=len(summary.guests),
        total_max_count=summary.total_max_count,
        total_updated_count=summary.total_updated_count,
    )
