from typing import Any

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from src.guests.dependencies import get_guest_read_model, get_guest_write_model
from src.guests.dtos import Attending, GuestDTO, GuestError
from src.guests.features.manage_guests.service import create_guest, delete_guest, edit_guest
from src.guests.http_errors import to_http_exception
from src.guests.links import MAX_TOKEN_LENGTH, MIN_TOKEN_LENGTH, build_rsvp_url, generate_token
from src.guests.repository.read_models import GuestReadModel
from src.guests.repository.write_models import GuestWriteModel
from src.guests.urls import CREATE_GUEST_URL, GENERATE_TOKEN_URL, GUEST_DETAIL_URL

router = APIRouter()


class GuestCreateRequest(BaseModel):
    id: str = ""
    full_name: str = ""
    token: str = ""
    # Raw form input; parsed by the service
    attendance_max_count: Any = None


class GuestEditRequest(BaseModel):
    full_name: str = ""
    token: str = ""
    # Raw form input; parsed by the service
    attendance_max_count: Any = None


class GuestResponse(BaseModel):
    id: str
    full_name: str
    token: str
    attendance_max_count: int
    attendance_updated_count: int
    attending: Attending | None = None
    url: str

    @classmethod
    def from_dto(cls, guest: GuestDTO) -> "GuestResponse":
        return cls(
            id=guest.id,
            full_name=guest.full_name,
            token=guest.token,
            attendance_max_count=guest.attendance_max_count,
            attendance_updated_count=guest.attendance_updated_count,
            attending=guest.attending,
            url=build_rsvp_url(guest.id, guest.token),
        )


class TokenResponse(BaseModel):
    token: str


class MessageResponse(BaseModel):
    message: str


@router.get(GENERATE_TOKEN_URL, response_model=TokenResponse)
async def get_new_token(
    length: int | None = Query(default=None, ge=MIN_TOKEN_LENGTH, le=MAX_TOKEN_LENGTH),
) -> TokenResponse:
    """Generate a random alphanumeric token for a new invitee."""
    return TokenResponse(token=generate_token(length))


@router.post(CREATE_GUEST_URL, response_model=GuestResponse, status_code=201)
async def add_guest(
    request: GuestCreateRequest,
    read_model: GuestReadModel = Depends(get_guest_read_model),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> GuestResponse:
    """
    Add an invitee.
    Name, id, token and a positive max count are required; the id must be new.
    """
    try:
        guest = await create_guest(
            read_model=read_model,
            write_model=write_model,
            guest_id=request.id,
            full_name=request.full_name,
            token=request.token,
            attendance_max_count=request.attendance_max_count,
        )
    except GuestError as e:
        raise to_http_exception(e) from e
    return GuestResponse.from_dto(guest)


@router.put(GUEST_DETAIL_URL, response_model=GuestResponse)
async def update_guest(
    guest_id: str,
    request: GuestEditRequest,
    read_model: GuestReadModel = Depends(get_guest_read_model),
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> GuestResponse:
    """Edit an invitee's name, token and max count. The RSVP answer is never touched."""
    try:
        guest = await edit_guest(
            read_model=read_model,
            write_model=write_model,
            guest_id=guest_id,
            full_name=request.full_name,
            token=request.token,
            attendance_max_count=request.attendance_max_count,
        )
    except GuestError as e:
        raise to_http_exception(e) from e
    return GuestResponse.from_dto(guest)


@router.delete(GUEST_DETAIL_URL, response_model=MessageResponse)
async def remove_guest(
    guest_id: str,
    write_model: GuestWriteModel = Depends(get_guest_write_model),
) -> MessageResponse:
    """Delete an invitee. This cannot be undone."""
    try:
        await delete_guest(write_model, guest_id)
    except GuestError as e:
        raise to_http_exception(e) from e
    return MessageResponse(message="Deleted successfully")
