import io
from enum import Enum

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from src.guests.dependencies import get_guest_read_model
from src.guests.dtos import GuestError, GuestNotFoundError
from src.guests.features.export_guests.spreadsheet import build_csv, build_workbook
from src.guests.http_errors import to_http_exception
from src.guests.repository.read_models import GuestReadModel
from src.guests.urls import EXPORT_GUESTS_URL

router = APIRouter()

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class ExportFormat(str, Enum):
    XLSX = "xlsx"
    CSV = "csv"


@router.get(EXPORT_GUESTS_URL)
async def export_guests(
    format: ExportFormat = ExportFormat.XLSX,
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> StreamingResponse:
    """Download every invitee as a spreadsheet, one row per guest."""
    try:
        guests = await read_model.list_guests()
        if not guests:
            raise GuestNotFoundError("No invitees to download.")
    except GuestError as e:
        raise to_http_exception(e) from e

    if format == ExportFormat.CSV:
        return StreamingResponse(
            iter([build_csv(guests)]),
            media_type="text/csv",
            headers={"Content-Disposition": "attachment; filename=invitees.csv"},
        )

    return StreamingResponse(
        io.BytesIO(build_workbook(guests)),
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": "attachment; filename=invitees.xlsx"},
    )
