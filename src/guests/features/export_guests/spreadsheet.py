"""Row-per-guest spreadsheet export of the invitee list."""

import csv
import io

from openpyxl import Workbook

from src.guests.dtos import GuestDTO
from src.guests.links import build_rsvp_url

SHEET_NAME = "Invitees"
COLUMNS = [
    "Full Name",
    "Unique ID",
    "Token",
    "Attendance",
    "Attending",
    "Max Count",
    "Updated Count",
    "URL",
]


def guest_to_row(guest: GuestDTO, base_url: str | None = None) -> list:
    return [
        guest.full_name,
        guest.id,
        guest.token,
        "Responded" if guest.responded else "Pending",
        guest.attending.value if guest.attending else "-",
        guest.attendance_max_count,
        guest.attendance_updated_count,
        build_rsvp_url(guest.id, guest.token, base_url=base_url),
    ]


def build_workbook(guests: list[GuestDTO], base_url: str | None = None) -> bytes:
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = SHEET_NAME
    sheet.append(COLUMNS)
    for guest in guests:
        sheet.append(guest_to_row(guest, base_url))

    buffer = io.BytesIO()
    workbook.save(buffer)
    return buffer.getvalue()


def build_csv(guests: list[GuestDTO], base_url: str | None = None) -> str:
    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(COLUMNS)
    for guest in guests:
        writer.writerow(guest_to_row(guest, base_url))
    return output.getvalue()
