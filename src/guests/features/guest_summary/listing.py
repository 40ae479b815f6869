"""Search, sort and totals for the organizer's guest table."""

from enum import Enum

from src.guests.dtos import GuestDTO, GuestSummaryDTO


class SortField(str, Enum):
    FULL_NAME = "full_name"
    ID = "id"
    TOKEN = "token"
    ATTENDANCE = "attendance"
    ATTENDING = "attending"
    MAX_COUNT = "attendance_max_count"
    UPDATED_COUNT = "attendance_updated_count"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


def _sort_key(field: SortField):
    if field == SortField.FULL_NAME:
        return lambda guest: guest.full_name.casefold()
    if field == SortField.ID:
        return lambda guest: guest.id.casefold()
    if field == SortField.TOKEN:
        return lambda guest: guest.token
    if field == SortField.ATTENDANCE:
        # Responded guests first
        return lambda guest: not guest.responded
    if field == SortField.ATTENDING:
        return lambda guest: guest.attending.value if guest.attending else ""
    if field == SortField.MAX_COUNT:
        return lambda guest: guest.attendance_max_count
    return lambda guest: guest.attendance_updated_count


def search_guests(guests: list[GuestDTO], search: str | None) -> list[GuestDTO]:
    if not search:
        return list(guests)
    needle = search.casefold()
    return [guest for guest in guests if needle in guest.full_name.casefold()]


def sort_guests(
    guests: list[GuestDTO],
    field: SortField | None = None,
    order: SortOrder = SortOrder.ASC,
) -> list[GuestDTO]:
    """Stable sort; without a field, guests who responded come first."""
    return sorted(
        guests,
        key=_sort_key(field or SortField.ATTENDANCE),
        reverse=order == SortOrder.DESC,
    )


def summarize_guests(
    guests: list[GuestDTO],
    search: str | None = None,
    field: SortField | None = None,
    order: SortOrder = SortOrder.ASC,
) -> GuestSummaryDTO:
    """Rows to display plus totals over every loaded guest, not just the matches."""
    rows = sort_guests(search_guests(guests, search), field, order)
    return GuestSummaryDTO(
        guests=rows,
        total_max_count=sum(guest.attendance_max_count for guest in guests),
        total_updated_count=sum(guest.attendance_updated_count for guest in guests),
    )
