from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class GuestError(Exception):
    """Base class for errors surfaced to the guest or the organizer."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class GuestNotFoundError(GuestError):
    """Raised when no guest document exists for the requested id."""

    def __init__(self, message: str = "Guest not found.") -> None:
        super().__init__(message)


class InvalidTokenError(GuestError):
    """Raised when the token in the link does not match the stored token."""

    def __init__(self, message: str = "Invalid token. Access denied.") -> None:
        super().__init__(message)


class GuestValidationError(GuestError):
    """Raised when a form submission is incomplete or out of bounds."""

    def __init__(self, message: str, title: str = "Invalid input") -> None:
        self.title = title
        super().__init__(message)


class GuestAlreadyExistsError(GuestError):
    """Raised when creating a guest whose id is already taken."""

    def __init__(self, guest_id: str) -> None:
        self.guest_id = guest_id
        super().__init__("Unique ID already exists!")


class PersistenceError(GuestError):
    """Raised when the underlying store fails a read or a write."""


class Attending(str, Enum):
    YES = "yes"
    NO = "no"


class RSVPMode(str, Enum):
    VIEW = "view"
    RSVP = "rsvp"


@dataclass(frozen=True)
class GuestDTO:
    """DTO for one invitee document."""

    id: str
    full_name: str
    token: str
    attendance_max_count: int = 1
    attendance_updated_count: int = 0
    attending: Attending | None = None

    @property
    def responded(self) -> bool:
        return self.attending is not None


@dataclass(frozen=True)
class RSVPPageDTO:
    """DTO for the guest RSVP page, built only after the token check."""

    id: str
    full_name: str
    attendance_max_count: int
    attendance_updated_count: int
    attending: Attending | None
    mode: RSVPMode
    headcount_fixed: bool
    change_allowed: bool
    change_deadline: datetime | None = None


@dataclass(frozen=True)
class RSVPResponseDTO:
    """DTO for RSVP response."""

    message: str
    attending: Attending
    attendance_updated_count: int
    mode: RSVPMode = RSVPMode.VIEW


@dataclass(frozen=True)
class GuestSummaryDTO:
    """DTO for the organizer table and its aggregate values."""

    guests: list[GuestDTO] = field(default_factory=list)
    total_max_count: int = 0
    total_updated_count: int = 0
