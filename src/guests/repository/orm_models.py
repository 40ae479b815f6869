from sqlalchemy import Enum, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.guests.dtos import Attending, GuestDTO
from src.models.base import TimeStamp


class Guest(TimeStamp):
    __tablename__ = TableNames.INVITEES.value

    # Organizer-chosen key, also the path segment of the RSVP link
    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    token: Mapped[str] = mapped_column(String(64), nullable=False)

    attendance_max_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    attendance_updated_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # None until the guest answers
    attending: Mapped[Attending | None] = mapped_column(
        Enum(Attending, name="attending_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=True,
        default=None,
    )

    def to_dto(self) -> GuestDTO:
        return GuestDTO(
            id=self.id,
            full_name=self.full_name,
            token=self.token,
            attendance_max_count=self.attendance_max_count,
            attendance_updated_count=self.attendance_updated_count,
            attending=Attending(self.attending) if self.attending else None,
        )

    def __repr__(self) -> str:
        return f"<Guest {self.id} - {self.attending}>"
