import logging

from src.guests.dtos import GuestDTO, GuestNotFoundError, InvalidTokenError
from src.guests.repository.read_models import GuestReadModel

logger = logging.getLogger(__name__)


async def load_guest_for_rsvp(
    read_model: GuestReadModel, guest_id: str, token: str | None
) -> GuestDTO:
    """
    Fetch a guest by id and check the link token against the stored one.
    Nothing about the guest leaves this function when the token does not match.
    """
    guest = await read_model.get_guest(guest_id)
    if guest is None:
        raise GuestNotFoundError()

    if token is None or guest.token != token:
        logger.warning("Rejected RSVP access for guest %s: token mismatch", guest_id)
        raise InvalidTokenError()

    return guest
