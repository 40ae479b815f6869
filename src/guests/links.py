"""Token generation and shareable RSVP links."""

import secrets
import string
from urllib.parse import quote, urlencode

from src.config.settings import settings

TOKEN_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
MIN_TOKEN_LENGTH = 4
MAX_TOKEN_LENGTH = 8


def generate_token(length: int | None = None) -> str:
    length = length or settings.token_length
    if not MIN_TOKEN_LENGTH <= length <= MAX_TOKEN_LENGTH:
        raise ValueError(
            f"Token length must be between {MIN_TOKEN_LENGTH} and {MAX_TOKEN_LENGTH}"
        )
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


def build_rsvp_url(guest_id: str, token: str, base_url: str | None = None) -> str:
    """Link a guest opens to answer: ``{base}/rsvp/{id}?token={token}``."""
    base = (base_url or settings.share_base_url).rstrip("/")
    return f"{base}/rsvp/{quote(guest_id, safe='')}?{urlencode({'token': token})}"
