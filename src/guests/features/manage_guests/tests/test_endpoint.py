import pytest

from src.guests.dtos import Attending
from src.guests.links import TOKEN_ALPHABET
from src.guests.tests.inmemory_models import InMemoryGuestStore, create_test_guest
from src.guests.urls import (
    CREATE_GUEST_URL,
    GENERATE_TOKEN_URL,
    GET_RSVP_URL,
    GUEST_DETAIL_URL,
)


def _new_guest(**overrides):
    payload = {
        "id": "g9",
        "full_name": "Jane Roe",
        "token": "XY34",
        "attendance_max_count": 2,
    }
    payload.update(overrides)
    return payload


@pytest.mark.asyncio
async def test_generate_token(client_factory):
    async with client_factory() as client:
        default = await client.get(GENERATE_TOKEN_URL)
        short = await client.get(GENERATE_TOKEN_URL, params={"length": 4})
        too_long = await client.get(GENERATE_TOKEN_URL, params={"length": 12})

    assert default.status_code == 200
    assert len(default.json()["token"]) == 8
    assert set(default.json()["token"]) <= set(TOKEN_ALPHABET)
    assert len(short.json()["token"]) == 4
    assert too_long.status_code == 422


@pytest.mark.asyncio
async def test_create_guest(client_factory):
    store = InMemoryGuestStore()

    async with client_factory(store.overrides()) as client:
        response = await client.post(CREATE_GUEST_URL, json=_new_guest())

    assert response.status_code == 201
    data = response.json()
    assert data["id"] == "g9"
    assert data["attending"] is None
    assert data["attendance_updated_count"] == 0
    assert data["url"].endswith("/rsvp/g9?token=XY34")
    assert store.guests["g9"].attendance_max_count == 2


@pytest.mark.asyncio
async def test_create_guest_with_existing_id_is_rejected_before_writing(client_factory):
    store = InMemoryGuestStore([create_test_guest("g9", full_name="Original")])

    async with client_factory(store.overrides()) as client:
        response = await client.post(CREATE_GUEST_URL, json=_new_guest())

    assert response.status_code == 409
    assert response.json()["detail"] == "Unique ID already exists!"
    assert store.write_model.writes == []
    assert store.guests["g9"].full_name == "Original"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [
        {"full_name": ""},
        {"id": "  "},
        {"token": ""},
        {"attendance_max_count": None},
        {"attendance_max_count": "two"},
        {"attendance_max_count": True},
        {"attendance_max_count": 2.5},
    ],
)
async def test_create_guest_requires_all_fields(client_factory, overrides):
    store = InMemoryGuestStore()

    async with client_factory(store.overrides()) as client:
        response = await client.post(CREATE_GUEST_URL, json=_new_guest(**overrides))

    assert response.status_code == 422
    assert response.json()["detail"] == "Please fill all fields and generate token."
    assert store.write_model.writes == []


@pytest.mark.asyncio
@pytest.mark.parametrize("max_count", [0, -3])
async def test_create_guest_requires_positive_max_count(client_factory, max_count):
    store = InMemoryGuestStore()

    async with client_factory(store.overrides()) as client:
        response = await client.post(
            CREATE_GUEST_URL, json=_new_guest(attendance_max_count=max_count)
        )

    assert response.status_code == 422
    assert store.guests == {}


@pytest.mark.asyncio
async def test_create_guest_strips_padded_id_before_duplicate_check(client_factory):
    store = InMemoryGuestStore([create_test_guest()])

    async with client_factory(store.overrides()) as client:
        response = await client.post(CREATE_GUEST_URL, json=_new_guest(id="g1 "))

    assert response.status_code == 409
    assert store.write_model.writes == []
    assert list(store.guests) == ["g1"]


@pytest.mark.asyncio
async def test_create_guest_stores_trimmed_fields(client_factory):
    store = InMemoryGuestStore()

    async with client_factory(store.overrides()) as client:
        response = await client.post(
            CREATE_GUEST_URL,
            json=_new_guest(id=" g9 ", full_name="  Jane Roe ", token=" XY34"),
        )

    assert response.status_code == 201
    assert response.json()["url"].endswith("/rsvp/g9?token=XY34")
    guest = store.guests["g9"]
    assert guest.full_name == "Jane Roe"
    assert guest.token == "XY34"


@pytest.mark.asyncio
async def test_create_guest_rejects_slash_in_id(client_factory):
    store = InMemoryGuestStore()

    async with client_factory(store.overrides()) as client:
        response = await client.post(CREATE_GUEST_URL, json=_new_guest(id="a/b"))

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_edit_guest_keeps_rsvp_answer(client_factory):
    store = InMemoryGuestStore(
        [create_test_guest(attending=Attending.YES, attendance_updated_count=2)]
    )

    async with client_factory(store.overrides()) as client:
        response = await client.put(
            GUEST_DETAIL_URL.format(guest_id="g1"),
            json={"full_name": "John Q. Doe", "token": "NEW1", "attendance_max_count": 5},
        )

    assert response.status_code == 200
    guest = store.guests["g1"]
    assert guest.full_name == "John Q. Doe"
    assert guest.token == "NEW1"
    assert guest.attendance_max_count == 5
    assert guest.attending == Attending.YES
    assert guest.attendance_updated_count == 2


@pytest.mark.asyncio
async def test_edit_guest_cannot_drop_below_confirmed_headcount(client_factory):
    store = InMemoryGuestStore(
        [create_test_guest(attending=Attending.YES, attendance_updated_count=3)]
    )

    async with client_factory(store.overrides()) as client:
        response = await client.put(
            GUEST_DETAIL_URL.format(guest_id="g1"),
            json={"full_name": "John Doe", "token": "AB12", "attendance_max_count": 2},
        )

    assert response.status_code == 422
    assert store.guests["g1"].attendance_max_count == 3


@pytest.mark.asyncio
async def test_edit_unknown_guest(client_factory):
    store = InMemoryGuestStore()

    async with client_factory(store.overrides()) as client:
        response = await client.put(
            GUEST_DETAIL_URL.format(guest_id="g1"),
            json={"full_name": "John Doe", "token": "AB12", "attendance_max_count": 2},
        )

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_delete_guest_then_fetch_is_not_found(client_factory):
    store = InMemoryGuestStore([create_test_guest()])

    async with client_factory(store.overrides()) as client:
        deleted = await client.delete(GUEST_DETAIL_URL.format(guest_id="g1"))
        fetched = await client.get(GET_RSVP_URL.format(guest_id="g1"), params={"token": "AB12"})

    assert deleted.status_code == 200
    assert deleted.json()["message"] == "Deleted successfully"
    assert fetched.status_code == 404
    assert "g1" not in store.guests


@pytest.mark.asyncio
async def test_delete_failure_is_reported(client_factory):
    store = InMemoryGuestStore([create_test_guest()])
    store.write_model.fail = True

    async with client_factory(store.overrides()) as client:
        response = await client.delete(GUEST_DETAIL_URL.format(guest_id="g1"))

    assert response.status_code == 503
    assert "g1" in store.guests
