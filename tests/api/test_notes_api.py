"""Tests for notes resolved through a resource's self link."""

import pytest

from tigerbay import LinkResolutionError, NotesNotSupportedError, TransportError
from tigerbay.models.common import HasSelfLink
from tigerbay.models.notes import Note
from tigerbay.models.reservations import Reservation
from tigerbay.models.tasks import Task


@pytest.fixture
def reservation() -> Reservation:
    return Reservation.model_validate(
        {
            "Id": 42,
            "Links": [
                {"Rel": "payments", "Href": "/3/sales/reservations/42/payments"},
                {"Rel": "self", "Href": "/sales/reservations/42"},
            ],
        }
    )


@pytest.fixture
def note() -> Note:
    return Note(type="Diet", title="Dietary", text="Vegetarian")


def test_add_posts_to_self_link(client, fake_api, reservation, note):
    """Notes are added under the resource's self href."""
    fake_api.route(
        "POST",
        "/sales/reservations/42/notes",
        {"Type": "Diet", "Title": "Dietary", "Text": "Vegetarian"},
    )

    created = client.notes.add(reservation, note)

    request = fake_api.last_request
    assert request.method == "POST"
    assert request.url.path == "/nimble/sales/reservations/42/notes"
    assert fake_api.last_json() == {
        "Type": "Diet",
        "Title": "Dietary",
        "Text": "Vegetarian",
    }
    assert created == note


def test_list_notes(client, fake_api, reservation):
    fake_api.route(
        "GET",
        "/sales/reservations/42/notes",
        [{"Type": "Generic", "Title": "Hello", "Text": "World"}],
    )

    notes = client.notes.notes(reservation)

    assert [n.title for n in notes] == ["Hello"]


def test_missing_self_link_fails_without_network(client, fake_api, note):
    """Without a self link nothing is sent, not even a token request."""
    task = Task.model_validate({"ID": 3, "Links": [{"Rel": "owner", "Href": "/x"}]})

    with pytest.raises(LinkResolutionError, match="self"):
        client.notes.add(task, note)

    assert fake_api.token_requests == []
    assert fake_api.api_requests == []


def test_404_is_translated_to_not_supported(client, reservation):
    """A 404 on the notes sub-resource means the resource has no notes."""
    with pytest.raises(NotesNotSupportedError, match="does not support notes"):
        client.notes.notes(reservation)


def test_not_supported_is_a_link_resolution_error(client, reservation, note):
    with pytest.raises(LinkResolutionError):
        client.notes.add(reservation, note)


def test_other_errors_pass_through(client, fake_api, reservation):
    """Statuses other than 404 remain transport errors."""
    fake_api.route("GET", "/sales/reservations/42/notes", {"Message": "x"}, status=500)

    with pytest.raises(TransportError) as exc_info:
        client.notes.notes(reservation)

    assert exc_info.value.status_code == 500


def test_any_self_linked_object_is_accepted(client, fake_api, note):
    """Objects outside the model hierarchy work if they provide self_href."""

    class Itinerary:
        def self_href(self) -> str:
            return "/sales/itineraries/5/"

    assert isinstance(Itinerary(), HasSelfLink)
    fake_api.route(
        "POST",
        "/sales/itineraries/5/notes",
        {"Type": "Diet", "Title": "Dietary", "Text": "Vegetarian"},
    )

    client.notes.add(Itinerary(), note)

    assert fake_api.last_request.url.path == "/nimble/sales/itineraries/5/notes"


def test_list_keeps_unrecognised_note_types(client, fake_api, reservation):
    """Note types the client does not know about are kept as strings."""
    fake_api.route(
        "GET",
        "/sales/reservations/42/notes",
        [{"Type": "SupplierNote", "Title": "t", "Text": "x"}],
    )

    (listed,) = client.notes.notes(reservation)

    assert listed.type == "SupplierNote"


def test_add_with_empty_response_raises_transport_error(
    client, fake_api, reservation, note
):
    fake_api.route("POST", "/sales/reservations/42/notes", None, status=201)

    with pytest.raises(TransportError, match="Empty response body"):
        client.notes.add(reservation, note)
