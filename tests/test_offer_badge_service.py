"""Tests for the offer badges view state."""
import pytest

from visconti_admin.core.exceptions import ApiStatusError
from visconti_admin.repositories.offer_badge_repository import OfferBadgeRepository
from visconti_admin.services.offer_badge_service import OfferBadgeView

from factories import badge


@pytest.fixture
def view(fake_api):
    fake_api.on("GET", "api/offer-badges", [badge("b1", "Lunch"), badge("b2", "Family")])
    offers = OfferBadgeView(OfferBadgeRepository(fake_api))
    offers.load()
    return offers


def test_load_replaces_list(view):
    assert [b.title for b in view.badges] == ["Lunch", "Family"]
    assert view.badges[0].discount_label == "10%"


def test_created_badge_goes_first_and_form_resets(view, fake_api):
    fake_api.on(
        "POST",
        "api/offer-badges",
        badge("b3", "Happy Hour", discount=20, expiry="2025-12-31T00:00:00.000Z"),
    )

    created = view.submit(
        {"title": "Happy Hour", "description": "", "discount": "20", "expiry_date": "2025-12-31"}
    )

    assert created is True
    assert [b.id for b in view.badges] == ["b3", "b1", "b2"]
    assert view.badges[0].expiry_date.isoformat() == "2025-12-31"
    assert view.form.title == ""
    sent = fake_api.calls_to("POST", "api/offer-badges")[0]["json"]
    assert sent == {
        "title": "Happy Hour",
        "description": "",
        "discount": 20,
        "expiryDate": "2025-12-31",
    }
    assert isinstance(sent["discount"], int)


@pytest.mark.parametrize("missing", ["title", "discount", "expiry_date"])
def test_missing_required_field_sends_nothing(view, fake_api, missing):
    values = {"title": "Happy Hour", "discount": "20", "expiry_date": "2025-12-31"}
    values[missing] = ""

    assert view.submit(values) is False
    assert fake_api.calls_to("POST", "api/offer-badges") == []
    assert len(view.badges) == 2


def test_failed_create_keeps_the_form(view, fake_api):
    fake_api.on("POST", "api/offer-badges", error=ApiStatusError(400, "HTTP 400"))

    assert view.submit({"title": "Happy Hour", "discount": "20", "expiry_date": "2025-12-31"}) is False
    assert view.form.title == "Happy Hour"
    assert len(view.badges) == 2
    assert view.submitting is False


def test_out_of_range_discount_is_rejected(view, fake_api):
    assert view.submit({"title": "Too much", "discount": "150", "expiry_date": "2025-12-31"}) is False
    assert fake_api.calls_to("POST", "api/offer-badges") == []


def test_confirmed_delete_removes_badge(view, fake_api):
    fake_api.on("DELETE", "api/offer-badges/b1", None)
    view.request_delete("b1")

    assert view.confirm_delete(True) is True
    assert [b.id for b in view.badges] == ["b2"]


def test_declined_or_failed_delete_keeps_badge(view, fake_api):
    view.request_delete("b1")
    assert view.confirm_delete(False) is False
    assert fake_api.calls_to("DELETE", "api/offer-badges/b1") == []

    fake_api.on("DELETE", "api/offer-badges/b1", error=ApiStatusError(500, "HTTP 500"))
    view.request_delete("b1")
    assert view.confirm_delete(True) is False
    assert len(view.badges) == 2
