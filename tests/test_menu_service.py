"""Tests for the menu management view state."""
import pytest

from visconti_admin.core.exceptions import ApiStatusError, ApiTransportError
from visconti_admin.repositories.menu_repository import MenuRepository
from visconti_admin.services.menu_service import MenuManagementView

from factories import grouped, menu_item, png_file


def make_items(count, category="pizze-tradizionali", prefix="p"):
    return [menu_item(f"{prefix}{i}", f"Item {i}", category) for i in range(count)]


@pytest.fixture
def view(fake_api):
    fake_api.on(
        "GET",
        "api/menu",
        grouped(
            **{
                "pizze-tradizionali": make_items(8),
                "calzoni": make_items(3, "calzoni", "c"),
            }
        ),
    )
    menu = MenuManagementView(MenuRepository(fake_api), page_size=6)
    menu.load()
    return menu


def test_load_flattens_groups(view):
    assert len(view.items) == 11
    assert [item.id for item in view.items[-3:]] == ["c0", "c1", "c2"]
    assert view.loading is False


def test_load_failure_leaves_empty_working_set(fake_api):
    fake_api.on("GET", "api/menu", error=ApiTransportError("down"))
    menu = MenuManagementView(MenuRepository(fake_api), page_size=6)

    menu.load()

    assert menu.items == []
    assert menu.loading is False


@pytest.mark.parametrize("category, expected", [("calzoni", 3), ("pizze-tradizionali", 8), ("all", 11), ("bibite", 0)])
def test_filter_matches_category(view, category, expected):
    view.set_filter(category)
    assert len(view.filtered_items) == expected
    assert all(category == "all" or item.category == category for item in view.filtered_items)


def test_filter_change_resets_cursor(view):
    view.next_page()
    assert view.pagination.page == 1

    view.set_filter("pizze-tradizionali")

    assert view.pagination.page == 0
    assert [item.id for item in view.visible_items()] == [f"p{i}" for i in range(6)]


def test_paging_stops_at_boundaries(view):
    view.previous_page()
    assert view.pagination.page == 0
    view.next_page()
    view.next_page()
    assert view.pagination.page == 1
    assert len(view.visible_items()) == 5
    assert not view.pagination.has_next


def test_create_appends_exactly_one_item(view, fake_api):
    fake_api.on("POST", "api/menu", menu_item("new", "Diavola"))
    view.open_new()

    closed = view.submit(
        {"name": "Diavola", "description": "Spicy", "price": "9.00", "category": "pizze-speciali"}
    )

    assert closed is True
    assert view.draft is None
    assert len(view.items) == 12
    assert view.items[-1].id == "new"
    sent = fake_api.calls_to("POST", "api/menu")[0]
    assert sent["files"] == {
        "name": (None, "Diavola"),
        "description": (None, "Spicy"),
        "price": (None, "9.00"),
        "category": (None, "pizze-speciali"),
    }


def test_edit_without_new_image_does_not_resend_it(view, fake_api):
    fake_api.on("PUT", "api/menu/p1", menu_item("p1", "Renamed"))
    draft = view.open_edit("p1")
    assert draft.preview_url == "https://cdn.test/p1.jpg"

    assert view.submit({"name": "Renamed"}) is True

    sent = fake_api.calls_to("PUT", "api/menu/p1")[0]
    assert "image" not in sent["files"]
    assert sent["files"]["name"] == (None, "Renamed")
    updated = view.find("p1")
    assert updated.name == "Renamed"
    assert updated.image == "https://cdn.test/p1.jpg"
    assert len(view.items) == 11


def test_edit_with_new_image_sends_the_file(view, fake_api):
    fake_api.on("PUT", "api/menu/p1", menu_item("p1", "Item 1", image="https://cdn.test/new.jpg"))
    view.open_edit("p1")
    view.select_image(png_file("new.png"))

    assert view.draft.preview_url.startswith("data:image/png;base64,")
    view.submit({})

    sent = fake_api.calls_to("PUT", "api/menu/p1")[0]
    assert sent["files"]["image"][0] == "new.png"
    assert view.find("p1").image == "https://cdn.test/new.jpg"


def test_selecting_again_replaces_the_pending_file(view):
    view.open_new()
    view.select_image(png_file("first.png"))
    view.select_image(png_file("second.png"))

    assert view.draft.pending_file.filename == "second.png"


def test_failed_submit_keeps_the_form_open(view, fake_api):
    fake_api.on("POST", "api/menu", error=ApiStatusError(500, "HTTP 500"))
    view.open_new()

    closed = view.submit(
        {"name": "Diavola", "description": "Spicy", "price": "9.00", "category": "calzoni"},
        png_file(),
    )

    assert closed is False
    assert view.draft.name == "Diavola"
    assert view.draft.pending_file is not None
    assert len(view.items) == 11
    assert view.submitting is False


def test_invalid_form_never_reaches_backend(view, fake_api):
    view.open_new()

    assert view.submit({"name": "", "description": "x", "price": "1"}) is False
    assert fake_api.calls_to("POST", "api/menu") == []
    assert view.form_open


def test_submit_ignored_while_outstanding(view, fake_api):
    view.open_new()
    view.submitting = True

    assert view.submit({"name": "A", "description": "B", "price": "1"}) is False
    assert fake_api.calls_to("POST", "api/menu") == []


def test_declined_delete_leaves_items_unchanged(view, fake_api):
    before = [item.model_dump() for item in view.items]
    assert view.request_delete("p3")

    assert view.confirm_delete(False) is False

    assert [item.model_dump() for item in view.items] == before
    assert fake_api.calls_to("DELETE", "api/menu/p3") == []
    assert view.pending_delete is None


def test_confirmed_delete_removes_only_the_target(view, fake_api):
    fake_api.on("DELETE", "api/menu/p3", None)
    view.request_delete("p3")

    assert view.confirm_delete(True) is True

    assert view.find("p3") is None
    assert len(view.items) == 10


def test_failed_delete_keeps_the_item(view, fake_api):
    fake_api.on("DELETE", "api/menu/p3", error=ApiStatusError(404, "HTTP 404"))
    view.request_delete("p3")

    assert view.confirm_delete(True) is False
    assert view.find("p3") is not None


def test_delete_on_last_page_clamps_cursor(view, fake_api):
    fake_api.on("DELETE", "api/menu/c2", None)
    view.set_filter("calzoni")
    view.request_delete("c2")
    view.confirm_delete(True)

    assert view.pagination.page == 0
    assert len(view.visible_items()) == 2


def test_response_for_unmounted_view_is_discarded(fake_api):
    menu = MenuManagementView(MenuRepository(fake_api), page_size=6)

    def unmount_then_answer():
        menu.lifecycle.unmount()
        return grouped(calzoni=make_items(2, "calzoni"))

    fake_api.on("GET", "api/menu", unmount_then_answer)
    menu.load()

    assert menu.items == []
