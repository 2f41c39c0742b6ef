"""Unit tests for the media browser and the Media entity."""

from datetime import datetime

import pytest

from cigi_web.application.components.events import ClickEvent
from cigi_web.application.components.media_browser import MediaBrowser
from cigi_web.domain.entities import Dimensions, Media


def _media(media_id: int, **kwargs) -> Media:
    defaults = dict(
        id=media_id,
        filename=f"file-{media_id}.jpg",
        original_filename=f"Foto {media_id}.jpg",
        mime_type="image/jpeg",
        size=2048,
        url=f"/storage/media/file-{media_id}.jpg",
    )
    defaults.update(kwargs)
    return Media.from_mapping(defaults)


@pytest.fixture
def media():
    return [_media(1), _media(2), _media(3, mime_type="application/pdf", original_filename="Profil.pdf")]


def test_select_all_is_derived(media):
    browser = MediaBrowser(media, selected_items=[1, 2])
    assert not browser.select_all

    browser.toggle_item(3, True)
    assert browser.select_all

    browser.toggle_item(1, False)
    assert not browser.select_all


def test_select_all_false_when_empty():
    assert not MediaBrowser([]).select_all


def test_toggle_select_all_reports_selection(media):
    reported = []
    browser = MediaBrowser(media, on_selection_change=reported.append)

    browser.toggle_select_all(True)
    browser.toggle_select_all(False)

    assert reported == [[1, 2, 3], []]


def test_toggle_item_is_idempotent(media):
    browser = MediaBrowser(media, selected_items=[2])
    assert browser.toggle_item(2, True) == [2]


@pytest.mark.asyncio
async def test_item_action_does_not_open_item(media):
    viewed, deleted = [], []
    browser = MediaBrowser(media, on_view=viewed.append, on_delete=deleted.append)

    assert await browser.item_action("delete", media[0])
    assert deleted == [media[0]]
    assert viewed == []


@pytest.mark.asyncio
async def test_container_click_opens_item(media):
    viewed = []
    browser = MediaBrowser(media, on_view=viewed.append)

    assert await browser.click_item(media[1])
    assert viewed == [media[1]]

    stopped = ClickEvent()
    stopped.stop_propagation()
    assert not await browser.click_item(media[1], stopped)


@pytest.mark.asyncio
async def test_item_action_without_handler(media):
    browser = MediaBrowser(media)
    assert not await browser.item_action("edit", media[0])


def test_view_mode_change_is_reported(media):
    modes = []
    browser = MediaBrowser(media, on_view_mode_change=modes.append)
    browser.set_view_mode("list")
    assert browser.view_mode == "list"
    assert modes == ["list"]


def test_loading_renders_skeletons_in_layout_shape(media):
    view = MediaBrowser(media, loading=True, view_mode="list", skeleton_count=3).render()

    assert view.items == []
    assert len(view.skeletons) == 3
    assert "checkbox" in view.skeletons[0].parts


def test_render_items(media):
    browser = MediaBrowser(media, selected_items=[3])
    items = browser.render().items

    assert items[0].preview_url == "/storage/media/file-1.jpg"
    assert items[0].badge is None
    assert items[2].preview_url is None
    assert items[2].badge == "PDF"
    assert items[2].selected


def test_download_request_uses_original_filename(media):
    request = MediaBrowser.download_request(media[0])
    assert request.href == "/storage/media/file-1.jpg"
    assert request.filename == "Foto 1.jpg"


def test_media_from_mapping():
    item = Media.from_mapping(
        {
            "id": 9,
            "filename": "x.png",
            "mime_type": "image/png",
            "size": 10,
            "url": "/x.png",
            "dimensions": {"width": 800, "height": 600},
            "tags": ["hero"],
            "show_homepage": True,
            "created_at": "2025-08-05T10:00:00",
        }
    )
    assert item.dimensions == Dimensions(800, 600)
    assert item.is_image
    assert item.tags == ["hero"]
    assert item.show_homepage
    assert item.created_at == datetime(2025, 8, 5, 10, 0)


def test_foreign_ids_are_not_selected(media):
    browser = MediaBrowser(media[:2])
    browser.toggle_item(1, True)

    assert browser.toggle_item(99, True) == [1]
    assert not browser.select_all
    assert browser.toggle_item(2, True) == [1, 2]
    assert browser.select_all
