"""Unit tests for the gallery viewer."""

import pytest

from cigi_web.application.components.gallery import GalleryImage, GalleryLayout, GalleryViewer
from cigi_web.application.interfaces import ShareCapability
from cigi_web.domain.entities import ToastType
from cigi_web.infrastructure.browser.capabilities import InMemoryClipboard, UnavailableShare


def _images(count: int = 3) -> list[GalleryImage]:
    return [GalleryImage(id=i, url=f"/img/{i}.jpg", alt=f"Foto {i}") for i in range(count)]


class RecordingShare(ShareCapability):
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.shared: list[tuple[str, str, str]] = []

    @property
    def is_available(self) -> bool:
        return True

    async def share(self, title: str, text: str, url: str) -> None:
        if self.fail:
            raise RuntimeError("AbortError")
        self.shared.append((title, text, url))


# ── Wrapping navigation ──


def test_next_and_previous_wrap():
    viewer = GalleryViewer(_images(3))

    assert viewer.previous() == 2
    assert viewer.next() == 0
    assert viewer.next() == 1


def test_go_to_rejects_out_of_range():
    viewer = GalleryViewer(_images(2))
    assert viewer.go_to(1) == 1
    with pytest.raises(IndexError):
        viewer.go_to(2)


def test_navigation_on_empty_gallery_is_a_no_op():
    viewer = GalleryViewer([])
    assert viewer.next() == 0
    assert viewer.previous() == 0
    assert viewer.render().empty


# ── Lightbox ──


def test_lightbox_is_bounded():
    viewer = GalleryViewer(_images(3))
    assert viewer.open_lightbox(0)

    assert not viewer.can_lightbox_previous
    assert viewer.lightbox_previous() == 0

    viewer.lightbox_next()
    viewer.lightbox_next()
    assert viewer.current_index == 2
    assert not viewer.can_lightbox_next
    assert viewer.lightbox_next() == 2


def test_lightbox_navigation_resets_zoom():
    viewer = GalleryViewer(_images(3))
    viewer.open_lightbox(1)
    viewer.toggle_zoom()

    viewer.lightbox_next()
    assert not viewer.is_zoomed


def test_lightbox_disabled_or_bad_index():
    assert not GalleryViewer(_images(2), show_lightbox=False).open_lightbox(0)
    assert not GalleryViewer(_images(2)).open_lightbox(5)


def test_keyboard_shortcuts_only_while_open():
    viewer = GalleryViewer(_images(3))
    viewer.handle_key("ArrowRight")
    assert viewer.current_index == 0

    viewer.open_lightbox(0)
    viewer.handle_key("ArrowRight")
    assert viewer.current_index == 1
    viewer.handle_key("ArrowLeft")
    assert viewer.current_index == 0
    viewer.toggle_zoom()
    viewer.handle_key("Escape")
    assert not viewer.is_lightbox_open
    assert not viewer.is_zoomed


def test_render_lightbox_counter():
    viewer = GalleryViewer(_images(4), layout=GalleryLayout.MASONRY)
    viewer.open_lightbox(2)
    view = viewer.render()

    assert view.layout is GalleryLayout.MASONRY
    assert view.lightbox.counter == "3 dari 4"
    assert view.images[2].active


def test_images_fade_in_once_loaded():
    viewer = GalleryViewer(_images(2))
    viewer.mark_loaded(1)
    first, second = viewer.render().images

    assert first.placeholder and first.opacity == 0
    assert not second.placeholder and second.opacity == 1


# ── Autoplay ──


@pytest.mark.asyncio
async def test_autoplay_advances_and_pauses_on_hover(clock):
    viewer = GalleryViewer(
        _images(3),
        layout=GalleryLayout.CAROUSEL,
        auto_play=True,
        auto_play_interval_ms=5000,
        sleep=clock.sleep,
    )
    viewer.mount()
    assert viewer.timer_running

    await clock.tick()
    assert viewer.current_index == 1
    assert clock.sleeps[0] == 5.0

    viewer.pointer_enter()
    assert not viewer.timer_running
    await clock.tick()
    assert viewer.current_index == 1

    viewer.pointer_leave()
    assert viewer.timer_running
    await clock.tick()
    await clock.tick()
    assert viewer.current_index == 0

    viewer.unmount()
    assert not viewer.timer_running


@pytest.mark.asyncio
async def test_autoplay_needs_more_than_one_image(clock):
    viewer = GalleryViewer(_images(1), auto_play=True, sleep=clock.sleep)
    viewer.mount()
    assert not viewer.timer_running


@pytest.mark.asyncio
async def test_configure_restarts_timer_and_clamps_index(clock):
    viewer = GalleryViewer(_images(5), auto_play=True, sleep=clock.sleep)
    viewer.mount()
    viewer.go_to(4)

    viewer.configure(images=_images(2), auto_play_interval_ms=1000)
    assert viewer.current_index == 0
    assert viewer.timer_running

    await clock.tick()
    assert clock.sleeps[-1] == 1.0

    viewer.configure(auto_play=False)
    assert not viewer.timer_running
    viewer.unmount()


# ── Share / download ──


@pytest.mark.asyncio
async def test_native_share_success(notifier, toast_host):
    share = RecordingShare()
    viewer = GalleryViewer(_images(1), notifier=notifier, share=share)

    assert await viewer.share_image(viewer.images[0])
    assert share.shared[0][2] == "/img/0.jpg"
    assert toast_host.history[-1].title == "Gambar berhasil dibagikan"


@pytest.mark.asyncio
async def test_failed_share_falls_back_to_clipboard(notifier, toast_host):
    clipboard = InMemoryClipboard()
    viewer = GalleryViewer(_images(1), notifier=notifier, share=RecordingShare(fail=True), clipboard=clipboard)

    assert await viewer.share_image(viewer.images[0])
    assert clipboard.contents == "/img/0.jpg"
    assert toast_host.history[-1].title == "Tautan gambar disalin ke clipboard"


@pytest.mark.asyncio
async def test_no_share_and_no_clipboard_reports_error(notifier, toast_host):
    viewer = GalleryViewer(
        _images(1),
        notifier=notifier,
        share=UnavailableShare(),
        clipboard=InMemoryClipboard(available=False),
    )

    assert not await viewer.share_image(viewer.images[0])
    assert toast_host.history[-1].type is ToastType.ERROR
    assert toast_host.history[-1].title == "Gagal membagikan gambar"


def test_download_filename_falls_back_to_id():
    assert GalleryViewer.download(GalleryImage(id=7, url="/a.jpg")).filename == "gallery-image-7"
    assert GalleryViewer.download(GalleryImage(id=7, url="/a.jpg", alt="Pantai")).filename == "Pantai"
