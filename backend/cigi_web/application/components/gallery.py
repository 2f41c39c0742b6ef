"""Image gallery: grid / carousel / masonry presentation with lightbox.

Two navigation policies coexist on purpose. The grid and carousel wrap
around modulo the image count; the lightbox is bounded and disables its
arrows at the first and last image.
"""

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from cigi_web.application.components.events import DownloadRequest
from cigi_web.application.components.timer import IntervalTimer, Sleep
from cigi_web.application.interfaces import ClipboardCapability, ShareCapability
from cigi_web.application.services.notifier import Notifier

logger = logging.getLogger(__name__)


class GalleryLayout(str, Enum):
    GRID = "grid"
    CAROUSEL = "carousel"
    MASONRY = "masonry"


@dataclass(frozen=True)
class GalleryImage:
    id: str | int
    url: str
    alt: str | None = None
    caption: str | None = None
    thumbnail: str | None = None


@dataclass
class ImageView:
    id: str | int
    src: str
    alt: str
    caption: str | None
    placeholder: bool
    opacity: int
    active: bool


@dataclass
class LightboxView:
    image: GalleryImage
    counter: str
    can_previous: bool
    can_next: bool
    zoomed: bool


@dataclass
class GalleryView:
    layout: GalleryLayout
    empty: bool
    current_index: int
    images: list[ImageView] = field(default_factory=list)
    lightbox: LightboxView | None = None
    show_download: bool = True
    show_share: bool = True


class GalleryViewer:
    """Stateful gallery controller.

    ``mount()`` starts carousel autoplay when requested; ``unmount()`` tears
    the timer down. ``configure()`` is the dependency-change hook: any change
    to images, autoplay flag or interval restarts the timer from scratch.
    """

    def __init__(
        self,
        images: Sequence[GalleryImage],
        *,
        layout: GalleryLayout = GalleryLayout.GRID,
        show_lightbox: bool = True,
        show_download: bool = True,
        show_share: bool = True,
        auto_play: bool = False,
        auto_play_interval_ms: int = 5000,
        notifier: Notifier | None = None,
        share: ShareCapability | None = None,
        clipboard: ClipboardCapability | None = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.images = list(images)
        self.layout = GalleryLayout(layout)
        self.show_lightbox = show_lightbox
        self.show_download = show_download
        self.show_share = show_share
        self.auto_play = auto_play
        self.auto_play_interval_ms = auto_play_interval_ms

        self.current_index = 0
        self.is_lightbox_open = False
        self.is_auto_playing = auto_play
        self.is_zoomed = False
        self.loaded_images: set[str | int] = set()

        self._notifier = notifier
        self._share = share
        self._clipboard = clipboard
        self._sleep = sleep
        self._timer: IntervalTimer | None = None

    # ── Lifecycle / autoplay ─────────────────────────────────────────

    @property
    def timer_running(self) -> bool:
        return self._timer is not None and self._timer.running

    def mount(self) -> None:
        self._sync_timer()

    def unmount(self) -> None:
        self._clear_timer()

    def configure(
        self,
        *,
        images: Sequence[GalleryImage] | None = None,
        auto_play: bool | None = None,
        auto_play_interval_ms: int | None = None,
    ) -> None:
        if images is not None:
            self.images = list(images)
            if self.current_index >= len(self.images):
                self.current_index = 0
        if auto_play is not None:
            self.auto_play = auto_play
            self.is_auto_playing = auto_play
        if auto_play_interval_ms is not None:
            self.auto_play_interval_ms = auto_play_interval_ms
        self._sync_timer()

    def pointer_enter(self) -> None:
        """Hover pauses autoplay."""
        if self.auto_play and self.is_auto_playing:
            self.is_auto_playing = False
            self._sync_timer()

    def pointer_leave(self) -> None:
        """Leaving resumes autoplay when it was requested."""
        if self.auto_play and not self.is_auto_playing:
            self.is_auto_playing = True
            self._sync_timer()

    def _sync_timer(self) -> None:
        self._clear_timer()
        if self.auto_play and self.is_auto_playing and len(self.images) > 1:
            self._timer = IntervalTimer(self.auto_play_interval_ms / 1000, self._advance, self._sleep)
            self._timer.start()

    def _clear_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _advance(self) -> None:
        if self.images:
            self.current_index = (self.current_index + 1) % len(self.images)

    # ── Wrapping navigation (grid / carousel) ────────────────────────

    def previous(self) -> int:
        if self.images:
            self.current_index = (self.current_index - 1 + len(self.images)) % len(self.images)
        return self.current_index

    def next(self) -> int:
        self._advance()
        return self.current_index

    def go_to(self, index: int) -> int:
        if not 0 <= index < len(self.images):
            raise IndexError(f"Slide {index} out of range for {len(self.images)} images")
        self.current_index = index
        return self.current_index

    # ── Bounded navigation (lightbox) ────────────────────────────────

    @property
    def can_lightbox_previous(self) -> bool:
        return self.current_index > 0

    @property
    def can_lightbox_next(self) -> bool:
        return self.current_index < len(self.images) - 1

    def open_lightbox(self, index: int) -> bool:
        if not self.show_lightbox or not 0 <= index < len(self.images):
            return False
        self.current_index = index
        self.is_lightbox_open = True
        return True

    def close_lightbox(self) -> None:
        self.is_lightbox_open = False
        self.is_zoomed = False

    def lightbox_previous(self) -> int:
        if self.can_lightbox_previous:
            self.current_index -= 1
            self.is_zoomed = False
        return self.current_index

    def lightbox_next(self) -> int:
        if self.can_lightbox_next:
            self.current_index += 1
            self.is_zoomed = False
        return self.current_index

    def toggle_zoom(self) -> bool:
        self.is_zoomed = not self.is_zoomed
        return self.is_zoomed

    def handle_key(self, key: str) -> None:
        """Keyboard shortcuts while the lightbox is open."""
        if not self.is_lightbox_open:
            return
        match key:
            case "Escape":
                self.close_lightbox()
            case "ArrowLeft":
                self.lightbox_previous()
            case "ArrowRight":
                self.lightbox_next()

    # ── Lazy loading ─────────────────────────────────────────────────

    def mark_loaded(self, image_id: str | int) -> None:
        self.loaded_images = self.loaded_images | {image_id}

    def is_loaded(self, image_id: str | int) -> bool:
        return image_id in self.loaded_images

    # ── Share / download ─────────────────────────────────────────────

    async def share_image(self, image: GalleryImage) -> bool:
        """Native share first, clipboard copy as fallback; always toasts."""
        if self._share is not None and self._share.is_available:
            try:
                await self._share.share(
                    title=image.caption or "Check out this image",
                    text=image.caption or "Amazing photo from our gallery",
                    url=image.url,
                )
            except Exception as exc:
                logger.info("Native share failed, copying link instead: %s", exc)
            else:
                self._toast("success", "Gambar berhasil dibagikan")
                return True
        return await self._copy_link(image)

    async def _copy_link(self, image: GalleryImage) -> bool:
        if self._clipboard is None or not self._clipboard.is_available:
            self._toast("error", "Gagal membagikan gambar", "Clipboard tidak tersedia")
            return False
        try:
            await self._clipboard.write_text(image.url)
        except Exception as exc:
            logger.warning("Clipboard copy failed: %s", exc)
            self._toast("error", "Gagal menyalin tautan", str(exc))
            return False
        self._toast("success", "Tautan gambar disalin ke clipboard")
        return True

    @staticmethod
    def download(image: GalleryImage) -> DownloadRequest:
        return DownloadRequest(href=image.url, filename=image.alt or f"gallery-image-{image.id}")

    def _toast(self, kind: str, title: str, message: str | None = None) -> None:
        if self._notifier is not None:
            self._notifier.notify(kind, title, message)

    # ── View ─────────────────────────────────────────────────────────

    def render(self) -> GalleryView:
        view = GalleryView(
            layout=self.layout,
            empty=not self.images,
            current_index=self.current_index,
            show_download=self.show_download,
            show_share=self.show_share,
        )
        if not self.images:
            return view

        for index, image in enumerate(self.images):
            loaded = self.is_loaded(image.id)
            view.images.append(
                ImageView(
                    id=image.id,
                    src=image.thumbnail or image.url,
                    alt=image.alt or "",
                    caption=image.caption,
                    placeholder=not loaded,
                    opacity=1 if loaded else 0,
                    active=index == self.current_index,
                )
            )

        if self.is_lightbox_open:
            view.lightbox = LightboxView(
                image=self.images[self.current_index],
                counter=f"{self.current_index + 1} dari {len(self.images)}",
                can_previous=self.can_lightbox_previous,
                can_next=self.can_lightbox_next,
                zoomed=self.is_zoomed,
            )
        return view
