"""Public contact form."""

import asyncio
import logging
from typing import Any

from cigi_web.application.components.timer import Sleep
from cigi_web.application.forms.form_page import FormPage
from cigi_web.domain.entities import Page
from cigi_web.domain.exceptions import NavigationError

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Pesan Anda telah berhasil dikirim. Kami akan segera menghubungi Anda."
FAILURE_MESSAGE = "Terjadi kesalahan. Silakan coba lagi."


class ContactForm(FormPage):
    """Holds the submit button in its busy state for ``submit_delay`` seconds.

    The outcome is always a toast: success resets the fields, a backend
    failure keeps them so the visitor can retry.
    """

    store_route = "contact.store"

    def __init__(self, navigator, routes, *, submit_delay: float = 1.0, sleep: Sleep = asyncio.sleep, **kwargs: Any):
        super().__init__(navigator, routes, **kwargs)
        self.submit_delay = submit_delay
        self._sleep = sleep

    @classmethod
    def default_data(cls) -> dict[str, Any]:
        return {"name": "", "email": "", "phone": "", "subject": "", "message": ""}

    async def submit(self) -> Page | None:
        self.processing = True
        try:
            await self._sleep(self.submit_delay)
            return await super().submit()
        except NavigationError as exc:
            logger.warning("Contact form submission failed: %s", exc)
            self._toast_error()
            return None
        finally:
            self.processing = False

    async def on_success(self, page: Page) -> None:
        self.reset()
        if self._notifier is not None:
            self._notifier.success("Pesan terkirim", SUCCESS_MESSAGE)

    async def on_error(self, page: Page) -> None:
        self._toast_error()

    def _toast_error(self) -> None:
        if self._notifier is not None:
            self._notifier.error("Gagal mengirim pesan", FAILURE_MESSAGE)
