"""Abstract navigator: port for the backend's visit/request layer."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from cigi_web.domain.entities import FileUpload, NavigationOptions, Page


class Navigator(ABC):
    """Port: performs a page visit and returns the freshly rendered page.

    Components treat visits as fire-and-forget; the returned ``Page`` is the
    re-render with new props that the owning page may adopt.
    """

    @abstractmethod
    async def visit(
        self,
        method: str,
        url: str,
        data: Mapping[str, Any] | None = None,
        *,
        files: Mapping[str, FileUpload] | None = None,
        options: NavigationOptions = NavigationOptions(),
    ) -> Page:
        """Issue a visit.

        Args:
            method: HTTP verb (GET, POST, PUT, PATCH, DELETE).
            url: Absolute or backend-relative URL, usually from a route resolver.
            data: Query parameters for GET, form fields otherwise.
            files: File blobs to send as multipart entries.
            options: Client-side state/scroll preservation hints.
        """
        ...

    async def get(
        self,
        url: str,
        params: Mapping[str, Any] | None = None,
        options: NavigationOptions = NavigationOptions(),
    ) -> Page:
        return await self.visit("GET", url, params, options=options)

    async def post(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        files: Mapping[str, FileUpload] | None = None,
        options: NavigationOptions = NavigationOptions(),
    ) -> Page:
        return await self.visit("POST", url, data, files=files, options=options)

    async def put(
        self,
        url: str,
        data: Mapping[str, Any] | None = None,
        options: NavigationOptions = NavigationOptions(),
    ) -> Page:
        return await self.visit("PUT", url, data, options=options)

    async def delete(
        self,
        url: str,
        options: NavigationOptions = NavigationOptions(),
    ) -> Page:
        return await self.visit("DELETE", url, options=options)
