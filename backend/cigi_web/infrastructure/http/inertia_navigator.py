"""Inertia-protocol navigator: implements the Navigator interface over httpx.

Every visit is an XHR carrying ``X-Inertia: true``; the backend answers with
a JSON page object (component, props, url, version). Validation failures come
back as 422 with an ``errors`` body, and an asset-version mismatch as 409 with
``X-Inertia-Location`` naming the URL to load instead.
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from cigi_web.application.interfaces.navigator import Navigator
from cigi_web.domain.entities import FileUpload, NavigationOptions, Page
from cigi_web.domain.exceptions import NavigationError
from cigi_web.infrastructure.logging.colored_logger import UiChannel, UiEventLogger

logger = logging.getLogger(__name__)
plog = UiEventLogger("InertiaHttpNavigator")

FormPairs = list[tuple[str, str]]


def encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


def encode_pairs(data: Mapping[str, Any] | None) -> FormPairs:
    """Flatten visit data into ordered key/value pairs.

    Lists become repeated ``key[]`` entries and ``None`` values are dropped,
    the way the backend's request parser expects them.
    """
    pairs: FormPairs = []
    for key, value in (data or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            pairs.extend((f"{key}[]", encode_value(v)) for v in value if v is not None)
        else:
            pairs.append((key, encode_value(value)))
    return pairs


class InertiaHttpNavigator(Navigator):
    """Infrastructure adapter: talks to the server-driven backend.

    Uses an injected ``httpx.AsyncClient`` when given (tests pass one backed
    by ``httpx.MockTransport``); otherwise opens a short-lived client per visit.
    """

    def __init__(
        self,
        base_url: str,
        *,
        version: str = "",
        timeout: float = 30.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._version = version
        self._timeout = timeout
        self._http_client = http_client

    def _get_headers(self) -> dict[str, str]:
        headers = {
            "X-Inertia": "true",
            "X-Requested-With": "XMLHttpRequest",
            "Accept": "text/html, application/xhtml+xml",
        }
        if self._version:
            headers["X-Inertia-Version"] = self._version
        return headers

    def _absolute(self, url: str) -> str:
        if url.startswith(("http://", "https://")):
            return url
        return f"{self._base_url}/{url.lstrip('/')}"

    async def _get_client(self) -> httpx.AsyncClient:
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout, follow_redirects=True)

    async def visit(
        self,
        method: str,
        url: str,
        data: Mapping[str, Any] | None = None,
        *,
        files: Mapping[str, FileUpload] | None = None,
        options: NavigationOptions = NavigationOptions(),
    ) -> Page:
        method = method.upper()
        target = self._absolute(url)
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            with plog.timed_step(UiChannel.NAVIGATE, f"{method} {url}", fields=len(data or {})):
                response = await self._send(client, method, target, data, files)

                location = response.headers.get("X-Inertia-Location")
                if response.status_code == 409 and location:
                    plog.detail("Asset version changed, following location", location=location)
                    response = await self._send(client, "GET", self._absolute(location), None, None)

                return self._to_page(method, target, response, options)
        finally:
            if should_close:
                await client.aclose()

    async def _send(
        self,
        client: httpx.AsyncClient,
        method: str,
        url: str,
        data: Mapping[str, Any] | None,
        files: Mapping[str, FileUpload] | None,
    ) -> httpx.Response:
        pairs = encode_pairs(data)
        headers = self._get_headers()
        if method == "GET":
            return await client.request(method, url, params=pairs or None, headers=headers)
        if files:
            multipart = [
                (name, (upload.filename, upload.content, upload.content_type))
                for name, upload in files.items()
            ]
            fields: dict[str, list[str]] = {}
            for key, value in pairs:
                fields.setdefault(key, []).append(value)
            return await client.request(method, url, data=fields, files=multipart, headers=headers)
        if pairs:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            body = str(httpx.QueryParams(pairs))
            return await client.request(method, url, content=body, headers=headers)
        return await client.request(method, url, headers=headers)

    def _to_page(self, method: str, url: str, response: httpx.Response, options: NavigationOptions) -> Page:
        if response.status_code == 422:
            body = self._json(response) or {}
            errors = body.get("errors") or {}
            flat = {k: (v[0] if isinstance(v, list) and v else v) for k, v in errors.items()}
            logger.info("Validation failed for %s %s: %s", method, url, sorted(flat))
            return Page(component="", props={"errors": flat}, url=url, options=options)

        if response.status_code >= 400:
            self._raise_navigation_error(method, url, response)

        body = self._json(response)
        if not isinstance(body, Mapping):
            raise NavigationError(method, url, response.status_code, "Response is not a page object")

        if "component" not in body:
            # Plain JSON endpoints (navigation data, pickers) carry bare props.
            return Page(component="", props=dict(body), url=str(response.url), options=options)

        return Page(
            component=str(body["component"]),
            props=dict(body.get("props") or {}),
            url=str(body.get("url") or response.url),
            version=body.get("version"),
            options=options,
        )

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None

    def _raise_navigation_error(self, method: str, url: str, response: httpx.Response) -> None:
        body = self._json(response)
        if isinstance(body, Mapping) and isinstance(body.get("message"), str):
            message = body["message"]
        else:
            message = response.text[:200] or response.reason_phrase
        raise NavigationError(method, url, response.status_code, message)
