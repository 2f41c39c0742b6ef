"""Named-route table loaded from YAML: implements the RouteResolver interface."""

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any
from urllib.parse import quote, urlencode

import yaml

from cigi_web.application.interfaces.route_resolver import RouteResolver
from cigi_web.domain.exceptions import MissingRouteParameterError, RouteNotFoundError

logger = logging.getLogger(__name__)

_PLACEHOLDER_RE = re.compile(r"\{(\w+)\??\}")


class YamlRouteTable(RouteResolver):
    """Route names mapped to URL templates like ``/admin/news/{news}``.

    The YAML file groups routes in sections; section names are only for
    readability and are flattened away on load.
    """

    def __init__(self, routes: Mapping[str, str], base_url: str = ""):
        self._routes = dict(routes)
        self._base_url = base_url.rstrip("/")

    @classmethod
    def from_file(cls, path: str | Path, base_url: str = "") -> "YamlRouteTable":
        raw = yaml.safe_load(Path(path).read_text("utf-8")) or {}
        routes = cls._flatten(raw)
        logger.info("Loaded %d named routes from %s", len(routes), path)
        return cls(routes, base_url)

    @staticmethod
    def _flatten(raw: Mapping[str, Any]) -> dict[str, str]:
        routes: dict[str, str] = {}
        for key, value in raw.items():
            if isinstance(value, Mapping):
                routes.update({str(k): str(v) for k, v in value.items()})
            else:
                routes[str(key)] = str(value)
        return routes

    @property
    def names(self) -> list[str]:
        return sorted(self._routes)

    def has(self, name: str) -> bool:
        return name in self._routes

    def template(self, name: str) -> str:
        try:
            return self._routes[name]
        except KeyError:
            raise RouteNotFoundError(name) from None

    def parameters(self, name: str) -> list[str]:
        return _PLACEHOLDER_RE.findall(self.template(name))

    def resolve(self, name: str, *params: Any, **query: Any) -> str:
        template = self.template(name)
        positional = list(params)
        used: set[str] = set()

        def fill(match: re.Match[str]) -> str:
            placeholder = match.group(1)
            if placeholder in query:
                used.add(placeholder)
                value = query[placeholder]
            elif positional:
                value = positional.pop(0)
            elif match.group(0).endswith("?}"):
                return ""
            else:
                raise MissingRouteParameterError(name, placeholder)
            return quote(str(value), safe="")

        path = _PLACEHOLDER_RE.sub(fill, template)
        path = path.rstrip("/") or "/"

        extra = {k: v for k, v in query.items() if k not in used and v is not None}
        url = f"{self._base_url}{path}"
        if extra:
            url = f"{url}?{urlencode(extra, doseq=True)}"
        return url
