"""Abstract named-route resolver: opaque name → URL lookup."""

from abc import ABC, abstractmethod
from typing import Any


class RouteResolver(ABC):
    """Port: components never build URLs by hand, they ask for a named route."""

    @abstractmethod
    def resolve(self, name: str, *params: Any, **query: Any) -> str:
        """Return the URL for ``name``.

        Positional ``params`` fill the route placeholders in order; keyword
        arguments matching a placeholder fill it by name, the rest become
        the query string.
        """
        ...

    @abstractmethod
    def has(self, name: str) -> bool:
        ...
