"""Blocking confirmation step for destructive actions."""

from abc import ABC, abstractmethod


class Confirmer(ABC):
    @abstractmethod
    async def confirm(self, message: str) -> bool:
        """Ask the user; True only on explicit confirmation."""
        ...
