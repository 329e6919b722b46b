"""Ports through which forms talk back to whoever is driving them.

A web UI would pop toast notifications and change route; the CLI prints
coloured lines; tests record the calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Toaster(ABC):

    @abstractmethod
    def success(self, message: str) -> None:
        """Show a transient success notification."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show a transient failure notification."""


class Navigator(ABC):

    @abstractmethod
    def push(self, path: str) -> None:
        """Move to another admin page, e.g. ``/{store_id}/colors``."""

    @abstractmethod
    def refresh(self) -> None:
        """Re-fetch server data for the current page."""
