"""Terminal implementations of the form feedback ports."""

from __future__ import annotations

import click

from ecom.application.feedback import Navigator, Toaster
from ecom.utils.logger import get_logger

logger = get_logger(__name__)


class ClickToaster(Toaster):

    def success(self, message: str) -> None:
        click.secho(message, fg="green")

    def error(self, message: str) -> None:
        click.secho(message, fg="red", err=True)


class ClickNavigator(Navigator):
    """Remembers where the form asked to go; a CLI has no page to change."""

    def __init__(self) -> None:
        self.path: str | None = None

    def push(self, path: str) -> None:
        self.path = path
        logger.debug(f"Navigate to {path}")

    def refresh(self) -> None:
        logger.debug("Refresh requested")
