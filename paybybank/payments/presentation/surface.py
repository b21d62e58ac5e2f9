"""Presentation surface contract.

The host application subclasses PresentationSurface to show the link in its
embedded browser and forwards the browser's events to the handle_* hooks.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any
from urllib.parse import parse_qsl, urlsplit

from paybybank.core.exceptions import UnknownError
from paybybank.core.logging import get_logger
from paybybank.payments.presentation.error_channel import ErrorChannel
from paybybank.payments.schemas import Completion, PayByBankResult, PayByBankResultType, ResolvedLink

logger = get_logger(__name__)


class PresentationSurface(ABC):
    """Displays a resolved link and emits at most one terminal event."""

    def __init__(
        self,
        link: ResolvedLink,
        on_terminal: Completion,
        error_channel: ErrorChannel,
    ):
        self.link = link
        self.on_terminal = on_terminal
        self.error_channel = error_channel
        self.is_open = False
        self.is_finished = False

    @abstractmethod
    def _present(self, host_context: Any) -> None:
        """Show the web view for self.link.url inside host_context."""

    @abstractmethod
    def _remove(self) -> None:
        """Tear the web view down."""

    def open(self, host_context: Any) -> None:
        if self.is_open:
            return
        logger.debug("Presenting %s", self.link.url)
        self._present(host_context)
        self.is_open = True

    def dismiss(self) -> None:
        if not self.is_open:
            return
        self._remove()
        self.is_open = False

    def is_redirect(self, url: str) -> bool:
        """Same scheme, host and path as the redirect URL; query and fragment may differ."""
        target = urlsplit(self.link.redirect_url)
        candidate = urlsplit(url)
        return (
            candidate.scheme.lower() == target.scheme.lower()
            and candidate.netloc.lower() == target.netloc.lower()
            and candidate.path.rstrip("/") == target.path.rstrip("/")
        )

    def handle_navigation(self, url: str) -> bool:
        """Check a navigation target. Returns True when it ended the journey."""
        if self.is_finished or not self.is_redirect(url):
            return False
        query = dict(parse_qsl(urlsplit(url).query))
        self._finish(
            PayByBankResult(
                unique_id=self.link.unique_id,
                type=PayByBankResultType.REDIRECTED,
                query=query,
            )
        )
        return True

    def handle_user_dismiss(self) -> None:
        if self.is_finished:
            return
        self._finish(
            PayByBankResult(
                unique_id=self.link.unique_id,
                type=PayByBankResultType.CANCELLED,
            )
        )

    def handle_load_error(self, description: str | None = None, cause: BaseException | None = None) -> None:
        """Report a page load failure through the flow's error channel."""
        if self.is_finished:
            return
        self.is_finished = True
        logger.warning("Failed to load %s: %s", self.link.url, description or cause)
        self.error_channel.report(None, UnknownError.from_diagnostics(description, cause))

    def _finish(self, result: PayByBankResult) -> None:
        self.is_finished = True
        self.dismiss()
        self.on_terminal(result, None)


SurfaceFactory = Callable[[ResolvedLink, Completion, ErrorChannel], PresentationSurface]
