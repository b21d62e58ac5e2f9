"""Per-flow error channel."""

from collections.abc import Callable

from paybybank.core.exceptions import PayByBankError
from paybybank.core.logging import get_logger
from paybybank.payments.schemas import PayByBankResult

logger = get_logger(__name__)

ErrorHandler = Callable[[PayByBankResult | None, PayByBankError | None], None]


class ErrorChannel:
    """Single-slot handler the presentation surface reports errors through.

    One channel is created per flow, so concurrent flows never route into
    each other's completion. Assigning a handler replaces the previous one.
    """

    def __init__(self, name: str = "flow") -> None:
        self.name = name
        self._handler: ErrorHandler | None = None

    @property
    def handler(self) -> ErrorHandler | None:
        return self._handler

    @handler.setter
    def handler(self, handler: ErrorHandler | None) -> None:
        self._handler = handler

    def report(
        self,
        result: PayByBankResult | None,
        error: PayByBankError | None,
    ) -> bool:
        """Forward to the installed handler. False when none is installed."""
        if self._handler is None:
            logger.warning("No error handler installed on %s channel, dropping %r", self.name, error)
            return False
        self._handler(result, error)
        return True
