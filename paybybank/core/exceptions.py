import traceback
from typing import Any


class PayByBankError(Exception):
    """Base SDK error.

    Errors are handed to completion callbacks as values; once a flow's task
    is scheduled, nothing raises them.
    """

    error_code: str = "PAYBYBANK_ERROR"
    message: str = "A PayByBank error occurred"

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.__class__.message
        self.error_code = error_code or self.__class__.error_code
        self.details = details or {}
        super().__init__(self.message)

    @property
    def detail(self) -> str | None:
        """Human-readable detail, None when the error carries only its default message."""
        if self.message == self.__class__.message:
            return None
        return self.message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PayByBankError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(error_code={self.error_code!r}, message={self.message!r})"


class NotConfiguredError(PayByBankError):
    """Host never supplied authentication."""

    error_code = "NOT_CONFIGURED"
    message = "PayByBank is not configured"


class WrongPaylinkError(PayByBankError):
    """Link resolution produced an incomplete or invalid link."""

    error_code = "WRONG_PAYLINK"
    message = "Wrong paylink"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(message=detail, details={"detail": detail} if detail else None)


class UnknownError(PayByBankError):
    """Presentation-layer or unclassified failure."""

    error_code = "UNKNOWN"
    message = "Unknown error"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(message=detail, details={"detail": detail} if detail else None)

    @classmethod
    def from_diagnostics(
        cls,
        message: str | None = None,
        cause: BaseException | None = None,
    ) -> "UnknownError":
        """Build an error whose detail joins whatever diagnostics are available."""
        parts: list[str] = []
        if message:
            parts.append(message)
        if cause is not None:
            parts.append(f"{type(cause).__name__}: {cause}")
            if cause.__traceback__ is not None:
                parts.append("".join(traceback.format_tb(cause.__traceback__)).rstrip())
            if cause.__cause__ is not None:
                parts.append(f"caused by {type(cause.__cause__).__name__}: {cause.__cause__}")
        return cls("\n".join(parts) or None)
