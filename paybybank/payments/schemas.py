"""Flow-level schemas shared by both resource families."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Union

from pydantic import BaseModel, Field

from paybybank.core.exceptions import PayByBankError

OPEN_URL_UNIQUE_ID = "openUrl"


class PayByBankResultType(str, Enum):
    """How the presented journey ended."""

    REDIRECTED = "redirected"
    CANCELLED = "cancelled"


class PayByBankResult(BaseModel):
    """Terminal success payload returned to the host."""

    unique_id: str = Field(..., description="Unique id of the presented link")
    type: PayByBankResultType = Field(..., description="Redirected by the bank or dismissed by the user")
    query: dict[str, str] = Field(default_factory=dict, description="Query parameters of the redirect URL")


Completion = Callable[[PayByBankResult | None, PayByBankError | None], None]


@dataclass(frozen=True)
class OpenById:
    """Open an existing resource by its unique id."""

    unique_id: str


@dataclass(frozen=True)
class OpenByUrl:
    """Open a known URL without looking the resource up (Datalink only)."""

    url: str
    redirect_url: str


@dataclass(frozen=True)
class Initiate:
    """Create a resource, then open it."""

    create_request: BaseModel


ExecuteIntent = Union[OpenById, OpenByUrl, Initiate]


@dataclass(frozen=True)
class ResolvedLink:
    """The (id, url, redirect_url) triple handed to the presentation surface."""

    unique_id: str
    url: str
    redirect_url: str

    def __post_init__(self) -> None:
        for name in ("unique_id", "url", "redirect_url"):
            if not getattr(self, name):
                raise ValueError(f"ResolvedLink.{name} must be non-empty")
