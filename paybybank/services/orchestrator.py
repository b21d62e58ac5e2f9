"""Authenticated link resolution shared by the FrPayment and Datalink flows."""

import asyncio
from collections.abc import Awaitable, Callable, Coroutine
from typing import Any, TypeVar

from paybybank.core.config import settings
from paybybank.core.exceptions import (
    NotConfiguredError,
    PayByBankError,
    UnknownError,
    WrongPaylinkError,
)
from paybybank.core.logging import get_logger, is_configured, setup_logging
from paybybank.core.state import PayByBankState
from paybybank.payments.presentation import ErrorChannel, PresentationSurface, SurfaceFactory
from paybybank.payments.repositories import BaseIdentityClient, ResourceRepository
from paybybank.payments.schemas import (
    OPEN_URL_UNIQUE_ID,
    Completion,
    ExecuteIntent,
    Initiate,
    OpenById,
    OpenByUrl,
    PayByBankResult,
    ResolvedLink,
)

logger = get_logger(__name__)

T = TypeVar("T")

LINK_FIELD_LABELS = ("uniqueID", "url", "redirectUrl")


class FlowOrchestrator:
    """Runs one resource family's flows.

    execute() sequences auth -> resolve -> derive -> present and reports
    through the completion. dispatch() runs a single repository call.
    Both schedule a task on the running loop and return it without waiting.

    Must be called from inside a running asyncio event loop; outside one,
    execute() and dispatch() raise RuntimeError before any task starts.
    Once a task is scheduled, every failure reaches the completion.
    """

    def __init__(
        self,
        name: str,
        identity_client: BaseIdentityClient,
        repository: ResourceRepository,
        surface_factory: SurfaceFactory | None = None,
        supports_open_by_url: bool = False,
    ):
        self.name = name
        self.identity_client = identity_client
        self.repository = repository
        self.surface_factory = surface_factory
        self.supports_open_by_url = supports_open_by_url
        self._tasks: set[asyncio.Task] = set()

    # region Public

    def execute(
        self,
        host_context: Any,
        intent: ExecuteIntent,
        completion: Completion,
    ) -> asyncio.Task:
        """Start a flow for intent and return its task."""
        if not is_configured():
            setup_logging()
        return self._spawn(lambda: self._run(host_context, intent, completion))

    def dispatch(
        self,
        operation: Callable[[], Awaitable[T]],
        completion: Callable[[T | None, PayByBankError | None], None],
    ) -> asyncio.Task:
        """Await operation once and pass its raw result to completion."""

        async def run() -> None:
            response = await operation()
            completion(response, None)

        return self._spawn(run)

    # endregion

    # region Flow steps

    async def _run(
        self,
        host_context: Any,
        intent: ExecuteIntent,
        completion: Completion,
    ) -> None:
        logger.info("%s flow started: %s", self.name, type(intent).__name__)
        channel = ErrorChannel(self.name)

        if not await self._authenticate(completion):
            return

        link = await self._resolve(intent, completion)
        if link is None:
            return

        if self.surface_factory is None:
            self._fail(completion, UnknownError("No presentation surface registered."))
            return

        def on_terminal(result: PayByBankResult | None, error: PayByBankError | None) -> None:
            logger.info("%s flow finished: result=%s error=%r", self.name, result and result.type.value, error)
            completion(result, error)

        try:
            surface = self.surface_factory(link, on_terminal, channel)
        except Exception as e:
            logger.exception("%s presentation surface could not be created", self.name)
            self._fail(completion, UnknownError.from_diagnostics("Failed to create presentation surface.", e))
            return

        channel.handler = self._error_handler(surface, completion)

        try:
            surface.open(host_context)
        except Exception as e:
            logger.exception("%s presentation surface failed to open", self.name)
            channel.report(None, UnknownError.from_diagnostics("Failed to open presentation surface.", e))

    async def _authenticate(self, completion: Completion) -> bool:
        if not PayByBankState.is_configured():
            self._fail(completion, NotConfiguredError())
            return False

        token = await self.identity_client.connect()
        if token is None or not token.is_valid:
            self._fail(completion, WrongPaylinkError("token error."))
            return settings.continue_after_auth_failure
        return True

    async def _resolve(
        self,
        intent: ExecuteIntent,
        completion: Completion,
    ) -> ResolvedLink | None:
        if isinstance(intent, OpenByUrl):
            if not self.supports_open_by_url:
                self._fail(completion, WrongPaylinkError("openUrl Error."))
                return None
            fields = (OPEN_URL_UNIQUE_ID, intent.url, intent.redirect_url)

        elif isinstance(intent, OpenById):
            resource = await self.repository.get(intent.unique_id)
            fields = resource.link_fields() if resource is not None else (None, None, None)

        elif isinstance(intent, Initiate):
            created = await self.repository.create(intent.create_request)
            unique_id = created.unique_id if created is not None else None
            if not unique_id:
                self._fail(completion, WrongPaylinkError("uniqueID Error."))
                return None
            resource = await self.repository.get(unique_id)
            fields = resource.link_fields() if resource is not None else (None, None, None)

        else:
            self._fail(completion, UnknownError(f"Unsupported intent: {intent!r}"))
            return None

        return self._derive(fields, completion)

    def _derive(
        self,
        fields: tuple[str | None, str | None, str | None],
        completion: Completion,
    ) -> ResolvedLink | None:
        for label, value in zip(LINK_FIELD_LABELS, fields):
            if not value:
                self._fail(completion, WrongPaylinkError(f"{label} Error."))
                return None
        unique_id, url, redirect_url = fields
        return ResolvedLink(unique_id=unique_id, url=url, redirect_url=redirect_url)

    def _error_handler(
        self,
        surface: PresentationSurface,
        completion: Completion,
    ) -> Callable[[PayByBankResult | None, PayByBankError | None], None]:
        legacy = settings.legacy_double_completion

        def handle(result: PayByBankResult | None, error: PayByBankError | None) -> None:
            if legacy:
                # Older SDKs called the completion twice here
                completion(result, error)
                completion(result, error or UnknownError.from_diagnostics())
            else:
                if result is None and error is None:
                    error = UnknownError.from_diagnostics("Presentation ended without a result.")
                completion(result, error)

            if error is not None:
                logger.warning("%s flow failed in presentation: %r", self.name, error)
                surface.dismiss()

        return handle

    # endregion

    # region Helpers

    def _fail(self, completion: Completion, error: PayByBankError) -> None:
        logger.warning("%s flow failed: %r", self.name, error)
        completion(None, error)

    def _spawn(self, factory: Callable[[], Coroutine[Any, Any, None]]) -> asyncio.Task:
        loop = asyncio.get_running_loop()
        task = loop.create_task(factory())
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("%s task failed: %s: %s", self.name, type(exc).__name__, exc)

    # endregion
