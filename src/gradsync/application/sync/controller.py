"""
Sync Controller - Keeps the local view of the Record Store fresh.

This is the core of the client:
- refresh(): single-flight fetch of the full record set, with automatic
  retries and exponential backoff on transient failures
- create() / remove(): mutations followed by a reconciling refresh
- gate handlers: unlock, cancel and toggle the gated list view
- start(): optional fetch-ahead so that unlocking is instant
"""

import asyncio
import contextlib
import logging
from typing import Any, Awaitable, Callable, Optional, Sequence

from ...core.domain.entities import GraduateFields, GraduateRecord
from ...core.domain.events import (
    EventBus,
    GateChanged,
    GraduateRegistered,
    GraduateRemoved,
    RecordsRefreshed,
    RefreshFailed,
    RetryScheduled,
)
from ...core.exceptions import RecordStoreError
from ...core.ports.config_provider import SyncConfig
from ...core.ports.presenter import NotificationKind, NullPresenter, PresenterPort
from ...core.ports.record_store import RecordStorePort
from ..gate import GateMachine, GateState
from .results import OperationResult
from .retry import RetryPolicy
from .state import SyncState


GATE_ERROR_MESSAGE = "Incorrect password. Please try again."


class SyncController:
    """
    Owns the SyncState of one session and every change made to it.

    All store calls go through this class. The presenter only ever sees
    cached data while the gate is unlocked.
    """

    def __init__(
        self,
        store: RecordStorePort,
        presenter: Optional[PresenterPort] = None,
        config: Optional[SyncConfig] = None,
        event_bus: Optional[EventBus] = None,
        state: Optional[SyncState] = None,
        sleep: Optional[Callable[[float], Awaitable[Any]]] = None,
    ):
        """
        Initialize the controller.

        Args:
            store: Record Store port
            presenter: Presentation layer (headless if omitted)
            config: Sync configuration
            event_bus: Optional event bus
            state: Optional pre-built session state
            sleep: Coroutine used for backoff waits (asyncio.sleep by default)
        """
        self.store = store
        self.presenter = presenter or NullPresenter()
        self.config = config or SyncConfig()
        self.event_bus = event_bus or EventBus()
        self.state = state or SyncState()
        self.gate = GateMachine(secret=self.config.secret)
        self.retry_policy = RetryPolicy(
            max_retries=self.config.max_retries,
            base_delay=self.config.backoff_base,
        )
        self.logger = logging.getLogger("SyncController")

        self._sleep = sleep or asyncio.sleep
        self._inflight: Optional[asyncio.Future] = None
        self._fetch_ahead: Optional[asyncio.Future] = None

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    def start(self) -> Optional[asyncio.Future]:
        """
        Start the session, fetching ahead of the gate if configured.

        Must be called from a running event loop.

        Returns:
            The fetch-ahead future, or None if fetch-ahead is disabled
        """
        if not self.config.fetch_ahead:
            return None
        self.logger.info("Fetching graduates ahead of unlock")
        self._fetch_ahead = asyncio.ensure_future(self.refresh())
        return self._fetch_ahead

    async def close(self) -> None:
        """Cancel any background work still pending."""
        for future in (self._fetch_ahead, self._inflight):
            if future is not None and not future.done():
                future.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await future
        self.state.is_loading = False

    @property
    def visible_records(self) -> Optional[list[GraduateRecord]]:
        """Cached records, or None while the gate is locked."""
        if not self.state.is_unlocked:
            return None
        return self.state.cache

    # -------------------------------------------------------------------------
    # Refresh
    # -------------------------------------------------------------------------

    async def refresh(self) -> OperationResult:
        """
        Fetch the full record set and replace the cache on success.

        At most one refresh is in flight: a call made while one is running
        makes no network call and returns the running refresh's result.
        """
        if self._inflight is not None and not self._inflight.done():
            self.logger.debug("Refresh already in flight, joining it")
            return await asyncio.shield(self._inflight)

        self.state.is_loading = True
        self._inflight = asyncio.ensure_future(self._run_refresh())
        return await asyncio.shield(self._inflight)

    async def retry(self) -> OperationResult:
        """Manual retry affordance after a terminal fetch failure."""
        if self.gate.is_visible:
            self.presenter.render_loading()
        return await self.refresh()

    async def _run_refresh(self) -> OperationResult:
        attempts = 0
        retries = 0

        try:
            while True:
                attempts += 1
                try:
                    records = await self.store.list_graduates()
                except RecordStoreError as e:
                    if not self.retry_policy.should_retry(e, retries):
                        return self._refresh_failed(e, attempts)

                    retries += 1
                    delay = self.retry_policy.delay_for(retries)
                    self._retry_scheduled(e, retries, delay)
                    await self._sleep(delay)
                else:
                    return self._refresh_succeeded(records, attempts)
        finally:
            self.state.is_loading = False

    def _refresh_succeeded(
        self,
        records: Sequence[GraduateRecord],
        attempts: int,
    ) -> OperationResult:
        self.state.is_loading = False
        self.state.replace_cache(records)
        self.logger.info(f"Fetched {self.state.count} graduates (attempts: {attempts})")

        self.event_bus.publish(RecordsRefreshed(count=self.state.count, attempts=attempts))
        self._render_cache()
        return OperationResult.ok(self.state.cache, attempts=attempts)

    def _refresh_failed(self, error: RecordStoreError, attempts: int) -> OperationResult:
        if error.transient:
            message = f"Failed to fetch graduates after {attempts} attempts: {error.message}"
        else:
            message = f"Failed to fetch graduates: {error.message}"

        self.state.last_error = message
        self.logger.error(message)

        self.event_bus.publish(RefreshFailed(
            error=message,
            attempts=attempts,
            retryable=error.transient,
        ))
        self.presenter.notify(message, NotificationKind.ERROR)
        if self.gate.is_visible:
            self.presenter.render_error(message, retryable=True)

        return OperationResult.fail(message, retryable=error.transient, attempts=attempts)

    def _retry_scheduled(self, error: RecordStoreError, retry_number: int, delay: float) -> None:
        max_retries = self.retry_policy.max_retries
        self.logger.warning(
            f"Fetch failed ({error.message}), retry {retry_number}/{max_retries} in {delay:g}s"
        )
        self.event_bus.publish(RetryScheduled(
            retry_number=retry_number,
            max_retries=max_retries,
            delay=delay,
            error=error.message,
        ))
        self.presenter.notify(
            f"Connection problem, retrying in {delay:g}s ({retry_number}/{max_retries})",
            NotificationKind.WARNING,
        )

    async def _reconcile(self) -> OperationResult:
        """
        Refresh after a mutation was acknowledged.

        A refresh already in flight started before the acknowledgment and
        may miss the mutation, so it is waited out before refreshing again.
        """
        pending = self._inflight
        if pending is not None and not pending.done():
            self.logger.debug("Waiting out a refresh that predates the mutation")
            await asyncio.shield(pending)
        return await self.refresh()

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    async def create(self, fields: GraduateFields) -> OperationResult:
        """
        Register a graduate, then reconcile the cache with the store.

        The new record is not inserted locally: its id and timestamp are
        only known after the follow-up refresh.
        """
        errors = fields.validate()
        if errors:
            message = "; ".join(errors)
            self.presenter.notify(message, NotificationKind.ERROR)
            return OperationResult.fail(message)

        try:
            record = await self.store.create_graduate(fields.to_payload())
        except RecordStoreError as e:
            message = f"Failed to register graduate: {e.message}"
            self.logger.error(message)
            self.presenter.notify(message, NotificationKind.ERROR)
            return OperationResult.fail(message, retryable=e.transient)

        self.logger.info(f"Registered graduate {record.id}")
        self.event_bus.publish(GraduateRegistered(record_id=record.id, name=record.name))

        if self.gate.state is GateState.UNLOCKED_HIDDEN and self.config.optimistic_count:
            self.presenter.render_count(self.state.bump_count())

        self.presenter.notify("Graduate registered successfully!", NotificationKind.SUCCESS)
        await self._reconcile()
        return OperationResult.ok(record)

    async def remove(self, record_id: str) -> OperationResult:
        """
        Delete a graduate, then reconcile the cache with the store.

        Callers must have confirmed the deletion with the user.
        """
        try:
            message = await self.store.delete_graduate(record_id)
        except RecordStoreError as e:
            message = f"Failed to delete graduate: {e.message}"
            self.logger.error(message)
            self.presenter.notify(message, NotificationKind.ERROR)
            return OperationResult.fail(message, retryable=e.transient)

        self.logger.info(f"Deleted graduate {record_id}")
        count = self.state.drop_count()
        if self.state.is_unlocked:
            self.presenter.render_count(count)

        self.event_bus.publish(GraduateRemoved(record_id=record_id))
        self.presenter.notify("Graduate deleted successfully!", NotificationKind.SUCCESS)
        await self._reconcile()
        return OperationResult.ok(message)

    # -------------------------------------------------------------------------
    # Gate Handlers
    # -------------------------------------------------------------------------

    def open_gate(self) -> GateState:
        """Open the secret prompt, or toggle the list once unlocked."""
        old_state = self.gate.state
        self.gate.open()
        self._gate_moved(old_state)
        if old_state.is_unlocked and self.gate.is_visible:
            self._render_cache()
        return self.gate.state

    async def submit_secret(self, secret: str) -> bool:
        """
        Try to unlock the gate.

        On success the list is shown from the cache if fetch-ahead already
        populated it, otherwise a loading state is shown and a refresh is
        issued (joining a fetch-ahead that is still running). A secret
        submitted while the prompt is closed is ignored.

        Returns:
            True if the gate is unlocked
        """
        old_state = self.gate.state
        if old_state is not GateState.UNLOCKING:
            self.logger.debug(f"Ignoring secret submitted while {old_state.value}")
            return self.gate.is_unlocked
        if not self.gate.submit(secret):
            self.presenter.render_gate_error(GATE_ERROR_MESSAGE)
            return False

        self._gate_moved(old_state)

        if self.state.is_populated:
            self._render_cache()
        else:
            self.presenter.render_loading()
            await self.refresh()
        return True

    def cancel_gate(self) -> GateState:
        """Close the secret prompt without unlocking."""
        old_state = self.gate.state
        self.gate.cancel()
        self._gate_moved(old_state)
        return self.gate.state

    def toggle_visibility(self) -> GateState:
        """Show or hide the list. Never touches the network."""
        old_state = self.gate.state
        self.gate.toggle()
        self._gate_moved(old_state)
        if self.gate.is_visible:
            self._render_cache()
        return self.gate.state

    def _gate_moved(self, old_state: GateState) -> None:
        new_state = self.gate.state
        if new_state is old_state:
            return

        self.state.is_unlocked = new_state.is_unlocked
        self.event_bus.publish(GateChanged(
            from_state=old_state.value,
            to_state=new_state.value,
        ))

        if new_state is GateState.UNLOCKING:
            self.presenter.show_gate()
        elif old_state is GateState.UNLOCKING:
            self.presenter.hide_gate()

        if new_state.is_unlocked:
            self.presenter.set_list_visible(new_state.is_visible)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _render_cache(self) -> None:
        """Push the cache to the presenter, if the gate allows it."""
        if not self.state.is_unlocked:
            return

        self.presenter.render_count(self.state.count)
        if not self.gate.is_visible:
            return

        if self.state.last_error:
            self.presenter.render_error(self.state.last_error, retryable=True)
        elif self.state.cache is None:
            self.presenter.render_loading()
        elif self.state.cache:
            self.presenter.render_records(list(self.state.cache))
        else:
            self.presenter.render_empty()
