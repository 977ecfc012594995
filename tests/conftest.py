"""Shared fixtures and test doubles."""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import pytest

from gradsync.core.domain.entities import GraduateFields, GraduateRecord
from gradsync.core.exceptions import RecordNotFoundError
from gradsync.core.ports.config_provider import SyncConfig
from gradsync.core.ports.presenter import PresenterPort
from gradsync.core.ports.record_store import RecordStorePort
from gradsync.application.sync import SyncController


BASE_TIME = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


def build_record(index: int) -> GraduateRecord:
    return GraduateRecord(
        id=f"rec-{index}",
        name=f"Graduate {index}",
        faculty="Engineering",
        graduation_year=2020 + index,
        telephone=f"555-01{index:02d}",
        created_at=BASE_TIME + timedelta(minutes=index),
    )


def build_records(n: int) -> list[GraduateRecord]:
    """n records, newest first."""
    return [build_record(i) for i in range(n, 0, -1)]


class FakeRecordStore(RecordStorePort):
    """
    Scriptable in-memory store.

    list_failures are raised one per list call, in order. When list_gate is
    set, list calls take their snapshot first and then wait for the gate,
    so a blocked call returns data as it was when the call was made.
    """

    def __init__(self, records: Optional[list[GraduateRecord]] = None):
        self.records = list(records or [])
        self.list_failures: list[Exception] = []
        self.create_error: Optional[Exception] = None
        self.delete_error: Optional[Exception] = None
        self.list_gate: Optional[asyncio.Event] = None
        self.list_calls = 0
        self.create_calls = 0
        self.delete_calls = 0
        self._next_id = 1000
        self.closed = False

    @property
    def name(self) -> str:
        return "Fake"

    async def list_graduates(self) -> list[GraduateRecord]:
        self.list_calls += 1
        snapshot = list(self.records)
        if self.list_gate is not None:
            await self.list_gate.wait()
        else:
            await asyncio.sleep(0)
        if self.list_failures:
            raise self.list_failures.pop(0)
        return snapshot

    async def create_graduate(self, payload: dict[str, Any]) -> GraduateRecord:
        self.create_calls += 1
        await asyncio.sleep(0)
        if self.create_error:
            raise self.create_error
        self._next_id += 1
        record = GraduateRecord(
            id=f"new-{self._next_id}",
            name=payload["name"],
            faculty=payload["faculty"],
            graduation_year=payload["graduationYear"],
            telephone=payload["telephone"],
            created_at=datetime.now(timezone.utc),
        )
        self.records.insert(0, record)
        return record

    async def delete_graduate(self, record_id: str) -> str:
        self.delete_calls += 1
        await asyncio.sleep(0)
        if self.delete_error:
            raise self.delete_error
        for record in self.records:
            if record.id == record_id:
                self.records.remove(record)
                return "Graduate deleted successfully"
        raise RecordNotFoundError("Graduate not found", record_id=record_id)

    def close(self) -> None:
        self.closed = True


class RecordingPresenter(PresenterPort):
    """Presenter that records every call as (method, args)."""

    def __init__(self):
        self.calls: list[tuple[str, tuple]] = []

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, args))

    def called(self, method: str) -> list[tuple]:
        return [args for name, args in self.calls if name == method]

    @property
    def counts(self) -> list[int]:
        return [args[0] for args in self.called("render_count")]

    @property
    def notifications(self) -> list[tuple]:
        return self.called("notify")

    def clear(self) -> None:
        self.calls.clear()

    def render_records(self, records):
        self._record("render_records", list(records))

    def render_count(self, count):
        self._record("render_count", count)

    def render_loading(self):
        self._record("render_loading")

    def render_empty(self):
        self._record("render_empty")

    def render_error(self, message, retryable):
        self._record("render_error", message, retryable)

    def notify(self, message, kind):
        self._record("notify", message, kind)

    def show_gate(self):
        self._record("show_gate")

    def hide_gate(self):
        self._record("hide_gate")

    def render_gate_error(self, message):
        self._record("render_gate_error", message)

    def set_list_visible(self, visible):
        self._record("set_list_visible", visible)


class SleepRecorder:
    """Stand-in for asyncio.sleep that records delays without waiting."""

    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)
        await asyncio.sleep(0)


@pytest.fixture
def store():
    return FakeRecordStore()


@pytest.fixture
def presenter():
    return RecordingPresenter()


@pytest.fixture
def sleep():
    return SleepRecorder()


@pytest.fixture
def controller(store, presenter, sleep):
    return SyncController(store, presenter=presenter, config=SyncConfig(), sleep=sleep)


@pytest.fixture
def fields():
    return GraduateFields(name="A", faculty="B", graduation_year=2024, telephone="123")


@pytest.fixture
def make_record():
    return build_record


@pytest.fixture
def make_records():
    return build_records
