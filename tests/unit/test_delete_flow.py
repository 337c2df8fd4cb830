"""
Tests for the detail view delete flow.

Ordering guarantees:
- confirm before request
- store mutation only after API success
- navigation only after store mutation
- failures are logged and contained
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import pytest

from sectionkit.components.detail_view import DeleteInput, run_delete
from sectionkit.core.entities import BaseContent, PostItem
from sectionkit.core.ports import DeleteResult

# --- Mock Implementations ---


@dataclass
class EventLog:
    """Shared record of collaborator calls, in order."""

    events: list[str] = field(default_factory=list)


class MockPrompt:
    def __init__(self, log: EventLog, answer: bool = True) -> None:
        self._log = log
        self._answer = answer
        self.messages: list[str] = []

    def confirm(self, message: str) -> bool:
        self._log.events.append("confirm")
        self.messages.append(message)
        return self._answer


class MockApi:
    def __init__(self, log: EventLog, result: DeleteResult | Exception) -> None:
        self._log = log
        self._result = result
        self.calls: list[tuple[str, str]] = []

    async def delete(self, path: str, item_id: str) -> DeleteResult:
        self._log.events.append("request")
        self.calls.append((path, item_id))
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


class MockStore:
    def __init__(self, log: EventLog, items: list[BaseContent]) -> None:
        self._log = log
        self._items = list(items)
        self.remove_calls = 0

    def items(self) -> list[BaseContent]:
        return list(self._items)

    def remove(self, item_id: str) -> int:
        self._log.events.append("remove")
        self.remove_calls += 1
        before = len(self._items)
        self._items = [i for i in self._items if i.id != item_id]
        return before - len(self._items)


class MockNavigator:
    def __init__(self, log: EventLog) -> None:
        self._log = log
        self.routes: list[str] = []

    def go_to(self, route: str) -> None:
        self._log.events.append("navigate")
        self.routes.append(route)


# --- Fixtures ---


@pytest.fixture
def log() -> EventLog:
    return EventLog()


@pytest.fixture
def items() -> list[BaseContent]:
    return [PostItem(id="p1", title="One"), PostItem(id="p2", title="Two")]


@pytest.fixture
def store(log: EventLog, items: list[BaseContent]) -> MockStore:
    return MockStore(log, items)


@pytest.fixture
def navigator(log: EventLog) -> MockNavigator:
    return MockNavigator(log)


# --- Tests ---


class TestDeleteSuccess:
    @pytest.mark.asyncio
    async def test_removes_once_and_navigates_once(
        self, log: EventLog, store: MockStore, navigator: MockNavigator
    ) -> None:
        api = MockApi(log, DeleteResult(ok=True, status_code=200))

        out = await run_delete(
            DeleteInput(item_id="p1", api_path="/api/news", redirect_route="/news"),
            prompt=MockPrompt(log),
            api=api,
            store=store,
            navigator=navigator,
        )

        assert out.success
        assert out.outcome == "deleted"
        assert out.removed_count == 1
        assert out.redirect_route == "/news"
        assert api.calls == [("/api/news", "p1")]
        assert store.remove_calls == 1
        assert [i.id for i in store.items()] == ["p2"]
        assert navigator.routes == ["/news"]

    @pytest.mark.asyncio
    async def test_stages_run_in_order(
        self, log: EventLog, store: MockStore, navigator: MockNavigator
    ) -> None:
        out = await run_delete(
            DeleteInput(item_id="p1"),
            prompt=MockPrompt(log),
            api=MockApi(log, DeleteResult(ok=True)),
            store=store,
            navigator=navigator,
        )

        assert log.events == ["confirm", "request", "remove", "navigate"]
        assert out.completed_stages == ("confirm", "request", "remove", "navigate")

    @pytest.mark.asyncio
    async def test_defaults_for_paths_and_message(
        self, log: EventLog, store: MockStore, navigator: MockNavigator
    ) -> None:
        prompt = MockPrompt(log)
        api = MockApi(log, DeleteResult(ok=True))

        await run_delete(
            DeleteInput(item_id="p2"), prompt=prompt, api=api, store=store, navigator=navigator
        )

        assert api.calls == [("/api/posts", "p2")]
        assert navigator.routes == ["/posts"]
        assert prompt.messages == ["Are you sure you want to delete this post?"]

    @pytest.mark.asyncio
    async def test_rules_supply_defaults(
        self, log: EventLog, store: MockStore, navigator: MockNavigator, rules_adapter
    ) -> None:
        api = MockApi(log, DeleteResult(ok=True))

        await run_delete(
            DeleteInput(item_id="p1"),
            prompt=MockPrompt(log),
            api=api,
            store=store,
            navigator=navigator,
            rules=rules_adapter,
        )

        assert api.calls == [("/api/posts", "p1")]
        assert navigator.routes == ["/posts"]


class TestDeleteCancelled:
    @pytest.mark.asyncio
    async def test_declined_prompt_does_nothing(
        self, log: EventLog, store: MockStore, navigator: MockNavigator
    ) -> None:
        api = MockApi(log, DeleteResult(ok=True))

        out = await run_delete(
            DeleteInput(item_id="p1"),
            prompt=MockPrompt(log, answer=False),
            api=api,
            store=store,
            navigator=navigator,
        )

        assert out.outcome == "cancelled"
        assert out.completed_stages == ()
        assert api.calls == []
        assert store.remove_calls == 0
        assert navigator.routes == []


class TestDeleteFailure:
    @pytest.mark.asyncio
    async def test_rejected_response_leaves_state_untouched(
        self,
        log: EventLog,
        store: MockStore,
        navigator: MockNavigator,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        api = MockApi(log, DeleteResult(ok=False, status_code=500, error="boom"))

        with caplog.at_level(logging.ERROR):
            out = await run_delete(
                DeleteInput(item_id="p1"),
                prompt=MockPrompt(log),
                api=api,
                store=store,
                navigator=navigator,
            )

        assert not out.success
        assert out.outcome == "failed"
        assert out.completed_stages == ("confirm",)
        assert out.errors[0].code == "delete_failed"
        assert [i.id for i in store.items()] == ["p1", "p2"]
        assert store.remove_calls == 0
        assert navigator.routes == []
        assert "p1" in caplog.text

    @pytest.mark.asyncio
    async def test_transport_error_is_contained(
        self,
        log: EventLog,
        store: MockStore,
        navigator: MockNavigator,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        api = MockApi(log, ConnectionError("network down"))

        with caplog.at_level(logging.ERROR):
            out = await run_delete(
                DeleteInput(item_id="p1"),
                prompt=MockPrompt(log),
                api=api,
                store=store,
                navigator=navigator,
            )

        assert out.outcome == "failed"
        assert "network down" in out.errors[0].message
        assert log.events == ["confirm", "request"]
        assert store.remove_calls == 0
        assert navigator.routes == []
        assert "Delete request for p1 failed" in caplog.text
