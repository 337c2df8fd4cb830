"""
Tests for the slideshow state machine.

A manual timer drives ticks deterministically.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import pytest

from sectionkit.components.slideshow import (
    Slideshow,
    SlideshowConfig,
    SlideshowInput,
    create_slideshow,
    run,
    run_render,
)
from sectionkit.core.entities import BaseContent

# --- Mock Implementations ---


@dataclass
class ManualHandle:
    interval_ms: int
    callback: Callable[[], None]
    elapsed_ms: int = 0
    cancelled: bool = False


class ManualTimer:
    """TimerPort driven by explicit elapse() calls."""

    def __init__(self) -> None:
        self.handles: list[ManualHandle] = []

    def schedule_repeating(self, interval_ms: int, callback: Callable[[], None]) -> ManualHandle:
        handle = ManualHandle(interval_ms, callback)
        self.handles.append(handle)
        return handle

    def cancel(self, handle: object) -> None:
        assert isinstance(handle, ManualHandle)
        handle.cancelled = True

    @property
    def active(self) -> list[ManualHandle]:
        return [h for h in self.handles if not h.cancelled]

    def elapse(self, ms: int) -> None:
        for handle in list(self.active):
            handle.elapsed_ms += ms
            while handle.elapsed_ms >= handle.interval_ms and not handle.cancelled:
                handle.elapsed_ms -= handle.interval_ms
                handle.callback()


# --- Fixtures ---

INTERVAL = 1000


@pytest.fixture
def timer() -> ManualTimer:
    return ManualTimer()


@pytest.fixture
def slides(make_post: Callable[..., BaseContent]) -> list[BaseContent]:
    return [make_post(f"p{i}", main_media=f"/img/{i}.png") for i in (1, 2, 3)]


@pytest.fixture
def show(slides: list[BaseContent], timer: ManualTimer) -> Slideshow:
    return Slideshow(slides, timer, SlideshowConfig(interval_ms=INTERVAL))


# --- Tests ---


class TestCycling:
    def test_mount_starts_one_timer(self, show: Slideshow, timer: ManualTimer) -> None:
        show.mount()

        assert show.phase == "cycling"
        assert show.current_index == 0
        assert len(timer.active) == 1
        assert timer.active[0].interval_ms == INTERVAL

    def test_advances_each_interval(self, show: Slideshow, timer: ManualTimer) -> None:
        show.mount()

        timer.elapse(INTERVAL)
        assert show.current_index == 1

        timer.elapse(INTERVAL)
        assert show.current_index == 2

    def test_wraps_after_three_intervals(self, show: Slideshow, timer: ManualTimer) -> None:
        show.mount()

        timer.elapse(3 * INTERVAL)

        assert show.current_index == 0

    def test_partial_interval_does_not_advance(self, show: Slideshow, timer: ManualTimer) -> None:
        show.mount()

        timer.elapse(INTERVAL - 1)

        assert show.current_index == 0

    def test_remount_cancels_before_creating(self, show: Slideshow, timer: ManualTimer) -> None:
        show.mount()
        show.mount()

        assert len(timer.handles) == 2
        assert timer.handles[0].cancelled
        assert len(timer.active) == 1


class TestManualSelection:
    def test_select_jumps_and_cancels_timer(self, show: Slideshow, timer: ManualTimer) -> None:
        show.mount()

        show.select(2)

        assert show.current_index == 2
        assert show.phase == "manual"
        assert timer.active == []

    def test_no_automatic_advance_after_select(self, show: Slideshow, timer: ManualTimer) -> None:
        show.mount()
        show.select(2)

        timer.elapse(10 * INTERVAL)

        assert show.current_index == 2

    def test_stale_tick_is_ignored(self, show: Slideshow, timer: ManualTimer) -> None:
        show.mount()
        old_callback = timer.handles[0].callback
        show.select(1)

        # A tick already queued for the cancelled timer
        old_callback()

        assert show.current_index == 1

    def test_select_out_of_range(self, show: Slideshow) -> None:
        show.mount()

        with pytest.raises(IndexError):
            show.select(3)

    def test_select_before_mount(self, show: Slideshow) -> None:
        with pytest.raises(RuntimeError):
            show.select(0)

    def test_timer_not_started_without_mount(self, show: Slideshow, timer: ManualTimer) -> None:
        with pytest.raises(RuntimeError, match="not mounted"):
            show._start_timer()

        assert timer.handles == []


class TestTeardown:
    def test_unmount_cancels_timer(self, show: Slideshow, timer: ManualTimer) -> None:
        show.mount()

        show.unmount()

        assert timer.active == []
        assert show.phase == "unmounted"
        assert show.current_index is None

    def test_unmount_is_idempotent(self, show: Slideshow, timer: ManualTimer) -> None:
        show.mount()
        show.unmount()
        show.unmount()

        assert len(timer.handles) == 1

    def test_context_manager_releases_on_error(self, show: Slideshow, timer: ManualTimer) -> None:
        with pytest.raises(RuntimeError):
            with show:
                assert show.phase == "cycling"
                raise RuntimeError("render failed")

        assert timer.active == []
        assert show.phase == "unmounted"


class TestIdle:
    def test_no_items_never_creates_timer(self, timer: ManualTimer) -> None:
        show = Slideshow([], timer, SlideshowConfig(empty_title="Empty", empty_message="None"))

        show.mount()
        timer.elapse(10 * INTERVAL)

        assert show.phase == "idle"
        assert timer.handles == []
        assert "Empty" in show.render()
        assert "section-slideshow__empty" in show.render()

    def test_idle_unmount_is_safe(self, timer: ManualTimer) -> None:
        show = Slideshow([], timer)

        with show:
            pass

        assert show.phase == "idle"


class TestRender:
    def test_current_slide_visible(self, show: Slideshow, timer: ManualTimer) -> None:
        show.mount()
        timer.elapse(INTERVAL)

        html = show.render()

        assert '<div class="slide" data-index="1">' in html
        assert html.count("slide--hidden") == 2
        assert 'data-index="1" checked>' in html
        assert html.count("checked") == 1

    def test_snapshot_render(self, slides: list[BaseContent]) -> None:
        out = run_render(SlideshowInput(items=slides, current_index=2))

        assert out.success
        assert out.current_index == 2
        assert 'data-index="2" checked>' in out.html

    def test_snapshot_out_of_range(self, slides: list[BaseContent]) -> None:
        out = run_render(SlideshowInput(items=slides, current_index=5))

        assert not out.success
        assert out.errors[0].code == "index_out_of_range"

    def test_snapshot_empty_uses_rules(self, rules_adapter) -> None:
        out = run(SlideshowInput(items=[]), rules=rules_adapter)

        assert out.phase == "idle"
        assert "Nothing to show" in out.html


class TestFactory:
    def test_rules_interval(self, slides: list[BaseContent], timer: ManualTimer, rules_adapter) -> None:
        show = create_slideshow(SlideshowInput(items=slides), timer=timer, rules=rules_adapter)

        show.mount()

        assert timer.active[0].interval_ms == 5000

    def test_input_interval_overrides(self, slides: list[BaseContent], timer: ManualTimer) -> None:
        show = create_slideshow(SlideshowInput(items=slides, interval_ms=250), timer=timer)

        show.mount()

        assert timer.active[0].interval_ms == 250

    def test_non_positive_interval_rejected(
        self, slides: list[BaseContent], timer: ManualTimer
    ) -> None:
        with pytest.raises(ValueError):
            create_slideshow(SlideshowInput(items=slides, interval_ms=0), timer=timer)
