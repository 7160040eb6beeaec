import asyncio

import pytest

from docintel.processing.models import ProgressEvent
from docintel.processing.progress import ProgressBroker


class TestListeners:
    def test_publish_reaches_listener_for_document_only(self) -> None:
        broker = ProgressBroker()
        received: list[ProgressEvent] = []
        broker.on_progress("doc-1", received.append)

        broker.publish("doc-1", "upload", 10, "Starting")
        broker.publish("doc-2", "upload", 10, "Starting")

        assert [(e.document_id, e.stage, e.progress) for e in received] == [("doc-1", "upload", 10)]

    def test_off_progress_stops_delivery(self) -> None:
        broker = ProgressBroker()
        received: list[ProgressEvent] = []
        broker.on_progress("doc-1", received.append)
        broker.off_progress("doc-1", received.append)

        broker.publish("doc-1", "upload", 10, "Starting")

        assert received == []
        assert broker.listener_count("doc-1") == 0

    def test_off_progress_for_unknown_listener_is_ignored(self) -> None:
        broker = ProgressBroker()
        broker.off_progress("doc-1", print)
        assert broker.listener_count("doc-1") == 0

    def test_failing_listener_does_not_block_others(self) -> None:
        broker = ProgressBroker()
        received: list[ProgressEvent] = []

        def broken(event: ProgressEvent) -> None:
            raise RuntimeError("socket closed")

        broker.on_progress("doc-1", broken)
        broker.on_progress("doc-1", received.append)

        broker.publish("doc-1", "ocr", 20, "OCR")

        assert len(received) == 1

    def test_record_does_not_notify_until_dispatch(self) -> None:
        broker = ProgressBroker()
        received: list[ProgressEvent] = []
        broker.on_progress("doc-1", received.append)

        event = broker.record("doc-1", "complete", 100, "Done")
        assert received == []

        broker.dispatch(event)
        assert received == [event]


class TestTimestamps:
    def test_timestamps_never_go_backwards(self) -> None:
        times = iter([5.0, 3.0, 7.0])
        broker = ProgressBroker(clock=lambda: next(times))

        events = [broker.publish("doc-1", "upload", p, "m") for p in (10, 50, 100)]

        assert [e.timestamp for e in events] == [5.0, 5.0, 7.0]

    def test_begin_starts_a_fresh_history(self) -> None:
        times = iter([5.0, 1.0])
        broker = ProgressBroker(clock=lambda: next(times))
        broker.publish("doc-1", "upload", 10, "first run")

        broker.begin("doc-1")
        event = broker.publish("doc-1", "upload", 10, "second run")

        assert event.timestamp == 1.0


class TestLatest:
    def test_latest_is_last_recorded_event(self) -> None:
        broker = ProgressBroker()
        broker.publish("doc-1", "upload", 50, "m", overall_progress=10)
        last = broker.record("doc-1", "ocr", 20, "m", overall_progress=24)

        assert broker.latest("doc-1") is last
        assert broker.latest("doc-1").overall_progress == 24

    def test_latest_without_events(self) -> None:
        broker = ProgressBroker()
        assert broker.latest("doc-1") is None
        broker.publish("doc-1", "upload", 50, "m")
        broker.begin("doc-1")
        assert broker.latest("doc-1") is None


class TestSubscriptions:
    @pytest.mark.asyncio
    async def test_iterates_until_terminal_event(self) -> None:
        broker = ProgressBroker()
        async with broker.subscribe("doc-1") as events:
            broker.publish("doc-1", "upload", 10, "Starting")
            broker.publish("doc-1", "complete", 100, "Done")
            broker.publish("doc-1", "upload", 10, "Next run")
            stages = [event.stage async for event in events]

        assert stages == ["upload", "complete"]
        assert broker.listener_count("doc-1") == 0

    @pytest.mark.asyncio
    async def test_late_subscriber_receives_history(self) -> None:
        broker = ProgressBroker()
        broker.publish("doc-1", "upload", 10, "Starting")
        broker.publish("doc-1", "error", 0, "Failed")

        stages = [event.stage async for event in broker.subscribe("doc-1")]

        assert stages == ["upload", "error"]

    @pytest.mark.asyncio
    async def test_replay_can_be_disabled(self) -> None:
        broker = ProgressBroker()
        broker.publish("doc-1", "upload", 10, "Starting")
        subscription = broker.subscribe("doc-1", replay=False)
        broker.publish("doc-1", "complete", 100, "Done")

        stages = [event.stage async for event in subscription]

        assert stages == ["complete"]

    @pytest.mark.asyncio
    async def test_subscriber_waits_for_events_published_later(self) -> None:
        broker = ProgressBroker()
        subscription = broker.subscribe("doc-1")

        async def consume() -> list[int]:
            return [event.progress async for event in subscription]

        consumer = asyncio.create_task(consume())
        await asyncio.sleep(0)
        broker.publish("doc-1", "ocr", 20, "OCR")
        await asyncio.sleep(0)
        broker.publish("doc-1", "complete", 100, "Done")

        assert await asyncio.wait_for(consumer, timeout=1) == [20, 100]

    @pytest.mark.asyncio
    async def test_cleanup_ends_open_subscriptions(self) -> None:
        broker = ProgressBroker()
        broker.on_progress("doc-1", lambda event: None)
        subscription = broker.subscribe("doc-1")
        broker.publish("doc-1", "ocr", 20, "OCR")

        broker.cleanup("doc-1")

        assert [event.stage async for event in subscription] == ["ocr"]
        assert broker.listener_count("doc-1") == 0

    @pytest.mark.asyncio
    async def test_close_detaches_subscription(self) -> None:
        broker = ProgressBroker()
        subscription = broker.subscribe("doc-1")
        assert broker.listener_count("doc-1") == 1

        subscription.close()

        assert broker.listener_count("doc-1") == 0
        assert [event async for event in subscription] == []
