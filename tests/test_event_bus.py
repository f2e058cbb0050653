import pytest

from recipe_creator.core.event_bus import EventBus


def test_publish_calls_listeners_in_subscription_order() -> None:
    bus = EventBus()
    calls: list[tuple[str, object]] = []
    bus.subscribe("PING", lambda p: calls.append(("first", p)))
    bus.subscribe("PING", lambda p: calls.append(("second", p)))

    bus.publish("PING", 42)

    assert calls == [("first", 42), ("second", 42)]


def test_publish_only_reaches_matching_event() -> None:
    bus = EventBus()
    got: list[object] = []
    bus.subscribe("A", got.append)

    bus.publish("B", 1)

    assert got == []


def test_unsubscribe_removes_listener_and_ignores_unknown() -> None:
    bus = EventBus()
    got: list[object] = []
    bus.subscribe("A", got.append)
    bus.unsubscribe("A", got.append)
    bus.unsubscribe("A", print)

    bus.publish("A", 1)

    assert got == []


def test_listener_can_unsubscribe_itself_while_publishing() -> None:
    bus = EventBus()
    got: list[object] = []

    def once(payload: object) -> None:
        got.append(payload)
        bus.unsubscribe("A", once)

    bus.subscribe("A", once)
    bus.subscribe("A", got.append)

    bus.publish("A", "x")
    bus.publish("A", "y")

    assert got == ["x", "x", "y"]


def test_listener_error_propagates_and_stops_later_listeners() -> None:
    bus = EventBus()
    got: list[object] = []

    def boom(payload: object) -> None:
        raise RuntimeError("listener failed")

    bus.subscribe("A", boom)
    bus.subscribe("A", got.append)

    with pytest.raises(RuntimeError, match="listener failed"):
        bus.publish("A", 1)
    assert got == []


def test_unsubscribe_keeps_other_listeners() -> None:
    bus = EventBus()
    first: list[object] = []
    second: list[object] = []
    bus.subscribe("A", first.append)
    bus.subscribe("A", second.append)
    bus.unsubscribe("A", first.append)

    bus.publish("A", 1)

    assert first == []
    assert second == [1]
