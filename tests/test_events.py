from endless_runner.core.events import Event, EventBus, EventType, activate_event


def test_subscribe_and_emit():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.TICK, received.append)

    bus.emit(Event(EventType.TICK, source="window"))
    bus.emit(Event(EventType.QUIT))

    assert len(received) == 1
    assert received[0].source == "window"


def test_unsubscribe():
    bus = EventBus()
    received = []
    unsubscribe = bus.subscribe(EventType.ACTIVATE, received.append)
    unsubscribe()
    bus.emit(activate_event(10))
    assert received == []


def test_failing_handler_does_not_block_others():
    bus = EventBus()
    received = []

    def broken(event):
        raise ValueError("bad handler")

    bus.subscribe(EventType.ACTIVATE, broken)
    bus.subscribe(EventType.ACTIVATE, received.append)
    bus.emit(activate_event(10))

    assert len(received) == 1


def test_queue_is_processed_in_order():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.ACTIVATE, lambda e: received.append(e.data["timestamp_ms"]))

    bus.queue_event(activate_event(1))
    bus.queue_event(activate_event(2))
    assert received == []

    assert bus.process_queue() == 2
    assert received == [1, 2]
    assert bus.process_queue() == 0


def test_handler_may_unsubscribe_during_dispatch():
    bus = EventBus()
    received = []

    def once(event):
        received.append(event.type)
        unsubscribe()

    unsubscribe = bus.subscribe(EventType.RESIZE, once)
    bus.emit(Event(EventType.RESIZE))
    bus.emit(Event(EventType.RESIZE))
    assert received == [EventType.RESIZE]


def test_history_is_bounded_and_filterable():
    bus = EventBus(history_limit=3)
    for timestamp in range(5):
        bus.emit(activate_event(timestamp))
    bus.emit(Event(EventType.QUIT))

    assert [e.data["timestamp_ms"] for e in bus.get_history(EventType.ACTIVATE)] == [3, 4]
    assert len(bus.get_history()) == 3
