from swordmerge.core.events import EventBus, ProgressEvent, ProgressKind


def test_subscribers_receive_matching_events_only():
    bus = EventBus()
    combines, upgrades = [], []
    bus.subscribe(ProgressKind.COMBINE, combines.append)
    bus.subscribe(ProgressKind.UPGRADE, upgrades.append)

    bus.publish(ProgressEvent(ProgressKind.COMBINE, 2))

    assert combines == [ProgressEvent(ProgressKind.COMBINE, 2)]
    assert upgrades == []


def test_failing_subscriber_does_not_block_others(caplog):
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("quest tracker crashed")

    bus.subscribe(ProgressKind.UPGRADE, broken)
    bus.subscribe(ProgressKind.UPGRADE, received.append)
    bus.publish(ProgressEvent(ProgressKind.UPGRADE))

    assert len(received) == 1
    assert "quest tracker crashed" in caplog.text


def test_unsubscribe():
    bus = EventBus()
    received = []
    bus.subscribe(ProgressKind.COMBINE, received.append)
    bus.unsubscribe(ProgressKind.COMBINE, received.append)
    bus.publish(ProgressEvent(ProgressKind.COMBINE))
    assert received == []


def test_event_kinds_use_wire_names():
    assert ProgressKind.COMBINE.value == "combine"
    assert ProgressKind.UPGRADE.value == "upgrade"
