from robodeck.core.events import ObserverEvent


def test_observer_subscribe_emit():
    event = ObserverEvent("test_evt")
    results = []

    event.connect(results.append)
    event.emit("hello")

    assert results == ["hello"]


def test_observer_duplicate_connect_is_ignored():
    event = ObserverEvent("test_evt")
    results = []

    event.connect(results.append)
    event.connect(results.append)
    event.emit(1)

    assert results == [1]
    assert event.subscriber_count == 1


def test_observer_disconnect_handle():
    event = ObserverEvent("test_evt")
    results = []

    def callback():
        results.append(1)

    release = event.connect(callback)
    release()
    release()
    event.emit()

    assert results == []
    assert event.subscriber_count == 0


def test_subscriber_may_disconnect_itself():
    event = ObserverEvent("once")
    results = []

    def once():
        results.append("once")
        event.disconnect(once)

    event.connect(once)
    event.connect(lambda: results.append("other"))
    event.emit()
    event.emit()

    assert results == ["once", "other", "other"]


def test_observer_error_safety(caplog):
    """A failing subscriber does not block the others."""
    event = ObserverEvent("err_evt")
    results = []

    def buggy_callback():
        raise ValueError("Bug")

    event.connect(buggy_callback)
    event.connect(lambda: results.append("ok"))

    event.emit()

    assert results == ["ok"]
    assert "Bug" in caplog.text


def test_clear():
    event = ObserverEvent("evt")
    event.connect(lambda: None)

    event.clear()

    assert event.subscriber_count == 0
