from commodoro.input_monitor import InputMonitor


class _Source:
    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.values.pop(0)


def _monitor(values):
    hits = []
    source = _Source(values)
    monitor = InputMonitor(source, lambda: hits.append(True))
    return monitor, source, hits


def test_activity_detected_on_idle_drop():
    monitor, _, hits = _monitor([10, 11, 0])
    monitor.start()
    assert monitor.active is True
    assert monitor.poll() is False
    assert monitor.poll() is True
    assert hits == [True]
    assert monitor.active is False


def test_rising_idle_time_is_not_activity():
    monitor, _, hits = _monitor([1, 2, 3, 4])
    monitor.start()
    assert [monitor.poll() for _ in range(3)] == [False, False, False]
    assert hits == []
    assert monitor.last_idle_time == 4


def test_drop_of_one_second_is_ignored():
    monitor, _, hits = _monitor([5, 4])
    monitor.start()
    assert monitor.poll() is False
    assert hits == []


def test_unknown_idle_time_keeps_last_value():
    monitor, _, hits = _monitor([8, None, -1, 2])
    monitor.start()
    assert monitor.poll() is False
    assert monitor.poll() is False
    assert monitor.last_idle_time == 8
    assert monitor.poll() is True
    assert hits == [True]


def test_start_twice_reads_once():
    monitor, source, _ = _monitor([3, 3])
    monitor.start()
    monitor.start()
    assert source.calls == 1


def test_stopped_monitor_does_not_poll():
    monitor, source, hits = _monitor([9, 0])
    monitor.start()
    monitor.stop()
    assert monitor.poll() is False
    assert source.calls == 1
    assert hits == []


def test_source_errors_give_none():
    def failing():
        raise OSError("no display")

    assert InputMonitor(failing).idle_time() is None
    assert InputMonitor().idle_time() is None


def test_no_callback_still_stops():
    monitor = InputMonitor(_Source([6, 0]))
    monitor.start()
    assert monitor.poll() is True
    assert monitor.active is False