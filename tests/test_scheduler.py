from logic.scheduler import ManualScheduler, TkScheduler


def test_manual_scheduler_runs_when_due():
    scheduler = ManualScheduler()
    ran = []
    scheduler.schedule(100, lambda: ran.append("a"))

    assert scheduler.advance(99) == 0
    assert ran == []
    assert scheduler.advance(1) == 1
    assert ran == ["a"]
    assert scheduler.pending == []


def test_manual_scheduler_runs_in_due_order():
    scheduler = ManualScheduler()
    ran = []
    scheduler.schedule(30, lambda: ran.append(30))
    scheduler.schedule(10, lambda: ran.append(10))
    scheduler.schedule(20, lambda: ran.append(20))

    assert scheduler.run_pending() == 3
    assert ran == [10, 20, 30]


def test_manual_scheduler_cancel():
    scheduler = ManualScheduler()
    ran = []
    call = scheduler.schedule(10, lambda: ran.append(1))
    scheduler.cancel(call)

    assert call.cancelled
    assert scheduler.run_pending() == 0
    assert ran == []


def test_manual_scheduler_runs_calls_scheduled_by_callbacks():
    scheduler = ManualScheduler()
    ran = []

    def first():
        ran.append("first")
        scheduler.schedule(5, lambda: ran.append("second"))

    scheduler.schedule(5, first)
    scheduler.advance(10)
    assert ran == ["first", "second"]
    assert scheduler.now_ms == 10


class FakeWidget:
    """Stands in for a Tk widget's after/after_cancel."""

    def __init__(self):
        self.calls = {}
        self.next_id = 0

    def after(self, delay_ms, func):
        self.next_id += 1
        handle = f"after#{self.next_id}"
        self.calls[handle] = (delay_ms, func)
        return handle

    def after_cancel(self, handle):
        self.calls.pop(handle, None)

    def fire_all(self):
        for _, func in list(self.calls.values()):
            func()
        self.calls.clear()


def test_tk_scheduler_uses_after():
    widget = FakeWidget()
    scheduler = TkScheduler(widget)
    ran = []

    call = scheduler.schedule(350, lambda: ran.append(1))
    assert widget.calls[call.handle][0] == 350

    widget.fire_all()
    assert ran == [1]


def test_tk_scheduler_cancel():
    widget = FakeWidget()
    scheduler = TkScheduler(widget)
    ran = []

    call = scheduler.schedule(350, lambda: ran.append(1))
    scheduler.cancel(call)

    assert widget.calls == {}
    assert ran == []
