"""
Deferred calls for the game session.
The session uses a scheduler to pause before the computer moves,
and cancels the pending call whenever the board changes under it.
"""

from dataclasses import dataclass
from typing import Any, Callable, List


@dataclass
class ScheduledCall:
    """A call waiting to run."""
    callback: Callable[[], None]
    due_ms: int
    handle: Any = None
    cancelled: bool = False


class Scheduler:
    """
    Interface for deferred calls.

    Implementations must run callbacks on the same thread that
    schedules them.
    """

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        raise NotImplementedError

    def cancel(self, call: ScheduledCall) -> None:
        raise NotImplementedError


class ManualScheduler(Scheduler):
    """
    Scheduler with a virtual clock.
    Nothing runs until advance() or run_pending() is called.
    """

    def __init__(self):
        self.now_ms = 0
        self._queue: List[ScheduledCall] = []

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(callback=callback, due_ms=self.now_ms + max(0, delay_ms))
        self._queue.append(call)
        return call

    def cancel(self, call: ScheduledCall) -> None:
        call.cancelled = True
        if call in self._queue:
            self._queue.remove(call)

    @property
    def pending(self) -> List[ScheduledCall]:
        """Calls that have not run or been cancelled yet."""
        return list(self._queue)

    def advance(self, ms: int) -> int:
        """
        Move the clock forward and run every call that became due.

        Calls scheduled while running are run too if they fall due
        within the same window.

        Returns:
            Number of callbacks run.
        """
        target = self.now_ms + ms
        ran = 0

        while True:
            due = [c for c in self._queue if c.due_ms <= target]
            if not due:
                break
            call = min(due, key=lambda c: c.due_ms)
            self._queue.remove(call)
            self.now_ms = max(self.now_ms, call.due_ms)
            call.callback()
            ran += 1

        self.now_ms = target
        return ran

    def run_pending(self) -> int:
        """Run everything queued, however far in the future."""
        ran = 0
        while self._queue:
            latest = max(c.due_ms for c in self._queue)
            ran += self.advance(max(0, latest - self.now_ms))
        return ran


class TkScheduler(Scheduler):
    """
    Scheduler backed by a Tk widget's event loop (after / after_cancel).
    """

    def __init__(self, widget):
        """
        Args:
            widget: Any Tk widget, usually the root window.
        """
        self.widget = widget

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCall:
        call = ScheduledCall(callback=callback, due_ms=delay_ms)

        def run():
            if not call.cancelled:
                callback()

        call.handle = self.widget.after(max(0, delay_ms), run)
        return call

    def cancel(self, call: ScheduledCall) -> None:
        call.cancelled = True
        if call.handle is not None:
            self.widget.after_cancel(call.handle)
