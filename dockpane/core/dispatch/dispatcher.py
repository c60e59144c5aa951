"""
UI Dispatcher - single-threaded prioritized work queue.

All docking work runs on one thread. Work that must wait for pending
layout/render passes is posted here with a priority lane and executed by
`process_pending()`, highest priority first and FIFO within a lane.

Usage:
    dispatcher = Dispatcher.current()
    op = dispatcher.post(check_focus, DispatcherPriority.INPUT)
    ...
    dispatcher.process_pending()   # normally driven by the host event loop
"""
from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, List, Optional, Tuple

from loguru import logger

from .priority import DispatcherPriority, OperationStatus


@dataclass(slots=True)
class DispatcherOperation:
    """
    A queued unit of work.

    Attributes:
        callback: Callable to invoke
        priority: Lane the operation runs in
        args: Positional arguments for the callback
        sequence: Post order, used for FIFO ordering within a lane
        status: PENDING until run, aborted or failed
        result: Callback return value once COMPLETED
    """
    callback: Callable[..., Any]
    priority: DispatcherPriority
    args: Tuple[Any, ...] = ()
    sequence: int = 0
    status: OperationStatus = OperationStatus.PENDING
    result: Any = None
    error: Optional[BaseException] = field(default=None, repr=False)

    def __lt__(self, other: "DispatcherOperation") -> bool:
        """Heap ordering: higher priority first, then post order."""
        if self.priority != other.priority:
            return self.priority > other.priority
        return self.sequence < other.sequence

    def abort(self) -> bool:
        """Prevent a pending operation from running. Returns True if it was pending."""
        if self.status != OperationStatus.PENDING:
            return False
        self.status = OperationStatus.ABORTED
        return True


class Dispatcher:
    """
    Prioritized work queue for the UI thread.

    Subclasses hook `_schedule()` to wake their host event loop when work
    is posted (see QtDispatcher).
    """

    _current: ClassVar[Optional["Dispatcher"]] = None

    def __init__(self):
        self._queue: List[DispatcherOperation] = []
        self._counter = itertools.count()
        self._processing = False

    # === Default instance ===

    @classmethod
    def current(cls) -> "Dispatcher":
        """Return the process-wide dispatcher, creating a plain one on first use."""
        if Dispatcher._current is None:
            Dispatcher._current = Dispatcher()
        return Dispatcher._current

    @classmethod
    def set_current(cls, dispatcher: Optional["Dispatcher"]) -> None:
        Dispatcher._current = dispatcher

    # === Queue ===

    @property
    def pending_count(self) -> int:
        return sum(1 for op in self._queue if op.status == OperationStatus.PENDING)

    def has_pending(self, min_priority: DispatcherPriority = DispatcherPriority.SYSTEM_IDLE) -> bool:
        return any(
            op.status == OperationStatus.PENDING and op.priority >= min_priority
            for op in self._queue
        )

    def post(self, callback: Callable[..., Any],
             priority: DispatcherPriority = DispatcherPriority.NORMAL,
             *args: Any) -> DispatcherOperation:
        """
        Queue a callback.

        SEND priority runs the callback synchronously before returning.
        INACTIVE operations stay queued but are never run.
        """
        priority = DispatcherPriority.parse(priority)
        op = DispatcherOperation(callback, priority, args, next(self._counter))

        if priority == DispatcherPriority.SEND:
            self._invoke(op)
            return op

        heapq.heappush(self._queue, op)
        self._schedule()
        return op

    def process_pending(self, min_priority: DispatcherPriority = DispatcherPriority.SYSTEM_IDLE) -> int:
        """
        Run queued operations down to `min_priority`.

        Work posted by a running callback is picked up in the same pass when
        its lane qualifies. Re-entrant calls return immediately.

        Returns:
            Number of operations executed
        """
        if self._processing:
            return 0

        min_priority = max(DispatcherPriority.parse(min_priority), DispatcherPriority.SYSTEM_IDLE)
        executed = 0
        self._processing = True
        try:
            while self._queue:
                op = self._queue[0]
                if op.status != OperationStatus.PENDING:
                    heapq.heappop(self._queue)
                    continue
                if op.priority < min_priority:
                    break
                heapq.heappop(self._queue)
                self._invoke(op)
                executed += 1
        finally:
            self._processing = False
        return executed

    def clear(self) -> None:
        """Abort everything still queued."""
        for op in self._queue:
            op.abort()
        self._queue.clear()

    def _invoke(self, op: DispatcherOperation) -> None:
        try:
            op.result = op.callback(*op.args)
            op.status = OperationStatus.COMPLETED
        except Exception as e:
            op.status = OperationStatus.FAILED
            op.error = e
            logger.error(f"Dispatcher operation {op.callback!r} ({op.priority.name}) failed: {e}")

    def _schedule(self) -> None:
        """Hook for event-loop integration; the plain dispatcher is pumped manually."""
