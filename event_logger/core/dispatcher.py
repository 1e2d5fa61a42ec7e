"""
Designated-context dispatchers

A dispatcher answers two questions for the logger: is the current
thread the designated one, and how to hand work over to it.

Thread Safety:
    ``dispatch`` may be called from any thread. Work runs in FIFO order
    of arrival on the queue; calls arriving concurrently from different
    threads have no defined relative order.
"""

from __future__ import annotations

import atexit
import queue
import threading
import time
from abc import ABC, abstractmethod
from typing import Callable, Optional

from event_logger.core.logger_config import DispatchMode

Work = Callable[[], None]

_STOP = object()


def _run(work: Work) -> None:
    try:
        work()
    except Exception as e:
        print(f"Dispatch error: {e}")


class BaseDispatcher(ABC):
    """Abstract base class for designated-context dispatchers."""

    @abstractmethod
    def is_designated(self) -> bool:
        """Return True when called on the designated context."""
        pass

    @abstractmethod
    def dispatch(self, work: Work) -> None:
        """
        Schedule work onto the designated context without waiting.

        Args:
            work: Zero-argument callable
        """
        pass

    def flush(self) -> None:
        """Run or wait for pending work where the caller is able to."""

    def shutdown(self) -> None:
        """Release resources held by the dispatcher."""


class ImmediateDispatcher(BaseDispatcher):
    """
    Treats every thread as designated and runs work synchronously.

    Useful in tests and in single-threaded programs.
    """

    def is_designated(self) -> bool:
        return True

    def dispatch(self, work: Work) -> None:
        _run(work)

    def __repr__(self) -> str:
        return "ImmediateDispatcher()"


class MainThreadDispatcher(BaseDispatcher):
    """
    Designates the interpreter's main thread.

    Work dispatched from other threads waits in a queue until the host
    application pumps it from the main thread with ``process_pending``,
    typically once per iteration of its event loop.
    """

    def __init__(self):
        self._pending: "queue.SimpleQueue[Work]" = queue.SimpleQueue()

    def is_designated(self) -> bool:
        return threading.current_thread() is threading.main_thread()

    def dispatch(self, work: Work) -> None:
        self._pending.put(work)

    def process_pending(self) -> int:
        """
        Run all queued work on the main thread.

        Work queued while pumping is run in the same call.

        Returns:
            Number of calls run

        Raises:
            RuntimeError: If called from a thread other than the main one
        """
        if not self.is_designated():
            raise RuntimeError("process_pending() must be called from the main thread")

        processed = 0
        while True:
            try:
                work = self._pending.get_nowait()
            except queue.Empty:
                return processed
            _run(work)
            processed += 1

    @property
    def pending_count(self) -> int:
        """Approximate number of queued calls."""
        return self._pending.qsize()

    def flush(self) -> None:
        # Off the main thread there is nothing this call can do.
        if self.is_designated():
            self.process_pending()

    def __repr__(self) -> str:
        return f"MainThreadDispatcher(pending={self.pending_count})"


class WorkerThreadDispatcher(BaseDispatcher):
    """
    Designates a background worker thread owned by the dispatcher.

    Every other thread, the main one included, enqueues its work and
    returns at once. ``flush`` blocks until the queue is drained.
    """

    def __init__(self, name: str = "event-logger", queue_size: int = 0):
        """
        Initialize and start the worker.

        Args:
            name: Prefix for the worker thread name
            queue_size: Queue bound (0 for unbounded); ``dispatch``
                        blocks while a bounded queue is full
        """
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=queue_size)
        self._running = True
        self._stop_requested = False
        self._lock = threading.Lock()
        self._worker_thread: Optional[threading.Thread] = threading.Thread(
            target=self._process_queue,
            name=f"{name}-worker",
            daemon=True,
        )
        self._worker_thread.start()
        atexit.register(self.shutdown)

    def _process_queue(self) -> None:
        """Run queued work (worker thread)."""
        while True:
            work = self._queue.get()
            try:
                if work is _STOP:
                    return
                _run(work)
            finally:
                # Always mark task as done to prevent queue.join() deadlock
                self._queue.task_done()
            if self._stop_requested and self._queue.empty():
                return

    def is_designated(self) -> bool:
        return threading.current_thread() is self._worker_thread

    def dispatch(self, work: Work) -> None:
        while True:
            with self._lock:
                if not self._running:
                    break
                # Bounded wait so shutdown() can take the lock while the queue is full
                try:
                    self._queue.put(work, timeout=0.05)
                    return
                except queue.Full:
                    pass
            time.sleep(0.001)
        _run(work)

    def flush(self) -> None:
        if self.is_designated():
            return
        if self._running:
            self._queue.join()

    def shutdown(self) -> None:
        """Drain pending work and stop the worker."""
        with self._lock:
            if not self._running:
                return
            self._running = False

        if self.is_designated():
            # Only this thread drains the queue; a blocking put could never return.
            try:
                self._queue.put_nowait(_STOP)
            except queue.Full:
                self._stop_requested = True
        else:
            self._queue.put(_STOP)
            if self._worker_thread:
                self._worker_thread.join(timeout=5.0)
        atexit.unregister(self.shutdown)

    @property
    def running(self) -> bool:
        return self._running

    def __repr__(self) -> str:
        return f"WorkerThreadDispatcher(running={self._running})"


def create_dispatcher(mode: DispatchMode, name: Optional[str] = None, queue_size: int = 0) -> BaseDispatcher:
    """
    Create the dispatcher for a dispatch mode.

    Args:
        mode: Dispatch mode
        name: Logger name, used for the worker thread name
        queue_size: Worker queue bound (0 for unbounded)

    Returns:
        New dispatcher instance
    """
    if mode is DispatchMode.IMMEDIATE:
        return ImmediateDispatcher()
    if mode is DispatchMode.WORKER_THREAD:
        return WorkerThreadDispatcher(name=name or "event-logger", queue_size=queue_size)
    return MainThreadDispatcher()
