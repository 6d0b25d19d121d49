"""
Multi-producer, single-consumer queue of log records.

Producers call `enqueue` from any thread and never wait on the consumer: the
underlying `queue.Queue` is unbounded, so `put` only takes its internal mutex
for the duration of an append.

The single consumer (the render loop) uses the blocking `dequeue` instead of
polling `try_dequeue` in a loop. It sleeps until a record arrives or the queue
is closed, so an idle logger costs no CPU.

Ordering:
  Every record is stamped with a global sequence number in the same critical
  section that appends it. Sequence order is therefore exactly queue order,
  across all producers, which is the order records are rendered in.

Closing:
  `close()` appends a marker behind whatever is already queued. The consumer
  keeps receiving records until it reaches the marker, so everything enqueued
  before the close is still delivered (drain-before-exit).
"""

import itertools
import queue
import threading
from dataclasses import replace
from typing import cast

from .record import LogRecord

# Appended by close(); never handed to callers.
_CLOSE_MARKER = object()


class MessageQueue:
    """Unbounded FIFO of LogRecords with sequence stamping and a close marker."""

    def __init__(self) -> None:
        self._queue: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._sequence = itertools.count()
        self._closed = False
        self._marker_pending = False

    def enqueue(self, record: LogRecord) -> LogRecord | None:
        """Append a record to the tail and return it with its sequence number set.

        Returns None, dropping the record, once the queue is closed.
        """
        with self._lock:
            if self._closed:
                return None
            stamped = replace(record, sequence=next(self._sequence))
            self._queue.put(stamped)
        return stamped

    def try_dequeue(self) -> LogRecord | None:
        """Pop the head without waiting. Returns None if nothing is queued."""
        try:
            item = self._queue.get_nowait()
        except queue.Empty:
            return None
        return self._unwrap(item)

    def dequeue(self, timeout: float | None = None) -> LogRecord | None:
        """Pop the head, waiting for one to arrive.

        Returns None when the close marker is reached or the timeout expires.
        """
        try:
            item = self._queue.get(timeout=timeout)
        except queue.Empty:
            return None
        return self._unwrap(item)

    def _unwrap(self, item: object) -> LogRecord | None:
        if item is _CLOSE_MARKER:
            self._marker_pending = False
            return None
        return cast(LogRecord, item)

    def task_done(self) -> None:
        """Mark the last dequeued item (record or close marker) as processed."""
        self._queue.task_done()

    def join(self) -> None:
        """Block until every item enqueued so far has been marked done."""
        self._queue.join()

    def close(self) -> None:
        """Append the close marker. Calling it again has no effect."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._marker_pending = True
            self._queue.put(_CLOSE_MARKER)

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def count(self) -> int:
        """Records waiting to be processed.

        Advisory only: producers and the consumer may change it right after it
        is read. Use it for "is there still work" hints, not exact accounting.
        """
        return max(self._queue.qsize() - int(self._marker_pending), 0)
