"""Linear and circular queues with switchable FIFO/LIFO discharge."""

from .circular import CircularQueue, Slot
from .errors import (
    QueueEmptyError, QueueError, QueueOverflowError, QueueUnderflowError
)
from .linear import LinearQueue
from .session import QUEUE_KINDS, QueueSession, make_queue

__all__ = [
    "CircularQueue",
    "LinearQueue",
    "QUEUE_KINDS",
    "QueueEmptyError",
    "QueueError",
    "QueueOverflowError",
    "QueueSession",
    "QueueUnderflowError",
    "Slot",
    "make_queue",
]
