# ============================================
# Circular Queue (FIFO/LIFO)
# ============================================

from typing import Any, NamedTuple

from .errors import QueueEmptyError, QueueOverflowError, QueueUnderflowError
from .linear import check_capacity


class Slot(NamedTuple):
    """An occupied ring slot: the stored value and its physical index."""
    value: Any
    position: int


class CircularQueue:
    """A fixed-capacity ring buffer with an explicit element count."""

    def __init__(self, capacity=10, is_fifo=True):
        self.capacity = check_capacity(capacity)
        self.is_fifo = is_fifo
        self._slots = [None] * self.capacity
        self._front = -1
        self._rear = -1
        self._count = 0

    @property
    def front_index(self):
        return self._front

    @property
    def rear_index(self):
        return self._rear

    def is_empty(self):
        return self._count == 0

    def is_full(self):
        return self._count == self.capacity

    def size(self):
        return self._count

    def enqueue(self, value):
        """Store a value after the current rear, wrapping around the ring."""
        if self.is_full():
            raise QueueOverflowError()

        if self.is_empty():
            self._front = self._rear = 0
        else:
            self._rear = (self._rear + 1) % self.capacity

        self._slots[self._rear] = value
        self._count += 1
        return True

    def dequeue(self):
        """Remove from the front (FIFO) or from the rear (LIFO)."""
        if self.is_empty():
            raise QueueUnderflowError()

        if self.is_fifo:
            value = self._slots[self._front]
        else:
            value = self._slots[self._rear]

        if self._front == self._rear:
            # last element
            self._front = self._rear = -1
        elif self.is_fifo:
            self._front = (self._front + 1) % self.capacity
        else:
            self._rear = (self._rear - 1 + self.capacity) % self.capacity

        self._count -= 1
        return value

    def front(self):
        if self.is_empty():
            raise QueueEmptyError()
        return self._slots[self._front] if self.is_fifo else self._slots[self._rear]

    def rear(self):
        if self.is_empty():
            raise QueueEmptyError()
        return self._slots[self._rear] if self.is_fifo else self._slots[self._front]

    def clear(self):
        self._slots = [None] * self.capacity
        self._front = self._rear = -1
        self._count = 0

    def elements(self):
        """
        Return the occupied slots as Slot(value, position) pairs.

        The walk starts at the front index and wraps around the ring. In LIFO
        the result is reversed, so it always reads front to rear for the
        current mode.
        """
        slots = []
        index = self._front
        for _ in range(self._count):
            slots.append(Slot(self._slots[index], index))
            index = (index + 1) % self.capacity

        if not self.is_fifo:
            slots.reverse()
        return slots

    def toggle_mode(self):
        # elements() and the accessors read the flag, nothing to move
        self.is_fifo = not self.is_fifo

    def __len__(self):
        return self._count

    def __repr__(self):
        mode = "FIFO" if self.is_fifo else "LIFO"
        values = [slot.value for slot in self.elements()]
        return f"CircularQueue({mode}, {self._count}/{self.capacity}, {values!r})"
