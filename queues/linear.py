# ============================================
# Linear Queue (FIFO/LIFO)
# ============================================

from .errors import QueueEmptyError, QueueOverflowError, QueueUnderflowError


def check_capacity(capacity):
    """Reject anything that is not a positive int (bool included)."""
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
        raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
    return capacity


class LinearQueue:
    """
    A bounded queue backed by a list with advancing front/rear indices.

    The live window is elements[front:rear + 1]. Indices only move forward
    (or rear backward in LIFO) and are reset once the queue runs empty, at
    which point the backing list is dropped as well. A queue that never
    drains is re-based once front passes capacity.
    """

    def __init__(self, capacity=10, is_fifo=True):
        self.capacity = check_capacity(capacity)
        self.is_fifo = is_fifo
        self._items = []
        self._front = 0
        self._rear = -1

    @property
    def front_index(self):
        return self._front

    @property
    def rear_index(self):
        return self._rear

    def is_empty(self):
        """Check if the queue is empty."""
        return self._rear < self._front

    def is_full(self):
        """Check if the queue holds `capacity` elements."""
        return self.size() >= self.capacity

    def size(self):
        if self.is_empty():
            return 0
        return self._rear - self._front + 1

    def enqueue(self, value):
        """Add an element at the rear index."""
        if self.is_full():
            raise QueueOverflowError()

        self._rear += 1
        self._items.append(value)
        return True

    def dequeue(self):
        """Remove and return the next element for the current mode."""
        if self.is_empty():
            raise QueueUnderflowError()

        if self.is_fifo:
            value = self._items[self._front]
            self._items[self._front] = None
            self._front += 1
        else:
            value = self._items[self._rear]
            del self._items[self._rear:]
            self._rear -= 1

        if self.is_empty():
            self.clear()
        elif self._front >= self.capacity:
            # drop the vacated prefix so storage stays under 2 * capacity
            self._items = self._items[self._front:]
            self._rear -= self._front
            self._front = 0
        return value

    def front(self):
        """Return the element that leaves next, without removing it."""
        if self.is_empty():
            raise QueueEmptyError()
        return self._items[self._front] if self.is_fifo else self._items[self._rear]

    def rear(self):
        """Return the element that leaves last, without removing it."""
        if self.is_empty():
            raise QueueEmptyError()
        return self._items[self._rear] if self.is_fifo else self._items[self._front]

    def clear(self):
        self._items = []
        self._front = 0
        self._rear = -1

    def elements(self):
        """Return the live window front..rear in storage order."""
        if self.is_empty():
            return []
        return self._items[self._front:self._rear + 1]

    def toggle_mode(self):
        """
        Switch between FIFO and LIFO.

        The live window is reversed and re-based at index 0 so that the same
        index arithmetic serves both modes afterwards.
        """
        self.is_fifo = not self.is_fifo
        if not self.is_empty():
            self._items = self.elements()[::-1]
            self._front = 0
            self._rear = len(self._items) - 1

    def __len__(self):
        return self.size()

    def __repr__(self):
        mode = "FIFO" if self.is_fifo else "LIFO"
        return f"LinearQueue({mode}, {self.size()}/{self.capacity}, {self.elements()!r})"
