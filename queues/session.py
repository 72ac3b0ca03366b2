"""
Presentation-side state: one active queue, picked by a linear/circular
selector, plus the snapshot a visualizer needs to redraw it.
"""

from .circular import CircularQueue
from .linear import LinearQueue

QUEUE_KINDS = ("linear", "circular")

_QUEUE_CLASSES = {
    "linear": LinearQueue,
    "circular": CircularQueue,
}

_COMMON_FEATURES = [
    "Front and rear iterators: point at the first and last element of the queue",
    "Error handling: overflow and underflow",
    "Operations: enqueue, dequeue, front, rear, size and clear",
]

_CIRCULAR_FEATURES = [
    "Circular layout: slots freed at the front are reused",
    "No element shifting on removal",
]


def make_queue(kind, capacity=10, is_fifo=True):
    """Build an empty queue of the given kind ("linear" or "circular")."""
    try:
        queue_class = _QUEUE_CLASSES[kind]
    except KeyError:
        raise ValueError(
            f"Unknown queue kind {kind!r}, expected one of {', '.join(QUEUE_KINDS)}"
        ) from None
    return queue_class(capacity, is_fifo=is_fifo)


class QueueSession:
    """Holds the queue currently shown to the user."""

    def __init__(self, kind="linear", capacity=10, is_fifo=True):
        self.kind = kind
        self.capacity = capacity
        self.queue = make_queue(kind, capacity, is_fifo=is_fifo)

    @property
    def is_circular(self):
        return self.kind == "circular"

    @property
    def is_fifo(self):
        return self.queue.is_fifo

    @property
    def mode_label(self):
        return "FIFO" if self.is_fifo else "LIFO"

    @property
    def kind_label(self):
        return "Circular queue" if self.is_circular else "Linear queue"

    def toggle_kind(self):
        """Swap linear <-> circular. Contents are dropped, the mode is kept."""
        other = "linear" if self.is_circular else "circular"
        self.queue = make_queue(other, self.capacity, is_fifo=self.is_fifo)
        self.kind = other
        return self.kind

    def toggle_mode(self):
        self.queue.toggle_mode()
        return self.mode_label

    def features(self):
        """Info-panel lines for the active kind and mode."""
        lines = list(_COMMON_FEATURES)
        if self.is_circular:
            lines.extend(_CIRCULAR_FEATURES)
        if self.is_fifo:
            lines.append("Mode: FIFO (First-In-First-Out)")
        else:
            lines.append("Mode: LIFO (Last-In-First-Out)")
        return lines

    def _display_elements(self):
        if self.is_circular:
            # already in front -> rear order, positions are ring indices
            slots = self.queue.elements()
            last = len(slots) - 1
            return [
                {
                    "value": slot.value,
                    "position": slot.position,
                    "is_front": index == 0,
                    "is_rear": index == last,
                }
                for index, slot in enumerate(slots)
            ]

        # storage order; in LIFO the front is the most recent, at the end
        values = self.queue.elements()
        last = len(values) - 1
        front_at, rear_at = (0, last) if self.is_fifo else (last, 0)
        return [
            {
                "value": value,
                "position": index,
                "is_front": index == front_at,
                "is_rear": index == rear_at,
            }
            for index, value in enumerate(values)
        ]

    def snapshot(self):
        """Everything a front end re-reads after a call, as plain JSON types."""
        return {
            "kind": self.kind,
            "mode": self.mode_label,
            "capacity": self.queue.capacity,
            "size": self.queue.size(),
            "is_empty": self.queue.is_empty(),
            "is_full": self.queue.is_full(),
            "elements": self._display_elements(),
            "features": self.features(),
        }
