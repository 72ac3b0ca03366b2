# ============================================
# Queue errors
# ============================================


class QueueError(Exception):
    """Base class for queue failures. `kind` is a stable identifier."""
    kind = "error"
    default_message = "Queue error"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class QueueOverflowError(QueueError):
    """Raised by enqueue() when the queue is full."""
    kind = "overflow"
    default_message = "Overflow: the queue is full"


class QueueEmptyError(QueueError):
    """Raised by front()/rear() when there is nothing to read."""
    kind = "empty"
    default_message = "The queue is empty"


class QueueUnderflowError(QueueEmptyError):
    """Raised by dequeue() when the queue is empty."""
    kind = "underflow"
    default_message = "Underflow: the queue is empty"
