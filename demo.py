# ============================================
# Queue Visualizer: command-line walk-through
# Topic: Linear and Circular Queues, FIFO and LIFO
# ============================================

from queues import CircularQueue, LinearQueue, QueueError


def show(queue):
    """Print the queue contents front to rear."""
    if queue.is_empty():
        print("  (empty)")
        return
    print(f"  {queue!r}  front={queue.front()!r} rear={queue.rear()!r}")


def run(queue, values):
    for value in values:
        queue.enqueue(value)
        print(f"Enqueued: {value}")
    show(queue)

    print(f"Dequeued: {queue.dequeue()}")
    show(queue)

    queue.toggle_mode()
    print(f"Mode switched to {'FIFO' if queue.is_fifo else 'LIFO'}")
    show(queue)

    print(f"Dequeued: {queue.dequeue()}")
    show(queue)


# ============================================
# Example Usage
# ============================================

if __name__ == "__main__":
    print("=== Linear Queue ===")
    run(LinearQueue(5), [10, 20, 30, 40])

    print("\n=== Circular Queue ===")
    cq = CircularQueue(3)
    run(cq, ["A", "B", "C"])
    for value in ["D", "E"]:
        cq.enqueue(value)
        print(f"Enqueued (wrapped): {value}")
    print("  slots:", [(slot.value, slot.position) for slot in cq.elements()])

    print("\n=== Overflow ===")
    try:
        cq.enqueue("F")
    except QueueError as exc:
        print(f"{exc.kind}: {exc}")
