from enum import Enum

from errors import InvariantViolation, QueueExhaustedError, QueueFullError


class Algorithm(Enum):
    FIFO = 0
    LRU = 1
    MFU = 2

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"Unknown algorithm: {value}") from None
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"Unknown algorithm: {value!r}")


class CircularQueue:
    def __init__(self, capacity):
        self.capacity = capacity
        self.items = [None] * capacity
        self.head = 0
        self.count = 0

    def __len__(self):
        return self.count

    def is_empty(self):
        return self.count == 0

    def is_full(self):
        return self.count == self.capacity

    def enqueue(self, item):
        if self.is_full():
            raise QueueFullError(f"Queue is full (capacity {self.capacity})")
        tail = (self.head + self.count) % self.capacity
        self.items[tail] = item
        self.count += 1

    def dequeue(self):
        if self.is_empty():
            raise QueueExhaustedError("Dequeue from an empty queue")
        item = self.items[self.head]
        self.items[self.head] = None
        self.head = (self.head + 1) % self.capacity
        self.count -= 1
        return item

    def __iter__(self):
        for i in range(self.count):
            yield self.items[(self.head + i) % self.capacity]


class FIFOPolicy:
    algorithm = Algorithm.FIFO

    def __init__(self, frame_count):
        self.queue = CircularQueue(frame_count)

    def on_place(self, frame_num, entry):
        self.queue.enqueue(entry)

    def on_hit(self, frame_num):
        pass

    def select_victim(self):
        # Oldest surviving placement
        entry = self.queue.dequeue()
        return entry.frame_number

    def check_invariants(self, resident):
        queued = [entry.page_number for entry in self.queue]
        if len(set(queued)) != len(queued):
            raise InvariantViolation(f"FIFO queue holds a page twice: {queued}")
        if set(queued) != {entry.page_number for entry in resident}:
            raise InvariantViolation(
                f"FIFO queue {queued} does not match the resident pages"
            )


class LRUPolicy:
    """
    Counter-based LRU: each frame counts how many times it has been touched
    (placement or hit). The victim is the frame with the smallest count, lowest
    frame number on ties. Counters belong to frames, not pages, so they are not
    reset when a new page is placed.
    """
    algorithm = Algorithm.LRU

    def __init__(self, frame_count):
        self.counters = [0] * frame_count

    def on_place(self, frame_num, entry):
        self.counters[frame_num] += 1

    def on_hit(self, frame_num):
        self.counters[frame_num] += 1

    def select_victim(self):
        victim_frame = 0
        for frame_num in range(1, len(self.counters)):
            if self.counters[frame_num] < self.counters[victim_frame]:
                victim_frame = frame_num
        return victim_frame

    def check_invariants(self, resident):
        pass


class MFUPolicy:
    """
    Evicts the frame whose current page has been used the most since it was
    placed. Ties go to the lowest frame number.
    """
    algorithm = Algorithm.MFU

    def __init__(self, frame_count):
        self.frequencies = [0] * frame_count

    def on_place(self, frame_num, entry):
        self.frequencies[frame_num] = 1

    def on_hit(self, frame_num):
        self.frequencies[frame_num] += 1

    def select_victim(self):
        victim_frame = 0
        for frame_num in range(1, len(self.frequencies)):
            if self.frequencies[frame_num] > self.frequencies[victim_frame]:
                victim_frame = frame_num
        return victim_frame

    def check_invariants(self, resident):
        pass


POLICIES = {
    Algorithm.FIFO: FIFOPolicy,
    Algorithm.LRU: LRUPolicy,
    Algorithm.MFU: MFUPolicy,
}


def make_policy(algorithm, frame_count):
    return POLICIES[Algorithm.parse(algorithm)](frame_count)
