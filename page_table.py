from display import describe_creation
from errors import (InvalidParameterError, InvariantViolation,
                    PageOutOfRangeError, TableDestroyedError)
from memory_manager import EMPTY, PhysicalMemory, Statistics
from replacement import Algorithm, make_policy

VALID_BIT = 0x1


class PageTableEntry:
    def __init__(self, page_number):
        self._page_number = page_number
        # Last frame this page was in, or the current one while resident
        self._frame_number = EMPTY
        self._metadata = 0

    @property
    def page_number(self):
        return self._page_number

    @property
    def frame_number(self):
        return self._frame_number

    @property
    def resident(self):
        return bool(self._metadata & VALID_BIT)

    # Only the owning PageTable calls these
    def _mark_resident(self, frame_num):
        self._frame_number = frame_num
        self._metadata |= VALID_BIT

    def _mark_evicted(self):
        self._metadata &= ~VALID_BIT

    def __repr__(self):
        return (f"PageTableEntry(page_number={self.page_number}, "
                f"frame_number={self.frame_number}, resident={self.resident})")


def _check_count(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidParameterError(f"{name} must be positive, got {value}")


class PageTable:

    def __init__(self, page_count, frame_count, algorithm=Algorithm.FIFO, verbose=False):
        _check_count("page_count", page_count)
        _check_count("frame_count", frame_count)
        try:
            algorithm = Algorithm.parse(algorithm)
        except ValueError as e:
            raise InvalidParameterError(str(e)) from e

        self._page_count = page_count
        self._frame_count = frame_count
        self._algorithm = algorithm
        self._entries = [PageTableEntry(i) for i in range(page_count)]
        self._memory = PhysicalMemory(frame_count)
        self._stats = Statistics()
        self._policy = make_policy(algorithm, frame_count)
        self._destroyed = False

        if verbose:
            print(describe_creation(self))

    def _ensure_alive(self):
        if self._destroyed:
            raise TableDestroyedError("Page table has been destroyed")

    @property
    def page_count(self):
        self._ensure_alive()
        return self._page_count

    @property
    def frame_count(self):
        self._ensure_alive()
        return self._frame_count

    @property
    def algorithm(self):
        self._ensure_alive()
        return self._algorithm

    @property
    def faults(self):
        self._ensure_alive()
        return self._stats.page_faults

    @property
    def stats(self):
        self._ensure_alive()
        return self._stats

    @property
    def entries(self):
        self._ensure_alive()
        return tuple(self._entries)

    @property
    def frames(self):
        self._ensure_alive()
        return tuple(self._memory.frames)

    def get_entry(self, page):
        self._ensure_alive()
        self._check_page(page)
        return self._entries[page]

    def resident_pages(self):
        self._ensure_alive()
        return [entry.page_number for entry in self._entries if entry.resident]

    def _check_page(self, page):
        if isinstance(page, bool) or not isinstance(page, int):
            raise PageOutOfRangeError(f"Page number must be an integer, got {page!r}")
        if page < 0 or page >= self._page_count:
            raise PageOutOfRangeError(
                f"Page number {page} out of range (0 .. {self._page_count - 1})"
            )

    def access(self, page):
        self._ensure_alive()
        self._check_page(page)
        entry = self._entries[page]

        if entry.resident:
            self._stats.record_hit()
            self._policy.on_hit(entry.frame_number)
            return

        self._stats.record_page_fault()
        frame_num = self._memory.find_free_frame()
        if frame_num is None:
            frame_num = self._policy.select_victim()
            self._evict(frame_num)
        self._place(entry, frame_num)

    def _evict(self, frame_num):
        victim_page = self._memory.get_frame_info(frame_num)
        if victim_page == EMPTY:
            raise InvariantViolation(f"Victim frame {frame_num} holds no page")
        self._entries[victim_page]._mark_evicted()
        self._memory.free_frame(frame_num)

    def _place(self, entry, frame_num):
        self._memory.allocate_frame(frame_num, entry.page_number)
        entry._mark_resident(frame_num)
        self._policy.on_place(frame_num, entry)

    def check_invariants(self):
        self._ensure_alive()
        resident = [entry for entry in self._entries if entry.resident]
        used = self._memory.used_frames()
        if len(resident) != used:
            raise InvariantViolation(
                f"{len(resident)} resident pages but {used} frames in use"
            )
        if used > self._frame_count:
            raise InvariantViolation(f"{used} frames in use, only {self._frame_count} exist")
        seen = set()
        for entry in resident:
            if entry.frame_number == EMPTY:
                raise InvariantViolation(f"Resident page {entry.page_number} has no frame")
            if entry.frame_number in seen:
                raise InvariantViolation(f"Frame {entry.frame_number} holds two pages")
            seen.add(entry.frame_number)
            if self._memory.get_frame_info(entry.frame_number) != entry.page_number:
                raise InvariantViolation(
                    f"Frame {entry.frame_number} does not hold page {entry.page_number}"
                )
        self._policy.check_invariants(resident)

    def destroy(self):
        if self._destroyed:
            return
        self._entries = None
        self._memory = None
        self._stats = None
        self._policy = None
        self._destroyed = True

    @property
    def destroyed(self):
        return self._destroyed
