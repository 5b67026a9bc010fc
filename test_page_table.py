import random

import pytest

from errors import (InvalidParameterError, InvariantViolation, PageOutOfRangeError,
                    PageTableError, TableDestroyedError)
from memory_manager import EMPTY
from page_table import PageTable
from replacement import Algorithm
from simulator import run_trace


def build(page_count, frame_count, algorithm, trace):
    return run_trace(PageTable(page_count, frame_count, algorithm), trace)


class TestCreate:

    def test_initial_state(self):
        pt = PageTable(4, 2, Algorithm.FIFO)
        assert pt.faults == 0
        assert pt.frames == (EMPTY, EMPTY)
        assert all(not e.resident and e.frame_number == EMPTY for e in pt.entries)
        assert pt.algorithm is Algorithm.FIFO

    def test_algorithm_by_name(self):
        assert PageTable(4, 2, "lru").algorithm is Algorithm.LRU

    @pytest.mark.parametrize("page_count, frame_count", [(0, 2), (4, 0), (-1, 2), (4, -3)])
    def test_rejects_non_positive_counts(self, page_count, frame_count):
        with pytest.raises(InvalidParameterError):
            PageTable(page_count, frame_count, Algorithm.FIFO)

    def test_rejects_unknown_algorithm(self):
        with pytest.raises(InvalidParameterError):
            PageTable(4, 2, "OPT")

    def test_more_frames_than_pages_is_allowed(self):
        pt = build(2, 5, Algorithm.LRU, [0, 1, 0, 1])
        assert pt.faults == 2
        assert pt.frames == (0, 1, EMPTY, EMPTY, EMPTY)

    def test_verbose_prints_creation(self, capsys):
        PageTable(4, 2, Algorithm.LRU, verbose=True)
        out = capsys.readouterr().out
        assert out == "Created page_table{page_count=4, frame_count=2, replacement_algorithm=LRU}\n"

    def test_quiet_by_default(self, capsys):
        PageTable(4, 2, Algorithm.MFU)
        assert capsys.readouterr().out == ""


class TestAccess:

    @pytest.mark.parametrize("page", [-1, 4, 100])
    def test_out_of_range(self, page):
        pt = PageTable(4, 2, Algorithm.FIFO)
        with pytest.raises(PageOutOfRangeError):
            pt.access(page)
        assert pt.faults == 0

    def test_out_of_range_is_index_error(self):
        pt = PageTable(4, 2, Algorithm.FIFO)
        with pytest.raises(IndexError):
            pt.access(4)

    def test_free_frames_filled_left_to_right(self):
        pt = build(5, 3, Algorithm.FIFO, [4, 2])
        assert pt.frames == (4, 2, EMPTY)
        assert pt.get_entry(4).frame_number == 0
        assert pt.get_entry(2).frame_number == 1

    def test_fifo_evicts_oldest(self):
        pt = build(4, 3, Algorithm.FIFO, [0, 1, 2, 3, 0])
        # every access misses; 3 evicts 0, then 0 evicts 1
        assert pt.faults == 5
        assert pt.frames == (3, 0, 2)
        assert not pt.get_entry(1).resident

    def test_fifo_ignores_hits(self):
        pt = build(3, 2, Algorithm.FIFO, [0, 1, 0, 2])
        assert pt.faults == 3
        assert pt.frames == (2, 1)

    def test_lru_evicts_least_counted_frame(self):
        pt = build(4, 3, Algorithm.LRU, [0, 1, 2, 0, 3])
        assert pt.faults == 4
        assert pt.frames == (0, 3, 2)
        assert not pt.get_entry(1).resident

    def test_lru_counts_hits(self):
        pt = build(3, 2, Algorithm.LRU, [0, 1, 0, 2])
        assert pt.faults == 3
        assert pt.frames == (0, 2)

    def test_lru_counters_carry_over_frames(self):
        pt = build(5, 2, Algorithm.LRU, [0, 0, 0, 1, 2, 3])
        assert pt.faults == 4
        assert pt.frames == (0, 3)
        # counters are now tied at 3, lowest frame goes
        pt.access(4)
        assert pt.frames == (4, 3)

    def test_mfu_evicts_most_used(self):
        pt = build(4, 3, Algorithm.MFU, [0, 1, 2, 0, 0, 3])
        assert pt.faults == 4
        assert pt.frames == (3, 1, 2)
        pt.access(0)
        # all frequencies are 1, lowest frame goes
        assert pt.frames == (0, 1, 2)
        assert pt.faults == 5

    def test_evicted_entry_keeps_last_frame(self):
        pt = build(3, 2, Algorithm.FIFO, [0, 1, 2])
        entry = pt.get_entry(0)
        assert not entry.resident
        assert entry.frame_number == 0

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_repeated_hits_are_idempotent(self, algorithm):
        pt = build(6, 3, algorithm, [0, 1, 2])
        frames = pt.frames
        for _ in range(10):
            pt.access(1)
        assert pt.faults == 3
        assert pt.frames == frames
        assert pt.get_entry(1).frame_number == 1

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_invariants_hold_on_random_trace(self, algorithm):
        rng = random.Random(452)
        trace = [rng.randrange(10) for _ in range(500)]
        pt = PageTable(10, 4, algorithm)
        for page in trace:
            pt.access(page)
            pt.check_invariants()
        assert pt.faults <= len(trace)
        assert len(pt.resident_pages()) == 4
        assert pt.stats.references == len(trace)

    @pytest.mark.parametrize("algorithm", list(Algorithm))
    def test_deterministic(self, algorithm):
        rng = random.Random(7)
        trace = [rng.randrange(8) for _ in range(200)]
        a = build(8, 3, algorithm, trace)
        b = build(8, 3, algorithm, trace)
        assert a.faults == b.faults
        assert a.frames == b.frames
        assert [(e.frame_number, e.resident) for e in a.entries] == \
            [(e.frame_number, e.resident) for e in b.entries]

    def test_single_frame_faults_on_every_change(self):
        pt = build(3, 1, Algorithm.LRU, [0, 1, 1, 2, 0])
        assert pt.faults == 4
        assert pt.frames == (0,)


class TestInvariants:

    def test_detects_frame_mismatch(self):
        pt = build(4, 2, Algorithm.FIFO, [0, 1])
        pt._memory.frames[0] = 3
        with pytest.raises(InvariantViolation):
            pt.check_invariants()

    def test_detects_count_mismatch(self):
        pt = build(4, 2, Algorithm.FIFO, [0, 1])
        pt._memory.free_frame(1)
        with pytest.raises(InvariantViolation):
            pt.check_invariants()

    def test_detects_fifo_queue_mismatch(self):
        pt = build(4, 2, Algorithm.FIFO, [0, 1])
        pt.check_invariants()
        pt._policy.queue.dequeue()
        with pytest.raises(InvariantViolation, match="FIFO queue"):
            pt.check_invariants()

    def test_fifo_queue_tracks_residents_through_evictions(self):
        pt = build(6, 3, Algorithm.FIFO, [0, 1, 2, 3, 4, 0, 5])
        queued = [entry.page_number for entry in pt._policy.queue]
        assert queued == [4, 0, 5]
        assert sorted(queued) == pt.resident_pages()
        pt.check_invariants()


class TestEntryAccess:

    @pytest.mark.parametrize("field", ["frame_number", "page_number", "resident"])
    def test_entry_fields_are_read_only(self, field):
        pt = build(4, 2, Algorithm.FIFO, [0, 1])
        entry = pt.get_entry(0)
        with pytest.raises(AttributeError):
            setattr(entry, field, 1)
        assert (entry.page_number, entry.frame_number, entry.resident) == (0, 0, True)

    def test_failed_write_leaves_table_consistent(self):
        pt = build(4, 2, Algorithm.FIFO, [0, 1])
        with pytest.raises(AttributeError):
            pt.entries[0].frame_number = 1
        pt.access(2)
        assert pt.frames == (2, 1)
        assert not pt.get_entry(0).resident
        assert pt.get_entry(2).frame_number == 0
        pt.check_invariants()


class TestDestroy:

    def test_operations_fail_after_destroy(self):
        pt = build(4, 2, Algorithm.FIFO, [0, 1])
        pt.destroy()
        assert pt.destroyed
        with pytest.raises(TableDestroyedError):
            pt.access(0)
        with pytest.raises(PageTableError):
            pt.faults

    @pytest.mark.parametrize("accessor", ["page_count", "frame_count", "algorithm", "entries", "frames"])
    def test_accessors_fail_after_destroy(self, accessor):
        pt = PageTable(4, 2, Algorithm.MFU)
        pt.destroy()
        with pytest.raises(TableDestroyedError):
            getattr(pt, accessor)

    def test_destroy_twice(self):
        pt = PageTable(4, 2, Algorithm.LRU)
        pt.destroy()
        pt.destroy()
        assert pt.destroyed
