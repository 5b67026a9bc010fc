EMPTY = -1


class PhysicalMemory:
    def __init__(self, num_frames):
        # Each frame stores the resident page number or EMPTY if free
        self.frames = [EMPTY] * num_frames

    def find_free_frame(self):
        for i, page in enumerate(self.frames):
            if page == EMPTY:
                return i
        return None

    def allocate_frame(self, frame_num, page_num):
        self.frames[frame_num] = page_num

    def free_frame(self, frame_num):
        self.frames[frame_num] = EMPTY

    def get_frame_info(self, frame_num):
        return self.frames[frame_num]

    def used_frames(self):
        return sum(1 for page in self.frames if page != EMPTY)


class Statistics:
    def __init__(self):
        self.page_faults = 0
        self.hits = 0

    @property
    def references(self):
        return self.page_faults + self.hits

    @property
    def fault_rate(self):
        if self.references == 0:
            return 0.0
        return self.page_faults / self.references

    def record_page_fault(self):
        self.page_faults += 1

    def record_hit(self):
        self.hits += 1

    def __str__(self):
        return (f"Page Faults: {self.page_faults}\n"
                f"Hits: {self.hits}\n"
                f"Fault Rate: {self.fault_rate:.3f}")
