from errors import TraceFormatError


class TestScenario:
    # Not a pytest test class
    __test__ = False

    def __init__(self, page_count, frame_count, references):
        self.page_count = page_count
        self.frame_count = frame_count
        self.references = list(references)

    @property
    def refstr_len(self):
        return len(self.references)

    def __repr__(self):
        return (f"TestScenario(page_count={self.page_count}, "
                f"frame_count={self.frame_count}, refstr_len={self.refstr_len})")


def _read_int(tokens, what):
    try:
        return int(next(tokens))
    except (StopIteration, ValueError):
        raise TraceFormatError(f"Read of {what} failed!") from None


def parse_test_data(text):
    """
    Parses a reference trace: page count, frame count, reference string
    length, then the page numbers, all whitespace separated.
    """
    tokens = iter(text.split())
    page_count = _read_int(tokens, "number of pages")
    frame_count = _read_int(tokens, "number of frames")
    refstr_len = _read_int(tokens, "number of entries")
    if refstr_len < 0:
        raise TraceFormatError(f"Negative number of entries: {refstr_len}")

    references = [_read_int(tokens, "reference string") for _ in range(refstr_len)]
    return TestScenario(page_count, frame_count, references)


def load_test_data(filename):
    try:
        with open(filename, 'r') as f:
            text = f.read()
    except OSError as e:
        raise TraceFormatError(f"Cannot open file {filename}") from e
    return parse_test_data(text)
