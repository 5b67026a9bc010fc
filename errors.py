class PageTableError(Exception):
    pass


class InvalidParameterError(PageTableError, ValueError):
    pass


class PageOutOfRangeError(PageTableError, IndexError):
    pass


class TableDestroyedError(PageTableError, RuntimeError):
    pass


class InvariantViolation(PageTableError, RuntimeError):
    pass


class QueueFullError(InvariantViolation):
    pass


class QueueExhaustedError(InvariantViolation):
    pass


class TraceFormatError(ValueError):
    pass
