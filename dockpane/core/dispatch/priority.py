from enum import IntEnum


class DispatcherPriority(IntEnum):
    """
    Priority lanes of the UI dispatch queue.

    Higher values run first. Layout and rendering work (LOADED, RENDER)
    outranks INPUT, so deferred input follow-ups run after pending layout.
    """
    INACTIVE = 0
    SYSTEM_IDLE = 1
    APPLICATION_IDLE = 2
    CONTEXT_IDLE = 3
    BACKGROUND = 4
    INPUT = 5
    LOADED = 6
    RENDER = 7
    DATA_BIND = 8
    NORMAL = 9
    SEND = 10

    @classmethod
    def parse(cls, value) -> "DispatcherPriority":
        """Accept a member, its int value or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls[value.strip().upper()]
        return cls(value)


class OperationStatus(IntEnum):
    PENDING = 0
    COMPLETED = 1
    ABORTED = 2
    FAILED = 3
