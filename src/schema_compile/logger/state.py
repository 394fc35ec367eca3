"""Logger state for the schema-compile logging system.

Holds the one piece of process-wide state the logging system needs: whether
the package root logger has been wired to its QueueListener yet.
"""

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import queue
    from logging.handlers import QueueListener


class _LoggerState:
    """Container for logger state (avoids module-level mutable globals).

    Attributes:
        lock: Thread lock for root logger initialization
        root_initialized: Whether the root logger has been set up
        queue_listener: Background thread processing log records
        log_queue: Queue feeding the listener

    """

    def __init__(self) -> None:
        """Initialize logger state."""
        self.lock = threading.Lock()
        self.root_initialized = False
        self.queue_listener: QueueListener | None = None
        self.log_queue: queue.Queue | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Return the logger state instance."""
    return _state
