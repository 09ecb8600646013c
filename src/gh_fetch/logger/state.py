"""Process-wide logging state shared by the logger modules."""

import queue
import threading
from dataclasses import dataclass, field
from logging.handlers import QueueListener


@dataclass
class _LoggerState:
    """What setup_logging() has built so far.

    ``lock`` guards the one-time creation of the ``gh_fetch`` root logger.
    ``config_applied`` flips once settings.conf levels reach the handlers.
    """

    lock: threading.Lock = field(default_factory=threading.Lock)
    root_initialized: bool = False
    config_applied: bool = False
    queue_listener: QueueListener | None = None
    log_queue: queue.Queue | None = None


_state = _LoggerState()


def get_state() -> _LoggerState:
    """Return the process-wide logger state."""
    return _state
