"""Per-thread names that can be looked up cheaply from the running thread."""

from __future__ import annotations

import threading
from typing import Optional

CAPTURE_THREAD = "CaptureThread"
PLAYOUT_THREAD = "PlayoutThread"
PROCESS_THREAD = "ProcessThread"
TRACE_THREAD = "Trace"

_local = threading.local()


def register_thread(name: str) -> None:
    """Name the current thread and remember the name thread-locally."""
    _local.name = name
    threading.current_thread().name = name


def current_thread_name() -> Optional[str]:
    """Return the name registered on this thread, or None."""
    return getattr(_local, "name", None)