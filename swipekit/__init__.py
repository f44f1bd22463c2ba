"""Swipe-keyboard geometry with timers, averages, statistics, text buffers, binary files, locks and queues."""

__version__ = "0.1.0"