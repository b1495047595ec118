"""Runnable demonstrations of thread synchronisation primitives and a nested-list tensor axis swap."""

__version__ = "0.1.0"
__all__ = ["atomics", "locks", "producer_consumer", "tensor"]