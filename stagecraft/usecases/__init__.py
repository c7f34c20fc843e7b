"""Use-case layer for view resolution and window lifecycle.

Each module coordinates domain objects and ports without touching the
windowing toolkit directly.
"""
