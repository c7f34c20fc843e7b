"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports: the Tk window host,
    the in-memory host double, the view cache, view-definition sources and
    the XML loader, plus local settings storage.

Dependencies:
    Individual submodules depend on ``tkinter``, ``requests``, the
    filesystem, and domain protocol definitions.

Call context:
    Imported by app composition modules (for runtime wiring) and by tests.
"""
