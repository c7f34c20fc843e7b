"""Application composition layer for the Tkinter shell.

Modules in this package wire the window host, view cache, and use cases
into the process-wide :class:`~stagecraft.app.view_manager.ViewManager`
and the ``stagecraft`` entry point.
"""
