"""Shared visual theme for windows opened by the view manager.

Views are built from definitions with plain ttk widgets, so styling lives
here rather than in each definition.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

BACKGROUND = "#f3f5f9"
SURFACE = "#ffffff"
BORDER = "#d9dfeb"
ACCENT = "#2457ff"
TEXT = "#1f2937"


def apply_modern_theme(root: tk.Misc) -> None:
    """Apply the ttk style set to every window of the Tk interpreter.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    # Toplevels do not inherit ttk styles.
    root.option_add("*Toplevel.background", BACKGROUND)

    style.configure(".", background=BACKGROUND, foreground=TEXT)
    style.configure("TFrame", background=BACKGROUND)
    style.configure("TLabel", background=BACKGROUND, foreground=TEXT)
    style.configure("TButton", padding=(10, 6), background=SURFACE, bordercolor=BORDER, relief="flat")
    style.map("TButton", background=[("active", "#edf2ff"), ("pressed", ACCENT)])
    style.configure("TEntry", fieldbackground=SURFACE, bordercolor=BORDER)


__all__ = ["apply_modern_theme"]
