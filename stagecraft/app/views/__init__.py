"""Tk-only presentation helpers shared by host windows."""
