"""View controllers referenced by the bundled view definitions."""
