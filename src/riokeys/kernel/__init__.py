"""Pure data models and transforms (no I/O)."""
