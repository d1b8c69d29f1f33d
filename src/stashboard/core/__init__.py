"""Core state machines, independent of the UI toolkit."""
