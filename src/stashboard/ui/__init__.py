"""Textual user interface for Stashboard."""
