"""Stashboard - browse, preview and apply git stashes from the terminal."""

__version__ = "0.1.0"
