"""Adapters to external collaborators (git)."""
