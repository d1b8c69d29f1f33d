"""UI helper utilities."""
