"""Core deck containers."""
