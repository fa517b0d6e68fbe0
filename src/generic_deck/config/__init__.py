"""Deck configuration."""
