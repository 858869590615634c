"""Adapters layer - Concrete implementations of the ports."""
