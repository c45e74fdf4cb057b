"""Adapters - Implementations of the library ports."""
