"""Shared helpers: logging, errors, caching and field parsing."""
