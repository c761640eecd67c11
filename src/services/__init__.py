"""Aggregation, health reduction and the dashboard service.

Handlers import services lazily so HTTP clients are not built at import time.
"""
