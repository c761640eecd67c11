"""Thin Lambda handlers for the dashboard HTTP API."""
