"""Shared constants grouped by subsystem."""
