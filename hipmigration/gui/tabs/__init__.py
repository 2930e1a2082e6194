"""Tabs of the measurement window."""
