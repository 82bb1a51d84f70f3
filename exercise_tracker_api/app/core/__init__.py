"""
Core infrastructure shared by every layer: settings, logging, the
SQLite handle, error types and calendar-date helpers.
"""
