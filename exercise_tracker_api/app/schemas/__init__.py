"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage rows so that the wire format
(``_id`` keys, calendar-date strings) stays independent of column
names.
"""
