"""
Application package initializer.

The project is split into a small number of layers: ``core`` holds
configuration, logging, storage and error plumbing, ``services``
holds the user registry and exercise log, ``schemas`` defines the
JSON shapes and ``api`` maps HTTP routes onto the services.
"""

from .main import app  # noqa: F401
