"""
API package containing the HTTP routes.

The top-level ``router`` in ``router.py`` bundles the endpoint
modules and is mounted under ``/api`` by ``create_app``.
"""
