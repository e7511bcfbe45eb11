"""
Application package.

Each entity (cars, places, reservations, rides) is split into a
schema, a repository, a service and a router under ``api/endpoints``.
"""

from .main import app  # noqa: F401
