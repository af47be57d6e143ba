"""
Application package initializer.

The project is organised by layer: ``core`` holds configuration,
logging, database access and security helpers; ``repositories`` wrap
the SQL for each table; ``services`` hold the business logic; and
``api/v1/endpoints`` exposes the services over HTTP.
"""

from .main import app  # noqa: F401
