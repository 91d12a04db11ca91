"""API endpoints package."""

from . import health
from . import requests
from . import tracked_items
from . import dashboard
from . import reports

__all__ = ["health", "requests", "tracked_items", "dashboard", "reports"]
