# API Endpoints Package
"""
API endpoints for the Daily Pulse service
"""

from . import business
from . import dashboard
from . import entries
from . import settings

__all__ = ["business", "dashboard", "entries", "settings"]
