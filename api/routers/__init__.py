"""
Router package for the Exercise Tracker API.

This package contains all API routers organized by domain:
- health: Health check endpoint
- users: Users, exercises and exercise logs
"""

from api.routers.health import router as health_router
from api.routers.users import router as users_router

__all__ = [
    "health_router",
    "users_router",
]
