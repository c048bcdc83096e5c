"""
Unscoped listings across all users
"""
from .routes import router

__all__ = ["router"]
