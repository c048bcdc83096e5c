"""
Per-user profile records
"""
from .routes import router

__all__ = ["router"]
