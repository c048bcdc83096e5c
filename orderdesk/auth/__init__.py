"""
Signup, login and identity endpoints
"""
from .routes import router

__all__ = ["router"]
