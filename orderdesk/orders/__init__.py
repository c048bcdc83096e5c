"""
Order placement, listing and time-windowed cancellation
"""
from .routes import router

__all__ = ["router"]
