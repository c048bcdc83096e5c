"""
Authenticated profile and order backend.
"""
