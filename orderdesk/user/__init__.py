"""
User accounts: model and data access
"""
