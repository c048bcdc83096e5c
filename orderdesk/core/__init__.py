# Core building blocks shared by every feature module
from .database import Base, Database, get_db
from .security import hash_password, verify_password, create_access_token, decode_access_token

__all__ = [
    'Base', 'Database', 'get_db',
    'hash_password', 'verify_password', 'create_access_token', 'decode_access_token',
]
