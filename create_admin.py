"""
Recreate an administrator account with a fresh password and profile.

Usage: python create_admin.py <email> <password>
"""
import sys
import logging

from orderdesk.core.database import Database
from orderdesk.core.schema import ensure_schema
from orderdesk.user.crud import create_user_with_profile, delete_user_by_email

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_admin(email: str, password: str):
    database = Database()
    ensure_schema(database)
    db = database.session()
    try:
        if delete_user_by_email(db, email):
            logger.info(f"Cleaned up existing user {email}")

        user = create_user_with_profile(db, email, password, {"full_name": "Admin User"})
        logger.info(f"Created admin user {user.id} with profile {user.profile.referral_id}")
    finally:
        db.close()
        database.dispose()


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print(__doc__.strip())
        sys.exit(2)
    try:
        create_admin(sys.argv[1], sys.argv[2])
    except Exception as e:
        logger.error(f"Error creating admin: {e}")
        sys.exit(1)
