"""
Delete the given accounts together with their profiles and orders.

Usage: python reset_admins.py <email> [<email> ...]
"""
import sys
import logging

from orderdesk.core.database import Database
from orderdesk.user.crud import delete_user_by_email

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def reset_admins(emails):
    database = Database()
    db = database.session()
    try:
        for email in emails:
            affected = delete_user_by_email(db, email)
            logger.info(f"Deleted user {email} (affected rows: {affected})")
    finally:
        db.close()
        database.dispose()


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print(__doc__.strip())
        sys.exit(2)
    try:
        reset_admins(sys.argv[1:])
    except Exception as e:
        logger.error(f"Error deleting users: {e}")
        sys.exit(1)
