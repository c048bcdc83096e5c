"""
Print the most recently created user and its profile.
"""
import sys
import json
import logging

from orderdesk.core.database import Database
from orderdesk.profile.crud import get_profile
from orderdesk.core.exceptions import NotFoundError
from orderdesk.user.crud import get_latest_user

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def check_last_user():
    database = Database()
    db = database.session()
    try:
        user = get_latest_user(db)
        print("--- LATEST USER ---")
        if user is None:
            print("No users found")
            return

        print(json.dumps({
            "id": user.id,
            "email": user.email,
            "created_at": user.created_at.isoformat() if user.created_at else None,
        }, indent=2))

        print("\n--- PROFILE FOR USER ---")
        try:
            print(json.dumps(get_profile(db, user.id), indent=2))
        except NotFoundError:
            print("No profile found")
    finally:
        db.close()
        database.dispose()


if __name__ == "__main__":
    try:
        check_last_user()
    except Exception as e:
        logger.error(f"Error checking last user: {e}")
        sys.exit(1)
