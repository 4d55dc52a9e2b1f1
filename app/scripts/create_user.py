"""
Create a verified account (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user "Site Admin" admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from app.core.database import SessionLocal
from app.core.exceptions import AppError
from app.models.user import ROLES
from app.services.accounts import create_account

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a Backlinkse account that can log in immediately.")
    parser.add_argument("name", help="Display name (2-50 chars)")
    parser.add_argument("email", help="Login email")
    parser.add_argument("password", help="Password (6-128 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=list(ROLES))
    args = parser.parse_args()

    db = SessionLocal()
    try:
        user = create_account(
            db,
            name=args.name,
            email=args.email,
            password=args.password,
            role=args.role,
            is_verified=True,
        )
    except AppError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    logger.info("Created user '%s' with role '%s'.", user.email, user.role)
    return 0


if __name__ == "__main__":
    sys.exit(main())
