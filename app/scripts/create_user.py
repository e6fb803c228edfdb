"""
Create a user (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD "FULL NAME" [role]
Example:
  python -m app.scripts.create_user admin your-secure-password "Site Admin" admin
"""
import argparse
import logging
import sys

from app.core.database import SessionLocal
from app.services.errors import ServiceError
from app.services.users import create_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Chilaquiles API user.")
    parser.add_argument("username", help="Unique login name")
    parser.add_argument("password", help="Plain-text password (stored as a bcrypt hash)")
    parser.add_argument("full_name", help="Display name")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "admin"])
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        user = create_user(db, args.full_name, args.username.strip(), args.password, args.role)
    except ServiceError as e:
        logger.error("Could not create user '%s': %s", args.username, e.message)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' (id={user.id}) with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
