"""
Create a user from the command line and print its bearer token. Run from project root:
  python -m postapi.scripts.create_user USERNAME PASSWORD
Example:
  python -m postapi.scripts.create_user alice your-secure-password
"""
import argparse
import logging
import sys

from postapi.core.database import SessionLocal, init_db
from postapi.core.errors import AlreadyExists, InvalidInput
from postapi.services import users

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a PostAPI user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password")
    args = parser.parse_args(argv)

    username = args.username.strip()
    if len(username) > 255:
        print("Invalid username length.", file=sys.stderr)
        return 1

    init_db()
    db = SessionLocal()
    try:
        token = users.register(db, username, args.password)
    except InvalidInput as e:
        print(e.message, file=sys.stderr)
        return 1
    except AlreadyExists:
        print(f"User '{username}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f"Created user '{username}'.")
    print(f"Token: {token}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
