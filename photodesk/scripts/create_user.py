"""
Create a user in the SQL database (e.g. the first admin). Run from project root:
  python -m photodesk.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m photodesk.scripts.create_user admin admin@example.com your-secure-password admin
"""
import argparse
import sys

from photodesk.core.database import session_scope
from photodesk.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
    hash_password,
)
from photodesk.schemas.users import UserCreate
from photodesk.storage.sql import SqlStorage


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a PhotoDesk user in the database.")
    parser.add_argument("username", help=f"Username ({USERNAME_MIN_LEN}-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default="photographer",
        choices=["admin", "photographer", "assistant"],
    )
    args = parser.parse_args()

    username = args.username.strip()
    email = args.email.strip()
    if not USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if "@" not in email:
        print("Invalid email address.", file=sys.stderr)
        return 1
    if not PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN:
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    with session_scope() as db:
        store = SqlStorage(db)
        if store.get_user_by_username(username) is not None:
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        if store.get_user_by_email(email) is not None:
            print(f"Email '{email}' is already registered.", file=sys.stderr)
            return 1
        user = store.create_user(
            UserCreate(
                username=username,
                email=email,
                password_hash=hash_password(args.password),
                role=args.role,
            )
        )
    print(f"Created user '{user.username}' (id={user.id}) with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
