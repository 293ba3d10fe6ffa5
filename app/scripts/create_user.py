"""
Create a user without going through the HTTP API. Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m app.scripts.create_user budi your-secure-password petugas_keuangan
"""
import argparse
import logging
import sys

from app.core.config import settings
from app.core.database import SessionLocal
from app.core.errors import DuplicateUsername
from app.core.roles import Role
from app.schemas.auth import RegisterRequest
from app.services.auth import register_user

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Keuangan API user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.PETUGAS_KEUANGAN.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > 255:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > 128:
        print("Password must be 1-128 characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        register_user(
            db,
            RegisterRequest(
                nama_pengguna=username,
                kata_sandi=args.password,
                peran_pengguna=Role(args.role),
            ),
        )
    except DuplicateUsername:
        print(f"User '{username}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{username}' with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
