#!/usr/bin/env python3
"""
Create a user directly in the database, bypassing the HTTP API.

Usage:
  python scripts/add_user.py --name "John Doe" --email john@example.com [--age 30]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Make the package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pydantic import ValidationError  # noqa: E402

from crud_api.core.config import get_settings  # noqa: E402
from crud_api.core.errors import describe_validation_errors  # noqa: E402
from crud_api.db.session import Database  # noqa: E402
from crud_api.domain.users import UserCreate  # noqa: E402
from crud_api.repositories import UserRepository  # noqa: E402
from crud_api.services.user_service import DuplicateEmailError, UserService  # noqa: E402


def main(argv: list[str] | None = None, database: Database | None = None) -> None:
    ap = argparse.ArgumentParser(description="Create a user in the database")
    ap.add_argument("--name", required=True, help="Full name")
    ap.add_argument("--email", required=True, help="Email (must be unique)")
    ap.add_argument("--age", type=int, help="Optional age")
    args = ap.parse_args(argv)

    try:
        data = UserCreate(name=args.name, email=args.email, age=args.age)
    except ValidationError as exc:
        raise SystemExit(f"Invalid input: {describe_validation_errors(exc.errors())}") from exc

    db = database or Database.from_settings(get_settings())
    svc = UserService(UserRepository(db))
    try:
        user = svc.create_user(data)
    except DuplicateEmailError as exc:
        raise SystemExit(f"Email '{exc.email}' is already in use") from exc
    finally:
        if database is None:
            db.dispose()

    print("OK: user created")
    print(f"  ID: {user.id}")
    print(f"  Name: {user.name}")
    print(f"  Email: {user.email}")
    if user.age is not None:
        print(f"  Age: {user.age}")


if __name__ == "__main__":
    try:
        main()
    except SystemExit:
        raise
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
