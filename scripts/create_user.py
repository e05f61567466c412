#!/usr/bin/env python3
"""
Register a new account directly in the database.

Usage:
  python scripts/create_user.py --username alice --email alice@example.com --password secret [--role admin] [--role user]
"""
from __future__ import annotations

import argparse
import getpass
import sys

from accounts.app_factory import create_account_service


def main() -> None:
    ap = argparse.ArgumentParser(description="Register a new account")
    ap.add_argument("--username", required=True)
    ap.add_argument("--email", required=True)
    ap.add_argument("--password", help="Plain password (prompted when omitted)")
    ap.add_argument("--role", action="append", dest="roles", help="Requested role; repeatable (default: user)")
    args = ap.parse_args()

    password = args.password or getpass.getpass("Password: ")
    service = create_account_service()
    user = service.registration.register(args.username, args.email, password, args.roles)
    print("OK: user registered")
    print(f"  ID: {user.id}")
    print(f"  Username: {user.username}")
    print(f"  Email: {user.email}")
    print(f"  Roles: {', '.join(sorted(user.role_names))}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
