#!/usr/bin/env python3
"""
Delete an account by id.

Usage:
  python scripts/delete_user.py --id 42 [--yes]
"""
from __future__ import annotations

import argparse
import sys

from accounts.app_factory import create_account_service


def main() -> None:
    ap = argparse.ArgumentParser(description="Delete an account")
    ap.add_argument("--id", type=int, required=True, dest="user_id")
    ap.add_argument("--yes", action="store_true", help="Skip the confirmation prompt")
    args = ap.parse_args()

    service = create_account_service()
    user = service.profiles.get_user(args.user_id)
    if not args.yes:
        answer = input(f"Delete user {user.id} ({user.username})? [y/N] ").strip().lower()
        if answer not in {"y", "yes"}:
            print("Aborted")
            return
    service.profiles.delete(user.id)
    print(f"OK: user {user.id} deleted")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
