#!/usr/bin/env python3
"""List every account with its roles."""
from __future__ import annotations

import sys

from accounts.app_factory import create_account_service


def main() -> None:
    service = create_account_service()
    for user in service.profiles.list_users():
        roles = ",".join(sorted(user.role_names))
        print(f"{user.id}\t{user.username}\t{user.email}\t{roles}\t{user.created_at.isoformat()}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
