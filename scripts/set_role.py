#!/usr/bin/env python3
"""Grant or revoke a role for an existing account.

Usage:
  python scripts/set_role.py alice@example.com admin
  python scripts/set_role.py alice@example.com user
"""
from __future__ import annotations

import argparse
import asyncio
import sys

from keuzekompas.core.config import get_settings
from keuzekompas.core.logging import configure_logging
from keuzekompas.db import mongo
from keuzekompas.features.users.repository import user_repository

ROLES = ("user", "admin")


async def _run(email: str, role: str) -> int:
    try:
        doc = await user_repository.set_role(email, role)
    finally:
        mongo.close_client()
    if doc is None:
        print(f"No user with email {email}")
        return 1
    print(f"{doc['email']} is now {doc['role']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    p.add_argument("email")
    p.add_argument("role", choices=ROLES)
    args = p.parse_args(argv)
    configure_logging(get_settings().log_level)
    return asyncio.run(_run(args.email, args.role))


if __name__ == "__main__":
    sys.exit(main())
