#!/usr/bin/env python3
"""Mint a JWT for a user ID, for local development against the API.

Usage:
    python scripts/issue_token.py 6f1d7f0e-3c2b-4a8e-9d3e-1f2a3b4c5d6e
    python scripts/issue_token.py --new
"""

import argparse
import sys
from uuid import UUID, uuid4

from remark.config import Settings
from remark.util.jwt import create_token


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("user_id", nargs="?", help="User UUID to put in the token")
    group.add_argument("--new", action="store_true", help="Use a random user UUID")
    args = parser.parse_args()

    if args.new:
        user_id = uuid4()
    else:
        try:
            user_id = UUID(args.user_id)
        except ValueError:
            parser.error(f"not a UUID: {args.user_id}")

    settings = Settings()
    if settings.environment == "production":
        parser.error("refusing to mint tokens in production")

    print(f"user_id: {user_id}", file=sys.stderr)
    print(create_token(str(user_id), settings.auth))
    return 0


if __name__ == "__main__":
    sys.exit(main())
