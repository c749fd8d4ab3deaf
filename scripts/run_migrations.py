#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py --sql      # print SQL instead of running it
    python scripts/run_migrations.py --revision 3f1c2a9d7b10
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from remark.config import Settings
from remark.util.observability import configure_logfire


def main() -> int:
    parser = argparse.ArgumentParser(description="Apply database migrations")
    parser.add_argument("--revision", default="head", help="Target revision")
    parser.add_argument(
        "--sql", action="store_true", help="Emit SQL without touching the database"
    )
    args = parser.parse_args()

    configure_logfire(Settings())

    with logfire.span("run_migrations", revision=args.revision, offline=args.sql):
        try:
            command.upgrade(Config("alembic.ini"), args.revision, sql=args.sql)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Fail loudly so the app never starts on a broken schema
            raise

    logfire.info("Database migrations completed", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
