#!/usr/bin/env python3
"""Apply or roll back the database schema.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py --downgrade base
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from blog.config import Settings
from blog.util.observability import configure_logfire


def main() -> int:
    parser = argparse.ArgumentParser(description="Run blog schema migrations")
    direction = parser.add_mutually_exclusive_group()
    direction.add_argument("--upgrade", metavar="REVISION", default="head")
    direction.add_argument("--downgrade", metavar="REVISION")
    args = parser.parse_args()

    configure_logfire(Settings())
    alembic_cfg = Config("alembic.ini")

    with logfire.span("run_migrations"):
        try:
            if args.downgrade:
                logfire.info("Downgrading schema", revision=args.downgrade)
                command.downgrade(alembic_cfg, args.downgrade)
            else:
                logfire.info("Upgrading schema", revision=args.upgrade)
                command.upgrade(alembic_cfg, args.upgrade)
        except Exception:
            # Re-raised so the process exits non-zero
            logfire.exception("Migration failed")
            raise

    logfire.info("Migrations finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
