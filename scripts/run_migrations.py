#!/usr/bin/env python3
"""Apply Alembic migrations to the gallery database.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f0b7d92a4
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from gallery.config import Settings
from gallery.util.logging import setup_logging
from gallery.util.observability import configure_logfire

ROOT = Path(__file__).resolve().parent.parent


def build_alembic_config(settings: Settings) -> Config:
    """Alembic config pointing at this repo's migrations and the configured database."""
    alembic_cfg = Config(str(ROOT / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(ROOT / "migrations"))
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)
    return alembic_cfg


def main(argv: list[str]) -> int:
    """Upgrade the schema, logging failures to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    revision = argv[0] if argv else "head"

    with logfire.span("migrations.upgrade", revision=revision):
        try:
            command.upgrade(build_alembic_config(settings), revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Container must not start on a broken schema
            raise

    logfire.info("Database migrations applied", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
