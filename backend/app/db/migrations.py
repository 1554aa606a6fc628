from __future__ import annotations

import logging
from pathlib import Path

from alembic import command, config as alembic_config
from sqlalchemy.engine import Connection

from ..core.log import configure_logging
from ..core.settings import settings

logger = logging.getLogger(__name__)

ALEMBIC_INI = Path(__file__).resolve().parents[3] / "alembic.ini"


def _alembic_config(connection: Connection | None = None) -> alembic_config.Config:
    cfg = alembic_config.Config(str(ALEMBIC_INI))
    cfg.attributes["configure_logger"] = False
    if connection is not None:
        cfg.attributes["connection"] = connection
    if settings.DATABASE_URL:
        cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
    return cfg


def run_migrations(revision: str = "head", connection: Connection | None = None) -> None:
    """Run Alembic migrations up to ``revision`` (latest by default)."""
    configure_logging()
    logger.info("upgrading database to %s", revision)
    command.upgrade(_alembic_config(connection), revision)


def downgrade_migrations(revision: str, connection: Connection | None = None) -> None:
    """Revert Alembic migrations down to ``revision``."""
    configure_logging()
    logger.info("downgrading database to %s", revision)
    command.downgrade(_alembic_config(connection), revision)


__all__ = ["run_migrations", "downgrade_migrations", "ALEMBIC_INI"]
