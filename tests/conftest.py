from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def db_url(monkeypatch, tmp_path) -> str:
    from backend.app.core.settings import settings

    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("ALEMBIC_DATABASE_URL", raising=False)
    url = f"sqlite:///{tmp_path / 'categories_test.db'}"
    monkeypatch.setattr(settings, "DATABASE_URL", url)
    return url


@pytest.fixture
def baseline_engine(db_url) -> Iterator[Engine]:
    """Engine on a database migrated to the case-sensitive baseline schema."""
    from backend.app.db.migrations import run_migrations

    run_migrations("0001_baseline")
    engine = create_engine(db_url)
    yield engine
    engine.dispose()
