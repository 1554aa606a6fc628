import configparser
import logging.config

import pytest
from alembic import command

from backend.app.db.migrations import ALEMBIC_INI, _alembic_config


@pytest.fixture
def file_config_calls(monkeypatch):
    calls = []

    def record(fname, *args, **kwargs):
        calls.append((fname, kwargs))

    monkeypatch.setattr(logging.config, "fileConfig", record)
    return calls


def test_env_skips_file_config_when_logger_configured_by_caller(db_url, file_config_calls):
    command.upgrade(_alembic_config(), "0001_baseline")

    assert file_config_calls == []


def test_env_applies_file_config_when_enabled(db_url, file_config_calls):
    cfg = _alembic_config()
    cfg.attributes["configure_logger"] = True

    command.upgrade(cfg, "0001_baseline")

    assert file_config_calls == [
        (str(ALEMBIC_INI), {"disable_existing_loggers": False})
    ]


def test_env_prefers_alembic_database_url(db_url, tmp_path, monkeypatch):
    override = tmp_path / "override.db"
    monkeypatch.setenv("ALEMBIC_DATABASE_URL", f"sqlite:///{override}")

    command.upgrade(_alembic_config(), "0001_baseline")

    assert override.exists()
    assert not (tmp_path / "categories_test.db").exists()


def test_env_renders_baseline_offline(db_url, capsys):
    command.upgrade(_alembic_config(), "0001_baseline", sql=True)

    out = capsys.readouterr().out
    assert "CREATE TABLE categories" in out
    assert "CREATE UNIQUE INDEX unique_index_categories_on_slug" in out


def _read_ini():
    parser = configparser.ConfigParser(interpolation=None)
    parser.read(ALEMBIC_INI)
    return parser


def test_alembic_ini_points_at_backend_scripts():
    assert _read_ini()["alembic"]["script_location"] == "%(here)s/backend/alembic"


def test_alembic_ini_routes_project_logs_to_console():
    section = _read_ini()["logger_backend"]

    assert section["qualname"] == "backend.app"
    assert section["handlers"] == "console"
    assert section["level"] == "INFO"
    assert section["propagate"] == "0"
