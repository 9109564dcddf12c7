"""Settings: database URL assembly and CLI entry point."""

from click.testing import CliRunner

from inventory_service import cli
from inventory_service.config import Settings, get_settings


def test_database_url_assembled_from_parts():
    settings = Settings(
        database_url=None, db_host="pg", db_port=6543,
        db_user="u", db_password="p@ss", db_name="stock",
    )
    url = settings.resolved_database_url
    assert url.startswith("postgresql+asyncpg://u:")
    assert url.endswith("@pg:6543/stock")


def test_explicit_database_url_wins():
    settings = Settings(database_url="sqlite+aiosqlite:///x.db", db_host="ignored")
    assert settings.resolved_database_url == "sqlite+aiosqlite:///x.db"


def test_plain_postgres_url_upgraded_to_asyncpg():
    settings = Settings(database_url="postgresql://a:b@h/d")
    assert settings.resolved_database_url == "postgresql+asyncpg://a:b@h/d"


def test_cli_requires_host_port_cache():
    result = CliRunner().invoke(cli.main, [])
    assert result.exit_code != 0
    assert "Missing option" in result.output


def test_cli_passes_options_to_uvicorn(monkeypatch, tmp_path):
    calls = {}

    def _fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(cli.uvicorn, "run", _fake_run)
    # registered so the values the CLI writes are undone after the test
    for var in ("HOST", "PORT", "CACHE_DIR"):
        monkeypatch.setenv(var, "placeholder")

    result = CliRunner().invoke(
        cli.main, ["-h", "0.0.0.0", "-p", "8080", "-c", str(tmp_path / "cache")],
    )

    assert result.exit_code == 0, result.output
    assert calls["app"] == "inventory_service.main:app"
    assert calls["host"] == "0.0.0.0"
    assert calls["port"] == 8080
    assert get_settings().cache_dir == tmp_path / "cache"
    get_settings.cache_clear()
