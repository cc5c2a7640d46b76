"""
Tests for logging and database session settings (profitscope/core, profitscope/db).
"""

from loguru import logger

from profitscope.core import logging as app_logging
from profitscope.core.config import settings
from profitscope.db.session import _connect_args


def test_configure_logging_writes_rotating_file(tmp_path, monkeypatch):
    log_dir = tmp_path / "logs"
    monkeypatch.setattr(settings, "LOG_DIR", str(log_dir))

    app_logging.configure_logging("DEBUG")
    logger.info("profitscope logging check")
    logger.complete()
    logger.remove()

    log_file = log_dir / "app.log"
    assert log_file.exists()
    assert "profitscope logging check" in log_file.read_text(encoding="utf-8")


def test_app_imports_with_logging_configured():
    from profitscope.main import app

    assert app.title == settings.APP_NAME


def test_sqlite_connect_args_set_lock_timeout():
    assert _connect_args("sqlite+aiosqlite:///./x.db") == {"timeout": settings.DB_TIMEOUT}
    assert _connect_args("postgresql+asyncpg://u:p@host/db") == {}
