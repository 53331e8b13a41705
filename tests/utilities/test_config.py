"""
Tests for configuration and logging setup.
"""

import pytest
from pydantic import ValidationError

from api.config import APIConfig
from utilities.config import BookshelfConfig
from utilities.logger import StoreLogger, get_logger, setup_logging
from bookshelf.outcome import Outcome


class TestBookshelfConfig:
    """Test cases for BookshelfConfig."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("BOOK_ID_LENGTH", raising=False)
        cfg = BookshelfConfig(_env_file=None)

        assert cfg.book_id_length == 16
        assert cfg.log_level == "INFO"
        assert cfg.get_log_file_path() is None

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("BOOK_ID_LENGTH", "21")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "CONSOLE")

        cfg = BookshelfConfig(_env_file=None)

        assert cfg.book_id_length == 21
        assert cfg.log_level == "DEBUG"
        assert cfg.log_format == "console"

    @pytest.mark.parametrize("field,value", [
        ("book_id_length", 4),
        ("book_id_length", 100),
        ("log_level", "LOUD"),
        ("log_format", "xml"),
    ])
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError):
            BookshelfConfig(_env_file=None, **{field: value})

    def test_log_file_path(self, tmp_path):
        cfg = BookshelfConfig(_env_file=None, log_file=str(tmp_path / "bookshelf.log"))
        assert cfg.get_log_file_path() == tmp_path / "bookshelf.log"


def test_api_config_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    cfg = APIConfig(_env_file=None)

    assert cfg.port == 9000
    assert cfg.api_title == "Bookshelf API"


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "bookshelf.log"

    setup_logging(log_level="INFO", log_format="json", log_file=log_file)
    get_logger("tests").info("hello")

    assert log_file.exists()


def test_store_logger_bind_returns_new_logger():
    base = StoreLogger().bind_context(service="Bookshelf API")
    bound = base.bind_context(request_id="abc")

    assert base.context == {"service": "Bookshelf API"}
    assert bound.context == {"service": "Bookshelf API", "request_id": "abc"}

    bound.log_outcome("get", Outcome.not_found("Book not found"), book_id="x")


def test_app_store_logger_carries_service_name():
    from api.main import create_app

    app = create_app(api_config=APIConfig(_env_file=None, api_title="Test Shelf"))

    assert app.state.book_store.logger.context == {"service": "Test Shelf"}
