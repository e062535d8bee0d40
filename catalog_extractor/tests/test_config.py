import logging
from logging.handlers import RotatingFileHandler

from catalog_extractor.config import Settings
from catalog_extractor.extraction.catalog_parser import CatalogParser
from catalog_extractor.utils import logger as logger_module
from catalog_extractor.utils.logger import setup_logger


def test_settings_read_prefixed_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("CATALOG_MAX_COMPETENCY_UNITS", "8")
    monkeypatch.setenv("CATALOG_LOGS_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("CATALOG_LOG_TO_FILE", "true")

    settings = Settings()

    assert settings.cu_range == (1, 8)
    assert (tmp_path / "logs").is_dir()


def test_parser_uses_configured_cu_range(monkeypatch):
    monkeypatch.setenv("CATALOG_MAX_COMPETENCY_UNITS", "3")
    parser = CatalogParser(settings=Settings())

    assert parser.mapping_extractor.extract_cu_map("C100 4 Statistics\nC200 3 Writing\n") == {"C200": 3}


def test_setup_logger_does_not_duplicate_handlers():
    setup_logger("catalog_test")
    logger = setup_logger("catalog_test")

    assert isinstance(logger, logging.Logger)
    assert len(logger.handlers) == 1


def test_parser_settings_reach_extractor_loggers(monkeypatch, tmp_path):
    monkeypatch.setattr(logger_module, "settings", logger_module.settings)
    settings = Settings(LOG_TO_FILE=True, LOGS_DIR=tmp_path / "logs", LOG_LEVEL="WARNING")

    parser = CatalogParser(settings=settings)

    for logger in (parser.logger, parser.mapping_extractor.logger):
        assert logger.level == logging.WARNING
        assert any(isinstance(handler, RotatingFileHandler) for handler in logger.handlers)
    assert (tmp_path / "logs" / "catalog_parser.log").exists()


def test_default_directories_follow_working_directory():
    settings = Settings()
    assert settings.LOGS_DIR == settings.BASE_DIR / "logs"
    assert "site-packages" not in str(settings.BASE_DIR)
