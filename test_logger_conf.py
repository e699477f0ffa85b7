import logging

import pytest

from logger_conf import ROOT_LOGGER, configure_logging, get_logger


@pytest.fixture
def restore_logging():
    yield
    configure_logging()


def test_module_loggers_share_project_handlers(restore_logging, tmp_path):
    log_file = tmp_path / "app.log"
    configure_logging(level="WARNING", log_file=str(log_file))

    get_logger("tmdb_client").debug("detalhe da falha")
    for handler in logging.getLogger(ROOT_LOGGER).handlers:
        handler.flush()

    assert get_logger("tmdb_client").name == "movie_discovery.tmdb_client"
    assert "detalhe da falha" in log_file.read_text(encoding="utf-8")


def test_reconfigure_replaces_handlers(restore_logging, tmp_path):
    configure_logging(level="INFO", log_file=str(tmp_path / "a.log"))
    root = configure_logging(level="DEBUG", log_file=str(tmp_path / "b.log"))

    assert len(root.handlers) == 2
    console = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]
    assert console[0].level == logging.DEBUG


def test_file_handler_can_be_disabled(restore_logging):
    root = configure_logging(level="INFO", log_file=None)
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
