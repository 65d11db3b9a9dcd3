"""Tests for structured logging setup."""
import json
import logging
import os
from logging.handlers import RotatingFileHandler
from unittest.mock import patch

import pytest
import structlog

from fleet_factory.config.schemas import LoggingConfig
from fleet_factory.domain.base.exceptions import UnknownTypeError
from fleet_factory.infrastructure.logging import get_logger, setup_logging
from fleet_factory.infrastructure.registry import create_vehicle_registry


def test_stdout_destination_installs_stream_handler(restore_root_logger):
    setup_logging(LoggingConfig(destination="stdout", level="WARNING"))

    handlers = restore_root_logger.handlers
    assert len(handlers) == 1
    assert type(handlers[0]) is logging.StreamHandler
    assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)
    assert restore_root_logger.level == logging.WARNING


def test_both_destination_installs_file_and_stream(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "fleet.log"

    setup_logging(LoggingConfig(destination="both", file_path=str(log_file)))

    handler_types = {type(handler) for handler in restore_root_logger.handlers}
    assert handler_types == {logging.StreamHandler, RotatingFileHandler}
    assert log_file.parent.is_dir()


def test_json_file_output(restore_root_logger, tmp_path):
    log_file = tmp_path / "fleet.log"
    setup_logging(LoggingConfig(destination="file", format="json", file_path=str(log_file)))

    get_logger("fleet_factory.tests").info("Fleet ready", vehicles=2)
    for handler in restore_root_logger.handlers:
        handler.flush()

    record = json.loads(log_file.read_text(encoding="utf-8").strip().splitlines()[-1])
    assert record["event"] == "Fleet ready"
    assert record["vehicles"] == 2
    assert record["level"] == "info"
    assert record["logger"] == "fleet_factory.tests"


def test_level_filters_records(restore_root_logger, tmp_path):
    log_file = tmp_path / "fleet.log"
    setup_logging(LoggingConfig(destination="file", level="ERROR", file_path=str(log_file)))

    logger = get_logger("fleet_factory.tests")
    logger.info("hidden")
    logger.error("shown")
    for handler in restore_root_logger.handlers:
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "shown" in content
    assert "hidden" not in content


def test_setup_logging_defaults(restore_root_logger):
    logger = setup_logging()
    assert logger is not None
    assert restore_root_logger.level == logging.INFO


def test_setup_logging_reads_environment_overrides(restore_root_logger):
    with patch.dict(os.environ, {"FLEET_FACTORY_LOG_LEVEL": "ERROR"}):
        setup_logging()

    assert restore_root_logger.level == logging.ERROR


def test_registry_writes_nothing_to_stdout_without_setup(capsys):
    registry = create_vehicle_registry()
    registry.create("car")
    with pytest.raises(UnknownTypeError):
        registry.create("plane")

    assert capsys.readouterr().out == ""


def test_get_logger_defers_to_stdlib_levels(capsys):
    stdlib_logger = logging.getLogger("fleet_factory.tests.quiet")
    stdlib_logger.setLevel(logging.ERROR)
    try:
        get_logger("fleet_factory.tests.quiet").warning("Should be filtered")
    finally:
        stdlib_logger.setLevel(logging.NOTSET)

    assert "Should be filtered" not in capsys.readouterr().out
