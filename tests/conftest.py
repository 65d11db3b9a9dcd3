import logging
import os

import pytest
import structlog

from fleet_factory.config.manager import ENV_OVERRIDES, ENV_PREFIX
from fleet_factory.infrastructure.registry import create_vehicle_registry


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults so captured logs are not affected by other tests."""
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove FLEET_FACTORY_* overrides leaking from the outer environment."""
    for suffix in ENV_OVERRIDES:
        monkeypatch.delenv(f"{ENV_PREFIX}{suffix}", raising=False)


@pytest.fixture
def restore_root_logger():
    """Swap handlers installed by logging setup tests back to the originals."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def vehicle_registry():
    return create_vehicle_registry()


@pytest.fixture
def config_file(tmp_path):
    """Write a JSON configuration file and return its path."""
    def _write(content: str) -> str:
        path = tmp_path / "fleet_factory.json"
        path.write_text(content, encoding="utf-8")
        return os.fspath(path)
    return _write
