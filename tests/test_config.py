import logging
from dataclasses import FrozenInstanceError

import pytest

from reftransform.config import DEFAULT_CONFIG, TransformationConfig
from reftransform.utils.logging_utils import setup_logging


def test_default_config():
    assert DEFAULT_CONFIG.metadata_preservation is False
    assert DEFAULT_CONFIG.check_finite is True
    assert DEFAULT_CONFIG.geocentric_max_iterations == 10
    assert DEFAULT_CONFIG.geocentric_tolerance == 1e-12


def test_config_validation():
    with pytest.raises(ValueError):
        TransformationConfig(geocentric_max_iterations=0)
    with pytest.raises(ValueError):
        TransformationConfig(geocentric_tolerance=0.0)


def test_config_is_frozen():
    with pytest.raises(FrozenInstanceError):
        DEFAULT_CONFIG.check_finite = False


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "reftransform.log"
    logger = setup_logging(verbose=False, log_file=str(log_file), logger_name="reftransform.test")
    try:
        assert len(logger.handlers) == 2
        logger.debug("debug message")
        for handler in logger.handlers:
            handler.flush()
        assert "debug message" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


def test_setup_logging_replaces_handlers():
    setup_logging(logger_name="reftransform.test")
    logger = setup_logging(verbose=True, logger_name="reftransform.test")
    try:
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
