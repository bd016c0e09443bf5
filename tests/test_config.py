"""Tests for configuration constants, presets and logging setup."""

import logging
import math

import pytest

from geotiles.config import (
    COARSE,
    FINE,
    MAX_HEX_SIZE,
    MEDIUM,
    MIN_HEX_SIZE,
    PRECISION,
    QUANTUM,
    HexasphereConfig,
    clamp_hex_size,
    validate_build_arguments,
)
from geotiles.logging_config import setup_logging


class TestConstants:
    def test_precision(self):
        assert PRECISION == 3
        assert QUANTUM == 1000

    def test_hex_size_bounds(self):
        assert (MIN_HEX_SIZE, MAX_HEX_SIZE) == (0.01, 1.0)

    @pytest.mark.parametrize("value, expected", [
        (0.5, 0.5),
        (1.0, 1.0),
        (1.5, 1.0),
        (0.0, 0.01),
        (-3.0, 0.01),
    ])
    def test_clamp_hex_size(self, value, expected):
        assert clamp_hex_size(value) == expected


class TestHexasphereConfig:
    def test_defaults(self):
        config = HexasphereConfig()
        assert (config.radius, config.subdivisions, config.hex_size) == (1.0, 2, 1.0)
        assert config.frequency == 4

    def test_presets(self):
        assert COARSE.subdivisions < MEDIUM.subdivisions < FINE.subdivisions
        assert FINE.frequency == 32

    def test_frozen(self):
        with pytest.raises(AttributeError):
            COARSE.radius = 2.0

    @pytest.mark.parametrize("kwargs", [
        {"radius": 0.0},
        {"radius": -1.0},
        {"radius": math.inf},
        {"subdivisions": -1},
        {"subdivisions": 2.0},
        {"subdivisions": False},
    ])
    def test_invalid_values_raise(self, kwargs):
        with pytest.raises(ValueError):
            HexasphereConfig(**kwargs)

    def test_validate_build_arguments_accepts_valid(self):
        validate_build_arguments(0.5, 0)
        validate_build_arguments(1000, 4)


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _restore_logger(self):
        logger = logging.getLogger("geotiles")
        level, handlers = logger.level, list(logger.handlers)
        yield
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        for handler in handlers:
            logger.addHandler(handler)
        logger.setLevel(level)

    def test_console_handler(self):
        logger = setup_logging(logging.DEBUG)
        assert logger.name == "geotiles"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_repeat_calls_replace_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "geotiles.log"
        logger = setup_logging(logging.INFO, log_file)
        assert len(logger.handlers) == 2
        logging.getLogger("geotiles.hexasphere").info("hello from the builder")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from the builder" in log_file.read_text(encoding="utf-8")
