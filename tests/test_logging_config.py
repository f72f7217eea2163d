"""Tests for the console logging setup."""

import logging

import pytest

from core import logging_config
from core.logging_config import setup_logging


@pytest.fixture
def logger_name():
    name = "raytracer-test"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logging_config._handlers.pop(name, None)


def test_repeated_setup_adds_one_handler(logger_name):
    logger = setup_logging("INFO", logger_name)
    setup_logging("INFO", logger_name)
    assert len(logger.handlers) == 1
    assert logger.handlers[0] is logging_config._handlers[logger_name]


def test_repeated_setup_updates_level(logger_name):
    setup_logging("INFO", logger_name)
    logger = setup_logging("DEBUG", logger_name)
    assert logger.level == logging.DEBUG
    assert logger.handlers[0].level == logging.DEBUG


def test_unknown_level_falls_back_to_info(logger_name):
    assert setup_logging("chatty", logger_name).level == logging.INFO


def test_foreign_handlers_are_left_alone(logger_name):
    logger = logging.getLogger(logger_name)
    foreign = logging.NullHandler()
    logger.addHandler(foreign)
    setup_logging("WARNING", logger_name)
    assert foreign in logger.handlers
    assert len(logger.handlers) == 2
