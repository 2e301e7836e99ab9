"""Tests for configure_logging."""

import io
import json
import logging

import pytest
from pythonjsonlogger import jsonlogger

from prefcache.config import ObservabilityConfig
from prefcache.logging_config import HANDLER_NAME, configure_logging


@pytest.fixture
def logger_name():
    name = "prefcache.test_logging"
    yield name
    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_sets_level_and_plain_formatter(logger_name):
    logger = configure_logging(
        ObservabilityConfig(level="debug", format="%(levelname)s:%(message)s"),
        logger_name=logger_name,
    )

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert logger.handlers[0].get_name() == HANDLER_NAME
    assert logger.handlers[0].formatter._fmt == "%(levelname)s:%(message)s"


def test_reconfiguring_replaces_handler(logger_name):
    configure_logging(ObservabilityConfig(), logger_name=logger_name)
    logger = configure_logging(ObservabilityConfig(), logger_name=logger_name)

    assert len(logger.handlers) == 1


def test_foreign_handlers_are_kept(logger_name):
    logger = logging.getLogger(logger_name)
    other = logging.NullHandler()
    logger.addHandler(other)

    configure_logging(ObservabilityConfig(), logger_name=logger_name)

    assert other in logger.handlers
    assert len(logger.handlers) == 2


def test_structured_uses_json_formatter(logger_name):
    logger = configure_logging(
        ObservabilityConfig(structured=True), logger_name=logger_name
    )

    assert isinstance(logger.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_structured_output_includes_extra_fields(logger_name):
    logger = configure_logging(
        ObservabilityConfig(structured=True), logger_name=logger_name
    )
    stream = io.StringIO()
    logger.handlers[0].setStream(stream)

    logger.info(
        "Preference cache invalidated",
        extra={"cache": "preferences", "observers": 2},
    )

    payload = json.loads(stream.getvalue().strip())
    assert payload["message"] == "Preference cache invalidated"
    assert payload["levelname"] == "INFO"
    assert payload["name"] == logger_name
    assert payload["cache"] == "preferences"
    assert payload["observers"] == 2
