import logging

import pytest

from field_validator_lib.utils.logger import prepare_logger


@pytest.fixture
def logger_name():
    name = "field_validator_lib.tests.logger"
    yield name
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.mark.parametrize(
    "level, expected",
    [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        (None, logging.DEBUG),
        ("VERBOSE", logging.INFO),
    ],
)
def test_levels(logger_name, level, expected):
    assert prepare_logger(logger_name, level=level).level == expected


def test_single_handler(logger_name):
    prepare_logger(logger_name, level="INFO")
    logger = prepare_logger(logger_name, level="INFO")
    assert len(logger.handlers) == 1
