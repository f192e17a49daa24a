"""Shared fixtures for typed_env tests."""

import pytest
from loguru import logger

from typed_env import EnvironmentAccessor, MappingEnvironmentProvider

STRING_NAME = "TESTING_STRING_ENV_VAR_1234"
STRING_VALUE = "Bob"
BOOL_NAME = "TESTING_BOOL_ENV_VAR_1234"
INT_NAME = "TESTING_INT_ENV_VAR_1234"
DURATION_NAME = "TESTING_DURATION_ENV_VAR_1234"
FLOAT32_NAME = "TESTING_F32_ENV_VAR_1234"
FLOAT64_NAME = "TESTING_F64_ENV_VAR_1234"

TEST_VALUES = {
    STRING_NAME: STRING_VALUE,
    BOOL_NAME: "true",
    INT_NAME: "1337",
    DURATION_NAME: "1m0s",
    FLOAT32_NAME: "1337.7331",
    FLOAT64_NAME: "1337.7331",
}


@pytest.fixture
def accessor():
    """Accessor over an in-memory provider holding TEST_VALUES."""
    return EnvironmentAccessor(MappingEnvironmentProvider(TEST_VALUES))


@pytest.fixture
def environ(monkeypatch):
    """Set TEST_VALUES in the real process environment."""
    for key, value in TEST_VALUES.items():
        monkeypatch.setenv(key, value)
    return TEST_VALUES


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
