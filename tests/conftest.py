"""Pytest configuration and shared helpers.

Helpers build frames and errors at fixed, explicit locations so rendered
output can be compared exactly, independent of where the test file lives.
"""

import pytest

from framechain.core.config import get_settings
from framechain.core.container import get_logger
from framechain.domain.errors import ContextualError
from framechain.domain.value_objects import Frame, SourceLocation


def loc(file: str = "test.py", line: int = 1, function: str = "test") -> SourceLocation:
    """Helper to create a SourceLocation for testing."""
    return SourceLocation(file=file, line=line, function=function)


def create_error(
    message: str = "failed",
    code: int = 0,
    file: str = "test.py",
    line: int = 1,
    function: str = "test",
) -> ContextualError:
    """Helper to create a ContextualError at an explicit location.

    Usage:
        err = create_error("disk full", 28, "io.cc", 42, "Flush")
    """
    return ContextualError(message, code, location=loc(file, line, function))


def create_frame(
    message: str = "failed",
    code: int = 0,
    file: str = "test.py",
    line: int = 1,
    function: str = "test",
    depth: int = 0,
) -> Frame:
    """Helper to create a Frame for testing."""
    return Frame(
        message=message,
        code=code,
        file=file,
        line=line,
        function=function,
        depth=depth,
    )


@pytest.fixture(autouse=True)
def reset_logger_cache():
    """Drop cached settings and logger so each test sees its own environment."""
    get_settings.cache_clear()
    get_logger.cache_clear()
    yield
    get_settings.cache_clear()
    get_logger.cache_clear()
