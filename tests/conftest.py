"""Pytest configuration and shared fixtures for the inlinemail test suite.

This module provides shared fixtures (image files on disk, sample HTML) and
test configuration used across the unit and integration tests.
"""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import MINIMAL_JPEG_BYTES, MINIMAL_PNG_BYTES, MINIMAL_SVG_BYTES

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests using Hypothesis")
    config.addinivalue_line("markers", "security: Tests for pattern injection and backtracking defences")


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    """Provide a directory populated with small image files.

    Contents
    --------
    - ``logo.png``: 1x1 PNG
    - ``my logo.png``: same PNG, name with a space
    - ``photo.jpg``: JPEG header
    - ``icon.svg``: tiny SVG
    - ``noext``: PNG bytes without a file extension
    - ``blob.unknownext``: text with an unknown extension
    - ``sub/nested.png``: PNG in a subdirectory

    """
    (tmp_path / "logo.png").write_bytes(MINIMAL_PNG_BYTES)
    (tmp_path / "my logo.png").write_bytes(MINIMAL_PNG_BYTES)
    (tmp_path / "photo.jpg").write_bytes(MINIMAL_JPEG_BYTES)
    (tmp_path / "icon.svg").write_bytes(MINIMAL_SVG_BYTES)
    (tmp_path / "noext").write_bytes(MINIMAL_PNG_BYTES)
    (tmp_path / "blob.unknownext").write_bytes(b"just some text")
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "nested.png").write_bytes(MINIMAL_PNG_BYTES)
    return tmp_path


@pytest.fixture
def restore_package_logger() -> Generator[logging.Logger, None, None]:
    """Undo ``configure_logging`` side effects on the package logger."""
    package_logger = logging.getLogger("inlinemail")
    level, propagate = package_logger.level, package_logger.propagate
    try:
        yield package_logger
    finally:
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
            handler.close()
        package_logger.setLevel(level)
        package_logger.propagate = propagate
