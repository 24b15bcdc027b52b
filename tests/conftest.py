"""
Pytest configuration and shared fixtures.
"""

import os
import plistlib
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest

from app_audit.container import DependencyContainer


@pytest.fixture(autouse=True)
def clean_audit_env(monkeypatch):
    """Keep AUDIT_* variables from the developer's shell out of the tests."""
    for key in list(os.environ):
        if key.startswith("AUDIT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def applications_dir(tmp_path) -> str:
    """
    Create an empty applications directory for search tests.

    Returns:
        Path to the directory
    """
    path = tmp_path / "Applications"
    path.mkdir()
    return str(path)


@pytest.fixture
def make_bundle(applications_dir) -> Callable[..., str]:
    """
    Factory creating a fake .app bundle below the applications directory.

    Usage: make_bundle("Vendor/Cloudflare WARP.app", version="1.5.207.0")
    A version of None writes an Info.plist without CFBundleShortVersionString.
    """

    def _make(
        relative_path: str,
        version: Optional[str] = "1.0.0.0",
        fmt: plistlib.PlistFormat = plistlib.FMT_XML,
    ) -> str:
        bundle = os.path.join(applications_dir, relative_path)
        contents = os.path.join(bundle, "Contents")
        os.makedirs(contents)

        info: dict[str, str] = {"CFBundleName": os.path.basename(bundle)}
        if version is not None:
            info["CFBundleShortVersionString"] = version
        with open(os.path.join(contents, "Info.plist"), "wb") as fh:
            plistlib.dump(info, fh, fmt=fmt)
        return bundle

    return _make


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
