"""
Configuration settings for the application.
"""

import os
from typing import Any

from dotenv import load_dotenv

from app_audit.entities.Audit import (
    DEFAULT_APP_NAME,
    DEFAULT_SEARCH_DEPTH,
    DEFAULT_SEARCH_ROOT,
    AuditConfig,
)
from app_audit.entities.Version import comparable_key
from app_audit.exceptions import ConfigurationError, VersionMetadataError

# Load environment variables from .env file
_ = load_dotenv()


class Settings:
    """Audit settings loaded from environment variables, overridable per run."""

    def __init__(self, **overrides: Any):
        """
        Args:
            overrides: Values taking precedence over the environment
                (app_name, minimum_version, profile_prefix, search_root,
                max_depth, log_level). None means "not given".
        """
        self._overrides: dict[str, Any] = {
            k: v for k, v in overrides.items() if v is not None
        }

        self.app_name: str = self._get_env(
            "AUDIT_APP_NAME", DEFAULT_APP_NAME, "app_name"
        )
        self.minimum_version: str = self._get_env(
            "AUDIT_MINIMUM_VERSION", "", "minimum_version"
        ).strip()
        self.profile_prefix: str = self._get_required_env(
            "AUDIT_PROFILE_PREFIX", "profile_prefix"
        )
        self.search_root: str = self._get_env(
            "AUDIT_SEARCH_ROOT", DEFAULT_SEARCH_ROOT, "search_root"
        )
        self.max_depth: int = self._get_int_env(
            "AUDIT_SEARCH_DEPTH", DEFAULT_SEARCH_DEPTH, "max_depth"
        )
        self.log_level: str = self._get_env(
            "AUDIT_LOG_LEVEL", "INFO", "log_level"
        ).upper()

        if not self.app_name:
            raise ConfigurationError("Application name must not be empty")
        if self.minimum_version:
            try:
                comparable_key(self.minimum_version)
            except VersionMetadataError as e:
                raise ConfigurationError(f"Invalid minimum version: {e}")

    def _get_required_env(self, key: str, override: str) -> str:
        """Get a required environment variable, raise error if missing."""
        if override in self._overrides:
            value = str(self._overrides[override])
        else:
            value = os.getenv(key, "")
        if not value:
            raise ConfigurationError(f"Required environment variable {key} is not set")
        return value

    def _get_env(self, key: str, default: str, override: str) -> str:
        """Get an environment variable with a default value."""
        if override in self._overrides:
            return str(self._overrides[override])
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int, override: str) -> int:
        """Get a non-negative integer environment variable."""
        raw = self._get_env(key, str(default), override)
        try:
            value = int(raw)
        except ValueError:
            raise ConfigurationError(f"{key} must be an integer, got {raw!r}")
        if value < 0:
            raise ConfigurationError(f"{key} must not be negative, got {value}")
        return value

    def to_audit_config(self) -> AuditConfig:
        return AuditConfig(
            profile_prefix=self.profile_prefix,
            app_name=self.app_name,
            minimum_version=self.minimum_version,
            search_root=self.search_root,
            max_depth=self.max_depth,
        )
