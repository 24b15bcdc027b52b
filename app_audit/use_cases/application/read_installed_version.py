import logging
from typing import Optional

from app_audit.entities.Application import Application
from app_audit.entities.Version import normalize_version
from app_audit.ports.application.bundle_metadata_port import BundleMetadataPort

SHORT_VERSION_KEY = "CFBundleShortVersionString"


class ReadInstalledVersionUseCase:
    def __init__(
        self,
        metadata: BundleMetadataPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._metadata = metadata
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, app: Application) -> str:
        """Read the bundle's short version string with hyphens turned into dots.

        Raises:
            VersionMetadataError: If the version cannot be read
        """
        raw = self._metadata.read_value(app, SHORT_VERSION_KEY)
        version = normalize_version(raw)
        app.version = version
        self._logger.debug(f"{app.name} reports version {raw!r} -> {version}")
        return version
