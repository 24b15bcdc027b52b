import logging
import plistlib
from typing import Optional
from xml.parsers.expat import ExpatError

from typing_extensions import override

from app_audit.entities.Application import Application
from app_audit.exceptions import VersionMetadataError
from app_audit.ports.application.bundle_metadata_port import BundleMetadataPort


class PlistBundleMetadataAdapter(BundleMetadataPort):
    """Reads bundle metadata straight from Contents/Info.plist (XML or binary)."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @override
    def read_value(self, app: Application, key: str) -> str:
        plist_path = app.info_plist_path
        try:
            with open(plist_path, "rb") as fh:
                info = plistlib.load(fh)
        except (OSError, ValueError, ExpatError) as e:
            raise VersionMetadataError(f"Cannot read {plist_path}: {e}")

        if not isinstance(info, dict) or key not in info:
            raise VersionMetadataError(f"{key} not found in {plist_path}")

        value = info[key]
        if not isinstance(value, str) or not value.strip():
            raise VersionMetadataError(f"{key} in {plist_path} is not a usable string")

        self._logger.debug(f"Read {key}={value!r} from {plist_path}")
        return value
