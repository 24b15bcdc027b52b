from abc import ABC, abstractmethod

from app_audit.entities.Application import Application


class BundleMetadataPort(ABC):
    @abstractmethod
    def read_value(self, app: Application, key: str) -> str:
        """
        Read a string value from the bundle's Info.plist.

        Raises:
            VersionMetadataError: If the file or key is missing or unreadable
        """
        raise NotImplementedError
