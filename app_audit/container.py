"""
Dependency injection container for managing application dependencies.
"""

import logging

from app_audit.adapters.application.plist_bundle_adapter import (
    PlistBundleMetadataAdapter,
)
from app_audit.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from app_audit.adapters.profiles.macos_profiles_adapter import MacOSProfilesAdapter
from app_audit.ports.application.bundle_metadata_port import BundleMetadataPort
from app_audit.ports.files.application_search_port import ApplicationSearchPort
from app_audit.ports.profiles.profile_inventory_port import ProfileInventoryPort
from app_audit.use_cases.application.locate_application import (
    LocateApplicationUseCase,
)
from app_audit.use_cases.application.read_installed_version import (
    ReadInstalledVersionUseCase,
)
from app_audit.use_cases.audit.run_audit import AuditApplicationUseCase
from app_audit.use_cases.profiles.check_profile import ProfileGateUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_profile_inventory(self) -> ProfileInventoryPort:
        """
        Get profile inventory adapter instance.

        Returns:
            ProfileInventoryPort implementation
        """
        if "profile_inventory" not in self._instances:
            self._instances["profile_inventory"] = MacOSProfilesAdapter(self._logger)
        return self._instances["profile_inventory"]

    def get_application_search(self) -> ApplicationSearchPort:
        """
        Get application search adapter instance.

        Returns:
            ApplicationSearchPort implementation
        """
        if "application_search" not in self._instances:
            self._instances["application_search"] = LocalFileSystemAdapter(
                self._logger
            )
        return self._instances["application_search"]

    def get_bundle_metadata(self) -> BundleMetadataPort:
        """
        Get bundle metadata adapter instance.

        Returns:
            BundleMetadataPort implementation
        """
        if "bundle_metadata" not in self._instances:
            self._instances["bundle_metadata"] = PlistBundleMetadataAdapter(
                self._logger
            )
        return self._instances["bundle_metadata"]

    def get_profile_gate_use_case(self) -> ProfileGateUseCase:
        if "profile_gate_use_case" not in self._instances:
            self._instances["profile_gate_use_case"] = ProfileGateUseCase(
                self.get_profile_inventory(), self._logger
            )
        return self._instances["profile_gate_use_case"]

    def get_locate_application_use_case(self) -> LocateApplicationUseCase:
        if "locate_application_use_case" not in self._instances:
            self._instances["locate_application_use_case"] = LocateApplicationUseCase(
                self.get_application_search(), self._logger
            )
        return self._instances["locate_application_use_case"]

    def get_read_installed_version_use_case(self) -> ReadInstalledVersionUseCase:
        if "read_installed_version_use_case" not in self._instances:
            self._instances["read_installed_version_use_case"] = (
                ReadInstalledVersionUseCase(self.get_bundle_metadata(), self._logger)
            )
        return self._instances["read_installed_version_use_case"]

    def get_audit_use_case(self) -> AuditApplicationUseCase:
        """
        Get the audit use case with every stage injected.

        Returns:
            Configured AuditApplicationUseCase
        """
        if "audit_use_case" not in self._instances:
            self._instances["audit_use_case"] = AuditApplicationUseCase(
                self.get_profile_gate_use_case(),
                self.get_locate_application_use_case(),
                self.get_read_installed_version_use_case(),
                self._logger,
            )
        return self._instances["audit_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
