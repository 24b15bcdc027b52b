"""
Use case gating the audit on a deployed configuration profile.
"""

import logging
from typing import Optional

from app_audit.exceptions import ConfigurationError, ProfileInventoryError
from app_audit.ports.profiles.profile_inventory_port import ProfileInventoryPort


class ProfileGateUseCase:
    """Checks whether a profile with a given identifier prefix is deployed."""

    def __init__(
        self,
        inventory: ProfileInventoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            inventory: Port listing deployed profile identifiers
            logger: Logger instance to use for logging
        """
        self._inventory = inventory
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, prefix: str) -> bool:
        """
        Check for a deployed profile whose identifier starts with prefix.

        Args:
            prefix: Non-empty profile identifier prefix

        Returns:
            True if at least one deployed profile matches, False otherwise.
            An unreadable inventory counts as no match.
        """
        if not prefix:
            raise ConfigurationError("Profile prefix must be a non-empty string")

        try:
            identifiers = self._inventory.list_identifiers()
        except ProfileInventoryError as e:
            self._logger.warning(f"Could not read installed profiles: {e}")
            identifiers = []

        matches = [i for i in identifiers if i.startswith(prefix)]
        if matches:
            self._logger.info(f"Profile prefix {prefix} present ...")
            return True

        self._logger.info(f"no profiles with ID {prefix} were found ...")
        self._logger.info("Waiting until the profile is installed before proceeding ...")
        self._logger.info("Will check again at the next agent check-in ...")
        return False
