"""
Profile inventory port interface defining the contract for reading deployed profiles.
"""

from abc import ABC, abstractmethod


class ProfileInventoryPort(ABC):
    """Port interface for the deployed configuration profile inventory."""

    @abstractmethod
    def list_identifiers(self) -> list[str]:
        """
        List the identifiers of every deployed configuration profile.

        Returns:
            Profile identifiers, in the order the system reports them

        Raises:
            ProfileInventoryError: If the inventory cannot be queried
        """
        pass
