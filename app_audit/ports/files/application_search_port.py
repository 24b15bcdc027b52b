"""
Application search port interface defining the contract for bounded filesystem search.
"""

from abc import ABC, abstractmethod


class ApplicationSearchPort(ABC):
    """Port interface for locating entries by name below a root directory."""

    @abstractmethod
    def find(self, root: str, name: str, max_depth: int) -> list[str]:
        """
        Find entries whose base name equals name.

        Args:
            root: Directory to search below (never left)
            name: Exact base name, compared case-sensitively
            max_depth: Deepest level to inspect; 1 means direct children of root

        Returns:
            Absolute paths of matching entries, shallowest first then lexicographic

        Raises:
            ApplicationSearchError: If the root or any visited directory cannot be read
        """
        pass
