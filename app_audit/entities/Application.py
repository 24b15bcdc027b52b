"""
Application domain entity.
"""

import os
from typing import Optional


class Application:
    """
    Installed application bundle located on disk.
    """

    def __init__(self, path: str, version: Optional[str] = None):
        """
        Initialize the Application entity.

        Args:
            path: Path to the .app bundle directory
            version: Normalized short version string (filled in once read)
        """
        if not path:
            raise ValueError("'path' is required")

        self.path = os.path.abspath(os.path.expanduser(path))
        self.name = os.path.basename(self.path.rstrip(os.sep))
        self.version = version or None

    @property
    def info_plist_path(self) -> str:
        """Path to the bundle metadata file."""
        return os.path.join(self.path, "Contents", "Info.plist")
