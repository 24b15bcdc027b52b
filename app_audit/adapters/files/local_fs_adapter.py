"""
Local file system adapter implementation for bounded application search.
"""

import logging
import os

from typing_extensions import override

from app_audit.exceptions import ApplicationSearchError
from app_audit.ports.files.application_search_port import ApplicationSearchPort


class LocalFileSystemAdapter(ApplicationSearchPort):
    """Local file system implementation of the application search port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _validate_directory(self, directory: str) -> None:
        """
        Validate that a directory exists and is indeed a directory.

        Args:
            directory: Path to the directory to validate

        Raises:
            ApplicationSearchError: If directory does not exist or is not a directory
        """
        if not os.path.exists(directory):
            raise ApplicationSearchError(f"Directory does not exist: {directory}")

        if not os.path.isdir(directory):
            raise ApplicationSearchError(f"Path is not a directory: {directory}")

    @staticmethod
    def _depth(root: str, path: str) -> int:
        """Number of levels between root and path (root itself is 0)."""
        rel = os.path.relpath(path, root)
        if rel == os.curdir:
            return 0
        return rel.count(os.sep) + 1

    @override
    def find(self, root: str, name: str, max_depth: int) -> list[str]:
        """
        Find entries below root whose base name equals name.

        Args:
            root: Directory to search below
            name: Exact, case-sensitive base name (e.g. "Cloudflare WARP.app")
            max_depth: Deepest level to inspect, like `find -maxdepth`

        Returns:
            Absolute matching paths, shallowest first then lexicographic

        Raises:
            ApplicationSearchError: If the search fails
        """
        if max_depth < 0:
            raise ApplicationSearchError(f"Invalid search depth: {max_depth}")

        root = os.path.abspath(root)
        self._validate_directory(root)

        if max_depth == 0:
            return [root] if os.path.basename(root) == name else []

        errors: list[OSError] = []
        matches: list[str] = []
        try:
            for dirpath, dirnames, filenames in os.walk(
                root, onerror=errors.append, followlinks=False
            ):
                level = self._depth(root, dirpath) + 1
                for entry in dirnames + filenames:
                    if entry == name:
                        matches.append(os.path.join(dirpath, entry))
                if level >= max_depth:
                    # entries of the children would sit below max_depth
                    dirnames[:] = []
        except Exception as e:
            raise ApplicationSearchError(
                f"Failed to search {root} for {name}: {str(e)}"
            )

        if errors:
            for err in errors:
                self._logger.warning(f"Could not read directory during search: {err}")
            raise ApplicationSearchError(
                f"Failed to search {root} for {name}: {len(errors)} unreadable directories"
            )

        return sorted(matches, key=lambda p: (self._depth(root, p), p))
