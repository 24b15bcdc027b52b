"""
Use case for locating an installed application bundle.
"""

import logging
import os
from typing import Optional

from app_audit.entities.Application import Application
from app_audit.exceptions import ApplicationSearchError
from app_audit.ports.files.application_search_port import ApplicationSearchPort


class LocateApplicationUseCase:
    """Resolves an application bundle name to an installed bundle, or None."""

    def __init__(
        self,
        search: ApplicationSearchPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            search: Port performing the bounded filesystem search
            logger: Logger instance to use for logging
        """
        self._search = search
        self._logger = logger or logging.getLogger(__name__)

    def execute(
        self, app_name: str, search_root: str, max_depth: int
    ) -> Optional[Application]:
        """
        Locate app_name below search_root, at most max_depth levels deep.

        The search filter may be looser than the name (shell wildcards), so the
        selected candidate must also be a directory whose base name equals
        app_name. When several bundles match, the shallowest one wins, ties
        broken lexicographically.

        Args:
            app_name: Exact bundle name, e.g. "Cloudflare WARP.app"
            search_root: Directory to search below
            max_depth: Deepest level to inspect

        Returns:
            The located Application, or None when it is not installed or the
            search failed
        """
        self._logger.info(
            f"Searching for {app_name} in {search_root} (max depth {max_depth})"
        )
        try:
            candidates = self._search.find(search_root, app_name, max_depth)
        except ApplicationSearchError as e:
            self._logger.warning(f"Application search failed: {e}")
            return None

        candidates = [
            c
            for c in candidates
            if os.path.isdir(c) and os.path.basename(c) == app_name
        ]
        if not candidates:
            return None

        if len(candidates) > 1:
            self._logger.warning(
                f"Found {len(candidates)} copies of {app_name}, using {candidates[0]}"
            )
        return Application(candidates[0])
