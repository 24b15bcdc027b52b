import logging
import subprocess
from typing import Optional

from typing_extensions import override

from app_audit.exceptions import ProfileInventoryError
from app_audit.ports.profiles.profile_inventory_port import ProfileInventoryPort

PROFILES_BINARY = "/usr/bin/profiles"


class MacOSProfilesAdapter(ProfileInventoryPort):
    """Reads deployed configuration profiles through the macOS `profiles` tool."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        binary: str = PROFILES_BINARY,
        timeout: float = 30.0,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._binary = binary
        self._timeout = timeout

    @override
    def list_identifiers(self) -> list[str]:
        try:
            proc = subprocess.run(
                [self._binary, "show"],
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise ProfileInventoryError(f"Failed to run {self._binary}: {e}")

        if proc.returncode != 0:
            raise ProfileInventoryError(
                f"{self._binary} show exited with {proc.returncode}: {proc.stderr.strip()}"
            )

        return self.parse_identifiers(proc.stdout)

    @staticmethod
    def parse_identifiers(output: str) -> list[str]:
        """Take the last whitespace-separated token of every non-empty line."""
        identifiers: list[str] = []
        for line in output.splitlines():
            tokens = line.split()
            if tokens:
                identifiers.append(tokens[-1])
        return identifiers
