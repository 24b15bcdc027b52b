"""
Version normalization and the minimum-version comparison policy.

Versions are compared by concatenating their digits: ``1.5.207.0`` becomes
the key ``152070`` and keys are compared as integers. Component boundaries are
lost, so ``1.2.0`` (``120``) sorts below ``1.1.99`` (``1199``). Existing
policies rely on this ordering, so it is kept as is.
"""

from enum import Enum

from app_audit.exceptions import VersionMetadataError


class VersionCheck(str, Enum):
    MET = "met"
    NOT_MET = "not_met"


def normalize_version(raw: str) -> str:
    """Replace every hyphen with a dot and trim surrounding whitespace."""
    return raw.strip().replace("-", ".")


def comparable_key(version: str) -> str:
    """
    Build the digit-only key used for ordering.

    Args:
        version: Raw or normalized version string

    Returns:
        The version with hyphens and dots removed

    Raises:
        VersionMetadataError: If the key is empty or holds anything but ASCII digits
    """
    key = normalize_version(version).replace(".", "")
    if not (key.isascii() and key.isdigit()):
        raise VersionMetadataError(f"Not a numeric version: {version!r}")
    return key


def _ordering(key: str) -> tuple[int, str]:
    # numeric order for digit strings of any length
    digits = key.lstrip("0") or "0"
    return len(digits), digits


def evaluate(installed: str, minimum: str) -> VersionCheck:
    """Return MET when the installed key is numerically >= the minimum key."""
    if _ordering(comparable_key(installed)) >= _ordering(comparable_key(minimum)):
        return VersionCheck.MET
    return VersionCheck.NOT_MET
