"""app_audit package: audit one application bundle against a minimum-version policy.

Subpackages follow a ports/adapters layout; import submodules directly.
"""

__version__ = "1.0.0"

__all__: list[str] = []
