"""
Audit run domain entities: configuration, states, verdicts and results.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from app_audit.entities.Application import Application

DEFAULT_APP_NAME = "Cloudflare WARP.app"
DEFAULT_SEARCH_ROOT = "/Applications"
DEFAULT_SEARCH_DEPTH = 3


@dataclass(frozen=True)
class AuditConfig:
    """Inputs of one audit run, fixed at process start."""

    profile_prefix: str
    app_name: str = DEFAULT_APP_NAME
    minimum_version: str = ""
    search_root: str = DEFAULT_SEARCH_ROOT
    max_depth: int = DEFAULT_SEARCH_DEPTH

    @property
    def enforces_version(self) -> bool:
        return bool(self.minimum_version.strip())


class Verdict(str, Enum):
    DEFER = "defer"
    SATISFIED = "satisfied"
    REMEDIATE = "remediate"

    @property
    def exit_code(self) -> int:
        # 1 tells the management agent to run the installer
        return 1 if self is Verdict.REMEDIATE else 0


class AuditState(str, Enum):
    START = "start"
    GATE_CHECKED = "gate_checked"
    DEFERRED = "deferred"
    LOCATED = "located"
    APP_FOUND = "app_found"
    APP_MISSING = "app_missing"
    NO_POLICY = "no_policy"
    POLICY_SET = "policy_set"
    SATISFIED = "satisfied"
    MET = "met"
    NOT_MET = "not_met"


TERMINAL_VERDICTS: dict[AuditState, Verdict] = {
    AuditState.DEFERRED: Verdict.DEFER,
    AuditState.APP_MISSING: Verdict.REMEDIATE,
    AuditState.SATISFIED: Verdict.SATISFIED,
    AuditState.MET: Verdict.SATISFIED,
    AuditState.NOT_MET: Verdict.REMEDIATE,
}


@dataclass
class AuditResult:
    state: AuditState
    application: Optional[Application] = None
    installed_key: Optional[str] = None
    minimum_key: Optional[str] = None
    history: list[AuditState] = field(default_factory=list)

    @property
    def verdict(self) -> Verdict:
        try:
            return TERMINAL_VERDICTS[self.state]
        except KeyError:
            raise ValueError(f"Audit stopped in non-terminal state {self.state.value}")

    @property
    def exit_code(self) -> int:
        return self.verdict.exit_code

    def get_details(self) -> dict[str, object]:
        """Summary used by the CLI when rendering the verdict."""
        return {
            "state": self.state.value,
            "verdict": self.verdict.value,
            "exit_code": self.exit_code,
            "application": self.application.path if self.application else None,
            "installed_key": self.installed_key,
            "minimum_key": self.minimum_key,
            "history": [s.value for s in self.history],
        }
