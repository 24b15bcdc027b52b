"""
Use case sequencing one audit run: profile gate, application lookup, version policy.
"""

import logging
from typing import Callable, Optional

from app_audit.entities.Audit import (
    TERMINAL_VERDICTS,
    AuditConfig,
    AuditResult,
    AuditState,
)
from app_audit.entities.Version import VersionCheck, comparable_key, evaluate
from app_audit.exceptions import VersionMetadataError
from app_audit.use_cases.application.locate_application import (
    LocateApplicationUseCase,
)
from app_audit.use_cases.application.read_installed_version import (
    ReadInstalledVersionUseCase,
)
from app_audit.use_cases.profiles.check_profile import ProfileGateUseCase

Transition = Callable[[AuditConfig, AuditResult], AuditState]


class AuditApplicationUseCase:
    """
    Runs the audit as a state machine:

        START -> GATE_CHECKED -> DEFERRED | LOCATED
        LOCATED -> APP_FOUND | APP_MISSING
        APP_FOUND -> NO_POLICY -> SATISFIED
        APP_FOUND -> POLICY_SET -> MET | NOT_MET

    Every non-terminal state has one transition method; terminal states map
    to a verdict. Errors met along the way are resolved into a state, never
    raised.
    """

    def __init__(
        self,
        gate: ProfileGateUseCase,
        locator: LocateApplicationUseCase,
        version_reader: ReadInstalledVersionUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            gate: Profile precondition check
            locator: Application bundle lookup
            version_reader: Installed version reader
            logger: Logger instance to use for logging
        """
        self._gate = gate
        self._locator = locator
        self._version_reader = version_reader
        self._logger = logger or logging.getLogger(__name__)
        self._transitions: dict[AuditState, Transition] = {
            AuditState.START: self.start,
            AuditState.GATE_CHECKED: self.check_gate,
            AuditState.LOCATED: self.locate,
            AuditState.APP_FOUND: self.check_policy,
            AuditState.NO_POLICY: self.skip_version,
            AuditState.POLICY_SET: self.compare_versions,
        }

    def execute(self, config: AuditConfig) -> AuditResult:
        """
        Run the audit to a terminal state.

        Args:
            config: Inputs for this run

        Returns:
            AuditResult holding the terminal state, verdict and exit code
        """
        result = AuditResult(state=AuditState.START, history=[AuditState.START])
        while result.state not in TERMINAL_VERDICTS:
            next_state = self._transitions[result.state](config, result)
            result.state = next_state
            result.history.append(next_state)

        self._explain(config, result)
        return result

    def start(self, config: AuditConfig, result: AuditResult) -> AuditState:
        return AuditState.GATE_CHECKED

    def check_gate(self, config: AuditConfig, result: AuditResult) -> AuditState:
        if self._gate.execute(config.profile_prefix):
            return AuditState.LOCATED
        return AuditState.DEFERRED

    def locate(self, config: AuditConfig, result: AuditResult) -> AuditState:
        app = self._locator.execute(
            config.app_name, config.search_root, config.max_depth
        )
        if app is None:
            return AuditState.APP_MISSING
        result.application = app
        self._logger.info(f"{app.path} was found ...")
        return AuditState.APP_FOUND

    def check_policy(self, config: AuditConfig, result: AuditResult) -> AuditState:
        if config.enforces_version:
            return AuditState.POLICY_SET
        return AuditState.NO_POLICY

    def skip_version(self, config: AuditConfig, result: AuditResult) -> AuditState:
        self._logger.info("A minimum enforced version is not set ...")
        return AuditState.SATISFIED

    def compare_versions(
        self, config: AuditConfig, result: AuditResult
    ) -> AuditState:
        if result.application is None:
            return AuditState.APP_MISSING
        try:
            installed = self._version_reader.execute(result.application)
            result.installed_key = comparable_key(installed)
            result.minimum_key = comparable_key(config.minimum_version)
            check = evaluate(installed, config.minimum_version)
        except VersionMetadataError as e:
            self._logger.warning(
                f"Could not determine the installed version of {config.app_name}: {e}"
            )
            return AuditState.APP_MISSING

        if check is VersionCheck.MET:
            return AuditState.MET
        return AuditState.NOT_MET

    def _explain(self, config: AuditConfig, result: AuditResult) -> None:
        state = result.state
        if state is AuditState.APP_MISSING:
            if result.application is None:
                self._logger.info(
                    f"{config.app_name} was not found in {config.search_root} ..."
                )
            self._logger.info(f"Need to install {config.app_name} ...")
        elif state is AuditState.NOT_MET:
            self._logger.info(
                f"Installed app version {result.installed_key} less than enforced version {config.minimum_version}"
            )
            self._logger.info("Starting the app install process ...")
        elif state is AuditState.MET:
            self._logger.info(f"Enforced vers: {result.minimum_key}")
            self._logger.info(f"Installed app version: {result.installed_key}")
            self._logger.info("Minimum app version enforcement met ...")
            self._logger.info("No need to run the installer ...")

        self._logger.info(
            f"Audit verdict: {result.verdict.value} (exit {result.exit_code})"
        )
