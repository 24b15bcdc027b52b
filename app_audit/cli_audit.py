import argparse
import logging
import sys

from app_audit import __version__
from app_audit.config.settings import Settings
from app_audit.container import container
from app_audit.entities.Audit import AuditResult, Verdict
from app_audit.exceptions import ConfigurationError

VERDICT_STYLES = {
    Verdict.DEFER: "yellow",
    Verdict.SATISFIED: "green",
    Verdict.REMEDIATE: "red",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="app-audit",
        description=(
            "Check that an application bundle is installed and meets a minimum "
            "version. Exits 0 when nothing needs doing and 1 when the installer "
            "should run."
        ),
    )
    parser.add_argument(
        "--app-name",
        default=None,
        help="Exact bundle name to look for (env AUDIT_APP_NAME)",
    )
    parser.add_argument(
        "--minimum-version",
        default=None,
        help="Minimum version to enforce; empty disables the check (env AUDIT_MINIMUM_VERSION)",
    )
    parser.add_argument(
        "--profile-prefix",
        default=None,
        help="Profile identifier prefix to wait for (env AUDIT_PROFILE_PREFIX)",
    )
    parser.add_argument(
        "--search-root",
        default=None,
        help="Directory searched for the bundle (env AUDIT_SEARCH_ROOT)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Sub-directory levels searched below the root (env AUDIT_SEARCH_DEPTH)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (env AUDIT_LOG_LEVEL)",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Also render the verdict in a colored panel",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def render_pretty(result: AuditResult) -> None:
    from rich import box
    from rich.console import Console
    from rich.panel import Panel
    from rich.table import Table

    details = result.get_details()
    table = Table(show_header=False, box=None)
    table.add_column(style="bold")
    table.add_column()
    for key in ("application", "installed_key", "minimum_key", "state", "exit_code"):
        value = details[key]
        table.add_row(key.replace("_", " "), "-" if value is None else str(value))
    installed = result.application.version if result.application else None
    table.add_row("installed version", installed or "-")
    table.add_row("path", " -> ".join(s.value for s in result.history))

    Console(soft_wrap=True).print(
        Panel(
            table,
            title=f"verdict: {result.verdict.value}",
            box=box.ROUNDED,
            border_style=VERDICT_STYLES[result.verdict],
            expand=True,
        )
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings(
            app_name=args.app_name,
            minimum_version=args.minimum_version,
            profile_prefix=args.profile_prefix,
            search_root=args.search_root,
            max_depth=args.max_depth,
            log_level=args.log_level,
        )
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
        force=True,
    )

    result = container.get_audit_use_case().execute(settings.to_audit_config())
    if args.pretty:
        render_pretty(result)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
