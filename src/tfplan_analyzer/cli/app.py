"""Command-line interface implementation for the plan analyzer."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from ..adapters import PlanLoaderError
from ..logging_utils import configure_logging
from ..normalization import PlanFormatError
from ..rendering import RenderMode
from ..service import PlanAnalysisService
from ..settings import SettingsError, load_settings

logger = logging.getLogger(__name__)

USAGE_HINT = "Use -h or --help for usage information."

EPILOG = """\
modes:
  (default)    basic analysis with summary statistics
  --short      compact diff-style output showing all changes
  --detail     comprehensive breakdown by action types
  --no-op      focus on resources that won't change

examples:
  %(prog)s plan.json                      # basic analysis
  %(prog)s --short plan.json              # compact change list
  %(prog)s --detail --markdown plan.json  # detailed markdown report
  %(prog)s --no-op plan.json              # show no-op resources only

environment:
  TFPLAN_ANALYZER_CHAR_LIMIT    character limit checked by --github-comment (default 65536)
  TFPLAN_ANALYZER_DEFAULT_MODE  mode used when no mode flag is given
  TFPLAN_ANALYZER_LOG_LEVEL     log level for diagnostics written to stderr
  TFPLAN_ANALYZER_CONFIG        YAML file providing char_limit, default_mode, log_level
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with exit status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n{USAGE_HINT}\n")


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = _ArgumentParser(
        prog="tfplan-analyzer",
        description="Analyze Terraform plan JSON files and display changes in various formats.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        type=Path,
        nargs="?",
        default=None,
        help="Path to a plan exported with `terraform show -json`.",
    )
    parser.add_argument(
        "--short",
        dest="mode",
        action="store_const",
        const=RenderMode.SHORT.value,
        help="Show only changed resources and outputs (compact format).",
    )
    parser.add_argument(
        "--detail",
        dest="mode",
        action="store_const",
        const=RenderMode.DETAIL.value,
        help="Show detailed changes grouped by action type.",
    )
    parser.add_argument(
        "--no-op",
        dest="mode",
        action="store_const",
        const=RenderMode.NOOP.value,
        help="Show only resources with no changes.",
    )
    parser.add_argument(
        "--markdown",
        action="store_true",
        help="Output in markdown format.",
    )
    parser.add_argument(
        "--github-comment",
        action="store_true",
        help="Optimize output for GitHub comments (implies --markdown, checks the length limit).",
    )
    parser.set_defaults(mode=None)

    return parser


def create_service() -> PlanAnalysisService:
    """Create the analysis service used by the CLI."""

    return PlanAnalysisService()


def _error(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by tests and the console script."""

    arguments = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()

    if not arguments:
        parser.print_help()
        return 0

    try:
        args = parser.parse_args(arguments)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    try:
        settings = load_settings()
    except SettingsError as exc:
        return _error(str(exc))

    configure_logging(settings.log_level)

    if args.path is None:
        print(f"Error: No input file specified\n{USAGE_HINT}", file=sys.stderr)
        return 1

    mode = args.mode or settings.default_mode
    logger.debug("Analyzing %s in %s mode", args.path, mode)

    service = create_service()
    try:
        result = service.analyze(
            args.path,
            mode=mode,
            markdown=args.markdown,
            github_comment=args.github_comment,
            char_limit=settings.char_limit,
        )
    except (PlanLoaderError, PlanFormatError) as exc:
        return _error(str(exc))

    print(result.output)
    return 0


def run() -> None:  # pragma: no cover - thin wrapper for module execution
    """Execute the CLI and exit with the produced status code."""

    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
