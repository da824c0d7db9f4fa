"""CLI entry point for diff-focus."""
import argparse
from dotenv import load_dotenv
import json
import logging
import os
import subprocess
import sys
import traceback
from pathlib import Path

from diff_focus.analysis import analyze_diff
from diff_focus.cli.exceptions import DiffSourceError, EmptyDiffError, NoInputError
from diff_focus.models import AnalysisResult, RiskLevel
from diff_focus.render import RENDERERS

load_dotenv()

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_INVALID_INPUT = 1
EXIT_SOURCE_ERROR = 2
EXIT_RISK_THRESHOLD = 3
EXIT_UNEXPECTED = 5
EXIT_KEYBOARD_INTERRUPT = 130

# Defaults (overridable through the environment or a .env file)
DEFAULT_FORMAT = "text"
DEFAULT_LOG_LEVEL = "WARNING"
STDIN_SOURCE = "-"

ENV_FORMAT = "DIFF_FOCUS_FORMAT"
ENV_FAIL_ON = "DIFF_FOCUS_FAIL_ON"
ENV_LOG_LEVEL = "DIFF_FOCUS_LOG_LEVEL"

OUTPUT_FORMATS = tuple(RENDERERS)
FAIL_ON_CHOICES = ("low", "medium", "high")

NO_INPUT_MESSAGE = "No active input found"
NO_CONTENT_MESSAGE = "No content to analyze"

_RISK_ORDER = {RiskLevel.LOW: 0, RiskLevel.MEDIUM: 1, RiskLevel.HIGH: 2}


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="diff-focus",
        description="Flag risky areas of a unified diff before line-by-line review",
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help=f"Path to a diff file, or '{STDIN_SOURCE}' to read standard input",
    )
    parser.add_argument(
        "--git",
        nargs="?",
        const="",
        default=None,
        metavar="REV",
        help="Analyze the output of 'git diff [REV]' in the current directory",
    )
    parser.add_argument(
        "--format",
        type=str,
        default=os.getenv(ENV_FORMAT, DEFAULT_FORMAT),
        help=f"Output format: {', '.join(OUTPUT_FORMATS)} (default: {DEFAULT_FORMAT})",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="",
        help="Write the rendered report to this path instead of stdout",
    )
    parser.add_argument(
        "--fail-on",
        type=str,
        default=os.getenv(ENV_FAIL_ON, ""),
        help=(
            "Exit with a non-zero status when risk is at or above this level "
            f"({', '.join(FAIL_ON_CHOICES)})"
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    parser.add_argument(
        "--dry-run", action="store_true", help="Print config and exit without running"
    )
    return parser


def configure_logging(verbose: bool) -> None:
    level_name = "DEBUG" if verbose else os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL)
    level = getattr(logging, level_name.upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def validate_options(args: argparse.Namespace) -> None:
    """Reject unknown format/fail-on values and conflicting sources.

    Raises:
        SystemExit: With EXIT_INVALID_INPUT on any invalid option.
    """
    problems = []
    if args.format not in OUTPUT_FORMATS:
        problems.append(f"unknown format '{args.format}'")
    if args.fail_on and args.fail_on.lower() not in FAIL_ON_CHOICES:
        problems.append(f"unknown risk level '{args.fail_on}'")
    if args.git is not None and args.source is not None:
        problems.append("a diff source and --git cannot be combined")
    if problems:
        print(f"Error: {'; '.join(problems)}.", file=sys.stderr)
        raise SystemExit(EXIT_INVALID_INPUT)


def read_git_diff(rev: str, cwd: str | None = None) -> str:
    """Return the output of ``git diff [rev]``."""
    command = ["git", "diff"]
    if rev:
        command.append(rev)
    try:
        result = subprocess.run(
            command,
            cwd=cwd,
            capture_output=True,
        )
    except OSError as exc:
        raise DiffSourceError(f"git is not available: {exc}") from exc

    if result.returncode != 0:
        stderr = result.stderr.decode("utf-8", errors="replace").strip()
        raise DiffSourceError(f"git diff failed: {stderr or result.returncode}")
    return result.stdout.decode("utf-8", errors="replace")


def read_diff_text(args: argparse.Namespace) -> str:
    """Obtain diff text from the selected input surface.

    Raises:
        NoInputError: Stdin is closed, or nothing was given and stdin is an
            interactive terminal.
        DiffSourceError: The file or git command could not be read.
    """
    if args.git is not None:
        return read_git_diff(args.git)

    source = args.source
    if source is None or source == STDIN_SOURCE:
        if sys.stdin is None or (source is None and sys.stdin.isatty()):
            raise NoInputError(NO_INPUT_MESSAGE)
        # Decode like file and git input so stray non-UTF-8 bytes never abort a run
        return sys.stdin.buffer.read().decode("utf-8", errors="replace")

    path = Path(source).expanduser()
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise DiffSourceError(f"cannot read '{source}': {exc}") from exc


def ensure_content(diff_text: str) -> str:
    """Blank input is a caller-side failure; the analyzer is never invoked for it."""
    if not diff_text.strip():
        raise EmptyDiffError(NO_CONTENT_MESSAGE)
    return diff_text


def meets_threshold(risk_level: RiskLevel, fail_on: str) -> bool:
    if not fail_on:
        return False
    threshold = RiskLevel(fail_on.capitalize())
    return _RISK_ORDER[risk_level] >= _RISK_ORDER[threshold]


def write_report(path: str, payload: str) -> None:
    """Write the rendered report to disk, creating parent directories."""
    report_path = Path(path).expanduser().resolve()
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(payload, encoding="utf-8")


def emit_result(result: AnalysisResult, output_format: str, output_path: str) -> None:
    payload = RENDERERS[output_format](result)
    if output_path:
        write_report(output_path, payload)
        logger.info("Report written: %s", output_path)
    else:
        sys.stdout.write(payload)
        if not payload.endswith("\n"):
            sys.stdout.write("\n")


def determine_exit_code(result: AnalysisResult, fail_on: str) -> int:
    if meets_threshold(result.risk_level, fail_on):
        return EXIT_RISK_THRESHOLD
    return EXIT_SUCCESS


def print_config_human(config: dict) -> None:
    """Print configuration in human-readable format."""
    print("\nConfiguration:")
    print(f"{'='*40}")
    for key, value in config.items():
        print(f"  {key}: {value}")
    print(f"{'='*40}")


def _warn(message: str) -> int:
    print(f"Warning: {message}", file=sys.stderr)
    return EXIT_INVALID_INPUT


def _handle_error(label: str, exc: BaseException, verbose: bool, exit_code: int) -> int:
    """Print error message to stderr and return the exit code."""
    print(f"{label}: {exc}", file=sys.stderr)
    if verbose:
        traceback.print_exc(file=sys.stderr)
    return exit_code


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code integer.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        validate_options(args)
    except SystemExit as exc:
        return exc.code

    configure_logging(args.verbose)

    config = {
        "source": (args.source or STDIN_SOURCE) if args.git is None else None,
        "git": args.git,
        "format": args.format,
        "output": args.output,
        "fail_on": args.fail_on.lower(),
        "verbose": args.verbose,
        "dry_run": args.dry_run,
    }

    if args.dry_run:
        if args.format == "json":
            print(json.dumps(config, indent=2))
        else:
            print_config_human(config)
        return EXIT_SUCCESS

    try:
        diff_text = ensure_content(read_diff_text(args))
        result = analyze_diff(diff_text)
        emit_result(result, args.format, args.output)
        return determine_exit_code(result, config["fail_on"])

    except (NoInputError, EmptyDiffError) as exc:
        return _warn(str(exc))

    except DiffSourceError as exc:
        return _handle_error("Diff source error", exc, args.verbose, EXIT_SOURCE_ERROR)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_KEYBOARD_INTERRUPT

    except Exception as exc:
        return _handle_error("Unexpected error", exc, args.verbose, EXIT_UNEXPECTED)


def main_entry() -> None:
    sys.exit(main())
