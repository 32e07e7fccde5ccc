"""CLI entrypoint: parse options, validate, dispatch, print.

Exit codes:
- 0: result printed, or a domain error / unknown task reported on stdout
- 1: unexpected failure
- 2: bad command line, bad settings, or a missing / invalid / unreadable parameter
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping

from pydantic import ValidationError

from rosalind_cli import __version__
from rosalind_cli.runner.config import RunnerSettings
from rosalind_cli.runner.dispatch import dispatch
from rosalind_cli.runner.formatting import format_error, format_outcome
from rosalind_cli.runner.logging import configure_logging
from rosalind_cli.runner.registry import PARAMETERS, TASKS, TaskSpec, UnknownTask
from rosalind_cli.runner.validation import ParameterError, RawOptions, validate

logger = logging.getLogger(__name__)


def _task_listing(registry: Mapping[str, TaskSpec]) -> str:
    lines = ["supported tasks:"]
    for spec in registry.values():
        params = " ".join(f"-{name}" for name in spec.required_params)
        lines.append(f"  {spec.task_id:<6}{spec.title} ({params})")
    return "\n".join(lines)


def build_parser(registry: Mapping[str, TaskSpec] = TASKS) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rosalind-cli",
        description="Solve one Rosalind problem from a data file or numeric options",
        epilog=_task_listing(registry),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"rosalind-cli {__version__}")
    parser.add_argument(
        "-t",
        "--task",
        dest="t",
        required=True,
        metavar="TASK",
        help="task name",
    )

    for param in PARAMETERS.values():
        flags = [f"-{param.name}"]
        if param.long_name:
            flags.append(f"--{param.long_name}")
        parser.add_argument(*flags, dest=param.name, default=None, metavar=param.metavar, help=param.help)

    return parser


def raw_options(args: argparse.Namespace) -> RawOptions:
    """Flatten parsed arguments into option name -> raw string value."""

    return {name: getattr(args, name, None) for name in PARAMETERS}


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = RunnerSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your environment / .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        try:
            context = validate(
                args.t,
                raw_options(args),
                encoding=settings.data_encoding,
                max_numeric_param=settings.max_numeric_param,
            )
        except UnknownTask as e:
            logger.warning(str(e), extra={"task": e.task_id})
            print(format_error(e))
            return 0
        except ParameterError as e:
            logger.error("Invalid parameters", extra={"task": args.t, "kind": e.kind})
            print(format_error(e), file=sys.stderr)
            return 2

        outcome = dispatch(args.t, context)
        print(format_outcome(outcome))
        return 0

    except Exception:
        logger.exception("Task failed", extra={"task": args.t})
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
