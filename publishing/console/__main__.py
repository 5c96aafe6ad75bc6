"""CLI interface for the publishing workflow."""

import argparse
import sys
from typing import List, Optional, TextIO

import yaml

from ..common.config import LOG_LEVELS, load_typed_config
from ..common.logger import setup_logger
from ..common.settings import get_settings
from .driver import WorkflowSession


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="publishing-workflow",
        description="Walk a manuscript through review, editing and approval.",
    )
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument(
        "--required-reviews",
        type=int,
        help="Reviewer approvals needed to finish the review stage",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Override the configured log level",
    )
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Main entry point for the workflow CLI."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    try:
        config = load_typed_config(args.config or settings.config_path)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except (yaml.YAMLError, TypeError, ValueError) as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 2

    required_reviews = config.workflow.required_reviews
    if args.required_reviews is not None:
        required_reviews = args.required_reviews
    if required_reviews < 1:
        print("Error: --required-reviews must be a positive integer", file=sys.stderr)
        return 2

    try:
        setup_logger(
            "publishing",
            config.logging,
            level=args.log_level or settings.effective_log_level,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    session = WorkflowSession(
        required_reviews=required_reviews,
        stdin=stdin,
        stdout=stdout,
    )
    try:
        session.run()
    except EOFError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
