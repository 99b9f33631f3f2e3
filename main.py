"""
Environment Check Entry Point

Loads and validates the runtime environment the way the application
does at startup, then prints what it will run with.

Exit codes:
  - 0: Environment valid
  - 1: Environment missing or invalid (message printed to stderr)
"""

import argparse
import sys
from typing import List, Optional

from app.config import (
    ENV_FILE_OVERRIDE,
    ENV_FILE_PATH,
    LOAD_ENV_FILE,
    LOG_LEVEL,
    VALID_LOG_LEVELS,
    get_log_file,
    validate_config,
)
from app.runner import run
from core.errors import ConfigurationInvalid
from core.loader import EnvironmentLoader
from infra.logger import logger_api, setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Load and validate the runtime environment.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--env-file",
        type=str,
        default=ENV_FILE_PATH,
        help=f"Path of the .env file to load first. Default: {ENV_FILE_PATH}",
    )

    parser.add_argument(
        "--no-env-file",
        action="store_true",
        default=not LOAD_ENV_FILE,
        help="Read only the process environment, skip the .env file.",
    )

    parser.add_argument(
        "--override",
        action="store_true",
        default=ENV_FILE_OVERRIDE,
        help="Let .env values replace variables already set in the environment.",
    )

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=LOG_LEVEL,
        help=f"Log level. Default: {LOG_LEVEL}",
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the environment summary and only log warnings and errors.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Sets up logging, validates configuration, loads the environment and
    hands the validated record to the runner.
    """
    args = build_parser().parse_args(argv)

    log_level = args.log_level
    if args.quiet and VALID_LOG_LEVELS.index(log_level) < VALID_LOG_LEVELS.index("WARNING"):
        log_level = "WARNING"

    setup_logging(level=log_level, log_file=get_log_file())
    validate_config()

    loader = EnvironmentLoader(
        env_file=args.env_file,
        load_env_file=not args.no_env_file,
        override_env=args.override,
    )

    try:
        env = loader.load()
    except ConfigurationInvalid as e:
        logger_api.error(f"STARTUP_ERROR | invalid={','.join(e.field_names)}")
        print(str(e), file=sys.stderr)
        return 1

    lines = run(env, loader.sources)
    if not args.quiet:
        for line in lines:
            print(f"  {line}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
