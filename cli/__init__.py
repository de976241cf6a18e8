"""Command-line interface for RecordBuilder.

This package provides the CLI entry point. It handles argument parsing,
settings loading, the interactive action prompt and exit codes.

    python -m cli [--config settings.yaml] [--root DIR] [--verbose]
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from core.workflow import SubmoduleWorkflow
from repository.store import RepositoryError
from settings import AppSettings, SettingsValidationError, load_settings
from utils import (
    ACTION_ADD,
    ACTION_SUBMODULE,
    APP_NAME,
    APP_VERSION,
    EXIT_INVALID_CONFIG,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    ConsolePrompter,
    PathValidationError,
    Prompter,
    get_logger,
    setup_logging,
)

from .interactive import (
    INVALID_ACTION_MESSAGE,
    prompt_action,
    prompt_add_target,
    prompt_submodule_folder,
)

logger = get_logger(__name__)

__all__ = [
    "EXIT_INVALID_CONFIG",
    "EXIT_RUNTIME_ERROR",
    "EXIT_SUCCESS",
    "parse_args",
    "run_action",
    "main",
    # Re-export for unit-test patching
    "ConsolePrompter",
    "SubmoduleWorkflow",
]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    The action itself is asked interactively.
    """
    parser = argparse.ArgumentParser(
        description=f"{APP_NAME} - schema-driven record builder with a metadata index",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML/JSON settings file (optional)",
    )
    parser.add_argument(
        "--root",
        type=str,
        default=None,
        help="Base directory for submodule folders (overrides settings)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    return parser.parse_args(argv)


def run_action(prompter: Prompter, settings: AppSettings) -> int:
    """Ask for an action and run it.

    Returns:
        Exit code. A missing structure and an unknown action both end
        cleanly with EXIT_SUCCESS.

    Raises:
        RepositoryError: If storage fails
        PathValidationError: If a folder or instance name is unsafe
    """
    workflow = SubmoduleWorkflow(prompter, settings)
    action = prompt_action(prompter)

    if action == ACTION_SUBMODULE:
        folder = prompt_submodule_folder(prompter)
        workflow.define_submodule(folder)
    elif action == ACTION_ADD:
        folder, name = prompt_add_target(prompter)
        workflow.add_instance(folder, name)
    else:
        prompter.say(INVALID_ACTION_MESSAGE)

    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for `python -m cli` and the `recordbuilder` script."""
    args = parse_args(argv)
    setup_logging(verbose=args.verbose)

    try:
        settings = load_settings(args.config, root=args.root)
    except SettingsValidationError as e:
        print(f"✗ Invalid configuration:\n{e}", file=sys.stderr)
        return EXIT_INVALID_CONFIG

    try:
        return run_action(ConsolePrompter(), settings)
    except (KeyboardInterrupt, EOFError):
        print("\n✗ Interrupted by user", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except PathValidationError as e:
        print(f"✗ Invalid name: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except RepositoryError as e:
        print(f"✗ Storage error: {e}", file=sys.stderr)
        logger.exception("Storage error during session")
        return EXIT_RUNTIME_ERROR
    except OSError as e:
        print(f"✗ I/O error: {e}", file=sys.stderr)
        logger.exception("I/O error during session")
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
