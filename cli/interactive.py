"""Interactive CLI prompts for RecordBuilder.

This module provides the top-level prompts of a session: which action to
run and which submodule folder and instance it applies to. Answers are
returned exactly as typed.
"""

from utils import ACTION_ADD, ACTION_SUBMODULE, Prompter, get_logger

logger = get_logger(__name__)

INVALID_ACTION_MESSAGE = f'Invalid action. Use "{ACTION_SUBMODULE}" or "{ACTION_ADD}".'


def prompt_action(prompter: Prompter) -> str:
    """Prompt for the action to run.

    Returns:
        The raw answer (may be invalid)
    """
    action = prompter.ask(f"Enter action ({ACTION_SUBMODULE}/{ACTION_ADD}): ")
    logger.debug(f"Action selected: {action!r}")
    return action


def prompt_submodule_folder(prompter: Prompter) -> str:
    """Prompt for the folder of a new submodule."""
    return prompter.ask("Enter folder name: ")


def prompt_add_target(prompter: Prompter) -> tuple[str, str]:
    """Prompt for the submodule folder and instance name of an ``add``.

    Returns:
        Tuple of (folder name, instance name)
    """
    folder = prompter.ask("Enter folder name where to add: ")
    name = prompter.ask("Enter add name: ")
    return folder, name
