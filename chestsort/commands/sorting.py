# chestsort/commands/sorting.py
"""
Chat commands that change how chests are sorted, plus container helpers.
Settings are replaced, never edited: each toggle hands the manager a new SortSettings.
"""
from typing import TYPE_CHECKING, Any, Dict, Optional

from chestsort.commands.command_system import command
from chestsort.config import (
    CHAT_PREFIX, FORMAT_ERROR, FORMAT_NOTICE, FORMAT_RESET, FORMAT_SUCCESS, FORMAT_VALUE, SORT_MODES
)
from chestsort.player import is_operator

if TYPE_CHECKING:
    from chestsort.core.sort_manager import SortManager

OPERATOR_ONLY_MESSAGE = "Only operators or singleplayer can use this command."

def _denied(context: Dict[str, Any]) -> Optional[str]:
    """Returns the refusal text when the sender may not change settings."""
    manager: 'SortManager' = context["manager"]
    player = context["player"]
    if is_operator(player, manager.players):
        return None
    return f"{FORMAT_ERROR}{CHAT_PREFIX} {OPERATOR_ONLY_MESSAGE}{FORMAT_RESET}"

def _state_text(enabled: bool, on: str, off: str) -> str:
    return f"{FORMAT_SUCCESS}{on}" if enabled else f"{FORMAT_ERROR}{off}"

@command("sortanywhere", [], "sorting", "Toggle sorting chests without sneaking.\nUsage: sortanywhere", operator_only=True)
def sortanywhere_handler(args, context):
    denied = _denied(context)
    if denied: return denied
    manager = context["manager"]
    enabled = not manager.settings.allow_sort_without_sneak
    manager.update_settings(manager.settings.with_sneak_bypass(enabled))
    message = (f"{FORMAT_NOTICE}{CHAT_PREFIX} Sorting without sneaking is now "
               f"{_state_text(enabled, 'ENABLED', 'DISABLED')}{FORMAT_NOTICE}.{FORMAT_RESET}")
    manager.broadcast(message)
    return message

@command("sortmode", [], "sorting", "Choose how chests are ordered.\nUsage: sortmode <alpha|count|type>", operator_only=True)
def sortmode_handler(args, context):
    denied = _denied(context)
    if denied: return denied
    manager = context["manager"]
    mode = args[0].lower() if args else ""
    if mode not in SORT_MODES:
        return f"{FORMAT_ERROR}{CHAT_PREFIX} Invalid mode. Use /sortmode {'|'.join(SORT_MODES)}{FORMAT_RESET}"
    manager.update_settings(manager.settings.with_mode(mode))
    message = f"{FORMAT_NOTICE}{CHAT_PREFIX} Sorting mode set to {FORMAT_VALUE}{mode}{FORMAT_NOTICE}.{FORMAT_RESET}"
    manager.broadcast(message)
    return message

@command("sortverbose", [], "sorting", "Show or hide sort feedback messages.\nUsage: sortverbose <on|off>", operator_only=True)
def sortverbose_handler(args, context):
    denied = _denied(context)
    if denied: return denied
    manager = context["manager"]
    arg = args[0].lower() if args else ""
    if arg not in ("on", "off"):
        return f"{FORMAT_ERROR}{CHAT_PREFIX} Invalid usage. Use /sortverbose on|off{FORMAT_RESET}"
    enabled = arg == "on"
    manager.update_settings(manager.settings.with_verbose(enabled))
    message = f"{FORMAT_NOTICE}{CHAT_PREFIX} Verbose mode is now {_state_text(enabled, 'ON', 'OFF')}{FORMAT_NOTICE}.{FORMAT_RESET}"
    manager.broadcast(message)
    return message

@command("sortstatus", ["sortinfo"], "sorting", "Show the current sorting settings.")
def sortstatus_handler(args, context):
    settings = context["manager"].settings
    return (f"{FORMAT_NOTICE}{CHAT_PREFIX}{FORMAT_RESET} mode={FORMAT_VALUE}{settings.sorting_mode}{FORMAT_RESET}, "
            f"verbose={'on' if settings.verbose else 'off'}, "
            f"sort without sneaking={'on' if settings.allow_sort_without_sneak else 'off'}")

@command("sort", [], "container", "Sort the open chest right away.")
def sort_handler(args, context):
    manager = context["manager"]
    container = context.get("container")
    if container is None:
        return f"{FORMAT_ERROR}{CHAT_PREFIX} No chest is open.{FORMAT_RESET}"
    result = manager.sort_container(context["player"], container)
    if result is None or not result.success:
        detail = result.diagnostic.describe() if result and result.diagnostic else "no container"
        return f"{FORMAT_ERROR}{CHAT_PREFIX} Sorting failed - {detail}{FORMAT_RESET}"
    return f"{FORMAT_SUCCESS}{CHAT_PREFIX} Chest sorted! [mode: {result.mode}]{FORMAT_RESET}"

@command("show", ["look", "l"], "container", "List the open chest's slots.")
def show_handler(args, context):
    container = context.get("container")
    if container is None:
        return f"{FORMAT_ERROR}{CHAT_PREFIX} No chest is open.{FORMAT_RESET}"
    return container.list_items(show_empty="all" in args)
