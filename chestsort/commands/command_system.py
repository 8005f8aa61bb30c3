# chestsort/commands/command_system.py
from typing import Any, Callable, Dict, List, Optional
from functools import wraps

from chestsort.config import (
    FORMAT_CATEGORY, FORMAT_ERROR, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_TITLE,
    HELP_MAX_COMMANDS_PER_CATEGORY
)

# Dictionary to store all registered commands
registered_commands: Dict[str, Dict[str, Any]] = {}
command_groups: Dict[str, List[Dict[str, Any]]] = {
    "sorting": [], "container": [], "system": [], "other": []
}

COMMAND_PREFIX = "/"

def command(name: str, aliases: Optional[List[str]] = None, category: str = "other",
           help_text: str = "No help available.", operator_only: bool = False):
    """
    Decorator for registering chat commands.
    Handlers are called as handler(args, context) and return the reply text.
    """
    aliases = aliases or []

    def decorator(func: Callable[[List[str], Dict[str, Any]], str]):
        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        cmd_data = {
            "name": name,
            "aliases": aliases,
            "handler": wrapper,
            "help_text": help_text,
            "category": category,
            "operator_only": operator_only
        }
        wrapper._command_info = cmd_data # type: ignore

        registered_commands[name] = cmd_data
        for alias in aliases:
            registered_commands[alias] = cmd_data

        command_groups.setdefault(category, []).append(cmd_data)
        return wrapper
    return decorator

class CommandProcessor:
    """Processes chat input and dispatches commands to their handlers."""

    def process_input(self, text: str, context: Any = None) -> str:
        """
        Process chat input and execute the corresponding command using a
        longest-match-first strategy for multi-word commands.
        A leading '/' is optional.
        """
        text = text.strip().lower()
        if text.startswith(COMMAND_PREFIX):
            text = text[len(COMMAND_PREFIX):]
        if not text: return ""
        parts = text.split()

        for i in range(len(parts), 0, -1):
            potential_cmd = " ".join(parts[:i])
            if potential_cmd in registered_commands:
                cmd_data = registered_commands[potential_cmd]
                args = parts[i:]

                if context is not None and isinstance(context, dict):
                    context['executed_command_name'] = cmd_data["name"]
                    context['command_processor'] = self

                return cmd_data["handler"](args, context)

        return f"{FORMAT_ERROR}Unknown command: {parts[0]}{FORMAT_RESET}"

    def get_help_text(self) -> str:
        """Generate the top-level help text showing categories and commands."""
        help_text = f"{FORMAT_TITLE}===== ChestSort Help ====={FORMAT_RESET}\n\n"
        help_text += f"Sneak and use a chest to sort it. Type '{FORMAT_HIGHLIGHT}help <command>{FORMAT_RESET}' for details.\n\n"

        categories = sorted([cat for cat, cmds in command_groups.items() if cmds])
        for category in categories:
            unique_primary_names = sorted({cmd['name'] for cmd in command_groups[category]})
            if len(unique_primary_names) > HELP_MAX_COMMANDS_PER_CATEGORY:
                command_list_str = ", ".join(unique_primary_names[:HELP_MAX_COMMANDS_PER_CATEGORY]) + ", ..."
            else:
                command_list_str = ", ".join(unique_primary_names)
            help_text += f"  - {FORMAT_CATEGORY}{category.capitalize()}{FORMAT_RESET} ({FORMAT_HIGHLIGHT}{command_list_str}{FORMAT_RESET})\n"
        return help_text

    def get_command_help(self, command_or_category_name: str) -> str:
        """Get detailed help for a specific command OR a category."""
        name_lower = command_or_category_name.lower().lstrip(COMMAND_PREFIX)

        if name_lower in command_groups and command_groups[name_lower]:
            return self._get_category_help(name_lower)

        if name_lower in registered_commands:
            cmd = registered_commands[name_lower]
            help_text = f"{FORMAT_TITLE}Command: {cmd['name'].upper()}{FORMAT_RESET}\n\n"
            help_text += f"{FORMAT_CATEGORY}Category:{FORMAT_RESET} {cmd['category'].capitalize()}\n"
            if cmd['aliases']:
                help_text += f"{FORMAT_CATEGORY}Aliases:{FORMAT_RESET} {', '.join(cmd['aliases'])}\n"
            if cmd['operator_only']:
                help_text += f"{FORMAT_CATEGORY}Requires:{FORMAT_RESET} operator\n"
            help_text += f"\n{FORMAT_CATEGORY}Description:{FORMAT_RESET}\n"
            for line in cmd['help_text'].split('\n'):
                help_text += f"  {line}\n"
            return help_text

        return f"{FORMAT_ERROR}No help found for '{command_or_category_name}'. It is not a valid command or category.{FORMAT_RESET}"

    def _get_category_help(self, category_name: str) -> str:
        """Generate help text for a specific command category."""
        commands_in_category = command_groups[category_name]
        help_text = f"{FORMAT_TITLE}Help: {category_name.capitalize()} Commands{FORMAT_RESET}\n\n"

        unique_commands = {}
        for cmd in commands_in_category:
            unique_commands.setdefault(id(cmd["handler"]), cmd)

        for cmd in sorted(unique_commands.values(), key=lambda c: c["name"]):
            aliases = f" ({', '.join(cmd['aliases'])})" if cmd['aliases'] else ""
            first_line_help = cmd['help_text'].split('\n')[0]
            help_text += f"  {FORMAT_HIGHLIGHT}{cmd['name']}{aliases}{FORMAT_RESET}\n"
            help_text += f"    - {first_line_help}\n"
        return help_text
