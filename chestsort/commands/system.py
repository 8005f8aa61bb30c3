# chestsort/commands/system.py
"""
Meta commands: help and quit.
"""
from chestsort.commands.command_system import command
from chestsort.config import FORMAT_HIGHLIGHT, FORMAT_RESET

@command("help", ["h", "?"], "system", "Show help.\nUsage: help [command]")
def help_handler(args, context):
    cp = context["command_processor"]
    return cp.get_command_help(args[0]) if args else cp.get_help_text()

@command("quit", ["q", "exit"], "system", "Leave the session.")
def quit_handler(args, context):
    manager = context["manager"]
    manager.running = False
    return f"{FORMAT_HIGHLIGHT}Goodbye.{FORMAT_RESET}"
