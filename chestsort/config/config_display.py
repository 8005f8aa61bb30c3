"""
Inline format codes used in chat feedback and command output.
A host renderer maps them to colors; plain consumers strip them.
"""
import re

FORMAT_PURPLE = "[[PURPLE]]"
FORMAT_RED = "[[RED]]"
FORMAT_ORANGE = "[[ORANGE]]"
FORMAT_YELLOW = "[[YELLOW]]"
FORMAT_GREEN = "[[GREEN]]"
FORMAT_BLUE = "[[BLUE]]"
FORMAT_GRAY = "[[GRAY]]"
FORMAT_CYAN = "[[CYAN]]"
FORMAT_WHITE = "[[WHITE]]"
FORMAT_RESET = "[[/]]"

FORMAT_ERROR = FORMAT_RED
FORMAT_TITLE = FORMAT_YELLOW
FORMAT_HIGHLIGHT = FORMAT_GREEN
FORMAT_SUCCESS = FORMAT_GREEN
FORMAT_CATEGORY = FORMAT_CYAN
FORMAT_NOTICE = FORMAT_YELLOW
FORMAT_VALUE = FORMAT_CYAN

FORMAT_CODE_PATTERN = re.compile(r"\[\[(?:[A-Z_]+|/)\]\]")

# --- Chat prefix for every player-facing message ---
CHAT_PREFIX = "[ChestSort]"

# --- Help output ---
HELP_MAX_COMMANDS_PER_CATEGORY = 5
