# chestsort/player/__init__.py
from .core import Player, is_operator
