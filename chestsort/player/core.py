# chestsort/player/core.py
from typing import Iterable, List, Optional, Set

from chestsort.config import FORMAT_CODE_PATTERN, OPERATOR_TAG

class Player:
    """The acting player as the sorting layer sees it: a name, tags, a sneak flag and a chat log."""

    def __init__(self, name: str, is_sneaking: bool = False, tags: Optional[Iterable[str]] = None):
        self.name = name
        self.is_sneaking = is_sneaking
        self.tags: Set[str] = set(tags or [])
        self.messages: List[str] = []

    def send_message(self, message: str) -> None:
        self.messages.append(message)

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags

    def last_message(self, plain: bool = False) -> Optional[str]:
        if not self.messages:
            return None
        return FORMAT_CODE_PATTERN.sub("", self.messages[-1]) if plain else self.messages[-1]

def is_operator(player: Player, online_players: Iterable[Player]) -> bool:
    """Operators carry the operator tag. Everyone counts as operator in single player."""
    if len(list(online_players)) == 1:
        return True
    return player.has_tag(OPERATOR_TAG)
