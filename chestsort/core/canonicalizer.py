# chestsort/core/canonicalizer.py
"""
Derives the canonical key that decides which stacks are fungible.

Key layout: `<type_id>:<data>` followed by `:<field>=<json>` for every
whitelisted metadata field present on the stack, in whitelist order. JSON
objects are emitted with sorted keys, and enchantment/effect lists are sorted by
their identifier, so two stacks that differ only in attachment ordering share a
key.
"""
import hashlib
import json
from typing import Any, Callable, List, Optional, Tuple

from chestsort.config import (
    BANNER_FAMILY, BOOK_FAMILY, FIREWORK_FAMILY, HEAD_FAMILY, ITEM_NAMESPACE, KEY_FIELD_ASSIGN,
    KEY_SEPARATOR, MAP_FAMILY, POTION_FAMILY, SHULKER_SUFFIX, UNREADABLE_DIGEST_LENGTH,
    UNREADABLE_METADATA_MARKER
)
from chestsort.items.item_stack import Enchantment, ItemStack, PotionEffect
from chestsort.utils.logger import Logger

# Errors a malformed attachment can raise while being normalized or encoded.
SERIALIZATION_ERRORS = (TypeError, ValueError, RecursionError, AttributeError)


def _always(family_id: str) -> bool:
    return True

def _in_family(family: Tuple[str, ...]) -> Callable[[str], bool]:
    return lambda family_id: family_id in family

def _is_shulker(family_id: str) -> bool:
    return family_id.endswith(SHULKER_SUFFIX)


def _to_plain(value: Any) -> Any:
    """Turns typed entries (Enchantment, PotionEffect) and tuples into JSON-like values."""
    if isinstance(value, (Enchantment, PotionEffect)):
        return _to_plain(value.to_dict())
    if isinstance(value, dict):
        return {k: _to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(v) for v in value]
    return value

def _sort_object(value: Any) -> Any:
    """Recursively orders object keys; list order is kept."""
    if isinstance(value, dict):
        return {k: _sort_object(value[k]) for k in sorted(value)}
    if isinstance(value, list):
        return [_sort_object(v) for v in value]
    return value

def _encode(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)

def _sort_entries_by(field_name: str) -> Callable[[Any], Any]:
    """Normalizer for lists whose order carries no meaning (enchantments, effects)."""
    def normalize(entries: Any) -> Any:
        plain = [_sort_object(_to_plain(e)) for e in entries]
        # The encoded entry breaks ties between equal identifiers.
        return sorted(plain, key=lambda e: (str(e.get(field_name, "")) if isinstance(e, dict) else "", _encode(e)))
    return normalize

def _sorted_structure(value: Any) -> Any:
    return _sort_object(_to_plain(value))


# Fixed order: this tuple is the order fields appear in every key.
# (key field, metadata attribute, applies to family id, normalizer)
FIELD_WHITELIST: Tuple[Tuple[str, str, Callable[[str], bool], Callable[[Any], Any]], ...] = (
    ("pot", "potion_effects", _in_family(POTION_FAMILY), _sort_entries_by("effect")),
    ("ench", "enchantments", _always, _sort_entries_by("id")),
    ("fw", "fireworks", _in_family(FIREWORK_FAMILY), _sorted_structure),
    ("book", "book_contents", _in_family(BOOK_FAMILY), _sorted_structure),
    ("banner", "banner_patterns", _in_family(BANNER_FAMILY), _sorted_structure),
    ("head", "head_owner", _in_family(HEAD_FAMILY), _sorted_structure),
    ("map", "map_id", _in_family(MAP_FAMILY), _sorted_structure),
    ("shulker", "container_contents", _is_shulker, _sorted_structure),
    ("name", "custom_name", _always, _to_plain),
    ("lore", "lore", _always, _to_plain),
)


class KeyCanonicalizer:
    """Stateless; every method is pure and never raises for a readable stack."""

    @staticmethod
    def base_key(stack: ItemStack) -> str:
        data = stack.data if stack.data is not None else 0
        return f"{stack.type_id}{KEY_SEPARATOR}{data}"

    @staticmethod
    def family_id(stack: ItemStack) -> str:
        """
        The id that family rules match against: `minecraft:potion` and `potion`
        give `potion`. Ids from other namespaces give "" and belong to no family.
        """
        type_id = stack.type_id
        if type_id.startswith(ITEM_NAMESPACE):
            return type_id[len(ITEM_NAMESPACE):]
        return "" if ":" in type_id else type_id

    @staticmethod
    def applicable_fields(stack: ItemStack) -> List[str]:
        """Whitelisted field names checked for this stack's type, in key order."""
        family_id = KeyCanonicalizer.family_id(stack)
        return [name for name, _, applies, _ in FIELD_WHITELIST if applies(family_id)]

    @staticmethod
    def unreadable_marker(value: Any) -> str:
        """
        Sentinel for a value that cannot be encoded, suffixed with a digest of its
        repr so stacks with different unreadable values never share a key.
        """
        try:
            text = repr(value)
        except SERIALIZATION_ERRORS:
            text = type(value).__name__
        digest = hashlib.sha1(text.encode("utf-8", "backslashreplace")).hexdigest()
        return f"{UNREADABLE_METADATA_MARKER}#{digest[:UNREADABLE_DIGEST_LENGTH]}"

    @staticmethod
    def serialize_field(field_name: str, value: Any, normalizer: Callable[[Any], Any]) -> str:
        try:
            return _encode(normalizer(value))
        except SERIALIZATION_ERRORS as e:
            Logger.warning("KeyCanonicalizer", f"Unreadable '{field_name}' metadata ({type(e).__name__}: {e}); keyed by its repr digest.")
            return KeyCanonicalizer.unreadable_marker(value)

    @staticmethod
    def canonicalize(stack: ItemStack) -> str:
        key = KeyCanonicalizer.base_key(stack)
        metadata = getattr(stack, "metadata", None)
        if metadata is None:
            return key

        family_id = KeyCanonicalizer.family_id(stack)
        for field_name, attribute, applies, normalizer in FIELD_WHITELIST:
            if not applies(family_id):
                continue
            value: Optional[Any] = getattr(metadata, attribute, None)
            # Only None is absent; an empty list or name is still part of the identity.
            if value is None:
                continue
            encoded = KeyCanonicalizer.serialize_field(field_name, value, normalizer)
            key += f"{KEY_SEPARATOR}{field_name}{KEY_FIELD_ASSIGN}{encoded}"
        return key


canonicalize = KeyCanonicalizer.canonicalize
