"""
Configuration for item stacks, stacking limits, and metadata families.
"""

# --- Container Defaults ---
DEFAULT_CONTAINER_SIZE = 27  # single chest
LARGE_CONTAINER_SIZE = 54    # double chest
CONTAINER_EMPTY_MESSAGE = "  (Empty)"

# --- Stacking ---
ITEM_NAMESPACE = "minecraft:"
DEFAULT_MAX_STACK_SIZE = 64
# Short ids (namespace stripped). Anything not listed stacks to DEFAULT_MAX_STACK_SIZE.
MAX_STACK_SIZE_OVERRIDES = {
    "ender_pearl": 16,
    "snowball": 16,
    "egg": 16,
    "bucket": 16,
    "sign": 16,
    "oak_sign": 16,
    "honey_bottle": 16,
    "armor_stand": 16,
    "banner": 16,
    "written_book": 16,
    "potion": 1,
    "splash_potion": 1,
    "lingering_potion": 1,
    "enchanted_book": 1,
    "writable_book": 1,
    "suspicious_stew": 1,
    "water_bucket": 1,
    "lava_bucket": 1,
    "milk_bucket": 1,
    "diamond_sword": 1,
    "iron_sword": 1,
    "bow": 1,
    "shield": 1,
    "elytra": 1,
    "saddle": 1,
    "totem_of_undying": 1,
}
# Any id ending with one of these suffixes never stacks.
UNSTACKABLE_SUFFIXES = ("shulker_box", "_sword", "_pickaxe", "_axe", "_shovel", "_hoe",
                        "_helmet", "_chestplate", "_leggings", "_boots")

# --- Metadata Families (short ids) ---
POTION_FAMILY = ("potion", "splash_potion", "lingering_potion", "tipped_arrow", "suspicious_stew")
BOOK_FAMILY = ("writable_book", "written_book")
BANNER_FAMILY = ("banner",)
HEAD_FAMILY = ("player_head",)
MAP_FAMILY = ("map", "filled_map")
FIREWORK_FAMILY = ("firework_rocket", "firework_star")
SHULKER_SUFFIX = "shulker_box"

# --- Demo chest contents used by main.py ---
DEMO_CHEST_TEMPLATES = [
    {"type_id": "minecraft:cobblestone", "amount": 40},
    {"type_id": "minecraft:enchanted_book", "amount": 1,
     "enchantments": [{"id": "sharpness", "level": 3}, {"id": "unbreaking", "level": 2}]},
    None,
    {"type_id": "minecraft:oak_log", "amount": 12},
    {"type_id": "minecraft:cobblestone", "amount": 50},
    {"type_id": "minecraft:enchanted_book", "amount": 1,
     "enchantments": [{"id": "unbreaking", "level": 2}, {"id": "sharpness", "level": 3}]},
    {"type_id": "minecraft:potion", "amount": 1,
     "potion_effects": [{"effect": "speed", "amplifier": 0, "duration": 3600}]},
    None,
    {"type_id": "minecraft:wool", "data": 14, "amount": 7},
    {"type_id": "minecraft:wool", "data": 0, "amount": 9},
    {"type_id": "minecraft:ender_pearl", "amount": 20},
    {"type_id": "minecraft:diamond", "amount": 3, "custom_name": "Shiny"},
    {"type_id": "minecraft:diamond", "amount": 5},
]
