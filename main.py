import argparse

from chestsort.config import DEFAULT_CONTAINER_SIZE, DEFAULT_SORT_MODE, DEMO_CHEST_TEMPLATES, FORMAT_CODE_PATTERN, SORT_MODES
from chestsort.core.settings import SortSettings
from chestsort.core.sort_manager import SortManager
from chestsort.items.inventory import Inventory
from chestsort.items.item_factory import ItemFactory
from chestsort.player import Player
from chestsort.utils.logger import Logger, LogLevel

def main():
    parser = argparse.ArgumentParser(description='ChestSort interactive demo')
    parser.add_argument('--mode', '-m', choices=SORT_MODES, default=DEFAULT_SORT_MODE,
                        help='Initial sorting mode (default: alpha)')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Start with sort feedback messages turned off')
    parser.add_argument('--size', '-s', type=int, default=DEFAULT_CONTAINER_SIZE,
                        help='Number of slots in the demo chest (default: 27)')
    parser.add_argument('--debug', action='store_true', help='Show engine debug logging')
    args = parser.parse_args()

    Logger.set_level(LogLevel.DEBUG if args.debug else LogLevel.WARNING)

    manager = SortManager(SortSettings(sorting_mode=args.mode, verbose=not args.quiet))
    player = Player("Steve", is_sneaking=True)
    manager.join(player)
    manager.active_container = build_demo_chest(args.size)

    print("ChestSort demo. Type 'help' for commands, 'quit' to leave.")
    while manager.running:
        try:
            text = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        reply = manager.process_command(player, text)
        if reply:
            print(FORMAT_CODE_PATTERN.sub("", reply))

def build_demo_chest(size: int) -> Inventory:
    slots = ItemFactory.create_slots(DEMO_CHEST_TEMPLATES)[:size]
    slots += [None] * (size - len(slots))
    return Inventory.from_stacks(slots, name="Demo Chest")

if __name__ == "__main__":
    main()
