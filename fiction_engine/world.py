"""
The World Model.

Static description of a game: the item catalog and the maps, each map an
ordered list of locations holding focal points. Built once from the
authored document (see loader.py) and never mutated during play.
"""
import logging
from enum import IntEnum

logger = logging.getLogger(__name__)


class EventKind(IntEnum):
    EXAMINE = 1
    INTERACT = 2
    USE_ITEM = 3
    USE_WITH_ITEM = 4


# ==========================================
# ACTIONS
# ==========================================

class Action:
    """One atomic step of an Event or Alias. Subclasses carry their own arguments."""
    code = None
    kind = None

    def arguments(self):
        return []

    def __eq__(self, other):
        return type(self) is type(other) and self.arguments() == other.arguments()

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(a) for a in self.arguments())})"


class DisplayMessage(Action):
    code = 0
    kind = 'display_message'

    def __init__(self, text):
        self.text = text

    def arguments(self):
        return [self.text]


class AddItemToScene(Action):
    code = 1
    kind = 'add_item_to_scene'

    def __init__(self, item_id):
        self.item_id = item_id

    def arguments(self):
        return [self.item_id]


class RemoveItemFromInventory(Action):
    code = 2
    kind = 'remove_item_from_inventory'

    def __init__(self, item_id):
        self.item_id = item_id

    def arguments(self):
        return [self.item_id]


class MoveToLocation(Action):
    code = 3
    kind = 'move_to_location'

    def __init__(self, location_index):
        self.location_index = location_index

    def arguments(self):
        return [str(self.location_index)]


class SetFlag(Action):
    code = 4
    kind = 'set_flag'

    def __init__(self, name, value):
        self.name = name
        self.value = value

    def arguments(self):
        return [self.name, 'true' if self.value else 'false']


ACTION_TYPES = {cls.code: cls for cls in (DisplayMessage, AddItemToScene, RemoveItemFromInventory, MoveToLocation, SetFlag)}


def parse_action(data):
    """
    Decodes {"Event": <opcode>, "Arguments": [...]} into an Action.
    Returns None (and logs) when the opcode or its arguments can't be decoded.
    """
    code = data.get('Event')
    args = data.get('Arguments') or []
    cls = ACTION_TYPES.get(code)
    if cls is None:
        logger.warning("Dropping action with unknown opcode %r", code)
        return None
    if len(args) < (2 if cls is SetFlag else 1):
        logger.warning("Dropping %s action with missing arguments: %r", cls.kind, args)
        return None

    if cls is DisplayMessage:
        return DisplayMessage(str(args[0]))
    if cls is AddItemToScene:
        return AddItemToScene(str(args[0]))
    if cls is RemoveItemFromInventory:
        return RemoveItemFromInventory(str(args[0]))
    if cls is MoveToLocation:
        try:
            return MoveToLocation(int(args[0]))
        except (TypeError, ValueError):
            logger.warning("Dropping move action with non-numeric target %r", args[0])
            return None
    # SetFlag: only the literal "true" (or a YAML boolean) turns the flag on
    value = args[1]
    return SetFlag(str(args[0]), value is True or value == 'true')


def parse_actions(items):
    actions = []
    for data in items or []:
        action = parse_action(data)
        if action is not None:
            actions.append(action)
    return actions


# ==========================================
# CORE OBJECT MODEL
# ==========================================

class Item:
    def __init__(self, data):
        self.id = str(data.get('Id', ''))
        self.name = data.get('Name', 'unnamed')
        self.description = data.get('Description', '')


class Flag:
    """A named boolean used both as a requirement and as a mutation target."""

    def __init__(self, name, value):
        self.name = name
        self.value = value

    @classmethod
    def from_dict(cls, data):
        return cls(str(data.get('Name', '')), data.get('Flag') is True)

    def __eq__(self, other):
        return isinstance(other, Flag) and (self.name, self.value) == (other.name, other.value)

    def __repr__(self):
        return f"Flag({self.name!r}, {self.value!r})"


class Event:
    def __init__(self, data):
        code = data.get('Event')
        self.kind = EventKind(code)
        self.item_id = data.get('ItemId') or None
        self.actions = parse_actions(data.get('Actions'))


class CommandAlias:
    """A custom verb on a focal point, e.g. 'kick' or 'lift'."""

    def __init__(self, data):
        self.verb = str(data.get('Verb', ''))
        self.actions = parse_actions(data.get('Actions'))
        self.required_items = [str(i) for i in data.get('RequiredItems') or []]
        self.required_flags = [Flag.from_dict(f) for f in data.get('RequiredFlags') or []]

    def matches_verb(self, verb):
        return self.verb.lower() == verb.lower()


class FocalPoint:
    def __init__(self, data):
        self.name = data.get('Name', 'unnamed')
        self.description = data.get('Description', '')
        self.events = []
        for event_data in data.get('Events') or []:
            try:
                self.events.append(Event(event_data))
            except ValueError:
                logger.warning("Dropping event with unknown kind %r on %r", event_data.get('Event'), self.name)
        self.flags = [Flag.from_dict(f) for f in data.get('Flags') or []]
        self.aliases = [CommandAlias(a) for a in data.get('Aliases') or []]

    def first_event(self, kind, item_id=None):
        for event in self.events:
            if event.kind != kind:
                continue
            if item_id is not None and event.item_id != item_id:
                continue
            return event
        return None


class Location:
    def __init__(self, data):
        self.name = data.get('Name', 'unnamed')
        self.description = data.get('Description', '')
        self.items = tuple(str(i) for i in data.get('Items') or [])
        points = data.get('FocalPoints')
        if points is None:
            # the editor writes the key misspelled
            points = data.get('FoculPoints')
        self.focal_points = [FocalPoint(p) for p in points or []]


class GameMap:
    def __init__(self, data):
        self.name = data.get('Name', 'unnamed')
        self.description = data.get('Description', '')
        self.introduction = data.get('Introduction', '')
        self.locations = [Location(l) for l in data.get('Locations') or []]


class World:
    """The full static game description: item catalog plus maps."""

    def __init__(self, data):
        self.items = [Item(i) for i in data.get('Items') or []]
        self.maps = [GameMap(m) for m in data.get('Maps') or []]
        self._items_by_id = {}
        for item in self.items:
            if item.id in self._items_by_id:
                logger.warning("Duplicate item id %r; keeping the first definition", item.id)
                continue
            self._items_by_id[item.id] = item

    def get_item(self, item_id):
        return self._items_by_id.get(item_id)

    def item_name(self, item_id):
        item = self.get_item(item_id)
        return item.name if item else item_id

    def get_location(self, map_index, location_index):
        return self.maps[map_index].locations[location_index]

    def find_location(self, map_index, location_index):
        """Like get_location, but returns None for an index the map doesn't have."""
        if not 0 <= map_index < len(self.maps):
            return None
        locations = self.maps[map_index].locations
        if not 0 <= location_index < len(locations):
            return None
        return locations[location_index]

    def placed_item_ids(self):
        ids = []
        for game_map in self.maps:
            for location in game_map.locations:
                for item_id in location.items:
                    if item_id not in ids:
                        ids.append(item_id)
        return ids
