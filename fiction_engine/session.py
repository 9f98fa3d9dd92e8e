"""
Session State: the mutable "save file" of a play-through.

Kept apart from the World so it can be swapped wholesale on load.
"""
import copy

from .errors import SessionFormatError

REQUIRED_KEYS = ('currentMap', 'currentLocation', 'inventory', 'flags', 'spawnedItems')


def location_key(map_index, location_index):
    return f"{map_index}:{location_index}"


class Session:
    def __init__(self, current_map=0, current_location=0, inventory=None, flags=None,
                 spawned_items=None, scene_items=None):
        self.current_map = current_map
        self.current_location = current_location
        self.inventory = list(inventory or [])
        self.flags = dict(flags or {})
        self.spawned_items = dict(spawned_items or {})
        # items added to a location's scene during play, keyed by location_key()
        self.scene_items = {k: list(v) for k, v in (scene_items or {}).items()}

    @classmethod
    def new(cls, world):
        """Fresh session at map 0, location 0, with every placed item spawned."""
        return cls(spawned_items={item_id: True for item_id in world.placed_item_ids()})

    # --- FLAGS ---
    def flag(self, name):
        return self.flags.get(name, False)

    def set_flag(self, name, value):
        self.flags[name] = value

    # --- SCENE OVERLAY ---
    def added_scene_items(self, map_index=None, location_index=None):
        if map_index is None: map_index = self.current_map
        if location_index is None: location_index = self.current_location
        return self.scene_items.get(location_key(map_index, location_index), [])

    def add_scene_item(self, item_id):
        key = location_key(self.current_map, self.current_location)
        added = self.scene_items.setdefault(key, [])
        if item_id not in added:
            added.append(item_id)

    # --- INVENTORY ---
    def has_item(self, item_id):
        return item_id in self.inventory

    def remove_item(self, item_id):
        if item_id in self.inventory:
            self.inventory.remove(item_id)

    def take_item(self, item_id):
        """Moves a spawned item into the inventory. False if it isn't spawned."""
        if not self.spawned_items.get(item_id):
            return False
        self.spawned_items[item_id] = False
        self.inventory.append(item_id)
        return True

    # --- SNAPSHOTS ---
    def to_state(self):
        state = {
            'currentMap': self.current_map,
            'currentLocation': self.current_location,
            'inventory': self.inventory[:],
            'flags': self.flags.copy(),
            'spawnedItems': self.spawned_items.copy(),
        }
        # the overlay key is written only when something has been added
        if self.scene_items:
            state['sceneItems'] = copy.deepcopy(self.scene_items)
        return state

    def load_state(self, state):
        """Replaces this session's contents with a snapshot. No merging; a bad snapshot changes nothing."""
        if not isinstance(state, dict):
            raise SessionFormatError(f"Session snapshot must be a mapping, got {type(state).__name__}")
        missing = [k for k in REQUIRED_KEYS if k not in state]
        if missing:
            raise SessionFormatError(f"Session snapshot is missing: {', '.join(missing)}")
        try:
            inventory = list(state['inventory'])
            flags = dict(state['flags'])
            spawned_items = dict(state['spawnedItems'])
            scene_items = {k: list(v) for k, v in (state.get('sceneItems') or {}).items()}
        except (TypeError, ValueError, AttributeError) as e:
            raise SessionFormatError(f"Session snapshot has a malformed field: {e}") from e

        self.current_map = state['currentMap']
        self.current_location = state['currentLocation']
        self.inventory = inventory
        self.flags = flags
        self.spawned_items = spawned_items
        self.scene_items = scene_items

    @classmethod
    def from_state(cls, state):
        session = cls()
        session.load_state(state)
        return session

    def copy(self):
        return Session.from_state(self.to_state())

    def __eq__(self, other):
        return isinstance(other, Session) and self.to_state() == other.to_state()

    def __repr__(self):
        return (f"Session(map={self.current_map}, location={self.current_location}, "
                f"inventory={self.inventory!r}, flags={self.flags!r})")
