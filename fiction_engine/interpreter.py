"""
Command Dispatcher.

Splits a raw command into verb and target, runs the built-in verb handlers
(`verb_<name>` methods) and falls back to the per-focal-point custom aliases.
This is the only entry point that mutates the Session during play, and it
never raises for player input: every failure is an output line.
"""
import logging
import re

from .director import Director
from .game_io import GameIO
from .navigation import available_locations
from .session import Session
from .visibility import current_location, flags_match, scene_item_ids, visible_focal_points, visible_items
from .world import EventKind

logger = logging.getLogger(__name__)

STANDARD_VERBS = ('look', 'examine', 'interact', 'move', 'inventory', 'use', 'take', 'help')

USE_PATTERN = re.compile(r'use\s+(.+?)\s+on\s+(.+)', re.IGNORECASE)

UNKNOWN_COMMAND = "I don't understand that command."
NOT_HERE = "You don't see that here."
CANT_GO = "You can't go there from here."

HELP_TEXT = """Available commands:
  look - Look around the current location
  examine [object] - Examine an object closely
  interact [object] - Interact with an object
  move - List available locations to move to
  move [location] - Move to a specific location
  inventory - Check your inventory
  use [item] on [object] - Use an item on an object
  take [item] - Take an item
  help - Show this help message

Custom commands are available for certain objects - try different verbs!"""


def find_by_name(candidates, name, partial=False):
    """Exact (case-insensitive) match first; then, if `partial`, the first name containing `name`."""
    if not name:
        return None
    name = name.lower()
    for obj in candidates:
        if obj.name.lower() == name:
            return obj
    if partial:
        for obj in candidates:
            if name in obj.name.lower():
                return obj
    return None


def target_matches(target, point_name):
    """An empty target matches every focal point; otherwise it must appear in the name."""
    return target in point_name.lower()


class Interpreter:
    def __init__(self, world, session=None):
        self.world = world
        self.session = session if session is not None else Session.new(world)
        self.director = Director(world, self.session)
        self.io = GameIO()

    # ==========================================================
    # ENTRY POINTS
    # ==========================================================
    def handle_command(self, raw):
        """Runs one player command and returns the lines it produced."""
        self.io.start_turn()
        text = raw.lower().strip()
        words = text.split()
        verb = words[0] if words else ''
        target = ' '.join(words[1:])
        logger.debug("Command %r -> verb=%r target=%r", raw, verb, target)

        try:
            if verb in STANDARD_VERBS:
                getattr(self, f"verb_{verb}")(target, text)
            else:
                self.run_alias(verb, target)
        except Exception as e:
            logger.exception("Command %r failed", raw)
            self.io.write(f"Something went wrong: {e}")

        output = self.io.turn_output()
        logger.debug("Command %r produced %d line(s)", raw, len(output))
        return output

    def opening(self):
        """The lines shown when a game starts."""
        location = current_location(self.world, self.session)
        game_map = self.world.maps[self.session.current_map]
        return [
            game_map.introduction,
            f"Location: {location.name}\n{location.description}",
            '',
            'Type "help" for available commands.',
        ]

    def get_state(self):
        return self.session.to_state()

    def load_state(self, state):
        self.session.load_state(state)

    # ==========================================================
    # CUSTOM ALIASES
    # ==========================================================
    def run_alias(self, verb, target):
        """First visible focal point / alias pair matching the verb wins, satisfied or not."""
        for point in visible_focal_points(self.world, self.session):
            if not point.aliases:
                continue
            if not target_matches(target, point.name):
                continue
            for alias in point.aliases:
                if not alias.matches_verb(verb):
                    continue

                missing = [i for i in alias.required_items if not self.session.has_item(i)]
                if missing:
                    names = [self.world.item_name(i) for i in missing]
                    self.io.write(f"You need {' and '.join(names)} to do that.")
                    return
                if alias.required_flags and not flags_match(alias.required_flags, self.session):
                    self.io.write("You can't do that right now.")
                    return

                self.io.write_lines(self.director.run_actions(alias.actions))
                return

        self.io.write(UNKNOWN_COMMAND)

    # ==========================================================
    # STANDARD VERBS
    # ==========================================================

    # --- LOOK ---
    def verb_look(self, target, text):
        location = current_location(self.world, self.session)
        self.io.write(location.description)

        points = visible_focal_points(self.world, self.session)
        if points:
            self.io.write("You can see:")
            for point in points:
                self.io.write(f"- {point.name}")

        items = visible_items(self.world, self.session)
        if items:
            self.io.write("Items in the area:")
            for item in items:
                self.io.write(f"- {item.name}")

    # --- EXAMINE ---
    def verb_examine(self, target, text):
        point = find_by_name(visible_focal_points(self.world, self.session), target)
        self.io.write(point.description if point else NOT_HERE)

    # --- INTERACT ---
    def verb_interact(self, target, text):
        point = find_by_name(visible_focal_points(self.world, self.session), target)
        if not point:
            self.io.write(NOT_HERE)
            return
        event = point.first_event(EventKind.INTERACT)
        if not event:
            self.io.write("Nothing happens.")
            return
        self.io.write_lines(self.director.run_event(event))

    # --- MOVE ---
    def verb_move(self, target, text):
        destinations = available_locations(self.world, self.session)
        if not target:
            if not destinations:
                self.io.write("There's nowhere you can go from here.")
                return
            self.io.write("You can go to:")
            for dest in destinations:
                self.io.write(f"- {dest.name} (via {dest.via})")
            return

        dest = find_by_name(destinations, target)
        if dest is None:
            self.io.write(CANT_GO)
            return
        self.io.write_lines(self.move_to_location(dest.index))

    def move_to_location(self, location_index):
        if location_index not in [d.index for d in available_locations(self.world, self.session)]:
            return [CANT_GO]
        self.session.current_location = location_index
        location = current_location(self.world, self.session)
        return [f"Location: {location.name}\n{location.description}"]

    # --- INVENTORY ---
    def carried_items(self):
        items = []
        for item_id in self.session.inventory:
            item = self.world.get_item(item_id)
            if item is not None:
                items.append(item)
        return items

    def verb_inventory(self, target, text):
        items = self.carried_items()
        if not items:
            self.io.write("You're not carrying anything.")
            return
        self.io.write("You are carrying:")
        for item in items:
            self.io.write(f"- {item.name}")

    # --- TAKE ---
    def verb_take(self, target, text):
        item = find_by_name(visible_items(self.world, self.session), target, partial=True)
        if item is None:
            # a scene item that has already been picked up
            scene = [self.world.get_item(i) for i in scene_item_ids(self.world, self.session)]
            if find_by_name([i for i in scene if i is not None], target, partial=True):
                self.io.write("You can't take that.")
            else:
                self.io.write(NOT_HERE)
            return

        if self.session.take_item(item.id):
            self.io.write(f"You take the {item.name}.")
        else:
            self.io.write("You can't take that.")

    # --- USE ---
    def verb_use(self, target, text):
        match = USE_PATTERN.match(text)
        if not match:
            self.io.write("Use what on what? (Format: use [item] on [object])")
            return
        item_name, target_name = match.group(1).strip(), match.group(2).strip()

        item = find_by_name(self.carried_items(), item_name)
        if item is None:
            self.io.write(f"You don't have a {item_name}.")
            return

        points = visible_focal_points(self.world, self.session)
        point = find_by_name(points, target_name)
        if point is not None:
            self.io.write_lines(self.use_on_focal_point(item.id, point))
            return

        other = find_by_name(self.carried_items(), target_name)
        if other is not None:
            self.io.write_lines(self.use_with_item(item.id, other.id))
            return

        self.io.write(f"You don't see a {target_name} to use that on.")

    def use_on_focal_point(self, item_id, point):
        item = self.world.get_item(item_id)
        if item is None:
            return ["That item doesn't exist."]
        event = point.first_event(EventKind.USE_ITEM, item_id)
        if event is None:
            return [f"You can't use the {item.name} on that."]
        return self.director.run_event(event)

    def use_with_item(self, item_id, target_id):
        item = self.world.get_item(item_id)
        other = self.world.get_item(target_id)
        if item is None or other is None:
            return ["That item doesn't exist."]
        if not (self.session.has_item(item_id) and self.session.has_item(target_id)):
            return ["You need to have both items to use them together."]

        location = current_location(self.world, self.session)
        for point in location.focal_points:
            event = point.first_event(EventKind.USE_WITH_ITEM, item_id)
            if event is not None:
                return self.director.run_event(event)
        return [f"You can't use the {item.name} with the {other.name}."]

    # --- HELP ---
    def verb_help(self, target, text):
        self.io.write(HELP_TEXT)


def run_command(world, session, raw):
    """
    Runs one command against a copy of `session`.
    Returns (new_session, lines); the session passed in is left untouched.
    """
    new_session = session.copy()
    lines = Interpreter(world, new_session).handle_command(raw)
    return new_session, lines
