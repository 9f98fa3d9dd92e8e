import logging

from .visibility import visible_focal_points
from .world import EventKind

logger = logging.getLogger(__name__)


class Director:
    def __init__(self, world, session):
        """
        The Director is the STATE MACHINE.
        It runs Event and Alias action lists against the Session and
        collects the lines they emit. It never parses player input.
        """
        self.world = world
        self.session = session

    # ==========================================================
    # 1. EVENTS
    # ==========================================================
    def execute_event(self, focal_point_index, event_index):
        """
        Runs event `event_index` of the `focal_point_index`-th *visible* focal point.
        Out-of-range indexes produce no output.
        """
        points = visible_focal_points(self.world, self.session)
        if not 0 <= focal_point_index < len(points):
            return []
        events = points[focal_point_index].events
        if not 0 <= event_index < len(events):
            return []
        return self.run_event(events[event_index])

    def run_event(self, event):
        if event.kind == EventKind.USE_ITEM and not event.item_id:
            logger.warning("Use-item event without an ItemId; skipping its actions")
            return ["This event requires an item."]
        return self.run_actions(event.actions)

    # ==========================================================
    # 2. ACTIONS
    # ==========================================================
    def run_actions(self, actions):
        messages = []
        for action in actions:
            messages.extend(self.execute_action(action))
        return messages

    def execute_action(self, action):
        """Master Router: Action -> handler. Returns the lines it emits."""
        handler = getattr(self, f"_do_{action.kind}", None)
        if handler is None:
            logger.warning("No handler for action %r", action)
            return []
        logger.debug("Executing %r", action)
        return handler(action)

    def _do_display_message(self, action):
        return [action.text]

    def _do_add_item_to_scene(self, action):
        self.session.spawned_items[action.item_id] = True
        location = self.world.get_location(self.session.current_map, self.session.current_location)
        if action.item_id not in location.items:
            self.session.add_scene_item(action.item_id)
        return []

    def _do_remove_item_from_inventory(self, action):
        self.session.remove_item(action.item_id)
        return []

    def _do_move_to_location(self, action):
        # trusts the author: no bounds or visibility check
        self.session.current_location = action.location_index
        return []

    def _do_set_flag(self, action):
        self.session.set_flag(action.name, action.value)
        return []
