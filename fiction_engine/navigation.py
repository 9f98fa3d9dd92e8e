"""
Navigation Resolver.

There is no adjacency table: exits are whatever MoveToLocation actions the
currently visible focal points' events would run. Computed on demand.
"""
import logging
from collections import namedtuple

from .visibility import visible_focal_points
from .world import MoveToLocation

logger = logging.getLogger(__name__)

Destination = namedtuple('Destination', ['index', 'name', 'via'])


def available_locations(world, session):
    """
    Scans visible focal points -> events -> actions for moves.
    Returns Destinations in scan order; duplicates are kept.
    """
    destinations = []
    for point in visible_focal_points(world, session):
        for event in point.events:
            for action in event.actions:
                if not isinstance(action, MoveToLocation):
                    continue
                target = world.find_location(session.current_map, action.location_index)
                if target is None:
                    logger.warning("%r moves to location %d, which doesn't exist", point.name, action.location_index)
                    continue
                destinations.append(Destination(action.location_index, target.name, point.name))
    return destinations
