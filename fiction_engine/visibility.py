"""
Visibility Resolver.

Pure functions of (world, session): which focal points and items the player
can currently observe in the current location.
"""


def flags_match(flags, session):
    """True when every flag equals its current session value (absent reads as False)."""
    return all(session.flag(flag.name) == flag.value for flag in flags)


def current_location(world, session):
    return world.get_location(session.current_map, session.current_location)


def visible_focal_points(world, session):
    location = current_location(world, session)
    return [point for point in location.focal_points if not point.flags or flags_match(point.flags, session)]


def scene_item_ids(world, session):
    """Authored scene items followed by the ones added during play, without duplicates."""
    location = current_location(world, session)
    ids = list(location.items)
    for item_id in session.added_scene_items():
        if item_id not in ids:
            ids.append(item_id)
    return ids


def visible_items(world, session):
    items = []
    for item_id in scene_item_ids(world, session):
        if session.spawned_items.get(item_id) is not True:
            continue
        item = world.get_item(item_id)
        if item is not None:
            items.append(item)
    return items
