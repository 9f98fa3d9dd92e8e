"""
A runtime for declaratively authored interactive fiction.

    world = load_sample_world()
    game = Interpreter(world)
    game.handle_command("look")
"""
from .errors import ConfigError, FictionEngineError, SessionFormatError, WorldFormatError
from .interpreter import Interpreter, run_command
from .loader import load_sample_world, load_world, parse_world
from .navigation import Destination, available_locations
from .persistence import load_session, save_session
from .session import Session
from .visibility import visible_focal_points, visible_items
from .world import (
    Action,
    AddItemToScene,
    CommandAlias,
    DisplayMessage,
    Event,
    EventKind,
    FocalPoint,
    Flag,
    GameMap,
    Item,
    Location,
    MoveToLocation,
    RemoveItemFromInventory,
    SetFlag,
    World,
)

__all__ = [
    "Action",
    "AddItemToScene",
    "CommandAlias",
    "ConfigError",
    "Destination",
    "DisplayMessage",
    "Event",
    "EventKind",
    "FictionEngineError",
    "Flag",
    "FocalPoint",
    "GameMap",
    "Interpreter",
    "Item",
    "Location",
    "MoveToLocation",
    "RemoveItemFromInventory",
    "Session",
    "SessionFormatError",
    "SetFlag",
    "World",
    "WorldFormatError",
    "available_locations",
    "load_sample_world",
    "load_session",
    "load_world",
    "parse_world",
    "run_command",
    "save_session",
    "visible_focal_points",
    "visible_items",
]
