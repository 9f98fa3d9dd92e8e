"""
Loading world descriptions.

Accepts the editor's JSON export or the same structure written as YAML.
Only the top-level shape is checked here (Items and Maps must be lists);
anything deeper is decoded leniently by world.py.
"""
import json
import logging
import os

import yaml

from .errors import WorldFormatError
from .world import World

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')
SAMPLE_WORLD = os.path.join(DATA_DIR, 'blackwood_manor.yaml')


def parse_world(data):
    if not isinstance(data, dict):
        raise WorldFormatError(f"World description must be a mapping, got {type(data).__name__}")
    for key in ('Items', 'Maps'):
        if not isinstance(data.get(key), list):
            raise WorldFormatError(f"World description needs a list under '{key}'")
    return World(data)


def read_document(path):
    ext = os.path.splitext(path)[1].lower()
    with open(path, 'r', encoding='utf-8') as f:
        try:
            if ext == '.json':
                return json.load(f)
            if ext in ('.yaml', '.yml'):
                return yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise WorldFormatError(f"Failed to parse {path}: {e}") from e
    raise WorldFormatError(f"Unsupported file format: {ext or path}. Use .json, .yaml or .yml")


def load_world(path):
    """
    Reads and validates a world file.
    Raises FileNotFoundError if it doesn't exist, WorldFormatError if it isn't a world.
    """
    world = parse_world(read_document(path))
    logger.debug("Loaded world from %s: %d item(s), %d map(s)", path, len(world.items), len(world.maps))
    return world


def load_sample_world():
    """The bundled Blackwood Manor story."""
    return load_world(SAMPLE_WORLD)
