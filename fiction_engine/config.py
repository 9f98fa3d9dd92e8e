import os

import yaml
from dotenv import load_dotenv

from .errors import ConfigError

CONFIG_ENV = "FICTION_ENGINE_CONFIG"
WORLD_ENV = "FICTION_ENGINE_WORLD"
DEBUG_ENV = "FICTION_ENGINE_DEBUG"
DEFAULT_CONFIG_PATH = "config.yaml"

DEFAULTS = {
    'world_file': None,
    'save_file': 'savegame.json',
    'debug_mode': False,
    'show_introduction': True,
}

DEFAULT_YAML = """
# FICTION ENGINE CONFIGURATION
# ----------------------------
# world_file: path to a .json/.yaml world description.
# Leave it empty to play the bundled Blackwood Manor story.

world_file:
save_file: savegame.json
debug_mode: false
show_introduction: true
"""


def config_path():
    return os.getenv(CONFIG_ENV, DEFAULT_CONFIG_PATH)


def read_config_file(path):
    """The settings exactly as written in `path`, without defaults or environment overrides."""
    if not os.path.exists(path):
        return {}
    with open(path, "r") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {path}: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping of settings")
    return data


def load_config(path=None):
    """
    Loads config.yaml or creates default if missing.
    Values from the environment (.env included) win over the file.
    """
    load_dotenv()
    path = path or config_path()
    if not os.path.exists(path):
        with open(path, "w") as f:
            f.write(DEFAULT_YAML.strip() + "\n")

    config = dict(DEFAULTS)
    config.update(read_config_file(path))

    if os.getenv(WORLD_ENV):
        config['world_file'] = os.getenv(WORLD_ENV)
    if os.getenv(DEBUG_ENV, '').lower() in ('1', 'true', 'yes'):
        config['debug_mode'] = True
    return config


def save_config(config, path=None):
    path = path or config_path()
    with open(path, "w") as f:
        yaml.dump(config, f, default_flow_style=False)


def toggle_debug(debug_mode, path=None):
    """Writes `debug_mode` into the config file, leaving its other settings as the file has them."""
    path = path or config_path()
    settings = read_config_file(path)
    settings['debug_mode'] = debug_mode
    save_config(settings, path)
