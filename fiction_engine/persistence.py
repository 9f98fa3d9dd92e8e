"""Session snapshots on disk. Loading replaces the whole session."""
import json
import logging

from .errors import SessionFormatError
from .session import Session

logger = logging.getLogger(__name__)


def save_session(session, path):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(session.to_state(), f)
    logger.debug("Saved session to %s", path)


def load_session(path):
    """Raises FileNotFoundError when there's no save, SessionFormatError when it's unreadable."""
    with open(path, 'r', encoding='utf-8') as f:
        try:
            state = json.load(f)
        except json.JSONDecodeError as e:
            raise SessionFormatError(f"Save file {path} is not valid JSON: {e}") from e
    logger.debug("Loaded session from %s", path)
    return Session.from_state(state)
