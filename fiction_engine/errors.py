"""Exceptions raised at the loading boundary. Player input never raises."""


class FictionEngineError(Exception):
    """Base exception for the engine."""

    pass


class WorldFormatError(FictionEngineError):
    """World document can't be parsed or its Items/Maps aren't lists."""

    pass


class SessionFormatError(FictionEngineError):
    """Session snapshot is not shaped like one."""

    pass


class ConfigError(FictionEngineError):
    """Configuration file is malformed."""

    pass
