"""Exceptions raised by playnet."""


class PlaynetError(Exception):
    """Base class for every error playnet raises on purpose."""


class ValidationError(PlaynetError, ValueError):
    """An argument failed a check made before any network state was touched."""
