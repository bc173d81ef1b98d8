"""Exception hierarchy for dirkit.

Precondition failures (binding an entity, starting a walk on a bad
root, loading config) raise one of these. Per-entry failures during a
walk or copy are captured in the returned result instead.
"""


class DirkitError(Exception):
    """Base exception for all dirkit errors."""


class EntityError(DirkitError):
    """Base exception for entity binding errors."""


class PathNotFoundError(EntityError):
    """Raised when an entity is bound to a path that does not exist."""


class WrongKindError(EntityError):
    """Raised when a path exists but is not the kind the entity expects.

    A file entity rejects directories; a folder entity rejects anything
    that is not a directory.
    """


class AttributeReadError(EntityError):
    """Raised when any attribute of a path cannot be read during binding."""


class StructuralWalkError(DirkitError):
    """Raised when a walk cannot start because its root is invalid."""


class ConfigError(DirkitError):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""
