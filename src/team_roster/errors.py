"""Error taxonomy for the roster core.

Every failure the core knows how to describe is a ``RosterError`` subclass
carrying an ``ErrorKind`` and a message that can be shown to the user as-is.
Anything else reaching a caller is a generic failure and should be reported
with a generic message.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable kind of a roster failure."""

    DUPLICATE_GROUP = "duplicate_group"
    GROUP_NOT_FOUND = "group_not_found"
    DUPLICATE_PLAYER = "duplicate_player"
    PLAYER_NOT_FOUND = "player_not_found"
    INVALID_INPUT = "invalid_input"
    CORRUPT_DATA = "corrupt_data"
    STORAGE = "storage"


class RosterError(Exception):
    """Base class for all known roster failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateGroupError(RosterError):
    kind = ErrorKind.DUPLICATE_GROUP

    def __init__(self, group_name: str):
        super().__init__("A group with this name already exists.")
        self.group_name = group_name


class GroupNotFoundError(RosterError):
    kind = ErrorKind.GROUP_NOT_FOUND

    def __init__(self, group_name: str):
        super().__init__(f"Group '{group_name}' was not found.")
        self.group_name = group_name


class DuplicatePlayerError(RosterError):
    kind = ErrorKind.DUPLICATE_PLAYER

    def __init__(self, player_name: str, group_name: str):
        super().__init__("This person is already in a team of this group.")
        self.player_name = player_name
        self.group_name = group_name


class PlayerNotFoundError(RosterError):
    kind = ErrorKind.PLAYER_NOT_FOUND

    def __init__(self, player_name: str, group_name: str):
        super().__init__(f"'{player_name}' is not part of group '{group_name}'.")
        self.player_name = player_name
        self.group_name = group_name


class InvalidInputError(RosterError):
    """Blank names or unknown team labels."""

    kind = ErrorKind.INVALID_INPUT


class CorruptDataError(RosterError):
    """Stored value does not match the schema expected for its key."""

    kind = ErrorKind.CORRUPT_DATA

    def __init__(self, message: str, key: str | None = None):
        super().__init__(message)
        self.key = key


class StorageError(RosterError):
    """The storage substrate failed; the original fault is ``__cause__``."""

    kind = ErrorKind.STORAGE

    def __init__(self, operation: str, key: str):
        super().__init__(f"Storage {operation} failed for key '{key}'.")
        self.operation = operation
        self.key = key
