"""
Custom exceptions shared across layers.

Lookups that find nothing are NOT exceptions: repositories/service return None (or False for update/delete).
"""


class GameHubError(Exception):
    """Top-level exception for anything raised on purpose by this package."""


class InvalidRequestError(GameHubError):
    """Field constraints (length, range, requiredness) or paging arguments violated."""


class ConflictError(GameHubError):
    """Operation clashes with the current state of the catalog."""


class DuplicateTitleError(ConflictError):
    """Another game already uses this title."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f"A game with the title '{title}' already exists.")


class StorageError(GameHubError):
    """Backing store failed. The original driver exception is kept as __cause__."""
