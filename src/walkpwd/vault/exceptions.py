"""
Vault exceptions for walkpwd.

Hard failures of the vault lifecycle and the record store.
"""


class VaultError(Exception):
    """Base exception for vault errors."""

    pass


class InitializationError(VaultError):
    """Vault directory, marker or record file could not be created."""

    pass


class NotInitializedError(VaultError):
    """A command that needs an initialized vault ran before init."""

    pass


class StoreError(VaultError):
    """Base exception for record store errors."""

    pass


class DuplicateEntryError(StoreError):
    """An entry with the same name already exists."""

    def __init__(self, name: str):
        super().__init__(f"Password entry for '{name}' already exists.")
        self.name = name


class SerializationError(StoreError):
    """The record file does not hold a valid list of entries."""

    pass


class VaultIOError(StoreError):
    """The record file could not be read or written."""

    pass
