"""
walkpwd vault.

Record storage, lifecycle and password generation.
"""

from walkpwd.vault.exceptions import (
    DuplicateEntryError,
    InitializationError,
    NotInitializedError,
    SerializationError,
    StoreError,
    VaultError,
    VaultIOError,
)
from walkpwd.vault.generator import (
    GenerationError,
    PasswordGenerator,
    PasswordPolicy,
    generate_password,
)
from walkpwd.vault.lifecycle import InitResult, VaultLifecycle
from walkpwd.vault.models import Entry
from walkpwd.vault.store import VaultStore

__all__ = [
    "DuplicateEntryError",
    "Entry",
    "GenerationError",
    "InitResult",
    "InitializationError",
    "NotInitializedError",
    "PasswordGenerator",
    "PasswordPolicy",
    "SerializationError",
    "StoreError",
    "VaultError",
    "VaultIOError",
    "VaultLifecycle",
    "VaultStore",
    "generate_password",
]
