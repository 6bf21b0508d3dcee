"""
Vault record store for walkpwd.

Owns the on-disk record file. Every mutation loads the whole collection,
changes it in memory and rewrites the file in full. There is no file lock:
two processes writing the same vault concurrently can lose updates.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from walkpwd.storage.paths import get_vault_path, get_walkpwd_home
from walkpwd.vault.exceptions import (
    DuplicateEntryError,
    SerializationError,
    StoreError,
    VaultIOError,
)
from walkpwd.vault.models import Entry, EntryList

logger = logging.getLogger(__name__)


class VaultStore:
    """
    File-backed collection of password entries.

    A missing record file reads as an empty vault. Malformed content is
    never repaired: it raises SerializationError.
    """

    def __init__(self, vault_dir: Path | None = None):
        """
        Initialize the store.

        Args:
            vault_dir: Directory holding vault.json. Defaults to the walkpwd home.
        """
        if vault_dir is None:
            vault_dir = get_walkpwd_home()

        self.vault_dir = Path(vault_dir)

    @property
    def vault_path(self) -> Path:
        """Path to the record file."""
        return get_vault_path(self.vault_dir)

    def load(self) -> list[Entry]:
        """
        Load every entry from disk.

        Returns:
            Entries in storage order. Empty if the file does not exist.

        Raises:
            SerializationError: If the file is not a JSON list of entries.
            VaultIOError: If the file exists but cannot be read.
        """
        path = self.vault_path
        if not path.exists():
            logger.debug(f"No vault file at {path}, treating as empty")
            return []

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise VaultIOError(f"Cannot read {path}: {e}") from e

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise SerializationError(f"Invalid JSON in {path}: {e}") from e

        try:
            return EntryList.validate_python(data)
        except ValidationError as e:
            raise SerializationError(
                f"{path} does not contain a list of name/password records"
            ) from e

    def save(self, entries: list[Entry]) -> None:
        """
        Overwrite the record file with the given entries.

        The data is written to a temporary file in the vault directory and
        moved over vault.json, so readers never see a partial file.

        Args:
            entries: Full collection to persist.

        Raises:
            VaultIOError: If the file cannot be written.
        """
        path = self.vault_path
        content = json.dumps(EntryList.dump_python(entries), indent=2)

        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=self.vault_dir, prefix=".vault-", suffix=".tmp"
            )
        except OSError as e:
            raise VaultIOError(f"Cannot write {path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, path)
        except OSError as e:
            Path(tmp_name).unlink(missing_ok=True)
            raise VaultIOError(f"Cannot write {path}: {e}") from e

        logger.debug(f"Saved {len(entries)} entries to {path}")

    def add(self, name: str, password: str) -> str:
        """
        Add a new entry.

        Args:
            name: Unique entry name.
            password: Secret to store.

        Returns:
            The stored password, for the caller to hand to the clipboard.

        Raises:
            DuplicateEntryError: If the name is already used. Nothing is written.
            StoreError: If the name is empty.
        """
        entries = self.load()

        if any(entry.name == name for entry in entries):
            raise DuplicateEntryError(name)

        try:
            entry = Entry(name=name, password=password)
        except ValidationError as e:
            raise StoreError(f"Invalid entry name: {name!r}") from e

        entries.append(entry)
        self.save(entries)
        logger.info(f"Added entry: {name}")
        return password

    def find(self, name: str) -> Entry | None:
        """
        Look up an entry by exact name.

        Returns:
            The entry, or None if not found.
        """
        return next((entry for entry in self.load() if entry.name == name), None)

    def delete(self, name: str) -> bool:
        """
        Delete an entry.

        Returns:
            True if deleted, False if not found (the file is left untouched).
        """
        entries = self.load()
        remaining = [entry for entry in entries if entry.name != name]

        if len(remaining) == len(entries):
            logger.debug(f"No entry named {name} to delete")
            return False

        self.save(remaining)
        logger.info(f"Deleted entry: {name}")
        return True

    def list(self) -> list[str]:
        """
        List entry names in storage order.

        Returns:
            Entry names. Empty for an empty or missing vault.
        """
        return [entry.name for entry in self.load()]
