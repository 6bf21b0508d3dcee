"""
Vault lifecycle for walkpwd.

Creates the vault directory, the initialization marker and an empty
record file. The marker gates every command except init; the record file
holds the data. The two are managed independently.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from walkpwd.storage.paths import ensure_directory, get_marker_path, get_walkpwd_home
from walkpwd.vault.exceptions import InitializationError, NotInitializedError, VaultError
from walkpwd.vault.store import VaultStore

logger = logging.getLogger(__name__)

MARKER_CONTENT = b"initialized"


@dataclass
class InitResult:
    """Outcome of an init call."""

    vault_dir: Path
    created_marker: bool = False
    created_vault: bool = False
    reset_vault: bool = False

    @property
    def already_initialized(self) -> bool:
        """True when init found everything in place and changed nothing."""
        return not (self.created_marker or self.created_vault or self.reset_vault)


class VaultLifecycle:
    """Initializes the vault's on-disk presence and reports on it."""

    def __init__(self, vault_dir: Path | None = None):
        self.vault_dir = Path(vault_dir) if vault_dir is not None else get_walkpwd_home()
        self.store = VaultStore(self.vault_dir)

    @property
    def marker_path(self) -> Path:
        return get_marker_path(self.vault_dir)

    def is_initialized(self) -> bool:
        """Check whether the marker file exists."""
        return self.marker_path.exists()

    def require_initialized(self) -> None:
        """
        Raise if the vault has not been initialized.

        Raises:
            NotInitializedError: If the marker is missing.
        """
        if not self.is_initialized():
            raise NotInitializedError(
                "Vault is not initialized. Please run 'walkpwd init' first."
            )

    def init(self, overwrite: bool = False) -> InitResult:
        """
        Initialize the vault. Safe to call repeatedly.

        An existing record file is kept as is. Pass overwrite=True only after
        the user explicitly confirmed that stored entries may be discarded.

        Args:
            overwrite: Replace an existing record file with an empty one.

        Returns:
            What was created or reset.

        Raises:
            InitializationError: If the directory or files cannot be created.
        """
        result = InitResult(vault_dir=self.vault_dir)

        try:
            ensure_directory(self.vault_dir)

            if not self.marker_path.exists():
                self.marker_path.write_bytes(MARKER_CONTENT)
                result.created_marker = True
                logger.info(f"Created vault marker at {self.marker_path}")
        except OSError as e:
            raise InitializationError(
                f"Cannot initialize vault in {self.vault_dir}: {e}"
            ) from e

        vault_exists = self.store.vault_path.exists()
        if vault_exists and not overwrite:
            logger.debug(f"Keeping existing vault file {self.store.vault_path}")
            return result

        try:
            self.store.save([])
        except VaultError as e:
            raise InitializationError(str(e)) from e

        if vault_exists:
            result.reset_vault = True
            logger.warning(f"Reset vault file {self.store.vault_path}")
        else:
            result.created_vault = True
            logger.info(f"Created empty vault file {self.store.vault_path}")

        return result
