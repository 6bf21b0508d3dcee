"""Tests for the vault record store."""

import json
from pathlib import Path

import pytest

from walkpwd.vault import (
    DuplicateEntryError,
    Entry,
    SerializationError,
    StoreError,
    VaultLifecycle,
    VaultStore,
)


@pytest.fixture
def store(initialized_vault: VaultLifecycle) -> VaultStore:
    """Provide a store backed by an initialized vault."""
    return initialized_vault.store


class TestVaultStoreReads:
    """Loading and lookups."""

    def test_missing_file_is_empty(self, temp_dir: Path) -> None:
        store = VaultStore(temp_dir)

        assert not store.vault_path.exists()
        assert store.load() == []
        assert store.list() == []
        assert store.find("github") is None

    def test_empty_array_matches_missing_file(self, temp_dir: Path) -> None:
        (temp_dir / "vault.json").write_text("[]")
        store = VaultStore(temp_dir)

        assert store.list() == []
        assert store.list() == VaultStore(temp_dir / "absent").list()

    def test_find_is_exact_and_case_sensitive(self, store: VaultStore) -> None:
        store.add("GitHub", "one")

        assert store.find("GitHub") == Entry(name="GitHub", password="one")
        assert store.find("github") is None
        assert store.find("Git") is None

    def test_list_keeps_insertion_order(self, store: VaultStore) -> None:
        for name in ["zeta", "alpha", "mid"]:
            store.add(name, "pw")

        assert store.list() == ["zeta", "alpha", "mid"]

    def test_reads_file_written_elsewhere(self, temp_dir: Path) -> None:
        records = [{"name": "a", "password": "1"}, {"name": "b", "password": "2"}]
        (temp_dir / "vault.json").write_text(json.dumps(records))

        store = VaultStore(temp_dir)
        assert store.list() == ["a", "b"]
        assert store.find("b").password == "2"


class TestVaultStoreMalformed:
    """Malformed record files are hard errors."""

    @pytest.mark.parametrize(
        "content",
        [
            "not json",
            '{"name": "a", "password": "b"}',
            '[{"name": "a"}]',
            '[{"name": "a", "password": 5}]',
            '["a", "b"]',
            '[{"name": "", "password": "x"}]',
        ],
    )
    def test_malformed_content_raises(self, temp_dir: Path, content: str) -> None:
        (temp_dir / "vault.json").write_text(content)
        store = VaultStore(temp_dir)

        with pytest.raises(SerializationError):
            store.load()

    def test_malformed_file_is_not_repaired(self, temp_dir: Path) -> None:
        path = temp_dir / "vault.json"
        path.write_text("{broken")
        store = VaultStore(temp_dir)

        with pytest.raises(SerializationError):
            store.add("github", "pw")

        assert path.read_text() == "{broken"


class TestVaultStoreMutations:
    """Add and delete."""

    def test_add_then_find_round_trip(self, store: VaultStore) -> None:
        returned = store.add("github", "Sup3r$ecret")

        assert returned == "Sup3r$ecret"
        assert store.find("github") == Entry(name="github", password="Sup3r$ecret")

    def test_add_persists_json_records(self, store: VaultStore) -> None:
        store.add("github", "pw1")
        store.add("mail", "pw2")

        data = json.loads(store.vault_path.read_text())
        assert data == [
            {"name": "github", "password": "pw1"},
            {"name": "mail", "password": "pw2"},
        ]

    def test_add_duplicate_raises_without_mutation(self, store: VaultStore) -> None:
        store.add("github", "first")
        before = store.vault_path.read_bytes()

        with pytest.raises(DuplicateEntryError) as exc_info:
            store.add("github", "second")

        assert exc_info.value.name == "github"
        assert store.vault_path.read_bytes() == before
        assert store.list() == ["github"]
        assert store.find("github").password == "first"

    def test_names_differing_in_case_are_distinct(self, store: VaultStore) -> None:
        store.add("github", "a")
        store.add("GitHub", "b")

        assert store.list() == ["github", "GitHub"]

    def test_delete_existing(self, store: VaultStore) -> None:
        store.add("a", "1")
        store.add("b", "2")
        store.add("c", "3")

        assert store.delete("b") is True
        assert store.list() == ["a", "c"]
        assert store.find("b") is None

    def test_delete_absent_leaves_file_unchanged(self, store: VaultStore) -> None:
        store.add("github", "pw")
        before = store.vault_path.read_bytes()

        assert store.delete("nonexistent") is False
        assert store.vault_path.read_bytes() == before

    def test_delete_on_missing_file_does_not_create_it(self, temp_dir: Path) -> None:
        store = VaultStore(temp_dir)

        assert store.delete("github") is False
        assert not store.vault_path.exists()

    def test_save_leaves_no_temporary_files(self, store: VaultStore) -> None:
        store.add("a", "1")
        store.add("b", "2")
        store.delete("a")

        files = sorted(p.name for p in store.vault_dir.iterdir())
        assert files == ["vault.json", "vault_initialized.flag"]

    def test_unicode_passwords_survive(self, store: VaultStore) -> None:
        store.add("wifi", "pässwörd-密码")

        assert store.find("wifi").password == "pässwörd-密码"

    def test_empty_name_is_rejected(self, store: VaultStore) -> None:
        with pytest.raises(StoreError):
            store.add("", "pw")

        assert store.list() == []
