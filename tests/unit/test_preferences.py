"""Unit tests for JSONPreferences."""

from __future__ import annotations

import pytest

from persistkit.providers.preferences import JSONPreferences
from tests.conftest import Person


class TestJSONPreferences:
    @pytest.fixture()
    def store(self) -> dict[str, bytes]:
        return {}

    @pytest.fixture()
    def prefs(self, store: dict[str, bytes]) -> JSONPreferences:
        return JSONPreferences(store)

    def test_missing_key_returns_none(self, prefs: JSONPreferences) -> None:
        assert prefs.get("theme") is None

    def test_missing_key_returns_default(self, prefs: JSONPreferences) -> None:
        assert prefs.get("theme", str, "light") == "light"

    def test_set_and_get(self, prefs: JSONPreferences, store: dict[str, bytes]) -> None:
        prefs.set("dark", "theme")
        assert store == {"theme": b'"dark"'}
        assert prefs.get("theme", str) == "dark"
        assert "theme" in prefs

    def test_structured_value(self, prefs: JSONPreferences, person: Person) -> None:
        prefs.set(person, "owner")
        assert prefs.get("owner", Person) == person

    def test_keys_stored_as_strings(self, prefs: JSONPreferences, store: dict[str, bytes]) -> None:
        prefs.set(True, 5)
        assert store == {"5": b"true"}
        assert prefs.get(5, bool) is True

    def test_undecodable_value_returns_default(
        self, prefs: JSONPreferences, store: dict[str, bytes]
    ) -> None:
        store["size"] = b"{broken"
        assert prefs.get("size", int) is None
        assert prefs.get("size", int, 12) == 12

    def test_type_mismatch_returns_default(self, prefs: JSONPreferences) -> None:
        prefs.set("large", "size")
        assert prefs.get("size", int, 12) == 12

    def test_unencodable_value_clears_key(
        self, prefs: JSONPreferences, store: dict[str, bytes]
    ) -> None:
        prefs.set("dark", "theme")
        prefs.set(object(), "theme")
        assert "theme" not in store
        assert prefs.get("theme", str, "light") == "light"

    def test_remove(self, prefs: JSONPreferences) -> None:
        prefs.set(1, "count")
        prefs.remove("count")
        prefs.remove("count")
        assert "count" not in prefs

    def test_defaults_to_in_memory_store(self) -> None:
        prefs = JSONPreferences()
        prefs.set([1, 2], "recent")
        assert prefs.get("recent", list[int]) == [1, 2]
