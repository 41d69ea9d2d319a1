import json
import sys
import unittest
from pathlib import Path

_BACKEND_ROOT = Path(__file__).resolve().parents[1] / "backend"
if str(_BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(_BACKEND_ROOT))

from domain.watchlist import ToggleResult
from infrastructure.persistence.local_storage import (
    InMemoryKeyValueStorage,
    JsonKeyValueStore,
    LocalWatchlistStore,
)

EMAIL = "test@example.com"
KEY = "movieTrack.watchlist.test@example.com"


class _CountingStorage(InMemoryKeyValueStorage):
    def __init__(self) -> None:
        super().__init__()
        self.writes = 0

    def set_item(self, key: str, value: str) -> None:
        self.writes += 1
        super().set_item(key, value)


class TestLocalWatchlistStore(unittest.TestCase):
    def setUp(self) -> None:
        self.storage = _CountingStorage()
        self.store = LocalWatchlistStore(JsonKeyValueStore(self.storage))

    def test_fresh_storage_returns_empty_list(self):
        self.assertEqual(self.store.get("a@b.com"), [])

    def test_returns_stored_list(self):
        self.storage.set_item(KEY, json.dumps([1, 2, 3]))
        self.assertEqual(self.store.get(EMAIL), [1, 2, 3])

    def test_corrupted_data_returns_empty_list(self):
        self.storage.set_item(KEY, "invalid json")
        self.assertEqual(self.store.get(EMAIL), [])

    def test_non_list_payload_returns_empty_list(self):
        self.storage.set_item(KEY, json.dumps({"ids": [1]}))
        self.assertEqual(self.store.get(EMAIL), [])

    def test_non_integer_elements_are_filtered(self):
        self.storage.set_item(KEY, json.dumps([1, "2", None, 3.5, True, 4]))
        self.assertEqual(self.store.get(EMAIL), [1, 4])

    def test_email_casing_resolves_to_same_list(self):
        self.store.set("Test@Example.COM", [7, 8])
        self.assertEqual(self.store.get("test@example.com"), [7, 8])
        self.assertEqual(self.store.get("TEST@EXAMPLE.COM"), [7, 8])
        self.assertIsNotNone(self.storage.get_item(KEY))

    def test_set_removes_duplicates_keeping_first_occurrence(self):
        self.store.set(EMAIL, [1, 2, 2, 3, 3])
        self.assertEqual(json.loads(self.storage.get_item(KEY)), [1, 2, 3])

        self.store.set(EMAIL, [3, 1, 3, 2, 1])
        self.assertEqual(self.store.get(EMAIL), [3, 1, 2])

    def test_add_to_empty_and_existing(self):
        self.assertEqual(self.store.add(EMAIL, 123), [123])
        self.store.set(EMAIL, [1, 2])
        self.assertEqual(self.store.add(EMAIL, 3), [1, 2, 3])

    def test_add_is_idempotent_and_skips_write(self):
        self.store.set(EMAIL, [1, 2, 3])
        writes = self.storage.writes
        self.assertEqual(self.store.add(EMAIL, 2), [1, 2, 3])
        self.assertEqual(self.storage.writes, writes)

        once = self.store.add(EMAIL, 9)
        twice = self.store.add(EMAIL, 9)
        self.assertEqual(once, twice)
        self.assertEqual(self.store.get(EMAIL), [1, 2, 3, 9])

    def test_remove(self):
        self.store.set(EMAIL, [1, 2, 3])
        self.assertEqual(self.store.remove(EMAIL, 2), [1, 3])
        self.assertEqual(self.store.get(EMAIL), [1, 3])

    def test_remove_non_member_keeps_list_but_still_writes(self):
        self.store.set(EMAIL, [1, 2, 3])
        writes = self.storage.writes
        self.assertEqual(self.store.remove(EMAIL, 999), [1, 2, 3])
        self.assertEqual(self.storage.writes, writes + 1)

    def test_contains(self):
        self.store.set(EMAIL, [1, 2, 3])
        self.assertTrue(self.store.contains(EMAIL, 2))
        self.assertFalse(self.store.contains(EMAIL, 999))

    def test_toggle_removes_member(self):
        self.store.set("a@b.com", [1, 2, 3])
        result = self.store.toggle("a@b.com", 2)
        self.assertEqual(result, ToggleResult(watchlist=[1, 3], is_added=False))
        self.assertEqual(self.store.get("a@b.com"), [1, 3])

    def test_toggle_adds_on_empty_storage(self):
        result = self.store.toggle("new@x.com", 42)
        self.assertEqual(result.watchlist, [42])
        self.assertTrue(result.is_added)

    def test_toggle_twice_restores_membership(self):
        self.store.set(EMAIL, [5, 6])
        first = self.store.toggle(EMAIL, 7)
        second = self.store.toggle(EMAIL, 7)
        self.assertTrue(first.is_added)
        self.assertFalse(second.is_added)
        self.assertEqual(second.watchlist, [5, 6])

        third = self.store.toggle(EMAIL, 5)
        fourth = self.store.toggle(EMAIL, 5)
        self.assertEqual(sorted(fourth.watchlist), [5, 6])
        self.assertFalse(third.is_added)
        self.assertTrue(fourth.is_added)

    def test_toggle_writes_once(self):
        self.store.set(EMAIL, [1])
        writes = self.storage.writes
        self.store.toggle(EMAIL, 1)
        self.assertEqual(self.storage.writes, writes + 1)

    def test_clear_removes_key(self):
        self.store.set(EMAIL, [1, 2, 3])
        self.store.clear(EMAIL)
        self.assertIsNone(self.storage.get_item(KEY))
        self.assertEqual(self.store.get(EMAIL), [])

    def test_users_do_not_share_lists(self):
        self.store.add("one@x.com", 1)
        self.store.add("two@x.com", 2)
        self.assertEqual(self.store.get("one@x.com"), [1])
        self.assertEqual(self.store.get("two@x.com"), [2])

    def test_without_substrate_reads_empty(self):
        store = LocalWatchlistStore(JsonKeyValueStore(None))
        self.assertEqual(store.add(EMAIL, 1), [1])
        self.assertEqual(store.get(EMAIL), [])
        self.assertTrue(store.toggle(EMAIL, 1).is_added)


if __name__ == "__main__":
    unittest.main()
