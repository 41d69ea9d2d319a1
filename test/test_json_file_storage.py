import json
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

_BACKEND_ROOT = Path(__file__).resolve().parents[1] / "backend"
if str(_BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(_BACKEND_ROOT))

from infrastructure.persistence.local_storage import (
    JsonFileKeyValueStorage,
    JsonKeyValueStore,
    LocalAuthStore,
    LocalWatchlistStore,
)


class TestJsonFileKeyValueStorage(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.path = Path(self._tmp.name) / "nested" / "local_storage.json"
        self.storage = JsonFileKeyValueStorage(self.path)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_missing_file_reads_empty(self):
        self.assertIsNone(self.storage.get_item("k"))
        self.storage.remove_item("k")
        self.assertFalse(self.path.exists())

    def test_set_creates_file_and_parent(self):
        self.storage.set_item("k", "[1]")
        self.assertTrue(self.path.exists())
        self.assertEqual(json.loads(self.path.read_text(encoding="utf-8")), {"k": "[1]"})
        self.assertEqual(self.storage.get_item("k"), "[1]")

    def test_remove_and_clear(self):
        self.storage.set_item("a", "1")
        self.storage.set_item("b", "2")
        self.storage.remove_item("a")
        self.assertIsNone(self.storage.get_item("a"))
        self.assertEqual(self.storage.get_item("b"), "2")
        self.storage.clear()
        self.assertIsNone(self.storage.get_item("b"))

    def test_corrupt_file_reads_empty(self):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text("{not json", encoding="utf-8")
        with self.assertLogs("infrastructure.persistence.local_storage.json_file_storage", level="WARNING"):
            self.assertIsNone(self.storage.get_item("k"))

    def test_state_survives_a_new_instance(self):
        json_store = JsonKeyValueStore(self.storage)
        LocalAuthStore(json_store).signup("a@b.com", "pw")
        LocalWatchlistStore(json_store).set("a@b.com", [1, 1, 2])

        reopened = JsonKeyValueStore(JsonFileKeyValueStorage(self.path))
        self.assertEqual(LocalAuthStore(reopened).restore().user.email, "a@b.com")
        self.assertEqual(LocalWatchlistStore(reopened).get("A@B.com"), [1, 2])

    def test_failed_write_keeps_existing_keys(self):
        self.storage.set_item("movieTrack.users", "[{\"email\": \"alice@x.com\"}]")
        self.storage.set_item("movieTrack.watchlist.alice@x.com", "[1, 2]")

        def _partial_dump(obj, file, **kwargs):
            file.write("{\"movieTrack.us")
            raise OSError("disk full")

        with mock.patch(
            "infrastructure.persistence.local_storage.json_file_storage.json.dump",
            side_effect=_partial_dump,
        ):
            with self.assertRaises(OSError):
                self.storage.set_item("movieTrack.watchlist.bob@x.com", "[3]")

        self.assertEqual(self.storage.get_item("movieTrack.watchlist.alice@x.com"), "[1, 2]")
        self.assertIsNotNone(self.storage.get_item("movieTrack.users"))
        self.assertIsNone(self.storage.get_item("movieTrack.watchlist.bob@x.com"))
        self.assertEqual([p.name for p in self.path.parent.iterdir()], [self.path.name])

    def test_failed_write_through_watchlist_store_keeps_other_users(self):
        watchlists = LocalWatchlistStore(JsonKeyValueStore(self.storage))
        watchlists.set("alice@x.com", [1, 2])

        with mock.patch(
            "infrastructure.persistence.local_storage.json_file_storage.json.dump",
            side_effect=OSError("disk full"),
        ):
            with self.assertLogs("infrastructure.persistence.local_storage.json_store", level="ERROR"):
                watchlists.set("bob@x.com", [3])

        self.assertEqual(watchlists.get("alice@x.com"), [1, 2])
        self.assertEqual(watchlists.get("bob@x.com"), [])


if __name__ == "__main__":
    unittest.main()
