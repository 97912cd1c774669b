"""Unit tests for the persisted notes list."""

import json

import pytest
from fastapi.testclient import TestClient

from taxifare.main import app
from taxifare.models import Note
from taxifare.database import DatabaseManager
from taxifare.services.notes import (
    NOTES_SCHEMA_VERSION,
    NoteFormatError,
    NoteStore,
    NotesService,
    serialize_notes,
    deserialize_notes,
)

client = TestClient(app)


@pytest.fixture
def db_manager(tmp_path):
    return DatabaseManager(f"sqlite:///{tmp_path / 'notes.db'}")


@pytest.fixture
def store(db_manager):
    return NoteStore(db_manager)


class FailingStore:
    """Store whose every read and write fails."""

    def load(self):
        raise OSError("storage unavailable")

    def save(self, notes):
        raise OSError("storage unavailable")


class TestCodec:
    """Test note blob encoding."""

    def test_round_trip(self):
        for count in [0, 1, 100]:
            notes = [Note(id=f"id-{i}", text=f"note {i}") for i in range(count)]
            assert deserialize_notes(serialize_notes(notes)) == notes

    def test_blob_is_versioned(self):
        data = json.loads(serialize_notes([Note(id="a", text="buy milk")]))
        assert data["version"] == NOTES_SCHEMA_VERSION
        assert data["notes"] == [{"id": "a", "text": "buy milk"}]

    def test_reads_unversioned_array(self):
        blob = json.dumps([{"id": "1700000000000", "text": "first"}, {"id": "1700000000001", "text": "second"}])
        notes = deserialize_notes(blob)
        assert [note.text for note in notes] == ["first", "second"]

    def test_rejects_unknown_version(self):
        with pytest.raises(NoteFormatError):
            deserialize_notes(json.dumps({"version": 99, "notes": []}))

    def test_rejects_invalid_json(self):
        with pytest.raises(NoteFormatError):
            deserialize_notes("{not json")

    def test_rejects_malformed_record(self):
        with pytest.raises(NoteFormatError):
            deserialize_notes(json.dumps([{"id": "1"}]))

        with pytest.raises(NoteFormatError):
            deserialize_notes(json.dumps("just a string"))


class TestNoteStore:
    """Test key-value persistence."""

    def test_empty_store_loads_nothing(self, store):
        assert store.load() == []

    def test_save_and_load(self, store):
        notes = [Note(id="a", text="one"), Note(id="b", text="two")]
        store.save(notes)
        assert store.load() == notes

    def test_save_overwrites(self, store):
        store.save([Note(id="a", text="one")])
        store.save([])
        assert store.load() == []

    def test_clear(self, store, db_manager):
        store.save([Note(id="a", text="one")])
        assert store.clear() is True
        assert db_manager.get_item(store.key) is None
        assert store.clear() is False


class TestNotesService:
    """Test notes list lifecycle."""

    def test_add_trims_and_persists(self, store):
        service = NotesService(store)
        service.load()

        note = service.add_note("   call the driver  ")
        assert note.text == "call the driver"
        assert store.load() == [note]

    def test_blank_input_is_ignored(self, store):
        service = NotesService(store)
        service.load()

        assert service.add_note("") is None
        assert service.add_note("   \n\t") is None
        assert service.notes == []

    def test_ids_are_unique(self, store):
        service = NotesService(store)
        service.load()

        ids = {service.add_note(f"note {i}").id for i in range(100)}
        assert len(ids) == 100

    def test_delete(self, store):
        service = NotesService(store)
        service.load()
        first = service.add_note("first")
        second = service.add_note("second")

        assert service.delete_note(first.id) is True
        assert service.notes == [second]
        assert store.load() == [second]

        assert service.delete_note("missing") is False

    def test_order_survives_reload(self, store):
        service = NotesService(store)
        service.load()
        for text in ["a", "b", "c"]:
            service.add_note(text)

        reloaded = NotesService(store)
        assert [note.text for note in reloaded.load()] == ["a", "b", "c"]

    def test_nothing_saved_before_load(self, store):
        store.save([Note(id="kept", text="stored earlier")])

        service = NotesService(store)
        service.add_note("added too early")
        assert store.load() == [Note(id="kept", text="stored earlier")]

    def test_load_failure_degrades_to_empty(self):
        service = NotesService(FailingStore())
        assert service.load() == []
        assert service.loaded is True

    def test_save_failure_keeps_note_in_memory(self):
        service = NotesService(FailingStore())
        service.load()
        note = service.add_note("offline note")
        assert service.notes == [note]

    def test_corrupt_blob_degrades_to_empty(self, store, db_manager):
        db_manager.set_item(store.key, "{corrupt")
        service = NotesService(store)
        assert service.load() == []

    def test_unreadable_blob_is_not_overwritten(self, store, db_manager):
        newer = json.dumps({"version": 2, "notes": [{"id": "x", "text": "keep me"}]})
        db_manager.set_item(store.key, newer)

        service = NotesService(store)
        assert service.load() == []
        assert service.load_failed is True

        note = service.add_note("new")
        assert service.notes == [note]
        assert db_manager.get_item(store.key) == newer

        service.delete_note(note.id)
        assert db_manager.get_item(store.key) == newer

    def test_saving_resumes_after_successful_load(self, store, db_manager):
        db_manager.set_item(store.key, "{corrupt")
        service = NotesService(store)
        service.load()
        service.add_note("lost")
        assert db_manager.get_item(store.key) == "{corrupt"

        store.clear()
        assert service.load() == []
        assert service.load_failed is False

        note = service.add_note("saved")
        assert store.load() == [note]


class TestNotesAPI:
    """Test notes endpoints."""

    def test_create_list_delete(self):
        response = client.post("/api/notes", json={"text": "  pick up keys "})
        assert response.status_code == 201
        note = response.json()
        assert note["text"] == "pick up keys"

        response = client.get("/api/notes")
        assert response.status_code == 200
        data = response.json()
        assert note in data["notes"]
        assert data["count"] == len(data["notes"])

        response = client.delete(f"/api/notes/{note['id']}")
        assert response.status_code == 200

        response = client.get("/api/notes")
        assert note not in response.json()["notes"]

    def test_blank_note_rejected(self):
        response = client.post("/api/notes", json={"text": "    "})
        assert response.status_code == 422

    def test_delete_unknown_note(self):
        response = client.delete("/api/notes/does-not-exist")
        assert response.status_code == 404


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
