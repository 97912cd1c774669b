"""Notes list service: blob codec, key-value persistence and list lifecycle."""

import json
import uuid
from typing import List, Optional

from pydantic import ValidationError

from taxifare.models import Note
from taxifare.config import settings
from taxifare.database import DatabaseManager, get_db_manager

NOTES_SCHEMA_VERSION = 1


class NoteFormatError(ValueError):
    """Raised when a stored notes blob cannot be decoded."""


def serialize_notes(notes: List[Note]) -> str:
    """Encode notes, in order, as a versioned JSON blob."""
    return json.dumps({
        "version": NOTES_SCHEMA_VERSION,
        "notes": [note.model_dump() for note in notes],
    })


def deserialize_notes(blob: str) -> List[Note]:
    """
    Decode a notes blob.

    Accepts the versioned envelope and the bare JSON array written by
    earlier, unversioned clients.

    Raises:
        NoteFormatError: If the blob is not valid JSON, has an unknown
            version or holds malformed records
    """
    try:
        data = json.loads(blob)
    except json.JSONDecodeError as e:
        raise NoteFormatError(f"Notes blob is not valid JSON: {e}") from e

    if isinstance(data, list):
        records = data
    elif isinstance(data, dict):
        version = data.get("version")
        if version != NOTES_SCHEMA_VERSION:
            raise NoteFormatError(f"Unsupported notes schema version: {version!r}")
        records = data.get("notes", [])
    else:
        raise NoteFormatError(f"Unexpected notes blob type: {type(data).__name__}")

    try:
        return [Note(**record) for record in records]
    except (TypeError, ValidationError) as e:
        raise NoteFormatError(f"Malformed note record: {e}") from e


class NoteStore:
    """Persists the whole notes list under one key of the local key-value store."""

    def __init__(self, db_manager: DatabaseManager, key: str = settings.NOTES_STORAGE_KEY):
        self.db_manager = db_manager
        self.key = key

    def load(self) -> List[Note]:
        """Stored notes, or an empty list if nothing was saved yet."""
        blob = self.db_manager.get_item(self.key)
        if not blob:
            return []
        return deserialize_notes(blob)

    def save(self, notes: List[Note]):
        """Overwrite the stored list."""
        self.db_manager.set_item(self.key, serialize_notes(notes))

    def clear(self) -> bool:
        """Remove the stored list. Returns True if one existed."""
        return self.db_manager.remove_item(self.key)


class NotesService:
    """
    In-memory notes list backed by a NoteStore.

    Mutations are kept in memory only until load() succeeds, so neither a
    slow initial read nor an unreadable blob is ever overwritten.
    """

    def __init__(self, store: NoteStore):
        self.store = store
        self.loaded = False
        self.load_failed = False
        self._notes: List[Note] = []

    @property
    def notes(self) -> List[Note]:
        """Notes in creation order."""
        return list(self._notes)

    def load(self) -> List[Note]:
        """
        Read the stored list.

        On failure the list starts empty and saving stays off until a later
        load() succeeds, leaving the stored blob untouched.
        """
        try:
            self._notes = self.store.load()
            self.load_failed = False
        except Exception as e:
            print(f"Warning: Could not load notes, changes will not be saved: {e}")
            self._notes = []
            self.load_failed = True
        finally:
            self.loaded = True
        return self.notes

    def add_note(self, text: str) -> Optional[Note]:
        """
        Append a note.

        Args:
            text: Raw user input, trimmed before storing

        Returns:
            The new note, or None if the input was blank
        """
        trimmed = text.strip()
        if not trimmed:
            return None

        note = Note(id=uuid.uuid4().hex, text=trimmed)
        self._notes.append(note)
        self._persist()
        return note

    def delete_note(self, note_id: str) -> bool:
        """Remove a note by id. Returns True if a note was removed."""
        remaining = [note for note in self._notes if note.id != note_id]
        if len(remaining) == len(self._notes):
            return False

        self._notes = remaining
        self._persist()
        return True

    def _persist(self):
        if not self.loaded or self.load_failed:
            return
        try:
            self.store.save(self._notes)
        except Exception as e:
            print(f"Warning: Could not save notes: {e}")


# Singleton instance
_notes_service: Optional[NotesService] = None


def get_notes_service() -> NotesService:
    """Get singleton notes service, loaded from the default datastore."""
    global _notes_service
    if _notes_service is None:
        _notes_service = NotesService(NoteStore(get_db_manager()))
        _notes_service.load()
    return _notes_service
