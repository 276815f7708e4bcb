from datetime import datetime, timezone

from src.domain.entities.note import Note
from src.domain.entities.profile import UserProfile


def test_note_from_dict_with_id():
    note = Note.from_dict({"id": "n1", "title": "T", "content": "C", "createdAt": "2024-01-01T00:00:00Z"})
    assert note.id == "n1"
    assert note.created_at == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_note_from_dict_with_document_id():
    note = Note.from_dict({"_id": "abc", "title": "T", "content": "C"})
    assert note.id == "abc"
    assert note.created_at is None


def test_profile_defaults_missing_bio():
    profile = UserProfile.from_dict({"_id": "u1", "name": "Ann", "email": "ann@example.com"})
    assert profile.bio == ""
    assert profile.id == "u1"
