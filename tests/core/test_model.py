from datetime import datetime, timezone

import pytest

from blogseed.core import (
    DateTimeField,
    FieldError,
    Model,
    ModelConfigurationError,
    StringField,
    TextField,
)


class NoteEntry(Model):
    created = DateTimeField()
    title = StringField(max_length=10)
    body = TextField()


def test_model_metadata_collects_fields_in_order():
    assert list(NoteEntry._meta.fields.keys()) == ["created", "title", "body"]
    assert NoteEntry._meta.table_name == "note_entry"
    assert NoteEntry._meta.column_names() == ["created", "title", "body"]


def test_meta_overrides_table_name():
    class Entry(Model):
        title = StringField()

        class Meta:
            table = "entries"

    assert Entry._meta.table_name == "entries"


def test_unset_fields_read_as_none():
    note = NoteEntry(title="hi")
    assert note.created is None
    assert note.body is None
    assert note.to_dict() == {"created": None, "title": "hi", "body": None}


def test_string_field_rejects_values_over_max_length():
    note = NoteEntry(title="x" * 10)
    with pytest.raises(ValueError):
        note.title = "x" * 11


def test_datetime_field_parses_iso_strings_and_requires_timezone():
    note = NoteEntry()
    note.created = "2024-01-02 03:04:05.123+00:00"
    assert note.created == datetime(2024, 1, 2, 3, 4, 5, 123000, tzinfo=timezone.utc)
    with pytest.raises(ValueError):
        note.created = datetime(2024, 1, 2)
    with pytest.raises(ValueError):
        note.created = "yesterday"


def test_from_row_accepts_sequences_and_mappings():
    row = ("2024-01-02T00:00:00+00:00", "title", "body")
    note = NoteEntry.from_row(row)
    assert note.title == "title"
    assert NoteEntry.from_row({"created": note.created, "title": "title", "body": "body"}) == note
    with pytest.raises(ValueError):
        NoteEntry.from_row(("only-one",))


def test_from_row_reads_naive_timestamps_as_utc():
    note = NoteEntry.from_row(("2026-10-17 08:30:00", None, None))
    assert note.created == datetime(2026, 10, 17, 8, 30, tzinfo=timezone.utc)


def test_from_row_loads_values_assignment_would_reject():
    note = NoteEntry.from_row(("last tuesday", "x" * 50, None))
    assert note.created == "last tuesday"
    assert note.title == "x" * 50


def test_unknown_keyword_is_rejected():
    with pytest.raises(TypeError):
        NoteEntry(subject="nope")


def test_model_without_fields_rejected():
    with pytest.raises(ModelConfigurationError):

        class Empty(Model):
            pass


def test_string_field_requires_positive_length():
    with pytest.raises(FieldError):
        StringField(max_length=0)


def test_unbound_field_has_no_name():
    with pytest.raises(FieldError):
        TextField().require_name()
