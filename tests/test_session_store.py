from __future__ import annotations

import pytest

from study_tracker.domain import (
    CrossesMidnight,
    InvalidFormat,
    MissingField,
    Overlap,
    SessionNotFound,
    UnknownField,
)


def test_create_assigns_identity_and_round_trips(sessions, make_draft):
    session = sessions.create(make_draft())

    assert session.id
    assert session.completed is False
    assert session.created_at == "2025-06-02T10:00:00"
    assert sessions.list_by_date("2025-06-02") == [session]


def test_create_generates_unique_ids(sessions, make_draft):
    first = sessions.create(make_draft(start_time="08:00"))
    second = sessions.create(make_draft(start_time="09:00"))

    assert first.id != second.id


def test_overlapping_create_fails_without_writing(sessions, state_path, make_draft):
    sessions.create(make_draft(title="Morning block", start_time="09:00", duration=60))
    before = state_path.read_bytes()

    with pytest.raises(Overlap) as info:
        sessions.create(make_draft(title="Clash", start_time="09:30", duration=30))

    assert info.value.conflicting_title == "Morning block"
    assert state_path.read_bytes() == before


def test_adjacent_create_succeeds(sessions, make_draft):
    sessions.create(make_draft(start_time="09:00", duration=60))
    sessions.create(make_draft(title="Next", start_time="10:00", duration=30))

    assert [s.start_time for s in sessions.list_by_date("2025-06-02")] == ["09:00", "10:00"]


def test_create_rejects_midnight_crossing(sessions, make_draft):
    with pytest.raises(CrossesMidnight):
        sessions.create(make_draft(start_time="23:30", duration=31))
    assert sessions.list_all() == []

    sessions.create(make_draft(start_time="23:30", duration=30))
    assert len(sessions.list_all()) == 1


def test_create_rejects_missing_fields(sessions, make_draft):
    with pytest.raises(MissingField):
        sessions.create(make_draft(title=""))
    assert sessions.list_all() == []


def test_update_unknown_id_raises(sessions):
    with pytest.raises(SessionNotFound) as info:
        sessions.update("missing", {"title": "x"})
    assert info.value.session_id == "missing"


def test_update_rejects_immutable_fields(sessions, make_draft):
    session = sessions.create(make_draft())

    with pytest.raises(UnknownField):
        sessions.update(session.id, {"id": "other"})
    with pytest.raises(UnknownField):
        sessions.update(session.id, {"created_at": "yesterday"})


def test_duration_only_edit_uses_stored_start_time(sessions, make_draft):
    sessions.create(make_draft(title="Lunch review", start_time="11:00", duration=30))
    morning = sessions.create(make_draft(title="Morning", start_time="10:00", duration=30))

    # 10:00 + 90 reaches into 11:00; midnight + 90 would not.
    with pytest.raises(Overlap) as info:
        sessions.update(morning.id, {"duration": 90})
    assert info.value.conflicting_title == "Lunch review"

    updated = sessions.update(morning.id, {"duration": 60})
    assert updated.start_time == "10:00"
    assert updated.duration == 60


def test_update_does_not_conflict_with_itself(sessions, make_draft):
    session = sessions.create(make_draft(start_time="09:00", duration=60))

    updated = sessions.update(session.id, {"start_time": "09:15"})

    assert updated.start_time == "09:15"
    assert sessions.list_all()[0].start_time == "09:15"


def test_failed_update_leaves_state_unchanged(sessions, state_path, make_draft):
    session = sessions.create(make_draft())
    before = state_path.read_bytes()

    with pytest.raises(MissingField):
        sessions.update(session.id, {"subject": ""})

    assert state_path.read_bytes() == before


def test_update_keeps_position_and_identity(sessions, make_draft):
    first = sessions.create(make_draft(title="First", start_time="08:00"))
    second = sessions.create(make_draft(title="Second", start_time="12:00"))

    sessions.update(first.id, {"title": "Renamed"})

    listed = sessions.list_all()
    assert [s.id for s in listed] == [first.id, second.id]
    assert listed[0].title == "Renamed"
    assert listed[0].created_at == first.created_at


def test_set_completed(sessions, make_draft):
    session = sessions.create(make_draft())

    assert sessions.set_completed(session.id).completed is True
    assert sessions.get(session.id).completed is True
    assert sessions.set_completed(session.id, False).completed is False


def test_remove_unknown_id_is_a_silent_noop(sessions, state_path, make_draft, caplog):
    sessions.create(make_draft())
    before = state_path.read_bytes()

    sessions.remove("does-not-exist")

    assert state_path.read_bytes() == before
    assert "not found" in caplog.text


def test_remove(sessions, make_draft):
    session = sessions.create(make_draft())

    sessions.remove(session.id)

    assert sessions.list_all() == []
    assert sessions.get(session.id) is None


def test_list_by_date_range_is_inclusive(sessions, make_draft):
    for day in ("2025-06-01", "2025-06-02", "2025-06-07", "2025-06-08"):
        sessions.create(make_draft(date=day))

    listed = sessions.list_by_date_range("2025-06-02", "2025-06-07")

    assert [s.date for s in listed] == ["2025-06-02", "2025-06-07"]


def test_reads_reflect_external_writes(sessions, state_store, make_draft):
    session = sessions.create(make_draft())
    state = state_store.read_state()
    state["sessions"][0]["completed"] = True
    state_store.write_state(state)

    assert sessions.get(session.id).completed is True


def test_legacy_records_default_missing_fields(sessions, state_store):
    state_store.write_state(
        {
            "sessions": [
                {"id": "old", "title": "T", "subject": "S", "date": "2025-06-02", "startTime": "08:00", "duration": 30}
            ],
            "settings": {},
        }
    )

    (session,) = sessions.list_all()

    assert session.completed is False
    assert session.created_at == ""


def _store_records(state_store, *records):
    state_store.write_state({"sessions": list(records), "settings": {}})


def test_malformed_records_are_skipped_on_read(sessions, state_store, caplog):
    good = {"id": "ok", "title": "T", "subject": "S", "date": "2025-06-02", "startTime": "08:00", "duration": 30}
    _store_records(
        state_store,
        {"title": "no id", "date": "2025-06-02", "startTime": "09:00", "duration": 30},
        {"id": "a", "title": "T", "subject": "S", "date": "2025-06-02", "startTime": "10:00", "duration": "abc"},
        "not a record",
        good,
    )

    assert [s.id for s in sessions.list_all()] == ["ok"]
    assert [s.id for s in sessions.list_by_date("2025-06-02")] == ["ok"]
    assert "Skipping" in caplog.text


def test_mutations_survive_malformed_records(sessions, state_store, make_draft):
    _store_records(state_store, "junk", {"id": "a", "duration": "abc"})

    created = sessions.create(make_draft())
    sessions.remove("missing")
    sessions.remove(created.id)

    assert sessions.list_all() == []
    with pytest.raises(SessionNotFound):
        sessions.update("a", {"title": "x"})


def test_completed_must_be_boolean(sessions, state_path, make_draft):
    session = sessions.create(make_draft())
    before = state_path.read_bytes()

    with pytest.raises(InvalidFormat):
        sessions.update(session.id, {"completed": "no"})

    assert state_path.read_bytes() == before
    assert sessions.get(session.id).completed is False


def test_non_boolean_stored_completed_reads_as_incomplete(sessions, state_store):
    _store_records(
        state_store,
        {"id": "a", "title": "T", "subject": "S", "date": "2025-06-02", "startTime": "08:00", "duration": 30, "completed": "no"},
    )

    assert sessions.get("a").completed is False


def test_non_text_fields_are_rejected_as_validation_errors(sessions, make_draft):
    session = sessions.create(make_draft())

    with pytest.raises(InvalidFormat):
        sessions.update(session.id, {"start_time": 930})
    with pytest.raises(InvalidFormat):
        sessions.update(session.id, {"title": 5})
    with pytest.raises(InvalidFormat):
        sessions.update(session.id, {"date": 20250602})
