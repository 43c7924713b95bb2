import uuid
from datetime import timedelta
from contextlib import contextmanager

import pytest

from transcription_gateway.exceptions import (
    TranscriptNotFoundError,
    TranscriptPersistenceError,
)
from transcription_gateway.repositories import TranscriptRepository


def test_create_assigns_identifier_and_timestamp(repository: TranscriptRepository) -> None:
    record = repository.create("meeting.wav", "hello world")

    assert isinstance(record.id, uuid.UUID)
    assert record.filename == "meeting.wav"
    assert record.transcript == "hello world"
    assert record.created_at is not None


def test_created_at_is_timezone_aware_utc(repository: TranscriptRepository) -> None:
    created = repository.create("meeting.wav", "hello world")
    listed = repository.list_all()[0]

    for record in (created, listed):
        assert record.created_at.tzinfo is not None
        assert record.created_at.utcoffset() == timedelta(0)
    assert listed.created_at == created.created_at


def test_list_all_returns_newest_first(repository: TranscriptRepository) -> None:
    first = repository.create("a.wav", "first")
    second = repository.create("b.wav", "second")
    third = repository.create("c.wav", "third")

    listed = repository.list_all()

    assert [r.id for r in listed] == [third.id, second.id, first.id]
    assert listed[0].created_at > listed[1].created_at > listed[2].created_at


def test_list_all_on_empty_store(repository: TranscriptRepository) -> None:
    assert repository.list_all() == []


def test_delete_removes_only_the_matching_record(repository: TranscriptRepository) -> None:
    keep = repository.create("keep.wav", "keep")
    drop = repository.create("drop.wav", "drop")

    repository.delete(str(drop.id))

    assert [r.id for r in repository.list_all()] == [keep.id]


def test_delete_unknown_identifier_leaves_store_unchanged(
    repository: TranscriptRepository,
) -> None:
    repository.create("a.wav", "first")

    with pytest.raises(TranscriptNotFoundError):
        repository.delete(str(uuid.uuid4()))

    assert len(repository.list_all()) == 1


def test_delete_malformed_identifier_is_not_found(repository: TranscriptRepository) -> None:
    with pytest.raises(TranscriptNotFoundError) as exc_info:
        repository.delete("not-a-valid-id")

    assert exc_info.value.transcript_id == "not-a-valid-id"


@pytest.mark.parametrize("count", [0, 1, 5])
def test_delete_all_empties_store(repository: TranscriptRepository, count: int) -> None:
    for i in range(count):
        repository.create(f"{i}.wav", f"transcript {i}")

    assert repository.delete_all() == count
    assert repository.list_all() == []


def test_store_failures_are_wrapped() -> None:
    @contextmanager
    def broken_session_factory():
        raise RuntimeError("connection refused")
        yield

    repository = TranscriptRepository(broken_session_factory)

    with pytest.raises(TranscriptPersistenceError) as exc_info:
        repository.create("a.wav", "text")
    assert exc_info.value.operation == "create"
    assert isinstance(exc_info.value.cause, RuntimeError)

    with pytest.raises(TranscriptPersistenceError):
        repository.list_all()
    with pytest.raises(TranscriptPersistenceError):
        repository.delete(str(uuid.uuid4()))
    with pytest.raises(TranscriptPersistenceError):
        repository.delete_all()
