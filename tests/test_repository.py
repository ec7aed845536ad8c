# ===============================================
# tests/test_repository.py
# SQLite prompt store: create + list_all.
# ===============================================

import pytest

from promptgen.errors import StorageError
from promptgen.storage import PromptRecord, PromptRepository


def make_record(**kw) -> PromptRecord:
    fields = dict(
        prompt="Write a CLI",
        content="",
        actor="Go developer",
        comments=True,
        documentation=False,
        explanations=True,
    )
    fields.update(kw)
    return PromptRecord(**fields)


def test_create_assigns_ids(tmp_path):
    with PromptRepository(tmp_path / "prompts.db") as repo:
        first = repo.create(make_record())
        second = repo.create(make_record(prompt="Write a server"))

    assert first.id == 1
    assert second.id == 2
    assert second.prompt == "Write a server"


def test_list_all_round_trips_fields(tmp_path):
    db = tmp_path / "prompts.db"
    with PromptRepository(db) as repo:
        repo.create(make_record(content="package main\n", documentation=True))
        repo.create(make_record(actor="tester", comments=False, explanations=False))

    # reopen: records are durable
    with PromptRepository(db) as repo:
        records = repo.list_all()

    assert [r.id for r in records] == [1, 2]
    assert records[0] == make_record(id=1, content="package main\n", documentation=True)
    assert records[1] == make_record(id=2, actor="tester", comments=False, explanations=False)
    assert all(isinstance(r.comments, bool) for r in records)


def test_empty_database_lists_nothing(tmp_path):
    db = tmp_path / "empty.db"
    db.touch()
    with PromptRepository(db) as repo:
        assert repo.list_all() == []


def test_unopenable_database_raises_storage_error(tmp_path):
    repo = PromptRepository(tmp_path / "missing-dir" / "prompts.db")
    with pytest.raises(StorageError):
        repo.create(make_record())
