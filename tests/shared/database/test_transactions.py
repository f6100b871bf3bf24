# -*- coding: utf-8 -*-
import pytest
from sqlalchemy import func, select

from showcase.shared.database import commit_or_rollback
from showcase.shared.results import conflict, ok
from showcase.shared.storage import StorageChangeSet
from showcase.modules.tags.models import Tag

from tests.support import stored_files


async def _tags(db) -> int:
    return (await db.execute(select(func.count(Tag.id)))).scalar_one()


async def test_success_commits_and_applies_changes(db_session, storage):
    released = (await storage.save(b"old")).unwrap()
    changes = StorageChangeSet(storage)

    async def work():
        db_session.add(Tag(title="Go", slug="go"))
        await db_session.flush()
        changes.release(released)
        return ok("done")

    result = await commit_or_rollback(db_session, work, changes)

    assert result.unwrap() == "done"
    await db_session.rollback()  # no afecta lo ya confirmado
    assert await _tags(db_session) == 1
    assert stored_files(storage) == []


async def test_failure_rolls_back_and_discards_created_files(db_session, storage):
    changes = StorageChangeSet(storage)

    async def work():
        db_session.add(Tag(title="Go", slug="go"))
        await db_session.flush()
        changes.track_created((await storage.save(b"tmp")).unwrap())
        return conflict("A tag with the same title already exists.")

    result = await commit_or_rollback(db_session, work, changes)

    assert result.is_failure
    assert await _tags(db_session) == 0
    assert stored_files(storage) == []


async def test_exception_rolls_back_and_propagates(db_session, storage):
    changes = StorageChangeSet(storage)

    async def work():
        db_session.add(Tag(title="Go", slug="go"))
        await db_session.flush()
        changes.track_created((await storage.save(b"tmp")).unwrap())
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await commit_or_rollback(db_session, work, changes)

    assert await _tags(db_session) == 0
    assert stored_files(storage) == []
