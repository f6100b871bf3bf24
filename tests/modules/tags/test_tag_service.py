# -*- coding: utf-8 -*-
import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from showcase.shared.results import ErrorType
from showcase.modules.projects.services import ProjectService
from showcase.modules.tags.enums import TagType
from showcase.modules.tags.models import Tag
from showcase.modules.tags.schemas import TagIn
from showcase.modules.tags.services import TAG_CONFLICT, TagService

from tests.modules.projects.factories import project_in


@pytest.fixture
def service(db_session, matcher):
    return TagService(db_session, matcher)


async def _tag_count(db) -> int:
    return (await db.execute(select(func.count(Tag.id)))).scalar_one()


# ---------------------------------------------------------------------------
# sync_tags (find-or-create)
# ---------------------------------------------------------------------------
async def test_sync_tags_finds_case_insensitively_and_keeps_duplicates(service, db_session):
    existing = (await service.create_tag(TagIn(title="C#", type=TagType.BACKEND))).unwrap()

    result = (await service.sync_tags(["c#", "C#", "Rust"])).unwrap()

    assert len(result) == 3
    assert result[0].id == existing.id
    assert result[1].id == existing.id
    assert result[2].title == "Rust"
    assert result[2].type == TagType.DEFAULT
    assert result[2].slug == "rust"
    assert await _tag_count(db_session) == 2


async def test_sync_tags_creates_once_for_new_repeated_titles(service, db_session):
    result = (await service.sync_tags(["Vue", "vue"])).unwrap()

    assert result[0] is result[1]
    assert await _tag_count(db_session) == 1


async def test_sync_tags_reuses_non_ascii_tag_across_calls(service, db_session):
    first = (await service.sync_tags(["Ñandú"])).unwrap()
    await db_session.commit()

    second = (await service.sync_tags(["ñandú", "ÑANDÚ"])).unwrap()

    assert [t.id for t in second] == [first[0].id, first[0].id]
    assert await _tag_count(db_session) == 1


async def test_sync_tags_rejects_blank_titles(service):
    result = await service.sync_tags(["Go", "   "])
    assert result.error_type == ErrorType.BAD_REQUEST


async def test_sync_tags_empty_input(service):
    assert (await service.sync_tags([])).unwrap() == []


# ---------------------------------------------------------------------------
# CRUD
# ---------------------------------------------------------------------------
async def test_create_tag_conflicts_on_title_case_insensitive(service):
    (await service.create_tag(TagIn(title="Docker", type=TagType.DEVOPS))).unwrap()

    result = await service.create_tag(TagIn(title="docker"))

    assert result.error_type == ErrorType.CONFLICT
    assert result.message == TAG_CONFLICT


async def test_update_tag_changes_fields_and_slug(service):
    tag = (await service.create_tag(TagIn(title="Postgres"))).unwrap()

    updated = (
        await service.update_tag(
            tag.id,
            TagIn(title="PostgreSQL", type=TagType.DATA, icon="pg", custom_colour="#336791"),
        )
    ).unwrap()

    assert updated.title == "PostgreSQL"
    assert updated.slug == "postgresql"
    assert updated.type == TagType.DATA
    assert updated.custom_colour == "#336791"


async def test_update_tag_conflicts_with_other_tag(service):
    (await service.create_tag(TagIn(title="React"))).unwrap()
    other = (await service.create_tag(TagIn(title="Angular"))).unwrap()

    assert (await service.update_tag(other.id, TagIn(title="REACT"))).error_type == ErrorType.CONFLICT
    assert (await service.update_tag(999, TagIn(title="X"))).error_type == ErrorType.NOT_FOUND


async def test_list_and_slug_lookup(service):
    for title in ["TypeScript", "Python", "JavaScript"]:
        (await service.create_tag(TagIn(title=title))).unwrap()

    assert [t.title for t in (await service.list_tags()).unwrap()] == ["JavaScript", "Python", "TypeScript"]
    assert [t.title for t in (await service.list_tags("script")).unwrap()] == ["JavaScript", "TypeScript"]
    assert (await service.get_tag_by_slug("python")).unwrap().title == "Python"
    assert (await service.get_tag_by_slug("cobol")).error_type == ErrorType.NOT_FOUND


async def test_delete_tag_detaches_from_projects(service, db_session, matcher, storage):
    projects = ProjectService(db_session, matcher, storage)
    project = (await projects.create_project(project_in(tags=["Flask", "Django"]))).unwrap()
    flask = next(t for t in project.tags if t.title == "Flask")

    (await service.delete_tag(flask.id)).unwrap()

    db_session.expunge_all()
    reloaded = (await projects.get_project(project.id)).unwrap()
    assert [t.title for t in reloaded.tags] == ["Django"]
    assert (await service.get_tag(flask.id)).error_type == ErrorType.NOT_FOUND


async def test_tag_projects_back_reference(db_session, matcher, storage):
    projects = ProjectService(db_session, matcher, storage)
    (await projects.create_project(project_in(title="API", tags=["Python", "Docker"]))).unwrap()
    (await projects.create_project(project_in(title="CLI", tags=["python"]))).unwrap()

    db_session.expunge_all()
    python = (
        await db_session.execute(
            select(Tag).where(Tag.slug == "python").options(selectinload(Tag.projects))
        )
    ).scalar_one()

    assert sorted(p.title for p in python.projects) == ["API", "CLI"]
