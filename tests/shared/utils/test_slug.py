# -*- coding: utf-8 -*-
import pytest

from showcase.shared.utils.slug import to_slug, unique_slug
from showcase.modules.tags.models import Tag


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Hello World", "hello-world"),
        ("Canción de Prueba!", "cancion-de-prueba"),
        ("  a --  b  ", "a-b"),
        ("snake__case--mixed", "snake_case-mixed"),
        ("C#", "c"),
        ("Node.js", "nodejs"),
        ("-_-", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_to_slug(text, expected):
    assert to_slug(text) == expected


@pytest.mark.parametrize("text", ["Hello World", "Über  Café -- 2024", "x_-_y"])
def test_to_slug_is_idempotent(text):
    once = to_slug(text)
    assert to_slug(once) == once


def test_to_slug_is_deterministic():
    assert to_slug("Mi Proyecto") == to_slug("Mi Proyecto")


async def test_unique_slug_appends_suffix_when_taken(db_session):
    db_session.add_all([Tag(title="Python", slug="python"), Tag(title="Python 2", slug="python-2")])
    await db_session.flush()

    assert await unique_slug(db_session, Tag, "Python") == "python-3"
    assert await unique_slug(db_session, Tag, "Rust") == "rust"


async def test_unique_slug_ignores_own_row(db_session):
    tag = Tag(title="Python", slug="python")
    db_session.add(tag)
    await db_session.flush()

    assert await unique_slug(db_session, Tag, "python", exclude_id=tag.id) == "python"


async def test_unique_slug_falls_back_to_random_token(db_session):
    slug = await unique_slug(db_session, Tag, "###")
    assert len(slug) == 8
    assert slug == to_slug(slug)
