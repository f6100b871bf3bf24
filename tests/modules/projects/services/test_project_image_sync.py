# -*- coding: utf-8 -*-
"""
Sincronización de imágenes: conservar / crear / borrar, orden y
categorías de ocupación única (Logo, Banner, Card).
"""
import pytest

from showcase.shared.results import ErrorType
from showcase.modules.projects.enums import ImageType
from showcase.modules.projects.services import ProjectImageService, ProjectService

from tests.modules.projects.factories import keep_image, new_image, project_in
from tests.support import file_on_disk, stored_files


@pytest.fixture
def projects(db_session, matcher, storage):
    return ProjectService(db_session, matcher, storage)


@pytest.fixture
def images(db_session, storage):
    return ProjectImageService(db_session, storage)


async def _project_with(projects, *targets):
    return (await projects.create_project(project_in(images=list(targets)))).unwrap()


async def test_orphans_are_deleted_and_order_updated(projects, images, storage):
    project = await _project_with(
        projects,
        new_image(ImageType.DESKTOP, order=1),
        new_image(ImageType.DESKTOP, order=2),
        new_image(ImageType.DESKTOP, order=3),
    )
    first, second, third = project.images

    result = await images.sync_project_images(
        project.id, [keep_image(first.id), keep_image(third.id, order=5)]
    )

    synced = result.unwrap()
    assert [i.id for i in synced] == [first.id, third.id]
    assert synced[1].order == 5
    assert not file_on_disk(storage, second.image)
    assert file_on_disk(storage, first.image) and file_on_disk(storage, third.image)


async def test_sync_with_current_state_is_idempotent(projects, images, storage):
    project = await _project_with(
        projects, new_image(ImageType.LOGO), new_image(ImageType.MOBILE, order=4)
    )
    current = [keep_image(i.id, i.type, i.order) for i in project.images]
    files_before = stored_files(storage)

    once = (await images.sync_project_images(project.id, current)).unwrap()
    twice = (await images.sync_project_images(project.id, current)).unwrap()

    assert [(i.id, i.type, i.order) for i in once] == [(i.id, i.type, i.order) for i in twice]
    assert [i.id for i in twice] == [i.id for i in project.images]
    assert stored_files(storage) == files_before


async def test_new_single_occupancy_image_replaces_existing(projects, images, storage):
    project = await _project_with(projects, new_image(ImageType.LOGO), new_image(ImageType.DESKTOP))
    old_logo = next(i for i in project.images if i.type == ImageType.LOGO)
    desktop = next(i for i in project.images if i.type == ImageType.DESKTOP)

    # El logo viejo viene referenciado, pero el nuevo lo desplaza igualmente
    synced = (
        await images.sync_project_images(
            project.id,
            [keep_image(old_logo.id, ImageType.LOGO), keep_image(desktop.id), new_image(ImageType.LOGO)],
        )
    ).unwrap()

    logos = [i for i in synced if i.type == ImageType.LOGO]
    assert len(logos) == 1
    assert logos[0].id != old_logo.id
    assert not file_on_disk(storage, old_logo.image)
    assert desktop.id in [i.id for i in synced]


async def test_two_new_images_of_same_single_type_last_wins(projects, images, storage):
    project = await _project_with(projects)

    synced = (
        await images.sync_project_images(
            project.id,
            [new_image(ImageType.BANNER, data=b"first"), new_image(ImageType.BANNER, data=b"second")],
        )
    ).unwrap()

    assert len(synced) == 1
    assert storage.path_for(synced[0].image).read_bytes() == b"second"
    assert stored_files(storage) == [synced[0].image]


async def test_multi_occupancy_types_accumulate(projects, images):
    project = await _project_with(projects, new_image(ImageType.MOBILE))

    synced = (
        await images.sync_project_images(
            project.id, [keep_image(project.images[0].id), new_image(ImageType.MOBILE)]
        )
    ).unwrap()

    assert [i.type for i in synced] == [ImageType.MOBILE, ImageType.MOBILE]


async def test_read_order_is_category_then_order(projects):
    project = await _project_with(
        projects,
        new_image(ImageType.MOBILE, order=0),
        new_image(ImageType.DESKTOP, order=2),
        new_image(ImageType.DESKTOP, order=1),
        new_image(ImageType.CARD),
        new_image(ImageType.BANNER),
        new_image(ImageType.LOGO),
    )

    assert [(i.type, i.order) for i in project.images] == [
        (ImageType.LOGO, None),
        (ImageType.BANNER, None),
        (ImageType.CARD, None),
        (ImageType.DESKTOP, 1),
        (ImageType.DESKTOP, 2),
        (ImageType.MOBILE, 0),
    ]


async def test_foreign_ids_are_ignored(projects, images):
    mine = await _project_with(projects, new_image())
    other = (await projects.create_project(project_in(title="Other", images=[new_image()]))).unwrap()

    synced = (
        await images.sync_project_images(
            mine.id, [keep_image(mine.images[0].id), keep_image(other.images[0].id)]
        )
    ).unwrap()

    assert [i.id for i in synced] == [mine.images[0].id]
    still_there = (await images.get_project_images(other.id)).unwrap()
    assert len(still_there) == 1


async def test_failed_sync_keeps_previous_images(projects, images, storage):
    project = await _project_with(projects, new_image(ImageType.DESKTOP))
    # el rollback expira las instancias: leer los valores antes
    project_id = project.id
    original_id, original_file = project.images[0].id, project.images[0].image
    missing_file = new_image(ImageType.MOBILE).model_copy(update={"image": None})

    result = await images.sync_project_images(project_id, [new_image(ImageType.CARD), missing_file])

    assert result.error_type == ErrorType.BAD_REQUEST
    current = (await images.get_project_images(project_id)).unwrap()
    assert [i.id for i in current] == [original_id]
    assert stored_files(storage) == [original_file]


async def test_get_image_scoped_to_project(projects, images):
    project = await _project_with(projects, new_image())
    other = (await projects.create_project(project_in(title="Other", images=[new_image()]))).unwrap()

    assert (await images.get_project_image(project.id, project.images[0].id)).is_success
    assert (await images.get_project_image(project.id, other.images[0].id)).error_type == ErrorType.NOT_FOUND
    assert (await images.get_project_images(999)).error_type == ErrorType.NOT_FOUND
