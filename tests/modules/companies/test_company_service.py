# -*- coding: utf-8 -*-
import pytest
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from showcase.shared.results import ErrorType
from showcase.modules.companies.models import Company
from showcase.modules.companies.schemas import CompanyIn
from showcase.modules.companies.services import COMPANY_CONFLICT, CompanyService
from showcase.modules.projects.services import ProjectService

from tests.modules.projects.factories import project_in
from tests.support import b64, file_on_disk, stored_files


@pytest.fixture
def service(db_session, matcher, storage):
    return CompanyService(db_session, matcher, storage)


async def test_create_company_with_logo(service, storage):
    company = (
        await service.create_company(
            CompanyIn(name="Acme Corp", logo=b64(b"logo-bytes"), logo_filename="acme.svg")
        )
    ).unwrap()

    assert company.slug == "acme-corp"
    assert company.logo.endswith(".svg")
    assert storage.path_for(company.logo).read_bytes() == b"logo-bytes"


async def test_create_company_conflicts_on_name(service):
    (await service.create_company(CompanyIn(name="Globex"))).unwrap()

    result = await service.create_company(CompanyIn(name="GLOBEX"))

    assert result.error_type == ErrorType.CONFLICT
    assert result.message == COMPANY_CONFLICT


async def test_create_company_conflicts_on_non_ascii_case_variant(service):
    (await service.create_company(CompanyIn(name="Ärzte Ohne Grenzen"))).unwrap()

    result = await service.create_company(CompanyIn(name="ärzte ohne grenzen"))

    assert result.error_type == ErrorType.CONFLICT


async def test_update_company_replaces_logo(service, storage):
    company = (await service.create_company(CompanyIn(name="Initech", logo=b64(b"old")))).unwrap()
    old_logo = company.logo

    updated = (
        await service.update_company(company.id, CompanyIn(name="Initech", logo=b64(b"new")))
    ).unwrap()

    assert updated.logo != old_logo
    assert not file_on_disk(storage, old_logo)
    assert storage.path_for(updated.logo).read_bytes() == b"new"


async def test_update_company_without_logo_keeps_current(service, storage):
    company = (await service.create_company(CompanyIn(name="Hooli", logo=b64(b"keep")))).unwrap()
    logo = company.logo

    updated = (
        await service.update_company(company.id, CompanyIn(name="Hooli XYZ", description="Big"))
    ).unwrap()

    assert updated.logo == logo
    assert updated.slug == "hooli-xyz"
    assert stored_files(storage) == [logo]


async def test_delete_company_unlinks_projects(service, db_session, matcher, storage):
    company = (await service.create_company(CompanyIn(name="Umbrella", logo=b64()))).unwrap()
    projects = ProjectService(db_session, matcher, storage)
    project = (await projects.create_project(project_in(company_id=company.id))).unwrap()
    assert project.company.name == "Umbrella"

    (await service.delete_company(company.id)).unwrap()

    db_session.expunge_all()
    reloaded = (await projects.get_project(project.id)).unwrap()
    assert reloaded.company_id is None
    assert reloaded.company is None
    assert stored_files(storage) == []
    assert (await service.get_company(company.id)).error_type == ErrorType.NOT_FOUND


async def test_list_companies_with_search(service):
    for name in ["Stark Industries", "Wayne Enterprises", "Stark Labs"]:
        (await service.create_company(CompanyIn(name=name))).unwrap()

    names = [c.name for c in (await service.list_companies("stark")).unwrap()]

    assert names == ["Stark Industries", "Stark Labs"]
    assert (await service.get_company_by_slug("wayne-enterprises")).is_success


async def test_company_projects_back_reference(service, db_session, matcher, storage):
    company = (await service.create_company(CompanyIn(name="Hooli"))).unwrap()
    projects = ProjectService(db_session, matcher, storage)
    for title in ["Nucleus", "Signature Box"]:
        (await projects.create_project(project_in(title=title, company_id=company.id))).unwrap()
    (await projects.create_project(project_in(title="Freelance"))).unwrap()

    db_session.expunge_all()
    loaded = (
        await db_session.execute(
            select(Company).where(Company.id == company.id).options(selectinload(Company.projects))
        )
    ).scalar_one()

    assert sorted(p.title for p in loaded.projects) == ["Nucleus", "Signature Box"]
