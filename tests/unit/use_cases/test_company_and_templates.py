"""Unit tests for company profile and invoice template use cases"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from libs.result import ErrorKind
from src.app.use_cases.company import GetCompany, UpsertCompany, UpsertCompanyCommandDTO
from src.app.use_cases.templates import (
    CreateTemplate,
    CreateTemplateCommandDTO,
    DeleteTemplate,
    GetTemplate,
    UpdateTemplate,
    UpdateTemplateCommandDTO,
)
from src.domain.invoice_template import InvoiceTemplate
from tests.unit.use_cases.factories import OWNER_ID, make_company


@pytest.fixture
def company_repo():
    repo = MagicMock()
    repo.get_by_owner_id = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=lambda company: company)
    repo.update = AsyncMock(side_effect=lambda company: company)
    return repo


@pytest.mark.asyncio
class TestUpsertCompany:

    async def test_first_save_creates_profile(self, mock_uow, company_repo):
        result = await UpsertCompany(mock_uow, company_repo).execute(
            OWNER_ID, UpsertCompanyCommandDTO(name="Northwind Studio", city="Portland")
        )

        assert result.value.created is True
        assert result.value.company.name == "Northwind Studio"
        company_repo.create.assert_awaited_once()
        company_repo.update.assert_not_called()

    async def test_second_save_replaces_profile(self, mock_uow, company_repo):
        company_repo.get_by_owner_id = AsyncMock(return_value=make_company(phone="555-0199"))

        result = await UpsertCompany(mock_uow, company_repo).execute(
            OWNER_ID, UpsertCompanyCommandDTO(name="Northwind LLC")
        )

        assert result.value.created is False
        assert result.value.company.id == "co_1"
        assert result.value.company.name == "Northwind LLC"
        assert result.value.company.phone is None
        company_repo.create.assert_not_called()

    async def test_name_required(self, mock_uow, company_repo):
        result = await UpsertCompany(mock_uow, company_repo).execute(OWNER_ID, UpsertCompanyCommandDTO(name=""))

        assert result.error.kind == ErrorKind.VALIDATION

    async def test_get_without_profile_is_none(self, company_repo):
        result = await GetCompany(company_repo).execute(OWNER_ID)

        assert result.is_ok()
        assert result.value is None


@pytest.mark.asyncio
class TestTemplates:

    async def test_create_template(self, mock_uow):
        repo = MagicMock()
        repo.create = AsyncMock(side_effect=lambda template: template)

        result = await CreateTemplate(mock_uow, repo).execute(
            OWNER_ID, CreateTemplateCommandDTO(name="Classic", primary_color="#1f2937", is_default=True)
        )

        assert result.value.name == "Classic"
        assert result.value.is_default is True
        assert repo.create.await_args.args[0].owner_id == OWNER_ID

    async def test_template_of_other_owner_not_found(self):
        repo = MagicMock()
        repo.get_by_id = AsyncMock(return_value=None)

        result = await GetTemplate(repo).execute("owner_2", "tpl_1")

        assert result.error.code == "TEMPLATE_NOT_FOUND"
        assert result.error.kind == ErrorKind.NOT_FOUND


def make_template(**overrides):
    values = dict(id="tpl_1", owner_id=OWNER_ID, name="Classic", primary_color="#1f2937", layout="modern")
    values.update(overrides)
    return InvoiceTemplate(**values)


@pytest.fixture
def template_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=make_template())
    repo.update = AsyncMock(side_effect=lambda template: template)
    repo.delete = AsyncMock()
    return repo


@pytest.mark.asyncio
class TestUpdateTemplate:

    async def test_only_present_fields_change(self, mock_uow, template_repo):
        command = UpdateTemplateCommandDTO(name="Bold", primary_color=None)

        result = await UpdateTemplate(mock_uow, template_repo).execute(OWNER_ID, "tpl_1", command)

        assert result.is_ok()
        assert result.value.name == "Bold"
        assert result.value.primary_color is None
        assert result.value.layout == "modern"
        template_repo.get_by_id.assert_awaited_once_with("tpl_1", OWNER_ID)
        mock_uow.commit.assert_awaited_once()

    async def test_template_of_other_owner_not_found(self, mock_uow, template_repo):
        template_repo.get_by_id = AsyncMock(return_value=None)

        result = await UpdateTemplate(mock_uow, template_repo).execute(
            "owner_2", "tpl_1", UpdateTemplateCommandDTO(name="Hijacked")
        )

        assert result.error.code == "TEMPLATE_NOT_FOUND"
        assert result.error.kind == ErrorKind.NOT_FOUND
        template_repo.update.assert_not_called()

    async def test_blank_name_rejected(self, mock_uow, template_repo):
        result = await UpdateTemplate(mock_uow, template_repo).execute(
            OWNER_ID, "tpl_1", UpdateTemplateCommandDTO(name="  ")
        )

        assert result.error.kind == ErrorKind.VALIDATION
        template_repo.get_by_id.assert_not_called()


@pytest.mark.asyncio
class TestDeleteTemplate:

    async def test_unused_template_is_deleted(self, mock_uow, template_repo):
        invoice_repo = MagicMock()
        invoice_repo.count_by_template = AsyncMock(return_value=0)

        result = await DeleteTemplate(mock_uow, template_repo, invoice_repo).execute(OWNER_ID, "tpl_1")

        assert result.is_ok()
        template_repo.delete.assert_awaited_once()
        mock_uow.commit.assert_awaited_once()

    async def test_template_used_by_invoices_is_kept(self, mock_uow, template_repo):
        invoice_repo = MagicMock()
        invoice_repo.count_by_template = AsyncMock(return_value=2)

        result = await DeleteTemplate(mock_uow, template_repo, invoice_repo).execute(OWNER_ID, "tpl_1")

        assert result.error.code == "TEMPLATE_IN_USE"
        assert result.error.kind == ErrorKind.PRECONDITION_FAILED
        template_repo.delete.assert_not_called()

    async def test_template_of_other_owner_not_found(self, mock_uow, template_repo):
        template_repo.get_by_id = AsyncMock(return_value=None)
        invoice_repo = MagicMock()
        invoice_repo.count_by_template = AsyncMock(return_value=0)

        result = await DeleteTemplate(mock_uow, template_repo, invoice_repo).execute("owner_2", "tpl_1")

        assert result.error.code == "TEMPLATE_NOT_FOUND"
        invoice_repo.count_by_template.assert_not_called()
        template_repo.delete.assert_not_called()
