"""Invoice Template API Routes"""

from typing import List
from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.company_request import CreateTemplateRequestSchema, UpdateTemplateRequestSchema
from src.app.use_cases.templates import (
    CreateTemplate,
    CreateTemplateCommandDTO,
    DeleteTemplate,
    GetTemplate,
    ListTemplates,
    TemplateDTO,
    UpdateTemplate,
    UpdateTemplateCommandDTO,
)
from src.adapter.repositories import SqlAlchemyInvoiceRepository, SqlAlchemyInvoiceTemplateRepository
from src.adapter.services import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError
from src.api.identity import get_current_owner_id

router = APIRouter(prefix="/templates", tags=["Templates"])


@router.get("", response_model=List[TemplateDTO])
async def list_templates(
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    result = await ListTemplates(SqlAlchemyInvoiceTemplateRepository(session)).execute(owner_id)
    return result.value


@router.get("/{template_id}", response_model=TemplateDTO)
async def get_template(
    template_id: str,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    result = await GetTemplate(SqlAlchemyInvoiceTemplateRepository(session)).execute(owner_id, template_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("", response_model=TemplateDTO, status_code=status.HTTP_201_CREATED)
async def create_template(
    request: CreateTemplateRequestSchema,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = CreateTemplate(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceTemplateRepository(session))
    result = await use_case.execute(owner_id, CreateTemplateCommandDTO(**request.model_dump()))

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put("/{template_id}", response_model=TemplateDTO)
async def update_template(
    template_id: str,
    request: UpdateTemplateRequestSchema,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    command = UpdateTemplateCommandDTO(**request.model_dump(exclude_unset=True))

    use_case = UpdateTemplate(SqlAlchemyUnitOfWork(session), SqlAlchemyInvoiceTemplateRepository(session))
    result = await use_case.execute(owner_id, template_id, command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.delete(
    "/{template_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={400: {"description": "Template is used by existing invoices"}},
)
async def delete_template(
    template_id: str,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    use_case = DeleteTemplate(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyInvoiceTemplateRepository(session),
        SqlAlchemyInvoiceRepository(session),
    )
    result = await use_case.execute(owner_id, template_id)

    if result.is_err():
        raise ClientError(result.error)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
