"""Company Profile API Routes"""

from typing import Optional
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.company_request import UpsertCompanyRequestSchema
from src.app.use_cases.company import (
    CompanyDTO,
    GetCompany,
    UpsertCompany,
    UpsertCompanyCommandDTO,
    UpsertCompanyResponseDTO,
)
from src.adapter.repositories import SqlAlchemyCompanyRepository
from src.adapter.services import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError
from src.api.identity import get_current_owner_id

router = APIRouter(prefix="/company", tags=["Company"])


@router.get("", response_model=Optional[CompanyDTO])
async def get_company(
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    """The owner's company profile, or null when not set up yet."""
    result = await GetCompany(SqlAlchemyCompanyRepository(session)).execute(owner_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("", response_model=UpsertCompanyResponseDTO)
async def upsert_company(
    request: UpsertCompanyRequestSchema,
    owner_id: str = Depends(get_current_owner_id),
    session: AsyncSession = Depends(get_session),
):
    """
    Create or replace the company profile.

    **Returns:**
    - 201: Profile created
    - 200: Profile updated
    """
    use_case = UpsertCompany(SqlAlchemyUnitOfWork(session), SqlAlchemyCompanyRepository(session))
    result = await use_case.execute(owner_id, UpsertCompanyCommandDTO(**request.model_dump()))

    if result.is_err():
        raise ClientError(result.error)

    response = result.value
    return JSONResponse(
        status_code=status.HTTP_201_CREATED if response.created else status.HTTP_200_OK,
        content=response.model_dump(mode="json"),
    )
