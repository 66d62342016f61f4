"""UpsertCompany Use Case"""

import logging
from libs.result import Result, Return, Error, ErrorKind
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.company_repository import CompanyRepository
from src.domain.company import Company
from .dtos import CompanyDTO, UpsertCompanyCommandDTO, UpsertCompanyResponseDTO

logger = logging.getLogger(__name__)


class UpsertCompany:
    """
    Use Case: Create or update the company profile

    Business Rules:
    1. One profile per owner
    2. name is required
    3. The whole profile is replaced by the submitted fields
    """

    def __init__(self, uow: UnitOfWork, company_repo: CompanyRepository):
        self.uow = uow
        self.company_repo = company_repo

    async def execute(
        self, owner_id: str, command: UpsertCompanyCommandDTO
    ) -> Result[UpsertCompanyResponseDTO]:
        if not command.name or not command.name.strip():
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Company name is required",
                    kind=ErrorKind.VALIDATION,
                )
            )

        try:
            company = await self.company_repo.get_by_owner_id(owner_id)
            created = company is None

            if created:
                company = await self.company_repo.create(
                    Company(owner_id=owner_id, **command.model_dump())
                )
            else:
                for name, value in command.model_dump().items():
                    setattr(company, name, value)
                company.updated_at = utc_now()
                company = await self.company_repo.update(company)

            await self.uow.commit()

            logger.info(f"{'Created' if created else 'Updated'} company profile for owner {owner_id}")
            return Return.ok(
                UpsertCompanyResponseDTO(company=CompanyDTO.from_entity(company), created=created)
            )

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPSERT_COMPANY_FAILED",
                    message="Failed to save company profile",
                    reason=str(e),
                )
            )
