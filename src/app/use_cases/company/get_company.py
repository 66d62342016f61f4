"""GetCompany Use Case"""

from typing import Optional
from libs.result import Result, Return
from src.app.repositories.company_repository import CompanyRepository
from .dtos import CompanyDTO


class GetCompany:
    """Returns the owner's company profile, or None when not set up yet"""

    def __init__(self, company_repo: CompanyRepository):
        self.company_repo = company_repo

    async def execute(self, owner_id: str) -> Result[Optional[CompanyDTO]]:
        company = await self.company_repo.get_by_owner_id(owner_id)
        return Return.ok(CompanyDTO.from_entity(company) if company else None)
