"""ListTemplates Use Case"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.invoice_template_repository import InvoiceTemplateRepository
from .dtos import TemplateDTO


class ListTemplates:
    """Owner's templates, newest first"""

    def __init__(self, template_repo: InvoiceTemplateRepository):
        self.template_repo = template_repo

    async def execute(self, owner_id: str) -> Result[List[TemplateDTO]]:
        templates = await self.template_repo.list_by_owner(owner_id)
        return Return.ok([TemplateDTO.from_entity(template) for template in templates])
