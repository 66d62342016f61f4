"""GetTemplate Use Case"""

from libs.result import Result, Return
from src.app.repositories.invoice_template_repository import InvoiceTemplateRepository
from .dtos import TemplateDTO
from .errors import template_not_found


class GetTemplate:

    def __init__(self, template_repo: InvoiceTemplateRepository):
        self.template_repo = template_repo

    async def execute(self, owner_id: str, template_id: str) -> Result[TemplateDTO]:
        template = await self.template_repo.get_by_id(template_id, owner_id)
        if not template:
            return Return.err(template_not_found(template_id))
        return Return.ok(TemplateDTO.from_entity(template))
