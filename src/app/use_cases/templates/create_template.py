"""CreateTemplate Use Case"""

import logging
from libs.result import Result, Return, Error, ErrorKind
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_template_repository import InvoiceTemplateRepository
from src.domain.invoice_template import InvoiceTemplate
from .dtos import CreateTemplateCommandDTO, TemplateDTO

logger = logging.getLogger(__name__)


class CreateTemplate:

    def __init__(self, uow: UnitOfWork, template_repo: InvoiceTemplateRepository):
        self.uow = uow
        self.template_repo = template_repo

    async def execute(self, owner_id: str, command: CreateTemplateCommandDTO) -> Result[TemplateDTO]:
        if not command.name or not command.name.strip():
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Template name is required",
                    kind=ErrorKind.VALIDATION,
                )
            )

        try:
            template = await self.template_repo.create(
                InvoiceTemplate(owner_id=owner_id, **command.model_dump())
            )
            await self.uow.commit()
            logger.info(f"Created invoice template {template.id} for owner {owner_id}")
            return Return.ok(TemplateDTO.from_entity(template))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="CREATE_TEMPLATE_FAILED",
                    message="Failed to create template",
                    reason=str(e),
                )
            )
