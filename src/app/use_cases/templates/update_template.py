"""UpdateTemplate Use Case"""

import logging
from libs.result import Result, Return, Error, ErrorKind
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.invoice_template_repository import InvoiceTemplateRepository
from .dtos import TemplateDTO, UpdateTemplateCommandDTO
from .errors import template_not_found

logger = logging.getLogger(__name__)


class UpdateTemplate:
    """
    Use Case: Update invoice template

    Present fields overwrite, absent fields are untouched. An explicit null
    clears the color or layout; name and is_default cannot be cleared.
    """

    def __init__(self, uow: UnitOfWork, template_repo: InvoiceTemplateRepository):
        self.uow = uow
        self.template_repo = template_repo

    async def execute(
        self, owner_id: str, template_id: str, command: UpdateTemplateCommandDTO
    ) -> Result[TemplateDTO]:
        changes = command.model_dump(exclude_unset=True)

        if "name" in changes and not (changes["name"] or "").strip():
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message="Template name cannot be empty",
                    kind=ErrorKind.VALIDATION,
                )
            )
        if "is_default" in changes and changes["is_default"] is None:
            del changes["is_default"]

        try:
            template = await self.template_repo.get_by_id(template_id, owner_id)
            if not template:
                return Return.err(template_not_found(template_id))

            for name, value in changes.items():
                setattr(template, name, value)
            template.updated_at = utc_now()

            updated = await self.template_repo.update(template)
            await self.uow.commit()

            logger.info(f"Updated invoice template {template_id} for owner {owner_id}")
            return Return.ok(TemplateDTO.from_entity(updated))

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="UPDATE_TEMPLATE_FAILED",
                    message="Failed to update template",
                    reason=str(e),
                )
            )
