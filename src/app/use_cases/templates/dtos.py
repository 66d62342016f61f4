"""Data Transfer Objects for Invoice Template Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from src.domain.invoice_template import InvoiceTemplate


class CreateTemplateCommandDTO(BaseModel):
    name: str
    is_default: bool = False
    primary_color: Optional[str] = None
    layout: Optional[str] = None


class UpdateTemplateCommandDTO(BaseModel):
    """Partial update; fields absent from the payload are left unchanged"""

    name: Optional[str] = None
    is_default: Optional[bool] = None
    primary_color: Optional[str] = None
    layout: Optional[str] = None


class TemplateDTO(CreateTemplateCommandDTO):
    id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, template: InvoiceTemplate) -> "TemplateDTO":
        return cls(
            id=template.id,
            name=template.name,
            is_default=template.is_default,
            primary_color=template.primary_color,
            layout=template.layout,
            created_at=template.created_at,
            updated_at=template.updated_at,
        )
