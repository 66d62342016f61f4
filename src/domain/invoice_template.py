"""Invoice Template Domain Entity"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import String
from src.domain.base import BaseModel, generate_uuid, timestamp_field


class InvoiceTemplate(BaseModel, table=True):
    """
    Invoice Template - Named presentation preset an invoice may reference

    Domain Rules:
    - Scoped to one owner; cross-owner references resolve as not found
    """

    __tablename__ = "invoice_templates"
    __table_args__ = (
        Index("ix_invoice_templates_owner_id", "owner_id"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    owner_id: str = Field(description="Owning user")

    name: str = Field(sa_column=Column(String(100), nullable=False))

    is_default: bool = Field(default=False)

    primary_color: Optional[str] = Field(default=None, description="Hex color, e.g. #2C3E50")

    layout: Optional[str] = Field(default=None, description="Layout identifier, e.g. 'classic'")

    created_at: datetime = timestamp_field()
    updated_at: datetime = timestamp_field()
