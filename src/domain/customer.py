"""Customer Domain Entity

Billable party of an owner.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import String, UniqueConstraint
from src.domain.base import BaseModel, generate_uuid, timestamp_field


class Customer(BaseModel, table=True):
    """
    Customer - A party invoices are issued to

    Domain Rules:
    - Scoped to one owner; never visible to other owners
    - email is unique per owner when present
    - Cannot be deleted while referenced by an invoice (deactivate instead)
    """

    __tablename__ = "customers"
    __table_args__ = (
        UniqueConstraint("owner_id", "email", name="uq_customers_owner_email"),
        Index("ix_customers_owner_id", "owner_id"),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique customer identifier"
    )

    owner_id: str = Field(description="Owning user")

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Customer display name"
    )

    email: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    company: Optional[str] = Field(default=None, description="Customer's organisation name")
    address: Optional[str] = Field(default=None)
    city: Optional[str] = Field(default=None)
    state: Optional[str] = Field(default=None)
    country: Optional[str] = Field(default=None)
    zip_code: Optional[str] = Field(default=None)
    tax_id: Optional[str] = Field(default=None)
    notes: Optional[str] = Field(default=None)

    is_active: bool = Field(default=True)

    created_at: datetime = timestamp_field()
    updated_at: datetime = timestamp_field()
