"""Company Domain Entity

The owner's own business profile, printed as the issuer on every invoice.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String
from src.domain.base import BaseModel, generate_uuid, timestamp_field


class Company(BaseModel, table=True):
    """
    Company - Issuer profile of an owner

    Domain Rules:
    - Exactly one company per owner (owner_id is unique)
    - Must exist before the owner can create invoices
    """

    __tablename__ = "companies"

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Unique company identifier"
    )

    owner_id: str = Field(
        index=True,
        unique=True,
        description="Owning user (one company per owner)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Legal or trading name"
    )

    email: Optional[str] = Field(default=None)
    phone: Optional[str] = Field(default=None)
    address: Optional[str] = Field(default=None)
    city: Optional[str] = Field(default=None)
    state: Optional[str] = Field(default=None)
    country: Optional[str] = Field(default=None)
    zip_code: Optional[str] = Field(default=None)
    tax_id: Optional[str] = Field(default=None)
    website: Optional[str] = Field(default=None)
    logo: Optional[str] = Field(default=None, description="Logo URL from the file store")

    created_at: datetime = timestamp_field()
    updated_at: datetime = timestamp_field()
