"""Invoice Sequence Domain Entity

Per-owner, per-year counter row backing invoice number allocation.
"""

from sqlmodel import Field
from sqlalchemy import UniqueConstraint
from src.domain.base import BaseModel, generate_uuid


class InvoiceSequence(BaseModel, table=True):
    """
    Invoice Sequence - Last issued sequence number for an (owner, year)

    Domain Rules:
    - One row per (owner_id, year)
    - last_number only ever increases
    - Read with SELECT FOR UPDATE inside the creating transaction
    """

    __tablename__ = "invoice_sequences"
    __table_args__ = (
        UniqueConstraint("owner_id", "year", name="uq_invoice_sequences_owner_year"),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    owner_id: str = Field(description="Owning user")

    year: int = Field(description="Calendar year the sequence belongs to")

    last_number: int = Field(default=0, description="Last allocated sequence number")
