"""Data Transfer Objects for Company Profile Use Cases"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from src.domain.company import Company


class UpsertCompanyCommandDTO(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip_code: Optional[str] = None
    tax_id: Optional[str] = None
    website: Optional[str] = None
    logo: Optional[str] = None


class CompanyDTO(UpsertCompanyCommandDTO):
    id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, company: Company) -> "CompanyDTO":
        return cls(
            id=company.id,
            name=company.name,
            email=company.email,
            phone=company.phone,
            address=company.address,
            city=company.city,
            state=company.state,
            country=company.country,
            zip_code=company.zip_code,
            tax_id=company.tax_id,
            website=company.website,
            logo=company.logo,
            created_at=company.created_at,
            updated_at=company.updated_at,
        )


class UpsertCompanyResponseDTO(BaseModel):
    company: CompanyDTO
    created: bool
