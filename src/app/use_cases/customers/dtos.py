"""Data Transfer Objects for Customer Use Cases"""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel

from src.domain.customer import Customer


class CustomerFieldsDTO(BaseModel):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip_code: Optional[str] = None
    tax_id: Optional[str] = None
    notes: Optional[str] = None


class CreateCustomerCommandDTO(CustomerFieldsDTO):
    pass


class UpdateCustomerCommandDTO(BaseModel):
    """Partial update; fields absent from the payload are left unchanged"""

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    zip_code: Optional[str] = None
    tax_id: Optional[str] = None
    notes: Optional[str] = None
    is_active: Optional[bool] = None


class ListCustomersQueryDTO(BaseModel):
    search: Optional[str] = None
    is_active: Optional[bool] = None
    page: int = 1
    limit: int = 10


class CustomerDTO(CustomerFieldsDTO):
    id: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, customer: Customer) -> "CustomerDTO":
        return cls(
            id=customer.id,
            name=customer.name,
            email=customer.email,
            phone=customer.phone,
            company=customer.company,
            address=customer.address,
            city=customer.city,
            state=customer.state,
            country=customer.country,
            zip_code=customer.zip_code,
            tax_id=customer.tax_id,
            notes=customer.notes,
            is_active=customer.is_active,
            created_at=customer.created_at,
            updated_at=customer.updated_at,
        )


class CustomerPaginationDTO(BaseModel):
    total: int
    page: int
    limit: int
    total_pages: int


class ListCustomersResponseDTO(BaseModel):
    customers: List[CustomerDTO]
    pagination: CustomerPaginationDTO
