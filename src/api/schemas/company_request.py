"""Request schemas for Company and Template API"""

from typing import Optional
from pydantic import BaseModel, Field


class UpsertCompanyRequestSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Company name is required")
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


class CreateTemplateRequestSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    is_default: bool = False
    primary_color: Optional[str] = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")
    layout: Optional[str] = Field(default=None, max_length=50)


class UpdateTemplateRequestSchema(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    is_default: Optional[bool] = None
    primary_color: Optional[str] = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")
    layout: Optional[str] = Field(default=None, max_length=50)
