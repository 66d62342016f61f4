"""Company profile use cases"""
from .get_company import GetCompany
from .upsert_company import UpsertCompany
from .dtos import CompanyDTO, UpsertCompanyCommandDTO, UpsertCompanyResponseDTO

__all__ = [
    "GetCompany",
    "UpsertCompany",
    "CompanyDTO",
    "UpsertCompanyCommandDTO",
    "UpsertCompanyResponseDTO",
]
