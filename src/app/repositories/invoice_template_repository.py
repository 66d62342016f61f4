"""Invoice Template Repository Interface"""

from abc import ABC, abstractmethod
from typing import List, Optional
from src.domain.invoice_template import InvoiceTemplate


class InvoiceTemplateRepository(ABC):

    @abstractmethod
    async def create(self, template: InvoiceTemplate) -> InvoiceTemplate:
        pass

    @abstractmethod
    async def get_by_id(self, template_id: str, owner_id: str) -> Optional[InvoiceTemplate]:
        """Template within the owner's scope, None otherwise"""
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> List[InvoiceTemplate]:
        pass

    @abstractmethod
    async def update(self, template: InvoiceTemplate) -> InvoiceTemplate:
        pass

    @abstractmethod
    async def delete(self, template: InvoiceTemplate) -> None:
        pass
