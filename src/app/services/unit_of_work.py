"""Unit of Work Interface

Transaction boundary for a single use case execution.
"""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
