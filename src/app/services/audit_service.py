"""Audit Service Interface

Best-effort audit trail for invoice mutations. Callers must never let an
audit failure fail the primary operation.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class AuditService(ABC):

    @abstractmethod
    async def record(
        self,
        owner_id: str,
        action: str,
        entity_type: str,
        entity_id: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Record an audit entry

        Args:
            owner_id: Acting owner
            action: e.g. "CREATE", "UPDATE", "DELETE", "DUPLICATE"
            entity_type: e.g. "invoice"
            entity_id: Affected entity id
            details: Optional structured payload
        """
        pass


async def record_best_effort(
    audit_service: Optional[AuditService],
    owner_id: str,
    action: str,
    entity_type: str,
    entity_id: str,
    details: Optional[Dict[str, Any]] = None,
) -> None:
    """Record an audit entry, logging instead of raising on failure"""
    if audit_service is None:
        return
    try:
        await audit_service.record(owner_id, action, entity_type, entity_id, details)
    except Exception as e:
        logger.warning(f"Audit record {action} {entity_type} {entity_id} failed: {e}")
