"""Logging Audit Service Implementation"""

import logging
from typing import Any, Dict, Optional
from src.app.services.audit_service import AuditService

logger = logging.getLogger("invoicing.audit")


class LoggingAuditService(AuditService):
    """Writes one structured log record per audited mutation"""

    async def record(
        self,
        owner_id: str,
        action: str,
        entity_type: str,
        entity_id: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        logger.info(
            f"{action} {entity_type} {entity_id}",
            extra={
                "owner_id": owner_id,
                "action": action,
                "entity_type": entity_type,
                "entity_id": entity_id,
                "details": details or {},
            },
        )
