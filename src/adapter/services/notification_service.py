"""Notification Service Implementations

Provides concrete channels for delivering invoice documents.
"""

import base64
import logging
from typing import List, Optional
import httpx
from src.app.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class LoggingNotificationService(NotificationService):
    """
    Notification service that only logs the delivery

    Useful for development and testing, or as a fallback.
    """

    async def send_invoice(self, recipient: str, invoice_number: str, pdf: bytes) -> bool:
        """
        Log invoice delivery

        Returns:
            Always True (logging never fails)
        """
        logger.info(
            f"[INVOICE EMAIL] To: {recipient}, Invoice: {invoice_number}, "
            f"Attachment: invoice-{invoice_number}.pdf ({len(pdf)} bytes)"
        )
        return True


class WebhookNotificationService(NotificationService):
    """
    Notification service that hands invoices to a mail relay webhook

    Sends a JSON payload with the PDF base64-encoded.
    """

    def __init__(
        self,
        webhook_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize webhook notification service

        Args:
            webhook_url: URL to POST deliveries to
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.transport = transport

    async def send_invoice(self, recipient: str, invoice_number: str, pdf: bytes) -> bool:
        """
        Send invoice via webhook

        Returns:
            True if the relay accepted the request, False otherwise
        """
        payload = {
            "type": "invoice_email",
            "to": recipient,
            "subject": f"Invoice {invoice_number}",
            "invoice_number": invoice_number,
            "attachment": {
                "filename": f"invoice-{invoice_number}.pdf",
                "content_type": "application/pdf",
                "content": base64.b64encode(pdf).decode("ascii"),
            },
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.webhook_url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                logger.info(f"Webhook delivery of invoice {invoice_number} to {recipient} accepted")
                return True
        except httpx.HTTPError as e:
            logger.error(f"Failed to deliver invoice {invoice_number} via webhook: {e}")
            return False


class CompositeNotificationService(NotificationService):
    """
    Notification service that delegates to multiple channels

    Delivery succeeds only when every channel accepts it.
    """

    def __init__(self, services: List[NotificationService]):
        self.services = services

    async def send_invoice(self, recipient: str, invoice_number: str, pdf: bytes) -> bool:
        """
        Returns:
            True if every channel succeeded, False otherwise
        """
        success = True
        for service in self.services:
            try:
                if not await service.send_invoice(recipient, invoice_number, pdf):
                    success = False
            except Exception as e:
                logger.error(f"Notification service {type(service).__name__} failed: {e}")
                success = False
        return success


def create_notification_service(
    webhook_url: Optional[str] = None, timeout: float = 10.0
) -> NotificationService:
    """
    Factory function to create appropriate notification service

    Args:
        webhook_url: Optional relay URL. If provided, the webhook is the
                     delivery channel and logging is kept alongside it.
        timeout: Webhook request timeout in seconds

    Returns:
        Configured NotificationService
    """
    if not webhook_url:
        return LoggingNotificationService()

    return CompositeNotificationService(
        [WebhookNotificationService(webhook_url, timeout), LoggingNotificationService()]
    )
