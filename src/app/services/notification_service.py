"""Notification Service Interface

Defines the contract for delivering rendered invoices to recipients.
"""

from abc import ABC, abstractmethod


class NotificationService(ABC):
    """
    Abstract delivery channel for invoice documents

    Implementations may hand the document to:
    - A mail relay webhook
    - An SMTP transport
    - A log sink (development)
    """

    @abstractmethod
    async def send_invoice(self, recipient: str, invoice_number: str, pdf: bytes) -> bool:
        """
        Deliver an invoice PDF

        Args:
            recipient: Destination email address
            invoice_number: Invoice number, used for subject and filename
            pdf: Rendered PDF document

        Returns:
            True if the collaborator accepted the document, False otherwise
        """
        pass
