"""
Outbound email transport contract.

Dependencies: abc (stdlib)
System role: Seam between the dispatcher and the email provider
"""

from abc import ABC, abstractmethod

from quote_service.models.notification import NotificationContent


class EmailTransport(ABC):
    """Sends one rendered notification to a single recipient."""

    @abstractmethod
    def send(
        self,
        sender: str,
        recipient: str,
        reply_to: str,
        content: NotificationContent,
    ) -> str:
        """
        Send an email.

        Args:
            sender: Verified sender address
            recipient: Verified recipient address
            reply_to: Address replies should go to (the submitter)
            content: Subject, HTML and text bodies

        Returns:
            str: Provider message ID

        Raises:
            EmailDeliveryError: The provider rejected or could not send the email
        """
