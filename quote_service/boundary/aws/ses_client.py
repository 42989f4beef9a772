"""
SES email transport.

Sends quote notifications through Amazon SES. Sender and recipient must be
verified SES identities (declared in IAC); that precondition is not checked
here.

Dependencies: boto3
System role: Outbound email boundary for the dispatcher
"""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from quote_service.core.exceptions import EmailDeliveryError
from quote_service.core.notification.transport import EmailTransport
from quote_service.models.notification import NotificationContent

logger = logging.getLogger(__name__)

CHARSET = "UTF-8"


class SesEmailTransport(EmailTransport):
    """EmailTransport backed by the SES SendEmail API."""

    def __init__(self, region: str = "ap-southeast-2", client=None) -> None:
        """
        Initialize SES client.

        Args:
            region: AWS region of the SES identities
            client: Pre-built boto3 SES client (built from region if None)
        """
        self._region = region
        self._client = client or boto3.client("ses", region_name=region)

    def send(
        self,
        sender: str,
        recipient: str,
        reply_to: str,
        content: NotificationContent,
    ) -> str:
        try:
            response = self._client.send_email(
                Source=sender,
                Destination={"ToAddresses": [recipient]},
                ReplyToAddresses=[reply_to],
                Message={
                    "Subject": {"Data": content.subject, "Charset": CHARSET},
                    "Body": {
                        "Html": {"Data": content.html_body, "Charset": CHARSET},
                        "Text": {"Data": content.text_body, "Charset": CHARSET},
                    },
                },
            )
        except (ClientError, BotoCoreError) as e:
            logger.error("send - %s: %s", type(e).__name__, e)
            raise EmailDeliveryError(f"SES send_email failed: {e}", recipient=recipient) from e

        message_id = response["MessageId"]
        logger.info("send - Email sent", extra={"ses_message_id": message_id})
        return message_id
