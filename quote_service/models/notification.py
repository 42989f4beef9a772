"""
Notification content model.

Dependencies: pydantic
System role: Rendered email content passed from renderer to transport
"""

from pydantic import BaseModel, ConfigDict


class NotificationContent(BaseModel):
    """Subject and bodies of one quote notification email."""

    model_config = ConfigDict(frozen=True)

    subject: str
    html_body: str
    text_body: str
