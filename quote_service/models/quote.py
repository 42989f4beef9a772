"""
Quote request models.

Typed form of a quote request after it has passed the payload validator.
Wire keys are camelCase (as posted by the website form); attributes are
snake_case.

Dependencies: pydantic
System role: Data contract between intake, queue, and dispatcher
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ContactInfo(BaseModel):
    """Submitter contact details."""

    name: str
    email: str
    phone: str


class QuoteItem(BaseModel):
    """One requested product line."""

    model_config = ConfigDict(populate_by_name=True)

    product_name: str = Field(..., alias="productName")
    quantity: int | float = Field(..., description="Requested packs, >= 1")
    item_number: Any = Field(
        default=None,
        alias="itemNumber",
        description="Catalogue identifier shown in the notification",
    )


class QuoteMetadata(BaseModel):
    """
    Client-declared summary values, informational only.

    Values are carried through as sent and never checked against the items.
    """

    model_config = ConfigDict(populate_by_name=True)

    total_items: Any = Field(default=None, alias="totalItems")
    total_unique_products: Any = Field(default=None, alias="totalUniqueProducts")
    submitted_at: Any = Field(default=None, alias="submittedAt")


class QuoteRequest(BaseModel):
    """Validated quote request as stored on the durable queue."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "contactInfo": {
                    "name": "Jane",
                    "email": "jane@x.com",
                    "phone": "555-1234",
                },
                "quoteItems": [{"productName": "Widget", "quantity": 2}],
                "metadata": {
                    "totalItems": 2,
                    "totalUniqueProducts": 1,
                    "submittedAt": "2024-01-01T00:00:00Z",
                },
                "agreedToContact": True,
            }
        },
    )

    contact_info: ContactInfo = Field(..., alias="contactInfo")
    quote_items: list[QuoteItem] = Field(..., alias="quoteItems")
    metadata: QuoteMetadata = Field(default_factory=QuoteMetadata)
    agreed_to_contact: bool = Field(..., alias="agreedToContact")

    @field_validator("metadata", mode="before")
    @classmethod
    def default_metadata(cls, value):
        """Treat a null or non-object metadata block as absent."""
        return value if isinstance(value, (dict, QuoteMetadata)) else {}

    def to_message_body(self) -> str:
        """Serialize to the camelCase JSON body placed on the queue."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
