"""
Quote notification renderer.

Turns a validated quote request into the subject, HTML body, and plain text
body of the sales notification email. Pure and deterministic: the same
request always renders to byte-identical content, so a redelivered message
produces the same email.

The total quantity is recomputed from the items; client-declared
metadata.totalItems is never displayed.

Dependencies: jinja2
System role: Content generation for the dispatcher
"""

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape

from quote_service.models.notification import NotificationContent
from quote_service.models.quote import QuoteRequest

COMPANY_NAME = "A & S Distributors"
NOT_PROVIDED = "Not provided"

_HTML_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <style>
    body { font-family: Arial, sans-serif; line-height: 1.6; color: #333; }
    .container { max-width: 600px; margin: 0 auto; padding: 20px; }
    .header { background-color: #2563eb; color: white; padding: 20px; text-align: center; }
    .section { margin: 20px 0; padding: 15px; background-color: #f9fafb; border-radius: 8px; }
    .section-title { font-weight: bold; margin-bottom: 10px; color: #1f2937; }
    .info-row { margin: 5px 0; }
    .label { font-weight: 600; }
    .footer { margin-top: 20px; padding-top: 20px; border-top: 1px solid #ddd; font-size: 12px; color: #666; }
    td, th { padding: 8px; border: 1px solid #ddd; }
  </style>
</head>
<body>
  <div class="container">
    <div class="header">
      <h1>New Quote Request</h1>
    </div>

    <div class="section">
      <div class="section-title">Customer Contact Information</div>
      <div class="info-row"><span class="label">Name:</span> {{ contact.name }}</div>
      <div class="info-row"><span class="label">Email:</span> <a href="mailto:{{ contact.email }}">{{ contact.email }}</a></div>
      <div class="info-row"><span class="label">Phone:</span> <a href="tel:{{ contact.phone }}">{{ contact.phone }}</a></div>
    </div>

    <div class="section">
      <div class="section-title">Requested Items ({{ unique_products }} products)</div>
      <table style="border-collapse: collapse; width: 100%; margin: 16px 0;">
        <thead>
          <tr style="background-color: #f5f5f5;">
            <th style="text-align: left;">Item #</th>
            <th style="text-align: left;">Product</th>
            <th style="text-align: center;">Packs</th>
          </tr>
        </thead>
        <tbody>
{%- for row in rows %}
          <tr>
            <td>{{ row.identifier }}</td>
            <td>{{ row.product_name }}</td>
            <td style="text-align: center;">{{ row.quantity }}</td>
          </tr>
{%- endfor %}
        </tbody>
        <tfoot>
          <tr style="background-color: #f5f5f5;">
            <th style="text-align: left;" colspan="2"><strong>Total</strong></th>
            <th style="text-align: center;">{{ total_quantity }}</th>
          </tr>
        </tfoot>
      </table>
    </div>

    <div class="section">
      <div class="section-title">Request Details</div>
      <div class="info-row"><span class="label">Submitted:</span> {{ submitted_at }}</div>
    </div>

    <div class="footer">
      <p>This is an automated message from {{ company }} quote request system.</p>
      <p>The customer has agreed to be contacted by a sales representative.</p>
    </div>
  </div>
</body>
</html>
"""

_TEXT_TEMPLATE = """NEW QUOTE REQUEST
=================

Contact Information
-------------------
Name: {{ contact.name }}
Email: {{ contact.email }}
Phone: {{ contact.phone }}

Requested Items ({{ unique_products }} products, {{ total_quantity }} total packs)
-------------------
{% for row in rows -%}
- [{{ row.identifier }}] {{ row.product_name }}: {{ row.quantity }} pack(s)
{% endfor %}
Total: {{ total_quantity }} pack(s)

Request Details
-------------------
Submitted: {{ submitted_at }}

---
This is an automated message from {{ company }} quote request system.
The customer has agreed to be contacted by a sales representative."""

_html_env = Environment(
    loader=DictLoader({"notification.html": _HTML_TEMPLATE}),
    autoescape=select_autoescape(default_for_string=True, default=True),
    undefined=StrictUndefined,
)
_text_env = Environment(
    loader=DictLoader({"notification.txt": _TEXT_TEMPLATE}),
    autoescape=False,
    undefined=StrictUndefined,
)


def format_quantity(value: int | float) -> str:
    """Render a quantity without a trailing '.0' for whole numbers."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def total_quantity(quote: QuoteRequest) -> int | float:
    """Sum of item quantities, computed from the items themselves."""
    return sum(item.quantity for item in quote.quote_items)


def _build_context(quote: QuoteRequest) -> dict:
    rows = [
        {
            "identifier": item.item_number if item.item_number is not None else index,
            "product_name": item.product_name,
            "quantity": format_quantity(item.quantity),
        }
        for index, item in enumerate(quote.quote_items, start=1)
    ]
    return {
        "contact": quote.contact_info,
        "rows": rows,
        "total_quantity": format_quantity(total_quantity(quote)),
        "unique_products": len({item.product_name for item in quote.quote_items}),
        "submitted_at": quote.metadata.submitted_at or NOT_PROVIDED,
        "company": COMPANY_NAME,
    }


def render(quote: QuoteRequest) -> NotificationContent:
    """
    Render the sales notification for a quote request.

    Args:
        quote: Validated quote request

    Returns:
        NotificationContent: Subject, HTML body, and text body
    """
    context = _build_context(quote)
    return NotificationContent(
        subject=f"New Quote Request from {quote.contact_info.name}",
        html_body=_html_env.get_template("notification.html").render(context),
        text_body=_text_env.get_template("notification.txt").render(context),
    )
