"""
Shared configuration and constants.
"""

import dataclasses


# A4 in points
PAGE_WIDTH = 595.0
PAGE_HEIGHT = 842.0
PAGE_SIZE = (PAGE_WIDTH, PAGE_HEIGHT)

FONT_HELVETICA = "Helvetica"
FONT_HELVETICA_BOLD = "Helvetica-Bold"
FONT_TIMES = "Times-Roman"
FONT_TIMES_BOLD = "Times-Bold"
FONT_TIMES_ITALIC = "Times-Italic"

DEFAULT_LINE_HEIGHT = 1.2
GRADIENT_STRIPS = 20
MONEY_DECIMALS = 2

DEFAULT_TEMPLATE = "modern"
DEFAULT_COMPANY_NAME = "Your Company Name"
DEFAULT_COMPANY_ADDRESS = "123 Business Street\nCity, State 12345\nCountry"
DEFAULT_COMPANY_EMAIL = "billing@company.com"
DEFAULT_COMPANY_PHONE = "+1 (555) 123-4567"
DEFAULT_CLIENT_NAME = "Client Name"
DEFAULT_CLIENT_ADDRESS = "456 Client Avenue\nCity, State 67890"
DEFAULT_CLIENT_EMAIL = "client@example.com"
DEFAULT_INVOICE_NUMBER = "INV-001"
DEFAULT_DUE_DAYS = 30
DEFAULT_CURRENCY = "$"
DEFAULT_TAX_RATE = 0.0
DEFAULT_PRIMARY_COLOR = "#2563eb"
DEFAULT_SECONDARY_COLOR = "#f1f5f9"
DEFAULT_TERMS = "Payment is due within 30 days."

DEFAULT_ITEM_DESCRIPTION = "Item"
DEFAULT_ITEM_QUANTITY = 1.0
DEFAULT_ITEM_UNIT_PRICE = 0.0
PLACEHOLDER_DESCRIPTION = "Service/Product"
PLACEHOLDER_QUANTITY = 1.0
PLACEHOLDER_UNIT_PRICE = 100.0

DATE_FORMAT = "%Y-%m-%d"


@dataclasses.dataclass
class RenderConfig:
	invariant: bool = True
	title: str | None = None
	author: str | None = None
