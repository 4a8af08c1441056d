"""
Invoice data model and caller-side assembly from loose JSON fields.
"""

# Standard Library
import dataclasses
import datetime
import json
import pathlib

# local repo modules
import invoice_pdf_templates as ipt
import invoice_pdf_templates.config


DEFAULT_TEMPLATE = ipt.config.DEFAULT_TEMPLATE
DATE_FORMAT = ipt.config.DATE_FORMAT

# camelCase keys used by the automation node that collects invoice fields
FIELD_ALIASES = {
	"invoiceTemplate": "template",
	"companyName": "company_name",
	"companyAddress": "company_address",
	"companyEmail": "company_email",
	"companyPhone": "company_phone",
	"clientName": "client_name",
	"clientAddress": "client_address",
	"clientEmail": "client_email",
	"invoiceNumber": "invoice_number",
	"invoiceDate": "invoice_date",
	"dueDate": "due_date",
	"lineItems": "items",
	"line_items": "items",
	"taxRate": "tax_rate",
	"primaryColor": "primary_color",
	"secondaryColor": "secondary_color",
	"paymentInstructions": "payment_instructions",
}

ITEM_ALIASES = {
	"unitPrice": "unit_price",
	"price": "unit_price",
	"qty": "quantity",
}


@dataclasses.dataclass(frozen=True)
class LineItem:
	description: str
	quantity: float
	unit_price: float


@dataclasses.dataclass(frozen=True)
class InvoiceData:
	template: str | None = DEFAULT_TEMPLATE
	company_name: str = ipt.config.DEFAULT_COMPANY_NAME
	company_address: str = ipt.config.DEFAULT_COMPANY_ADDRESS
	company_email: str = ipt.config.DEFAULT_COMPANY_EMAIL
	company_phone: str = ipt.config.DEFAULT_COMPANY_PHONE
	client_name: str = ipt.config.DEFAULT_CLIENT_NAME
	client_address: str = ipt.config.DEFAULT_CLIENT_ADDRESS
	client_email: str = ipt.config.DEFAULT_CLIENT_EMAIL
	invoice_number: str = ipt.config.DEFAULT_INVOICE_NUMBER
	invoice_date: str = ""
	due_date: str = ""
	currency: str = ipt.config.DEFAULT_CURRENCY
	items: tuple[LineItem, ...] = ()
	tax_rate: float = ipt.config.DEFAULT_TAX_RATE
	primary_color: str = ipt.config.DEFAULT_PRIMARY_COLOR
	secondary_color: str = ipt.config.DEFAULT_SECONDARY_COLOR
	notes: str = ""
	terms: str = ""
	payment_instructions: str = ""


#============================================
def placeholder_item() -> LineItem:
	"""
	Build the stand-in line item used when no items were supplied.
	"""
	return LineItem(
		description=ipt.config.PLACEHOLDER_DESCRIPTION,
		quantity=ipt.config.PLACEHOLDER_QUANTITY,
		unit_price=ipt.config.PLACEHOLDER_UNIT_PRICE,
	)


#============================================
def default_dates(today: datetime.date | None = None) -> tuple[str, str]:
	"""
	Compute default issue and due dates.

	Args:
		today: Issue date, defaults to the current date.

	Returns:
		Tuple of (invoice_date, due_date) as YYYY-MM-DD strings.
	"""
	if today is None:
		today = datetime.date.today()
	due = today + datetime.timedelta(days=ipt.config.DEFAULT_DUE_DAYS)
	return (today.strftime(DATE_FORMAT), due.strftime(DATE_FORMAT))


#============================================
def normalize_keys(fields: dict, aliases: dict[str, str]) -> dict:
	normalized: dict = {}
	for key, value in fields.items():
		normalized[aliases.get(key, key)] = value
	return normalized


#============================================
def build_line_item(raw: dict) -> LineItem:
	"""
	Build a line item, replacing falsy fields with node defaults.

	A zero quantity becomes 1 and a missing price becomes 0, matching how
	the collecting node fills empty form rows.

	Args:
		raw: Mapping with description, quantity and unit price.

	Returns:
		LineItem.
	"""
	fields = normalize_keys(raw, ITEM_ALIASES)
	description = fields.get("description") or ipt.config.DEFAULT_ITEM_DESCRIPTION
	quantity = fields.get("quantity") or ipt.config.DEFAULT_ITEM_QUANTITY
	unit_price = fields.get("unit_price") or ipt.config.DEFAULT_ITEM_UNIT_PRICE
	return LineItem(
		description=str(description),
		quantity=float(quantity),
		unit_price=float(unit_price),
	)


#============================================
def build_line_items(raw_items) -> tuple[LineItem, ...]:
	"""
	Build line items from a list, or from a {"items": [...]} wrapper.

	An empty or missing list yields the single placeholder item.
	"""
	if isinstance(raw_items, dict):
		raw_items = raw_items.get("items")
	items = tuple(build_line_item(raw) for raw in (raw_items or []))
	if not items:
		items = (placeholder_item(),)
	return items


#============================================
def build_invoice_data(fields: dict, today: datetime.date | None = None) -> InvoiceData:
	"""
	Assemble InvoiceData from loose fields.

	Accepts snake_case keys and the node's camelCase keys. Missing fields
	fall back to the node defaults, as do null values; unknown keys
	are ignored.

	Args:
		fields: Field mapping, e.g. parsed JSON.
		today: Reference date for default invoice and due dates.

	Returns:
		InvoiceData ready for rendering.
	"""
	normalized = normalize_keys(fields, FIELD_ALIASES)
	invoice_date, due_date = default_dates(today)
	known = {field.name for field in dataclasses.fields(InvoiceData)}
	values = {
		key: value
		for key, value in normalized.items()
		if key in known and value is not None
	}
	values["items"] = build_line_items(values.get("items"))
	values.setdefault("invoice_date", invoice_date)
	values.setdefault("due_date", due_date)
	values.setdefault("terms", ipt.config.DEFAULT_TERMS)
	values["tax_rate"] = float(values.get("tax_rate", ipt.config.DEFAULT_TAX_RATE))
	return InvoiceData(**values)


#============================================
def load_invoice_json(path: pathlib.Path) -> dict:
	"""
	Read invoice fields from a JSON file.

	Args:
		path: JSON file path.

	Returns:
		Field mapping.
	"""
	with path.open("r", encoding="utf-8") as handle:
		payload = json.load(handle)
	if not isinstance(payload, dict):
		raise ValueError(f"invoice JSON must be an object: {path}")
	return payload
