"""
Invoice totals and money formatting.
"""

# Standard Library
import dataclasses
import decimal
import typing

# local repo modules
import invoice_pdf_templates as ipt
import invoice_pdf_templates.config
import invoice_pdf_templates.invoice_data


LineItem = ipt.invoice_data.LineItem

MONEY_DECIMALS = ipt.config.MONEY_DECIMALS
MONEY_QUANTUM = decimal.Decimal(10) ** -MONEY_DECIMALS


@dataclasses.dataclass(frozen=True)
class ComputedTotals:
	subtotal: float
	tax: float
	total: float


#============================================
def line_total(item: LineItem) -> float:
	return item.quantity * item.unit_price


#============================================
def compute_totals(items: typing.Iterable[LineItem], tax_rate: float) -> ComputedTotals:
	"""
	Compute subtotal, tax and total at full precision.

	Negative quantities, prices and rates are passed through unchanged.

	Args:
		items: Line items.
		tax_rate: Tax rate as a percentage, e.g. 10 for 10%.

	Returns:
		ComputedTotals.
	"""
	subtotal = 0.0
	for item in items:
		subtotal += line_total(item)
	tax = subtotal * (tax_rate / 100.0)
	return ComputedTotals(subtotal=subtotal, tax=tax, total=subtotal + tax)


#============================================
def format_amount(value: float) -> str:
	"""
	Format an amount to two decimals, rounding half away from zero.

	The exact binary value is rounded, so 0.125 gives "0.13" and 1.005
	(stored just below 1.005) gives "1.00".
	"""
	rounded = decimal.Decimal(value).quantize(MONEY_QUANTUM, rounding=decimal.ROUND_HALF_UP)
	return f"{rounded:f}"


#============================================
def format_money(currency: str, value: float) -> str:
	"""
	Format an amount with the currency symbol prefixed, e.g. "$350.00".
	"""
	return f"{currency}{format_amount(value)}"


#============================================
def format_number(value: float) -> str:
	"""
	Format a quantity or rate without a trailing ".0".

	Args:
		value: Number to format.

	Returns:
		"2" for 2.0, "7.5" for 7.5.
	"""
	number = float(value)
	if number.is_integer():
		return str(int(number))
	return str(number)
