"""
Pytest configuration: local imports and shared invoice fixtures.
"""

# Standard Library
import datetime
import os
import sys

# PIP3 modules
import pytest


#============================================
def _ensure_repo_on_path() -> None:
	"""
	Ensure the repository root is on sys.path so the package imports
	without installation.
	"""
	repo_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
	if repo_root not in sys.path:
		sys.path.insert(0, repo_root)


_ensure_repo_on_path()

import invoice_pdf_templates.invoice_data  # noqa: E402


ISSUE_DATE = datetime.date(2024, 3, 1)


#============================================
@pytest.fixture
def invoice_fields() -> dict:
	"""
	Two-item invoice fields with a 10% tax rate.
	"""
	return {
		"template": "modern",
		"company_name": "Acme Studio",
		"company_address": "1 Main Street\nSpringfield, IL 62701\nUSA",
		"company_email": "billing@acme.test",
		"company_phone": "+1 (555) 010-0000",
		"client_name": "Globex Corp",
		"client_address": "99 Market Road\nShelbyville, IL 62565",
		"client_email": "ap@globex.test",
		"invoice_number": "INV-042",
		"invoice_date": "2024-03-01",
		"due_date": "2024-03-31",
		"currency": "$",
		"items": [
			{"description": "Design", "quantity": 2, "unit_price": 150},
			{"description": "Hosting", "quantity": 1, "unit_price": 50},
		],
		"tax_rate": 10,
		"primary_color": "#2563EB",
		"secondary_color": "#F1F5F9",
		"notes": "Thanks for working with us on the spring launch.",
		"terms": "Payment is due within 30 days.",
		"payment_instructions": "Bank transfer to account 12-3456-7890 referencing the invoice number.",
	}


#============================================
@pytest.fixture
def invoice_data(invoice_fields: dict) -> invoice_pdf_templates.invoice_data.InvoiceData:
	return invoice_pdf_templates.invoice_data.build_invoice_data(invoice_fields, today=ISSUE_DATE)
