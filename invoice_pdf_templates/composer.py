"""
Top-level invoice generation: template dispatch, serialization, summary.
"""

# Standard Library
import re

# local repo modules
import invoice_pdf_templates as ipt
import invoice_pdf_templates.config
import invoice_pdf_templates.invoice_data
import invoice_pdf_templates.render
import invoice_pdf_templates.surface
import invoice_pdf_templates.templates
import invoice_pdf_templates.totals


InvoiceData = ipt.invoice_data.InvoiceData
InvoiceDocument = ipt.surface.InvoiceDocument
RenderConfig = ipt.config.RenderConfig
TemplateId = ipt.templates.TemplateId


#============================================
def render_invoice_document(data: InvoiceData, config: RenderConfig | None = None) -> InvoiceDocument:
	"""
	Create a new document and render the selected template into it.

	Args:
		data: Invoice data. Unknown or missing template tags use the default.
		config: Document options.

	Returns:
		Rendered, unsaved InvoiceDocument.
	"""
	document = InvoiceDocument(config)
	template_id = ipt.templates.select_template(data.template)
	style = ipt.templates.get_template_style(template_id)
	ipt.render.render_invoice_page(document, data, style)
	return document


#============================================
def generate_invoice(data: InvoiceData, config: RenderConfig | None = None) -> bytes:
	"""
	Render an invoice to PDF bytes.

	Serialization errors from ReportLab propagate unchanged.

	Args:
		data: Invoice data.
		config: Document options.

	Returns:
		PDF bytes.
	"""
	document = render_invoice_document(data, config)
	return document.save()


#============================================
def build_invoice_summary(data: InvoiceData) -> dict:
	"""
	Build the receipt that accompanies a generated invoice.

	Figures come from the same calculator the templates use.

	Args:
		data: Invoice data.

	Returns:
		JSON-ready summary mapping.
	"""
	totals = ipt.totals.compute_totals(data.items, data.tax_rate)
	return {
		"success": True,
		"template": data.template,
		"rendered_template": ipt.templates.select_template(data.template).value,
		"invoice_number": data.invoice_number,
		"invoice_date": data.invoice_date,
		"due_date": data.due_date,
		"item_count": len(data.items),
		"subtotal": ipt.totals.format_amount(totals.subtotal),
		"tax": ipt.totals.format_amount(totals.tax),
		"total": ipt.totals.format_amount(totals.total),
	}


#============================================
def invoice_filename(data: InvoiceData) -> str:
	# strip characters not allowed on Windows/mac paths
	number = re.sub(r'[\\/*?:"<>|]', "", data.invoice_number or "").strip()
	return f"invoice_{number}.pdf"
