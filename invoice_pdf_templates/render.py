"""
Single-pass invoice page renderer driven by a TemplateStyle.
"""

# local repo modules
import invoice_pdf_templates as ipt
import invoice_pdf_templates.config
import invoice_pdf_templates.invoice_data
import invoice_pdf_templates.layout
import invoice_pdf_templates.surface
import invoice_pdf_templates.totals


InvoiceData = ipt.invoice_data.InvoiceData
InvoiceDocument = ipt.surface.InvoiceDocument
FontHandle = ipt.surface.FontHandle
PageSurface = ipt.surface.PageSurface
TemplateStyle = ipt.layout.TemplateStyle
FontSet = ipt.layout.FontSet

PAGE_WIDTH = ipt.config.PAGE_WIDTH
PAGE_HEIGHT = ipt.config.PAGE_HEIGHT


#============================================
def embed_fonts(document: InvoiceDocument, font_set: FontSet) -> dict[str, FontHandle]:
	"""
	Embed the template's fonts.

	Args:
		document: Target document.
		font_set: Font names by role.

	Returns:
		Font handles keyed by role ("regular", "bold", "italic").
	"""
	fonts = {
		"regular": document.embed_font(font_set.regular),
		"bold": document.embed_font(font_set.bold),
	}
	if font_set.italic is not None:
		fonts["italic"] = document.embed_font(font_set.italic)
	return fonts


#============================================
def render_invoice_page(
	document: InvoiceDocument,
	data: InvoiceData,
	style: TemplateStyle,
) -> PageSurface:
	"""
	Add one A4 page to the document and lay out the invoice on it.

	Zones are drawn top to bottom: decorations, header, bill-to, items
	table, totals, footer. There is no pagination; content that runs past
	the page edge is drawn there anyway.

	Args:
		document: Target document.
		data: Invoice data; not modified.
		style: Template layout data.

	Returns:
		The drawn page.
	"""
	page = document.add_page(PAGE_WIDTH, PAGE_HEIGHT)
	fonts = embed_fonts(document, style.fonts)
	palette = ipt.layout.build_palette(data)
	context = ipt.layout.build_text_context(data)
	totals = ipt.totals.compute_totals(data.items, data.tax_rate)

	ipt.layout.draw_decorations(page, style.decorations, palette)
	header_cursor = ipt.layout.draw_header(page, style.header, fonts, palette, context)
	ipt.layout.draw_client_zone(page, style.client, data, fonts, palette)
	table_cursor = ipt.layout.draw_items_table(page, style.table, data, fonts, palette)
	ipt.layout.draw_totals(page, style.totals, data, totals, fonts, palette, table_cursor, context)
	ipt.layout.draw_footer(page, style.footer, data, fonts, palette, header_cursor)
	return page
