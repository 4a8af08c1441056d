"""
The five invoice templates, expressed as layout data.

Coordinates are A4 points with the origin at the bottom-left corner.
"""

# Standard Library
import enum

# local repo modules
import invoice_pdf_templates as ipt
import invoice_pdf_templates.color
import invoice_pdf_templates.config
import invoice_pdf_templates.layout


RGBColor = ipt.color.RGBColor
L = ipt.layout

W = ipt.config.PAGE_WIDTH
H = ipt.config.PAGE_HEIGHT

BLACK = ipt.color.BLACK
WHITE = ipt.color.WHITE
gray = ipt.color.gray

HELVETICA = L.FontSet(regular=ipt.config.FONT_HELVETICA, bold=ipt.config.FONT_HELVETICA_BOLD)
TIMES = L.FontSet(regular=ipt.config.FONT_TIMES, bold=ipt.config.FONT_TIMES_BOLD)
TIMES_WITH_ITALIC = L.FontSet(
	regular=ipt.config.FONT_TIMES,
	bold=ipt.config.FONT_TIMES_BOLD,
	italic=ipt.config.FONT_TIMES_ITALIC,
)


class TemplateId(enum.Enum):
	MODERN = "modern"
	CORPORATE = "corporate"
	CREATIVE = "creative"
	CLASSIC = "classic"
	STARTUP = "startup"


DEFAULT_TEMPLATE_ID = TemplateId(ipt.config.DEFAULT_TEMPLATE)

TEMPLATE_CATALOG = {
	TemplateId.MODERN: (
		"Modern Minimal",
		"Clean lines, lots of whitespace, accent color bar",
	),
	TemplateId.CORPORATE: (
		"Corporate Professional",
		"Formal layout with header box and gray tones",
	),
	TemplateId.CREATIVE: (
		"Creative Bold",
		"Gradient header and bold typography",
	),
	TemplateId.CLASSIC: (
		"Classic Elegant",
		"Traditional serif layout with framed borders",
	),
	TemplateId.STARTUP: (
		"Tech Startup",
		"Dark sidebar, modern layout, vibrant accents",
	),
}


#============================================
MODERN = L.TemplateStyle(
	fonts=HELVETICA,
	decorations=(
		L.AccentBar(x=0.0, y=H - 8, width=W, height=8.0),
	),
	header=(
		L.TextElement("{company_name}", x=50.0, y=H - 60, font="bold", size=24.0, color=gray(0.1)),
		L.TextElement("INVOICE", x=W - 150, y=H - 60, font="bold", size=24.0, color="primary"),
		L.StackElement(
			x=50.0,
			y=H - 90,
			step=14.0,
			address="company_address_lines",
			lines=("{company_email}", "{company_phone}"),
			color=gray(0.4),
		),
		L.StackElement(
			x=W - 200,
			y=H - 90,
			step=14.0,
			lines=("Invoice #: {invoice_number}", "Date: {invoice_date}", "Due: {due_date}"),
		),
	),
	client=L.ClientZoneStyle(
		x=50.0,
		y=H - 200,
		label="BILL TO",
		label_color="primary",
		name_size=12.0,
		name_gap=16.0,
		address_color=gray(0.4),
		address_step=14.0,
	),
	table=L.TableStyle(
		header_y=H - 320,
		left=50.0,
		right=W - 50,
		labels=("Description", "Qty", "Price", "Total"),
		label_xs=(60.0, 320.0, 380.0, 480.0),
		row_xs=(60.0, 320.0, 380.0, 480.0),
		first_row_offset=35.0,
		row_step=25.0,
		description_cap=40,
		header_band=L.HeaderBand(height=25.0, color="secondary"),
		separator=L.TableRule(offset=10.0, thickness=0.5, color=gray(0.9)),
	),
	totals=L.TotalsStyle(
		label_x=380.0,
		value_x=480.0,
		gap_before=20.0,
		total_gap=22.0,
		total_label="TOTAL:",
		total_label_x=380.0,
		total_value_x=480.0,
		total_box=L.TotalBox(x=370.0, offset=-5.0, width=175.0, height=25.0),
		total_color=WHITE,
	),
	footer=L.FooterStyle(
		blocks=(
			L.FooterBlock(source="notes", label="Notes:", x=50.0, y=120.0, width=250.0),
			L.FooterBlock(source="payment_instructions", label="Payment Instructions:", x=320.0, y=120.0, width=220.0),
		),
		terms=L.TermsLine(x=50.0, y=40.0, cap=100),
	),
)


#============================================
CORPORATE = L.TemplateStyle(
	fonts=TIMES,
	decorations=(
		L.AccentBar(x=0.0, y=H - 120, width=W, height=120.0, color=gray(0.95)),
		L.BorderedFrame(x=W - 200, y=H - 110, width=150.0, height=80.0, color="primary", border_width=2.0),
	),
	header=(
		L.TextElement("{company_name}", x=50.0, y=H - 50, font="bold", size=22.0, color="primary", upper=True),
		L.StackElement(
			x=50.0,
			y=H - 75,
			step=12.0,
			address="company_address_lines",
			lines=("{company_email} | {company_phone}",),
			size=9.0,
		),
		L.TextElement("INVOICE", x=W - 175, y=H - 55, font="bold", size=16.0, color="primary"),
		L.TextElement("#{invoice_number}", x=W - 175, y=H - 75, size=12.0),
		L.TextElement("Date: {invoice_date}", x=W - 175, y=H - 92, size=9.0),
		L.TextElement("Due: {due_date}", x=W - 175, y=H - 105, size=9.0),
	),
	client=L.ClientZoneStyle(
		x=50.0,
		y=H - 170,
		label="Bill To:",
		label_size=11.0,
		name_size=11.0,
		name_gap=15.0,
		address_step=13.0,
	),
	table=L.TableStyle(
		header_y=H - 300,
		left=50.0,
		right=W - 50,
		labels=("Description", "Qty", "Rate", "Amount"),
		label_xs=(60.0, 320.0, 380.0, 470.0),
		row_xs=(60.0, 330.0, 380.0, 470.0),
		first_row_offset=30.0,
		row_step=25.0,
		description_cap=35,
		label_color=WHITE,
		header_band=L.HeaderBand(height=22.0, color="primary"),
		stripe=L.RowStripe(height=22.0, color=gray(0.97)),
	),
	totals=L.TotalsStyle(
		label_x=380.0,
		value_x=470.0,
		gap_before=15.0,
		total_gap=20.0,
		total_label="TOTAL DUE:",
		total_label_x=380.0,
		total_value_x=470.0,
		lead_rules=(
			L.TotalsRule(offset=10.0, start_x=350.0, end_x=W - 50),
			L.TotalsRule(offset=7.0, start_x=350.0, end_x=W - 50),
		),
		total_rule=L.TotalsRule(offset=8.0, start_x=370.0, end_x=W - 50),
		total_text_offset=-5.0,
	),
	footer=L.FooterStyle(
		blocks=(
			L.FooterBlock(source="notes", label="Notes", x=50.0, y=140.0, width=220.0, label_size=10.0),
			L.FooterBlock(
				source="payment_instructions",
				label="Payment Information",
				x=300.0,
				y=140.0,
				width=240.0,
				label_size=10.0,
			),
		),
		terms=L.TermsLine(
			x=50.0,
			y=40.0,
			cap=90,
			prefix="Terms: ",
			rule=L.Rule(start=(50.0, 55.0), end=(W - 50, 55.0), thickness=0.5, color=gray(0.8)),
		),
	),
)


#============================================
CREATIVE = L.TemplateStyle(
	fonts=HELVETICA,
	decorations=(
		L.GradientBand(y=H - 160, strip_height=8.0),
		# client accent bar beside the bill-to block
		L.AccentBar(x=50.0, y=H - 310, width=5.0, height=70.0),
	),
	header=(
		L.TextElement("{company_name}", x=50.0, y=H - 60, font="bold", size=28.0, color=WHITE, upper=True),
		L.TextElement("INVOICE", x=W - 150, y=H - 55, font="bold", size=20.0, color=WHITE),
		L.TextElement("#{invoice_number}", x=W - 150, y=H - 78, size=14.0, color=WHITE),
		L.StackElement(
			x=50.0,
			y=H - 185,
			step=14.0,
			lines=("{company_address_bullets}", "{company_email} • {company_phone}"),
			size=9.0,
			color=gray(0.4),
		),
		L.TextElement("Date: {invoice_date}", x=W - 150, y=H - 185),
		L.TextElement("Due: {due_date}", x=W - 150, y=H - 199),
	),
	client=L.ClientZoneStyle(
		x=65.0,
		y=H - 250,
		label="BILLED TO",
		label_color="primary",
		name_size=14.0,
		name_gap=18.0,
		address_color=gray(0.4),
		address_step=14.0,
	),
	table=L.TableStyle(
		header_y=H - 380,
		left=50.0,
		right=W - 50,
		labels=("ITEM", "QTY", "RATE", "AMOUNT"),
		label_xs=(50.0, 300.0, 370.0, 470.0),
		row_xs=(50.0, 310.0, 370.0, 470.0),
		first_row_offset=33.0,
		row_step=30.0,
		description_cap=35,
		label_size=9.0,
		label_color=gray(0.5),
		row_size=11.0,
		amount_font="bold",
		header_rule=L.TableRule(offset=8.0, thickness=2.0, color="primary"),
		separator=L.TableRule(offset=12.0, thickness=0.5, color=gray(0.9)),
	),
	totals=L.TotalsStyle(
		label_x=370.0,
		value_x=470.0,
		gap_before=20.0,
		total_gap=25.0,
		subtotal_label="Subtotal",
		tax_label="Tax ({tax_rate}%)",
		total_label="TOTAL",
		total_label_x=375.0,
		total_value_x=460.0,
		total_box=L.TotalBox(x=360.0, offset=-10.0, width=185.0, height=35.0),
		total_label_size=14.0,
		total_value_size=14.0,
		total_color=WHITE,
	),
	footer=L.FooterStyle(
		blocks=(
			L.FooterBlock(source="notes", label="NOTES", x=50.0, y=120.0, width=220.0, label_color="primary"),
			L.FooterBlock(
				source="payment_instructions",
				label="PAYMENT",
				x=300.0,
				y=120.0,
				width=240.0,
				label_color="primary",
			),
		),
		divider=L.Rule(start=(50.0, 140.0), end=(W - 50, 140.0), thickness=1.0, color=gray(0.9)),
		terms=L.TermsLine(x=50.0, y=35.0, cap=100, color=gray(0.6)),
	),
)


#============================================
CLASSIC = L.TemplateStyle(
	fonts=TIMES_WITH_ITALIC,
	decorations=(
		L.BorderedFrame(x=30.0, y=30.0, width=W - 60, height=H - 60, color=gray(0.7), border_width=1.0),
		L.BorderedFrame(x=35.0, y=35.0, width=W - 70, height=H - 70, color=gray(0.85), border_width=0.5),
		L.Rule(start=(W / 2 - 80, H - 95), end=(W / 2 + 80, H - 95), thickness=1.0, color="primary"),
	),
	header=(
		L.TextElement("{company_name}", x=None, y=H - 80, font="bold", size=26.0, color="primary"),
		L.TextElement("{company_address_commas}", x=None, y=H - 115, color=gray(0.4)),
		L.TextElement("{company_email} | {company_phone}", x=None, y=H - 129, color=gray(0.4)),
		L.TextElement("I N V O I C E", x=None, y=H - 170, font="bold", size=18.0),
		L.TextElement("Invoice Number: {invoice_number}", x=60.0, y=H - 205),
		L.StackElement(
			x=W - 200,
			y=H - 205,
			step=16.0,
			lines=("Invoice Date: {invoice_date}", "Due Date: {due_date}"),
		),
	),
	client=L.ClientZoneStyle(
		x=60.0,
		y=H - 260,
		label="Bill To:",
		label_font="italic",
		label_size=11.0,
		name_size=12.0,
		name_gap=16.0,
		address_step=14.0,
	),
	table=L.TableStyle(
		header_y=H - 380,
		left=55.0,
		right=W - 55,
		labels=("Description", "Quantity", "Price", "Amount"),
		label_xs=(65.0, 300.0, 380.0, 470.0),
		row_xs=(65.0, 315.0, 380.0, 470.0),
		first_row_offset=28.0,
		row_step=28.0,
		description_cap=35,
		header_rule=L.TableRule(offset=8.0, thickness=1.0, color=gray(0.5)),
		frame=L.TableFrame(color=gray(0.7), border_width=0.5),
	),
	totals=L.TotalsStyle(
		label_x=380.0,
		value_x=470.0,
		gap_before=0.0,
		total_gap=22.0,
		total_label="Total Due:",
		total_label_x=380.0,
		total_value_x=465.0,
		lead_rules=(
			L.TotalsRule(offset=15.0, start_x=350.0, end_x=W - 55, thickness=0.5, color=gray(0.7)),
		),
		total_rule=L.TotalsRule(offset=10.0, start_x=370.0, end_x=W - 55),
		total_text_offset=-5.0,
	),
	footer=L.FooterStyle(
		blocks=(
			L.FooterBlock(
				source="notes",
				label="Notes:",
				x=60.0,
				y=150.0,
				width=220.0,
				label_font="italic",
				label_size=10.0,
			),
			L.FooterBlock(
				source="payment_instructions",
				label="Payment Instructions:",
				x=300.0,
				y=150.0,
				width=230.0,
				label_font="italic",
				label_size=10.0,
			),
		),
		terms=L.TermsLine(x=60.0, y=55.0, cap=90, font="italic"),
		closing=L.ClosingLine(text="Thank you for your business", y=40.0),
	),
)


#============================================
STARTUP_CONTENT_X = 200.0

STARTUP = L.TemplateStyle(
	fonts=HELVETICA,
	decorations=(
		L.Sidebar(width=180.0, color=RGBColor(0.12, 0.12, 0.15)),
		# bill-to panel
		L.AccentBar(x=STARTUP_CONTENT_X, y=H - 220, width=W - STARTUP_CONTENT_X - 50, height=80.0, color=gray(0.97)),
	),
	header=(
		L.TextElement("{company_name}", x=20.0, y=H - 50, font="bold", size=18.0, color=WHITE),
		L.StackElement(
			x=20.0,
			y=H - 80,
			step=12.0,
			address="company_address_lines",
			lines=("{company_email}", "{company_phone}"),
			size=8.0,
			color=gray(0.6),
		),
		L.CursorBar(offset=-25.0, x=20.0, width=140.0, height=3.0),
		L.TextElement("INVOICE", x=STARTUP_CONTENT_X, y=H - 50, font="bold", size=32.0, color=gray(0.15)),
		L.TextElement("#{invoice_number}", x=STARTUP_CONTENT_X, y=H - 90, font="bold", size=14.0, color="primary"),
		L.TextElement("Issued: {invoice_date}", x=W - 150, y=H - 90),
		L.TextElement("Due: {due_date}", x=W - 150, y=H - 106, color=RGBColor(0.8, 0.2, 0.2)),
	),
	client=L.ClientZoneStyle(
		x=STARTUP_CONTENT_X + 15,
		y=H - 150,
		label="BILL TO",
		label_size=9.0,
		label_color=gray(0.5),
		name_size=13.0,
		name_gap=16.0,
		address_color=gray(0.4),
		address_step=13.0,
	),
	table=L.TableStyle(
		header_y=H - 280,
		left=STARTUP_CONTENT_X,
		right=W - 50,
		labels=("SERVICE", "QTY", "RATE", "TOTAL"),
		label_xs=(STARTUP_CONTENT_X, 380.0, 430.0, 500.0),
		row_xs=(STARTUP_CONTENT_X, 390.0, 430.0, 500.0),
		first_row_offset=35.0,
		row_step=28.0,
		description_cap=25,
		label_size=9.0,
		label_color=gray(0.5),
		row_size=11.0,
		amount_font="bold",
		header_rule=L.TableRule(offset=10.0, thickness=2.0, color="primary"),
		separator=L.TableRule(offset=12.0, thickness=0.5, color=gray(0.9)),
	),
	totals=L.TotalsStyle(
		label_x=420.0,
		value_x=500.0,
		gap_before=15.0,
		total_gap=30.0,
		subtotal_label="Subtotal",
		tax_label="Tax {tax_rate}%",
		label_color=gray(0.5),
		total_label="TOTAL",
		total_label_x=415.0,
		total_value_x=480.0,
		total_box=L.TotalBox(x=400.0, offset=-10.0, width=145.0, height=40.0),
		total_text_offset=5.0,
		total_label_size=10.0,
		total_value_size=16.0,
		total_color=WHITE,
	),
	footer=L.FooterStyle(
		blocks=(
			L.FooterBlock(
				source="notes",
				label="NOTES",
				x=STARTUP_CONTENT_X,
				y=120.0,
				width=340.0,
				label_color=gray(0.5),
			),
			# sidebar payment block, 30pt below the sidebar accent bar
			L.FooterBlock(
				source="payment_instructions",
				label="PAYMENT",
				x=20.0,
				y=-30.0,
				width=140.0,
				label_color="primary",
				text_gap=16.0,
				text_size=8.0,
				text_color=gray(0.7),
				line_height=11.0 / 8.0,
				anchor="header",
			),
		),
		terms=L.TermsLine(x=20.0, y=40.0, cap=60, size=7.0, color=gray(0.4)),
	),
)


TEMPLATE_STYLES = {
	TemplateId.MODERN: MODERN,
	TemplateId.CORPORATE: CORPORATE,
	TemplateId.CREATIVE: CREATIVE,
	TemplateId.CLASSIC: CLASSIC,
	TemplateId.STARTUP: STARTUP,
}


#============================================
def select_template(tag: str | None) -> TemplateId:
	"""
	Map a template tag to a TemplateId.

	Tags match exactly ("modern", "corporate", ...). A missing or unknown
	tag selects the default template rather than failing.

	Args:
		tag: Template tag from the invoice data.

	Returns:
		TemplateId.
	"""
	for template_id in TemplateId:
		if template_id.value == tag:
			return template_id
	return DEFAULT_TEMPLATE_ID


#============================================
def get_template_style(template_id: TemplateId) -> L.TemplateStyle:
	return TEMPLATE_STYLES[template_id]
