"""
Shared layout primitives: color roles, decorations and page zones.

A template is plain data (TemplateStyle). The drawing functions here turn
that data plus one InvoiceData into draw calls on a PageSurface.
"""

# Standard Library
import dataclasses

# local repo modules
import invoice_pdf_templates as ipt
import invoice_pdf_templates.color
import invoice_pdf_templates.config
import invoice_pdf_templates.invoice_data
import invoice_pdf_templates.surface
import invoice_pdf_templates.text_flow
import invoice_pdf_templates.totals


RGBColor = ipt.color.RGBColor
InvoiceData = ipt.invoice_data.InvoiceData
FontHandle = ipt.surface.FontHandle
PageSurface = ipt.surface.PageSurface
ComputedTotals = ipt.totals.ComputedTotals

BLACK = ipt.color.BLACK
MUTED_GRAY = ipt.color.gray(0.5)
GRADIENT_STRIPS = ipt.config.GRADIENT_STRIPS
DEFAULT_LINE_HEIGHT = ipt.config.DEFAULT_LINE_HEIGHT

# Either an explicit color or a role name ("primary", "secondary")
ColorSpec = RGBColor | str


@dataclasses.dataclass(frozen=True)
class Palette:
	primary: RGBColor
	secondary: RGBColor


@dataclasses.dataclass(frozen=True)
class FontSet:
	regular: str
	bold: str
	italic: str | None = None


#============================================
# Decorations
#============================================

@dataclasses.dataclass(frozen=True)
class AccentBar:
	x: float
	y: float
	width: float
	height: float
	color: ColorSpec = "primary"


@dataclasses.dataclass(frozen=True)
class Sidebar:
	width: float
	color: ColorSpec


@dataclasses.dataclass(frozen=True)
class GradientBand:
	y: float
	strip_height: float
	start: ColorSpec = "primary"
	end: ColorSpec = "secondary"
	strips: int = GRADIENT_STRIPS


@dataclasses.dataclass(frozen=True)
class BorderedFrame:
	x: float
	y: float
	width: float
	height: float
	color: ColorSpec
	border_width: float = 1.0


@dataclasses.dataclass(frozen=True)
class Rule:
	start: tuple[float, float]
	end: tuple[float, float]
	thickness: float = 1.0
	color: ColorSpec = BLACK


Decoration = AccentBar | Sidebar | GradientBand | BorderedFrame | Rule


#============================================
# Zone styles
#============================================

@dataclasses.dataclass(frozen=True)
class TextElement:
	text: str
	x: float | None
	y: float
	font: str = "regular"
	size: float = 10.0
	color: ColorSpec = BLACK
	upper: bool = False


@dataclasses.dataclass(frozen=True)
class StackElement:
	x: float
	y: float
	step: float
	lines: tuple[str, ...] = ()
	address: str | None = None
	font: str = "regular"
	size: float = 10.0
	color: ColorSpec = BLACK


@dataclasses.dataclass(frozen=True)
class CursorBar:
	offset: float
	x: float
	width: float
	height: float
	color: ColorSpec = "primary"


HeaderElement = TextElement | StackElement | CursorBar


@dataclasses.dataclass(frozen=True)
class ClientZoneStyle:
	x: float
	y: float
	label: str
	label_font: str = "bold"
	label_size: float = 10.0
	label_color: ColorSpec = BLACK
	label_gap: float = 18.0
	name_size: float = 12.0
	name_gap: float = 16.0
	address_size: float = 10.0
	address_color: ColorSpec = BLACK
	address_step: float = 14.0


@dataclasses.dataclass(frozen=True)
class HeaderBand:
	height: float
	color: ColorSpec
	offset: float = -5.0


@dataclasses.dataclass(frozen=True)
class TableRule:
	offset: float
	thickness: float
	color: ColorSpec


@dataclasses.dataclass(frozen=True)
class RowStripe:
	height: float
	color: ColorSpec
	offset: float = -5.0


@dataclasses.dataclass(frozen=True)
class TableFrame:
	color: ColorSpec
	border_width: float
	top_padding: float = 15.0
	header_height: float = 30.0
	row_height: float = 28.0
	totals_height: float = 80.0


@dataclasses.dataclass(frozen=True)
class TableStyle:
	header_y: float
	left: float
	right: float
	labels: tuple[str, str, str, str]
	label_xs: tuple[float, float, float, float]
	row_xs: tuple[float, float, float, float]
	first_row_offset: float
	row_step: float
	description_cap: int
	label_size: float = 10.0
	label_color: ColorSpec = BLACK
	row_size: float = 10.0
	amount_font: str = "regular"
	header_band: HeaderBand | None = None
	header_rule: TableRule | None = None
	separator: TableRule | None = None
	stripe: RowStripe | None = None
	frame: TableFrame | None = None


@dataclasses.dataclass(frozen=True)
class TotalsRule:
	offset: float
	start_x: float
	end_x: float
	thickness: float = 1.0
	color: ColorSpec = BLACK


@dataclasses.dataclass(frozen=True)
class TotalBox:
	x: float
	offset: float
	width: float
	height: float
	color: ColorSpec = "primary"


@dataclasses.dataclass(frozen=True)
class TotalsStyle:
	label_x: float
	value_x: float
	gap_before: float
	total_gap: float
	total_label: str
	total_label_x: float
	total_value_x: float
	subtotal_label: str = "Subtotal:"
	tax_label: str = "Tax ({tax_rate}%):"
	size: float = 10.0
	label_color: ColorSpec = BLACK
	line_step: float = 18.0
	lead_rules: tuple[TotalsRule, ...] = ()
	total_rule: TotalsRule | None = None
	total_box: TotalBox | None = None
	total_text_offset: float = 0.0
	total_label_size: float = 12.0
	total_value_size: float = 12.0
	total_color: ColorSpec = BLACK


@dataclasses.dataclass(frozen=True)
class FooterBlock:
	source: str
	label: str
	x: float
	y: float
	width: float
	label_font: str = "bold"
	label_size: float = 9.0
	label_color: ColorSpec = BLACK
	text_gap: float = 14.0
	text_size: float = 9.0
	text_color: ColorSpec = BLACK
	line_height: float = DEFAULT_LINE_HEIGHT
	# "page": y is absolute, "header": y is relative to the header cursor
	anchor: str = "page"


@dataclasses.dataclass(frozen=True)
class TermsLine:
	x: float
	y: float
	cap: int
	prefix: str = ""
	font: str = "regular"
	size: float = 8.0
	color: ColorSpec = MUTED_GRAY
	rule: Rule | None = None


@dataclasses.dataclass(frozen=True)
class ClosingLine:
	text: str
	y: float
	font: str = "italic"
	size: float = 10.0
	color: ColorSpec = "primary"


@dataclasses.dataclass(frozen=True)
class FooterStyle:
	blocks: tuple[FooterBlock, ...]
	terms: TermsLine | None = None
	divider: Rule | None = None
	closing: ClosingLine | None = None


@dataclasses.dataclass(frozen=True)
class TemplateStyle:
	fonts: FontSet
	decorations: tuple[Decoration, ...]
	header: tuple[HeaderElement, ...]
	client: ClientZoneStyle
	table: TableStyle
	totals: TotalsStyle
	footer: FooterStyle


#============================================
def build_palette(data: InvoiceData) -> Palette:
	return Palette(
		primary=ipt.color.hex_to_rgb(data.primary_color),
		secondary=ipt.color.hex_to_rgb(data.secondary_color),
	)


#============================================
def resolve_color(spec: ColorSpec, palette: Palette) -> RGBColor:
	"""
	Resolve a color spec to a concrete color.

	Args:
		spec: RGBColor or role name.
		palette: Colors derived from the invoice.

	Returns:
		RGBColor.
	"""
	if isinstance(spec, RGBColor):
		return spec
	roles = {
		"primary": palette.primary,
		"secondary": palette.secondary,
	}
	return roles[spec]


#============================================
def split_address(address: str) -> list[str]:
	return [line.strip() for line in address.split("\n")]


#============================================
def build_text_context(data: InvoiceData) -> dict:
	"""
	Build the values available to header format strings.

	Args:
		data: Invoice data.

	Returns:
		Mapping of field name to display value; *_lines keys hold lists.
	"""
	return {
		"company_name": data.company_name,
		"company_email": data.company_email,
		"company_phone": data.company_phone,
		"company_address_lines": split_address(data.company_address),
		"company_address_commas": data.company_address.replace("\n", ", "),
		"company_address_bullets": data.company_address.replace("\n", " • "),
		"client_name": data.client_name,
		"client_email": data.client_email,
		"client_address_lines": split_address(data.client_address),
		"invoice_number": data.invoice_number,
		"invoice_date": data.invoice_date,
		"due_date": data.due_date,
		"currency": data.currency,
		"tax_rate": ipt.totals.format_number(data.tax_rate),
	}


#============================================
def draw_accent_bar(page: PageSurface, decoration: AccentBar, palette: Palette) -> None:
	color = resolve_color(decoration.color, palette)
	page.draw_rect(decoration.x, decoration.y, decoration.width, decoration.height, fill=color)


#============================================
def draw_sidebar(page: PageSurface, decoration: Sidebar, palette: Palette) -> None:
	color = resolve_color(decoration.color, palette)
	page.draw_rect(0.0, 0.0, decoration.width, page.height, fill=color)


#============================================
def draw_gradient_band(page: PageSurface, decoration: GradientBand, palette: Palette) -> None:
	"""
	Approximate a vertical gradient with stacked solid strips.

	Strip 0 sits at the band bottom in the start color; each strip above
	moves one step toward the end color.

	Args:
		page: Target page.
		decoration: Band geometry and colors.
		palette: Colors derived from the invoice.
	"""
	start = resolve_color(decoration.start, palette)
	end = resolve_color(decoration.end, palette)
	colors = ipt.color.gradient_colors(start, end, decoration.strips)
	for index, color in enumerate(colors):
		strip_y = decoration.y + index * decoration.strip_height
		page.draw_rect(0.0, strip_y, page.width, decoration.strip_height, fill=color)


#============================================
def draw_bordered_frame(page: PageSurface, decoration: BorderedFrame, palette: Palette) -> None:
	color = resolve_color(decoration.color, palette)
	page.draw_rect(
		decoration.x,
		decoration.y,
		decoration.width,
		decoration.height,
		border=color,
		border_width=decoration.border_width,
	)


#============================================
def draw_rule(page: PageSurface, decoration: Rule, palette: Palette) -> None:
	color = resolve_color(decoration.color, palette)
	page.draw_line(decoration.start, decoration.end, decoration.thickness, color)


DECORATION_DRAWERS = {
	AccentBar: draw_accent_bar,
	Sidebar: draw_sidebar,
	GradientBand: draw_gradient_band,
	BorderedFrame: draw_bordered_frame,
	Rule: draw_rule,
}


#============================================
def draw_decorations(
	page: PageSurface,
	decorations: tuple[Decoration, ...],
	palette: Palette,
) -> None:
	for decoration in decorations:
		drawer = DECORATION_DRAWERS[type(decoration)]
		drawer(page, decoration, palette)


#============================================
def draw_header(
	page: PageSurface,
	elements: tuple[HeaderElement, ...],
	fonts: dict[str, FontHandle],
	palette: Palette,
	context: dict,
) -> float:
	"""
	Draw header elements in order.

	Stacks move the header cursor to their last baseline; cursor bars move
	it by their offset and draw at the new position.

	Args:
		page: Target page.
		elements: Header elements.
		fonts: Embedded fonts by role.
		palette: Colors derived from the invoice.
		context: Values for format strings.

	Returns:
		Header cursor y.
	"""
	cursor = page.height
	for element in elements:
		if isinstance(element, TextElement):
			font = fonts[element.font]
			text = element.text.format_map(context)
			if element.upper:
				text = text.upper()
			x = element.x
			if x is None:
				x = (page.width - font.width_of_text(text, element.size)) / 2.0
			color = resolve_color(element.color, palette)
			page.draw_text(text, x, element.y, font, element.size, color)
			continue
		if isinstance(element, StackElement):
			font = fonts[element.font]
			color = resolve_color(element.color, palette)
			lines: list[str] = []
			if element.address is not None:
				lines.extend(context[element.address])
			lines.extend(line.format_map(context) for line in element.lines)
			y = element.y
			for index, line in enumerate(lines):
				if index > 0:
					y -= element.step
				page.draw_text(line, element.x, y, font, element.size, color)
			cursor = y
			continue
		if isinstance(element, CursorBar):
			cursor += element.offset
			color = resolve_color(element.color, palette)
			page.draw_rect(element.x, cursor, element.width, element.height, fill=color)
	return cursor


#============================================
def draw_client_zone(
	page: PageSurface,
	style: ClientZoneStyle,
	data: InvoiceData,
	fonts: dict[str, FontHandle],
	palette: Palette,
) -> float:
	"""
	Draw the bill-to block.

	Returns:
		Baseline of the client email line.
	"""
	y = style.y
	label_color = resolve_color(style.label_color, palette)
	page.draw_text(style.label, style.x, y, fonts[style.label_font], style.label_size, label_color)
	y -= style.label_gap
	page.draw_text(data.client_name, style.x, y, fonts["bold"], style.name_size)
	y -= style.name_gap
	address_color = resolve_color(style.address_color, palette)
	for line in split_address(data.client_address):
		page.draw_text(line, style.x, y, fonts["regular"], style.address_size, address_color)
		y -= style.address_step
	page.draw_text(data.client_email, style.x, y, fonts["regular"], style.address_size, address_color)
	return y


#============================================
def draw_items_table(
	page: PageSurface,
	style: TableStyle,
	data: InvoiceData,
	fonts: dict[str, FontHandle],
	palette: Palette,
) -> float:
	"""
	Draw the table header and one row per line item, in input order.

	Descriptions are cut to the template's character cap without an
	ellipsis. Amounts are quantity times unit price.

	Returns:
		Cursor y below the last row.
	"""
	y = style.header_y
	width = style.right - style.left
	if style.frame is not None:
		frame = style.frame
		table_top = y + frame.top_padding
		table_height = frame.header_height + len(data.items) * frame.row_height + frame.totals_height
		page.draw_rect(
			style.left,
			table_top - table_height,
			width,
			table_height,
			border=resolve_color(frame.color, palette),
			border_width=frame.border_width,
		)
	if style.header_band is not None:
		band = style.header_band
		page.draw_rect(style.left, y + band.offset, width, band.height, fill=resolve_color(band.color, palette))
	if style.header_rule is not None:
		rule = style.header_rule
		rule_y = y - rule.offset
		page.draw_line(
			(style.left, rule_y),
			(style.right, rule_y),
			rule.thickness,
			resolve_color(rule.color, palette),
		)
	label_color = resolve_color(style.label_color, palette)
	for label, label_x in zip(style.labels, style.label_xs):
		page.draw_text(label, label_x, y, fonts["bold"], style.label_size, label_color)

	y -= style.first_row_offset
	desc_x, qty_x, price_x, amount_x = style.row_xs
	for index, item in enumerate(data.items):
		if style.stripe is not None and index % 2 == 0:
			stripe = style.stripe
			page.draw_rect(style.left, y + stripe.offset, width, stripe.height, fill=resolve_color(stripe.color, palette))
		amount = ipt.totals.line_total(item)
		regular = fonts["regular"]
		page.draw_text(item.description[:style.description_cap], desc_x, y, regular, style.row_size)
		page.draw_text(ipt.totals.format_number(item.quantity), qty_x, y, regular, style.row_size)
		page.draw_text(ipt.totals.format_money(data.currency, item.unit_price), price_x, y, regular, style.row_size)
		page.draw_text(
			ipt.totals.format_money(data.currency, amount),
			amount_x,
			y,
			fonts[style.amount_font],
			style.row_size,
		)
		y -= style.row_step
		if style.separator is not None:
			separator = style.separator
			line_y = y + separator.offset
			page.draw_line(
				(style.left, line_y),
				(style.right, line_y),
				separator.thickness,
				resolve_color(separator.color, palette),
			)
	return y


#============================================
def draw_totals_rule(page: PageSurface, rule: TotalsRule, y: float, palette: Palette) -> None:
	line_y = y + rule.offset
	page.draw_line((rule.start_x, line_y), (rule.end_x, line_y), rule.thickness, resolve_color(rule.color, palette))


#============================================
def draw_totals(
	page: PageSurface,
	style: TotalsStyle,
	data: InvoiceData,
	totals: ComputedTotals,
	fonts: dict[str, FontHandle],
	palette: Palette,
	y: float,
	context: dict,
) -> float:
	"""
	Draw subtotal, tax and the emphasized total below the table.

	Args:
		page: Target page.
		style: Totals zone style.
		data: Invoice data (currency symbol).
		totals: Figures from compute_totals.
		fonts: Embedded fonts by role.
		palette: Colors derived from the invoice.
		y: Cursor below the last table row.
		context: Values for the tax label format string.

	Returns:
		Baseline of the total line.
	"""
	for rule in style.lead_rules:
		draw_totals_rule(page, rule, y, palette)
	y -= style.gap_before
	regular = fonts["regular"]
	label_color = resolve_color(style.label_color, palette)
	page.draw_text(style.subtotal_label, style.label_x, y, regular, style.size, label_color)
	page.draw_text(ipt.totals.format_money(data.currency, totals.subtotal), style.value_x, y, regular, style.size)
	y -= style.line_step
	tax_label = style.tax_label.format_map(context)
	page.draw_text(tax_label, style.label_x, y, regular, style.size, label_color)
	page.draw_text(ipt.totals.format_money(data.currency, totals.tax), style.value_x, y, regular, style.size)
	y -= style.total_gap

	if style.total_rule is not None:
		draw_totals_rule(page, style.total_rule, y, palette)
	if style.total_box is not None:
		box = style.total_box
		page.draw_rect(box.x, y + box.offset, box.width, box.height, fill=resolve_color(box.color, palette))
	text_y = y + style.total_text_offset
	total_color = resolve_color(style.total_color, palette)
	bold = fonts["bold"]
	page.draw_text(style.total_label, style.total_label_x, text_y, bold, style.total_label_size, total_color)
	page.draw_text(
		ipt.totals.format_money(data.currency, totals.total),
		style.total_value_x,
		text_y,
		bold,
		style.total_value_size,
		total_color,
	)
	return text_y


#============================================
def draw_footer(
	page: PageSurface,
	style: FooterStyle,
	data: InvoiceData,
	fonts: dict[str, FontHandle],
	palette: Palette,
	header_cursor: float,
) -> None:
	"""
	Draw the optional notes/payment blocks, terms and closing line.

	Blocks with empty text are skipped entirely. Terms are cut to the
	template's character cap.
	"""
	texts = {
		"notes": data.notes or "",
		"payment_instructions": data.payment_instructions or "",
	}
	if style.divider is not None and any(texts[block.source] for block in style.blocks):
		draw_rule(page, style.divider, palette)

	for block in style.blocks:
		text = texts[block.source]
		if not text:
			continue
		y = block.y
		if block.anchor == "header":
			y = header_cursor + block.y
		label_color = resolve_color(block.label_color, palette)
		page.draw_text(block.label, block.x, y, fonts[block.label_font], block.label_size, label_color)
		ipt.text_flow.draw_flowed_text(
			page,
			text,
			block.x,
			y - block.text_gap,
			fonts["regular"],
			block.text_size,
			block.width,
			line_height=block.line_height,
			color=resolve_color(block.text_color, palette),
		)

	terms = style.terms
	if terms is not None and data.terms:
		if terms.rule is not None:
			draw_rule(page, terms.rule, palette)
		text = f"{terms.prefix}{data.terms[:terms.cap]}"
		page.draw_text(text, terms.x, terms.y, fonts[terms.font], terms.size, resolve_color(terms.color, palette))

	closing = style.closing
	if closing is not None:
		font = fonts[closing.font]
		x = (page.width - font.width_of_text(closing.text, closing.size)) / 2.0
		page.draw_text(closing.text, x, closing.y, font, closing.size, resolve_color(closing.color, palette))
