"""
ReportLab-backed document, font and page surface.
"""

# Standard Library
import dataclasses
import io

# PIP3 modules
import reportlab.pdfbase.pdfmetrics
import reportlab.pdfgen.canvas

# local repo modules
import invoice_pdf_templates as ipt
import invoice_pdf_templates.color
import invoice_pdf_templates.config


RGBColor = ipt.color.RGBColor
RenderConfig = ipt.config.RenderConfig

BLACK = ipt.color.BLACK
PAGE_SIZE = ipt.config.PAGE_SIZE


@dataclasses.dataclass(frozen=True)
class FontHandle:
	name: str

	def width_of_text(self, text: str, size: float) -> float:
		return reportlab.pdfbase.pdfmetrics.stringWidth(text, self.name, size)


@dataclasses.dataclass(frozen=True)
class DrawInstruction:
	kind: str
	x: float
	y: float
	text: str = ""
	font: str = ""
	size: float = 0.0
	end_x: float = 0.0
	end_y: float = 0.0
	thickness: float = 0.0
	width: float = 0.0
	height: float = 0.0
	fill: RGBColor | None = None
	stroke: RGBColor | None = None


class PageSurface:
	"""
	One fixed-size page on a ReportLab canvas.

	Every draw call is mirrored into `instructions` in issue order.
	"""

	def __init__(self, pdf: reportlab.pdfgen.canvas.Canvas, width: float, height: float):
		self._pdf = pdf
		self.width = width
		self.height = height
		self.instructions: list[DrawInstruction] = []

	def get_size(self) -> tuple[float, float]:
		return (self.width, self.height)

	#============================================
	def draw_text(
		self,
		text: str,
		x: float,
		y: float,
		font: FontHandle,
		size: float,
		color: RGBColor = BLACK,
	) -> None:
		"""
		Draw a single text run with its baseline at y.

		Args:
			text: Text to draw.
			x: Left edge.
			y: Baseline position.
			font: Embedded font handle.
			size: Font size in points.
			color: Fill color.
		"""
		self._pdf.setFont(font.name, size)
		self._pdf.setFillColorRGB(color.r, color.g, color.b)
		self._pdf.drawString(x, y, text)
		self.instructions.append(
			DrawInstruction(kind="text", x=x, y=y, text=text, font=font.name, size=size, fill=color)
		)

	#============================================
	def draw_line(
		self,
		start: tuple[float, float],
		end: tuple[float, float],
		thickness: float = 1.0,
		color: RGBColor = BLACK,
	) -> None:
		"""
		Draw a straight line.

		Args:
			start: (x, y) start point.
			end: (x, y) end point.
			thickness: Line width in points.
			color: Stroke color.
		"""
		self._pdf.setStrokeColorRGB(color.r, color.g, color.b)
		self._pdf.setLineWidth(thickness)
		self._pdf.line(start[0], start[1], end[0], end[1])
		self.instructions.append(
			DrawInstruction(
				kind="line",
				x=start[0],
				y=start[1],
				end_x=end[0],
				end_y=end[1],
				thickness=thickness,
				stroke=color,
			)
		)

	#============================================
	def draw_rect(
		self,
		x: float,
		y: float,
		width: float,
		height: float,
		fill: RGBColor | None = None,
		border: RGBColor | None = None,
		border_width: float = 1.0,
	) -> None:
		"""
		Draw a rectangle with an optional fill and an optional border.

		Args:
			x: Left edge.
			y: Bottom edge.
			width: Rectangle width.
			height: Rectangle height.
			fill: Fill color, or None for no fill.
			border: Border color, or None for no border.
			border_width: Border line width.
		"""
		if fill is not None:
			self._pdf.setFillColorRGB(fill.r, fill.g, fill.b)
		if border is not None:
			self._pdf.setStrokeColorRGB(border.r, border.g, border.b)
			self._pdf.setLineWidth(border_width)
		self._pdf.rect(
			x,
			y,
			width,
			height,
			stroke=1 if border is not None else 0,
			fill=1 if fill is not None else 0,
		)
		self.instructions.append(
			DrawInstruction(
				kind="rect",
				x=x,
				y=y,
				width=width,
				height=height,
				thickness=border_width if border is not None else 0.0,
				fill=fill,
				stroke=border,
			)
		)


class InvoiceDocument:
	"""
	A single-page PDF document written to an in-memory buffer.
	"""

	def __init__(self, config: RenderConfig | None = None):
		if config is None:
			config = RenderConfig()
		self.config = config
		self._buffer = io.BytesIO()
		self._pdf = reportlab.pdfgen.canvas.Canvas(
			self._buffer,
			pagesize=PAGE_SIZE,
			invariant=1 if config.invariant else 0,
		)
		if config.title:
			self._pdf.setTitle(config.title)
		if config.author:
			self._pdf.setAuthor(config.author)
		self._fonts: dict[str, FontHandle] = {}
		self.pages: list[PageSurface] = []

	#============================================
	def embed_font(self, font_name: str) -> FontHandle:
		"""
		Resolve a standard font and return a handle for it.

		Args:
			font_name: ReportLab font name, e.g. "Helvetica-Bold".

		Returns:
			FontHandle; unknown names raise KeyError from ReportLab.
		"""
		handle = self._fonts.get(font_name)
		if handle is None:
			reportlab.pdfbase.pdfmetrics.getFont(font_name)
			handle = FontHandle(font_name)
			self._fonts[font_name] = handle
		return handle

	#============================================
	def add_page(self, width: float, height: float) -> PageSurface:
		"""
		Add the document's only page.

		Args:
			width: Page width in points.
			height: Page height in points.

		Returns:
			PageSurface for drawing.
		"""
		if self.pages:
			raise RuntimeError("invoice documents hold exactly one page")
		self._pdf.setPageSize((width, height))
		page = PageSurface(self._pdf, width, height)
		self.pages.append(page)
		return page

	#============================================
	def save(self) -> bytes:
		"""
		Serialize the document.

		Returns:
			PDF bytes.
		"""
		self._pdf.save()
		return self._buffer.getvalue()
