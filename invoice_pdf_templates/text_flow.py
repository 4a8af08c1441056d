"""
Greedy word wrapping with a downward-moving vertical cursor.
"""

# Standard Library
import dataclasses
import typing

# local repo modules
import invoice_pdf_templates as ipt
import invoice_pdf_templates.color
import invoice_pdf_templates.config
import invoice_pdf_templates.surface


RGBColor = ipt.color.RGBColor
FontHandle = ipt.surface.FontHandle
PageSurface = ipt.surface.PageSurface

BLACK = ipt.color.BLACK
DEFAULT_LINE_HEIGHT = ipt.config.DEFAULT_LINE_HEIGHT


@dataclasses.dataclass(frozen=True)
class FlowLine:
	text: str
	x: float
	y: float


@dataclasses.dataclass(frozen=True)
class FlowResult:
	lines: list[FlowLine]
	final_y: float


#============================================
def iter_wrapped_lines(
	text: str,
	font: FontHandle,
	size: float,
	max_width: float,
) -> typing.Iterator[str]:
	"""
	Yield wrapped lines, top to bottom.

	Words are split on whitespace and packed greedily. A word that is wider
	than max_width on its own gets a line to itself without being broken.

	Args:
		text: Input text.
		font: Font used for width measurement.
		size: Font size in points.
		max_width: Maximum line width in points.

	Yields:
		Line strings.
	"""
	current = ""
	for word in text.split():
		candidate = word if not current else f"{current} {word}"
		if font.width_of_text(candidate, size) <= max_width or not current:
			current = candidate
			continue
		yield current
		current = word
	if current:
		yield current


#============================================
def flow_text(
	text: str,
	x: float,
	y: float,
	font: FontHandle,
	size: float,
	max_width: float,
	line_height: float = DEFAULT_LINE_HEIGHT,
) -> FlowResult:
	"""
	Position wrapped lines starting at a baseline and moving down.

	Args:
		text: Input text.
		x: Left edge for every line.
		y: Baseline of the first line.
		font: Font used for width measurement.
		size: Font size in points.
		max_width: Maximum line width in points.
		line_height: Line pitch as a multiple of size.

	Returns:
		FlowResult with positioned lines and the cursor below the last line.
	"""
	lines: list[FlowLine] = []
	current_y = y
	for line in iter_wrapped_lines(text, font, size, max_width):
		lines.append(FlowLine(text=line, x=x, y=current_y))
		current_y -= size * line_height
	return FlowResult(lines=lines, final_y=current_y)


#============================================
def draw_flowed_text(
	page: PageSurface,
	text: str,
	x: float,
	y: float,
	font: FontHandle,
	size: float,
	max_width: float,
	line_height: float = DEFAULT_LINE_HEIGHT,
	color: RGBColor = BLACK,
) -> float:
	"""
	Draw wrapped text onto a page.

	Returns:
		Final cursor y so callers can continue below the block.
	"""
	result = flow_text(text, x, y, font, size, max_width, line_height)
	for line in result.lines:
		page.draw_text(line.text, line.x, line.y, font, size, color)
	return result.final_y
