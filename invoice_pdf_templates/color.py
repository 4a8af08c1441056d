"""
Hex color parsing and interpolation.
"""

# Standard Library
import dataclasses
import re


HEX_COLOR_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


@dataclasses.dataclass(frozen=True)
class RGBColor:
	r: float
	g: float
	b: float


BLACK = RGBColor(0.0, 0.0, 0.0)
WHITE = RGBColor(1.0, 1.0, 1.0)


#============================================
def gray(level: float) -> RGBColor:
	"""
	Build a neutral gray.

	Args:
		level: Channel value in 0.0-1.0 range.

	Returns:
		RGBColor with equal channels.
	"""
	return RGBColor(level, level, level)


#============================================
def hex_to_rgb(value: str) -> RGBColor:
	"""
	Parse a hex color string into RGB floats.

	Six hex digits with an optional leading "#", any case. Anything else
	(including None) parses as black.

	Args:
		value: Color string like "#2563EB" or "2563eb".

	Returns:
		RGBColor with channels in 0.0-1.0 range.
	"""
	if not isinstance(value, str):
		return BLACK
	match = HEX_COLOR_PATTERN.fullmatch(value)
	if match is None:
		return BLACK
	red = int(match.group(1), 16) / 255.0
	green = int(match.group(2), 16) / 255.0
	blue = int(match.group(3), 16) / 255.0
	return RGBColor(red, green, blue)


#============================================
def interpolate_rgb(start: RGBColor, end: RGBColor, ratio: float) -> RGBColor:
	"""
	Linearly interpolate each channel between two colors.

	Args:
		start: Color at ratio 0.0.
		end: Color at ratio 1.0.
		ratio: Blend position.

	Returns:
		Blended RGBColor.
	"""
	return RGBColor(
		start.r + (end.r - start.r) * ratio,
		start.g + (end.g - start.g) * ratio,
		start.b + (end.b - start.b) * ratio,
	)


#============================================
def gradient_colors(start: RGBColor, end: RGBColor, strips: int) -> list[RGBColor]:
	"""
	Compute solid strip colors that approximate a gradient.

	Strip i uses ratio i / strips, so the last strip stops one step short
	of the end color.

	Args:
		start: First strip color.
		end: Target color.
		strips: Number of strips.

	Returns:
		List of strip colors, first to last.
	"""
	if strips <= 0:
		return []
	return [interpolate_rgb(start, end, index / strips) for index in range(strips)]
