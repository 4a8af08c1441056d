import pytest

import invoice_pdf_templates.color as color


#============================================
def test_hex_with_and_without_hash_match() -> None:
	"""
	Leading "#" and letter case do not change the parsed color.
	"""
	assert color.hex_to_rgb("#2563EB") == color.hex_to_rgb("2563eb")


#============================================
def test_hex_channels_are_normalized() -> None:
	"""
	Channels are scaled into the 0.0-1.0 range.
	"""
	parsed = color.hex_to_rgb("#ff8000")
	assert parsed.r == pytest.approx(1.0)
	assert parsed.g == pytest.approx(128 / 255)
	assert parsed.b == pytest.approx(0.0)


#============================================
@pytest.mark.parametrize("value", ["not-a-color", "", "#fff", "#2563eb80", "zz63eb", "#2563eb\n", " #2563eb", None])
def test_malformed_hex_falls_back_to_black(value) -> None:
	"""
	Malformed colors silently become black instead of raising.
	"""
	assert color.hex_to_rgb(value) == color.BLACK


#============================================
def test_gradient_colors_interpolate_per_strip() -> None:
	"""
	Strip i uses ratio i / strips, so the end color is never reached.
	"""
	start = color.RGBColor(0.0, 0.0, 0.0)
	end = color.RGBColor(1.0, 0.5, 0.0)
	strips = color.gradient_colors(start, end, 20)
	assert len(strips) == 20
	assert strips[0] == start
	assert strips[10].r == pytest.approx(0.5)
	assert strips[10].g == pytest.approx(0.25)
	assert strips[-1].r == pytest.approx(19 / 20)
	assert color.gradient_colors(start, end, 0) == []
