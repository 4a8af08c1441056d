import dataclasses

import pytest
import reportlab.pdfbase.pdfmetrics

import invoice_pdf_templates.color
import invoice_pdf_templates.composer as composer
import invoice_pdf_templates.config
import invoice_pdf_templates.invoice_data
import invoice_pdf_templates.surface
import invoice_pdf_templates.templates as templates


TOLERANCE = 1e-6


#============================================
def _render(data, template: str) -> list[invoice_pdf_templates.surface.DrawInstruction]:
	"""
	Render one template and return the page draw instructions.
	"""
	document = composer.render_invoice_document(dataclasses.replace(data, template=template))
	assert len(document.pages) == 1
	return document.pages[0].instructions


#============================================
def _find_text(instructions, text: str, x: float, y: float) -> invoice_pdf_templates.surface.DrawInstruction:
	"""
	Find a text instruction by content and baseline position.

	Args:
		instructions: Draw instructions.
		text: Expected text.
		x: Expected left edge.
		y: Expected baseline.

	Returns:
		Matching instruction.
	"""
	for instruction in instructions:
		if instruction.kind != "text" or instruction.text != text:
			continue
		if abs(instruction.x - x) < TOLERANCE and abs(instruction.y - y) < TOLERANCE:
			return instruction
	positions = [(item.x, item.y) for item in instructions if item.kind == "text" and item.text == text]
	raise AssertionError(f"{text!r} not drawn at ({x}, {y}); found at {positions}")


#============================================
def _find_rect(instructions, x: float, y: float, width: float, height: float):
	for instruction in instructions:
		if instruction.kind != "rect":
			continue
		box = (instruction.x, instruction.y, instruction.width, instruction.height)
		if all(abs(got - want) < TOLERANCE for got, want in zip(box, (x, y, width, height))):
			return instruction
	raise AssertionError(f"no rect at ({x}, {y}, {width}, {height})")


#============================================
def _line_ys(instructions, start_x: float) -> list[float]:
	return [
		instruction.y
		for instruction in instructions
		if instruction.kind == "line" and abs(instruction.x - start_x) < TOLERANCE
	]


#============================================
@pytest.mark.parametrize("tag", ["modern", "corporate", "creative", "classic", "startup"])
def test_select_template_known_tags(tag: str) -> None:
	assert templates.select_template(tag).value == tag


#============================================
@pytest.mark.parametrize("tag", ["bogus", None, "", "Modern", " modern"])
def test_select_template_falls_back_to_modern(tag) -> None:
	assert templates.select_template(tag) == templates.TemplateId.MODERN


#============================================
def test_catalog_covers_every_template() -> None:
	assert set(templates.TEMPLATE_CATALOG) == set(templates.TemplateId)
	assert set(templates.TEMPLATE_STYLES) == set(templates.TemplateId)


#============================================
@pytest.mark.parametrize("tag", ["bogus", None])
def test_unknown_template_renders_like_modern(invoice_data, tag) -> None:
	"""
	An unknown or missing tag produces exactly the modern drawing.
	"""
	assert _render(invoice_data, tag) == _render(invoice_data, "modern")


#============================================
def test_modern_geometry(invoice_data) -> None:
	instructions = _render(invoice_data, "modern")
	primary = invoice_pdf_templates.color.hex_to_rgb("#2563EB")

	accent = _find_rect(instructions, 0.0, 834.0, 595.0, 8.0)
	assert accent.fill == primary
	assert _find_text(instructions, "INVOICE", 445.0, 782.0).fill == primary
	_find_text(instructions, "Description", 60.0, 522.0)
	_find_rect(instructions, 50.0, 517.0, 495.0, 25.0)
	_find_text(instructions, "Design", 60.0, 487.0)
	_find_text(instructions, "2", 320.0, 487.0)
	_find_text(instructions, "$150.00", 380.0, 487.0)
	_find_text(instructions, "$300.00", 480.0, 487.0)
	_find_text(instructions, "Hosting", 60.0, 462.0)
	_find_text(instructions, "Subtotal:", 380.0, 417.0)
	_find_text(instructions, "$350.00", 480.0, 417.0)
	_find_text(instructions, "Tax (10%):", 380.0, 399.0)
	_find_text(instructions, "$35.00", 480.0, 399.0)
	_find_text(instructions, "TOTAL:", 380.0, 377.0)
	total = _find_text(instructions, "$385.00", 480.0, 377.0)
	assert total.fill == invoice_pdf_templates.color.WHITE
	assert _find_rect(instructions, 370.0, 372.0, 175.0, 25.0).fill == primary


#============================================
def test_corporate_geometry(invoice_data) -> None:
	instructions = _render(invoice_data, "corporate")
	_find_text(instructions, "ACME STUDIO", 50.0, 792.0)
	_find_text(instructions, "Design", 60.0, 512.0)
	_find_text(instructions, "Hosting", 60.0, 487.0)
	assert sorted(_line_ys(instructions, 350.0)) == [469.0, 472.0]
	_find_text(instructions, "Subtotal:", 380.0, 447.0)
	_find_text(instructions, "Tax (10%):", 380.0, 429.0)
	assert _line_ys(instructions, 370.0) == [417.0]
	_find_text(instructions, "TOTAL DUE:", 380.0, 404.0)
	_find_text(instructions, "$385.00", 470.0, 404.0)
	# striped first row only
	_find_rect(instructions, 50.0, 507.0, 495.0, 22.0)


#============================================
def test_creative_geometry(invoice_data) -> None:
	instructions = _render(invoice_data, "creative")
	primary = invoice_pdf_templates.color.hex_to_rgb("#2563EB")
	strips = [
		instruction
		for instruction in instructions
		if instruction.kind == "rect" and instruction.width == 595.0 and instruction.height == 8.0
	]
	assert len(strips) == 20
	assert strips[0].y == 682.0
	assert strips[0].fill == primary
	assert [strip.y for strip in strips] == [682.0 + 8.0 * index for index in range(20)]

	header_rule = [item for item in instructions if item.kind == "line" and item.thickness == 2.0]
	assert [(item.x, item.y, item.end_x) for item in header_rule] == [(50.0, 454.0, 545.0)]
	_find_text(instructions, "Design", 50.0, 429.0)
	_find_text(instructions, "Hosting", 50.0, 399.0)
	separators = [item.y for item in instructions if item.kind == "line" and item.thickness == 0.5]
	assert separators == [411.0, 381.0]
	_find_text(instructions, "Subtotal", 370.0, 349.0)
	_find_text(instructions, "Tax (10%)", 370.0, 331.0)
	_find_rect(instructions, 360.0, 296.0, 185.0, 35.0)
	_find_text(instructions, "TOTAL", 375.0, 306.0)
	assert _find_text(instructions, "$385.00", 460.0, 306.0).size == 14.0


#============================================
def test_classic_geometry(invoice_data) -> None:
	instructions = _render(invoice_data, "classic")
	frame = _find_rect(instructions, 55.0, 311.0, 485.0, 166.0)
	assert frame.fill is None
	assert frame.stroke is not None
	assert 454.0 in _line_ys(instructions, 55.0)
	_find_text(instructions, "Design", 65.0, 434.0)
	_find_text(instructions, "Hosting", 65.0, 406.0)
	assert _line_ys(instructions, 350.0) == [393.0]
	_find_text(instructions, "Subtotal:", 380.0, 378.0)
	_find_text(instructions, "Tax (10%):", 380.0, 360.0)
	assert _line_ys(instructions, 370.0) == [348.0]
	_find_text(instructions, "Total Due:", 380.0, 333.0)
	_find_text(instructions, "$385.00", 465.0, 333.0)


#============================================
def test_classic_closing_line_is_centered(invoice_data) -> None:
	instructions = _render(invoice_data, "classic")
	text = "Thank you for your business"
	width = reportlab.pdfbase.pdfmetrics.stringWidth(text, invoice_pdf_templates.config.FONT_TIMES_ITALIC, 10.0)
	closing = _find_text(instructions, text, (595.0 - width) / 2.0, 40.0)
	assert closing.font == invoice_pdf_templates.config.FONT_TIMES_ITALIC


#============================================
def test_startup_geometry(invoice_data) -> None:
	instructions = _render(invoice_data, "startup")
	_find_rect(instructions, 0.0, 0.0, 180.0, 842.0)
	assert 552.0 in _line_ys(instructions, 200.0)
	_find_text(instructions, "Design", 200.0, 527.0)
	_find_text(instructions, "Hosting", 200.0, 499.0)
	_find_text(instructions, "Subtotal", 420.0, 456.0)
	_find_text(instructions, "Tax 10%", 420.0, 438.0)
	_find_rect(instructions, 400.0, 398.0, 145.0, 40.0)
	assert _find_text(instructions, "TOTAL", 415.0, 413.0).size == 10.0
	assert _find_text(instructions, "$385.00", 480.0, 413.0).size == 16.0


#============================================
def test_startup_sidebar_follows_company_stack(invoice_data) -> None:
	"""
	The accent bar and payment block sit below the last company line.
	Payment text wraps like every other flowed block, so a first word
	wider than the sidebar starts on the first line with no blank line.
	"""
	instructions = _render(invoice_data, "startup")
	_find_text(instructions, "1 Main Street", 20.0, 762.0)
	_find_text(instructions, "+1 (555) 010-0000", 20.0, 714.0)
	_find_rect(instructions, 20.0, 689.0, 140.0, 3.0)
	_find_text(instructions, "PAYMENT", 20.0, 659.0)
	payment_lines = [
		item
		for item in instructions
		if item.kind == "text" and item.x == 20.0 and item.size == 8.0 and item.y < 659.0 and item.y > 600.0
	]
	assert len(payment_lines) >= 2
	assert payment_lines[0].y == pytest.approx(643.0)
	assert payment_lines[1].y == pytest.approx(632.0)


#============================================
def test_description_is_cut_to_template_cap(invoice_data) -> None:
	long_item = invoice_pdf_templates.invoice_data.LineItem("x" * 60, 1.0, 10.0)
	data = dataclasses.replace(invoice_data, items=(long_item,))
	instructions = _render(data, "startup")
	_find_text(instructions, "x" * 25, 200.0, 527.0)


#============================================
def test_empty_notes_block_is_omitted(invoice_data) -> None:
	data = dataclasses.replace(invoice_data, notes="")
	instructions = _render(data, "modern")
	texts = [item.text for item in instructions if item.kind == "text"]
	assert "Notes:" not in texts
	_find_text(instructions, "Payment Instructions:", 320.0, 120.0)


#============================================
def test_creative_divider_needs_footer_text(invoice_data) -> None:
	with_text = _render(invoice_data, "creative")
	assert 140.0 in _line_ys(with_text, 50.0)
	data = dataclasses.replace(invoice_data, notes="", payment_instructions="")
	without_text = _render(data, "creative")
	assert 140.0 not in _line_ys(without_text, 50.0)


#============================================
def test_terms_prefix_and_cap(invoice_data) -> None:
	data = dataclasses.replace(invoice_data, terms="t" * 200)
	corporate = _render(data, "corporate")
	_find_text(corporate, "Terms: " + "t" * 90, 50.0, 40.0)
	modern = _render(data, "modern")
	_find_text(modern, "t" * 100, 50.0, 40.0)


#============================================
@pytest.mark.parametrize("tag", ["modern", "corporate", "creative", "classic", "startup"])
def test_rendering_is_deterministic(invoice_data, tag: str) -> None:
	data = dataclasses.replace(invoice_data, template=tag)
	assert _render(data, tag) == _render(data, tag)
	assert composer.generate_invoice(data) == composer.generate_invoice(data)


#============================================
@pytest.mark.parametrize("tag", ["modern", "corporate", "creative", "classic", "startup"])
def test_single_a4_page(invoice_data, tag: str) -> None:
	document = composer.render_invoice_document(dataclasses.replace(invoice_data, template=tag))
	assert [page.get_size() for page in document.pages] == [(595.0, 842.0)]
	with pytest.raises(RuntimeError):
		document.add_page(595.0, 842.0)
