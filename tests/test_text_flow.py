import pytest

import invoice_pdf_templates.config
import invoice_pdf_templates.surface
import invoice_pdf_templates.text_flow as text_flow


FONT = invoice_pdf_templates.surface.FontHandle(invoice_pdf_templates.config.FONT_HELVETICA)
SIZE = 9.0

SAMPLE_TEXT = (
	"Please remit payment within thirty days of the invoice date. "
	"Late payments may incur a fee of one and a half percent per month "
	"on the outstanding balance."
)


#============================================
@pytest.mark.parametrize("max_width", [60.0, 120.0, 250.0, 1000.0])
def test_wrapped_lines_fit_width(max_width: float) -> None:
	"""
	Every multi-word line fits; only single words may overflow.
	"""
	lines = list(text_flow.iter_wrapped_lines(SAMPLE_TEXT, FONT, SIZE, max_width))
	assert lines
	for line in lines:
		if " " in line:
			assert FONT.width_of_text(line, SIZE) <= max_width
	assert " ".join(lines) == " ".join(SAMPLE_TEXT.split())


#============================================
def test_final_y_tracks_line_count() -> None:
	"""
	The cursor drops by size * line_height per emitted line.
	"""
	result = text_flow.flow_text(SAMPLE_TEXT, 50.0, 106.0, FONT, SIZE, 150.0, line_height=1.2)
	assert len(result.lines) > 1
	assert result.final_y == pytest.approx(106.0 - 1.2 * SIZE * len(result.lines))
	assert [line.y for line in result.lines] == sorted((line.y for line in result.lines), reverse=True)
	assert all(line.x == 50.0 for line in result.lines)


#============================================
def test_single_long_word_is_not_broken() -> None:
	"""
	A 60 character word wider than max_width is emitted whole on one line.
	"""
	word = "x" * 60
	assert FONT.width_of_text(word, SIZE) > 100.0
	result = text_flow.flow_text(word, 0.0, 500.0, FONT, SIZE, 100.0)
	assert [line.text for line in result.lines] == [word]
	assert result.final_y == pytest.approx(500.0 - SIZE * 1.2)


#============================================
def test_long_word_starts_its_own_line() -> None:
	"""
	A long word following short ones moves to a fresh line.
	"""
	word = "y" * 60
	lines = list(text_flow.iter_wrapped_lines(f"ab cd {word} ef", FONT, SIZE, 100.0))
	assert lines == ["ab cd", word, "ef"]


#============================================
def test_empty_text_emits_nothing() -> None:
	result = text_flow.flow_text("   ", 10.0, 200.0, FONT, SIZE, 100.0)
	assert result.lines == []
	assert result.final_y == 200.0


#============================================
def test_wrapping_is_restartable() -> None:
	"""
	Two passes over the same text give the same lines.
	"""
	first = list(text_flow.iter_wrapped_lines(SAMPLE_TEXT, FONT, SIZE, 120.0))
	second = list(text_flow.iter_wrapped_lines(SAMPLE_TEXT, FONT, SIZE, 120.0))
	assert first == second
