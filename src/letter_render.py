from dataclasses import dataclass

import fitz  # PyMuPDF

from letter_content import LetterContent


ALIGN_LEFT = "left"
ALIGN_RIGHT = "right"

PAGE_WIDTH = 612
PAGE_HEIGHT = 792
MARGIN_X = 72
MARGIN_Y = 72
FONT_NAME = "helv"
FONT_SIZE = 11
LINE_HEIGHT = 15
TEXT_WIDTH = PAGE_WIDTH - (2 * MARGIN_X)


@dataclass(frozen=True)
class LetterLine:
    text: str
    align: str = ALIGN_LEFT


BLANK = LetterLine("")


def layout_letter(content: LetterContent) -> list[LetterLine]:
    """Return the letter as an ordered list of lines, blank lines included.

    Sender block and signature are right-aligned; the opening line and the
    body paragraphs are left-aligned. Every paragraph is followed by a blank line.
    """
    lines = [LetterLine(content.name, ALIGN_RIGHT)]
    lines.extend(LetterLine(line, ALIGN_RIGHT) for line in content.address_lines)
    lines.append(BLANK)
    lines.append(LetterLine(content.opening_line, ALIGN_LEFT))
    lines.append(BLANK)
    for paragraph in content.paragraphs:
        lines.append(LetterLine(paragraph, ALIGN_LEFT))
        lines.append(BLANK)
    lines.append(LetterLine(content.signature, ALIGN_RIGHT))
    return lines


def _text_width(text: str, fontsize: float) -> float:
    return fitz.get_text_length(text, fontname=FONT_NAME, fontsize=fontsize)


def _break_word(word: str, max_width: float, fontsize: float) -> list[str]:
    pieces: list[str] = []
    current = ""
    for char in word:
        if current and _text_width(current + char, fontsize) > max_width:
            pieces.append(current)
            current = char
        else:
            current += char
    if current:
        pieces.append(current)
    return pieces


def wrap_text(text: str, max_width: float = TEXT_WIDTH, *, fontsize: float = FONT_SIZE) -> list[str]:
    if max_width <= 0:
        raise ValueError("max_width must be positive")

    wrapped: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}" if current else word
        if _text_width(candidate, fontsize) <= max_width:
            current = candidate
            continue
        if current:
            wrapped.append(current)
        if _text_width(word, fontsize) <= max_width:
            current = word
            continue
        # Single word wider than the line.
        pieces = _break_word(word, max_width, fontsize)
        wrapped.extend(pieces[:-1])
        current = pieces[-1]
    if current:
        wrapped.append(current)
    return wrapped or [""]


def _wrap_lines(lines: list[LetterLine]) -> list[LetterLine]:
    wrapped: list[LetterLine] = []
    for line in lines:
        if not line.text.strip():
            wrapped.append(BLANK)
            continue
        wrapped.extend(LetterLine(piece, line.align) for piece in wrap_text(line.text))
    return wrapped


def render_letter_pdf(content: LetterContent) -> bytes:
    wrapped_lines = _wrap_lines(layout_letter(content))
    max_lines_per_page = max(1, int((PAGE_HEIGHT - (2 * MARGIN_Y)) / LINE_HEIGHT))

    document = fitz.open()
    try:
        line_index = 0
        while line_index < len(wrapped_lines):
            page = document.new_page(width=PAGE_WIDTH, height=PAGE_HEIGHT)
            y = MARGIN_Y
            for _ in range(max_lines_per_page):
                if line_index >= len(wrapped_lines):
                    break
                line = wrapped_lines[line_index]
                if line.text:
                    x = MARGIN_X
                    if line.align == ALIGN_RIGHT:
                        x = PAGE_WIDTH - MARGIN_X - _text_width(line.text, FONT_SIZE)
                    page.insert_text((x, y), line.text, fontsize=FONT_SIZE, fontname=FONT_NAME)
                y += LINE_HEIGHT
                line_index += 1
        document.set_metadata(
            {
                "title": f"Letter to {content.name}",
                "author": content.signature,
                "creator": "letter-pdf-lambda",
            }
        )
        pdf_bytes = document.tobytes(garbage=4, deflate=True, clean=True)
    finally:
        document.close()

    if not pdf_bytes:
        raise RuntimeError("PDF renderer returned an empty document.")
    return pdf_bytes
