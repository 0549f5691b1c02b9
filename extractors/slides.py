"""
Slides Extractor — Pure functions for slide text, notes and summaries.

parse_slide() turns a raw Page dict into a Slide of tagged PageElements
(recursing into groups); the extract_* and format_* functions walk those.
No API calls, no MCP awareness.
"""

from typing import Any

from models import ElementKind, PageElement, Slide

EMU_PER_INCH = 914400

# Groups nested deeper than this are not descended
MAX_GROUP_DEPTH = 32

TITLE_PLACEHOLDERS = frozenset({"TITLE", "CENTERED_TITLE"})
SUBTITLE_PLACEHOLDER = "SUBTITLE"
NOTES_PLACEHOLDER = "BODY"


# =============================================================================
# PARSING
# =============================================================================


def _text_content(raw: dict[str, Any] | None) -> str:
    """Join textRun contents of a TextContent and trim."""
    if not raw:
        return ""
    parts = [
        (el.get("textRun") or {}).get("content") or ""
        for el in raw.get("textElements") or []
    ]
    return "".join(parts).strip()


def parse_page_element(raw: dict[str, Any], depth: int = 0) -> PageElement:
    """Parse one raw pageElement. Groups past MAX_GROUP_DEPTH come back childless."""
    object_id = raw.get("objectId") or ""

    if raw.get("shape") is not None:
        shape = raw["shape"]
        return PageElement(
            kind=ElementKind.SHAPE,
            object_id=object_id,
            placeholder=(shape.get("placeholder") or {}).get("type"),
            text=_text_content(shape.get("text")),
        )

    if raw.get("table") is not None:
        rows = [
            [_text_content(cell.get("text")) for cell in row.get("tableCells") or []]
            for row in raw["table"].get("tableRows") or []
        ]
        return PageElement(kind=ElementKind.TABLE, object_id=object_id, table_rows=rows)

    if raw.get("elementGroup") is not None:
        children: list[PageElement] = []
        if depth < MAX_GROUP_DEPTH:
            children = [
                parse_page_element(child, depth + 1)
                for child in raw["elementGroup"].get("children") or []
            ]
        return PageElement(kind=ElementKind.GROUP, object_id=object_id, children=children)

    if raw.get("wordArt") is not None:
        return PageElement(
            kind=ElementKind.WORD_ART,
            object_id=object_id,
            rendered_text=raw["wordArt"].get("renderedText") or "",
        )

    return PageElement(kind=ElementKind.OTHER, object_id=object_id)


def parse_slide(raw: dict[str, Any]) -> Slide:
    """Parse a raw Page (from presentations.get or pages.get) into a Slide."""
    notes_page = (raw.get("slideProperties") or {}).get("notesPage") or {}
    return Slide(
        slide_id=raw.get("objectId") or "",
        elements=[parse_page_element(el) for el in raw.get("pageElements") or []],
        notes_elements=[parse_page_element(el) for el in notes_page.get("pageElements") or []],
    )


# =============================================================================
# EXTRACTION
# =============================================================================


def extract_page_text(element: PageElement) -> str:
    """
    Text of one element, by kind.

    Tables render as TSV under a "[Table]" line when any cell has text.
    Groups join their children's non-empty text with newlines.
    """
    if element.kind == ElementKind.SHAPE:
        return element.text

    if element.kind == ElementKind.TABLE:
        tsv = "\n".join("\t".join(row) for row in element.table_rows)
        return f"[Table]\n{tsv}" if tsv.strip() else ""

    if element.kind == ElementKind.GROUP:
        parts = [extract_page_text(child) for child in element.children]
        return "\n".join(p for p in parts if p)

    if element.kind == ElementKind.WORD_ART:
        return element.rendered_text

    return ""


def extract_speaker_notes(slide: Slide) -> str:
    """Text of the first BODY placeholder on the notes page, or empty."""
    for element in slide.notes_elements:
        if element.kind == ElementKind.SHAPE and element.placeholder == NOTES_PLACEHOLDER:
            return element.text
    return ""


def _title_and_subtitle(slide: Slide) -> tuple[str, str]:
    # Later non-empty placeholders override earlier ones
    title = ""
    subtitle = ""
    for element in slide.elements:
        if element.kind != ElementKind.SHAPE:
            continue
        if element.placeholder in TITLE_PLACEHOLDERS:
            title = element.text or title
        elif element.placeholder == SUBTITLE_PLACEHOLDER:
            subtitle = element.text or subtitle
    return title, subtitle


def summarize_slide(slide: Slide, index: int) -> str:
    """
    One-line summary.

    Example:
        Slide 1 (ID: p1): Intro — Kickoff [has notes]
    """
    title, subtitle = _title_and_subtitle(slide)
    summary = f"Slide {index + 1} (ID: {slide.slide_id})"
    if title:
        summary += f": {title}"
    if subtitle:
        summary += f" — {subtitle}"
    if extract_speaker_notes(slide):
        summary += " [has notes]"
    return summary


# =============================================================================
# FORMATTING
# =============================================================================


def format_dimension(dim: dict[str, Any] | None) -> str:
    """EMU as inches, PT as points, anything else raw. Missing or zero is '?'."""
    if not dim or not dim.get("magnitude") or not dim.get("unit"):
        return "?"
    magnitude = dim["magnitude"]
    unit = dim["unit"]
    if unit == "EMU":
        return f"{magnitude / EMU_PER_INCH:.2f}in"
    if unit == "PT":
        return f"{magnitude:g}pt"
    return f"{magnitude:g} {unit}"


def format_presentation(presentation: dict[str, Any], presentation_id: str) -> str:
    page_size = presentation.get("pageSize") or {}
    slides = [parse_slide(s) for s in presentation.get("slides") or []]

    text = (
        f"Presentation: {presentation.get('title') or '(untitled)'}\n"
        f"ID: {presentation_id}\n"
        f"Page size: {format_dimension(page_size.get('width'))} x "
        f"{format_dimension(page_size.get('height'))}\n"
        f"Slides: {len(slides)}\n\n"
    )
    if not slides:
        return text + "No slides found."
    for index, slide in enumerate(slides):
        text += summarize_slide(slide, index) + "\n"
    return text


def format_slide(slide: Slide) -> str:
    """Full slide text: title lines, content blocks, speaker notes."""
    text = f"Slide: {slide.slide_id}\n"
    content_parts = []

    for element in slide.elements:
        element_text = extract_page_text(element)
        if not element_text:
            continue
        if element.placeholder in TITLE_PLACEHOLDERS:
            text += f"Title: {element_text}\n"
        elif element.placeholder == SUBTITLE_PLACEHOLDER:
            text += f"Subtitle: {element_text}\n"
        else:
            content_parts.append(element_text)

    text += "\n"
    if content_parts:
        text += "Content:\n" + "\n\n".join(content_parts) + "\n"
    else:
        text += "Content: (no text content)\n"

    notes = extract_speaker_notes(slide)
    if notes:
        text += f"\nSpeaker Notes:\n{notes}\n"
    return text
