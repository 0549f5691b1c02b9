"""
Docs Extractor — Pure functions for flattening a Google Docs body.

parse_body() turns the raw `body.content` list into tagged DocElements;
extract_text() and extract_headings() walk those. No API calls.
"""

import re
from typing import Any

from models import (
    DocElement,
    DocElementKind,
    DocRun,
    DocTable,
    DocTableCell,
    Heading,
    Paragraph,
    RunKind,
)

HEADING_STYLE = re.compile(r'HEADING_(\d+)')

IMAGE_PLACEHOLDER = "[image]"
HORIZONTAL_RULE = "\n---\n"


# =============================================================================
# PARSING
# =============================================================================


def _parse_run(raw: dict[str, Any]) -> DocRun:
    if "textRun" in raw:
        return DocRun(kind=RunKind.TEXT, content=(raw["textRun"] or {}).get("content") or "")
    if "inlineObjectElement" in raw:
        return DocRun(kind=RunKind.INLINE_OBJECT)
    if "horizontalRule" in raw:
        return DocRun(kind=RunKind.HORIZONTAL_RULE)
    return DocRun(kind=RunKind.OTHER)


def _parse_paragraph(raw: dict[str, Any]) -> Paragraph:
    style = (raw.get("paragraphStyle") or {}).get("namedStyleType")
    return Paragraph(
        runs=[_parse_run(r) for r in raw.get("elements") or []],
        named_style=style,
    )


def _parse_table(raw: dict[str, Any]) -> DocTable:
    rows: list[list[DocTableCell]] = []
    for row in raw.get("tableRows") or []:
        if not row.get("tableCells"):
            continue
        cells = []
        for cell in row["tableCells"]:
            # Cells nest full structural elements; only paragraphs carry text
            paragraphs = [
                _parse_paragraph(el["paragraph"])
                for el in cell.get("content") or []
                if el.get("paragraph") is not None
            ]
            cells.append(DocTableCell(paragraphs=paragraphs))
        rows.append(cells)
    return DocTable(rows=rows)


def parse_body(body: dict[str, Any] | None) -> list[DocElement]:
    """Parse a document's raw `body` into top-level structural elements."""
    elements: list[DocElement] = []
    for raw in (body or {}).get("content") or []:
        if raw.get("paragraph") is not None:
            elements.append(DocElement(
                kind=DocElementKind.PARAGRAPH,
                paragraph=_parse_paragraph(raw["paragraph"]),
            ))
        elif raw.get("table") is not None:
            elements.append(DocElement(
                kind=DocElementKind.TABLE,
                table=_parse_table(raw["table"]),
            ))
        elif "sectionBreak" in raw:
            elements.append(DocElement(kind=DocElementKind.SECTION_BREAK))
        else:
            elements.append(DocElement(kind=DocElementKind.OTHER))
    return elements


# =============================================================================
# EXTRACTION
# =============================================================================


def paragraph_text(paragraph: Paragraph) -> str:
    """Concatenate runs: text verbatim, images as [image], rules as ---."""
    parts = []
    for run in paragraph.runs:
        if run.kind == RunKind.TEXT:
            parts.append(run.content)
        elif run.kind == RunKind.INLINE_OBJECT:
            parts.append(IMAGE_PLACEHOLDER)
        elif run.kind == RunKind.HORIZONTAL_RULE:
            parts.append(HORIZONTAL_RULE)
    return "".join(parts)


def table_text(table: DocTable) -> str:
    """
    Render a table as TSV with a trailing newline.

    Each cell's paragraphs are trimmed and space-joined.
    """
    rows = []
    for row in table.rows:
        cells = [
            " ".join(paragraph_text(p).strip() for p in cell.paragraphs)
            for cell in row
        ]
        rows.append("\t".join(cells))
    return "\n".join(rows) + "\n"


def extract_text(elements: list[DocElement]) -> str:
    """Flatten a document body into plain text, elements in order."""
    parts = []
    for element in elements:
        if element.kind == DocElementKind.PARAGRAPH and element.paragraph:
            parts.append(paragraph_text(element.paragraph))
        elif element.kind == DocElementKind.TABLE and element.table:
            parts.append(table_text(element.table))
        elif element.kind == DocElementKind.SECTION_BREAK:
            parts.append("\n")
    return "".join(parts)


def extract_headings(elements: list[DocElement]) -> list[Heading]:
    """
    Top-level paragraphs styled HEADING_<n> with non-empty text.

    Headings inside tables are not collected.
    """
    headings = []
    for element in elements:
        if element.kind != DocElementKind.PARAGRAPH or not element.paragraph:
            continue
        match = HEADING_STYLE.fullmatch(element.paragraph.named_style or "")
        if not match:
            continue
        level = int(match.group(1))
        text = paragraph_text(element.paragraph).strip()
        if level >= 1 and text:
            headings.append(Heading(level=level, text=text))
    return headings


# =============================================================================
# FORMATTING
# =============================================================================


def format_document(title: str | None, document_id: str, elements: list[DocElement]) -> str:
    return f"Document: {title or '(untitled)'}\nID: {document_id}\n\n{extract_text(elements)}"


def format_outline(title: str | None, document_id: str, headings: list[Heading]) -> str:
    """
    Heading outline, indented two spaces per level below 1.

    Example:
        Headings (2):
        # Intro
          ## Scope
    """
    text = f"Document: {title or '(untitled)'}\nID: {document_id}\n\n"
    if not headings:
        return text + "No headings found in this document."

    text += f"Headings ({len(headings)}):\n"
    for heading in headings:
        text += f"{'  ' * (heading.level - 1)}{'#' * heading.level} {heading.text}\n"
    return text
