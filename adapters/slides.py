"""
Slides adapter — Google Slides API wrapper.

Fetches whole presentations (for the slide overview) and single pages
(for full slide text). Parsing lives in extractors/slides.py.
"""

from typing import Any, cast

from errors import translate_errors
from adapters.services import get_slides_service
from logging_config import log_api_call, log_api_result


# Fields to request — only what we need for extraction
# notesPage is nested under slideProperties
PRESENTATION_FIELDS = (
    "presentationId,"
    "title,"
    "pageSize,"
    "slides(objectId,pageElements,slideProperties(notesPage))"
)


@translate_errors
def fetch_presentation(identity: str, presentation_id: str) -> dict[str, Any]:
    """
    Fetch presentation title, page size and every slide.

    Raises:
        ReaderError: On API failure
    """
    service = get_slides_service(identity)
    log_api_call("slides", "presentations.get", presentationId=presentation_id)
    result = (
        service.presentations()
        .get(presentationId=presentation_id, fields=PRESENTATION_FIELDS)
        .execute()
    )
    log_api_result("slides", "presentations.get", len(result.get("slides", [])))
    return cast(dict[str, Any], result)


@translate_errors
def fetch_slide(identity: str, presentation_id: str, slide_id: str) -> dict[str, Any]:
    """
    Fetch one slide page, including its notes page.

    Raises:
        ReaderError: On API failure
    """
    service = get_slides_service(identity)
    log_api_call("slides", "pages.get", presentationId=presentation_id, pageObjectId=slide_id)
    result = (
        service.presentations()
        .pages()
        .get(presentationId=presentation_id, pageObjectId=slide_id)
        .execute()
    )
    return cast(dict[str, Any], result)
