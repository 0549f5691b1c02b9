"""
Docs adapter — Google Docs API wrapper.

Fetches the document title and body (first tab) as a raw dict.
Walking the body is extractors/docs.py's job.
"""

from typing import Any, cast

from errors import translate_errors
from adapters.services import get_docs_service
from logging_config import log_api_call


# Fields to request — only what we need for extraction
DOCUMENT_FIELDS = "documentId,title,body"


@translate_errors
def fetch_document(identity: str, document_id: str) -> dict[str, Any]:
    """
    Fetch a document's title and body.

    Raises:
        ReaderError: On API failure
    """
    service = get_docs_service(identity)
    log_api_call("docs", "documents.get", documentId=document_id)
    result = (
        service.documents()
        .get(documentId=document_id, fields=DOCUMENT_FIELDS)
        .execute()
    )
    return cast(dict[str, Any], result)
