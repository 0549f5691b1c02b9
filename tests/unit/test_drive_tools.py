"""
Tests for Drive tools: search, content routing and metadata.

The Drive service is mocked at adapters.drive.get_drive_service.
"""

from unittest.mock import MagicMock

from tests.conftest import make_http_error
from tests.helpers import api_method, mock_api_chain, seal_service
from tools.drive import get_file_content, get_file_metadata, search_drive_files

GOOGLE_DOC = "application/vnd.google-apps.document"


def _meta(mime_type: str, **extra: object) -> dict:
    return {
        "id": "f1",
        "name": "Plan",
        "mimeType": mime_type,
        "webViewLink": "https://drive.google.com/open?id=f1",
        **extra,
    }


class TestSearchDriveFiles:

    def test_request_shape(self, default_user: str, patch_drive_service: MagicMock) -> None:
        mock_api_chain(patch_drive_service, "files.list.execute", {"files": [
            {"id": "f1", "name": "budget.xlsx", "mimeType": "application/vnd.ms-excel"},
        ]})

        result = search_drive_files("name contains 'budget'", max_results=5)

        assert result.first_text.startswith('Found 1 file(s) for query: "name contains \'budget\'":')
        kwargs = api_method(patch_drive_service, "files.list").call_args.kwargs
        assert kwargs["q"] == "name contains 'budget'"
        assert kwargs["pageSize"] == 5
        assert kwargs["supportsAllDrives"] is True
        assert kwargs["includeItemsFromAllDrives"] is True
        assert "orderBy" not in kwargs

    def test_page_size_clamped(self, default_user: str, patch_drive_service: MagicMock) -> None:
        mock_api_chain(patch_drive_service, "files.list.execute", {"files": []})

        result = search_drive_files("x", max_results=0)

        assert result.first_text == 'No files found for query: "x"'
        assert api_method(patch_drive_service, "files.list").call_args.kwargs["pageSize"] == 1

    def test_bad_query(self, default_user: str, patch_drive_service: MagicMock) -> None:
        mock_api_chain(patch_drive_service, "files.list.execute", side_effect=make_http_error(400, "Invalid Value"))

        result = search_drive_files("name = ")

        assert result.is_error
        assert result.first_text.startswith("Error searching Drive: ")


class TestGetFileContent:

    def test_native_doc_exported(self, default_user: str, patch_drive_service: MagicMock) -> None:
        mock_api_chain(patch_drive_service, "files.get.execute", _meta(GOOGLE_DOC))
        mock_api_chain(patch_drive_service, "files.export.execute", b"Hello from the doc")
        seal_service(patch_drive_service)

        result = get_file_content("f1")

        assert result.first_text == "[Google Doc: Plan]\n\nHello from the doc"
        api_method(patch_drive_service, "files.export").assert_called_once_with(fileId="f1", mimeType="text/plain")

    def test_sheet_exported_as_csv(self, default_user: str, patch_drive_service: MagicMock) -> None:
        mock_api_chain(patch_drive_service, "files.get.execute", _meta("application/vnd.google-apps.spreadsheet"))
        mock_api_chain(patch_drive_service, "files.export.execute", b"a,b\n1,2")

        result = get_file_content("f1")

        assert result.first_text == "[Google Sheet (first sheet only): Plan]\n\na,b\n1,2"
        api_method(patch_drive_service, "files.export").assert_called_once_with(fileId="f1", mimeType="text/csv")

    def test_export_failure_is_partial_result(self, default_user: str, patch_drive_service: MagicMock) -> None:
        """A failed export still reports the file and its view link."""
        mock_api_chain(patch_drive_service, "files.get.execute", _meta(GOOGLE_DOC))
        mock_api_chain(
            patch_drive_service,
            "files.export.execute",
            side_effect=make_http_error(403, "This file is too large to be exported."),
        )

        result = get_file_content("f1")

        assert result.is_error
        assert result.first_text.startswith("[Google Doc: Plan]\n\nFailed to export: ")
        assert "10 MB limit" in result.first_text
        assert result.first_text.endswith("View it at: https://drive.google.com/open?id=f1")

    def test_text_file_downloaded(self, default_user: str, patch_drive_service: MagicMock) -> None:
        mock_api_chain(patch_drive_service, "files.get.execute", _meta("application/json", name="cfg.json"))
        mock_api_chain(patch_drive_service, "files.get_media.execute", b'{"a": 1}')

        result = get_file_content("f1")

        assert result.first_text == '[File: cfg.json (application/json)]\n\n{"a": 1}'
        api_method(patch_drive_service, "files.export").assert_not_called()

    def test_binary_file_summarized(self, default_user: str, patch_drive_service: MagicMock) -> None:
        mock_api_chain(patch_drive_service, "files.get.execute", _meta("application/pdf", name="scan.pdf", size="4096"))

        result = get_file_content("f1")

        assert result.first_text.startswith("[Binary file: scan.pdf]\nType: application/pdf\nSize: 4.0 KB")
        api_method(patch_drive_service, "files.get_media").assert_not_called()

    def test_routing_fields_requested(self, default_user: str, patch_drive_service: MagicMock) -> None:
        mock_api_chain(patch_drive_service, "files.get.execute", _meta("image/png"))

        get_file_content("f1")

        api_method(patch_drive_service, "files.get").assert_called_once_with(
            fileId="f1", fields="id,name,mimeType,size,webViewLink", supportsAllDrives=True
        )

    def test_not_found(self, default_user: str, patch_drive_service: MagicMock) -> None:
        mock_api_chain(patch_drive_service, "files.get.execute", side_effect=make_http_error(404, "File not found"))

        result = get_file_content("nope")

        assert result.is_error
        assert result.first_text.startswith("Error reading file: ")


class TestGetFileMetadata:

    def test_metadata(self, default_user: str, patch_drive_service: MagicMock) -> None:
        mock_api_chain(patch_drive_service, "files.get.execute", _meta(GOOGLE_DOC, starred=True))

        result = get_file_metadata("f1")

        assert result.first_text.startswith("File: Plan\nID: f1\nType: application/vnd.google-apps.document")
        assert "Starred: yes" in result.first_text
        fields = api_method(patch_drive_service, "files.get").call_args.kwargs["fields"]
        assert "permissions(emailAddress,role,type)" in fields
