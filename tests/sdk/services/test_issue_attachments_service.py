import pytest
from pytest_httpx import HTTPXMock

from jira_rest import JiraClient
from jira_rest.models import Attachment, AttachmentSettings


class TestIssueAttachmentsService:
    @pytest.mark.asyncio
    async def test_add_attachment_sends_multipart(
        self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issue/ABC-1/attachments",
            method="POST",
            status_code=200,
            json=[{"id": "10001", "filename": "log.txt", "mimeType": "text/plain", "size": 5}],
        )

        result = await client.issue_attachments.add(
            "ABC-1", [("file", ("log.txt", b"hello", "text/plain"))]
        )

        (attachment,) = result.unwrap()
        assert isinstance(attachment, Attachment)
        assert attachment.mime_type == "text/plain"

        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.headers["X-Atlassian-Token"] == "no-check"
        assert sent_request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert b'filename="log.txt"' in sent_request.content
        assert b"hello" in sent_request.content

    @pytest.mark.asyncio
    async def test_download_binary_content(
        self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/attachment/content/10001?redirect=false",
            status_code=200,
            content=b"\x89PNG\r\n",
            headers={"Content-Type": "image/png"},
        )

        result = await client.issue_attachments.download("10001", redirect=False)

        assert result.value == b"\x89PNG\r\n"
        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.headers["Accept"] == "*/*"

    @pytest.mark.asyncio
    async def test_download_text_content(
        self, httpx_mock: HTTPXMock, client: JiraClient
    ) -> None:
        httpx_mock.add_response(
            status_code=200,
            content=b"line one\n",
            headers={"Content-Type": "text/plain; charset=utf-8"},
        )

        result = await client.issue_attachments.download("10002")

        assert result.value == "line one\n"

    @pytest.mark.asyncio
    async def test_retrieve_settings_and_delete(
        self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/attachment/meta",
            status_code=200,
            json={"enabled": True, "uploadLimit": 1000000},
        )
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/attachment/10001",
            method="GET",
            status_code=200,
            json={"id": "10001", "filename": "log.txt"},
        )
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/attachment/10001",
            method="DELETE",
            status_code=204,
        )

        settings = await client.issue_attachments.get_settings()
        attachment = await client.issue_attachments.retrieve("10001")
        deleted = await client.issue_attachments.delete("10001")

        assert isinstance(settings.value, AttachmentSettings)
        assert settings.value.upload_limit == 1000000
        assert attachment.unwrap().filename == "log.txt"
        assert deleted.ok is True
