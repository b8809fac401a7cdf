from typing import Any, List, Optional

from .._utils import Endpoint, RequestOptions, RequestSpec, encode_multipart
from .._utils.constants import HEADER_ATLASSIAN_TOKEN
from ..models import Attachment, AttachmentSettings
from ..models.result import JiraResult
from ._base_service import BaseService


class IssueAttachmentsService(BaseService):
    """Service for issue attachments and the attachment settings."""

    async def add(
        self,
        issue_id_or_key: str,
        files: Any,
        *,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[List[Attachment]]:
        """Attach one or more files to an issue.

        The body is sent as multipart/form-data with the XSRF opt-out header
        Jira requires for uploads.

        Args:
            issue_id_or_key: The issue to attach the files to.
            files: Files in any form httpx accepts, for example
                ``[("file", ("log.txt", b"...", "text/plain"))]``.
            opts: Per-call request options.
        """
        content, content_type = encode_multipart(files)
        spec = RequestSpec(
            method="POST",
            endpoint=Endpoint("/rest/api/3/issue/{issueIdOrKey}/attachments"),
            path_params={"issueIdOrKey": issue_id_or_key},
            content=content,
            content_type=content_type,
            headers={HEADER_ATLASSIAN_TOKEN: "no-check"},
        )
        return await self.request(spec, opts, model=List[Attachment])

    async def retrieve(
        self, id: str, *, opts: Optional[RequestOptions] = None
    ) -> JiraResult[Attachment]:
        """Retrieve the metadata of an attachment."""
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/api/3/attachment/{id}"),
            path_params={"id": id},
        )
        return await self.request(spec, opts, model=Attachment)

    async def download(
        self,
        id: str,
        *,
        redirect: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[bytes]:
        """Download the contents of an attachment.

        The value is returned as bytes for binary media types and as text for
        ``text/*`` ones.
        """
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/api/3/attachment/content/{id}"),
            path_params={"id": id},
            params={"redirect": redirect},
            headers={"Accept": "*/*"},
        )
        return await self.request(spec, opts)

    async def delete(
        self, id: str, *, opts: Optional[RequestOptions] = None
    ) -> JiraResult[None]:
        spec = RequestSpec(
            method="DELETE",
            endpoint=Endpoint("/rest/api/3/attachment/{id}"),
            path_params={"id": id},
            is_response_available=False,
        )
        return await self.request(spec, opts)

    async def get_settings(
        self, *, opts: Optional[RequestOptions] = None
    ) -> JiraResult[AttachmentSettings]:
        spec = RequestSpec(
            method="GET", endpoint=Endpoint("/rest/api/3/attachment/meta")
        )
        return await self.request(spec, opts, model=AttachmentSettings)
