from typing import Any, Dict, Optional

from .._utils import Endpoint, RequestOptions, RequestSpec, encode_multipart
from .._utils.constants import HEADER_ATLASSIAN_TOKEN
from ..models import ServiceDesk, TemporaryAttachments
from ..models.result import JiraResult
from ._base_service import BaseService


class ServiceDeskService(BaseService):
    """Service for Jira Service Management service desks.

    Some of these endpoints are still experimental on Jira's side and are sent
    with the ``X-ExperimentalApi: opt-in`` header.
    """

    async def list(
        self,
        *,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Dict[str, Any]]:
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/servicedeskapi/servicedesk"),
            params={"start": start, "limit": limit},
        )
        return await self.request(spec, opts)

    async def retrieve(
        self, service_desk_id: str, *, opts: Optional[RequestOptions] = None
    ) -> JiraResult[ServiceDesk]:
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/servicedeskapi/servicedesk/{serviceDeskId}"),
            path_params={"serviceDeskId": service_desk_id},
        )
        return await self.request(spec, opts, model=ServiceDesk)

    async def list_queues(
        self,
        service_desk_id: str,
        *,
        include_count: Optional[bool] = None,
        start: Optional[int] = None,
        limit: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Dict[str, Any]]:
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint(
                "/rest/servicedeskapi/servicedesk/{serviceDeskId}/queue"
            ),
            path_params={"serviceDeskId": service_desk_id},
            params={"includeCount": include_count, "start": start, "limit": limit},
        )
        return await self.request(spec, opts)

    async def attach_temporary_file(
        self,
        service_desk_id: str,
        files: Any,
        *,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[TemporaryAttachments]:
        """Upload files that can later be attached to a customer request."""
        content, content_type = encode_multipart(files)
        spec = RequestSpec(
            method="POST",
            endpoint=Endpoint(
                "/rest/servicedeskapi/servicedesk/{serviceDeskId}/attachTemporaryFile"
            ),
            path_params={"serviceDeskId": service_desk_id},
            content=content,
            content_type=content_type,
            headers={HEADER_ATLASSIAN_TOKEN: "no-check"},
            is_experimental=True,
        )
        return await self.request(spec, opts, model=TemporaryAttachments)
