from typing import List, Optional

from .._utils import Endpoint, RequestOptions, RequestSpec
from ..models import Project, ProjectPage
from ..models.result import JiraResult
from ._base_service import BaseService


class ProjectsService(BaseService):
    async def list(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        order_by: Optional[str] = None,
        id: Optional[List[int]] = None,
        keys: Optional[List[str]] = None,
        query: Optional[str] = None,
        type_key: Optional[str] = None,
        category_id: Optional[int] = None,
        action: Optional[str] = None,
        expand: Optional[str] = None,
        status: Optional[List[str]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[ProjectPage]:
        """Return a page of projects visible to the user.

        ``id``, ``keys`` and ``status`` are sent as repeated query parameters.
        """
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/api/3/project/search"),
            params={
                "startAt": start_at,
                "maxResults": max_results,
                "orderBy": order_by,
                "id": id,
                "keys": keys,
                "query": query,
                "typeKey": type_key,
                "categoryId": category_id,
                "action": action,
                "expand": expand,
                "status": status,
            },
        )
        return await self.request(spec, opts, model=ProjectPage)

    async def retrieve(
        self,
        project_id_or_key: str,
        *,
        expand: Optional[str] = None,
        properties: Optional[List[str]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Project]:
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/api/3/project/{projectIdOrKey}"),
            path_params={"projectIdOrKey": project_id_or_key},
            params={"expand": expand, "properties": properties},
            comma_separated=frozenset({"properties"}),
        )
        return await self.request(spec, opts, model=Project)

    async def delete(
        self,
        project_id_or_key: str,
        *,
        enable_undo: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Delete a project. With ``enable_undo`` it goes to the recycle bin."""
        spec = RequestSpec(
            method="DELETE",
            endpoint=Endpoint("/rest/api/3/project/{projectIdOrKey}"),
            path_params={"projectIdOrKey": project_id_or_key},
            params={"enableUndo": enable_undo},
            is_response_available=False,
        )
        return await self.request(spec, opts)
