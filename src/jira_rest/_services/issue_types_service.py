import json
from typing import List, Literal, Optional

from .._utils import Endpoint, RequestOptions, RequestSpec
from ..models import IssueType
from ..models.result import JiraResult
from ._base_service import BaseService, compact


class IssueTypesService(BaseService):
    """Service for issue types (Bug, Story, Task, subtasks and custom types)."""

    async def list(
        self, *, opts: Optional[RequestOptions] = None
    ) -> JiraResult[List[IssueType]]:
        """List every issue type visible to the user."""
        spec = RequestSpec(method="GET", endpoint=Endpoint("/rest/api/3/issuetype"))
        return await self.request(spec, opts, model=List[IssueType])

    async def list_for_project(
        self,
        project_id: int,
        *,
        level: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[List[IssueType]]:
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/api/3/issuetype/project"),
            params={"projectId": project_id, "level": level},
        )
        return await self.request(spec, opts, model=List[IssueType])

    async def retrieve(
        self, id: str, *, opts: Optional[RequestOptions] = None
    ) -> JiraResult[IssueType]:
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/api/3/issuetype/{id}"),
            path_params={"id": id},
        )
        return await self.request(spec, opts, model=IssueType)

    async def create(
        self,
        name: str,
        *,
        description: Optional[str] = None,
        hierarchy_level: Optional[int] = None,
        type: Optional[Literal["subtask", "standard"]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[IssueType]:
        body = compact(
            {
                "name": name,
                "description": description,
                "hierarchyLevel": hierarchy_level,
                "type": type,
            }
        )
        spec = RequestSpec(
            method="POST",
            endpoint=Endpoint("/rest/api/3/issuetype"),
            content=json.dumps(body),
        )
        return await self.request(spec, opts, model=IssueType)

    async def update(
        self,
        id: str,
        *,
        name: Optional[str] = None,
        description: Optional[str] = None,
        avatar_id: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[IssueType]:
        body = compact(
            {"name": name, "description": description, "avatarId": avatar_id}
        )
        spec = RequestSpec(
            method="PUT",
            endpoint=Endpoint("/rest/api/3/issuetype/{id}"),
            path_params={"id": id},
            content=json.dumps(body),
        )
        return await self.request(spec, opts, model=IssueType)

    async def delete(
        self,
        id: str,
        *,
        alternative_issue_type_id: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Delete an issue type, moving its issues to an alternative type."""
        spec = RequestSpec(
            method="DELETE",
            endpoint=Endpoint("/rest/api/3/issuetype/{id}"),
            path_params={"id": id},
            params={"alternativeIssueTypeId": alternative_issue_type_id},
            is_response_available=False,
        )
        return await self.request(spec, opts)
