import json
from typing import Any, List, Literal, Optional, Union

from .._utils import Endpoint, RequestOptions, RequestSpec
from ..models import Board, BoardPage, SprintPage
from ..models.result import JiraResult
from ._base_service import BaseService, compact

BoardType = Literal["scrum", "kanban", "simple"]
SprintState = Literal["future", "active", "closed"]


class BoardsService(BaseService):
    """Service for Jira Software boards.

    Boards display issues from one or more projects; scrum boards also own
    sprints and a backlog.
    """

    async def create(
        self,
        *,
        name: str,
        type: BoardType,
        filter_id: int,
        location: Optional[dict[str, Any]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Board]:
        """Create a board for an existing filter.

        Args:
            name: The name of the board.
            type: ``scrum``, ``kanban`` or ``simple``.
            filter_id: ID of the filter the board is based on.
            location: Container the board lives in, for example
                ``{"type": "project", "projectKeyOrId": "ABC"}``.
            opts: Per-call request options.

        Returns:
            JiraResult[Board]: The created board.
        """
        spec = self._create_spec(name, type, filter_id, location)
        return await self.request(spec, opts, model=Board)

    async def retrieve(
        self, board_id: int, *, opts: Optional[RequestOptions] = None
    ) -> JiraResult[Board]:
        """Retrieve a board by its ID.

        Examples:
            ```python
            async with JiraClient(config) as jira:
                result = await jira.boards.retrieve(84)
                if result.ok:
                    print(result.value.name)
            ```
        """
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/agile/1.0/board/{boardId}"),
            path_params={"boardId": board_id},
        )
        return await self.request(spec, opts, model=Board)

    async def delete(
        self, board_id: int, *, opts: Optional[RequestOptions] = None
    ) -> JiraResult[None]:
        spec = RequestSpec(
            method="DELETE",
            endpoint=Endpoint("/rest/agile/1.0/board/{boardId}"),
            path_params={"boardId": board_id},
            is_response_available=False,
        )
        return await self.request(spec, opts)

    async def list(
        self,
        *,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        type: Optional[Union[BoardType, List[BoardType]]] = None,
        name: Optional[str] = None,
        project_key_or_id: Optional[str] = None,
        include_private: Optional[bool] = None,
        order_by: Optional[str] = None,
        expand: Optional[str] = None,
        filter_id: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[BoardPage]:
        """List boards visible to the user, one page at a time."""
        spec = self._list_spec(
            start_at=start_at,
            max_results=max_results,
            type=type,
            name=name,
            project_key_or_id=project_key_or_id,
            include_private=include_private,
            order_by=order_by,
            expand=expand,
            filter_id=filter_id,
        )
        return await self.request(spec, opts, model=BoardPage)

    async def list_sprints(
        self,
        board_id: int,
        *,
        state: Optional[List[SprintState]] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[SprintPage]:
        """List the sprints of a scrum board.

        Args:
            board_id: ID of the board.
            state: Sprint states to include. Sent comma-separated.
        """
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/agile/1.0/board/{boardId}/sprint"),
            path_params={"boardId": board_id},
            params={"startAt": start_at, "maxResults": max_results, "state": state},
            comma_separated=frozenset({"state"}),
        )
        return await self.request(spec, opts, model=SprintPage)

    async def list_backlog_issues(
        self,
        board_id: int,
        *,
        jql: Optional[str] = None,
        fields: Optional[List[str]] = None,
        expand: Optional[str] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[dict[str, Any]]:
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/agile/1.0/board/{boardId}/backlog"),
            path_params={"boardId": board_id},
            params={
                "startAt": start_at,
                "maxResults": max_results,
                "jql": jql,
                "fields": fields,
                "expand": expand,
            },
        )
        return await self.request(spec, opts)

    async def get_property(
        self,
        board_id: int,
        property_key: str,
        *,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[dict[str, Any]]:
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint(
                "/rest/agile/1.0/board/{boardId}/properties/{propertyKey}"
            ),
            path_params={"boardId": board_id, "propertyKey": property_key},
        )
        return await self.request(spec, opts)

    async def set_property(
        self,
        board_id: int,
        property_key: str,
        value: Any,
        *,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        spec = RequestSpec(
            method="PUT",
            endpoint=Endpoint(
                "/rest/agile/1.0/board/{boardId}/properties/{propertyKey}"
            ),
            path_params={"boardId": board_id, "propertyKey": property_key},
            content=json.dumps(value),
            is_response_available=False,
        )
        return await self.request(spec, opts)

    async def delete_property(
        self,
        board_id: int,
        property_key: str,
        *,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        spec = RequestSpec(
            method="DELETE",
            endpoint=Endpoint(
                "/rest/agile/1.0/board/{boardId}/properties/{propertyKey}"
            ),
            path_params={"boardId": board_id, "propertyKey": property_key},
            is_response_available=False,
        )
        return await self.request(spec, opts)

    def _create_spec(
        self,
        name: str,
        type: str,
        filter_id: int,
        location: Optional[dict[str, Any]],
    ) -> RequestSpec:
        body = compact(
            {"name": name, "type": type, "filterId": filter_id, "location": location}
        )
        return RequestSpec(
            method="POST",
            endpoint=Endpoint("/rest/agile/1.0/board"),
            content=json.dumps(body),
        )

    def _list_spec(
        self,
        *,
        start_at: Optional[int],
        max_results: Optional[int],
        type: Optional[Union[str, List[str]]],
        name: Optional[str],
        project_key_or_id: Optional[str],
        include_private: Optional[bool],
        order_by: Optional[str],
        expand: Optional[str],
        filter_id: Optional[int],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/agile/1.0/board"),
            params={
                "startAt": start_at,
                "maxResults": max_results,
                "type": type,
                "name": name,
                "projectKeyOrId": project_key_or_id,
                "includePrivate": include_private,
                "orderBy": order_by,
                "expand": expand,
                "filterId": filter_id,
            },
            comma_separated=frozenset({"type"}),
        )
