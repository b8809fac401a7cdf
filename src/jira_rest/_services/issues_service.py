import json
from typing import Any, Dict, List, Optional

from .._utils import Endpoint, RequestOptions, RequestSpec
from ..models import CreatedIssue, Issue, IssueTransitions
from ..models.result import JiraResult
from ._base_service import BaseService, compact


class IssuesService(BaseService):
    """Service for creating, reading, editing and transitioning issues."""

    async def create(
        self,
        fields: Dict[str, Any],
        *,
        update: Optional[Dict[str, Any]] = None,
        update_history: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[CreatedIssue]:
        """Create an issue or a subtask.

        Args:
            fields: Field values keyed by field ID, for example
                ``{"project": {"key": "ABC"}, "summary": "...", "issuetype": {"name": "Bug"}}``.
            update: Field update operations.
            update_history: Add the project to the user's recently viewed list.
            opts: Per-call request options.
        """
        spec = RequestSpec(
            method="POST",
            endpoint=Endpoint("/rest/api/3/issue"),
            params={"updateHistory": update_history},
            content=json.dumps(compact({"fields": fields, "update": update})),
        )
        return await self.request(spec, opts, model=CreatedIssue)

    async def retrieve(
        self,
        issue_id_or_key: str,
        *,
        fields: Optional[List[str]] = None,
        expand: Optional[List[str]] = None,
        properties: Optional[List[str]] = None,
        fields_by_keys: Optional[bool] = None,
        update_history: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[Issue]:
        """Retrieve an issue.

        ``fields``, ``expand`` and ``properties`` are sent comma-separated, for
        example ``fields=summary,-comment``.
        """
        spec = self._retrieve_spec(
            issue_id_or_key,
            fields=fields,
            expand=expand,
            properties=properties,
            fields_by_keys=fields_by_keys,
            update_history=update_history,
        )
        return await self.request(spec, opts, model=Issue)

    async def edit(
        self,
        issue_id_or_key: str,
        *,
        fields: Optional[Dict[str, Any]] = None,
        update: Optional[Dict[str, Any]] = None,
        notify_users: Optional[bool] = None,
        override_screen_security: Optional[bool] = None,
        override_editable_flag: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        spec = RequestSpec(
            method="PUT",
            endpoint=Endpoint("/rest/api/3/issue/{issueIdOrKey}"),
            path_params={"issueIdOrKey": issue_id_or_key},
            params={
                "notifyUsers": notify_users,
                "overrideScreenSecurity": override_screen_security,
                "overrideEditableFlag": override_editable_flag,
            },
            content=json.dumps(compact({"fields": fields, "update": update})),
            is_response_available=False,
        )
        return await self.request(spec, opts)

    async def delete(
        self,
        issue_id_or_key: str,
        *,
        delete_subtasks: Optional[bool] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        spec = RequestSpec(
            method="DELETE",
            endpoint=Endpoint("/rest/api/3/issue/{issueIdOrKey}"),
            path_params={"issueIdOrKey": issue_id_or_key},
            params={"deleteSubtasks": delete_subtasks},
            is_response_available=False,
        )
        return await self.request(spec, opts)

    async def get_transitions(
        self,
        issue_id_or_key: str,
        *,
        transition_id: Optional[str] = None,
        expand: Optional[str] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[IssueTransitions]:
        """List the transitions available to the user for an issue."""
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/api/3/issue/{issueIdOrKey}/transitions"),
            path_params={"issueIdOrKey": issue_id_or_key},
            params={"transitionId": transition_id, "expand": expand},
        )
        return await self.request(spec, opts, model=IssueTransitions)

    async def transition(
        self,
        issue_id_or_key: str,
        transition_id: str,
        *,
        fields: Optional[Dict[str, Any]] = None,
        update: Optional[Dict[str, Any]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[None]:
        """Perform a workflow transition on an issue."""
        body = compact(
            {"transition": {"id": transition_id}, "fields": fields, "update": update}
        )
        spec = RequestSpec(
            method="POST",
            endpoint=Endpoint("/rest/api/3/issue/{issueIdOrKey}/transitions"),
            path_params={"issueIdOrKey": issue_id_or_key},
            content=json.dumps(body),
            is_response_available=False,
        )
        return await self.request(spec, opts)

    def _retrieve_spec(
        self,
        issue_id_or_key: str,
        *,
        fields: Optional[List[str]],
        expand: Optional[List[str]],
        properties: Optional[List[str]],
        fields_by_keys: Optional[bool],
        update_history: Optional[bool],
    ) -> RequestSpec:
        return RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/api/3/issue/{issueIdOrKey}"),
            path_params={"issueIdOrKey": issue_id_or_key},
            params={
                "fields": fields,
                "expand": expand,
                "properties": properties,
                "fieldsByKeys": fields_by_keys,
                "updateHistory": update_history,
            },
            comma_separated=frozenset({"fields", "expand", "properties"}),
        )
