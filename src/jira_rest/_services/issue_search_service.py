import json
from typing import Any, Dict, List, Optional

from .._utils import Endpoint, RequestOptions, RequestSpec
from ..models import SearchResults
from ..models.result import JiraResult
from ._base_service import BaseService, compact


class IssueSearchService(BaseService):
    """Service for searching issues with JQL."""

    async def search_jql(
        self,
        jql: str,
        *,
        next_page_token: Optional[str] = None,
        max_results: Optional[int] = None,
        fields: Optional[List[str]] = None,
        expand: Optional[str] = None,
        properties: Optional[List[str]] = None,
        fields_by_keys: Optional[bool] = None,
        fail_fast: Optional[bool] = None,
        reconcile_issues: Optional[List[int]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[SearchResults]:
        """Search for issues using JQL, paginated by ``next_page_token``.

        ``fields``, ``properties`` and ``reconcile_issues`` are sent as
        repeated query parameters in the order given.

        Examples:
            ```python
            result = await jira.issue_search.search_jql(
                "project = ABC ORDER BY created DESC", fields=["summary", "status"]
            )
            for issue in result.unwrap().issues:
                print(issue.key)
            ```
        """
        spec = RequestSpec(
            method="GET",
            endpoint=Endpoint("/rest/api/3/search/jql"),
            params={
                "jql": jql,
                "nextPageToken": next_page_token,
                "maxResults": max_results,
                "fields": fields,
                "expand": expand,
                "properties": properties,
                "fieldsByKeys": fields_by_keys,
                "failFast": fail_fast,
                "reconcileIssues": reconcile_issues,
            },
        )
        return await self.request(spec, opts, model=SearchResults)

    async def search_jql_post(
        self,
        jql: str,
        *,
        next_page_token: Optional[str] = None,
        max_results: Optional[int] = None,
        fields: Optional[List[str]] = None,
        expand: Optional[str] = None,
        properties: Optional[List[str]] = None,
        opts: Optional[RequestOptions] = None,
    ) -> JiraResult[SearchResults]:
        """Same as :meth:`search_jql`, sending the query in the request body."""
        body = compact(
            {
                "jql": jql,
                "nextPageToken": next_page_token,
                "maxResults": max_results,
                "fields": fields,
                "expand": expand,
                "properties": properties,
            }
        )
        spec = RequestSpec(
            method="POST",
            endpoint=Endpoint("/rest/api/3/search/jql"),
            content=json.dumps(body),
        )
        return await self.request(spec, opts, model=SearchResults)

    async def approximate_count(
        self, jql: str, *, opts: Optional[RequestOptions] = None
    ) -> JiraResult[Dict[str, Any]]:
        spec = RequestSpec(
            method="POST",
            endpoint=Endpoint("/rest/api/3/search/approximate-count"),
            content=json.dumps({"jql": jql}),
        )
        return await self.request(spec, opts)
