import json

import pytest
from pytest_httpx import HTTPXMock

from jira_rest import JiraClient
from jira_rest.models import IssueType


class TestIssueTypesService:
    @pytest.mark.asyncio
    async def test_list_issue_types(
        self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuetype",
            status_code=200,
            json=[
                {"id": "3", "name": "Task", "subtask": False, "hierarchyLevel": 0},
                {"id": "5", "name": "Sub-task", "subtask": True, "hierarchyLevel": -1},
            ],
        )

        result = await client.issue_types.list()

        issue_types = result.unwrap()
        assert all(isinstance(issue_type, IssueType) for issue_type in issue_types)
        assert [issue_type.hierarchy_level for issue_type in issue_types] == [0, -1]

    @pytest.mark.asyncio
    async def test_list_for_project(
        self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuetype/project?projectId=10000",
            status_code=200,
            json=[{"id": "3", "name": "Task"}],
        )

        result = await client.issue_types.list_for_project(10000)

        assert result.unwrap()[0].name == "Task"

    @pytest.mark.asyncio
    async def test_create_and_update(
        self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuetype",
            method="POST",
            status_code=201,
            json={"id": "10010", "name": "Incident"},
        )
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuetype/10010",
            method="PUT",
            status_code=200,
            json={"id": "10010", "name": "Major incident"},
        )

        created = await client.issue_types.create("Incident", type="standard")
        updated = await client.issue_types.update("10010", name="Major incident")

        assert created.unwrap().id == "10010"
        assert updated.unwrap().name == "Major incident"

        create_request, update_request = httpx_mock.get_requests()
        assert json.loads(create_request.content) == {
            "name": "Incident",
            "type": "standard",
        }
        assert json.loads(update_request.content) == {"name": "Major incident"}

    @pytest.mark.asyncio
    async def test_retrieve_and_delete(
        self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuetype/3",
            method="GET",
            status_code=200,
            json={"id": "3", "name": "Task"},
        )
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/issuetype/10010?alternativeIssueTypeId=3",
            method="DELETE",
            status_code=204,
        )

        retrieved = await client.issue_types.retrieve("3")
        deleted = await client.issue_types.delete("10010", alternative_issue_type_id="3")

        assert retrieved.unwrap().name == "Task"
        assert deleted.ok is True
