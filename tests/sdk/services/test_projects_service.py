import pytest
from pytest_httpx import HTTPXMock

from jira_rest import ErrorKind, JiraClient
from jira_rest.models import Project, ProjectPage, User


class TestProjectsService:
    @pytest.mark.asyncio
    async def test_list_projects(
        self, httpx_mock: HTTPXMock, client: JiraClient
    ) -> None:
        httpx_mock.add_response(
            status_code=200,
            json={
                "startAt": 0,
                "maxResults": 50,
                "total": 2,
                "isLast": True,
                "values": [
                    {"id": "10000", "key": "ABC", "name": "Alphabet"},
                    {"id": "10001", "key": "XYZ", "name": "Omega"},
                ],
            },
        )

        result = await client.projects.list(keys=["ABC", "XYZ"], order_by="key")

        page = result.unwrap()
        assert isinstance(page, ProjectPage)
        assert [project.key for project in page.values] == ["ABC", "XYZ"]

        sent_request = httpx_mock.get_request()
        assert sent_request is not None
        assert sent_request.url.path == "/rest/api/3/project/search"
        assert sent_request.url.params.get_list("keys") == ["ABC", "XYZ"]
        assert sent_request.url.params["orderBy"] == "key"

    @pytest.mark.asyncio
    async def test_retrieve_project(
        self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/project/ABC?properties=owner%2Cteam",
            status_code=200,
            json={"id": "10000", "key": "ABC", "projectTypeKey": "software"},
        )

        result = await client.projects.retrieve("ABC", properties=["owner", "team"])

        project = result.unwrap()
        assert isinstance(project, Project)
        assert project.project_type_key == "software"

    @pytest.mark.asyncio
    async def test_delete_project_forbidden(
        self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/project/ABC?enableUndo=true",
            method="DELETE",
            status_code=403,
            json={"errorMessages": ["You do not have permission to delete projects."]},
        )

        result = await client.projects.delete("ABC", enable_undo=True)

        assert result.ok is False
        assert result.status == 403
        assert result.error.kind == ErrorKind.REMOTE_REJECTED


class TestMyselfService:
    @pytest.mark.asyncio
    async def test_retrieve_current_user(
        self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
    ) -> None:
        httpx_mock.add_response(
            url=f"{base_url}/rest/api/3/myself",
            status_code=200,
            json={
                "accountId": "5b10a2844c20165700ede21g",
                "displayName": "Mia Krystof",
                "active": True,
            },
        )

        result = await client.myself.retrieve()

        user = result.unwrap()
        assert isinstance(user, User)
        assert user.account_id == "5b10a2844c20165700ede21g"
        assert user.display_name == "Mia Krystof"

    @pytest.mark.asyncio
    async def test_unauthorized(
        self, httpx_mock: HTTPXMock, client: JiraClient
    ) -> None:
        httpx_mock.add_response(
            status_code=401,
            text="Client must be authenticated to access this resource.",
            headers={"Content-Type": "text/html"},
        )

        result = await client.myself.retrieve()

        assert result.ok is False
        assert result.status == 401
        assert result.error.message == "Client must be authenticated to access this resource."
