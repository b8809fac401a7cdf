import json

import pytest
from pytest_httpx import HTTPXMock

from jira_rest import ErrorKind, JiraClient
from jira_rest.models import Board, BoardPage, SprintPage


class TestBoardsService:
    class TestCreate:
        @pytest.mark.asyncio
        async def test_create_board(
            self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/rest/agile/1.0/board",
                method="POST",
                status_code=201,
                json={"id": 84, "name": "scrum board", "type": "scrum"},
            )

            result = await client.boards.create(
                name="scrum board",
                type="scrum",
                filter_id=1001,
                location={"type": "project", "projectKeyOrId": "ABC"},
            )

            assert result.ok is True
            assert isinstance(result.value, Board)
            assert result.value.id == 84
            assert result.status == 201

            sent_request = httpx_mock.get_request()
            if sent_request is None:
                raise Exception("No request was sent")

            assert sent_request.headers["Content-Type"] == "application/json"
            assert json.loads(sent_request.content) == {
                "name": "scrum board",
                "type": "scrum",
                "filterId": 1001,
                "location": {"type": "project", "projectKeyOrId": "ABC"},
            }

        @pytest.mark.asyncio
        async def test_unset_location_is_left_out(
            self, httpx_mock: HTTPXMock, client: JiraClient
        ) -> None:
            httpx_mock.add_response(status_code=201, json={"id": 1})

            await client.boards.create(name="b", type="kanban", filter_id=7)

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert "location" not in json.loads(sent_request.content)

    class TestRetrieve:
        @pytest.mark.asyncio
        async def test_retrieve_board(
            self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/rest/agile/1.0/board/84",
                status_code=200,
                json={
                    "id": 84,
                    "name": "scrum board",
                    "self": f"{base_url}/rest/agile/1.0/board/84",
                    "location": {"projectId": 10040, "projectKey": "ABC"},
                },
            )

            result = await client.boards.retrieve(84)

            board = result.unwrap()
            assert board.self_url == f"{base_url}/rest/agile/1.0/board/84"
            assert board.location is not None
            assert board.location.project_key == "ABC"

        @pytest.mark.asyncio
        async def test_retrieve_missing_board(
            self, httpx_mock: HTTPXMock, client: JiraClient
        ) -> None:
            httpx_mock.add_response(
                status_code=404,
                json={"errorMessages": ["Board does not exist."], "errors": {}},
            )

            result = await client.boards.retrieve(999)

            assert result.ok is False
            assert result.status == 404
            assert result.error.kind == ErrorKind.REMOTE_REJECTED
            assert result.error.message == "Board does not exist."

        @pytest.mark.asyncio
        async def test_unexpected_body_is_a_decode_failure(
            self, httpx_mock: HTTPXMock, client: JiraClient
        ) -> None:
            httpx_mock.add_response(status_code=200, json={"name": "no id"})

            result = await client.boards.retrieve(84)

            assert result.ok is False
            assert result.status == 200
            assert result.error.kind == ErrorKind.DECODE_FAILURE
            assert result.error.payload == {"name": "no id"}

    class TestList:
        @pytest.mark.asyncio
        async def test_list_boards(
            self, httpx_mock: HTTPXMock, client: JiraClient
        ) -> None:
            httpx_mock.add_response(
                status_code=200,
                json={
                    "startAt": 0,
                    "maxResults": 2,
                    "total": 3,
                    "isLast": False,
                    "values": [{"id": 1}, {"id": 2}],
                },
            )

            result = await client.boards.list(
                max_results=2, type=["scrum", "kanban"], include_private=True
            )

            page = result.unwrap()
            assert isinstance(page, BoardPage)
            assert [board.id for board in page.values] == [1, 2]
            assert page.is_last is False

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.url.path == "/rest/agile/1.0/board"
            assert dict(sent_request.url.params) == {
                "maxResults": "2",
                "type": "scrum,kanban",
                "includePrivate": "true",
            }

        @pytest.mark.asyncio
        async def test_list_sprints(
            self, httpx_mock: HTTPXMock, client: JiraClient
        ) -> None:
            httpx_mock.add_response(
                status_code=200,
                json={"values": [{"id": 37, "state": "active", "name": "Sprint 1"}]},
            )

            result = await client.boards.list_sprints(84, state=["active", "future"])

            page = result.unwrap()
            assert isinstance(page, SprintPage)
            assert page.values[0].state == "active"

            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.url.path == "/rest/agile/1.0/board/84/sprint"
            assert sent_request.url.params.get_list("state") == ["active,future"]

        @pytest.mark.asyncio
        async def test_list_backlog_issues(
            self, httpx_mock: HTTPXMock, client: JiraClient
        ) -> None:
            httpx_mock.add_response(status_code=200, json={"issues": []})

            result = await client.boards.list_backlog_issues(
                84, jql="assignee = currentUser()", fields=["summary", "status"]
            )

            assert result.value == {"issues": []}
            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert sent_request.url.params["jql"] == "assignee = currentUser()"
            assert sent_request.url.params.get_list("fields") == ["summary", "status"]

    class TestDeleteAndProperties:
        @pytest.mark.asyncio
        async def test_delete_board(
            self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/rest/agile/1.0/board/84",
                method="DELETE",
                status_code=204,
            )

            result = await client.boards.delete(84)

            assert result.ok is True
            assert result.value is None
            assert result.status == 204

        @pytest.mark.asyncio
        async def test_set_property(
            self, httpx_mock: HTTPXMock, client: JiraClient, base_url: str
        ) -> None:
            httpx_mock.add_response(
                url=f"{base_url}/rest/agile/1.0/board/84/properties/team%20colour",
                method="PUT",
                status_code=200,
            )

            result = await client.boards.set_property(
                84, "team colour", {"colour": "blue"}
            )

            assert result.ok is True
            sent_request = httpx_mock.get_request()
            assert sent_request is not None
            assert json.loads(sent_request.content) == {"colour": "blue"}

        @pytest.mark.asyncio
        async def test_get_and_delete_property(
            self, httpx_mock: HTTPXMock, client: JiraClient
        ) -> None:
            httpx_mock.add_response(
                method="GET",
                status_code=200,
                json={"key": "colour", "value": {"colour": "blue"}},
            )
            httpx_mock.add_response(method="DELETE", status_code=204)

            fetched = await client.boards.get_property(84, "colour")
            deleted = await client.boards.delete_property(84, "colour")

            assert fetched.value == {"key": "colour", "value": {"colour": "blue"}}
            assert deleted.ok is True
