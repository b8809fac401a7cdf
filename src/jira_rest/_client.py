from logging import getLogger
from typing import Any, Optional, Union

from ._config import DefaultConfig, HostedConfig, validate_config
from ._dispatcher import Dispatcher, RequestDispatcher
from ._retry import RetryingDispatcher
from ._services import (
    BoardsService,
    IssueAttachmentsService,
    IssueSearchService,
    IssueTypesService,
    IssuesService,
    MyselfService,
    ProjectsService,
    ServiceDeskService,
)
from ._transports._factory import create_transport
from ._transports._protocol import Transport
from ._utils._logs import setup_logging
from ._utils.constants import LOGGER_NAME


class JiraClient:
    """Entry point: wires a config to a transport, a dispatcher and the services.

    Examples:
        ```python
        from jira_rest import DefaultConfig, JiraClient

        config = DefaultConfig(
            base_url="https://your-domain.atlassian.net",
            email="me@example.com",
            api_token="...",
        )
        async with JiraClient(config) as jira:
            result = await jira.boards.retrieve(84)
        ```
    """

    def __init__(
        self,
        config: Union[DefaultConfig, HostedConfig, dict[str, Any]],
        *,
        transport: Optional[Transport] = None,
        max_retries: int = 0,
        debug: bool = False,
    ) -> None:
        if debug:
            setup_logging(debug)
        self._logger = getLogger(LOGGER_NAME)

        self._config = validate_config(config)
        self._logger.debug(f"CONFIG: {self._config!r}")

        self._transport = transport or create_transport(self._config)
        self._dispatcher: Dispatcher = RequestDispatcher(self._transport)
        if max_retries > 0:
            self._dispatcher = RetryingDispatcher(
                self._dispatcher, max_attempts=max_retries + 1
            )

        self.boards = BoardsService(self._dispatcher)
        self.issues = IssuesService(self._dispatcher)
        self.issue_types = IssueTypesService(self._dispatcher)
        self.issue_search = IssueSearchService(self._dispatcher)
        self.issue_attachments = IssueAttachmentsService(self._dispatcher)
        self.projects = ProjectsService(self._dispatcher)
        self.myself = MyselfService(self._dispatcher)
        self.service_desk = ServiceDeskService(self._dispatcher)

    @classmethod
    def from_env(cls, **kwargs: Any) -> "JiraClient":
        """Create a direct-mode client from ``JIRA_*`` environment variables."""
        return cls(DefaultConfig.from_env(), **kwargs)

    @property
    def config(self) -> Union[DefaultConfig, HostedConfig]:
        return self._config

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "JiraClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
