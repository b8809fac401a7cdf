from ._base_service import BaseService
from .boards_service import BoardsService
from .issue_attachments_service import IssueAttachmentsService
from .issue_search_service import IssueSearchService
from .issue_types_service import IssueTypesService
from .issues_service import IssuesService
from .myself_service import MyselfService
from .projects_service import ProjectsService
from .service_desk_service import ServiceDeskService

__all__ = [
    "BaseService",
    "BoardsService",
    "IssueAttachmentsService",
    "IssueSearchService",
    "IssueTypesService",
    "IssuesService",
    "MyselfService",
    "ProjectsService",
    "ServiceDeskService",
]
