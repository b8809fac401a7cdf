from .attachments import Attachment, AttachmentSettings
from .boards import Board, BoardLocation, BoardPage, Sprint, SprintPage
from .errors import (
    BaseUrlMissingError,
    ConfigurationError,
    CredentialsMissingError,
    ErrorKind,
    JiraError,
    JiraResultError,
    MalformedRequestError,
    TransportError,
)
from .issues import (
    CreatedIssue,
    Issue,
    IssueTransitions,
    IssueType,
    SearchResults,
    Transition,
)
from .projects import Project, ProjectPage
from .result import ErrorDetail, JiraFailure, JiraResult, JiraSuccess
from .service_desk import ServiceDesk, Queue, TemporaryAttachment, TemporaryAttachments
from .users import User

__all__ = [
    "Attachment",
    "AttachmentSettings",
    "BaseUrlMissingError",
    "Board",
    "BoardLocation",
    "BoardPage",
    "ConfigurationError",
    "CreatedIssue",
    "CredentialsMissingError",
    "ErrorDetail",
    "ErrorKind",
    "Issue",
    "IssueTransitions",
    "IssueType",
    "JiraError",
    "JiraFailure",
    "JiraResult",
    "JiraResultError",
    "JiraSuccess",
    "MalformedRequestError",
    "Project",
    "ProjectPage",
    "Queue",
    "SearchResults",
    "ServiceDesk",
    "Sprint",
    "SprintPage",
    "TemporaryAttachment",
    "TemporaryAttachments",
    "TransportError",
    "User",
]
