"""Models for Jira issues, issue types and transitions."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class IssueType(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    subtask: Optional[bool] = None
    hierarchy_level: Optional[int] = Field(default=None, alias="hierarchyLevel")
    icon_url: Optional[str] = Field(default=None, alias="iconUrl")
    self_url: Optional[str] = Field(default=None, alias="self")


class Issue(BaseModel):
    """Model representing a Jira issue.

    ``fields`` is kept as a plain mapping since its shape depends on the
    project's field configuration.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    key: Optional[str] = None
    self_url: Optional[str] = Field(default=None, alias="self")
    fields: dict[str, Any] = Field(default_factory=dict)


class CreatedIssue(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    key: str
    self_url: Optional[str] = Field(default=None, alias="self")


class Transition(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    name: Optional[str] = None
    to: Optional[dict[str, Any]] = None
    has_screen: Optional[bool] = Field(default=None, alias="hasScreen")


class SearchResults(BaseModel):
    """A page of results from the enhanced JQL search."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    issues: list[Issue] = Field(default_factory=list)
    next_page_token: Optional[str] = Field(default=None, alias="nextPageToken")
    is_last: Optional[bool] = Field(default=None, alias="isLast")


class IssueTransitions(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    expand: Optional[str] = None
    transitions: list[Transition] = Field(default_factory=list)
