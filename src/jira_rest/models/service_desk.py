"""Models for Jira Service Management service desks."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ServiceDesk(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    project_id: Optional[str] = Field(default=None, alias="projectId")
    project_key: Optional[str] = Field(default=None, alias="projectKey")
    project_name: Optional[str] = Field(default=None, alias="projectName")


class Queue(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    name: Optional[str] = None
    jql: Optional[str] = None
    issue_count: Optional[int] = Field(default=None, alias="issueCount")


class TemporaryAttachment(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    temporary_attachment_id: str = Field(alias="temporaryAttachmentId")
    file_name: Optional[str] = Field(default=None, alias="fileName")


class TemporaryAttachments(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    temporary_attachments: list[TemporaryAttachment] = Field(
        default_factory=list, alias="temporaryAttachments"
    )
