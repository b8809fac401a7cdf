"""Models for Jira Software boards and sprints."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BoardLocation(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    project_id: Optional[int] = Field(default=None, alias="projectId")
    project_key: Optional[str] = Field(default=None, alias="projectKey")
    display_name: Optional[str] = Field(default=None, alias="displayName")
    name: Optional[str] = None


class Board(BaseModel):
    """Model representing an agile board."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: int
    name: Optional[str] = None
    type: Optional[str] = None
    self_url: Optional[str] = Field(default=None, alias="self")
    is_private: Optional[bool] = Field(default=None, alias="isPrivate")
    favourite: Optional[bool] = None
    location: Optional[BoardLocation] = None


class Sprint(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: int
    name: Optional[str] = None
    state: Optional[str] = None
    goal: Optional[str] = None
    start_date: Optional[str] = Field(default=None, alias="startDate")
    end_date: Optional[str] = Field(default=None, alias="endDate")
    origin_board_id: Optional[int] = Field(default=None, alias="originBoardId")


class BoardPage(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    start_at: int = Field(default=0, alias="startAt")
    max_results: int = Field(default=50, alias="maxResults")
    total: Optional[int] = None
    is_last: bool = Field(default=True, alias="isLast")
    values: list[Board] = Field(default_factory=list)


class SprintPage(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    start_at: int = Field(default=0, alias="startAt")
    max_results: int = Field(default=50, alias="maxResults")
    is_last: bool = Field(default=True, alias="isLast")
    values: list[Sprint] = Field(default_factory=list)
