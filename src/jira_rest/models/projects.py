from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Project(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    key: str
    name: Optional[str] = None
    project_type_key: Optional[str] = Field(default=None, alias="projectTypeKey")
    simplified: Optional[bool] = None
    style: Optional[str] = None
    self_url: Optional[str] = Field(default=None, alias="self")


class ProjectPage(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    start_at: int = Field(default=0, alias="startAt")
    max_results: int = Field(default=50, alias="maxResults")
    total: Optional[int] = None
    is_last: bool = Field(default=True, alias="isLast")
    next_page: Optional[str] = Field(default=None, alias="nextPage")
    values: list[Project] = Field(default_factory=list)
