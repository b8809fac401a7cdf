from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Attachment(BaseModel):
    """Model representing an issue attachment."""

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: str
    filename: Optional[str] = None
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
    size: Optional[int] = None
    created: Optional[str] = None
    content: Optional[str] = None
    thumbnail: Optional[str] = None
    self_url: Optional[str] = Field(default=None, alias="self")


class AttachmentSettings(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    enabled: bool
    upload_limit: Optional[int] = Field(default=None, alias="uploadLimit")
