from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    account_id: str = Field(alias="accountId")
    account_type: Optional[str] = Field(default=None, alias="accountType")
    active: Optional[bool] = None
    display_name: Optional[str] = Field(default=None, alias="displayName")
    email_address: Optional[str] = Field(default=None, alias="emailAddress")
    time_zone: Optional[str] = Field(default=None, alias="timeZone")
    locale: Optional[str] = None
