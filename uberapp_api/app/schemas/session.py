"""Pydantic models for login sessions."""

from pydantic import BaseModel, ConfigDict, Field

from ._base import PayloadModel


class SessionCreate(PayloadModel):
    """Login request: the account's email address and plaintext password."""

    email_address: str = Field(..., examples=["hectorguo@live.com"])
    password: str = Field(..., examples=["123456"])


class SessionRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    token: str
    user_id: str = Field(..., alias="userID")
    account_type: str = Field(..., alias="accountType")
